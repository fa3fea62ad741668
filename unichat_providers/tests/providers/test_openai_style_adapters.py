"""Mistral and OpenAI adapters share ``BaseOpenAIStyleProvider``; test both."""
from __future__ import annotations

import pytest

from unichat_providers.base.errors import ConfigurationError, RemoteError, RemoteErrorKind, ValidationError
from unichat_providers.base.openai_style_parts import BaseOpenAIStyleProvider
from unichat_providers.mistral import MistralProvider
from unichat_providers.openai import OpenAIProvider

CASES = [
    (MistralProvider, "Mistral", "https://api.mistral.ai/v1", "mistral-tiny", "MISTRAL_API_KEY"),
    (OpenAIProvider, "OpenAI", "https://api.openai.com/v1", "gpt-3.5-turbo", "OPENAI_API_KEY"),
]

REPLY = {
    "model": "served-model",
    "choices": [{"message": {"role": "assistant", "content": "pong"}, "finish_reason": "stop"}],
    "usage": {"prompt_tokens": 3, "completion_tokens": 1},
}


@pytest.fixture(params=CASES, ids=["mistral", "openai"])
def case(request):
    return request.param


def test_is_openai_style(case):
    cls = case[0]
    assert issubclass(cls, BaseOpenAIStyleProvider)


def test_missing_key_fails_construction(case):
    cls, display, *_ = case
    with pytest.raises(ConfigurationError, match=f"{display} API key is required"):
        cls()


def test_key_from_env(case, monkeypatch):
    cls, _, _, _, env = case
    monkeypatch.setenv(env, "env-key")
    assert cls()._api_key == "env-key"


def test_chat_request_and_decode(case, mock_http):
    cls, _, base_url, default_model, _ = case
    client, recorder = mock_http(json=REPLY)
    result = cls(api_key="k", client=client).chat(
        [{"role": "system", "content": "s"}, {"role": "user", "content": "ping"}], seed=7
    )
    assert result.content == "pong"
    assert result.model == "served-model"
    assert result.usage == {"prompt_tokens": 3, "completion_tokens": 1}
    assert result.extra == {"finish_reason": "stop"}
    request = recorder.last
    assert str(request.url) == f"{base_url}/chat/completions"
    assert request.headers["authorization"] == "Bearer k"
    assert recorder.last_json() == {
        "model": default_model,
        "messages": [{"role": "system", "content": "s"}, {"role": "user", "content": "ping"}],
        "temperature": 0.7,
        "max_tokens": 1000,
        "seed": 7,
    }


def test_chat_tolerates_missing_choices(case, mock_http):
    cls = case[0]
    client, _ = mock_http(json={"model": "m"})
    result = cls(api_key="k", client=client).chat("hi")
    assert result.content is None
    assert result.model == "m"


@pytest.mark.parametrize(
    "status, kind",
    [
        (401, RemoteErrorKind.AUTH_FAILED),
        (429, RemoteErrorKind.RATE_LIMITED),
        (500, RemoteErrorKind.SERVER_FAULT),
        (422, RemoteErrorKind.UNEXPECTED),
    ],
)
def test_status_mapping(case, mock_http, status, kind):
    cls, display, *_ = case
    client, _ = mock_http(status=status, text="err")
    with pytest.raises(RemoteError) as info:
        cls(api_key="k", client=client).chat("hi")
    assert info.value.kind is kind
    assert info.value.status == status
    if kind is RemoteErrorKind.AUTH_FAILED:
        assert info.value.message == f"Invalid {display} API key"
    if kind is RemoteErrorKind.SERVER_FAULT:
        assert info.value.message == f"{display} server error"


def test_stream_chat(case, mock_http):
    cls = case[0]
    body = (
        'data: {"choices":[{"delta":{"content":"po"}}]}\n\n'
        "data: not-json\n\n"
        'data: {"choices":[{"delta":{"content":"ng"}}]}\n\n'
        "data: [DONE]\n\n"
    )
    client, recorder = mock_http(text=body)
    fragments: list[str] = []
    cls(api_key="k", client=client).stream_chat("ping", fragments.append)
    assert fragments == ["po", "ng"]
    assert recorder.last_json()["stream"] is True
    assert recorder.last.headers["accept"] == "text/event-stream"


def test_stream_chat_requires_callback(case, mock_http):
    cls = case[0]
    client, recorder = mock_http(text="")
    with pytest.raises(ValidationError):
        cls(api_key="k", client=client).stream_chat("ping")
    assert recorder.requests == []


def test_models_projects_ids(case, mock_http):
    cls, _, base_url, *_ = case
    client, recorder = mock_http(json={"data": [{"id": "a"}, {"id": "b"}, {"object": "model"}]})
    assert cls(api_key="k", client=client).models() == ["a", "b"]
    assert recorder.last.method == "GET"
    assert str(recorder.last.url) == f"{base_url}/models"


@pytest.mark.parametrize("payload", [{}, {"data": None}, {"data": "x"}, []])
def test_models_malformed_body_is_empty(case, mock_http, payload):
    cls = case[0]
    client, _ = mock_http(json=payload)
    assert cls(api_key="k", client=client).models() == []
