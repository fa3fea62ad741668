"""ClaudeProvider against a mocked Messages API."""
from __future__ import annotations

import httpx
import pytest

from unichat_providers.base.errors import ConfigurationError, RemoteError, RemoteErrorKind, ValidationError
from unichat_providers.claude import ClaudeProvider
from unichat_providers.config import Configuration

REPLY = {"content": [{"text": "ok"}], "model": "m1", "usage": {"x": 1}, "stop_reason": "end"}


def _provider(client, **kwargs):
    return ClaudeProvider(api_key="sk-ant-test", client=client, **kwargs)


def test_missing_key_fails_construction():
    with pytest.raises(ConfigurationError, match="Claude API key is required"):
        ClaudeProvider()


def test_key_from_configuration_and_env(monkeypatch):
    assert ClaudeProvider(config=Configuration(api_keys={"claude": "cfg"}))._api_key == "cfg"
    monkeypatch.setenv("ANTHROPIC_API_KEY", "env")
    assert ClaudeProvider()._api_key == "env"


def test_chat_decodes_response(mock_http):
    client, recorder = mock_http(json=REPLY)
    result = _provider(client).chat("Hello")
    assert result.to_dict() == {"content": "ok", "model": "m1", "usage": {"x": 1}, "stop_reason": "end"}


def test_chat_request_shape(mock_http):
    client, recorder = mock_http(json=REPLY)
    _provider(client).chat("Hello", top_k=5, temperature=0.2)
    request = recorder.last
    assert str(request.url) == "https://api.anthropic.com/v1/messages"
    assert request.method == "POST"
    assert request.headers["x-api-key"] == "sk-ant-test"
    assert request.headers["anthropic-version"] == "2023-06-01"
    assert request.headers["content-type"] == "application/json"
    assert recorder.last_json() == {
        "model": "claude-3-haiku-20240307",
        "max_tokens": 1000,
        "messages": [{"role": "user", "content": "Hello"}],
        "temperature": 0.2,
        "top_k": 5,
    }


def test_caller_options_override_defaults(mock_http):
    client, recorder = mock_http(json=REPLY)
    _provider(client, model="claude-3-opus-20240229").chat("Hi", max_tokens=10, metadata={"user_id": "u"})
    body = recorder.last_json()
    assert body["model"] == "claude-3-opus-20240229"
    assert body["max_tokens"] == 10
    assert body["metadata"] == {"user_id": "u"}


def test_endpoint_override_from_configuration(mock_http):
    client, recorder = mock_http(json=REPLY)
    cfg = Configuration(api_keys={"claude": "k"}, endpoints={"claude": "https://proxy.local/v1/"})
    ClaudeProvider(config=cfg, client=client).chat("Hi")
    assert str(recorder.last.url) == "https://proxy.local/v1/messages"


@pytest.mark.parametrize(
    "status, kind, message",
    [
        (401, RemoteErrorKind.AUTH_FAILED, "Invalid Claude API key"),
        (429, RemoteErrorKind.RATE_LIMITED, "Rate limit exceeded"),
        (529, RemoteErrorKind.SERVER_FAULT, "Claude server error"),
        (400, RemoteErrorKind.UNEXPECTED, 'HTTP 400: {"error":"bad"}'),
    ],
)
def test_status_mapping(mock_http, status, kind, message):
    client, _ = mock_http(status=status, text='{"error":"bad"}')
    with pytest.raises(RemoteError) as info:
        _provider(client).chat("Hello")
    assert info.value.kind is kind
    assert info.value.message == message
    assert info.value.provider == "claude"


def test_garbage_body_on_success_is_unexpected(mock_http):
    client, _ = mock_http(text="<html>oops</html>")
    with pytest.raises(RemoteError) as info:
        _provider(client).chat("Hello")
    assert info.value.kind is RemoteErrorKind.UNEXPECTED


def test_stream_chat_emits_text_deltas(mock_http):
    body = (
        'event: content_block_delta\n'
        'data: {"type":"content_block_delta","delta":{"text":"Hi"}}\n\n'
        'data: {"type":"content_block_delta","delta":{"text":" there"}}\n\n'
        'data: {"type":"message_stop"}\n\n'
    )
    client, recorder = mock_http(text=body)
    fragments: list[str] = []
    _provider(client).stream_chat("Hello", fragments.append, stream=False)
    assert fragments == ["Hi", " there"]
    assert recorder.last.headers["accept"] == "text/event-stream"
    assert recorder.last_json()["stream"] is True


def test_stream_chat_requires_callback(mock_http):
    client, recorder = mock_http(text="")
    with pytest.raises(ValidationError):
        _provider(client).stream_chat("Hello")
    assert recorder.requests == []


def test_stream_chat_maps_status(mock_http):
    client, _ = mock_http(status=401, text="no")
    with pytest.raises(RemoteError) as info:
        _provider(client).stream_chat("Hello", lambda _t: None)
    assert info.value.kind is RemoteErrorKind.AUTH_FAILED
    assert info.value.body == "no"


def test_models_is_static_and_offline(mock_http):
    client, recorder = mock_http(handler=lambda _r: httpx.Response(500))
    names = _provider(client).models()
    assert names == ["claude-3-opus-20240229", "claude-3-sonnet-20240229", "claude-3-haiku-20240307"]
    assert recorder.requests == []


def test_capabilities():
    assert ClaudeProvider.capabilities.streaming
    assert ClaudeProvider.capabilities.model_listing
