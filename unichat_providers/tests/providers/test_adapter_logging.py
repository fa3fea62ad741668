"""Adapters emit lifecycle events through the shared providers logger."""
from __future__ import annotations

import json
import logging

import pytest

from unichat_providers.base.errors import RemoteError
from unichat_providers.base.logging import get_logger
from unichat_providers.ollama import OllamaProvider
from unichat_providers.openai import OpenAIProvider


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.events: list[dict] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.events.append(json.loads(record.getMessage()))


@pytest.fixture()
def events():
    base = get_logger()
    handler = _ListHandler()
    previous = base.level
    base.addHandler(handler)
    base.setLevel(logging.INFO)
    yield handler.events
    base.removeHandler(handler)
    base.setLevel(previous)


def test_chat_start_and_end(events, mock_http):
    client, _ = mock_http(json={"model": "llama2", "response": "hi", "done": True})
    OllamaProvider(client=client).chat("Hello")
    names = [e["event"] for e in events]
    assert names == ["chat.start", "chat.end"]
    assert events[0]["provider"] == "ollama"
    assert events[0]["model"] == "llama2"
    assert events[1]["latency_ms"] >= 0


def test_stream_end_reports_fragment_count(events, mock_http):
    client, _ = mock_http(text='{"response":"a"}\n{"response":"b"}\n')
    OllamaProvider(client=client).stream_chat("Hello", lambda _t: None)
    end = events[-1]
    assert end["event"] == "stream.end"
    assert end["emitted"] == 2
    assert "total_duration_ms" in end


def test_models_list_event(events, mock_http):
    client, _ = mock_http(json={"data": [{"id": "gpt-4o"}]})
    OpenAIProvider(api_key="k", client=client).models()
    assert events[-1]["event"] == "models.list"
    assert events[-1]["count"] == 1


def test_errors_are_raised_not_logged(events, mock_http):
    client, _ = mock_http(status=500, text="boom")
    with pytest.raises(RemoteError):
        OllamaProvider(client=client).chat("Hello")
    assert [e["event"] for e in events] == ["chat.start"]
