"""Pytest configuration for the unichat_providers test suite.

Every test starts from a fresh process-wide configuration and an environment
without provider credentials or endpoint overrides, so results do not depend
on the developer's shell. Network access is replaced by ``httpx.MockTransport``
through the ``mock_http`` fixture.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List

import httpx
import pytest

from unichat_providers.base.http import close_all_clients
from unichat_providers.config import reset_configuration
from unichat_providers.config.env import BASE_URL_ENV_MAP, ENV_MAP


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop provider env vars and reset global configuration around each test."""
    for name in (*ENV_MAP.values(), *BASE_URL_ENV_MAP.values()):
        monkeypatch.delenv(name, raising=False)
    reset_configuration()
    yield
    reset_configuration()
    close_all_clients()


@dataclass
class RecordingTransport:
    """Collects outgoing requests and answers them through ``handler``."""

    handler: Callable[[httpx.Request], httpx.Response]
    requests: List[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture()
def mock_http() -> Iterator[Callable[..., "tuple[httpx.Client, RecordingTransport]"]]:
    """Return a builder producing ``(client, recorder)`` for a handler or canned reply.

    ``mock_http(json=..., status=200)`` answers every request with a JSON body;
    ``mock_http(text=...)`` with a raw body; ``mock_http(handler=fn)`` delegates.
    """
    clients: List[httpx.Client] = []

    def build(
        *,
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
        status: int = 200,
        json: Any = None,
        text: str | None = None,
    ) -> tuple[httpx.Client, RecordingTransport]:
        if handler is None:

            def handler(_request: httpx.Request) -> httpx.Response:
                if text is not None:
                    return httpx.Response(status, text=text)
                return httpx.Response(status, json=json if json is not None else {})

        recorder = RecordingTransport(handler)
        client = httpx.Client(transport=httpx.MockTransport(recorder))
        clients.append(client)
        return client, recorder

    yield build
    for client in clients:
        client.close()
