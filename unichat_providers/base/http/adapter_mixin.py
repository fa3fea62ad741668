"""Common HTTP plumbing for provider adapters.

Purpose:
    Keep the per-provider ``client.py`` modules focused on payloads and
    decoding by centralizing request issuing, status mapping, JSON decoding
    and lifecycle logging.

Notes:
    Consumers must define ``_base_url`` (str), ``_client`` (``httpx.Client``
    or ``None``), ``_config`` (``Configuration``), ``_status_policy``
    (``StatusPolicy``), ``_logger`` and the ``provider_name`` property. When
    ``_client`` is ``None`` the shared pool from :mod:`.client` is used.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, Iterator, Mapping, Optional

import httpx

from ..errors import StatusPolicy, decode_json_body, raise_for_status
from ..logging import LogContext, log_event
from ..streaming import emit_fragments
from .client import get_httpx_client, request_timeout

if TYPE_CHECKING:
    import logging

    from ...config import Configuration

JSON_HEADERS: Dict[str, str] = {"Content-Type": "application/json"}
SSE_ACCEPT_HEADERS: Dict[str, str] = {"Accept": "text/event-stream"}


class HttpAdapterMixin:
    """Mixin issuing JSON requests against ``_base_url`` with mapped errors."""

    _base_url: str
    _client: Optional[httpx.Client]
    _config: "Configuration"
    _status_policy: StatusPolicy
    _logger: "logging.Logger"

    @property
    def provider_name(self) -> str:  # pragma: no cover - overridden
        raise NotImplementedError

    @property
    def base_url(self) -> str:
        """Resolved base URL this adapter talks to."""
        return self._base_url

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _http(self, purpose: str) -> httpx.Client:
        if self._client is not None:
            return self._client
        return get_httpx_client(self._base_url, purpose=f"{self.provider_name}.{purpose}")

    def _timeout(self) -> httpx.Timeout:
        return request_timeout(self._config.timeout)

    def _ctx(self, model: Optional[str], path: str) -> LogContext:
        return LogContext(provider=self.provider_name, model=model, endpoint=path)

    def _post_json(self, path: str, payload: Mapping[str, Any], headers: Mapping[str, str]) -> Any:
        """POST ``payload`` and return the decoded 2xx body."""
        response = self._http("chat").post(
            self._url(path), json=dict(payload), headers=dict(headers), timeout=self._timeout()
        )
        raise_for_status(response, self._status_policy)
        return decode_json_body(response, self.provider_name)

    def _get_json(self, path: str, headers: Mapping[str, str]) -> Any:
        """GET ``path`` and return the decoded 2xx body."""
        response = self._http("models").get(self._url(path), headers=dict(headers), timeout=self._timeout())
        raise_for_status(response, self._status_policy)
        return decode_json_body(response, self.provider_name)

    @contextmanager
    def _open_stream(
        self, path: str, payload: Mapping[str, Any], headers: Mapping[str, str]
    ) -> Iterator[httpx.Response]:
        """Open a streamed POST, yielding the response once its status is 2xx."""
        with self._http("stream").stream(
            "POST", self._url(path), json=dict(payload), headers=dict(headers), timeout=self._timeout()
        ) as response:
            raise_for_status(response, self._status_policy)
            yield response

    def _timed_chat(self, path: str, payload: Mapping[str, Any], headers: Mapping[str, str]) -> Any:
        """``_post_json`` wrapped in ``chat.start``/``chat.end`` events."""
        ctx = self._ctx(payload.get("model"), path)
        log_event(self._logger, "chat.start", ctx, stream=False)
        t0 = time.perf_counter()
        body = self._post_json(path, payload, headers)
        log_event(self._logger, "chat.end", ctx, latency_ms=(time.perf_counter() - t0) * 1000.0)
        return body

    def _run_stream(
        self,
        path: str,
        payload: Mapping[str, Any],
        headers: Mapping[str, str],
        decode: Callable[[Iterable[str]], Iterable[str]],
        on_fragment: Callable[[str], Any],
    ) -> int:
        """Stream ``path`` through ``decode`` into ``on_fragment``; return the fragment count."""
        ctx = self._ctx(payload.get("model"), path)
        log_event(self._logger, "stream.start", ctx, stream=True)
        t0 = time.perf_counter()
        with self._open_stream(path, payload, headers) as response:
            emitted = emit_fragments(decode(response.iter_text()), on_fragment)
        log_event(
            self._logger,
            "stream.end",
            ctx,
            emitted=emitted,
            total_duration_ms=(time.perf_counter() - t0) * 1000.0,
        )
        return emitted


__all__ = ["HttpAdapterMixin", "JSON_HEADERS", "SSE_ACCEPT_HEADERS"]
