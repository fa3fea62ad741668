"""Ollama provider adapter.

Purpose:
    Talk to a locally hosted Ollama daemon over its native HTTP API using the
    shared ``httpx`` pool: text generation, NDJSON streaming, local model
    listing and the model administration endpoints (pull, show).

Endpoint:
    Built from ``host``/``port`` when either is given, else resolved from the
    explicit ``base_url``, ``Configuration.endpoints["ollama"]``,
    ``OLLAMA_HOST`` and finally ``http://localhost:11434``.

Failure semantics:
    Connection refused -> :class:`ProviderConnectionError`; other transport
    failures propagate as raised by ``httpx``. 404 -> ``NOT_FOUND`` with an
    ``ollama pull <model>`` hint; 5xx -> ``SERVER_FAULT``; other non-2xx ->
    ``UNEXPECTED``. No API key is required; when one is sent, 401 ->
    ``AUTH_FAILED``.
"""

from __future__ import annotations

import dataclasses
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional

import httpx

from ..base.capabilities import STREAMING_AND_MODELS
from ..base.errors import ProviderConnectionError, RemoteError, RemoteErrorKind, ValidationError
from ..base.http.adapter_mixin import HttpAdapterMixin
from ..base.logging import get_logger, log_event
from ..base.models import ChatInput, ChatResult
from ..base.streaming import iter_ndjson_fragments
from ..config import Configuration, ProviderId, get_configuration, resolve_api_key, resolve_base_url
from ..config.defaults import DEFAULT_TEMPERATURE, OLLAMA_DEFAULT_MODEL
from .helpers import (
    GENERATE_PATH,
    PULL_PATH,
    SHOW_PATH,
    TAGS_PATH,
    build_headers,
    build_payload,
    extract_model_names,
    host_port_url,
    normalize_base_url,
    parse_response,
    pull_hint,
    status_policy,
)


def _is_refused(exc: BaseException) -> bool:
    """True when the cause chain (httpx -> httpcore -> OSError) holds a refusal."""
    cause: Optional[BaseException] = exc
    seen = set()
    while cause is not None and id(cause) not in seen:
        if isinstance(cause, ConnectionRefusedError):
            return True
        seen.add(id(cause))
        cause = cause.__cause__ or cause.__context__
    return False


class OllamaProvider(HttpAdapterMixin):
    """Adapter for a local Ollama daemon.

    Parameters:
        host: Daemon host name; combined with ``port``.
        port: Daemon port (default 11434).
        model: Default model for calls that do not pass ``model=``.
        base_url: Full endpoint override; ignored when ``host``/``port`` is set.
        api_key: Optional Bearer token for daemons behind an auth proxy.
        config: Configuration value; the process-wide one when omitted.
        client: Optional ``httpx.Client`` to use instead of the shared pool.
    """

    capabilities = STREAMING_AND_MODELS

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        model: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        config: Optional[Configuration] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._config = config or get_configuration()
        if host is not None or port is not None:
            base_url = host_port_url(host, port)
        resolved = resolve_base_url(ProviderId.OLLAMA, self._config, base_url, host_port_url(None, None))
        self._base_url = normalize_base_url(resolved)
        self._api_key = resolve_api_key(ProviderId.OLLAMA, self._config, api_key)
        self._model = model or OLLAMA_DEFAULT_MODEL
        self._client = client
        self._status_policy = status_policy(self._api_key)
        self._logger = get_logger("providers.ollama")

    @property
    def provider_name(self) -> str:
        """Return the stable provider identifier string."""
        return ProviderId.OLLAMA.value

    def default_model(self) -> str:
        return self._model

    @contextmanager
    def _daemon_call(self, model: Optional[str] = None) -> Iterator[None]:
        """Map connection refusal and fill the pull hint with the model name.

        Other connect failures (DNS, unreachable host) propagate unmapped.
        """
        try:
            yield
        except httpx.ConnectError as exc:
            if not _is_refused(exc):
                raise
            raise ProviderConnectionError(
                f"Cannot connect to Ollama at {self._base_url}. Is Ollama running?"
            ) from exc
        except RemoteError as exc:
            if model and exc.kind is RemoteErrorKind.NOT_FOUND:
                raise dataclasses.replace(exc, hint=pull_hint(model)) from exc
            raise

    def chat(
        self,
        message: ChatInput,
        *,
        model: Optional[str] = None,
        temperature: float = DEFAULT_TEMPERATURE,
        **options: Any,
    ) -> ChatResult:
        """Generate a completion with ``stream: false``.

        Extra keyword ``options`` land in the nested ``options`` object of the
        request (e.g. ``num_predict``, ``top_p``).
        """
        model = model or self._model
        payload = build_payload(message, model=model, temperature=temperature, stream=False, options=options)
        with self._daemon_call(model):
            body = self._timed_chat(GENERATE_PATH, payload, build_headers(self._api_key))
        return parse_response(body)

    def stream_chat(
        self,
        message: ChatInput,
        on_fragment: Optional[Callable[[str], Any]] = None,
        *,
        model: Optional[str] = None,
        temperature: float = DEFAULT_TEMPERATURE,
        **options: Any,
    ) -> None:
        """Stream ``response`` fragments from NDJSON lines into ``on_fragment``.

        A body that ends without a ``done`` line is treated as normal completion.
        """
        if on_fragment is None:
            raise ValidationError("A fragment callback is required for streaming")
        model = model or self._model
        payload = build_payload(message, model=model, temperature=temperature, stream=True, options=options)
        with self._daemon_call(model):
            self._run_stream(
                GENERATE_PATH, payload, build_headers(self._api_key), iter_ndjson_fragments, on_fragment
            )

    def models(self) -> List[str]:
        """Return the names of locally available models."""
        with self._daemon_call():
            body = self._get_json(TAGS_PATH, build_headers(self._api_key))
        names = extract_model_names(body)
        log_event(self._logger, "models.list", self._ctx(None, TAGS_PATH), count=len(names))
        return names

    def pull_model(self, name: str) -> Dict[str, Any]:
        """Download ``name`` into the daemon; blocks until the pull finishes."""
        with self._daemon_call():
            body = self._post_json(PULL_PATH, {"name": name, "stream": False}, build_headers(self._api_key))
        return body if isinstance(body, dict) else {}

    def model_info(self, name: str) -> Dict[str, Any]:
        """Return the daemon's metadata for ``name`` (modelfile, parameters, details)."""
        with self._daemon_call(name):
            body = self._post_json(SHOW_PATH, {"name": name}, build_headers(self._api_key))
        return body if isinstance(body, dict) else {}


__all__ = ["OllamaProvider"]
