"""Claude provider adapter.

Purpose:
        Implements chat, SSE streaming and model listing against the Anthropic
        Messages API using the shared ``httpx`` client pool.

Credentials:
        The API key resolves from the explicit argument, then
        ``Configuration.api_keys["claude"]``, then ``ANTHROPIC_API_KEY``. A
        missing key fails construction with :class:`ConfigurationError`.

Error handling:
        401 -> ``AUTH_FAILED``, 429 -> ``RATE_LIMITED``, 5xx -> ``SERVER_FAULT``,
        anything else -> ``UNEXPECTED``. Transport failures propagate as raised
        by ``httpx``.

Model listing:
        Static list of known model identifiers; no network call.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, List, Optional

import httpx

from ..base.capabilities import STREAMING_AND_MODELS
from ..base.errors import ConfigurationError, ValidationError
from ..base.http.adapter_mixin import SSE_ACCEPT_HEADERS, HttpAdapterMixin
from ..base.logging import get_logger, log_event
from ..base.models import ChatInput, ChatResult
from ..base.streaming import iter_sse_fragments
from ..config import Configuration, ProviderId, get_configuration, resolve_api_key, resolve_base_url
from ..config.defaults import (
    CLAUDE_DEFAULT_BASE_URL,
    CLAUDE_DEFAULT_MODEL,
    CLAUDE_KNOWN_MODELS,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
)
from .helpers import (
    MESSAGES_PATH,
    STATUS_POLICY,
    build_headers,
    build_payload,
    parse_response,
    translate_stream_event,
)


class ClaudeProvider(HttpAdapterMixin):
    """Adapter for Anthropic's Claude models.

    Parameters:
        api_key: Explicit API key; see module notes for the fallback chain.
        model: Default model for calls that do not pass ``model=``.
        base_url: Endpoint override (default ``https://api.anthropic.com/v1``).
        config: Configuration value; the process-wide one when omitted.
        client: Optional ``httpx.Client`` to use instead of the shared pool.
    """

    capabilities = STREAMING_AND_MODELS

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        config: Optional[Configuration] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._config = config or get_configuration()
        key = resolve_api_key(ProviderId.CLAUDE, self._config, api_key)
        if not key:
            raise ConfigurationError("Claude API key is required")
        self._api_key = key
        self._model = model or CLAUDE_DEFAULT_MODEL
        self._base_url = resolve_base_url(ProviderId.CLAUDE, self._config, base_url, CLAUDE_DEFAULT_BASE_URL)
        self._client = client
        self._status_policy = STATUS_POLICY
        self._logger = get_logger("providers.claude")

    @property
    def provider_name(self) -> str:
        """Return the stable provider identifier string."""
        return ProviderId.CLAUDE.value

    def default_model(self) -> str:
        return self._model

    def chat(
        self,
        message: ChatInput,
        *,
        model: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        **options: Any,
    ) -> ChatResult:
        """Send one Messages API request and decode the reply.

        Extra keyword ``options`` are merged into the request body and
        override the adapter defaults.
        """
        payload = build_payload(
            message,
            model=model or self._model,
            max_tokens=max_tokens,
            temperature=temperature,
            options=options,
        )
        body = self._timed_chat(MESSAGES_PATH, payload, build_headers(self._api_key))
        return parse_response(body)

    def stream_chat(
        self,
        message: ChatInput,
        on_fragment: Optional[Callable[[str], Any]] = None,
        *,
        model: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        **options: Any,
    ) -> None:
        """Stream text deltas into ``on_fragment`` until the body is exhausted.

        Raises:
            ValidationError: ``on_fragment`` was not supplied.
        """
        if on_fragment is None:
            raise ValidationError("A fragment callback is required for streaming")
        payload = build_payload(
            message,
            model=model or self._model,
            max_tokens=max_tokens,
            temperature=temperature,
            options=options,
        )
        payload["stream"] = True
        headers = {**build_headers(self._api_key), **SSE_ACCEPT_HEADERS}
        self._run_stream(
            MESSAGES_PATH,
            payload,
            headers,
            partial(iter_sse_fragments, translator=translate_stream_event),
            on_fragment,
        )

    def models(self) -> List[str]:
        """Return the known Claude model identifiers (no network call)."""
        names = list(CLAUDE_KNOWN_MODELS)
        log_event(self._logger, "models.list", self._ctx(None, "static"), count=len(names))
        return names


__all__ = ["ClaudeProvider"]
