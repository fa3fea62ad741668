"""BaseOpenAIStyleProvider implementation.

Purpose:
- Reusable base class for providers exposing an OpenAI-compatible Chat
  Completions interface (``POST /chat/completions``, ``GET /models``) with
  Bearer authentication and SSE streaming.

External dependencies:
- ``httpx`` through :class:`HttpAdapterMixin`; no vendor SDKs.

Error semantics:
- Missing API key fails construction with ``ConfigurationError``.
- 401 -> ``AUTH_FAILED``, 429 -> ``RATE_LIMITED``, 5xx -> ``SERVER_FAULT``,
  other non-2xx -> ``UNEXPECTED``.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, List, Optional

import httpx

from ...config import Configuration, get_configuration, resolve_api_key, resolve_base_url
from ...config.defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from ..capabilities import STREAMING_AND_MODELS
from ..errors import ConfigurationError, ValidationError
from ..http.adapter_mixin import SSE_ACCEPT_HEADERS, HttpAdapterMixin
from ..logging import get_logger, log_event
from ..models import ChatInput, ChatResult
from ..streaming import iter_sse_fragments
from .provider_init import _ProviderInit
from .style_helpers import (
    CHAT_COMPLETIONS_PATH,
    MODELS_PATH,
    bearer_headers,
    build_chat_payload,
    build_status_policy,
    extract_model_ids,
    parse_chat_response,
    translate_openai_delta,
)


class BaseOpenAIStyleProvider(HttpAdapterMixin):
    """Reusable base class for OpenAI-compatible providers.

    Subclasses set the class attribute ``_init`` to a :class:`_ProviderInit`
    describing their identifier, display name and defaults.
    """

    capabilities = STREAMING_AND_MODELS
    _init: _ProviderInit

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        config: Optional[Configuration] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        init = self._init
        self._config = config or get_configuration()
        key = resolve_api_key(init.provider_id, self._config, api_key)
        if not key:
            raise ConfigurationError(f"{init.display_name} API key is required")
        self._api_key = key
        self._model = model or init.default_model
        self._base_url = resolve_base_url(init.provider_id, self._config, base_url, init.default_base_url)
        self._client = client
        self._status_policy = build_status_policy(init.provider_id.value, init.display_name)
        self._logger = get_logger(init.logger_name)

    @property
    def provider_name(self) -> str:
        """Return the canonical provider name (e.g., ``mistral``)."""
        return self._init.provider_id.value

    def default_model(self) -> str:
        """Return the default model name configured for this provider."""
        return self._model

    # ----- Chat -----
    def chat(
        self,
        message: ChatInput,
        *,
        model: Optional[str] = None,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        **options: Any,
    ) -> ChatResult:
        """Perform a non-streaming chat completion."""
        payload = build_chat_payload(
            message,
            model=model or self._model,
            temperature=temperature,
            max_tokens=max_tokens,
            options=options,
        )
        body = self._timed_chat(CHAT_COMPLETIONS_PATH, payload, bearer_headers(self._api_key))
        return parse_chat_response(body)

    # ----- Streaming -----
    def stream_chat(
        self,
        message: ChatInput,
        on_fragment: Optional[Callable[[str], Any]] = None,
        *,
        model: Optional[str] = None,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        **options: Any,
    ) -> None:
        """Stream ``choices[0].delta.content`` fragments into ``on_fragment``."""
        if on_fragment is None:
            raise ValidationError("A fragment callback is required for streaming")
        payload = build_chat_payload(
            message,
            model=model or self._model,
            temperature=temperature,
            max_tokens=max_tokens,
            options=options,
        )
        payload["stream"] = True
        self._run_stream(
            CHAT_COMPLETIONS_PATH,
            payload,
            {**bearer_headers(self._api_key), **SSE_ACCEPT_HEADERS},
            partial(iter_sse_fragments, translator=translate_openai_delta),
            on_fragment,
        )

    # ----- Models -----
    def models(self) -> List[str]:
        """Return model ids from ``GET /models``; empty when the body is malformed."""
        body = self._get_json(MODELS_PATH, bearer_headers(self._api_key))
        names = extract_model_ids(body)
        log_event(self._logger, "models.list", self._ctx(None, MODELS_PATH), count=len(names))
        return names


__all__ = ["BaseOpenAIStyleProvider"]
