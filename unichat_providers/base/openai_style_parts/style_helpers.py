"""
Helper utilities for OpenAI-style Chat Completions providers.

Purpose:
- Keep the base class concise by centralizing payload construction, response
  extraction and stream-event translation for the ``/chat/completions`` and
  ``/models`` wire format shared by Mistral and OpenAI.

External dependencies:
- None beyond the package's own DTOs; no network I/O happens here.

Fallback semantics:
- Missing or malformed response sections decode to ``None`` (chat) or an
  empty list (model listing); they never raise.
"""

from __future__ import annotations

import typing as _t

from ..errors import CLOUD_STATUS_MAP, RemoteErrorKind, StatusPolicy
from ..http.adapter_mixin import JSON_HEADERS
from ..models import ChatInput, ChatResult
from ..utils.messages import format_chat_messages
from ..utils.payload import merge_payload

CHAT_COMPLETIONS_PATH = "/chat/completions"
MODELS_PATH = "/models"


def build_status_policy(provider: str, display_name: str) -> StatusPolicy:
    """Return the cloud status policy with provider-specific messages."""
    return StatusPolicy(
        provider=provider,
        status_map=CLOUD_STATUS_MAP,
        messages={
            RemoteErrorKind.AUTH_FAILED: f"Invalid {display_name} API key",
            RemoteErrorKind.RATE_LIMITED: "Rate limit exceeded",
            RemoteErrorKind.SERVER_FAULT: f"{display_name} server error",
        },
    )


def bearer_headers(api_key: str) -> dict[str, str]:
    return {**JSON_HEADERS, "Authorization": f"Bearer {api_key}"}


def build_chat_payload(
    message: ChatInput,
    *,
    model: str,
    temperature: float,
    max_tokens: int,
    options: _t.Mapping[str, _t.Any],
) -> dict[str, _t.Any]:
    """Build the Chat Completions body; caller ``options`` override defaults."""
    defaults = {
        "model": model,
        "messages": format_chat_messages(message),
        "temperature": temperature,
        "max_tokens": max_tokens,
    }
    return merge_payload(defaults, options)


def _first_choice(data: _t.Mapping[str, _t.Any]) -> dict[str, _t.Any]:
    choices = data.get("choices")
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        return choices[0]
    return {}


def extract_openai_text(body: _t.Any) -> _t.Optional[str]:
    """Return ``choices[0].message.content`` or ``None`` when absent."""
    if not isinstance(body, dict):
        return None
    message = _first_choice(body).get("message")
    if isinstance(message, dict) and isinstance(message.get("content"), str):
        return message["content"]
    return None


def parse_chat_response(body: _t.Any) -> ChatResult:
    """Decode a Chat Completions body into :class:`ChatResult`."""
    data: _t.Mapping[str, _t.Any] = body if isinstance(body, dict) else {}
    return ChatResult(
        content=extract_openai_text(data),
        model=data.get("model"),
        usage=data.get("usage"),
        extra={"finish_reason": _first_choice(data).get("finish_reason")},
    )


def translate_openai_delta(event: _t.Mapping[str, _t.Any]) -> _t.Optional[str]:
    """Return ``choices[0].delta.content`` of a stream event, if any."""
    delta = _first_choice(event).get("delta")
    if not isinstance(delta, dict):
        return None
    text = delta.get("content")
    return text if isinstance(text, str) and text else None


def extract_model_ids(body: _t.Any) -> list[str]:
    """Project ``data[].id`` from a ``/models`` body; malformed -> ``[]``."""
    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, list):
        return []
    return [item["id"] for item in data if isinstance(item, dict) and isinstance(item.get("id"), str)]


__all__ = [
    "CHAT_COMPLETIONS_PATH",
    "MODELS_PATH",
    "build_status_policy",
    "bearer_headers",
    "build_chat_payload",
    "extract_openai_text",
    "parse_chat_response",
    "translate_openai_delta",
    "extract_model_ids",
]
