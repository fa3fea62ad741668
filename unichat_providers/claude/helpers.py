"""Claude helpers module.

Purpose:
- Side-effect-free utilities for the Claude adapter: payload construction,
  header building, response decoding and SSE event translation. Keeps
  ``client.py`` limited to orchestration.

Wire format notes:
- Messages API: ``POST /messages`` with ``x-api-key`` and a pinned
  ``anthropic-version`` header.
- Streaming events are SSE; only ``content_block_delta`` events carry text
  (``delta.text``). Other event types (``message_start``, ``ping``,
  ``message_stop``...) are ignored.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..base.errors import CLOUD_STATUS_MAP, RemoteErrorKind, StatusPolicy
from ..base.http.adapter_mixin import JSON_HEADERS
from ..base.models import ChatInput, ChatResult
from ..base.utils.messages import format_chat_messages
from ..base.utils.payload import merge_payload
from ..config.defaults import CLAUDE_API_VERSION

PROVIDER = "claude"
MESSAGES_PATH = "/messages"
CONTENT_BLOCK_DELTA = "content_block_delta"

STATUS_POLICY = StatusPolicy(
    provider=PROVIDER,
    status_map=CLOUD_STATUS_MAP,
    messages={
        RemoteErrorKind.AUTH_FAILED: "Invalid Claude API key",
        RemoteErrorKind.RATE_LIMITED: "Rate limit exceeded",
        RemoteErrorKind.SERVER_FAULT: "Claude server error",
    },
)


def build_headers(api_key: str) -> Dict[str, str]:
    """Return auth + content headers for the Messages API."""
    return {
        **JSON_HEADERS,
        "x-api-key": api_key,
        "anthropic-version": CLAUDE_API_VERSION,
    }


def build_payload(
    message: ChatInput,
    *,
    model: str,
    max_tokens: int,
    temperature: float,
    options: Mapping[str, Any],
) -> Dict[str, Any]:
    """Construct the Messages API body; caller ``options`` override defaults."""
    defaults = {
        "model": model,
        "max_tokens": max_tokens,
        "messages": format_chat_messages(message),
        "temperature": temperature,
    }
    return merge_payload(defaults, options)


def _first_text(content: Any) -> Optional[str]:
    if isinstance(content, list) and content and isinstance(content[0], dict):
        text = content[0].get("text")
        return text if isinstance(text, str) else None
    return None


def parse_response(body: Any) -> ChatResult:
    """Decode a Messages API body into :class:`ChatResult`.

    ``content`` is the text of the first content block; ``stop_reason`` is
    carried in ``extra``.
    """
    data: Mapping[str, Any] = body if isinstance(body, dict) else {}
    return ChatResult(
        content=_first_text(data.get("content")),
        model=data.get("model"),
        usage=data.get("usage"),
        extra={"stop_reason": data.get("stop_reason")},
    )


def translate_stream_event(event: Mapping[str, Any]) -> Optional[str]:
    """Return the text delta of a ``content_block_delta`` event, else ``None``."""
    if event.get("type") != CONTENT_BLOCK_DELTA:
        return None
    delta = event.get("delta")
    if not isinstance(delta, dict):
        return None
    text = delta.get("text")
    return text if isinstance(text, str) and text else None


__all__ = [
    "PROVIDER",
    "MESSAGES_PATH",
    "STATUS_POLICY",
    "build_headers",
    "build_payload",
    "parse_response",
    "translate_stream_event",
]
