"""Message formatting helpers shared across providers.

This module normalizes caller-supplied chat input (a single prompt string or
an ordered list of role/content pairs) into the two shapes the backends
expect:

- chat-completion backends take a list of ``{"role", "content"}`` mappings;
- the local daemon takes a single prompt string, so a conversation is
  flattened to ``"role: content"`` lines.

Helpers here are pure. Shape violations raise :class:`ValidationError`
before any network call.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from ..errors import ValidationError
from ..models import Message

_SHAPE_ERROR = "Message must be a string or a list of message objects"


def _as_pair(item: Any) -> Dict[str, Any]:
    """Return a plain mapping for one conversation item."""
    if isinstance(item, Message):
        return item.to_dict()
    if isinstance(item, Mapping):
        return dict(item)
    raise ValidationError(_SHAPE_ERROR)


def _is_sequence_input(message: Any) -> bool:
    return isinstance(message, (list, tuple))


def _content_of(item: Any) -> Any:
    if isinstance(item, Message):
        return item.content
    if isinstance(item, Mapping):
        return item.get("content")
    return item


def is_blank_input(message: Any) -> bool:
    """Return True for ``None``, whitespace-only strings and empty lists.

    A list counts as blank when every item's content is blank too.
    """
    if message is None:
        return True
    if isinstance(message, str):
        return not message.strip()
    if _is_sequence_input(message):
        return all(
            not (isinstance(content, str) and content.strip())
            for content in map(_content_of, message)
        )
    return False


def format_chat_messages(message: Any) -> List[Dict[str, Any]]:
    """Return the chat-completion ``messages`` list for ``message``.

    A string becomes a single ``user`` turn; a list is passed through
    unchanged (``Message`` DTOs are converted to plain mappings).
    """
    if isinstance(message, str):
        return [{"role": "user", "content": message}]
    if _is_sequence_input(message):
        return [_as_pair(item) for item in message]
    raise ValidationError(_SHAPE_ERROR)


def flatten_conversation(message: Any) -> str:
    """Return a single prompt string for backends without structured turns."""
    if isinstance(message, str):
        return message
    if _is_sequence_input(message):
        lines = []
        for item in message:
            pair = _as_pair(item)
            lines.append(f"{pair.get('role')}: {pair.get('content')}")
        return "\n".join(lines)
    raise ValidationError(_SHAPE_ERROR)


__all__ = ["is_blank_input", "format_chat_messages", "flatten_conversation"]
