"""
Message DTO used as structured chat input.

Callers may pass plain ``{"role": ..., "content": ...}`` mappings instead; the
message formatter accepts both.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Mapping, Sequence, Union


# Message roles accepted in structured chat input.
Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class Message:
    """A single chat turn.

    Attributes:
        role: Author role (``"system"``, ``"user"`` or ``"assistant"``).
        content: Plain text content.
    """

    role: Role
    content: str

    def to_dict(self) -> Dict[str, str]:
        """Return the wire representation used by chat-completion APIs."""
        return {"role": self.role, "content": self.content}


# Either a single prompt string or an ordered conversation.
ChatInput = Union[str, Sequence[Union[Message, Mapping[str, str]]]]


__all__ = ["Message", "Role", "ChatInput"]
