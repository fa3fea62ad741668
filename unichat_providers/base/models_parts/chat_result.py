"""
ChatResult DTO representing normalized provider responses.

Every adapter populates at least ``content`` and ``model``; ``usage`` and the
provider-specific ``extra`` fields are best-effort.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ChatResult:
    """Provider-agnostic result of a non-streaming chat invocation.

    Attributes:
        content: Generated text, or ``None`` when the backend returned none.
        model: Model identifier reported by the backend.
        usage: Token usage mapping when the backend reports one.
        extra: Provider-specific fields (e.g. ``stop_reason`` for Claude,
            ``context``/``done`` for Ollama).
    """

    content: Optional[str]
    model: Optional[str]
    usage: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return a flat mapping with ``extra`` merged into the top level."""
        data: Dict[str, Any] = {"content": self.content, "model": self.model, "usage": self.usage}
        data.update(self.extra)
        return data


__all__ = ["ChatResult"]
