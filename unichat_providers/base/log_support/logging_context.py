"""Structured logging context object for providers.

:class:`LogContext` carries the fields every adapter event shares (provider
name, model, endpoint) plus an open ``extra`` bag. ``to_dict`` flattens the
bag and prunes ``None`` values for compact output.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for provider logging events."""

    provider: Optional[str] = None
    model: Optional[str] = None
    endpoint: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"provider": self.provider, "model": self.model, "endpoint": self.endpoint}
        data.update(self.extra)
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
