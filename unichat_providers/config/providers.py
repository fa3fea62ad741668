"""Closed set of provider identifiers.

Every dispatch path resolves a caller-supplied name through
:func:`parse_provider_id`; anything outside :class:`ProviderId` is rejected at
the boundary by the factory.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ProviderId(str, Enum):
    """Canonical provider identifiers."""

    CLAUDE = "claude"
    MISTRAL = "mistral"
    OPENAI = "openai"
    OLLAMA = "ollama"


def parse_provider_id(value: Any) -> Optional[ProviderId]:
    """Return the :class:`ProviderId` named by ``value`` or ``None``.

    Matching is case-insensitive and ignores surrounding whitespace.
    """
    if isinstance(value, ProviderId):
        return value
    if value is None:
        return None
    try:
        return ProviderId(str(value).strip().lower())
    except ValueError:
        return None


__all__ = ["ProviderId", "parse_provider_id"]
