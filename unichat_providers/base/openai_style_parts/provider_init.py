"""Initialization dataclass for OpenAI-style providers.

Encapsulates the per-provider constants ``BaseOpenAIStyleProvider`` needs to
resolve credentials, endpoints and messages. Pure data container; no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...config.providers import ProviderId


@dataclass(frozen=True)
class _ProviderInit:
    """Initialization bundle for ``BaseOpenAIStyleProvider``.

    Attributes:
        provider_id: Canonical provider identifier.
        display_name: Human-readable name used in error messages.
        default_base_url: Endpoint used when no override is configured.
        default_model: Model used when a call does not specify one.
    """

    provider_id: ProviderId
    display_name: str
    default_base_url: str
    default_model: str

    @property
    def logger_name(self) -> str:
        return f"providers.{self.provider_id.value}"


__all__ = ["_ProviderInit"]
