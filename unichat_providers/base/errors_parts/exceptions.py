"""
Caller-facing exception hierarchy.

All errors raised by the package derive from :class:`UnichatError` so callers
can catch the whole family at once. Precondition failures are raised before
any network call is attempted.
"""
from __future__ import annotations

from typing import Any


class UnichatError(Exception):
    """Base class for every error raised by the package."""


class ValidationError(UnichatError, ValueError):
    """Caller input violates a precondition.

    Raised for empty/blank messages, unsupported message shapes, and streaming
    calls without a fragment callback.
    """


class UnknownProviderError(ValidationError):
    """Raised when a provider identifier is outside the closed set."""

    def __init__(self, provider: Any) -> None:
        self.provider = provider
        super().__init__(f"Unknown provider: {provider}")


class ConfigurationError(UnichatError):
    """A required setting (typically an API key) could not be resolved."""


class UnsupportedCapabilityError(UnichatError):
    """The selected adapter does not implement the requested capability."""


class ProviderConnectionError(UnichatError, ConnectionError):
    """A locally hosted backend could not be reached (connection refused)."""


__all__ = [
    "UnichatError",
    "ValidationError",
    "UnknownProviderError",
    "ConfigurationError",
    "UnsupportedCapabilityError",
    "ProviderConnectionError",
]
