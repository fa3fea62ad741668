"""
Providers Base Package

Provider-agnostic contracts, DTOs, error taxonomy and capability descriptors
shared by every adapter. The provider factory lives in
``unichat_providers.base.factory`` and is imported explicitly by callers to
keep this package free of adapter imports.
"""

from .capabilities import Capabilities
from .errors import (
    ConfigurationError,
    ProviderConnectionError,
    RemoteError,
    RemoteErrorKind,
    UnichatError,
    UnknownProviderError,
    UnsupportedCapabilityError,
    ValidationError,
)
from .interfaces import FragmentSink, LLMProvider, ModelListingProvider, SupportsStreaming
from .models import ChatInput, ChatResult, Message, Role

__all__ = [
    "Capabilities",
    "ChatInput",
    "ChatResult",
    "Message",
    "Role",
    "LLMProvider",
    "SupportsStreaming",
    "ModelListingProvider",
    "FragmentSink",
    "UnichatError",
    "ValidationError",
    "UnknownProviderError",
    "ConfigurationError",
    "UnsupportedCapabilityError",
    "ProviderConnectionError",
    "RemoteError",
    "RemoteErrorKind",
]
