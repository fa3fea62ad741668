"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `unichat_providers.base.errors` for the stable surface.
"""

from .exceptions import (
    ConfigurationError,
    ProviderConnectionError,
    UnichatError,
    UnknownProviderError,
    UnsupportedCapabilityError,
    ValidationError,
)
from .remote_error_kind import RemoteErrorKind
from .remote_error import RemoteError
from .classification import StatusPolicy, classify_status, decode_json_body, raise_for_status

__all__ = [
    "UnichatError",
    "ValidationError",
    "UnknownProviderError",
    "ConfigurationError",
    "UnsupportedCapabilityError",
    "ProviderConnectionError",
    "RemoteErrorKind",
    "RemoteError",
    "StatusPolicy",
    "classify_status",
    "decode_json_body",
    "raise_for_status",
]
