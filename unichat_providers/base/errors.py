"""Unified error taxonomy public surface.

This module re-exports the one-concern-per-file implementations under
``unichat_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.exceptions import (
    ConfigurationError,
    ProviderConnectionError,
    UnichatError,
    UnknownProviderError,
    UnsupportedCapabilityError,
    ValidationError,
)
from .errors_parts.remote_error_kind import RemoteErrorKind
from .errors_parts.remote_error import RemoteError
from .errors_parts.classification import (
    CLOUD_STATUS_MAP,
    LOCAL_STATUS_MAP,
    StatusPolicy,
    classify_status,
    decode_json_body,
    raise_for_status,
)

__all__ = [
    "UnichatError",
    "ValidationError",
    "UnknownProviderError",
    "ConfigurationError",
    "UnsupportedCapabilityError",
    "ProviderConnectionError",
    "RemoteErrorKind",
    "RemoteError",
    "CLOUD_STATUS_MAP",
    "LOCAL_STATUS_MAP",
    "StatusPolicy",
    "classify_status",
    "decode_json_body",
    "raise_for_status",
]
