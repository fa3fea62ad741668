"""
Normalized remote failure kinds.

Values are lowercase snake_case and are considered a stable public contract
for callers that branch on the failure category.
"""
from __future__ import annotations

from enum import Enum


class RemoteErrorKind(str, Enum):
    """Categories a non-success HTTP status is sorted into."""

    AUTH_FAILED = "auth_failed"
    RATE_LIMITED = "rate_limited"
    SERVER_FAULT = "server_fault"
    NOT_FOUND = "not_found"
    UNEXPECTED = "unexpected"


__all__ = ["RemoteErrorKind"]
