"""
Structured remote error exception type.

Raised when a backend answers with a non-success status, or with a 2xx body
that cannot be decoded. The raw status code is kept for diagnostics but
callers are expected to branch on :attr:`RemoteError.kind`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .exceptions import UnichatError
from .remote_error_kind import RemoteErrorKind


@dataclass(eq=False)
class RemoteError(UnichatError):
    """Represents a backend failure with a normalized kind.

    Attributes:
        kind: Normalized :class:`RemoteErrorKind` for the failure.
        message: Human-readable error message.
        provider: Provider key where the error originated (e.g., ``"claude"``).
        status: HTTP status code returned by the backend, when available.
        body: Raw response body, kept for ``UNEXPECTED`` diagnostics.
        hint: Optional remediation hint (e.g. pull the model first).
    """

    kind: RemoteErrorKind
    message: str
    provider: str
    status: Optional[int] = None
    body: Optional[str] = None
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.provider} {self.kind.value}: {self.message}"


__all__ = ["RemoteError"]
