"""
HTTP status classification for provider adapters.

Each adapter owns a :class:`StatusPolicy` that maps the few status codes its
backend documents to a :class:`RemoteErrorKind` plus a caller-facing message.
Status ranges are sorted into kinds here, at the adapter boundary, so raw
codes never reach callers as the primary signal.

Precedence for a non-2xx status:
    1. Exact match in ``policy.status_map``.
    2. ``500..599`` -> ``SERVER_FAULT``.
    3. Anything else -> ``UNEXPECTED`` (raw status and body attached).
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import httpx

from .remote_error import RemoteError
from .remote_error_kind import RemoteErrorKind

CLOUD_STATUS_MAP: Dict[int, RemoteErrorKind] = {
    401: RemoteErrorKind.AUTH_FAILED,
    429: RemoteErrorKind.RATE_LIMITED,
}

LOCAL_STATUS_MAP: Dict[int, RemoteErrorKind] = {
    404: RemoteErrorKind.NOT_FOUND,
}


@dataclass(frozen=True)
class StatusPolicy:
    """Per-provider status mapping and messages.

    Attributes:
        provider: Provider key attached to raised errors.
        status_map: Exact status -> kind overrides.
        messages: Kind -> message. ``UNEXPECTED`` falls back to
            ``"HTTP <status>: <body>"`` when absent.
        hints: Kind -> remediation hint.
    """

    provider: str
    status_map: Mapping[int, RemoteErrorKind]
    messages: Mapping[RemoteErrorKind, str] = field(default_factory=dict)
    hints: Mapping[RemoteErrorKind, str] = field(default_factory=dict)


def classify_status(status: int, status_map: Mapping[int, RemoteErrorKind]) -> Optional[RemoteErrorKind]:
    """Return the kind for ``status`` or ``None`` for a 2xx success."""
    if 200 <= status < 300:
        return None
    if status in status_map:
        return status_map[status]
    if 500 <= status < 600:
        return RemoteErrorKind.SERVER_FAULT
    return RemoteErrorKind.UNEXPECTED


def build_remote_error(policy: StatusPolicy, status: int, body: str) -> RemoteError:
    """Construct the :class:`RemoteError` for a failed status."""
    kind = classify_status(status, policy.status_map) or RemoteErrorKind.UNEXPECTED
    message = policy.messages.get(kind) or f"HTTP {status}: {body}"
    return RemoteError(
        kind=kind,
        message=message,
        provider=policy.provider,
        status=status,
        body=body,
        hint=policy.hints.get(kind),
    )


def raise_for_status(response: httpx.Response, policy: StatusPolicy) -> None:
    """Raise :class:`RemoteError` when ``response`` is not a 2xx success.

    Streamed responses have their body read first so the error carries it.
    """
    if classify_status(response.status_code, policy.status_map) is None:
        return
    response.read()
    raise build_remote_error(policy, response.status_code, response.text)


def decode_json_body(response: httpx.Response, provider: str) -> Any:
    """Decode a completed 2xx body, mapping unparsable JSON to ``UNEXPECTED``."""
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise RemoteError(
            kind=RemoteErrorKind.UNEXPECTED,
            message=f"Malformed JSON response body: {exc}",
            provider=provider,
            status=response.status_code,
            body=response.text,
        ) from exc


__all__ = [
    "CLOUD_STATUS_MAP",
    "LOCAL_STATUS_MAP",
    "StatusPolicy",
    "classify_status",
    "build_remote_error",
    "raise_for_status",
    "decode_json_body",
]
