"""Shared HTTP client pool for providers.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances to avoid per-call allocations and reduce connection overhead
    across provider adapters.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Timeout strategy:
    - Pooled clients are built with a fallback timeout of
      ``DEFAULT_CONNECT_TIMEOUT_SECONDS`` for every phase. Adapters override
      it by passing :func:`request_timeout` on every call, so the configured
      read timeout (``Configuration.timeout``) applies uniformly, including
      to streamed bodies where it bounds the wait between chunks.

Lifecycle & cleanup:
    - Clients are cached by a composite key of ``base_url`` and ``purpose``
      string. Purposes allow distinct pools (e.g., "chat" vs "stream").
    - All clients are closed at interpreter exit via ``atexit``. Tests may also
      call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ...config.defaults import DEFAULT_CONNECT_TIMEOUT_SECONDS

# Internal cache keyed by (base_url, purpose)
_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def request_timeout(read_seconds: float) -> httpx.Timeout:
    """Return the per-request timeout with ``read_seconds`` as the read timeout."""
    return httpx.Timeout(DEFAULT_CONNECT_TIMEOUT_SECONDS, read=read_seconds)


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: API base URL the client is grouped under. Adapters always
            issue absolute URLs, so this only partitions connection pools.
        purpose: A short string discriminating separate pools (e.g.,
            "claude.chat", "claude.stream"). Keep stable to maximize reuse.

    Thread-safety:
        This function is safe for concurrent use; per-key creation is guarded
        by a re-entrant lock.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        client = httpx.Client(timeout=request_timeout(DEFAULT_CONNECT_TIMEOUT_SECONDS))
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients", "request_timeout"]
