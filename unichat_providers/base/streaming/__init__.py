"""Streaming primitives for the provider layer.

Decoders are lazy generators over network chunks. The public streaming
contract is a synchronous sink: adapters drive :func:`emit_fragments`, which
invokes the caller's callback once per fragment on the calling thread and
returns when the body is exhausted. The sequence is finite, forward-only and
not restartable.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from .ndjson import iter_ndjson_fragments, iter_ndjson_objects
from .sse import DATA_PREFIX, DONE_SENTINEL, iter_sse_events, iter_sse_fragments


def emit_fragments(fragments: Iterable[str], on_fragment: Callable[[str], Any]) -> int:
    """Invoke ``on_fragment`` for each fragment; return how many were emitted."""
    emitted = 0
    for fragment in fragments:
        on_fragment(fragment)
        emitted += 1
    return emitted


__all__ = [
    "DATA_PREFIX",
    "DONE_SENTINEL",
    "emit_fragments",
    "iter_sse_events",
    "iter_sse_fragments",
    "iter_ndjson_objects",
    "iter_ndjson_fragments",
]
