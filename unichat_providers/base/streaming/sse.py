"""Server-Sent-Events delta decoding.

Used by the Claude and OpenAI-style adapters. The body arrives as a sequence
of text chunks; each chunk is split on newlines and only lines starting with
``"data: "`` are considered. The ``[DONE]`` sentinel is skipped without
emitting, and lines whose payload is not a JSON object are dropped silently
so a malformed event never breaks the stream.

Nothing is buffered beyond the current chunk and fragments are yielded in
arrival order.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, Iterable, Iterator, Optional

DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"

EventTranslator = Callable[[Dict[str, Any]], Optional[str]]


def iter_sse_events(chunks: Iterable[str]) -> Iterator[Dict[str, Any]]:
    """Yield decoded JSON objects from ``data:`` lines."""
    for chunk in chunks:
        for line in chunk.split("\n"):
            if not line.startswith(DATA_PREFIX):
                continue
            data = line[len(DATA_PREFIX):].strip()
            if data == DONE_SENTINEL:
                continue
            try:
                event = json.loads(data)
            except ValueError:
                continue
            if isinstance(event, dict):
                yield event


def iter_sse_fragments(chunks: Iterable[str], translator: EventTranslator) -> Iterator[str]:
    """Yield the non-empty text fragments ``translator`` extracts per event."""
    for event in iter_sse_events(chunks):
        text = translator(event)
        if text:
            yield text


__all__ = ["DATA_PREFIX", "DONE_SENTINEL", "EventTranslator", "iter_sse_events", "iter_sse_fragments"]
