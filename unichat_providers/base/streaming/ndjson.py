"""Newline-delimited JSON decoding (local daemon streaming).

Every non-blank line is a standalone JSON object with no prefix. Lines that
fail to parse are skipped; the ``response`` field of each object carries the
text fragment. A stream that ends early is indistinguishable from one that
ended normally and is treated as clean termination.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, Iterator

RESPONSE_FIELD = "response"


def iter_ndjson_objects(chunks: Iterable[str]) -> Iterator[Dict[str, Any]]:
    """Yield JSON objects from each non-blank line of each chunk."""
    for chunk in chunks:
        for line in chunk.split("\n"):
            if not line.strip():
                continue
            try:
                obj = json.loads(line)
            except ValueError:
                continue
            if isinstance(obj, dict):
                yield obj


def iter_ndjson_fragments(chunks: Iterable[str], field: str = RESPONSE_FIELD) -> Iterator[str]:
    """Yield non-empty string values of ``field`` in arrival order."""
    for obj in iter_ndjson_objects(chunks):
        text = obj.get(field)
        if isinstance(text, str) and text:
            yield text


__all__ = ["RESPONSE_FIELD", "iter_ndjson_objects", "iter_ndjson_fragments"]
