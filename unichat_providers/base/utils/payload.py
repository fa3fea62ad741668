"""Payload merging with an explicit precedence contract.

Caller-supplied options always override adapter defaults. Keys the adapter
must control for protocol reasons (the ``stream`` flag) are applied after the
merge by the adapter itself.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping


def merge_payload(defaults: Mapping[str, Any], options: Mapping[str, Any]) -> Dict[str, Any]:
    """Return ``defaults`` overlaid with ``options``; ``options`` wins.

    Key order follows ``defaults`` first, then new caller keys, so the JSON
    body stays stable for identical inputs.
    """
    payload = dict(defaults)
    payload.update(options)
    return payload


__all__ = ["merge_payload"]
