"""Capability descriptors for provider adapters.

Each adapter class declares a :class:`Capabilities` value describing the
optional operations it implements. The facade queries the descriptor directly
instead of probing the adapter for methods at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Capabilities:
    """Optional operations supported by an adapter.

    Attributes:
        streaming: ``stream_chat`` is implemented.
        model_listing: ``models`` is implemented.
    """

    streaming: bool = False
    model_listing: bool = False


CHAT_ONLY = Capabilities()
STREAMING_AND_MODELS = Capabilities(streaming=True, model_listing=True)


__all__ = [
    "Capabilities",
    "CHAT_ONLY",
    "STREAMING_AND_MODELS",
]
