"""
Provider-agnostic interfaces (Protocols) for the providers layer.

Re-exports the Protocols split into single-class modules under
``unichat_providers.base.interfaces_parts``. Capability support is declared
through :class:`~unichat_providers.base.capabilities.Capabilities`, not by
checking these Protocols at runtime.
"""

from __future__ import annotations

from .interfaces_parts import (
    FragmentSink,
    LLMProvider,
    ModelListingProvider,
    SupportsStreaming,
)

__all__ = [
    "LLMProvider",
    "SupportsStreaming",
    "ModelListingProvider",
    "FragmentSink",
]
