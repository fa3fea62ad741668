"""Interface Protocols, one per module."""

from .llm_provider import LLMProvider
from .model_listing_provider import ModelListingProvider
from .supports_streaming import FragmentSink, SupportsStreaming

__all__ = ["LLMProvider", "SupportsStreaming", "ModelListingProvider", "FragmentSink"]
