"""
Mistral provider package.

Exports:
- MistralProvider: OpenAI-style adapter for the Mistral API
"""

from .client import MistralProvider

__all__ = ["MistralProvider"]
