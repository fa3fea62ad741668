"""
Ollama provider package.

Exports:
- OllamaProvider: Adapter for a locally hosted Ollama daemon
"""

from .client import OllamaProvider

__all__ = ["OllamaProvider"]
