"""Claude (Anthropic Messages API) adapter."""

from .client import ClaudeProvider

__all__ = ["ClaudeProvider"]
