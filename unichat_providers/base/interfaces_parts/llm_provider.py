"""LLMProvider Protocol (single-class module).

Defines the minimal chat interface contract for provider adapters.
"""

from __future__ import annotations

from typing import Any, Protocol

from ..capabilities import Capabilities
from ..models import ChatInput, ChatResult


class LLMProvider(Protocol):
    """Minimal interface for Large Language Model providers.

    Implementations translate the uniform chat contract into one backend's
    wire format and normalize the answer into ``ChatResult``. Adapters hold
    configuration only; every call is independent.
    """

    capabilities: Capabilities

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"claude"`` or ``"ollama"``."""
        ...

    def chat(self, message: ChatInput, **options: Any) -> ChatResult:
        """Execute a single chat completion request.

        Failure handling: raise the package's typed errors; never return
        partial results on failure.
        """
        ...
