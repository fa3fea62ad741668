"""LLM facade.

Holds exactly one provider adapter, validates caller input and forwards
``chat``/``stream_chat``/``models``. Capability checks read the adapter's
:class:`~unichat_providers.base.capabilities.Capabilities` descriptor; the
facade never probes the adapter for methods.

No retries, no caching, no logging: every adapter error reaches the caller
unchanged.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from .base.capabilities import Capabilities
from .base.errors import UnsupportedCapabilityError, ValidationError
from .base.interfaces import LLMProvider
from .base.models import ChatInput, ChatResult
from .base.utils.messages import is_blank_input

EMPTY_MESSAGE_ERROR = "Message cannot be empty"


class LLM:
    """Validating pass-through over a single provider adapter."""

    def __init__(self, provider: LLMProvider) -> None:
        self._provider = provider

    @property
    def provider(self) -> LLMProvider:
        return self._provider

    @property
    def capabilities(self) -> Capabilities:
        return self._provider.capabilities

    @staticmethod
    def _validate(message: ChatInput) -> None:
        if is_blank_input(message):
            raise ValidationError(EMPTY_MESSAGE_ERROR)

    def chat(self, message: ChatInput, **options: Any) -> ChatResult:
        """Validate ``message`` and return the adapter's result unchanged."""
        self._validate(message)
        return self._provider.chat(message, **options)

    def stream_chat(
        self,
        message: ChatInput,
        on_fragment: Optional[Callable[[str], Any]] = None,
        **options: Any,
    ) -> None:
        """Validate, gate on the streaming capability, then delegate.

        Raises:
            ValidationError: blank ``message`` or missing ``on_fragment``.
            UnsupportedCapabilityError: the adapter cannot stream.
        """
        self._validate(message)
        if not self.capabilities.streaming:
            raise UnsupportedCapabilityError(
                f"Provider {self._provider.provider_name} does not support streaming"
            )
        if on_fragment is None:
            raise ValidationError("A fragment callback is required for streaming")
        self._provider.stream_chat(message, on_fragment, **options)  # type: ignore[attr-defined]

    def models(self) -> Optional[List[str]]:
        """Return the adapter's model ids, or ``None`` without model listing."""
        if not self.capabilities.model_listing:
            return None
        return self._provider.models()  # type: ignore[attr-defined]

    def provider_info(self) -> Dict[str, Any]:
        """Describe the held adapter; performs no I/O."""
        caps = self.capabilities
        return {
            "name": self._provider.provider_name,
            "streaming_supported": caps.streaming,
            "models_supported": caps.model_listing,
        }


__all__ = ["LLM", "EMPTY_MESSAGE_ERROR"]
