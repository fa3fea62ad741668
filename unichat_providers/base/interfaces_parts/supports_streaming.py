"""SupportsStreaming Protocol (single-class module).

Contract for adapters whose ``capabilities.streaming`` is ``True``.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol

from ..models import ChatInput

FragmentSink = Callable[[str], Any]


class SupportsStreaming(Protocol):
    """Adapters that deliver incremental text fragments to a caller sink.

    ``on_fragment`` is invoked once per non-empty fragment, in arrival order,
    until the response body is exhausted.
    """

    def stream_chat(
        self,
        message: ChatInput,
        on_fragment: Optional[FragmentSink] = None,
        **options: Any,
    ) -> None:  # pragma: no cover - interface
        """Stream chat responses into ``on_fragment``."""
        ...
