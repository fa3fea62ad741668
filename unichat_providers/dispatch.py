"""Dispatch entry point.

Resolves a provider id (explicit argument, else the configured default),
builds a fresh adapter through :class:`ProviderFactory`, wraps it in an
:class:`LLM` facade and forwards the call. Every call gets its own
adapter/facade pair.

Example::

    import unichat_providers as uc

    uc.configure(default_provider="ollama")
    print(uc.chat("Hello").content)
    uc.stream_chat("Tell me a story", lambda text: print(text, end=""), provider="claude")
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

from .base.factory import ProviderFactory
from .base.models import ChatInput, ChatResult
from .config import Configuration, ProviderId, get_configuration
from .llm import LLM

ProviderArg = Optional[Union[str, ProviderId]]


def build_llm(provider: ProviderArg = None, *, config: Optional[Configuration] = None, **adapter_kwargs: Any) -> LLM:
    """Return a facade over a freshly constructed adapter.

    ``provider`` falls back to ``config.default_provider``. ``adapter_kwargs``
    go to the adapter constructor (``api_key``, ``base_url``, ``client``...).
    """
    cfg = config or get_configuration()
    target = provider if provider is not None else cfg.default_provider
    return LLM(ProviderFactory.create(target, config=cfg, **adapter_kwargs))


def chat(
    message: ChatInput,
    provider: ProviderArg = None,
    *,
    config: Optional[Configuration] = None,
    **options: Any,
) -> ChatResult:
    """One-shot chat against ``provider`` (or the configured default)."""
    return build_llm(provider, config=config).chat(message, **options)


def stream_chat(
    message: ChatInput,
    on_fragment: Optional[Callable[[str], Any]] = None,
    provider: ProviderArg = None,
    *,
    config: Optional[Configuration] = None,
    **options: Any,
) -> None:
    """Stream fragments from ``provider`` (or the configured default) into ``on_fragment``.

    Raises:
        ValidationError: blank ``message`` or missing ``on_fragment``; raised
            before any request is sent.
    """
    build_llm(provider, config=config).stream_chat(message, on_fragment, **options)


__all__ = ["build_llm", "chat", "stream_chat"]
