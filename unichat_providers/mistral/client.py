"""MistralProvider adapter using the OpenAI-compatible Chat Completions API.

Inherits chat, SSE streaming and model listing from
``BaseOpenAIStyleProvider``; only Mistral's identifier, display name and
defaults (``https://api.mistral.ai/v1``, ``mistral-tiny``) live here. The key
falls back to ``MISTRAL_API_KEY``.
"""

from __future__ import annotations

from ..base.openai_style_parts import BaseOpenAIStyleProvider, _ProviderInit
from ..config.defaults import MISTRAL_DEFAULT_BASE_URL, MISTRAL_DEFAULT_MODEL
from ..config.providers import ProviderId


class MistralProvider(BaseOpenAIStyleProvider):
    """Mistral provider built on the OpenAI-style base class."""

    _init = _ProviderInit(
        provider_id=ProviderId.MISTRAL,
        display_name="Mistral",
        default_base_url=MISTRAL_DEFAULT_BASE_URL,
        default_model=MISTRAL_DEFAULT_MODEL,
    )


__all__ = ["MistralProvider"]
