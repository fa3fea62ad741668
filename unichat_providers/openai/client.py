"""OpenAIProvider adapter.

Raw ``httpx`` calls against ``/chat/completions`` and ``/models``; all
behavior is inherited from ``BaseOpenAIStyleProvider``. Defaults:
``https://api.openai.com/v1`` and ``gpt-3.5-turbo``; the key falls back to
``OPENAI_API_KEY`` and the endpoint to ``OPENAI_BASE_URL`` so compatible
gateways can be targeted.
"""

from __future__ import annotations

from ..base.openai_style_parts import BaseOpenAIStyleProvider, _ProviderInit
from ..config.defaults import OPENAI_DEFAULT_BASE_URL, OPENAI_DEFAULT_MODEL
from ..config.providers import ProviderId


class OpenAIProvider(BaseOpenAIStyleProvider):
    """OpenAI provider built on the OpenAI-style base class."""

    _init = _ProviderInit(
        provider_id=ProviderId.OPENAI,
        display_name="OpenAI",
        default_base_url=OPENAI_DEFAULT_BASE_URL,
        default_model=OPENAI_DEFAULT_MODEL,
    )


__all__ = ["OpenAIProvider"]
