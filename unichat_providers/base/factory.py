"""Provider Factory utilities.

Purpose
-------
Centralize creation of adapter instances from a provider identifier.
Adapters are imported lazily using ``importlib`` so that importing the
package does not pull in every adapter module.

Lookup
------
The mapping is keyed by :class:`ProviderId` and covers every member of the
enum, so an identifier outside the closed set is the only lookup failure.
Identifiers are accepted as enum members or case-insensitive strings.

Failure semantics
-----------------
- Unknown identifier -> :class:`UnknownProviderError` naming it.
- Adapter constructor errors (e.g. ``ConfigurationError`` for a missing key)
  propagate unchanged so callers can branch on their type.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Optional, Tuple, Type, Union

from ..config import Configuration, get_configuration
from ..config.providers import ProviderId, parse_provider_id
from .errors import UnknownProviderError
from .interfaces import LLMProvider


def create_provider(provider: Union[str, ProviderId], **kwargs: Any) -> LLMProvider:
    """Compatibility helper that delegates to :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


class ProviderFactory:
    """Create provider adapters based on a canonical id (e.g., ``"claude"``).

    Design notes
    ------------
    - Uses ``importlib.import_module`` for explicit import semantics.
    - ``_PROVIDERS`` is exhaustive over :class:`ProviderId`; adding an enum
      member without a mapping entry is caught by the factory tests.
    """

    # Map canonical provider ids to import paths and class names
    _PROVIDERS: Dict[ProviderId, Dict[str, str]] = {
        ProviderId.CLAUDE: {"module": "unichat_providers.claude.client", "class": "ClaudeProvider"},
        ProviderId.MISTRAL: {"module": "unichat_providers.mistral.client", "class": "MistralProvider"},
        ProviderId.OPENAI: {"module": "unichat_providers.openai.client", "class": "OpenAIProvider"},
        ProviderId.OLLAMA: {"module": "unichat_providers.ollama.client", "class": "OllamaProvider"},
    }

    @classmethod
    def resolve(cls, provider: Union[str, ProviderId]) -> ProviderId:
        """Return the canonical id or raise :class:`UnknownProviderError`."""
        provider_id = parse_provider_id(provider)
        if provider_id is None or provider_id not in cls._PROVIDERS:
            raise UnknownProviderError(provider)
        return provider_id

    @classmethod
    def adapter_class(cls, provider: Union[str, ProviderId]) -> Type[Any]:
        """Import and return the adapter class for ``provider``."""
        spec = cls._PROVIDERS[cls.resolve(provider)]
        module = import_module(spec["module"])
        return getattr(module, spec["class"])

    @classmethod
    def create(
        cls,
        provider: Union[str, ProviderId],
        *,
        config: Optional[Configuration] = None,
        **kwargs: Any,
    ) -> LLMProvider:
        """Create a provider adapter instance.

        Parameters
        ----------
        provider:
            Canonical provider id (e.g., ``"mistral"`` or ``ProviderId.OLLAMA``).
        config:
            Configuration handed to the adapter; the process-wide one when
            omitted.
        **kwargs:
            Adapter-specific constructor kwargs (``api_key``, ``model``,
            ``base_url``, ``client``, Ollama ``host``/``port``).

        Raises
        ------
        UnknownProviderError
            If ``provider`` is outside the closed set.
        """
        klass = cls.adapter_class(provider)
        return klass(config=config or get_configuration(), **kwargs)

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported canonical provider ids in declaration order."""
        return tuple(provider_id.value for provider_id in cls._PROVIDERS)


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]
