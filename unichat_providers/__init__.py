"""unichat_providers package

Unified chat client over several LLM backends (Claude, Mistral, OpenAI and a
local Ollama daemon).

Purpose:
    Issue one ``chat`` or ``stream_chat`` call and receive a normalized
    :class:`ChatResult` (or a sequence of text fragments) regardless of which
    backend answered.

Public API (re-exported):
    - Version: ``__version__``
    - Dispatch: :func:`chat`, :func:`stream_chat`, :func:`build_llm`
    - Facade: :class:`LLM`
    - Factory: :class:`ProviderFactory`, :class:`ProviderId`
    - Configuration: :class:`Configuration`, :func:`configure`,
      :func:`get_configuration`, :func:`reset_configuration`
    - DTOs: :class:`ChatResult`, :class:`Message`
    - Exceptions: :class:`UnichatError` and its subclasses
"""

from .config import (
    Configuration,
    ProviderId,
    configure,
    get_configuration,
    reset_configuration,
)
from .base.capabilities import Capabilities
from .base.errors import (
    ConfigurationError,
    ProviderConnectionError,
    RemoteError,
    RemoteErrorKind,
    UnichatError,
    UnknownProviderError,
    UnsupportedCapabilityError,
    ValidationError,
)
from .base.factory import ProviderFactory
from .base.models import ChatResult, Message
from .llm import LLM
from .dispatch import build_llm, chat, stream_chat

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Dispatch
    "chat",
    "stream_chat",
    "build_llm",
    # Facade / factory
    "LLM",
    "ProviderFactory",
    "ProviderId",
    "Capabilities",
    # Configuration
    "Configuration",
    "configure",
    "get_configuration",
    "reset_configuration",
    # DTOs
    "ChatResult",
    "Message",
    # Exceptions
    "UnichatError",
    "ValidationError",
    "UnknownProviderError",
    "ConfigurationError",
    "UnsupportedCapabilityError",
    "ProviderConnectionError",
    "RemoteError",
    "RemoteErrorKind",
]
