"""unichat_providers.config.env
============================

Centralized environment variable mapping for provider credentials and
endpoint overrides.

Design Notes
------------
- ``ENV_MAP`` maps each provider to the variable holding its API key. The
  Ollama entry is optional; the daemon works without a key.
- ``BASE_URL_ENV_MAP`` maps each provider to the variable holding an endpoint
  override. Ollama keeps the daemon's own ``OLLAMA_HOST`` convention.
- Helpers never raise on missing providers or unset variables; callers decide
  how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

from .providers import ProviderId, parse_provider_id

ENV_MAP: Dict[ProviderId, str] = {
    ProviderId.CLAUDE: "ANTHROPIC_API_KEY",
    ProviderId.MISTRAL: "MISTRAL_API_KEY",
    ProviderId.OPENAI: "OPENAI_API_KEY",
    ProviderId.OLLAMA: "OLLAMA_API_KEY",
}

BASE_URL_ENV_MAP: Dict[ProviderId, str] = {
    ProviderId.CLAUDE: "ANTHROPIC_BASE_URL",
    ProviderId.MISTRAL: "MISTRAL_BASE_URL",
    ProviderId.OPENAI: "OPENAI_BASE_URL",
    ProviderId.OLLAMA: "OLLAMA_HOST",
}


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the API key environment variable name for a provider, if known."""
    provider_id = parse_provider_id(provider)
    return ENV_MAP.get(provider_id) if provider_id else None


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key for a provider from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)``; ``(None, None)`` when nothing is set.
        Blank values count as unset.
    """
    name = get_env_var_name(provider)
    if name and (val := os.environ.get(name, "").strip()):
        return val, name
    return None, None


def resolve_base_url_env(provider: str) -> Optional[str]:
    """Return the endpoint override from the environment, or ``None``."""
    provider_id = parse_provider_id(provider)
    name = BASE_URL_ENV_MAP.get(provider_id) if provider_id else None
    if not name:
        return None
    return os.environ.get(name, "").strip() or None


__all__ = [
    "ENV_MAP",
    "BASE_URL_ENV_MAP",
    "get_env_var_name",
    "resolve_provider_key",
    "resolve_base_url_env",
]
