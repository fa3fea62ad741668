"""unichat_providers.config.defaults
================================

Central place for small, stable default values used across the package.
These defaults can be overridden through :class:`~unichat_providers.config.Configuration`,
environment variables, or explicit constructor arguments.

Only plain constants live here; nothing is imported from the rest of the
package.
"""

from __future__ import annotations

# ---- Process-wide defaults ----
DEFAULT_PROVIDER = "openai"
# Read timeout applied to every outbound HTTP call (seconds).
DEFAULT_TIMEOUT_SECONDS = 30.0
# Connect/write/pool timeout for the shared httpx clients (seconds).
DEFAULT_CONNECT_TIMEOUT_SECONDS = 10.0

# ---- Generation defaults shared by the adapters ----
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1000

# ---- Claude (Anthropic Messages API) ----
CLAUDE_DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
CLAUDE_DEFAULT_MODEL = "claude-3-haiku-20240307"
CLAUDE_API_VERSION = "2023-06-01"
CLAUDE_KNOWN_MODELS = (
    "claude-3-opus-20240229",
    "claude-3-sonnet-20240229",
    "claude-3-haiku-20240307",
)

# ---- Mistral ----
MISTRAL_DEFAULT_BASE_URL = "https://api.mistral.ai/v1"
MISTRAL_DEFAULT_MODEL = "mistral-tiny"

# ---- OpenAI ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
OPENAI_DEFAULT_MODEL = "gpt-3.5-turbo"

# ---- Ollama (local daemon) ----
OLLAMA_DEFAULT_HOST = "localhost"
OLLAMA_DEFAULT_PORT = 11434
OLLAMA_DEFAULT_MODEL = "llama2"


__all__ = [
    "DEFAULT_PROVIDER",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_CONNECT_TIMEOUT_SECONDS",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_MAX_TOKENS",
    "CLAUDE_DEFAULT_BASE_URL",
    "CLAUDE_DEFAULT_MODEL",
    "CLAUDE_API_VERSION",
    "CLAUDE_KNOWN_MODELS",
    "MISTRAL_DEFAULT_BASE_URL",
    "MISTRAL_DEFAULT_MODEL",
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_DEFAULT_MODEL",
    "OLLAMA_DEFAULT_HOST",
    "OLLAMA_DEFAULT_PORT",
    "OLLAMA_DEFAULT_MODEL",
]
