"""Process-wide configuration for providers.

Goals
-----
* One explicit configuration value passed to the dispatch layer and to every
  adapter constructor.
* A process-wide default instance, created lazily on first access and
  replaced only through :func:`configure`, which is expected to run once at
  startup before concurrent use begins.
* Layered lookups for credentials and endpoints (later wins only when earlier
  layers are empty):

    explicit argument -> ``Configuration`` -> environment variable -> default

Optional config file
--------------------
``Configuration.from_file`` accepts JSON or YAML with the same field names::

    default_provider: ollama
    timeout: 60
    api_keys:
      claude: sk-ant-...
    endpoints:
      ollama: http://gpu-box:11434

Public API
----------
* Configuration
* get_configuration() -> Configuration
* configure(config=None, **fields) -> Configuration
* reset_configuration() -> None
* resolve_api_key(provider, config, explicit=None) -> str | None
* resolve_base_url(provider, config, explicit, default) -> str
"""
from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

from ..base.errors import ConfigurationError
from .defaults import DEFAULT_PROVIDER, DEFAULT_TIMEOUT_SECONDS
from .env import resolve_base_url_env, resolve_provider_key
from .providers import ProviderId, parse_provider_id


class Configuration(BaseModel):
    """Settings shared by the dispatch layer and the adapters.

    Attributes
    ----------
    default_provider:
        Provider used when a dispatch call does not name one.
    api_keys:
        Provider -> API key. Takes precedence over environment variables.
    endpoints:
        Provider -> base URL override.
    timeout:
        Read timeout in seconds applied to every HTTP call.
    """

    model_config = ConfigDict(validate_assignment=True)

    default_provider: ProviderId = ProviderId(DEFAULT_PROVIDER)
    api_keys: Dict[ProviderId, str] = Field(default_factory=dict)
    endpoints: Dict[ProviderId, str] = Field(default_factory=dict)
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Configuration":
        """Validate a plain mapping, wrapping pydantic errors."""
        try:
            return cls.model_validate(dict(data))
        except ValueError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Configuration":
        """Load configuration from a JSON or YAML file.

        Files ending in ``.yaml``/``.yml`` are parsed with PyYAML; anything else
        is parsed as JSON.

        Raises
        ------
        ConfigurationError
            When the file is unreadable, unparsable, or not a mapping.
        """
        file_path = Path(path).expanduser()
        try:
            text = file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {exc}") from exc
        try:
            if file_path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(text) or {}
            else:
                data = json.loads(text)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Cannot parse configuration file {file_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {file_path} must contain a mapping")
        return cls.from_mapping(data)


_CONFIGURATION: Optional[Configuration] = None
_LOCK = threading.Lock()


def get_configuration() -> Configuration:
    """Return the process-wide configuration, creating it on first access."""
    global _CONFIGURATION  # noqa: PLW0603 - documented module singleton
    if _CONFIGURATION is None:
        with _LOCK:
            if _CONFIGURATION is None:
                _CONFIGURATION = Configuration()
    return _CONFIGURATION


def configure(config: Optional[Configuration] = None, **fields: Any) -> Configuration:
    """Install the process-wide configuration.

    Parameters
    ----------
    config:
        Complete configuration to install. When omitted the current value
        (or a fresh default) is used as the starting point.
    **fields:
        Field overrides applied on top, validated like the constructor.

    Returns
    -------
    Configuration
        The installed instance.
    """
    global _CONFIGURATION  # noqa: PLW0603 - documented module singleton
    with _LOCK:
        base = config if config is not None else (_CONFIGURATION or Configuration())
        if fields:
            base = Configuration.from_mapping({**base.model_dump(), **fields})
        _CONFIGURATION = base
        return base


def reset_configuration() -> None:
    """Drop the process-wide configuration (tests and reloads)."""
    global _CONFIGURATION  # noqa: PLW0603 - documented module singleton
    with _LOCK:
        _CONFIGURATION = None


def _lookup(mapping: Mapping[Any, str], provider_id: ProviderId) -> Optional[str]:
    # Mutated dicts may hold plain string keys; ProviderId does not hash like its value.
    value = mapping.get(provider_id) or mapping.get(provider_id.value)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def resolve_api_key(
    provider: Union[str, ProviderId],
    config: Configuration,
    explicit: Optional[str] = None,
) -> Optional[str]:
    """Resolve an API key: explicit argument, configuration, then environment."""
    if explicit:
        return explicit
    provider_id = parse_provider_id(provider)
    if provider_id is None:
        return None
    if key := _lookup(config.api_keys, provider_id):
        return key
    value, _ = resolve_provider_key(provider_id.value)
    return value


def resolve_base_url(
    provider: Union[str, ProviderId],
    config: Configuration,
    explicit: Optional[str],
    default: str,
) -> str:
    """Resolve a base URL: explicit argument, configuration, environment, default.

    Trailing slashes are stripped so endpoint paths can be appended directly.
    """
    url = explicit
    provider_id = parse_provider_id(provider)
    if not url and provider_id is not None:
        url = _lookup(config.endpoints, provider_id) or resolve_base_url_env(provider_id.value)
    return (url or default).rstrip("/")


__all__ = [
    "Configuration",
    "ProviderId",
    "parse_provider_id",
    "get_configuration",
    "configure",
    "reset_configuration",
    "resolve_api_key",
    "resolve_base_url",
]
