"""Ollama helpers module.

Purpose:
- Side-effect-free utilities for the Ollama adapter: endpoint normalization,
  payload construction, header building and response decoding, keeping
  ``client.py`` focused on orchestration.

Wire format notes:
- ``POST /api/generate`` takes a single ``prompt`` string, so conversations
  are flattened to ``"role: content"`` lines. Sampling parameters travel in
  the nested ``options`` object.
- Streaming replies are NDJSON; each line carries a ``response`` fragment.
- ``GET /api/tags`` lists local models under ``models[].name``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import httpx

from ..base.errors import LOCAL_STATUS_MAP, RemoteErrorKind, StatusPolicy
from ..base.http.adapter_mixin import JSON_HEADERS
from ..base.models import ChatInput, ChatResult
from ..base.utils.messages import flatten_conversation
from ..base.utils.payload import merge_payload
from ..config.defaults import OLLAMA_DEFAULT_HOST, OLLAMA_DEFAULT_PORT

PROVIDER = "ollama"
GENERATE_PATH = "/api/generate"
TAGS_PATH = "/api/tags"
PULL_PATH = "/api/pull"
SHOW_PATH = "/api/show"

_MESSAGES = {
    RemoteErrorKind.AUTH_FAILED: "Invalid Ollama API key",
    RemoteErrorKind.NOT_FOUND: "Model not found. You may need to pull it first with: ollama pull <model>",
    RemoteErrorKind.SERVER_FAULT: "Ollama server error",
}
_HINTS = {RemoteErrorKind.NOT_FOUND: "ollama pull <model>"}

STATUS_POLICY = StatusPolicy(provider=PROVIDER, status_map=LOCAL_STATUS_MAP, messages=_MESSAGES, hints=_HINTS)

# Daemons behind an auth proxy reject a bad Bearer token with 401.
KEYED_STATUS_POLICY = StatusPolicy(
    provider=PROVIDER,
    status_map={**LOCAL_STATUS_MAP, 401: RemoteErrorKind.AUTH_FAILED},
    messages=_MESSAGES,
    hints=_HINTS,
)


def status_policy(api_key: Optional[str]) -> StatusPolicy:
    """Return the keyed policy when a Bearer key is sent, else the keyless one."""
    return KEYED_STATUS_POLICY if api_key else STATUS_POLICY


def pull_hint(model: str) -> str:
    return f"ollama pull {model}"


def host_port_url(host: Optional[str], port: Optional[int]) -> str:
    """Return ``http://host:port`` with daemon defaults for missing parts."""
    return f"http://{host or OLLAMA_DEFAULT_HOST}:{port or OLLAMA_DEFAULT_PORT}"


def normalize_base_url(url: str) -> str:
    """Accept ``OLLAMA_HOST``-style values such as ``gpu-box`` or ``0.0.0.0:11434``.

    Scheme-less values get ``http://`` and, when they carry no port, the
    daemon's default port. URLs with an explicit scheme are kept as given.
    """
    url = url.strip().rstrip("/")
    if "://" in url:
        return url
    parsed = httpx.URL(f"http://{url}")
    if parsed.port is None:
        parsed = parsed.copy_with(port=OLLAMA_DEFAULT_PORT)
    return str(parsed).rstrip("/")


def build_headers(api_key: Optional[str]) -> Dict[str, str]:
    """JSON headers plus Bearer auth when a key is configured (proxied daemons)."""
    if api_key:
        return {**JSON_HEADERS, "Authorization": f"Bearer {api_key}"}
    return dict(JSON_HEADERS)


def build_payload(
    message: ChatInput,
    *,
    model: str,
    temperature: float,
    stream: bool,
    options: Mapping[str, Any],
) -> Dict[str, Any]:
    """Construct the ``/api/generate`` body.

    Caller ``options`` are merged into the nested ``options`` object and may
    override ``temperature``.
    """
    return {
        "model": model,
        "prompt": flatten_conversation(message),
        "stream": stream,
        "options": merge_payload({"temperature": temperature}, options),
    }


def parse_response(body: Any) -> ChatResult:
    """Decode a ``/api/generate`` body; ``context`` and ``done`` go to ``extra``."""
    data: Mapping[str, Any] = body if isinstance(body, dict) else {}
    usage = None
    if "prompt_eval_count" in data or "eval_count" in data:
        usage = {
            "prompt_tokens": data.get("prompt_eval_count"),
            "completion_tokens": data.get("eval_count"),
        }
    return ChatResult(
        content=data.get("response"),
        model=data.get("model"),
        usage=usage,
        extra={"context": data.get("context"), "done": data.get("done")},
    )


def extract_model_names(body: Any) -> List[str]:
    """Project ``models[].name`` from a ``/api/tags`` body; malformed -> ``[]``."""
    models = body.get("models") if isinstance(body, dict) else None
    if not isinstance(models, list):
        return []
    return [m["name"] for m in models if isinstance(m, dict) and isinstance(m.get("name"), str)]


__all__ = [
    "PROVIDER",
    "GENERATE_PATH",
    "TAGS_PATH",
    "PULL_PATH",
    "SHOW_PATH",
    "STATUS_POLICY",
    "KEYED_STATUS_POLICY",
    "status_policy",
    "pull_hint",
    "host_port_url",
    "normalize_base_url",
    "build_headers",
    "build_payload",
    "parse_response",
    "extract_model_names",
]
