"""Base structured logging utilities for the provider layer.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid sprinkling ad-hoc logger setup across adapters.

All adapter loggers are children of the shared ``providers`` logger, which
owns a single stderr handler. The level comes from ``PROVIDERS_LOG_LEVEL``
(default ``WARNING`` so library use stays quiet) and can be changed at runtime
with :func:`configure_logger`.

Adapters log lifecycle events only (``chat.start``, ``chat.end``,
``stream.start``, ``stream.end``, ``models.list``). Failures are raised to the
caller and are not logged here.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "providers"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_CONSOLE_HANDLER_ATTR = "_providers_console_handler"


def _parse_level(value: str | int | None, default: int = logging.WARNING) -> int:
    """Parse a logging level name or number, falling back to ``default``."""
    if value is None or value == "":
        return default
    if isinstance(value, int):
        return value
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool = True) -> logging.Logger:
    """Initialize (once) and return the shared ``providers`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    if any(getattr(h, _CONSOLE_HANDLER_ATTR, False) for h in logger.handlers):
        return logger
    level = _parse_level(os.getenv("PROVIDERS_LOG_LEVEL"))
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: str = BASE_LOGGER_NAME) -> logging.Logger:
    """Return a logger under the shared ``providers`` hierarchy.

    ``name`` should be dotted under ``providers`` (e.g. ``providers.claude``)
    so records reach the shared handler.
    """
    base = _ensure_base_logger()
    if name == BASE_LOGGER_NAME:
        return base
    return logging.getLogger(name)


def configure_logger(*, level: int | str | None = None, json_mode: bool = True) -> logging.Logger:
    """Reconfigure the shared providers logger at runtime.

    Parameters
    ----------
    level:
        Numeric level or name (e.g. ``"DEBUG"``). ``None`` keeps the current one.
    json_mode:
        JSON formatter (default) or the plain text format.
    """
    logger = _ensure_base_logger(json_mode)
    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level))
    for handler in logger.handlers:
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            handler.setFormatter(_make_formatter(json_mode))
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON line.

    Keys whose value is ``None`` are dropped. Nothing is serialized when the
    logger is not enabled for ``level``.
    """
    if not logger.isEnabledFor(level):
        return
    payload: dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
