"""
Provider-agnostic DTOs.

Re-exports the dataclasses under ``unichat_providers.base.models_parts`` so
callers have a single stable import path.
"""

from .models_parts import ChatInput, ChatResult, Message, Role

__all__ = ["ChatInput", "ChatResult", "Message", "Role"]
