"""Model DTOs split one class per module."""

from .chat_result import ChatResult
from .message import ChatInput, Message, Role

__all__ = ["ChatResult", "ChatInput", "Message", "Role"]
