"""Chat commands."""

from .create_chat import CreateChatCommand, CreateChatHandler

__all__ = [
    "CreateChatCommand",
    "CreateChatHandler",
]
