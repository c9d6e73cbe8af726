"""Message commands."""

from .create_message import CreateMessageCommand, CreateMessageHandler

__all__ = [
    "CreateMessageCommand",
    "CreateMessageHandler",
]
