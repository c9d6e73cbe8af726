"""Message queries."""

from .get_messages import GetMessagesHandler, GetMessagesQuery

__all__ = [
    "GetMessagesHandler",
    "GetMessagesQuery",
]
