"""Chat queries."""

from .get_chats import GetChatsHandler, GetChatsQuery

__all__ = [
    "GetChatsHandler",
    "GetChatsQuery",
]
