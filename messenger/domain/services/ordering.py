"""
Ordering rules for the read path.

Both sorts are stable: items with equal keys keep their input order.
"""

from datetime import datetime, timezone

from messenger.domain.entities.chat import Chat
from messenger.domain.entities.message import Message

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def sort_chats_by_activity(chats: list[Chat]) -> list[Chat]:
    """
    Most recently active chat first, by the chat's own updatedAt.

    Chats that never received a message have no updatedAt and go last.
    Must be fed authoritative Chat documents, never the user-side summaries,
    whose updatedAt is frozen at chat creation.
    """
    # reverse=True keeps ties in input order
    return sorted(
        chats,
        key=lambda chat: (chat.updated_at is not None, chat.updated_at or _EPOCH),
        reverse=True,
    )


def sort_messages_newest_first(messages: list[Message]) -> list[Message]:
    return sorted(messages, key=lambda message: message.created_at, reverse=True)
