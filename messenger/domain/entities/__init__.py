"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from messenger.domain.entities.chat import Chat, ChatSummary
from messenger.domain.entities.message import Message
from messenger.domain.entities.user import User

__all__ = [
    "Chat",
    "ChatSummary",
    "Message",
    "User",
]
