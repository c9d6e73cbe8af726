"""
Chat Entity - A conversation among a fixed set of users.

The Chat document owns its messages. Users only hold a ChatSummary copy,
written once when the chat is created and never refreshed afterwards.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from messenger.domain.entities.message import Message
from messenger.domain.exceptions.validation_error import DomainValidationError
from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.user_id import UserId


@dataclass
class ChatSummary:
    """Denormalized chat metadata stored inside each member's user document."""

    id: ChatId
    chat_name: str
    chat_users: list[UserId]
    created_at: datetime
    updated_at: Optional[datetime] = None


@dataclass
class Chat:
    id: ChatId
    chat_name: str
    chat_users: list[UserId]
    created_at: datetime
    # Set by the first message, then moved forward by each new one
    updated_at: Optional[datetime] = None
    messages: list[Message] = field(default_factory=list)

    def __post_init__(self):
        if not self.chat_users:
            raise DomainValidationError("A chat needs at least one member")

    @classmethod
    def create(
        cls,
        id: ChatId,
        chat_name: str,
        chat_users: list[UserId],
        created_at: datetime,
    ) -> Chat:
        """Factory for a brand new chat: no messages, no activity yet."""
        return cls(
            id=id,
            chat_name=chat_name,
            chat_users=list(chat_users),
            created_at=created_at,
        )

    def has_member(self, user_id: str) -> bool:
        return any(member.value == user_id for member in self.chat_users)

    def summary(self) -> ChatSummary:
        return ChatSummary(
            id=self.id,
            chat_name=self.chat_name,
            chat_users=list(self.chat_users),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
