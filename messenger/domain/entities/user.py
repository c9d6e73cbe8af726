"""
User Entity - A registered participant.
"""

from dataclasses import dataclass, field
from datetime import datetime

from messenger.domain.entities.chat import ChatSummary
from messenger.domain.value_objects.user_id import UserId


@dataclass
class User:
    id: UserId
    user_name: str
    created_at: datetime
    # Insertion order = order in which the user joined the chats
    chats: list[ChatSummary] = field(default_factory=list)
