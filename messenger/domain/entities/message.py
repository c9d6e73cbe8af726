"""
Message Entity - A single message embedded in a chat.
"""

from dataclasses import dataclass
from datetime import datetime

from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.message_id import MessageId
from messenger.domain.value_objects.user_id import UserId


@dataclass
class Message:
    id: MessageId
    chat_id: ChatId
    author_id: UserId
    text: str
    created_at: datetime
