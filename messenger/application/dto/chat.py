"""Chat DTO for API responses, in the stored camelCase shape."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from messenger.domain.entities.chat import Chat


class ChatDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")
    chat_name: str
    chat_users: list[str]
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, chat: Chat) -> "ChatDTO":
        return cls(
            id=chat.id.value,
            chat_name=chat.chat_name,
            chat_users=[user_id.value for user_id in chat.chat_users],
            created_at=chat.created_at,
            updated_at=chat.updated_at,
        )
