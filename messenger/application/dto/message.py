"""Message DTO for API responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from messenger.domain.entities.message import Message


class MessageDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message_id: str
    chat_id: str
    author_id: str
    text: str
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            message_id=message.id.value,
            chat_id=message.chat_id.value,
            author_id=message.author_id.value,
            text=message.text,
            created_at=message.created_at,
        )
