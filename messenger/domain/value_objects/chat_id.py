"""
ChatId Value Object - Identity of a document in the Chats collection.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChatId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("ChatId cannot be empty")

    def __str__(self) -> str:
        return self.value
