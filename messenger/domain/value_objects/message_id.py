"""
MessageId Value Object - Identity of a message embedded in a chat.

Unique across every chat, not only the owning one.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MessageId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Message ID cannot be empty")

    def __str__(self) -> str:
        return self.value
