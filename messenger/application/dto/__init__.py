"""Response DTOs."""

from messenger.application.dto.chat import ChatDTO
from messenger.application.dto.message import MessageDTO

__all__ = [
    "ChatDTO",
    "MessageDTO",
]
