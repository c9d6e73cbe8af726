"""
Document Store Port - Interface for the denormalized document database.
Implementations: messenger/infrastructure/persistence/

Storage layout:
    Users: one document per user, with a copy of every chat summary it belongs to
    Chats: one document per chat, owning its embedded messages

Queries and updates are written in the MongoDB query dialect ({field: value},
$in, $elemMatch, $set, $push). Every adapter supports at least that subset.

Every method raises StorageError when the underlying store fails. Adapters
never leak driver exceptions or raw documents: reads return typed entities.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional, Union

from messenger.domain.entities.chat import Chat, ChatSummary
from messenger.domain.entities.message import Message
from messenger.domain.entities.user import User
from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.user_id import UserId

Entity = Union[User, Chat]
Query = dict[str, Any]


class CollectionName(str, Enum):
    USERS = "Users"
    CHATS = "Chats"


class DocumentStore(ABC):
    # ==================== GENERIC CRUD ====================

    @abstractmethod
    async def insert_one(self, collection: CollectionName, entity: Entity) -> None: ...

    @abstractmethod
    async def find_one(
        self, collection: CollectionName, query: Query
    ) -> Optional[Entity]: ...

    @abstractmethod
    async def update_one(
        self, collection: CollectionName, query: Query, update: Query
    ) -> bool:
        """Update the first matching document, inserting one if nothing matches."""
        ...

    @abstractmethod
    async def documents_existence(
        self, collection: CollectionName, ids: list[str]
    ) -> list[bool]:
        """One flag per input id, in input order."""
        ...

    async def users_existence(self, user_ids: list[str]) -> list[bool]:
        return await self.documents_existence(CollectionName.USERS, user_ids)

    # ==================== FAN-OUT WRITES ====================

    @abstractmethod
    async def add_chat_summary_to_users(self, summary: ChatSummary) -> None:
        """
        Append the summary to `chats` of every user listed in summary.chat_users.

        One logical call for all members. Raises StorageError when no user
        document was modified.
        """
        ...

    @abstractmethod
    async def append_message_to_chat(self, message: Message) -> None:
        """Append to `messages` of chat message.chat_id; StorageError if nothing changed."""
        ...

    # ==================== READ PATH ====================

    @abstractmethod
    async def sorted_chats_for_user(self, user_id: UserId) -> list[Chat]:
        """
        The user's chats, most recently active first, without their messages.

        Reads the authoritative Chat documents, not the user's summaries.
        Unknown user → empty list.
        """
        ...

    @abstractmethod
    async def messages_for_chat(self, chat_id: ChatId) -> list[Message]:
        """Messages of the chat, newest first. Unknown chat → empty list."""
        ...
