"""
MongoDB Document Store Implementation.

Implements DocumentStore with the pymongo async API. Driver exceptions never
leave this module: every call runs inside _storage_errors, which logs, counts
and re-raises them as StorageError tagged with the operation name.
"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from messenger.config.logging_config import ComponentLogger, component_logger
from messenger.domain.entities.chat import Chat, ChatSummary
from messenger.domain.entities.message import Message
from messenger.domain.exceptions import StorageError
from messenger.domain.ports.document_store import (
    CollectionName,
    DocumentStore,
    Entity,
    Query,
)
from messenger.domain.services.ordering import (
    sort_chats_by_activity,
    sort_messages_newest_first,
)
from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.user_id import UserId
from messenger.infrastructure.persistence.mappers import (
    document_to_chat,
    document_to_entity,
    document_to_message,
    entity_to_document,
    message_to_document,
    summary_to_document,
)
from messenger.observability.metrics import increment_storage_failure


class MongoDocumentStore(DocumentStore):
    _database: AsyncDatabase

    def __init__(
        self, database: AsyncDatabase, logger: Optional[ComponentLogger] = None
    ):
        """
        Args:
            database: Database of a connected AsyncMongoClient (injected by DI container)
            logger: Defaults to the "DocumentStore" component logger
        """
        self._database = database
        self._logger = logger or component_logger("DocumentStore")

    def _collection(self, collection: CollectionName) -> AsyncCollection:
        return self._database[collection.value]

    @contextmanager
    def _storage_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except PyMongoError as e:
            self._logger.error(f"{operation} failed: {e}")
            increment_storage_failure(operation)
            raise StorageError(operation, str(e)) from e

    def _nothing_modified(self, operation: str, detail: str) -> StorageError:
        self._logger.error(f"{operation} modified no document ({detail})")
        increment_storage_failure(operation)
        return StorageError(operation, f"no document modified ({detail})")

    # ==================== GENERIC CRUD ====================

    async def insert_one(self, collection: CollectionName, entity: Entity) -> None:
        document = entity_to_document(collection, entity)
        with self._storage_errors("insert_one"):
            await self._collection(collection).insert_one(document)

    async def find_one(
        self, collection: CollectionName, query: Query
    ) -> Optional[Entity]:
        with self._storage_errors("find_one"):
            document = await self._collection(collection).find_one(query)
        return document_to_entity(collection, document)

    async def update_one(
        self, collection: CollectionName, query: Query, update: Query
    ) -> bool:
        with self._storage_errors("update_one"):
            result = await self._collection(collection).update_one(
                query, update, upsert=True
            )
        return result.modified_count > 0 or result.upserted_id is not None

    async def documents_existence(
        self, collection: CollectionName, ids: list[str]
    ) -> list[bool]:
        with self._storage_errors("documents_existence"):
            cursor = self._collection(collection).find(
                {"_id": {"$in": ids}}, {"_id": 1}
            )
            documents = await cursor.to_list(None)
        found = {document["_id"] for document in documents}
        return [document_id in found for document_id in ids]

    # ==================== FAN-OUT WRITES ====================

    async def add_chat_summary_to_users(self, summary: ChatSummary) -> None:
        user_ids = [user_id.value for user_id in summary.chat_users]
        with self._storage_errors("add_chat_summary_to_users"):
            result = await self._collection(CollectionName.USERS).update_many(
                {"_id": {"$in": user_ids}},
                {"$push": {"chats": summary_to_document(summary)}},
            )
        if result.modified_count == 0:
            raise self._nothing_modified(
                "add_chat_summary_to_users", f"chat {summary.id}"
            )
        self._logger.info(
            f"Chat {summary.id} linked to "
            f"{result.modified_count} of {len(user_ids)} users"
        )

    async def append_message_to_chat(self, message: Message) -> None:
        with self._storage_errors("append_message_to_chat"):
            result = await self._collection(CollectionName.CHATS).update_one(
                {"_id": message.chat_id.value},
                {"$push": {"messages": message_to_document(message)}},
            )
        if result.modified_count == 0:
            raise self._nothing_modified(
                "append_message_to_chat", f"chat {message.chat_id}"
            )

    # ==================== READ PATH ====================

    async def sorted_chats_for_user(self, user_id: UserId) -> list[Chat]:
        with self._storage_errors("sorted_chats_for_user"):
            user = await self._collection(CollectionName.USERS).find_one(
                {"_id": user_id.value}, {"chats._id": 1}
            )
            if user is None:
                return []
            chat_ids = [summary["_id"] for summary in user.get("chats", [])]
            cursor = self._collection(CollectionName.CHATS).find(
                {"_id": {"$in": chat_ids}}, {"messages": 0}
            )
            documents: list[dict[str, Any]] = await cursor.to_list(None)

        # $in returns documents in storage order; restore the user's summary order
        by_id = {document["_id"]: document for document in documents}
        chats = [
            document_to_chat(by_id[chat_id]) for chat_id in chat_ids if chat_id in by_id
        ]
        return sort_chats_by_activity(chats)

    async def messages_for_chat(self, chat_id: ChatId) -> list[Message]:
        with self._storage_errors("messages_for_chat"):
            chat = await self._collection(CollectionName.CHATS).find_one(
                {"_id": chat_id.value}, {"messages": 1}
            )
        if chat is None:
            return []
        messages = [document_to_message(m) for m in chat.get("messages", [])]
        return sort_messages_newest_first(messages)
