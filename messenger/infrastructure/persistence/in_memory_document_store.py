"""
In-memory Document Store.

Keeps the same camelCase documents the MongoDB adapter writes and understands
the query subset the application uses:

    {field: value}                  equality
    {field: {"$in": [...]}}         membership
    {field: {"$elemMatch": {...}}}  any element of an array matches
    {"$set": {...}}, {"$push": {...}}  updates

Documents are deep-copied on the way in and out, so callers can never mutate
stored state. Used by the test suite and by STORE_BACKEND=memory.
"""

import copy
from typing import Any, Optional

from bson import ObjectId

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

_MISSING = object()


def _matches(document: dict[str, Any], query: Query) -> bool:
    for field, condition in query.items():
        value = document.get(field, _MISSING)
        if isinstance(condition, dict) and any(k.startswith("$") for k in condition):
            for operator, operand in condition.items():
                if operator == "$in":
                    if value is _MISSING or value not in operand:
                        return False
                elif operator == "$elemMatch":
                    if not isinstance(value, list) or not any(
                        isinstance(item, dict) and _matches(item, operand)
                        for item in value
                    ):
                        return False
                else:
                    raise ValueError(f"Unsupported query operator {operator}")
        elif value is _MISSING or value != condition:
            return False
    return True


def _apply_update(document: dict[str, Any], update: Query) -> None:
    for operator, fields in update.items():
        if operator == "$set":
            for field, value in fields.items():
                document[field] = copy.deepcopy(value)
        elif operator == "$push":
            for field, value in fields.items():
                document.setdefault(field, []).append(copy.deepcopy(value))
        else:
            raise ValueError(f"Unsupported update operator {operator}")


class InMemoryDocumentStore(DocumentStore):
    def __init__(self, logger: Optional[ComponentLogger] = None):
        self._collections: dict[CollectionName, list[dict[str, Any]]] = {
            collection: [] for collection in CollectionName
        }
        self._logger = logger or component_logger("DocumentStore")

    def documents(self, collection: CollectionName) -> list[dict[str, Any]]:
        """Copy of every stored document, in insertion order."""
        return copy.deepcopy(self._collections[collection])

    def _find(self, collection: CollectionName, query: Query) -> list[dict[str, Any]]:
        return [d for d in self._collections[collection] if _matches(d, query)]

    def _nothing_modified(self, operation: str, detail: str) -> StorageError:
        self._logger.error(f"{operation} modified no document ({detail})")
        increment_storage_failure(operation)
        return StorageError(operation, f"no document modified ({detail})")

    # ==================== GENERIC CRUD ====================

    async def insert_one(self, collection: CollectionName, entity: Entity) -> None:
        document = entity_to_document(collection, entity)
        if self._find(collection, {"_id": document["_id"]}):
            increment_storage_failure("insert_one")
            raise StorageError("insert_one", f"duplicate _id {document['_id']}")
        self._collections[collection].append(copy.deepcopy(document))

    async def find_one(
        self, collection: CollectionName, query: Query
    ) -> Optional[Entity]:
        matches = self._find(collection, query)
        document = copy.deepcopy(matches[0]) if matches else None
        return document_to_entity(collection, document)

    async def update_one(
        self, collection: CollectionName, query: Query, update: Query
    ) -> bool:
        matches = self._find(collection, query)
        if matches:
            document = matches[0]
            before = copy.deepcopy(document)
            _apply_update(document, update)
            return document != before

        # Upsert: seed the new document with the equality fields of the query
        document = {
            field: copy.deepcopy(value)
            for field, value in query.items()
            if not (isinstance(value, dict) and any(k.startswith("$") for k in value))
        }
        document.setdefault("_id", str(ObjectId()))
        _apply_update(document, update)
        self._collections[collection].append(document)
        return True

    async def documents_existence(
        self, collection: CollectionName, ids: list[str]
    ) -> list[bool]:
        found = {d["_id"] for d in self._find(collection, {"_id": {"$in": ids}})}
        return [document_id in found for document_id in ids]

    # ==================== FAN-OUT WRITES ====================

    async def add_chat_summary_to_users(self, summary: ChatSummary) -> None:
        user_ids = [user_id.value for user_id in summary.chat_users]
        users = self._find(CollectionName.USERS, {"_id": {"$in": user_ids}})
        if not users:
            raise self._nothing_modified(
                "add_chat_summary_to_users", f"chat {summary.id}"
            )
        document = summary_to_document(summary)
        for user in users:
            _apply_update(user, {"$push": {"chats": document}})
        self._logger.info(
            f"Chat {summary.id} linked to {len(users)} of {len(user_ids)} users"
        )

    async def append_message_to_chat(self, message: Message) -> None:
        chats = self._find(CollectionName.CHATS, {"_id": message.chat_id.value})
        if not chats:
            raise self._nothing_modified(
                "append_message_to_chat", f"chat {message.chat_id}"
            )
        _apply_update(chats[0], {"$push": {"messages": message_to_document(message)}})

    # ==================== READ PATH ====================

    async def sorted_chats_for_user(self, user_id: UserId) -> list[Chat]:
        users = self._find(CollectionName.USERS, {"_id": user_id.value})
        if not users:
            return []
        chat_ids = [summary["_id"] for summary in users[0].get("chats", [])]
        by_id = {
            d["_id"]: d
            for d in self._find(CollectionName.CHATS, {"_id": {"$in": chat_ids}})
        }
        chats = []
        for chat_id in chat_ids:
            if chat_id in by_id:
                document = copy.deepcopy(by_id[chat_id])
                document.pop("messages", None)
                chats.append(document_to_chat(document))
        return sort_chats_by_activity(chats)

    async def messages_for_chat(self, chat_id: ChatId) -> list[Message]:
        chats = self._find(CollectionName.CHATS, {"_id": chat_id.value})
        if not chats:
            return []
        messages = [
            document_to_message(copy.deepcopy(m)) for m in chats[0].get("messages", [])
        ]
        return sort_messages_newest_first(messages)
