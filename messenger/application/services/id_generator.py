"""
Identifier Generator.

Produces ObjectId-style identifiers (24 lowercase hex characters) and checks
each candidate against the store before handing it out:

    user / chat → a document with that _id in the target collection
    message     → any chat in Chats embedding a message with that messageId

Message ids are unique across all chats, not only within the owning chat.

Store errors abort generation immediately; only collisions are retried, and
whether to retry is decided by a CollisionRetryPolicy.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional

from bson import ObjectId

from messenger.config.logging_config import ComponentLogger, component_logger
from messenger.domain.exceptions import IdGenerationExhaustedError
from messenger.domain.ports.document_store import CollectionName, DocumentStore, Query
from messenger.observability.metrics import (
    increment_id_collision,
    increment_storage_failure,
)


class EntityKind(str, Enum):
    USER = "user"
    CHAT = "chat"
    MESSAGE = "message"


def new_object_id() -> str:
    return str(ObjectId())


def _scope_query(entity_kind: EntityKind, candidate: str) -> Query:
    if entity_kind is EntityKind.MESSAGE:
        return {"messages": {"$elemMatch": {"messageId": candidate}}}
    return {"_id": candidate}


class CollisionRetryPolicy(ABC):
    @abstractmethod
    def should_retry(self, entity_kind: EntityKind, attempts: int) -> bool:
        """Called after `attempts` colliding candidates; False gives up."""
        ...


class UnboundedRetryPolicy(CollisionRetryPolicy):
    """Regenerate until a unique id turns up, however long that takes."""

    def should_retry(self, entity_kind: EntityKind, attempts: int) -> bool:
        return True


class MaxAttemptsRetryPolicy(CollisionRetryPolicy):
    def __init__(self, max_attempts: int):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts

    def should_retry(self, entity_kind: EntityKind, attempts: int) -> bool:
        return attempts < self.max_attempts


class IdGenerator:
    def __init__(
        self,
        store: DocumentStore,
        retry_policy: Optional[CollisionRetryPolicy] = None,
        candidate_factory: Callable[[], str] = new_object_id,
        logger: Optional[ComponentLogger] = None,
    ):
        self._store = store
        self._retry_policy = retry_policy or UnboundedRetryPolicy()
        self._candidate_factory = candidate_factory
        self._logger = logger or component_logger("IdGenerator")

    async def generate_id(
        self, collection: CollectionName, entity_kind: EntityKind
    ) -> str:
        """
        Return an id not yet used within the scope of `entity_kind`.

        Raises:
            StorageError: the uniqueness lookup failed
            IdGenerationExhaustedError: the retry policy gave up
        """
        attempts = 1
        candidate = self._candidate_factory()
        while (
            await self._store.find_one(collection, _scope_query(entity_kind, candidate))
            is not None
        ):
            increment_id_collision(entity_kind.value)
            self._logger.warning(
                f"Generated {entity_kind.value} id {candidate} already exists "
                f"in {collection.value} (attempt {attempts})"
            )
            if not self._retry_policy.should_retry(entity_kind, attempts):
                self._logger.error(
                    f"Giving up on {entity_kind.value} id after {attempts} attempts"
                )
                increment_storage_failure("generate_id")
                raise IdGenerationExhaustedError(entity_kind.value, attempts)
            candidate = self._candidate_factory()
            attempts += 1
        return candidate
