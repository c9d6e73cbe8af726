"""Get Chats Query."""

from dataclasses import dataclass
from typing import Optional

from messenger.application.common import status_messages
from messenger.application.common.interfaces import Query, QueryHandler
from messenger.application.common.result import OperationResult
from messenger.config.logging_config import ComponentLogger, component_logger
from messenger.domain.entities.chat import Chat
from messenger.domain.ports.document_store import DocumentStore
from messenger.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetChatsQuery(Query[OperationResult[list[Chat]]]):
    user_id: str


class GetChatsHandler(QueryHandler[OperationResult[list[Chat]]]):
    def __init__(self, store: DocumentStore, logger: Optional[ComponentLogger] = None):
        self._store = store
        self._logger = logger or component_logger("ChatService")

    async def execute(self, query: GetChatsQuery) -> OperationResult[list[Chat]]:
        [exists] = await self._store.users_existence([query.user_id])
        if not exists:
            self._logger.info(f"Chats not listed, user {query.user_id} does not exist")
            return OperationResult.not_found(
                status_messages.USER_NOT_FOUND.format(user_id=query.user_id)
            )

        chats = await self._store.sorted_chats_for_user(UserId(query.user_id))
        self._logger.info(f"Found {len(chats)} chats for user {query.user_id}")
        return OperationResult.ok(status_messages.CHATS_RETRIEVED, chats)
