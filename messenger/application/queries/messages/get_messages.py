"""Get Messages Query."""

from dataclasses import dataclass
from typing import Optional

from messenger.application.common import status_messages
from messenger.application.common.interfaces import Query, QueryHandler
from messenger.application.common.result import OperationResult
from messenger.config.logging_config import ComponentLogger, component_logger
from messenger.domain.entities.message import Message
from messenger.domain.ports.document_store import CollectionName, DocumentStore
from messenger.domain.value_objects.chat_id import ChatId


@dataclass(frozen=True)
class GetMessagesQuery(Query[OperationResult[list[Message]]]):
    chat_id: str


class GetMessagesHandler(QueryHandler[OperationResult[list[Message]]]):
    def __init__(self, store: DocumentStore, logger: Optional[ComponentLogger] = None):
        self._store = store
        self._logger = logger or component_logger("MessageService")

    async def execute(
        self, query: GetMessagesQuery
    ) -> OperationResult[list[Message]]:
        [exists] = await self._store.documents_existence(
            CollectionName.CHATS, [query.chat_id]
        )
        if not exists:
            self._logger.info(
                f"Messages not listed, chat {query.chat_id} does not exist"
            )
            return OperationResult.not_found(
                status_messages.CHAT_NOT_FOUND.format(chat_id=query.chat_id)
            )

        messages = await self._store.messages_for_chat(ChatId(query.chat_id))
        self._logger.info(f"Found {len(messages)} messages in chat {query.chat_id}")
        return OperationResult.ok(status_messages.MESSAGES_RETRIEVED, messages)
