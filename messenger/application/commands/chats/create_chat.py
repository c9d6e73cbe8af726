"""
Create Chat Command.

Writes happen in two phases:
    1. insert the Chat document into Chats
    2. push its summary into `chats` of every member in Users

Phase 2 failing leaves the chat persisted but unlinked from its members. It is
not rolled back; the handler raises FanOutError with the chat id instead.
"""

from dataclasses import dataclass
from typing import Optional

from messenger.application.common import status_messages
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.application.common.result import OperationResult
from messenger.application.services.id_generator import EntityKind, IdGenerator
from messenger.config.logging_config import ComponentLogger, component_logger
from messenger.domain.entities.chat import Chat
from messenger.domain.exceptions import FanOutError, StorageError
from messenger.domain.ports.document_store import CollectionName, DocumentStore
from messenger.domain.services.clock import Clock, utc_now
from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class CreateChatCommand(Command[OperationResult[ChatId]]):
    chat_name: str
    users: list[str]


class CreateChatHandler(CommandHandler[OperationResult[ChatId]]):
    def __init__(
        self,
        store: DocumentStore,
        id_generator: IdGenerator,
        clock: Clock = utc_now,
        logger: Optional[ComponentLogger] = None,
    ):
        self._store = store
        self._id_generator = id_generator
        self._clock = clock
        self._logger = logger or component_logger("ChatService")

    async def execute(self, command: CreateChatCommand) -> OperationResult[ChatId]:
        existence = await self._store.users_existence(command.users)
        for user_id, exists in zip(command.users, existence):
            if not exists:
                self._logger.info(f"Chat not created, user {user_id} does not exist")
                return OperationResult.not_found(
                    status_messages.USER_NOT_FOUND.format(user_id=user_id)
                )

        chat_id = ChatId(
            await self._id_generator.generate_id(CollectionName.CHATS, EntityKind.CHAT)
        )
        chat = Chat.create(
            id=chat_id,
            chat_name=command.chat_name,
            chat_users=[UserId(user_id) for user_id in command.users],
            created_at=self._clock(),
        )

        await self._store.insert_one(CollectionName.CHATS, chat)
        try:
            await self._store.add_chat_summary_to_users(chat.summary())
        except StorageError as e:
            self._logger.error(
                f"Chat {chat_id} persisted but not added to its members: {e}"
            )
            raise FanOutError(chat_id.value, cause=e) from e

        self._logger.info(f"Chat {chat_id} created for {len(chat.chat_users)} users")
        return OperationResult.created(status_messages.CHAT_CREATED, chat_id)
