"""
Create Message Command.

Order of operations:
    1. the chat must exist
    2. the author must be one of its chatUsers
    3. allocate a message id (unique across every chat)
    4. append the message to the chat
    5. move the chat's updatedAt to the message's createdAt

Member summaries in Users keep their creation-time updatedAt; only the Chat
document is touched.
"""

from dataclasses import dataclass
from typing import Optional

from messenger.application.common import status_messages
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.application.common.result import OperationResult
from messenger.application.services.id_generator import EntityKind, IdGenerator
from messenger.config.logging_config import ComponentLogger, component_logger
from messenger.domain.entities.message import Message
from messenger.domain.ports.document_store import CollectionName, DocumentStore
from messenger.domain.services.clock import Clock, utc_now
from messenger.domain.value_objects.message_id import MessageId
from messenger.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class CreateMessageCommand(Command[OperationResult[MessageId]]):
    chat_id: str
    author_id: str
    text: str


class CreateMessageHandler(CommandHandler[OperationResult[MessageId]]):
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
        self._logger = logger or component_logger("MessageService")

    async def execute(
        self, command: CreateMessageCommand
    ) -> OperationResult[MessageId]:
        chat_id = command.chat_id
        author_id = command.author_id

        chat = await self._store.find_one(CollectionName.CHATS, {"_id": chat_id})
        if chat is None:
            self._logger.info(f"Message not created, chat {chat_id} does not exist")
            return OperationResult.not_found(
                status_messages.CHAT_NOT_FOUND.format(chat_id=chat_id)
            )
        if not chat.has_member(author_id):
            self._logger.info(
                f"Message not created, {author_id} is not a member of chat {chat_id}"
            )
            return OperationResult.not_found(
                status_messages.AUTHOR_NOT_IN_CHAT.format(
                    author_id=author_id, chat_id=chat_id
                )
            )

        message_id = MessageId(
            await self._id_generator.generate_id(
                CollectionName.CHATS, EntityKind.MESSAGE
            )
        )
        message = Message(
            id=message_id,
            chat_id=chat.id,
            author_id=UserId(author_id),
            text=command.text,
            created_at=self._clock(),
        )
        await self._store.append_message_to_chat(message)
        await self._store.update_one(
            CollectionName.CHATS,
            {"_id": chat_id},
            {"$set": {"updatedAt": message.created_at}},
        )

        self._logger.info(f"Message {message_id} added to chat {chat_id}")
        return OperationResult.created(status_messages.MESSAGE_CREATED, message_id)
