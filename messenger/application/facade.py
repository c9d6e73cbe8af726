"""
Messaging Facade - one method per operation the service exposes.

Builds the command or query from plain arguments and delegates to its handler.
Ids stay plain strings until the handler has checked they exist.
Presentation code talks to this class only.
"""

from messenger.application.commands.chats import CreateChatCommand, CreateChatHandler
from messenger.application.commands.messages import (
    CreateMessageCommand,
    CreateMessageHandler,
)
from messenger.application.commands.users import (
    RegisterUserCommand,
    RegisterUserHandler,
)
from messenger.application.common.result import OperationResult
from messenger.application.queries.chats import GetChatsHandler, GetChatsQuery
from messenger.application.queries.messages import (
    GetMessagesHandler,
    GetMessagesQuery,
)
from messenger.domain.entities.chat import Chat
from messenger.domain.entities.message import Message
from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.message_id import MessageId
from messenger.domain.value_objects.user_id import UserId


class MessagingFacade:
    def __init__(
        self,
        register_user_handler: RegisterUserHandler,
        create_chat_handler: CreateChatHandler,
        get_chats_handler: GetChatsHandler,
        create_message_handler: CreateMessageHandler,
        get_messages_handler: GetMessagesHandler,
    ):
        self._register_user_handler = register_user_handler
        self._create_chat_handler = create_chat_handler
        self._get_chats_handler = get_chats_handler
        self._create_message_handler = create_message_handler
        self._get_messages_handler = get_messages_handler

    async def register_user(self, user_name: str) -> OperationResult[UserId]:
        return await self._register_user_handler.execute(
            RegisterUserCommand(user_name=user_name)
        )

    async def create_chat(
        self, chat_name: str, users: list[str]
    ) -> OperationResult[ChatId]:
        return await self._create_chat_handler.execute(
            CreateChatCommand(chat_name=chat_name, users=users)
        )

    async def get_chats(self, user_id: str) -> OperationResult[list[Chat]]:
        return await self._get_chats_handler.execute(GetChatsQuery(user_id=user_id))

    async def create_message(
        self, chat_id: str, author_id: str, text: str
    ) -> OperationResult[MessageId]:
        return await self._create_message_handler.execute(
            CreateMessageCommand(chat_id=chat_id, author_id=author_id, text=text)
        )

    async def get_messages(self, chat_id: str) -> OperationResult[list[Message]]:
        return await self._get_messages_handler.execute(
            GetMessagesQuery(chat_id=chat_id)
        )
