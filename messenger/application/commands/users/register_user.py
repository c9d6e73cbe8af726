"""
Register User Command.

Usernames are unique, checked with a lookup before the insert. No unique
index backs the check, so two concurrent registrations of the same name can
both succeed.
"""

from dataclasses import dataclass
from typing import Optional

from messenger.application.common import status_messages
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.application.common.result import OperationResult
from messenger.application.services.id_generator import EntityKind, IdGenerator
from messenger.config.logging_config import ComponentLogger, component_logger
from messenger.domain.entities.user import User
from messenger.domain.ports.document_store import CollectionName, DocumentStore
from messenger.domain.services.clock import Clock, utc_now
from messenger.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class RegisterUserCommand(Command[OperationResult[UserId]]):
    user_name: str


class RegisterUserHandler(CommandHandler[OperationResult[UserId]]):
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
        self._logger = logger or component_logger("UserService")

    async def execute(self, command: RegisterUserCommand) -> OperationResult[UserId]:
        existing = await self._store.find_one(
            CollectionName.USERS, {"userName": command.user_name}
        )
        if existing is not None:
            self._logger.info(f"Username {command.user_name!r} is already taken")
            return OperationResult.conflict(status_messages.USER_ALREADY_EXISTS)

        user_id = UserId(
            await self._id_generator.generate_id(CollectionName.USERS, EntityKind.USER)
        )
        user = User(id=user_id, user_name=command.user_name, created_at=self._clock())
        await self._store.insert_one(CollectionName.USERS, user)

        self._logger.info(f"User {user_id} created")
        return OperationResult.created(status_messages.USER_CREATED, user_id)
