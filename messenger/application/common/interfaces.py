"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class RegisterUserCommand(Command[OperationResult[UserId]]):
        user_name: str

    class RegisterUserHandler(CommandHandler[OperationResult[UserId]]):
        def __init__(self, store: DocumentStore, id_generator: IdGenerator):
            self._store = store
            self._id_generator = id_generator

        async def execute(self, command: RegisterUserCommand) -> OperationResult[UserId]:
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
