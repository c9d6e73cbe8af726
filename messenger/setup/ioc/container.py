"""
Dishka DI Container Setup.

- StoreProvider: the document store, created once per application (Scope.APP)
- AppProvider: id generator, one handler per operation, the facade

Flow:
  Container → provides → MongoDocumentStore → to → RegisterUserHandler → MessagingFacade
                                 ↓
                        uses DocumentStore interface

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)
- An async generator factory runs its code after `yield` when the container closes
"""

from typing import AsyncIterator, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from messenger.application.commands.chats import CreateChatHandler
from messenger.application.commands.messages import CreateMessageHandler
from messenger.application.commands.users import RegisterUserHandler
from messenger.application.facade import MessagingFacade
from messenger.application.queries.chats import GetChatsHandler
from messenger.application.queries.messages import GetMessagesHandler
from messenger.application.services.id_generator import (
    CollisionRetryPolicy,
    IdGenerator,
    MaxAttemptsRetryPolicy,
    UnboundedRetryPolicy,
)
from messenger.config.settings import get_config
from messenger.domain.ports.document_store import DocumentStore
from messenger.infrastructure.persistence import (
    InMemoryDocumentStore,
    MongoDocumentStore,
)
from messenger.infrastructure.persistence.mongo_client import (
    close_mongo_client,
    create_mongo_client,
    get_database,
)

# DevelopmentConfig, TestingConfig or ProductionConfig, chosen by APP_ENV
settings = get_config()


class StoreProvider(Provider):
    """Document store selected by STORE_BACKEND."""

    @provide(scope=Scope.APP)
    async def get_document_store(self) -> AsyncIterator[DocumentStore]:
        """
        Provide the DocumentStore (singleton, app-scoped).

        - mongo: connects and pings at first use, closes the client on shutdown
        - memory: process-local store, nothing to close
        """
        if settings.STORE_BACKEND == "memory":
            yield InMemoryDocumentStore()
        else:
            client = await create_mongo_client(
                settings.MONGO_URL, settings.MONGO_TIMEOUT_MS
            )
            yield MongoDocumentStore(get_database(client, settings.MONGO_DB_NAME))
            await close_mongo_client(client)


class InMemoryStoreProvider(Provider):
    """Hands out one given in-memory store; tests keep a reference to inspect it."""

    def __init__(self, store: Optional[InMemoryDocumentStore] = None):
        super().__init__()
        self._store = store or InMemoryDocumentStore()

    @provide(scope=Scope.APP)
    def get_document_store(self) -> DocumentStore:
        return self._store


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers the id generator, every handler and the facade.
    """

    # ==================== SERVICES ====================

    @provide(scope=Scope.APP)
    def get_retry_policy(self) -> CollisionRetryPolicy:
        if settings.ID_GENERATION_MAX_ATTEMPTS > 0:
            return MaxAttemptsRetryPolicy(settings.ID_GENERATION_MAX_ATTEMPTS)
        return UnboundedRetryPolicy()

    @provide(scope=Scope.APP)
    def get_id_generator(
        self, store: DocumentStore, retry_policy: CollisionRetryPolicy
    ) -> IdGenerator:
        return IdGenerator(store, retry_policy=retry_policy)

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_register_user_handler(
        self, store: DocumentStore, id_generator: IdGenerator
    ) -> RegisterUserHandler:
        return RegisterUserHandler(store, id_generator)

    @provide(scope=Scope.REQUEST)
    def get_create_chat_handler(
        self, store: DocumentStore, id_generator: IdGenerator
    ) -> CreateChatHandler:
        return CreateChatHandler(store, id_generator)

    @provide(scope=Scope.REQUEST)
    def get_create_message_handler(
        self, store: DocumentStore, id_generator: IdGenerator
    ) -> CreateMessageHandler:
        return CreateMessageHandler(store, id_generator)

    @provide(scope=Scope.REQUEST)
    def get_get_chats_handler(self, store: DocumentStore) -> GetChatsHandler:
        return GetChatsHandler(store)

    @provide(scope=Scope.REQUEST)
    def get_get_messages_handler(self, store: DocumentStore) -> GetMessagesHandler:
        return GetMessagesHandler(store)

    # ==================== FACADE ====================

    @provide(scope=Scope.REQUEST)
    def get_messaging_facade(
        self,
        register_user_handler: RegisterUserHandler,
        create_chat_handler: CreateChatHandler,
        get_chats_handler: GetChatsHandler,
        create_message_handler: CreateMessageHandler,
        get_messages_handler: GetMessagesHandler,
    ) -> MessagingFacade:
        """
        Provide MessagingFacade.

        - Every parameter is resolved by the handler factories above
        - Scope.REQUEST = new facade (and handlers) per HTTP request
        """
        return MessagingFacade(
            register_user_handler,
            create_chat_handler,
            get_chats_handler,
            create_message_handler,
            get_messages_handler,
        )


def create_container(store_provider: Optional[Provider] = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    - store_provider replaces StoreProvider, e.g. InMemoryStoreProvider in tests
    """
    return make_async_container(store_provider or StoreProvider(), AppProvider())
