from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from messenger.application.commands.chats import CreateChatHandler
from messenger.application.commands.messages import CreateMessageHandler
from messenger.application.commands.users import RegisterUserHandler
from messenger.application.facade import MessagingFacade
from messenger.application.queries.chats import GetChatsHandler
from messenger.application.queries.messages import GetMessagesHandler
from messenger.application.services.id_generator import IdGenerator
from messenger.fastapi_app import create_fastapi_app
from messenger.infrastructure.persistence import InMemoryDocumentStore
from messenger.setup.ioc.container import InMemoryStoreProvider, create_container

START = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class SteppingClock:
    """Returns START, START + 1s, START + 2s, ... on successive calls."""

    def __init__(self, start: datetime = START, step: timedelta = timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.now
        self.now += self.step
        return value


@pytest.fixture()
def store():
    return InMemoryDocumentStore()


@pytest.fixture()
def clock():
    return SteppingClock()


@pytest.fixture()
def id_generator(store):
    return IdGenerator(store)


@pytest.fixture()
def facade(store, id_generator, clock):
    """Facade wired by hand over the in-memory store and the stepping clock."""
    return MessagingFacade(
        register_user_handler=RegisterUserHandler(store, id_generator, clock),
        create_chat_handler=CreateChatHandler(store, id_generator, clock),
        get_chats_handler=GetChatsHandler(store),
        create_message_handler=CreateMessageHandler(store, id_generator, clock),
        get_messages_handler=GetMessagesHandler(store),
    )


@pytest.fixture()
def app(store):
    """FastAPI app whose container serves the test's in-memory store."""
    return create_fastapi_app(create_container(InMemoryStoreProvider(store)))


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client
