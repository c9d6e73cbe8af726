"""
Unit tests for IdGenerator.

Run with: pytest tests/test_id_generator.py -v
"""

import re
from unittest.mock import AsyncMock, Mock

import pytest

from messenger.application.services.id_generator import (
    EntityKind,
    IdGenerator,
    MaxAttemptsRetryPolicy,
    UnboundedRetryPolicy,
)
from messenger.domain.entities.chat import Chat
from messenger.domain.entities.message import Message
from messenger.domain.entities.user import User
from messenger.domain.exceptions import IdGenerationExhaustedError, StorageError
from messenger.domain.ports.document_store import CollectionName
from messenger.domain.value_objects import ChatId, MessageId, UserId

from tests.conftest import START

TAKEN = "a" * 24
FREE = "b" * 24


def candidates(*values):
    return Mock(side_effect=list(values))


async def add_user(store, user_id):
    await store.insert_one(
        CollectionName.USERS, User(id=UserId(user_id), user_name=user_id, created_at=START)
    )


async def add_chat_with_message(store, chat_id, message_id, author="u1"):
    chat = Chat.create(
        id=ChatId(chat_id), chat_name="c", chat_users=[UserId(author)], created_at=START
    )
    await store.insert_one(CollectionName.CHATS, chat)
    await store.append_message_to_chat(
        Message(
            id=MessageId(message_id),
            chat_id=ChatId(chat_id),
            author_id=UserId(author),
            text="hi",
            created_at=START,
        )
    )


class TestCandidates:
    async def test_default_ids_are_24_lowercase_hex(self, store):
        generated = await IdGenerator(store).generate_id(
            CollectionName.USERS, EntityKind.USER
        )
        assert re.fullmatch(r"[0-9a-f]{24}", generated)

    async def test_unused_candidate_is_returned_as_is(self, store):
        generator = IdGenerator(store, candidate_factory=candidates(FREE))
        assert await generator.generate_id(CollectionName.USERS, EntityKind.USER) == FREE


class TestCollisions:
    async def test_user_collision_regenerates(self, store):
        await add_user(store, TAKEN)
        factory = candidates(TAKEN, FREE)
        generator = IdGenerator(store, candidate_factory=factory)

        assert await generator.generate_id(CollectionName.USERS, EntityKind.USER) == FREE
        assert factory.call_count == 2

    async def test_scope_is_the_target_collection(self, store):
        """A user _id does not block the same value as a chat id."""
        await add_user(store, TAKEN)
        generator = IdGenerator(store, candidate_factory=candidates(TAKEN))

        assert await generator.generate_id(CollectionName.CHATS, EntityKind.CHAT) == TAKEN

    async def test_message_ids_are_unique_across_chats(self, store):
        await add_chat_with_message(store, "chat-1", TAKEN)
        factory = candidates(TAKEN, FREE)
        generator = IdGenerator(store, candidate_factory=factory)

        # Generating for a different chat still skips the id used in chat-1
        generated = await generator.generate_id(CollectionName.CHATS, EntityKind.MESSAGE)
        assert generated == FREE
        assert factory.call_count == 2

    async def test_message_scope_ignores_chat_ids(self, store):
        await add_chat_with_message(store, TAKEN, FREE)
        generator = IdGenerator(store, candidate_factory=candidates(TAKEN))

        assert (
            await generator.generate_id(CollectionName.CHATS, EntityKind.MESSAGE) == TAKEN
        )


class TestRetryPolicies:
    def test_unbounded_policy_always_retries(self):
        assert UnboundedRetryPolicy().should_retry(EntityKind.USER, 10_000)

    def test_max_attempts_must_be_positive(self):
        with pytest.raises(ValueError):
            MaxAttemptsRetryPolicy(0)

    async def test_bounded_policy_gives_up(self, store):
        await add_user(store, TAKEN)
        factory = Mock(return_value=TAKEN)
        generator = IdGenerator(
            store, retry_policy=MaxAttemptsRetryPolicy(3), candidate_factory=factory
        )

        with pytest.raises(IdGenerationExhaustedError) as exc_info:
            await generator.generate_id(CollectionName.USERS, EntityKind.USER)

        assert exc_info.value.attempts == 3
        assert exc_info.value.operation == "generate_id"
        assert factory.call_count == 3

    async def test_store_errors_are_not_retried(self, store):
        store.find_one = AsyncMock(side_effect=StorageError("find_one"))
        factory = Mock(return_value=FREE)
        generator = IdGenerator(store, candidate_factory=factory)

        with pytest.raises(StorageError):
            await generator.generate_id(CollectionName.USERS, EntityKind.USER)

        assert factory.call_count == 1
        assert store.find_one.await_count == 1
