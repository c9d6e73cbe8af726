"""Tests for the query subset understood by InMemoryDocumentStore."""

import pytest

from messenger.domain.entities.chat import Chat
from messenger.domain.entities.user import User
from messenger.domain.exceptions import StorageError
from messenger.domain.ports.document_store import CollectionName
from messenger.domain.value_objects import ChatId, UserId

from tests.conftest import START


async def add_users(store, *names):
    for name in names:
        await store.insert_one(
            CollectionName.USERS, User(id=UserId(name), user_name=name, created_at=START)
        )


async def test_equality_and_in_queries(store):
    await add_users(store, "u1", "u2")

    found = await store.find_one(CollectionName.USERS, {"userName": "u2"})
    assert found.id == UserId("u2")
    assert await store.find_one(CollectionName.USERS, {"userName": "u3"}) is None
    assert await store.documents_existence(CollectionName.USERS, ["u2", "u3", "u1"]) == [
        True,
        False,
        True,
    ]


async def test_duplicate_id_is_rejected(store):
    await add_users(store, "u1")

    with pytest.raises(StorageError):
        await add_users(store, "u1")


async def test_update_one_reports_whether_anything_changed(store):
    chat = Chat.create(
        id=ChatId("c1"), chat_name="c", chat_users=[UserId("u1")], created_at=START
    )
    await store.insert_one(CollectionName.CHATS, chat)
    update = {"$set": {"updatedAt": START}}

    assert await store.update_one(CollectionName.CHATS, {"_id": "c1"}, update)
    assert not await store.update_one(CollectionName.CHATS, {"_id": "c1"}, update)


async def test_update_one_upserts_from_query_fields(store):
    assert await store.update_one(
        CollectionName.CHATS, {"_id": "c9"}, {"$set": {"updatedAt": START}}
    )

    assert store.documents(CollectionName.CHATS) == [{"_id": "c9", "updatedAt": START}]


async def test_unsupported_operators_are_rejected(store):
    await add_users(store, "u1")

    with pytest.raises(ValueError):
        await store.find_one(CollectionName.USERS, {"userName": {"$regex": "a"}})


async def test_stored_documents_cannot_be_mutated_from_outside(store):
    await add_users(store, "u1")

    store.documents(CollectionName.USERS)[0]["userName"] = "mallory"
    user = await store.find_one(CollectionName.USERS, {"_id": "u1"})
    user.chats.append("junk")

    assert store.documents(CollectionName.USERS)[0]["userName"] == "u1"
    assert store.documents(CollectionName.USERS)[0]["chats"] == []
