"""
Tests for MongoDocumentStore against mocked pymongo async collections.

Checks the query/update documents sent to MongoDB, the zero-modification
failures and the wrapping of driver errors. No MongoDB server is needed.
"""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from messenger.domain.entities.chat import Chat
from messenger.domain.entities.message import Message
from messenger.domain.entities.user import User
from messenger.domain.exceptions import StorageError
from messenger.domain.ports.document_store import CollectionName
from messenger.domain.value_objects import ChatId, MessageId, UserId
from messenger.infrastructure.persistence import MongoDocumentStore

from tests.conftest import START


def cursor(documents):
    mock = MagicMock()
    mock.to_list = AsyncMock(return_value=documents)
    return mock


@pytest.fixture()
def collections():
    return {"Users": MagicMock(), "Chats": MagicMock()}


@pytest.fixture()
def mongo_store(collections):
    database = MagicMock()
    database.__getitem__.side_effect = lambda name: collections[name]
    return MongoDocumentStore(database)


class TestCrud:
    async def test_insert_user_writes_camel_case_document(self, mongo_store, collections):
        collections["Users"].insert_one = AsyncMock()

        await mongo_store.insert_one(
            CollectionName.USERS,
            User(id=UserId("u1"), user_name="alice", created_at=START),
        )

        collections["Users"].insert_one.assert_awaited_once_with(
            {"_id": "u1", "userName": "alice", "createdAt": START, "chats": []}
        )

    async def test_find_one_maps_to_entity(self, mongo_store, collections):
        collections["Chats"].find_one = AsyncMock(
            return_value={
                "_id": "c1",
                "chatName": "pair",
                "chatUsers": ["u1", "u2"],
                "createdAt": START,
                "messages": [],
            }
        )

        chat = await mongo_store.find_one(CollectionName.CHATS, {"_id": "c1"})

        assert isinstance(chat, Chat)
        assert chat.chat_users == [UserId("u1"), UserId("u2")]
        assert chat.updated_at is None
        collections["Chats"].find_one.assert_awaited_once_with({"_id": "c1"})

    async def test_find_one_returns_none_when_missing(self, mongo_store, collections):
        collections["Users"].find_one = AsyncMock(return_value=None)

        assert await mongo_store.find_one(CollectionName.USERS, {"userName": "x"}) is None

    async def test_update_one_upserts(self, mongo_store, collections):
        collections["Chats"].update_one = AsyncMock(
            return_value=MagicMock(modified_count=1, upserted_id=None)
        )
        update = {"$set": {"updatedAt": START}}

        assert await mongo_store.update_one(CollectionName.CHATS, {"_id": "c1"}, update)
        collections["Chats"].update_one.assert_awaited_once_with(
            {"_id": "c1"}, update, upsert=True
        )

    async def test_documents_existence_keeps_input_order(self, mongo_store, collections):
        collections["Users"].find = MagicMock(return_value=cursor([{"_id": "b"}]))

        assert await mongo_store.documents_existence(
            CollectionName.USERS, ["a", "b", "c"]
        ) == [False, True, False]
        collections["Users"].find.assert_called_once_with(
            {"_id": {"$in": ["a", "b", "c"]}}, {"_id": 1}
        )


class TestFanOut:
    async def test_summary_is_pushed_to_all_members_at_once(self, mongo_store, collections):
        collections["Users"].update_many = AsyncMock(
            return_value=MagicMock(modified_count=2)
        )
        chat = Chat.create(
            id=ChatId("c1"),
            chat_name="pair",
            chat_users=[UserId("u1"), UserId("u2")],
            created_at=START,
        )

        await mongo_store.add_chat_summary_to_users(chat.summary())

        collections["Users"].update_many.assert_awaited_once_with(
            {"_id": {"$in": ["u1", "u2"]}},
            {
                "$push": {
                    "chats": {
                        "_id": "c1",
                        "chatName": "pair",
                        "chatUsers": ["u1", "u2"],
                        "createdAt": START,
                    }
                }
            },
        )

    async def test_fan_out_modifying_nothing_fails(self, mongo_store, collections):
        collections["Users"].update_many = AsyncMock(
            return_value=MagicMock(modified_count=0)
        )
        chat = Chat.create(
            id=ChatId("c1"), chat_name="x", chat_users=[UserId("u1")], created_at=START
        )

        with pytest.raises(StorageError) as exc_info:
            await mongo_store.add_chat_summary_to_users(chat.summary())

        assert exc_info.value.operation == "add_chat_summary_to_users"

    async def test_append_message_modifying_nothing_fails(self, mongo_store, collections):
        collections["Chats"].update_one = AsyncMock(
            return_value=MagicMock(modified_count=0)
        )
        message = Message(
            id=MessageId("m1"),
            chat_id=ChatId("c1"),
            author_id=UserId("u1"),
            text="hi",
            created_at=START,
        )

        with pytest.raises(StorageError) as exc_info:
            await mongo_store.append_message_to_chat(message)

        assert exc_info.value.operation == "append_message_to_chat"
        collections["Chats"].update_one.assert_awaited_once_with(
            {"_id": "c1"},
            {
                "$push": {
                    "messages": {
                        "messageId": "m1",
                        "chatId": "c1",
                        "authorId": "u1",
                        "text": "hi",
                        "createdAt": START,
                    }
                }
            },
        )


class TestReadPath:
    async def test_chats_are_read_without_messages_and_sorted(self, mongo_store, collections):
        collections["Users"].find_one = AsyncMock(
            return_value={"_id": "u1", "chats": [{"_id": "c1"}, {"_id": "c2"}, {"_id": "c3"}]}
        )

        def chat(chat_id, **extra):
            return {
                "_id": chat_id,
                "chatName": chat_id,
                "chatUsers": ["u1"],
                "createdAt": START,
                **extra,
            }

        # MongoDB does not return $in matches in any particular order
        collections["Chats"].find = MagicMock(
            return_value=cursor(
                [
                    chat("c3"),
                    chat("c2", updatedAt=START + timedelta(minutes=1)),
                    chat("c1"),
                ]
            )
        )

        chats = await mongo_store.sorted_chats_for_user(UserId("u1"))

        assert [c.id.value for c in chats] == ["c2", "c1", "c3"]
        collections["Chats"].find.assert_called_once_with(
            {"_id": {"$in": ["c1", "c2", "c3"]}}, {"messages": 0}
        )

    async def test_unknown_user_has_no_chats(self, mongo_store, collections):
        collections["Users"].find_one = AsyncMock(return_value=None)
        collections["Chats"].find = MagicMock()

        assert await mongo_store.sorted_chats_for_user(UserId("nobody")) == []
        collections["Chats"].find.assert_not_called()

    async def test_messages_newest_first(self, mongo_store, collections):
        collections["Chats"].find_one = AsyncMock(
            return_value={
                "_id": "c1",
                "messages": [
                    {
                        "messageId": f"m{i}",
                        "chatId": "c1",
                        "authorId": "u1",
                        "text": str(i),
                        "createdAt": START + timedelta(seconds=i),
                    }
                    for i in range(3)
                ],
            }
        )

        messages = await mongo_store.messages_for_chat(ChatId("c1"))

        assert [m.id.value for m in messages] == ["m2", "m1", "m0"]


class TestErrorWrapping:
    async def test_driver_errors_become_storage_errors(self, mongo_store, collections):
        driver_error = ServerSelectionTimeoutError("no servers")
        collections["Users"].find_one = AsyncMock(side_effect=driver_error)

        with pytest.raises(StorageError) as exc_info:
            await mongo_store.find_one(CollectionName.USERS, {"_id": "u1"})

        assert exc_info.value.operation == "find_one"
        assert exc_info.value.__cause__ is driver_error
