"""Tests for user registration."""

from unittest.mock import AsyncMock

import pytest

from messenger.application.common.result import StatusCategory
from messenger.domain.exceptions import StorageError
from messenger.domain.ports.document_store import CollectionName

from tests.conftest import START


async def test_register_user_stores_document_with_empty_chats(facade, store):
    result = await facade.register_user("alice")

    assert result.status == StatusCategory.CREATED
    assert result.message == "User created successfully"
    assert store.documents(CollectionName.USERS) == [
        {
            "_id": result.payload.value,
            "userName": "alice",
            "createdAt": START,
            "chats": [],
        }
    ]


async def test_duplicate_username_is_a_conflict(facade, store):
    first = await facade.register_user("alice")
    second = await facade.register_user("alice")

    assert first.status == StatusCategory.CREATED
    assert second.status == StatusCategory.CONFLICT
    assert second.message == "User with this username already exists"
    assert second.payload is None
    assert len(store.documents(CollectionName.USERS)) == 1


async def test_username_match_is_exact(facade, store):
    await facade.register_user("alice")
    result = await facade.register_user("Alice")

    assert result.status == StatusCategory.CREATED
    assert len(store.documents(CollectionName.USERS)) == 2


async def test_storage_failure_propagates(facade, store):
    store.insert_one = AsyncMock(side_effect=StorageError("insert_one"))

    with pytest.raises(StorageError) as exc_info:
        await facade.register_user("alice")

    assert exc_info.value.operation == "insert_one"
