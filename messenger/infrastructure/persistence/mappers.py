"""
Mapping between stored documents and domain entities.

Every adapter goes through these functions, so the document shape is defined
in exactly one place.
"""

from typing import Any, Mapping, Optional

from messenger.domain.entities.chat import Chat, ChatSummary
from messenger.domain.entities.message import Message
from messenger.domain.entities.user import User
from messenger.domain.ports.document_store import CollectionName, Entity
from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.message_id import MessageId
from messenger.domain.value_objects.user_id import UserId
from messenger.infrastructure.persistence.documents import (
    ChatDocument,
    ChatSummaryDocument,
    MessageDocument,
    UserDocument,
)


# ==================== ENTITY → DOCUMENT ====================


def message_to_document(message: Message) -> MessageDocument:
    return {
        "messageId": message.id.value,
        "chatId": message.chat_id.value,
        "authorId": message.author_id.value,
        "text": message.text,
        "createdAt": message.created_at,
    }


def summary_to_document(summary: ChatSummary) -> ChatSummaryDocument:
    document: ChatSummaryDocument = {
        "_id": summary.id.value,
        "chatName": summary.chat_name,
        "chatUsers": [user_id.value for user_id in summary.chat_users],
        "createdAt": summary.created_at,
    }
    if summary.updated_at is not None:
        document["updatedAt"] = summary.updated_at
    return document


def chat_to_document(chat: Chat) -> ChatDocument:
    document: ChatDocument = {
        "_id": chat.id.value,
        "chatName": chat.chat_name,
        "chatUsers": [user_id.value for user_id in chat.chat_users],
        "createdAt": chat.created_at,
        "messages": [message_to_document(m) for m in chat.messages],
    }
    if chat.updated_at is not None:
        document["updatedAt"] = chat.updated_at
    return document


def user_to_document(user: User) -> UserDocument:
    return {
        "_id": user.id.value,
        "userName": user.user_name,
        "createdAt": user.created_at,
        "chats": [summary_to_document(s) for s in user.chats],
    }


def entity_to_document(collection: CollectionName, entity: Entity) -> dict[str, Any]:
    if collection is CollectionName.USERS and isinstance(entity, User):
        return dict(user_to_document(entity))
    if collection is CollectionName.CHATS and isinstance(entity, Chat):
        return dict(chat_to_document(entity))
    raise TypeError(
        f"Cannot store {type(entity).__name__} in collection {collection.value}"
    )


# ==================== DOCUMENT → ENTITY ====================


def document_to_message(document: Mapping[str, Any]) -> Message:
    return Message(
        id=MessageId(document["messageId"]),
        chat_id=ChatId(document["chatId"]),
        author_id=UserId(document["authorId"]),
        text=document["text"],
        created_at=document["createdAt"],
    )


def document_to_summary(document: Mapping[str, Any]) -> ChatSummary:
    return ChatSummary(
        id=ChatId(document["_id"]),
        chat_name=document["chatName"],
        chat_users=[UserId(user_id) for user_id in document["chatUsers"]],
        created_at=document["createdAt"],
        updated_at=document.get("updatedAt"),
    )


def document_to_chat(document: Mapping[str, Any]) -> Chat:
    return Chat(
        id=ChatId(document["_id"]),
        chat_name=document["chatName"],
        chat_users=[UserId(user_id) for user_id in document["chatUsers"]],
        created_at=document["createdAt"],
        updated_at=document.get("updatedAt"),
        messages=[document_to_message(m) for m in document.get("messages", [])],
    )


def document_to_user(document: Mapping[str, Any]) -> User:
    return User(
        id=UserId(document["_id"]),
        user_name=document["userName"],
        created_at=document["createdAt"],
        chats=[document_to_summary(s) for s in document.get("chats", [])],
    )


def document_to_entity(
    collection: CollectionName, document: Optional[Mapping[str, Any]]
) -> Optional[Entity]:
    if document is None:
        return None
    if collection is CollectionName.USERS:
        return document_to_user(document)
    return document_to_chat(document)
