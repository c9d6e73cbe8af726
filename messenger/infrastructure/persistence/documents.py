"""
Stored document shapes.

    Users: {_id, userName, createdAt, chats: [ChatSummaryDocument]}
    Chats: {_id, chatName, chatUsers, createdAt, updatedAt?, messages: [MessageDocument]}

updatedAt is absent until the chat receives its first message.
"""

from datetime import datetime
from typing import NotRequired, TypedDict


class MessageDocument(TypedDict):
    messageId: str
    chatId: str
    authorId: str
    text: str
    createdAt: datetime


class ChatSummaryDocument(TypedDict):
    _id: str
    chatName: str
    chatUsers: list[str]
    createdAt: datetime
    updatedAt: NotRequired[datetime]


class ChatDocument(TypedDict):
    _id: str
    chatName: str
    chatUsers: list[str]
    createdAt: datetime
    updatedAt: NotRequired[datetime]
    # Left out when read with the {"messages": 0} projection
    messages: NotRequired[list[MessageDocument]]


class UserDocument(TypedDict):
    _id: str
    userName: str
    createdAt: datetime
    chats: list[ChatSummaryDocument]
