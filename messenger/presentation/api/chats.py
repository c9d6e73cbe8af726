"""
Chats API Router.

POST /chats/add {chatName, users} → 201 {message, chatId} | 404 {message}
POST /chats/get {userId}          → 200 {message, chats}   | 404 {message}

Chats are listed most recently active first, without their messages.
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from messenger.application.dto import ChatDTO
from messenger.application.facade import MessagingFacade
from messenger.presentation.api.responses import result_response

ADD_INVALID_BODY_MESSAGE = "Invalid chat data format"
GET_INVALID_BODY_MESSAGE = "Invalid data format for user ID"


# ==================== REQUEST MODELS ====================


class AddChatRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    chat_name: str
    users: list[str] = Field(min_length=1)


class GetChatsRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/chats", tags=["chats"])


@router.post("/add", status_code=status.HTTP_201_CREATED)
@inject
async def add_chat(request: AddChatRequest, facade: FromDishka[MessagingFacade]):
    """Create a chat; every user in `users` must already exist."""
    result = await facade.create_chat(request.chat_name, request.users)
    return result_response(result, lambda chat_id: {"chatId": chat_id.value})


@router.post("/get", status_code=status.HTTP_200_OK)
@inject
async def get_chats(request: GetChatsRequest, facade: FromDishka[MessagingFacade]):
    result = await facade.get_chats(request.user_id)
    return result_response(
        result,
        lambda chats: {
            "chats": [
                ChatDTO.from_entity(chat).model_dump(by_alias=True, mode="json")
                for chat in chats
            ]
        },
    )
