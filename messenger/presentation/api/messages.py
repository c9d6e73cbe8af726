"""
Messages API Router.

POST /messages/add {chatId, authorId, text} → 201 {message, messageId} | 404 {message}
POST /messages/get {chatId}                 → 200 {message, messages}  | 404 {message}
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from messenger.application.dto import MessageDTO
from messenger.application.facade import MessagingFacade
from messenger.presentation.api.responses import result_response

ADD_INVALID_BODY_MESSAGE = "Invalid message data format"
GET_INVALID_BODY_MESSAGE = "Invalid data format for chat ID"


# ==================== REQUEST MODELS ====================


class AddMessageRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    chat_id: str
    author_id: str
    text: str


class GetMessagesRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    chat_id: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("/add", status_code=status.HTTP_201_CREATED)
@inject
async def add_message(request: AddMessageRequest, facade: FromDishka[MessagingFacade]):
    """Post a message; the author must be a member of the chat."""
    result = await facade.create_message(
        request.chat_id, request.author_id, request.text
    )
    return result_response(result, lambda message_id: {"messageId": message_id.value})


@router.post("/get", status_code=status.HTTP_200_OK)
@inject
async def get_messages(request: GetMessagesRequest, facade: FromDishka[MessagingFacade]):
    """Messages of a chat, newest first."""
    result = await facade.get_messages(request.chat_id)
    return result_response(
        result,
        lambda messages: {
            "messages": [
                MessageDTO.from_entity(message).model_dump(by_alias=True, mode="json")
                for message in messages
            ]
        },
    )
