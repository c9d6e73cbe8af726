"""
Users API Router.

POST /users/add {userName} → 201 {message, userId} | 409 {message}
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from messenger.application.facade import MessagingFacade
from messenger.presentation.api.responses import result_response

INVALID_BODY_MESSAGE = "Invalid user data format"


# ==================== REQUEST MODELS ====================


class AddUserRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_name: str = Field(min_length=1)


# ==================== ROUTER ====================

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/add", status_code=status.HTTP_201_CREATED)
@inject
async def add_user(request: AddUserRequest, facade: FromDishka[MessagingFacade]):
    """Register a user with a unique userName."""
    result = await facade.register_user(request.user_name)
    return result_response(result, lambda user_id: {"userId": user_id.value})
