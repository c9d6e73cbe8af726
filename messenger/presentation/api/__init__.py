"""
API Routers - FastAPI endpoint definitions.
"""

from messenger.presentation.api import chats, messages, users
from messenger.presentation.api.chats import router as chats_router
from messenger.presentation.api.messages import router as messages_router
from messenger.presentation.api.metrics import router as metrics_router
from messenger.presentation.api.users import router as users_router

# Body validation failures answer with a message specific to the route
VALIDATION_MESSAGES = {
    "/users/add": users.INVALID_BODY_MESSAGE,
    "/chats/add": chats.ADD_INVALID_BODY_MESSAGE,
    "/chats/get": chats.GET_INVALID_BODY_MESSAGE,
    "/messages/add": messages.ADD_INVALID_BODY_MESSAGE,
    "/messages/get": messages.GET_INVALID_BODY_MESSAGE,
}

__all__ = [
    "users_router",
    "chats_router",
    "messages_router",
    "metrics_router",
    "VALIDATION_MESSAGES",
]
