"""User commands."""

from .register_user import RegisterUserCommand, RegisterUserHandler

__all__ = [
    "RegisterUserCommand",
    "RegisterUserHandler",
]
