"""
Operation results.

Conflict and not-found are expected business outcomes, so handlers return them
instead of raising. Storage failures are the only thing that raises.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class StatusCategory(str, Enum):
    CREATED = "created"
    OK = "ok"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    status: StatusCategory
    message: str
    payload: Optional[T] = None

    @property
    def succeeded(self) -> bool:
        return self.status in (StatusCategory.CREATED, StatusCategory.OK)

    @classmethod
    def created(cls, message: str, payload: T) -> "OperationResult[T]":
        return cls(StatusCategory.CREATED, message, payload)

    @classmethod
    def ok(cls, message: str, payload: T) -> "OperationResult[T]":
        return cls(StatusCategory.OK, message, payload)

    @classmethod
    def conflict(cls, message: str) -> "OperationResult[T]":
        return cls(StatusCategory.CONFLICT, message)

    @classmethod
    def not_found(cls, message: str) -> "OperationResult[T]":
        return cls(StatusCategory.NOT_FOUND, message)
