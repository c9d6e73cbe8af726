"""
DOMAIN EXCEPTIONS

Conflict and not-found outcomes are NOT exceptions: handlers return them as
OperationResult values. Only broken invariants and storage failures raise.

- DomainValidationError → entity invariant violated (HTTP 422)
- StorageError (+ FanOutError, IdGenerationExhaustedError) → HTTP 500
"""

from messenger.domain.exceptions.storage_error import (
    StorageError,
    FanOutError,
    IdGenerationExhaustedError,
)
from messenger.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "StorageError",
    "FanOutError",
    "IdGenerationExhaustedError",
    "DomainValidationError",
]
