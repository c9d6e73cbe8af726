"""Application services shared by several handlers."""

from messenger.application.services.id_generator import (
    CollisionRetryPolicy,
    EntityKind,
    IdGenerator,
    MaxAttemptsRetryPolicy,
    UnboundedRetryPolicy,
    new_object_id,
)

__all__ = [
    "CollisionRetryPolicy",
    "EntityKind",
    "IdGenerator",
    "MaxAttemptsRetryPolicy",
    "UnboundedRetryPolicy",
    "new_object_id",
]
