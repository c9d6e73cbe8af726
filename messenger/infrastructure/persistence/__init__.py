"""
Persistence Layer - Document store implementations.

Contains the MongoDB and in-memory DocumentStore adapters for the domain port.
"""

from messenger.infrastructure.persistence.in_memory_document_store import (
    InMemoryDocumentStore,
)
from messenger.infrastructure.persistence.mongo_document_store import (
    MongoDocumentStore,
)

__all__ = [
    "InMemoryDocumentStore",
    "MongoDocumentStore",
]
