"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

- document_store.py → DocumentStore (MongoDB, in-memory)
"""

from messenger.domain.ports.document_store import CollectionName, DocumentStore

__all__ = [
    "CollectionName",
    "DocumentStore",
]
