"""Dishka DI container."""

from messenger.setup.ioc.container import (
    AppProvider,
    InMemoryStoreProvider,
    StoreProvider,
    create_container,
)

__all__ = [
    "AppProvider",
    "InMemoryStoreProvider",
    "StoreProvider",
    "create_container",
]
