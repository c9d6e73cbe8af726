"""
Async MongoDB Client Factory.

Creates the pymongo async client for the DI container. One client is shared by
every request and closed when the container shuts down.
"""

import logging

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from messenger.config.settings import Config
from messenger.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


async def create_mongo_client(
    url: str = Config.MONGO_URL, timeout_ms: int = Config.MONGO_TIMEOUT_MS
) -> AsyncMongoClient:
    """
    Create async MongoDB client and check the server answers.

    Raises:
        StorageError: If MongoDB is not reachable within timeout_ms

    Note:
        - tz_aware=True so dates come back as UTC-aware datetimes
        - Tests connection with a ping before returning
    """
    client = AsyncMongoClient(
        url,
        tz_aware=True,
        serverSelectionTimeoutMS=timeout_ms,
        socketTimeoutMS=timeout_ms,
    )
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        await client.close()
        raise StorageError("connect", str(e)) from e

    logger.info(f"[MongoDB] Connected to {client.address}")
    return client


def get_database(
    client: AsyncMongoClient, default_name: str = Config.MONGO_DB_NAME
) -> AsyncDatabase:
    """The database named in the connection string, else default_name."""
    return client.get_default_database(default=default_name)


async def close_mongo_client(client: AsyncMongoClient) -> None:
    if client:
        await client.close()
        logger.info("[MongoDB] Connection closed")
