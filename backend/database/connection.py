"""
MongoDB connection and Beanie ODM initialization.

This module provides:
- MongoDB client connection via Motor (async driver)
- Beanie ODM initialization
- Health check utilities
"""

import logging
from typing import Optional

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from config import settings

logger = logging.getLogger(__name__)

# Global MongoDB client instance
_client: Optional[AsyncIOMotorClient] = None
_database_name: Optional[str] = None
_mongodb_url: Optional[str] = None


def create_client(mongodb_url: str, timeout_ms: Optional[int] = None) -> AsyncIOMotorClient:
    """
    Create a Motor client with timezone-aware datetimes.
    """
    return AsyncIOMotorClient(
        mongodb_url,
        tz_aware=True,
        serverSelectionTimeoutMS=timeout_ms or settings.mongodb_timeout_ms,
    )


async def init_db(
    mongodb_url: Optional[str] = None,
    database_name: Optional[str] = None,
    timeout_ms: Optional[int] = None,
) -> None:
    """
    Initialize MongoDB connection and Beanie ODM.

    Defaults to the configured production store; the integration suite
    passes the test store location instead.
    """
    global _client, _database_name, _mongodb_url

    _mongodb_url = mongodb_url or settings.mongodb_url
    _database_name = database_name or settings.mongodb_database
    _client = create_client(_mongodb_url, timeout_ms)

    # Imported here to avoid a cycle: models depend on database.base
    from models import get_document_models

    await init_beanie(
        database=_client[_database_name],
        document_models=get_document_models(),
    )


async def close_db() -> None:
    """
    Close MongoDB connection.
    """
    global _client
    if _client is not None:
        _client.close()
        _client = None


def get_client() -> AsyncIOMotorClient:
    """
    Get the MongoDB client instance.
    """
    if _client is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return _client


def get_database() -> AsyncIOMotorDatabase:
    """
    Get the MongoDB database instance.
    """
    return get_client()[_database_name or settings.mongodb_database]


async def drop_database() -> None:
    """
    Drop the connected database and every collection in it.
    """
    database = get_database()
    await get_client().drop_database(database.name)


async def check_db_connection() -> bool:
    """
    Check if MongoDB connection is healthy.
    """
    if _client is None:
        return False

    try:
        await _client.admin.command("ping")
        return True
    except PyMongoError:
        return False


async def probe_mongodb(mongodb_url: str, timeout_ms: int = 2000) -> bool:
    """
    Check whether a MongoDB server answers at the given URL.

    Uses a short-lived client so it can run before init_db().
    """
    client = create_client(mongodb_url, timeout_ms)
    try:
        await client.admin.command("ping")
        return True
    except PyMongoError as e:
        logger.warning(f"MongoDB not reachable at {_sanitize_mongodb_url(mongodb_url)}: {e}")
        return False
    finally:
        client.close()


def get_db_info() -> dict:
    """
    Get database connection information and status.
    """
    # Sanitize MongoDB URL to hide credentials
    sanitized_url = _sanitize_mongodb_url(_mongodb_url or settings.mongodb_url)

    return {
        "status": "connected" if _client is not None else "disconnected",
        "url": sanitized_url,
        "database": _database_name or settings.mongodb_database,
    }


def _sanitize_mongodb_url(url: str) -> str:
    """
    Hide password in MongoDB URL for safe logging.
    """
    if "@" not in url:
        return url

    try:
        # Handle mongodb+srv:// or mongodb://
        if "://" in url:
            protocol, rest = url.split("://", 1)
            if "@" in rest:
                credentials, host = rest.split("@", 1)
                if ":" in credentials:
                    username = credentials.split(":", 1)[0]
                    return f"{protocol}://{username}:***@{host}"
        return url
    except ValueError:
        return url
