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


async def init_db(database: Optional[AsyncIOMotorDatabase] = None) -> None:
    """
    Initialize MongoDB connection and Beanie ODM.

    A ready database handle may be passed in (tests hand over a mock);
    otherwise a client is created from settings.mongodb_url.
    """
    global _client

    # Imported here to avoid a models -> database -> models cycle
    from models import get_document_models

    if database is None:
        _client = AsyncIOMotorClient(settings.mongodb_url)
        database = _client[settings.mongodb_database]

    await init_beanie(
        database=database,
        document_models=get_document_models(),
    )
    logger.info("Beanie initialized")


async def close_db() -> None:
    """
    Close MongoDB connection.
    """
    global _client
    if _client is not None:
        _client.close()
        _client = None


async def check_db_connection() -> bool:
    """
    Check if MongoDB connection is healthy.
    """
    if _client is None:
        return False

    try:
        await _client.admin.command("ping")
        return True
    except PyMongoError as e:
        logger.warning(f"MongoDB ping failed: {e}")
        return False


def get_db_info() -> dict:
    """
    Get database connection information and status.
    """
    sanitized_url = _sanitize_mongodb_url(settings.mongodb_url)

    return {
        "status": "connected" if _client is not None else "disconnected",
        "url": sanitized_url,
        "database": settings.mongodb_database,
        "environment": settings.environment,
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
