"""
BaseRepository

Base class for MongoDB repositories providing driver error translation.

Every store call goes through _execute(), which re-raises PyMongo failures
as StoreUnavailableError so no raw driver exception leaves the store layer.
Failures are not retried.
"""

import logging
from typing import Awaitable, TypeVar

from bson import ObjectId
from pymongo.errors import PyMongoError

from utils.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository:
    """Common plumbing for repositories backed by Beanie documents."""

    collection_name: str = ""

    async def _execute(self, operation: str, awaitable: Awaitable[T]) -> T:
        """Await a store operation, translating driver errors."""
        try:
            return await awaitable
        except PyMongoError as e:
            logger.error(f"{self.collection_name}.{operation} failed: {e}")
            raise StoreUnavailableError(
                f"Document store unavailable during {operation}"
            ) from e

    @staticmethod
    def parse_id(document_id: str) -> ObjectId | None:
        """Return the ObjectId for a hex id string, or None if malformed."""
        if not ObjectId.is_valid(document_id):
            return None
        return ObjectId(document_id)
