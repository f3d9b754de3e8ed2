"""
Base document class for Beanie ODM.

Provides the creation timestamp shared by every stored document.
"""

from datetime import datetime, timezone

from beanie import Document
from pydantic import Field, field_validator


def to_store_time(value: datetime) -> datetime:
    """
    Normalize a datetime to what MongoDB stores and returns.

    Naive values are taken as UTC. BSON dates keep milliseconds, so the
    microseconds below that are dropped.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime, at store precision."""
    return to_store_time(datetime.now(timezone.utc))


class BaseDocument(Document):
    """
    Base document class for all blog models.

    Provides:
    - ``created`` timestamp, defaulted at construction when not supplied
      and always held as the store will return it
    """

    created: datetime = Field(default_factory=utc_now)

    @field_validator("created")
    @classmethod
    def normalize_created(cls, v: datetime) -> datetime:
        return to_store_time(v)
