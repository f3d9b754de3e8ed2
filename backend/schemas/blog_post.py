"""Blog post Pydantic schemas."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field, ValidationInfo, field_validator

from database import to_store_time
from schemas.common import BaseSchema, require_text

UPDATABLE_FIELDS = ("title", "content")


class AuthorSchema(BaseSchema):
    """Author name as sent by clients."""

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_name(cls, v: str, info: ValidationInfo) -> str:
        return require_text(v, info.field_name)


class BlogPostCreate(BaseSchema):
    """
    Blog post creation schema.

    ``id`` is never accepted; any client-supplied id is ignored.
    """

    author: AuthorSchema
    title: str
    content: str
    created: Optional[datetime] = None

    @field_validator("title", "content")
    @classmethod
    def validate_text(cls, v: str, info: ValidationInfo) -> str:
        return require_text(v, info.field_name)

    @field_validator("created")
    @classmethod
    def normalize_created(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Naive times are UTC; precision matches the store."""
        return to_store_time(v) if v is not None else v

    def to_document(self) -> Dict[str, Any]:
        """Fields to persist, keyed the way they are stored."""
        return self.model_dump(by_alias=True, exclude_none=True)


class BlogPostUpdate(BaseSchema):
    """
    Blog post update schema.

    Only ``title`` and ``content`` can change. ``author`` and ``created``
    are accepted in the body and ignored.
    """

    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None

    @field_validator("title", "content")
    @classmethod
    def validate_text(cls, v: Optional[str], info: ValidationInfo) -> Optional[str]:
        return require_text(v, info.field_name)

    def updates(self) -> Dict[str, Any]:
        """The updatable fields present in the request."""
        return {
            field: getattr(self, field)
            for field in UPDATABLE_FIELDS
            if getattr(self, field) is not None
        }


class BlogPostResponse(BaseSchema):
    """Blog post as returned to clients, author flattened to a display name."""

    id: str
    title: str
    content: str
    author: str
    created: datetime

    @classmethod
    def from_document(cls, post: Any) -> "BlogPostResponse":
        return cls(
            id=str(post.id),
            title=post.title,
            content=post.content,
            author=post.author.display_name,
            created=post.created,
        )
