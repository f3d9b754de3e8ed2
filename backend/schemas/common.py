"""Common Pydantic schemas and base classes."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


def require_text(value: Optional[str], field_name: str) -> Optional[str]:
    """Reject empty or whitespace-only text. None passes through."""
    if value is not None and not value.strip():
        raise ValueError(f"{field_name} cannot be empty")
    return value


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    detail: str
