"""
Error Types and Formatting Utilities

Domain exceptions raised by the blog post service and store adapter, plus
consistent formatting for API responses and logs.

Functions:
- format_api_error(exception): Convert to API error response body
- format_log_error(exception): Convert to structured log entry
- format_validation_error(errors): Summarize request validation errors
"""

from typing import Any, Sequence


class BlogAPIError(Exception):
    """Base exception for blog API errors."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class PostValidationError(BlogAPIError):
    """Invalid request data (400)."""

    status_code = 400


class PostNotFoundError(BlogAPIError):
    """No blog post matches the requested id (404)."""

    status_code = 404

    def __init__(self, post_id: str):
        super().__init__(f"Blog post {post_id} not found")
        self.post_id = post_id


class StoreUnavailableError(BlogAPIError):
    """The document store could not complete an operation (503)."""

    status_code = 503


def format_api_error(exception: BlogAPIError) -> dict[str, Any]:
    """Build the JSON body returned to clients for a blog API error."""
    return {"detail": exception.message}


def format_log_error(exception: Exception) -> dict[str, Any]:
    """Build a structured log entry for any exception."""
    entry: dict[str, Any] = {
        "error_type": type(exception).__name__,
        "message": str(exception),
    }
    if isinstance(exception, BlogAPIError):
        entry["status_code"] = exception.status_code
    if exception.__cause__ is not None:
        entry["cause"] = repr(exception.__cause__)
    return entry


def format_validation_error(errors: Sequence[dict[str, Any]]) -> str:
    """
    Summarize pydantic request validation errors as one message.

    Only the first error is described; its location is reported without the
    leading "body" segment, e.g. ``author.firstName``.
    """
    if not errors:
        return "Invalid request body"

    error = errors[0]
    location = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = ".".join(location)

    if not field:
        return "Invalid request body"
    if error.get("type") == "missing":
        return f"Missing `{field}` in request body"
    return f"Invalid `{field}` in request body: {error.get('msg', 'invalid value')}"
