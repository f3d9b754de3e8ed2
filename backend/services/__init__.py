"""Services module."""

from fastapi import Depends

from database.dependencies import get_blog_post_repository
from database.repositories import BlogPostRepository
from services.blog_post_service import BlogPostService


def get_blog_post_service(
    repository: BlogPostRepository = Depends(get_blog_post_repository),
) -> BlogPostService:
    """FastAPI dependency that provides a service bound to the repository."""
    return BlogPostService(repository)


__all__ = [
    "BlogPostService",
    "get_blog_post_service",
]
