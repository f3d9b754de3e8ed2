"""Blog post management service."""

import logging
from typing import List

from database.repositories import BlogPostRepository
from models import BlogPost
from schemas.blog_post import BlogPostCreate, BlogPostUpdate
from utils.errors import PostNotFoundError, PostValidationError

logger = logging.getLogger(__name__)


class BlogPostService:
    """
    Business rules for blog posts on top of the repository.

    Stateless: every call resolves independently against the store.
    """

    def __init__(self, repository: BlogPostRepository):
        self.repository = repository

    async def list_posts(self) -> List[BlogPost]:
        return await self.repository.find_all()

    async def get_post(self, post_id: str) -> BlogPost:
        post = await self.repository.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def create_post(self, payload: BlogPostCreate) -> BlogPost:
        return await self.repository.create(payload.to_document())

    async def update_post(self, post_id: str, payload: BlogPostUpdate) -> BlogPost:
        """
        Update title and/or content of an existing post.

        Raises:
            PostValidationError: body id present and different from post_id
            PostNotFoundError: no post matches post_id
        """
        if payload.id is not None and payload.id != post_id:
            message = (
                f"Request path id ({post_id}) and request body id "
                f"({payload.id}) must match"
            )
            logger.warning(message)
            raise PostValidationError(message)

        post = await self.repository.update(post_id, payload.updates())
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def delete_post(self, post_id: str) -> None:
        """Delete a post. Missing ids are not an error."""
        deleted = await self.repository.delete(post_id)
        if deleted:
            logger.info(f"Deleted blog post {post_id}")
        else:
            logger.info(f"Delete requested for missing blog post {post_id}")
