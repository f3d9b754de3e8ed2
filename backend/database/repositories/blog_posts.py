"""
BlogPostRepository

MongoDB operations for the 'blogposts' collection.

Methods:
- find_all(): All posts in insertion order
- find_by_id(post_id): Single post, or None for unknown/malformed ids
- create(data): Insert one post, return it with its generated id
- insert_many(documents): Batch insert, return generated ids
- update(post_id, updates): Set fields in place, return the updated post
- delete(post_id): Remove one post if present
- delete_all(): Remove every post
- count(): Number of stored posts
"""

import logging
from typing import Any, Dict, List, Optional

from models import BlogPost
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class BlogPostRepository(BaseRepository):
    """Document store adapter for blog posts."""

    collection_name = "blogposts"

    async def find_all(self) -> List[BlogPost]:
        return await self._execute("find_all", BlogPost.find_all().sort("+_id").to_list())

    async def find_by_id(self, post_id: str) -> Optional[BlogPost]:
        object_id = self.parse_id(post_id)
        if object_id is None:
            return None
        return await self._execute("find_by_id", BlogPost.get(object_id))

    async def create(self, data: Dict[str, Any]) -> BlogPost:
        """
        Insert a post built from API data.

        ``data`` uses the stored key names (``author.firstName`` etc.).
        ``created`` defaults to now when absent.
        """
        post = BlogPost(**data)
        await self._execute("create", post.insert())
        logger.info(f"Created blog post {post.id}")
        return post

    async def insert_many(self, documents: List[Dict[str, Any]]) -> List[str]:
        """Insert a batch of posts in a single operation."""
        posts = [BlogPost(**document) for document in documents]
        result = await self._execute("insert_many", BlogPost.insert_many(posts))
        return [str(inserted_id) for inserted_id in result.inserted_ids]

    async def update(self, post_id: str, updates: Dict[str, Any]) -> Optional[BlogPost]:
        """
        Apply a $set of the given fields.

        Returns None when no post matches. An empty update returns the post
        unchanged without writing.
        """
        post = await self.find_by_id(post_id)
        if post is None or not updates:
            return post

        await self._execute("update", post.set(updates))
        logger.info(f"Updated blog post {post_id}: {sorted(updates)}")
        return await self.find_by_id(post_id)

    async def delete(self, post_id: str) -> bool:
        """Delete a post. Returns False if nothing was removed."""
        object_id = self.parse_id(post_id)
        if object_id is None:
            return False

        result = await self._execute(
            "delete",
            BlogPost.get_motor_collection().delete_one({"_id": object_id}),
        )
        return result.deleted_count > 0

    async def delete_all(self) -> int:
        result = await self._execute(
            "delete_all",
            BlogPost.get_motor_collection().delete_many({}),
        )
        return result.deleted_count

    async def count(self) -> int:
        return await self._execute("count", BlogPost.find_all().count())
