"""
Repository Pattern for MongoDB

Clean database abstraction layer providing:
- Testability with substitute repositories
- Centralized query logic
- Driver errors translated in one place

Repositories:
- BaseRepository: Error translation and id parsing
- BlogPostRepository: Blog post CRUD and bulk operations
"""

from database.repositories.base import BaseRepository
from database.repositories.blog_posts import BlogPostRepository

__all__ = ["BaseRepository", "BlogPostRepository"]
