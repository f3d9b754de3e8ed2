"""
FastAPI dependency injection for the document store.
Provides repository dependencies for API endpoints.
"""

from database.repositories import BlogPostRepository

_blog_post_repository = BlogPostRepository()


def get_blog_post_repository() -> BlogPostRepository:
    """
    FastAPI dependency that provides the blog post repository.

    Usage:
        @router.get("/posts")
        async def list_posts(repo: BlogPostRepository = Depends(get_blog_post_repository)):
            return await repo.find_all()

    Tests substitute another repository through ``app.dependency_overrides``.
    """
    return _blog_post_repository
