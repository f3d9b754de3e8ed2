"""Blog posts API routes."""

from fastapi import APIRouter, Depends, Response, status

from schemas.blog_post import BlogPostCreate, BlogPostResponse, BlogPostUpdate
from schemas.common import ErrorResponse
from services import BlogPostService, get_blog_post_service

router = APIRouter(
    prefix="/posts",
    tags=["Posts"],
    responses={503: {"model": ErrorResponse, "description": "Document store unavailable"}},
)


@router.get("", response_model=list[BlogPostResponse])
async def list_posts(service: BlogPostService = Depends(get_blog_post_service)):
    """List every blog post."""
    posts = await service.list_posts()
    return [BlogPostResponse.from_document(post) for post in posts]


@router.post(
    "",
    response_model=BlogPostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_post(
    payload: BlogPostCreate,
    service: BlogPostService = Depends(get_blog_post_service),
):
    """Create a blog post. The store assigns its id and creation time."""
    post = await service.create_post(payload)
    return BlogPostResponse.from_document(post)


@router.get(
    "/{post_id}",
    response_model=BlogPostResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_post(post_id: str, service: BlogPostService = Depends(get_blog_post_service)):
    """Get a single blog post."""
    post = await service.get_post(post_id)
    return BlogPostResponse.from_document(post)


# Update answers 201 Created, not 200.
@router.put(
    "/{post_id}",
    response_model=BlogPostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_post(
    post_id: str,
    payload: BlogPostUpdate,
    service: BlogPostService = Depends(get_blog_post_service),
):
    """Update the title and/or content of a blog post."""
    post = await service.update_post(post_id, payload)
    return BlogPostResponse.from_document(post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: str, service: BlogPostService = Depends(get_blog_post_service)):
    """Delete a blog post. Deleting a missing post also succeeds."""
    await service.delete_post(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
