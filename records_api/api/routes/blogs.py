"""Blog Routes — full CRUD for blog posts.

Invariants:
    - List filters by category only when the query value is a recognized BlogCategory
    - POST has no handler-level required-field check; the storage constraint rejects
      missing title/excerpt/content and the failure surfaces as a generic 500
    - PUT merges supplied fields and always advances updated_at
    - DELETE of an absent id succeeds
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from records_api.core.domain_types import BlogCategory, parse_category
from records_api.core.errors import ResourceNotFoundError
from records_api.db.base import utcnow
from records_api.infrastructure.record_store import RecordStore, get_record_store
from records_api.models.blog_post import BlogPost
from records_api.schemas.base import MessageResponse
from records_api.schemas.blog import BlogCreate, BlogResponse, BlogUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/blogs", tags=["blogs"])


@router.get("", response_model=list[BlogResponse])
async def list_blogs(
    category: str | None = Query(None),
    store: RecordStore = Depends(get_record_store),
):
    """Blog posts, newest first, optionally narrowed to one category."""
    selected = parse_category(BlogCategory, category)
    if category and selected is None:
        logger.info(f"Ignoring unrecognized blog category filter: {category!r}")
    posts = await store.list(
        BlogPost, category=selected.value if selected else None,
    )
    return [BlogResponse.model_validate(p) for p in posts]


@router.get("/{blog_id}", response_model=BlogResponse)
async def get_blog(blog_id: str, store: RecordStore = Depends(get_record_store)):
    post = await store.get(BlogPost, blog_id)
    if post is None:
        raise ResourceNotFoundError("Blog", blog_id)
    return BlogResponse.model_validate(post)


@router.post(
    "", response_model=BlogResponse, status_code=status.HTTP_201_CREATED,
)
async def create_blog(
    body: BlogCreate, store: RecordStore = Depends(get_record_store),
):
    post = await store.insert(BlogPost(
        title=body.title,
        excerpt=body.excerpt,
        content=body.content,
        category=body.category.value,
        featured=body.featured,
    ))
    return BlogResponse.model_validate(post)


@router.put("/{blog_id}", response_model=BlogResponse)
async def update_blog(
    blog_id: str,
    body: BlogUpdate,
    store: RecordStore = Depends(get_record_store),
):
    """Merge the supplied fields into a post."""
    changes = body.changes()
    changes["updated_at"] = utcnow()
    post = await store.update(BlogPost, blog_id, changes)
    if post is None:
        raise ResourceNotFoundError("Blog", blog_id)
    return BlogResponse.model_validate(post)


@router.delete("/{blog_id}", response_model=MessageResponse)
async def delete_blog(blog_id: str, store: RecordStore = Depends(get_record_store)):
    await store.delete(BlogPost, blog_id)
    return MessageResponse(message="Blog deleted")
