"""Blog Schemas — request/response models for /api/blogs.

Invariants:
    - BlogCreate does not require title/excerpt/content; the storage constraint does
    - BlogCreate ignores author: new posts always get the default author
    - BlogUpdate carries only the fields a client may change; created_at is not one
    - BlogUpdate fields may be omitted but never set to null
"""

from datetime import datetime
from uuid import UUID

from pydantic import field_validator

from records_api.core.domain_types import BlogCategory
from records_api.schemas.base import WireModel


class BlogCreate(WireModel):
    title: str | None = None
    excerpt: str | None = None
    content: str | None = None
    category: BlogCategory = BlogCategory.BLOG
    featured: bool = False


class BlogUpdate(WireModel):
    """Partial update. Only fields present in the request body are applied."""
    title: str | None = None
    excerpt: str | None = None
    content: str | None = None
    author: str | None = None
    category: BlogCategory | None = None
    featured: bool | None = None

    @field_validator(
        "title", "excerpt", "content", "author", "category", "featured",
        mode="before",
    )
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v

    def changes(self) -> dict:
        """Explicitly supplied fields, keyed by attribute name."""
        return self.model_dump(exclude_unset=True, mode="json")


class BlogResponse(WireModel):
    id: UUID
    title: str
    excerpt: str
    content: str
    author: str
    category: BlogCategory
    created_at: datetime
    updated_at: datetime
    featured: bool
