"""Blog Post ORM — long-form articles grouped into site sections.

Invariants:
    - title, excerpt, content are non-null and non-empty at the storage level
    - category ∈ {blog, opinions, motivation}, default blog
    - updated_at is set at insert; RecordStore.update() advances it
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, String, Text, DateTime, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from records_api.core.domain_types import (
    BlogCategory, DEFAULT_BLOG_AUTHOR, enum_values,
)
from records_api.db.base import Base, not_empty, one_of, utcnow

TABLE = "blogs"


class BlogPost(Base):
    """A published blog article."""
    __tablename__ = TABLE
    __table_args__ = (
        not_empty(TABLE, "title"),
        not_empty(TABLE, "excerpt"),
        not_empty(TABLE, "content"),
        one_of(TABLE, "category", enum_values(BlogCategory)),
        Index("ix_blogs_category_created_at", "category", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    excerpt: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(
        String(200), nullable=False, default=DEFAULT_BLOG_AUTHOR,
    )
    category: Mapped[str] = mapped_column(
        String(20), nullable=False, default=BlogCategory.BLOG.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    featured: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
