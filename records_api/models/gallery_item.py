"""Gallery ORM — photos with optional captions, grouped into albums."""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from records_api.core.domain_types import GalleryCategory, enum_values
from records_api.db.base import Base, one_of, utcnow

TABLE = "gallery"


class GalleryItem(Base):
    """A gallery image. No field besides category is required."""
    __tablename__ = TABLE
    __table_args__ = (
        one_of(TABLE, "category", enum_values(GalleryCategory)),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str | None] = mapped_column(String(300), nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(
        String(20), nullable=False, default=GalleryCategory.GALLERY.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
