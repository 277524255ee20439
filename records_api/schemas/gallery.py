"""Gallery Schemas — request/response models for /api/gallery."""

from datetime import datetime
from uuid import UUID

from records_api.core.domain_types import GalleryCategory
from records_api.schemas.base import WireModel


class GalleryCreate(WireModel):
    title: str | None = None
    image_url: str | None = None
    description: str | None = None
    category: GalleryCategory = GalleryCategory.GALLERY


class GalleryResponse(WireModel):
    id: UUID
    title: str | None
    image_url: str | None
    description: str | None
    category: GalleryCategory
    created_at: datetime
