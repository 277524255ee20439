"""Gallery Routes — create, list and delete gallery items (no update route)."""

import logging

from fastapi import APIRouter, Depends, Query, status

from records_api.core.domain_types import GalleryCategory, parse_category
from records_api.infrastructure.record_store import RecordStore, get_record_store
from records_api.models.gallery_item import GalleryItem
from records_api.schemas.base import MessageResponse
from records_api.schemas.gallery import GalleryCreate, GalleryResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/gallery", tags=["gallery"])


@router.get("", response_model=list[GalleryResponse])
async def list_gallery(
    category: str | None = Query(None),
    store: RecordStore = Depends(get_record_store),
):
    """Gallery items, newest first; unrecognized categories are ignored."""
    selected = parse_category(GalleryCategory, category)
    if category and selected is None:
        logger.info(f"Ignoring unrecognized gallery category filter: {category!r}")
    items = await store.list(
        GalleryItem, category=selected.value if selected else None,
    )
    return [GalleryResponse.model_validate(i) for i in items]


@router.post(
    "", response_model=GalleryResponse, status_code=status.HTTP_201_CREATED,
)
async def create_gallery_item(
    body: GalleryCreate, store: RecordStore = Depends(get_record_store),
):
    item = await store.insert(GalleryItem(
        title=body.title,
        image_url=body.image_url,
        description=body.description,
        category=body.category.value,
    ))
    return GalleryResponse.model_validate(item)


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_gallery_item(
    item_id: str, store: RecordStore = Depends(get_record_store),
):
    await store.delete(GalleryItem, item_id)
    return MessageResponse(message="Gallery item deleted")
