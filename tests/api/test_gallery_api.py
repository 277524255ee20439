"""Gallery routes — create, filtered listing, idempotent delete, no update route."""

from datetime import datetime, timezone
from uuid import uuid4

from records_api.models.gallery_item import GalleryItem


def _item(category: str, day: int) -> GalleryItem:
    return GalleryItem(
        title=f"{category}-{day}", image_url=f"https://img.test/{day}.jpg",
        category=category, created_at=datetime(2024, 6, day, tzinfo=timezone.utc),
    )


async def test_create_accepts_camel_case_and_defaults_category(client):
    res = await client.post("/api/gallery", json={
        "title": "Sunset", "imageUrl": "https://img.test/sunset.jpg",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["imageUrl"] == "https://img.test/sunset.jpg"
    assert body["category"] == "gallery"
    assert body["description"] is None


async def test_create_with_no_fields_succeeds(client, count_records):
    res = await client.post("/api/gallery", json={})
    assert res.status_code == 201
    assert res.json()["title"] is None
    assert await count_records(GalleryItem) == 1


async def test_create_rejects_unknown_category(client):
    res = await client.post("/api/gallery", json={"category": "holidays"})
    assert res.status_code == 400


async def test_list_is_newest_first_and_filterable(client, seed):
    await seed(_item("family", 3), _item("places", 9), _item("family", 7))

    everything = (await client.get("/api/gallery")).json()
    assert [i["title"] for i in everything] == ["places-9", "family-7", "family-3"]

    family = (await client.get("/api/gallery", params={"category": "family"})).json()
    assert [i["title"] for i in family] == ["family-7", "family-3"]

    unknown = (await client.get("/api/gallery", params={"category": "zzz"})).json()
    assert len(unknown) == 3


async def test_delete_existing_item(client, seed, count_records):
    (item,) = await seed(_item("other", 1))
    res = await client.delete(f"/api/gallery/{item.id}")
    assert res.status_code == 200
    assert res.json() == {"message": "Gallery item deleted"}
    assert await count_records(GalleryItem) == 0


async def test_delete_nonexistent_id_returns_200(client):
    res = await client.delete(f"/api/gallery/{uuid4()}")
    assert res.status_code == 200
    assert res.json() == {"message": "Gallery item deleted"}


async def test_update_route_does_not_exist(client, seed):
    (item,) = await seed(_item("other", 1))
    res = await client.put(f"/api/gallery/{item.id}", json={"title": "new"})
    assert res.status_code == 404
    assert res.json() == {"error": "Route not found"}
