"""Blog routes — CRUD, category filtering and storage-level required fields.

Invariants:
    - ?category=opinions returns only opinions; absent/unrecognized returns everything
    - POST without title/excerpt/content is rejected by storage → generic 500
    - PUT {title} changes only title and advances updatedAt
    - DELETE of an absent id → 200
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from records_api.models.blog_post import BlogPost

POST = {"title": "T", "excerpt": "E", "content": "C"}


def _blog(category: str, day: int, title: str | None = None) -> BlogPost:
    stamp = datetime(2024, 3, day, tzinfo=timezone.utc)
    return BlogPost(
        title=title or f"{category}-{day}", excerpt="e", content="c",
        category=category, created_at=stamp, updated_at=stamp,
    )


async def test_create_applies_defaults(client):
    res = await client.post("/api/blogs", json=POST)
    assert res.status_code == 201
    body = res.json()
    assert body["author"] == "Raushan Kumar"
    assert body["category"] == "blog"
    assert body["featured"] is False
    assert body["createdAt"] and body["updatedAt"]


async def test_create_ignores_author_and_created_at(client):
    res = await client.post("/api/blogs", json={
        **POST, "author": "Someone Else", "createdAt": "2000-01-01T00:00:00Z",
        "category": "motivation", "featured": True,
    })
    assert res.status_code == 201
    body = res.json()
    assert body["author"] == "Raushan Kumar"
    assert not body["createdAt"].startswith("2000-01-01")
    assert body["category"] == "motivation"
    assert body["featured"] is True


async def test_create_without_required_fields_fails_at_storage(client, count_records):
    res = await client.post("/api/blogs", json={"title": "only a title"})
    assert res.status_code == 500
    assert res.json() == {"error": "Server error"}
    assert await count_records(BlogPost) == 0


async def test_create_with_empty_required_field_fails_at_storage(client, count_records):
    res = await client.post("/api/blogs", json={**POST, "content": ""})
    assert res.status_code == 500
    assert res.json() == {"error": "Server error"}
    assert await count_records(BlogPost) == 0


async def test_create_rejects_unknown_category(client, count_records):
    res = await client.post("/api/blogs", json={**POST, "category": "news"})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request data"
    assert await count_records(BlogPost) == 0


async def test_list_filters_by_category(client, seed):
    await seed(_blog("opinions", 1), _blog("blog", 2), _blog("opinions", 3), _blog("motivation", 4))
    res = await client.get("/api/blogs", params={"category": "opinions"})
    assert res.status_code == 200
    body = res.json()
    assert [b["title"] for b in body] == ["opinions-3", "opinions-1"]
    assert all(b["category"] == "opinions" for b in body)


async def test_list_unrecognized_category_returns_everything(client, seed):
    await seed(_blog("opinions", 1), _blog("blog", 2), _blog("motivation", 3))
    res = await client.get("/api/blogs", params={"category": "gossip"})
    assert res.status_code == 200
    assert len(res.json()) == 3


async def test_list_is_newest_first(client, seed):
    await seed(_blog("blog", 2), _blog("blog", 5), _blog("blog", 1))
    res = await client.get("/api/blogs")
    assert [b["title"] for b in res.json()] == ["blog-5", "blog-2", "blog-1"]


async def test_get_by_id(client, seed):
    (post,) = await seed(_blog("blog", 1))
    res = await client.get(f"/api/blogs/{post.id}")
    assert res.status_code == 200
    assert res.json()["id"] == str(post.id)


async def test_get_unknown_id_returns_404(client):
    res = await client.get(f"/api/blogs/{uuid4()}")
    assert res.status_code == 404
    assert res.json() == {"error": "Blog not found"}


async def test_update_title_only_and_advances_updated_at(client):
    created = (await client.post("/api/blogs", json=POST)).json()

    res = await client.put(f"/api/blogs/{created['id']}", json={"title": "X"})
    assert res.status_code == 200
    updated = res.json()
    assert updated["title"] == "X"
    for field in ("excerpt", "content", "author", "category", "featured", "createdAt"):
        assert updated[field] == created[field]
    assert (
        datetime.fromisoformat(updated["updatedAt"])
        >= datetime.fromisoformat(created["updatedAt"])
    )


async def test_update_cannot_rewrite_created_at(client, seed):
    (post,) = await seed(_blog("blog", 1))
    before = (await client.get(f"/api/blogs/{post.id}")).json()
    res = await client.put(
        f"/api/blogs/{post.id}", json={"createdAt": "2000-01-01T00:00:00Z"},
    )
    assert res.status_code == 200
    assert res.json()["createdAt"] == before["createdAt"]
    assert res.json()["updatedAt"] > before["updatedAt"]


async def test_update_merges_several_fields(client, seed):
    (post,) = await seed(_blog("blog", 1))
    res = await client.put(f"/api/blogs/{post.id}", json={
        "category": "opinions", "featured": True, "author": "Guest",
    })
    body = res.json()
    assert (body["category"], body["featured"], body["author"]) == ("opinions", True, "Guest")
    assert body["title"] == "blog-1"


async def test_update_unknown_id_returns_404(client):
    res = await client.put(f"/api/blogs/{uuid4()}", json={"title": "X"})
    assert res.status_code == 404
    assert res.json() == {"error": "Blog not found"}


@pytest.mark.parametrize("field", ["title", "featured"])
async def test_update_with_null_field_returns_400_and_keeps_record(client, seed, field):
    (post,) = await seed(_blog("blog", 1))
    res = await client.put(f"/api/blogs/{post.id}", json={field: None})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request data"
    assert res.json()["details"][0]["field"] == f"body.{field}"
    body = (await client.get(f"/api/blogs/{post.id}")).json()
    assert (body["title"], body["featured"]) == ("blog-1", False)


async def test_delete_removes_post(client, seed, count_records):
    (post,) = await seed(_blog("blog", 1))
    res = await client.delete(f"/api/blogs/{post.id}")
    assert res.status_code == 200
    assert res.json() == {"message": "Blog deleted"}
    assert await count_records(BlogPost) == 0
    assert (await client.get(f"/api/blogs/{post.id}")).status_code == 404


async def test_delete_absent_id_is_noop_success(client):
    res = await client.delete(f"/api/blogs/{uuid4()}")
    assert res.status_code == 200
    assert res.json() == {"message": "Blog deleted"}
