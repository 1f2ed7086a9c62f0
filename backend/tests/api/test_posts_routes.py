"""Posts Routes: list/get/create follow the same outcome mapping as users."""

import pytest


@pytest.fixture
async def author(client):
    res = await client.post(
        "/api/users", json={"name": "Alice", "email": "alice@example.com"},
    )
    return res.json()["data"]


async def test_create_post_returns_201(client, author):
    res = await client.post(
        "/api/posts",
        json={"title": "First", "content": "Body", "authorId": author["id"], "published": True},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Post created successfully"
    assert body["data"]["title"] == "First"
    assert body["data"]["authorId"] == author["id"]
    assert body["data"]["published"] is True


async def test_create_post_for_unknown_author_is_404(client):
    res = await client.post("/api/posts", json={"title": "Orphan", "authorId": 77})
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "User not found"}
    assert (await client.get("/api/posts")).json()["data"] == []


async def test_create_post_validation_is_400(client, author):
    res = await client.post("/api/posts", json={"title": "", "authorId": author["id"]})
    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "Title is required"}


async def test_list_posts_by_author(client, author):
    other = (await client.post(
        "/api/users", json={"name": "Bob", "email": "bob@example.com"},
    )).json()["data"]
    await client.post("/api/posts", json={"title": "A", "authorId": author["id"]})
    await client.post("/api/posts", json={"title": "B", "authorId": other["id"]})

    res = await client.get("/api/posts", params={"authorId": author["id"]})
    assert res.status_code == 200
    assert [p["title"] for p in res.json()["data"]] == ["A"]
    assert res.json()["message"] == "Retrieved 1 posts"


async def test_list_posts_bad_author_filter_is_400(client):
    res = await client.get("/api/posts", params={"authorId": "zero"})
    assert res.status_code == 400


async def test_get_post_round_trip_and_404(client, author):
    created = (await client.post(
        "/api/posts", json={"title": "A", "authorId": author["id"]},
    )).json()["data"]
    res = await client.get(f"/api/posts/{created['id']}")
    assert res.status_code == 200
    assert res.json()["data"] == created

    missing = await client.get("/api/posts/999")
    assert missing.status_code == 404
    assert missing.json() == {"success": False, "error": "Post not found"}


# ─── Ids beyond the INTEGER range ────────────────────────────────

HUGE_ID = "99999999999999999999"


async def test_get_post_beyond_integer_range_returns_404(client):
    res = await client.get(f"/api/posts/{HUGE_ID}")
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Post not found"}


async def test_create_post_with_author_beyond_integer_range_is_404(client):
    res = await client.post(
        "/api/posts", json={"title": "t", "authorId": int(HUGE_ID)},
    )
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "User not found"}
    assert (await client.get("/api/posts")).json()["data"] == []


async def test_list_posts_with_author_beyond_integer_range_is_empty(client, author):
    await client.post("/api/posts", json={"title": "A", "authorId": author["id"]})
    res = await client.get("/api/posts", params={"authorId": HUGE_ID})
    assert res.status_code == 200
    assert res.json()["data"] == []
