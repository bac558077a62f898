"""Home feed"""

import pytest

from conftest import create_post, signup


@pytest.mark.asyncio
async def test_feed_is_empty_without_follows(ann):
    client, user = ann
    await create_post(client, user, text="my own post")

    response = await client.get("/api/feed")

    assert response.status_code == 200
    assert response.json() == {"feedPosts": []}


@pytest.mark.asyncio
async def test_feed_has_only_followed_authors_newest_first(ann, bob, make_client):
    ann_client, ann_user = ann
    bob_client, bob_user = bob
    cat_client = await make_client()
    cat_user = await signup(cat_client, "cat")
    dan_client = await make_client()
    dan_user = await signup(dan_client, "dan")

    await ann_client.post(f"/api/users/follow/{bob_user['id']}")
    await ann_client.post(f"/api/users/follow/{cat_user['id']}")

    first = await create_post(bob_client, bob_user, text="bob 1")
    await create_post(dan_client, dan_user, text="dan 1")
    second = await create_post(cat_client, cat_user, text="cat 1")
    third = await create_post(bob_client, bob_user, text="bob 2")
    await create_post(ann_client, ann_user, text="ann 1")

    response = await ann_client.get("/api/feed")

    assert response.status_code == 200
    ids = [post["id"] for post in response.json()["feedPosts"]]
    assert ids == [third["id"], second["id"], first["id"]]


@pytest.mark.asyncio
async def test_unfollowed_author_leaves_feed(ann, bob):
    ann_client, _ = ann
    bob_client, bob_user = bob
    await create_post(bob_client, bob_user)

    await ann_client.post(f"/api/users/follow/{bob_user['id']}")
    assert len((await ann_client.get("/api/feed")).json()["feedPosts"]) == 1

    await ann_client.post(f"/api/users/follow/{bob_user['id']}")
    assert (await ann_client.get("/api/feed")).json()["feedPosts"] == []


@pytest.mark.asyncio
async def test_feed_paging(ann, bob):
    ann_client, _ = ann
    bob_client, bob_user = bob
    await ann_client.post(f"/api/users/follow/{bob_user['id']}")
    posts = [await create_post(bob_client, bob_user, text=f"post {i}") for i in range(3)]

    response = await ann_client.get("/api/feed/", params={"skip": 1, "limit": 1})

    assert response.status_code == 200
    assert [post["id"] for post in response.json()["feedPosts"]] == [posts[1]["id"]]


@pytest.mark.asyncio
async def test_feed_requires_session(client):
    response = await client.get("/api/feed")

    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized user"}
