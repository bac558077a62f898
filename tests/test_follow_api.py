"""Follow/unfollow toggle"""

import pytest


async def profile(client, username):
    response = await client.get(f"/api/users/profile/{username}")
    assert response.status_code == 200
    return response.json()


class TestFollowToggle:
    @pytest.mark.asyncio
    async def test_follow_updates_both_sides(self, ann, bob):
        ann_client, ann_user = ann
        _, bob_user = bob

        response = await ann_client.post(f"/api/users/follow/{bob_user['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "User followed successfully"}
        assert (await profile(ann_client, "ann"))["following"] == [bob_user["id"]]
        assert (await profile(ann_client, "bob"))["followers"] == [ann_user["id"]]

    @pytest.mark.asyncio
    async def test_toggling_twice_restores_state(self, ann, bob):
        ann_client, _ = ann
        _, bob_user = bob
        url = f"/api/users/follow/{bob_user['id']}"

        await ann_client.post(url)
        response = await ann_client.post(url)

        assert response.status_code == 200
        assert response.json() == {"message": "User unfollowed successfully"}
        assert (await profile(ann_client, "ann"))["following"] == []
        assert (await profile(ann_client, "bob"))["followers"] == []

    @pytest.mark.asyncio
    async def test_mutual_follow(self, ann, bob):
        ann_client, ann_user = ann
        bob_client, bob_user = bob

        await ann_client.post(f"/api/users/follow/{bob_user['id']}")
        await bob_client.post(f"/api/users/follow/{ann_user['id']}")

        ann_profile = await profile(ann_client, "ann")
        assert ann_profile["followers"] == [bob_user["id"]]
        assert ann_profile["following"] == [bob_user["id"]]

    @pytest.mark.asyncio
    async def test_cannot_follow_self(self, ann):
        client, user = ann

        response = await client.post(f"/api/users/follow/{user['id']}")

        assert response.status_code == 400
        assert response.json() == {"error": "You cannot follow/unfollow yourself!"}

    @pytest.mark.asyncio
    async def test_unknown_target(self, ann):
        client, _ = ann

        response = await client.post("/api/users/follow/does-not-exist")

        assert response.status_code == 400
        assert response.json() == {"error": "User to follow not found"}

    @pytest.mark.asyncio
    async def test_requires_session(self, bob, client):
        _, bob_user = bob

        response = await client.post(f"/api/users/follow/{bob_user['id']}")

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized user"}

    @pytest.mark.asyncio
    async def test_tampered_cookie_is_rejected(self, bob, make_client):
        _, bob_user = bob
        client = await make_client()
        client.cookies.set("jwt", "not-a-real-token")

        response = await client.post(f"/api/users/follow/{bob_user['id']}")

        assert response.status_code == 401
