"""Signup, login and logout over HTTP"""

from datetime import timedelta

import pytest

from app.core.security import create_access_token
from conftest import signup


class TestSignup:
    @pytest.mark.asyncio
    async def test_signup_returns_public_profile_and_session(self, client):
        response = await client.post(
            "/api/users/signup",
            json={"name": "Ann", "email": "ann@x.com", "username": "ann", "password": "pw123"},
        )

        assert response.status_code == 201
        body = response.json()
        assert set(body) == {"id", "name", "email", "username", "bio", "profilePic"}
        assert body["name"] == "Ann"
        assert body["email"] == "ann@x.com"
        assert body["username"] == "ann"
        assert body["bio"] == ""
        assert body["profilePic"] == ""

        cookie = response.headers["set-cookie"].lower()
        assert cookie.startswith("jwt=")
        assert "httponly" in cookie
        assert "samesite=strict" in cookie
        assert "jwt" in client.cookies

    @pytest.mark.asyncio
    async def test_email_is_stored_lowercase(self, client):
        body = await signup(client, "ann", email="Ann@X.com")
        assert body["email"] == "ann@x.com"

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected(self, make_client):
        first = await make_client()
        await signup(first, "ann")

        second = await make_client()
        response = await second.post(
            "/api/users/signup",
            json={"name": "Other", "email": "ann@x.com", "username": "other", "password": "pw"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "User already exists"}
        assert "jwt" not in second.cookies

    @pytest.mark.asyncio
    async def test_duplicate_username_is_rejected(self, make_client, db):
        await signup(await make_client(), "ann")

        response = await (await make_client()).post(
            "/api/users/signup",
            json={"name": "Ann 2", "email": "ann2@x.com", "username": "ann", "password": "pw"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "User already exists"}

        from app.modules.user_management.models.user import User
        assert db.query(User).filter(User.username == "ann").count() == 1

    @pytest.mark.asyncio
    async def test_missing_fields_are_invalid_request_data(self, client):
        response = await client.post("/api/users/signup", json={"name": "Ann", "email": "ann@x.com"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request data"

    @pytest.mark.asyncio
    async def test_malformed_email_is_invalid_request_data(self, client):
        response = await client.post(
            "/api/users/signup",
            json={"name": "Ann", "email": "not-an-email", "username": "ann", "password": "pw"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request data"


    @pytest.mark.asyncio
    async def test_username_with_at_sign_is_rejected(self, ann, make_client):
        client = await make_client()
        response = await client.post(
            "/api/users/signup",
            json={"name": "Other", "email": "other@x.com", "username": "ann@x.com", "password": "pw"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Username cannot contain '@'"}


class TestLogin:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "credentials",
        [
            {"identifier": "ann"},
            {"identifier": "ann@x.com"},
            {"identifier": "ANN@x.com"},
            {"email": "ann@x.com"},
            {"username": "ann"},
        ],
    )
    async def test_login_with_email_or_username(self, make_client, credentials):
        user = await signup(await make_client(), "ann")

        client = await make_client()
        response = await client.post("/api/users/login", json={**credentials, "password": "secret123"})

        assert response.status_code == 200
        assert response.json()["id"] == user["id"]
        assert "jwt" in client.cookies

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "credentials",
        [
            {"identifier": "ann", "password": "wrong"},
            {"identifier": "nobody", "password": "secret123"},
            {"identifier": "ann"},
            {"password": "secret123"},
        ],
    )
    async def test_failures_share_one_message(self, make_client, credentials):
        await signup(await make_client(), "ann")

        client = await make_client()
        response = await client.post("/api/users/login", json=credentials)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid username or password"}
        assert "jwt" not in client.cookies


class TestLogout:
    @pytest.mark.asyncio
    async def test_logout_clears_cookie(self, ann):
        client, _ = ann

        response = await client.post("/api/users/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "User logged out successfully!"}
        assert "max-age=0" in response.headers["set-cookie"].lower()
        assert "jwt" not in client.cookies

    @pytest.mark.asyncio
    async def test_logged_out_client_cannot_use_protected_routes(self, ann):
        client, _ = ann
        await client.post("/api/users/logout")

        response = await client.get("/api/feed")

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized user"}

    @pytest.mark.asyncio
    async def test_logout_without_session_still_succeeds(self, client):
        response = await client.post("/api/users/logout")
        assert response.status_code == 200


class TestSessionCookie:
    @pytest.mark.asyncio
    async def test_signed_token_for_missing_user_is_rejected(self, make_client, settings):
        client = await make_client()
        client.cookies.set("jwt", create_access_token("no-such-user", settings.JWT_SECRET, timedelta(minutes=5)))

        response = await client.get("/api/feed")

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized user"}

    @pytest.mark.asyncio
    async def test_expired_token_is_rejected(self, ann, make_client, settings):
        _, user = ann
        client = await make_client()
        client.cookies.set("jwt", create_access_token(user["id"], settings.JWT_SECRET, timedelta(seconds=-5)))

        response = await client.get("/api/feed")

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized user"}

    @pytest.mark.asyncio
    async def test_token_signed_with_another_secret_is_rejected(self, ann, make_client):
        _, user = ann
        client = await make_client()
        client.cookies.set("jwt", create_access_token(user["id"], "some-other-secret", timedelta(minutes=5)))

        response = await client.get("/api/feed")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_valid_token_is_accepted(self, ann, make_client, settings):
        _, user = ann
        client = await make_client()
        client.cookies.set("jwt", create_access_token(user["id"], settings.JWT_SECRET, timedelta(minutes=5)))

        response = await client.get("/api/feed")

        assert response.status_code == 200
