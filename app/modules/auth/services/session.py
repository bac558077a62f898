"""
Session handling: a signed, expiring JWT carried in an HTTP-only cookie.

There is no server-side session table; revoking a session only asks the
client to drop the cookie.
"""
from datetime import timedelta
from typing import Optional

from fastapi import Response

from app.core.config import Settings
from app.core.exceptions import UnauthenticatedError
from app.core.security import create_access_token, verify_access_token


def issue_session(response: Response, user_id: str, settings: Settings) -> str:
    token = create_access_token(
        user_id,
        secret_key=settings.JWT_SECRET,
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        algorithm=settings.ALGORITHM,
    )
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.session_max_age,
        httponly=True,
        samesite=settings.SESSION_COOKIE_SAMESITE,
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return token

def verify_session(token: Optional[str], settings: Settings) -> str:
    """Return the user id the token was issued for"""
    if not token:
        raise UnauthenticatedError()

    user_id = verify_access_token(token, settings.JWT_SECRET, settings.ALGORITHM)
    if user_id is None:
        raise UnauthenticatedError()
    return user_id

def revoke_session(response: Response, settings: Settings) -> None:
    # Replace the cookie with an empty one that expires immediately
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value="",
        max_age=0,
        httponly=True,
        samesite=settings.SESSION_COOKIE_SAMESITE,
        secure=settings.SESSION_COOKIE_SECURE,
    )
