import uuid
import logging
from typing import Optional
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, InvalidCredentialsError
from app.core.security import get_password_hash, verify_password, verify_password_dummy
from app.modules.auth.schemas.auth import SignupRequest
from app.modules.user_management.models.user import User
from app.modules.user_management.services.user import check_username, get_user_by_identifier

logger = logging.getLogger("app")

def _user_exists(db: Session, email: str, username: str) -> bool:
    return db.query(User).filter(
        or_(User.email == email, User.username == username)
    ).first() is not None

def signup(db: Session, signup_in: SignupRequest) -> User:
    """Create an account; fails if the email or username is already taken"""
    check_username(signup_in.username)

    if _user_exists(db, signup_in.email, signup_in.username):
        raise ConflictError("User already exists", status_code=400)

    user = User(
        id=str(uuid.uuid4()),
        name=signup_in.name,
        email=signup_in.email,
        username=signup_in.username,
        hashed_password=get_password_hash(signup_in.password),
        bio="",
        profile_pic="",
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race against a concurrent signup with the same email/username
        db.rollback()
        raise ConflictError("User already exists", status_code=400)
    db.refresh(user)

    logger.info(f"New user signed up: {user.username} ({user.id})")
    return user

def login(db: Session, identifier: Optional[str], password: Optional[str]) -> User:
    """Resolve the user for an email/username and password pair"""
    if not identifier or not password:
        raise InvalidCredentialsError()

    user = get_user_by_identifier(db, identifier)
    if user is None:
        verify_password_dummy()
        raise InvalidCredentialsError()

    if not verify_password(password, user.hashed_password):
        raise InvalidCredentialsError()

    return user
