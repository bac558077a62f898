from typing import Optional
import logging
from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestError, ConflictError, ForbiddenError, NotFoundError
from app.core.security import get_password_hash
from app.modules.follows.services.follow import get_follower_ids, get_following_ids
from app.modules.user_management.models.user import User
from app.modules.user_management.schemas.user import Profile, PublicProfile, UserUpdate

logger = logging.getLogger("app")

# Fields that can be changed but never blanked
_NON_EMPTY_FIELDS = ("name", "email", "username", "password")

def get_user(db: Session, user_id: str) -> Optional[User]:
    """Get user by ID"""
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_username(db: Session, username: str) -> Optional[User]:
    """Get user by username"""
    return db.query(User).filter(User.username == username).first()

def get_user_by_identifier(db: Session, identifier: str) -> Optional[User]:
    """
    Get user by email or username. Usernames never contain "@", so an
    identifier with one can only be an email.
    """
    if "@" in identifier:
        return db.query(User).filter(User.email == identifier.lower()).first()
    return get_user_by_username(db, identifier)

def check_username(username: str) -> None:
    if "@" in username:
        raise BadRequestError("Username cannot contain '@'")

def to_public_profile(user: User) -> PublicProfile:
    return PublicProfile(
        id=user.id,
        name=user.name,
        email=user.email,
        username=user.username,
        bio=user.bio or "",
        profile_pic=user.profile_pic or "",
    )

def to_profile(db: Session, user: User) -> Profile:
    """Public profile plus follow graph; never the password hash or update time"""
    return Profile(
        **to_public_profile(user).model_dump(),
        followers=get_follower_ids(db, user.id),
        following=get_following_ids(db, user.id),
        created_at=user.created_at,
    )

def get_profile(db: Session, username: str) -> Profile:
    user = get_user_by_username(db, username)
    if not user:
        raise NotFoundError("No such user found")
    return to_profile(db, user)

def _check_unique(db: Session, user: User, update_data: dict) -> None:
    """Reject an email or username change that collides with another account"""
    clauses = []
    if update_data.get("email") and update_data["email"] != user.email:
        clauses.append(User.email == update_data["email"])
    if update_data.get("username") and update_data["username"] != user.username:
        clauses.append(User.username == update_data["username"])
    if not clauses:
        return
    taken = db.query(User).filter(User.id != user.id, or_(*clauses)).first()
    if taken:
        raise ConflictError("User already exists", status_code=400)

def update_user(db: Session, target_id: str, acting_user_id: str, user_in: UserUpdate) -> User:
    """
    Apply a partial profile update.

    Only keys present in the request are touched, so an explicit empty bio
    clears it while an omitted bio is left alone.
    """
    db_user = get_user(db, acting_user_id)
    if not db_user:
        raise NotFoundError("User not found", status_code=400)

    if target_id != acting_user_id:
        raise ForbiddenError("You cannot update other's profile", status_code=400)

    update_data = user_in.model_dump(exclude_unset=True)

    for field in _NON_EMPTY_FIELDS:
        if field in update_data and not update_data[field]:
            raise BadRequestError(f"{field} cannot be empty")

    if "username" in update_data:
        check_username(update_data["username"])

    _check_unique(db, db_user, update_data)

    # Handle password update separately to ensure proper hashing
    if "password" in update_data:
        update_data["hashed_password"] = get_password_hash(update_data.pop("password"))

    for field, value in update_data.items():
        # bio and profilePic may be cleared with null as well as ""
        setattr(db_user, field, "" if value is None else value)

    db.commit()
    db.refresh(db_user)
    logger.info(f"Updated profile of user {db_user.id}: {sorted(update_data)}")
    return db_user
