from typing import List
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import InternalError, InvalidOperationError, NotFoundError
from app.core.membership import Membership, toggle
from app.modules.follows.models.follow import Follow
from app.modules.user_management.models.user import User

logger = logging.getLogger(__name__)

def get_following_ids(db: Session, user_id: str) -> List[str]:
    """IDs of the users `user_id` follows, oldest follow first"""
    rows = (
        db.query(Follow.followee_id)
        .filter(Follow.follower_id == user_id)
        .order_by(Follow.created_at)
        .all()
    )
    return [row.followee_id for row in rows]

def get_follower_ids(db: Session, user_id: str) -> List[str]:
    """IDs of the users following `user_id`, oldest follow first"""
    rows = (
        db.query(Follow.follower_id)
        .filter(Follow.followee_id == user_id)
        .order_by(Follow.created_at)
        .all()
    )
    return [row.follower_id for row in rows]

def get_follow(db: Session, follower_id: str, followee_id: str):
    return db.query(Follow).filter(
        Follow.follower_id == follower_id,
        Follow.followee_id == followee_id,
    ).first()

def is_following(db: Session, follower_id: str, followee_id: str) -> bool:
    return get_follow(db, follower_id, followee_id) is not None

def follow_unfollow(db: Session, target_id: str, acting_user_id: str) -> Membership:
    """
    Flip whether the acting user follows the target.

    Both sides of the relationship are the same row, so the change is a
    single insert or delete committed in one transaction.
    """
    if target_id == acting_user_id:
        raise InvalidOperationError("You cannot follow/unfollow yourself!")

    target = db.get(User, target_id)
    actor = db.get(User, acting_user_id)
    if target is None or actor is None:
        raise NotFoundError("User to follow not found", status_code=400)

    existing = get_follow(db, acting_user_id, target_id)
    change = toggle(existing is not None)
    if change is Membership.ADDED:
        db.add(Follow(follower_id=acting_user_id, followee_id=target_id))
    else:
        db.delete(existing)
    try:
        db.commit()
    except IntegrityError as e:
        # A concurrent toggle for the same pair got there first
        db.rollback()
        raise InternalError(
            "Internal server error",
            context={"follower_id": acting_user_id, "followee_id": target_id, "db_error": str(e.orig)},
        )

    logger.info(f"User {acting_user_id} {'followed' if change is Membership.ADDED else 'unfollowed'} {target_id}")
    return change
