import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import InternalError
from app.core.membership import Membership, toggle
from app.db.session import utcnow
from app.modules.posts.likes.models.like import Like
from app.modules.posts.services.post import get_existing_post

logger = logging.getLogger(__name__)

def like_unlike(db: Session, post_id: str, user_id: str) -> Membership:
    """Flip whether `user_id` likes the post"""
    post = get_existing_post(db, post_id)

    existing = next((like for like in post.likes if like.user_id == user_id), None)
    change = toggle(existing is not None)
    if change is Membership.ADDED:
        post.likes.append(Like(user_id=user_id))
    else:
        # delete-orphan cascade removes the row
        post.likes.remove(existing)
    # Only child rows changed, so onupdate would not fire
    post.updated_at = utcnow()
    try:
        db.commit()
    except IntegrityError as e:
        # A concurrent toggle by the same user got there first
        db.rollback()
        raise InternalError(
            "Internal server error",
            context={"post_id": post_id, "user_id": user_id, "db_error": str(e.orig)},
        )

    logger.info(f"User {user_id} {change.value} like on post {post_id}")
    return change
