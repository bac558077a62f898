import logging
from typing import Optional
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestError
from app.db.session import utcnow
from app.modules.posts.models.post import Post
from app.modules.posts.replies.models.reply import Reply
from app.modules.posts.services.post import KEY, get_existing_post
from app.modules.user_management.models.user import User

logger = logging.getLogger(__name__)

def reply_to_post(db: Session, post_id: str, author: User, text: Optional[str]) -> Post:
    """Append a reply, snapshotting the author's current username and picture"""
    if not text:
        raise BadRequestError("Text field is required", key=KEY)

    post = get_existing_post(db, post_id, message="No such post found")

    post.replies.append(
        Reply(
            user_id=author.id,
            text=text,
            username=author.username,
            user_profile_pic=author.profile_pic,
        )
    )
    post.updated_at = utcnow()
    db.commit()
    db.refresh(post)

    logger.info(f"User {author.id} replied to post {post_id}")
    return post
