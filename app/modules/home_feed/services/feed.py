from typing import List, Optional
from sqlalchemy import desc
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.modules.follows.services.follow import get_following_ids
from app.modules.posts.models.post import Post as PostModel
from app.modules.posts.schemas.post import Post as PostSchema
from app.modules.posts.services.post import KEY, to_post_schema
from app.modules.user_management.services.user import get_user

def get_home_feed(db: Session, user_id: str, skip: int = 0, limit: Optional[int] = None) -> List[PostSchema]:
    """Posts by everyone the user follows, newest first"""
    user = get_user(db, user_id)
    if not user:
        raise NotFoundError("No such user found", key=KEY)

    following_ids = get_following_ids(db, user.id)
    if not following_ids:
        return []

    query = _build_feed_query(db, following_ids).offset(skip)
    if limit is not None:
        query = query.limit(limit)

    return [to_post_schema(post) for post in query.all()]

def _build_feed_query(db: Session, author_ids: List[str]):
    return (
        db.query(PostModel)
        .filter(PostModel.author_id.in_(author_ids))
        .order_by(desc(PostModel.created_at))
    )
