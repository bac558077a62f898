from typing import Optional
import uuid
import logging
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestError, ForbiddenError, NotFoundError
from app.modules.posts.models.post import MAX_TEXT_LENGTH, Post
from app.modules.posts.replies.schemas.reply import Reply as ReplySchema
from app.modules.posts.schemas.post import Post as PostSchema, PostCreate
from app.modules.user_management.services.user import get_user

logger = logging.getLogger(__name__)

# Post-side errors are rendered as {"message": ...}
KEY = "message"

def to_post_schema(post: Post) -> PostSchema:
    """Create a post schema object from a post model"""
    return PostSchema(
        id=post.id,
        posted_by=post.author_id,
        text=post.text,
        img=post.img,
        likes=[like.user_id for like in post.likes],
        replies=[ReplySchema.model_validate(reply) for reply in post.replies],
        created_at=post.created_at,
        updated_at=post.updated_at,
    )

def get_post(db: Session, post_id: str) -> Optional[Post]:
    """Get post by ID"""
    return db.query(Post).filter(Post.id == post_id).first()

def get_existing_post(db: Session, post_id: str, message: str = "Post not found") -> Post:
    post = get_post(db, post_id)
    if not post:
        raise NotFoundError(message, key=KEY)
    return post

def create_post(db: Session, post_in: PostCreate, acting_user_id: str) -> Post:
    """Create a post on behalf of the signed-in user"""
    if not post_in.posted_by or not post_in.text:
        raise BadRequestError("Insufficient data to create a post", key=KEY)

    author = get_user(db, post_in.posted_by)
    if not author:
        raise NotFoundError("User not found", key=KEY)

    if author.id != acting_user_id:
        raise ForbiddenError("Unauthorized to create a post", status_code=401, key=KEY)

    if len(post_in.text) > MAX_TEXT_LENGTH:
        raise BadRequestError(f"Text must be less than {MAX_TEXT_LENGTH} characters", key=KEY)

    post = Post(
        id=str(uuid.uuid4()),
        author_id=author.id,
        text=post_in.text,
        img=post_in.img,
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info(f"Created post {post.id} for author ID: {author.id}")
    return post

def delete_post(db: Session, post_id: str, acting_user_id: str) -> None:
    """
    Delete a post along with its likes and replies. Only the author may do this.
    """
    post = get_existing_post(db, post_id)

    if post.author_id != acting_user_id:
        raise ForbiddenError("Unauthorized to delete post", status_code=400, key=KEY)

    db.delete(post)
    db.commit()
    logger.info(f"Deleted post with ID: {post_id}")
