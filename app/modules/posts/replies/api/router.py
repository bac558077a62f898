from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.deps import get_current_user
from app.modules.posts.replies.schemas.reply import ReplyCreate
from app.modules.posts.replies.services.reply import reply_to_post
from app.modules.posts.schemas.post import PostResponse
from app.modules.posts.services.post import to_post_schema
from app.modules.user_management.models.user import User

router = APIRouter()

@router.post("/{post_id}/reply", response_model=PostResponse)
def reply_to_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to reply to"),
    reply_in: ReplyCreate,
    current_user: User = Depends(get_current_user),
) -> PostResponse:
    """Add a reply to a post"""
    post = reply_to_post(db, post_id, current_user, reply_in.text)
    return PostResponse(message="Reply added successfully", post=to_post_schema(post))
