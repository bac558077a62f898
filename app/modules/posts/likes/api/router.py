from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.core.membership import Membership
from app.db.session import get_db
from app.deps import get_current_user
from app.modules.auth.schemas.auth import MessageResponse
from app.modules.posts.likes.services.like import like_unlike
from app.modules.user_management.models.user import User

router = APIRouter()

@router.post("/{post_id}/like", response_model=MessageResponse)
def toggle_post_like(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to like or unlike"),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    """Like the post, or unlike it if already liked"""
    change = like_unlike(db, post_id, current_user.id)
    if change is Membership.ADDED:
        return MessageResponse(message="Post liked successfully")
    return MessageResponse(message="Post unliked successfully")
