from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.membership import Membership
from app.db.session import get_db
from app.deps import get_current_user
from app.modules.auth.schemas.auth import MessageResponse
from app.modules.follows.services.follow import follow_unfollow
from app.modules.user_management.models.user import User

router = APIRouter()

@router.post("/follow/{user_id}", response_model=MessageResponse)
def toggle_follow(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    """Follow the user, or unfollow them if already following"""
    change = follow_unfollow(db, user_id, current_user.id)
    if change is Membership.ADDED:
        return MessageResponse(message="User followed successfully")
    return MessageResponse(message="User unfollowed successfully")
