from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.deps import get_current_user
from app.modules.user_management.models.user import User
from app.modules.home_feed.schemas.feed import FeedResponse
from app.modules.home_feed.services.feed import get_home_feed

router = APIRouter()

@router.get("/", response_model=FeedResponse, include_in_schema=False)
@router.get("", response_model=FeedResponse)
def read_home_feed(
    *,
    db: Session = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1, le=100),
    current_user: User = Depends(get_current_user),
) -> FeedResponse:
    """Posts from the accounts the current user follows, newest first"""
    return FeedResponse(feed_posts=get_home_feed(db, current_user.id, skip, limit))
