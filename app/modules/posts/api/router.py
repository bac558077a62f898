from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.deps import get_current_user
from app.modules.auth.schemas.auth import MessageResponse
from app.modules.user_management.models.user import User
from app.modules.posts.schemas.post import PostCreate, PostCreatedResponse, PostResponse
from app.modules.posts.services.post import (
    create_post, delete_post, get_existing_post, to_post_schema
)

router = APIRouter()

@router.post("/", response_model=PostCreatedResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post("", response_model=PostCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_new_post(
    *,
    db: Session = Depends(get_db),
    post_in: PostCreate,
    current_user: User = Depends(get_current_user),
) -> PostCreatedResponse:
    """
    Create a post. postedBy must be the signed-in user.
    """
    post = create_post(db, post_in, current_user.id)
    return PostCreatedResponse(message="Post created successfully", new_post=to_post_schema(post))

@router.get("/{post_id}", response_model=PostResponse)
def read_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
) -> PostResponse:
    """
    Get post by ID.
    """
    post = get_existing_post(db, post_id)
    return PostResponse(message="Post found", post=to_post_schema(post))

@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    """
    Delete a post and everything attached to it (likes and replies).
    Only the author can delete a post.
    """
    delete_post(db, post_id, current_user.id)
    return MessageResponse(message="Post deleted successfully")
