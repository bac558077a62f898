from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.deps import get_current_user
from app.modules.user_management.models.user import User
from app.modules.user_management.schemas.user import Profile, UserUpdate, UserUpdateResponse
from app.modules.user_management.services.user import get_profile, to_profile, update_user

router = APIRouter()

@router.get("/profile/{username}", response_model=Profile)
def read_user_profile(
    username: str,
    db: Session = Depends(get_db),
) -> Profile:
    """Get a user's profile by username"""
    return get_profile(db, username)

@router.put("/update/{user_id}", response_model=UserUpdateResponse)
def update_user_profile(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    user_in: UserUpdate,
    current_user: User = Depends(get_current_user),
) -> UserUpdateResponse:
    """Update the signed-in user's own profile"""
    user = update_user(db, user_id, current_user.id, user_in)
    return UserUpdateResponse(message="User updated successfully", user=to_profile(db, user))
