"""Signup, login and logout"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.db.session import get_db
from app.modules.auth.schemas.auth import LoginRequest, MessageResponse, SignupRequest
from app.modules.auth.services.auth import login, signup
from app.modules.auth.services.session import issue_session, revoke_session
from app.modules.user_management.schemas.user import PublicProfile
from app.modules.user_management.services.user import to_public_profile

router = APIRouter()

@router.post("/signup", response_model=PublicProfile, status_code=status.HTTP_201_CREATED)
def signup_user(
    *,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    signup_in: SignupRequest,
) -> PublicProfile:
    """Create an account and sign it in"""
    user = signup(db, signup_in)
    issue_session(response, user.id, settings)
    return to_public_profile(user)

@router.post("/login", response_model=PublicProfile)
def login_user(
    *,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    login_in: LoginRequest,
) -> PublicProfile:
    """Sign in with email or username"""
    user = login(db, login_in.login_identifier, login_in.password)
    issue_session(response, user.id, settings)
    return to_public_profile(user)

@router.post("/logout", response_model=MessageResponse)
def logout_user(
    response: Response,
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    """Drop the session cookie"""
    revoke_session(response, settings)
    return MessageResponse(message="User logged out successfully!")
