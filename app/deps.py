from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.exceptions import UnauthenticatedError
from app.db.session import get_db
from app.modules.auth.services.session import verify_session
from app.modules.user_management.models.user import User
from app.modules.user_management.services.user import get_user

def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    """
    Dependency gating protected routes: resolves the session cookie to a user
    and binds it to the request
    """
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    user_id = verify_session(token, settings)

    user = get_user(db, user_id=user_id)
    if not user:
        # Signed token for an account that no longer exists
        raise UnauthenticatedError()

    request.state.user = user
    return user
