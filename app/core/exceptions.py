"""
Application exception hierarchy.

Services raise these instead of returning None or building HTTP responses;
the handlers registered in app.main turn them into JSON error bodies.

    AppError (base)                   -> 500
    ├── BadRequestError               -> 400
    │   ├── InvalidCredentialsError   -> 400
    │   └── InvalidOperationError     -> 400
    ├── UnauthenticatedError          -> 401
    ├── ForbiddenError                -> 403
    ├── NotFoundError                 -> 404
    ├── ConflictError                 -> 409
    └── InternalError                 -> 500

Each raise site may override the status code and the body key: the public
API keeps the status codes and body shapes existing clients were built
against (e.g. a signup conflict is a 400 ``{"error": ...}`` and a foreign
post creation is a 401 ``{"message": ...}``).
"""

from typing import Any, Dict, Optional


class AppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:      user-facing description, returned in the response body
        status_code:  HTTP status the handler responds with
        key:          body key the message is rendered under
        context:      extra debug info, logged but never returned
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        status_code: Optional[int] = None,
        key: str = "error",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.key = key
        self.context = context or {}
        super().__init__(self.message)

    def to_body(self) -> Dict[str, str]:
        return {self.key: self.message}


class BadRequestError(AppError):
    """Missing or invalid input"""

    status_code = 400


class InvalidCredentialsError(BadRequestError):
    """Login failed; never says whether the account exists"""

    def __init__(self, message: str = "Invalid username or password", **kwargs: Any):
        super().__init__(message, **kwargs)


class InvalidOperationError(BadRequestError):
    """The request is well formed but the operation makes no sense (e.g. following yourself)"""


class UnauthenticatedError(AppError):
    """No session, or a session that does not verify"""

    status_code = 401

    def __init__(self, message: str = "Unauthorized user", key: str = "message", **kwargs: Any):
        super().__init__(message, key=key, **kwargs)


class ForbiddenError(AppError):
    """Authenticated, but not entitled to the target resource"""

    status_code = 403


class NotFoundError(AppError):
    """A referenced entity does not exist"""

    status_code = 404


class ConflictError(AppError):
    """A uniqueness rule would be violated"""

    status_code = 409


class InternalError(AppError):
    """Unexpected store or runtime failure"""

    status_code = 500
