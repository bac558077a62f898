from fastapi import Request
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger("app")

# Writes under the API need a session, except for these
SESSIONLESS_WRITES = ("/signup", "/login", "/logout")
WRITE_METHODS = ("POST", "PUT", "PATCH", "DELETE")

def needs_session(method: str, path: str, api_prefix: str = "/api") -> bool:
    if not path.startswith(api_prefix):
        return False
    if path.rstrip("/").endswith("/feed"):
        return True
    return method in WRITE_METHODS and not path.rstrip("/").endswith(SESSIONLESS_WRITES)

class SessionLoggingMiddleware(BaseHTTPMiddleware):
    """Warn about protected requests arriving without a session and about 401/403 responses"""

    def __init__(self, app: ASGIApp, cookie_name: str = "jwt", api_prefix: str = "/api"):
        super().__init__(app)
        self.cookie_name = cookie_name
        self.api_prefix = api_prefix

    async def dispatch(self, request: Request, call_next):
        path = request.url.path

        if self.cookie_name not in request.cookies and needs_session(request.method, path, self.api_prefix):
            logger.warning(f"Protected endpoint {request.method} {path} accessed without session cookie")

        response = await call_next(request)

        if response.status_code in (401, 403):
            logger.warning(f"Auth error: {response.status_code} on {request.method} {path}")

        return response
