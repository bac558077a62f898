from fastapi import Request
import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("app")

# Requests slower than this are logged as warnings
SLOW_REQUEST_SECONDS = 1.0

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its status code and duration"""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        route = f"{request.method} {request.url.path}"
        if request.url.query:
            route = f"{route}?{request.url.query}"

        logger.debug(f"Request: {route}")
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        if elapsed > SLOW_REQUEST_SECONDS:
            logger.warning(f"Slow response: {route} -> {response.status_code} in {elapsed:.4f}s")
        else:
            logger.info(f"{route} -> {response.status_code} in {elapsed:.4f}s")
        return response
