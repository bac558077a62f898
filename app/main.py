from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import Settings
from app.core.exceptions import AppError
from app.db.init_db import create_all_tables
from app.db.session import create_db_engine, create_session_factory
from app.middleware.request_logging import RequestLoggingMiddleware
from app.middleware.session_logging import SessionLoggingMiddleware
from app.modules.auth.api.router import router as auth_router
from app.modules.user_management.api.router import router as user_router
from app.modules.follows.api.router import router as follows_router
from app.modules.posts.api.router import router as posts_router
from app.modules.posts.likes.api.router import router as likes_router
from app.modules.posts.replies.api.router import router as replies_router
from app.modules.home_feed.api.router import router as home_feed_router

logger = logging.getLogger("app")


def setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(f"Starting server in {settings.ENVIRONMENT} mode")

    create_all_tables(app.state.engine)

    yield

    app.state.engine.dispose()
    logger.info("Database connections closed")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message} {exc.context}")
        else:
            logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid request data on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request data", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(f"Unexpected error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application around an explicit Settings object. The engine and
    session factory are created here and kept on app.state for the
    request dependencies.
    """
    settings = settings or Settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        debug=settings.DEBUG,
        description="Social posting API: accounts, follows, posts, likes and replies",
        version=settings.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    engine = create_db_engine(settings.DATABASE_URL)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    register_exception_handlers(app)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        SessionLoggingMiddleware,
        cookie_name=settings.SESSION_COOKIE_NAME,
        api_prefix=settings.API_PREFIX,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api = settings.API_PREFIX
    app.include_router(auth_router, prefix=f"{api}/users", tags=["authentication"])
    app.include_router(user_router, prefix=f"{api}/users", tags=["users"])
    app.include_router(follows_router, prefix=f"{api}/users", tags=["follows"])
    app.include_router(posts_router, prefix=f"{api}/posts", tags=["posts"])
    app.include_router(likes_router, prefix=f"{api}/posts", tags=["likes"])
    app.include_router(replies_router, prefix=f"{api}/posts", tags=["replies"])
    app.include_router(home_feed_router, prefix=f"{api}/feed", tags=["home feed"])

    @app.get("/")
    async def root():
        return {
            "message": f"Welcome to {settings.PROJECT_NAME}",
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
            "documentation": "/docs" if settings.DEBUG else None,
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=app.state.settings.HOST, port=app.state.settings.PORT, reload=True)
