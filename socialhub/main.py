"""FastAPI application entry point"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from socialhub.api import posts as posts_router
from socialhub.api import system as system_router
from socialhub.api import users as users_router
from socialhub.core.config import settings
from socialhub.core.logging import get_logger, setup_logging
from socialhub.core.middleware import setup_middleware
from socialhub.shared.errors.handlers import setup_exception_handlers
from socialhub.shared.i18n import get_i18n_service

logger = get_logger(__name__)

TAGS_METADATA = [
    {"name": "Users", "description": "User registration and profile management"},
    {"name": "Posts", "description": "Posts and feed listing"},
    {"name": "System", "description": "Health checks"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown events."""
    setup_logging()
    logger.info(f"Starting {settings.app.name}...")

    i18n = get_i18n_service()
    logger.info(f"Translations loaded for: {', '.join(i18n.catalog.languages)}")

    yield

    logger.info("Shutting down...")
    i18n.clear_cache()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title=settings.app.name,
        description="Social network REST API",
        version=settings.app.version,
        openapi_tags=TAGS_METADATA,
        debug=settings.app.debug,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.app.debug else None,
        redoc_url="/api/redoc" if settings.app.debug else None,
        openapi_url="/api/openapi.json" if settings.app.debug else None,
        redirect_slashes=False,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.app.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Language detection and request tracing
    setup_middleware(app)

    setup_exception_handlers(app)

    app.include_router(users_router.router, prefix="/api")
    app.include_router(posts_router.router, prefix="/api")

    # System router (no /api prefix - accessible at root)
    app.include_router(system_router.router)

    return app


app = create_app()
