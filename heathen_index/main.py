"""Main FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from heathen_index.core.exceptions import register_exception_handlers
from heathen_index.core.settings import Settings, get_settings
from heathen_index.features.auth.routes import router as auth_router
from heathen_index.features.entries.routes import router as entries_router
from heathen_index.features.entries.seed import seed_entries
from heathen_index.features.entries.storage import Storage, build_storage

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.
    Handles startup and shutdown events.
    """
    # Startup
    settings: Settings = app.state.settings
    configure_logging(settings)
    logger.info("Starting %s v%s", settings.app_name, settings.app_version)

    storage: Storage = app.state.storage
    await storage.connect()
    logger.info("Storage initialized (%s).", type(storage).__name__)

    if settings.seed_on_startup:
        await seed_entries(storage)

    yield

    # Shutdown
    logger.info("Shutting down application")
    await storage.disconnect()
    logger.info("Storage closed.")


def create_app(
    settings: Settings | None = None, storage: Storage | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use; defaults to the cached environment settings
        storage: Storage to serve from; defaults to the backend named in settings
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Searchable knowledge base of Norse mythology",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = storage if storage is not None else build_storage(settings)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    api_router = APIRouter(prefix="/api")
    api_router.include_router(entries_router)
    api_router.include_router(auth_router)
    app.include_router(api_router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:  # pyright: ignore[reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "heathen_index.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if not settings.debug else "debug",
    )
