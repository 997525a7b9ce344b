"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
Run with: uvicorn journal.main:app
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from journal import __version__
from journal.api.v1 import auth_router, entry_router
from journal.core.config import get_settings
from journal.di.container import get_container, reset_container
from journal.di.providers import DatabaseProvider
from journal.domain.repositories.entry_repository import EntryRepository

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    - Startup/shutdown handlers for the database connection

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Journal API",
        description="Personal journal: write, list and delete your own timestamped entries",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Credentials (session cookie) require explicit origins
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
    )

    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(entry_router, prefix="/api/v1/entries")

    @application.on_event("startup")
    def startup_event():
        """Build the DI container and make sure the list index exists."""
        repository = get_container().get(EntryRepository)
        if not settings.mongo_ensure_indexes:
            return
        try:
            repository.ensure_indexes()
            logger.info("Entry indexes ensured")
        except PyMongoError as e:
            # The API stays up; list queries still work without the index
            logger.warning("Could not ensure entry indexes: %s", e)

    @application.on_event("shutdown")
    def shutdown_event():
        """Close the database connection."""
        container = get_container()
        container.get(DatabaseProvider.MONGO_CLIENT).close()
        reset_container()
        logger.info("Journal API stopped")

    @application.get("/")
    async def root():
        """Root endpoint - service info."""
        return {
            "status": "running",
            "service": "Journal API",
            "version": __version__,
            "docs": "/docs",
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
