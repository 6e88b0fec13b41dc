"""
FastAPI Application Entry Point

Creates and configures the FastAPI application.

1. Application Factory
   - create_app() returns a configured app
   - Tests import the module-level app and override get_db

2. Lifespan Events
   - Startup and shutdown logging, engine disposal on shutdown

3. Exception Handlers
   - DataAccessError -> 503
   - Any other SQLAlchemyError -> 500
   - Anything else -> 500, details only in debug mode
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from bibliotheca import __version__
from bibliotheca.config import get_settings
from bibliotheca.database import engine
from bibliotheca.dependencies import DbSession
from bibliotheca.exceptions import DataAccessError
from bibliotheca.routers import books_router

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield runs on startup, code after yield on shutdown.
    """
    logger.info(f"Starting {settings.app_name} {__version__}...")
    logger.info(f"Environment: {settings.environment}, debug mode: {settings.debug}")

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    engine.dispose()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Bibliotheca

Read-only access to a book catalogue.

### Features
- **Books**: list books with their authors
- **Search**: case-insensitive substring search on book names
- **Genres**: filter by genre, or list the genres in the catalogue
        """,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(DataAccessError)
    async def data_access_exception_handler(
        request: Request,
        exc: DataAccessError,
    ) -> JSONResponse:
        """
        Handle failures raised by the service layer.

        The underlying database error is logged; the client only sees
        that the data store is unavailable.
        """
        logger.error(
            f"Data access error on {request.method} {request.url.path}: "
            f"{exc.message} ({exc.__cause__})"
        )
        return JSONResponse(
            status_code=503,
            content={"detail": "The data store is unavailable. Please try again later."},
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """Handle database errors that escaped the service layer."""
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=500,
            content={"detail": "A database error occurred. Please try again later."},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug:
            return JSONResponse(
                status_code=500,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=500,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    api_prefix = f"/api/{settings.api_version}"
    app.include_router(books_router, prefix=api_prefix)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and the database is reachable.",
    )
    def health_check(db: DbSession) -> dict:
        """
        Health check endpoint.

        Used by load balancers and orchestrator probes. Always answers 200;
        the database field reports whether a trivial query succeeded.
        """
        try:
            db.execute(text("SELECT 1"))
            database_status = "healthy"
        except SQLAlchemyError as exc:
            logger.warning(f"Health check database probe failed: {exc}")
            database_status = "unavailable"

        return {
            "status": "healthy" if database_status == "healthy" else "degraded",
            "app": settings.app_name,
            "version": settings.api_version,
            "database": database_status,
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
            "books": f"/api/{settings.api_version}/books/",
        }

    return app


# This is what uvicorn imports: uvicorn bibliotheca.main:app
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bibliotheca.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
