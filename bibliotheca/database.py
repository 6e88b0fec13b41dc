"""
Database Configuration Module

SQLAlchemy 2.0 engine, session factory and declarative base.

Session Management Pattern
==========================
One session per request:
1. Request arrives -> create a new session
2. The route hands the session to the service layer
3. Close the session when the request ends

The service layer only reads, so nothing here commits.
"""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bibliotheca.config import Settings, get_settings

settings = get_settings()


def _connect_args(settings: Settings) -> dict[str, Any]:
    """
    DBAPI connect arguments for the configured database.

    PostgreSQL gets a server-side statement_timeout so a slow query fails
    with an OperationalError instead of holding the request open.
    """
    if settings.is_postgres and settings.db_statement_timeout_ms:
        return {"options": f"-c statement_timeout={settings.db_statement_timeout_ms}"}
    return {}


# =============================================================================
# Database Engine
# =============================================================================
# - pool_pre_ping: Test connection health before using (drops stale connections)
# - pool_timeout: Seconds to wait for a free connection
# - echo: Log all SQL statements in debug mode

engine = create_engine(
    settings.database_url,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_timeout=settings.db_pool_timeout,
    pool_pre_ping=True,
    echo=settings.debug,
    connect_args=_connect_args(settings),
)


# =============================================================================
# Session Factory
# =============================================================================
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic reads Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Usage in Routes:
        from bibliotheca.dependencies import DbSession

        @router.get("/books/")
        def get_books(db: DbSession):
            return list_books(db, BookQuery())

    Yields:
        SQLAlchemy Session instance, closed when the request ends
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    """
    Create all database tables.

    For local development and tests only. Production schemas are managed
    by Alembic migrations.
    """
    Base.metadata.create_all(bind=engine)
