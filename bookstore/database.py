"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the BookStore API.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. Use session for all database operations in that request
3. Commit on success, rollback on failure (see bookstore.context)
4. Close session when request ends

This is implemented using FastAPI's dependency injection.

Foreign Keys on SQLite
======================
SQLite ignores FOREIGN KEY clauses unless each connection runs
PRAGMA foreign_keys=ON. The connect listener below turns it on for every
SQLite connection, so the RESTRICT/CASCADE rules declared on the models are
enforced by the storage layer on every backend.
"""

from collections.abc import Generator
from sqlite3 import Connection as SQLite3Connection
from typing import Any

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bookstore.config import get_settings

# Get settings instance
settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# Pool sizing only applies to server databases. SQLite picks its own pool
# class and needs check_same_thread=False because FastAPI runs sync routes
# in a threadpool.

def build_engine_kwargs(database_url: str) -> dict[str, Any]:
    """Return create_engine() keyword arguments suited to the database URL."""
    if database_url.startswith("sqlite"):
        return {
            "connect_args": {"check_same_thread": False},
            "echo": settings.debug,
        }
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": True,  # Verify connections are alive before using
        "echo": settings.debug,  # Log SQL in debug mode
    }


engine = create_engine(settings.database_url, **build_engine_kwargs(settings.database_url))


@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""
    if isinstance(dbapi_connection, SQLite3Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# =============================================================================
# Session Factory
# =============================================================================
# - autocommit=False: We control when to commit (BookStoreContext.save)
# - autoflush=False: Don't auto-flush before queries (more predictable behavior)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover the tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Code before yield creates the session, code after yield closes it, even
    when the route raised. Each request gets its own session; sessions are
    never shared between concurrent requests.

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables(bind: Engine | None = None) -> None:
    """
    Create all database tables with their foreign keys and constraints.

    The relationship delete policy (Author→Book cascade, Genre→Book restrict,
    Book→BookReview cascade) lives in the model declarations; this call
    materializes it in the database.

    WARNING: In production, prefer Alembic migrations (alembic upgrade head).
    """
    # Importing the models registers their tables on Base.metadata
    import bookstore.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Engine | None = None) -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only use in development and tests.
    """
    import bookstore.models  # noqa: F401

    Base.metadata.drop_all(bind=bind or engine)
