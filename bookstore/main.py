"""
BookStore API Application

Builds the FastAPI app: routers under /api, the error-to-status mapping and
the startup seeding.

Error Mapping
=============
    RequestValidationError   → 400 with the validation details
    HTTPException            → as raised (400 for id mismatch, genre in use)
    NotFoundError            → 404, empty body
    IntegrityViolation       → 500
    ConcurrencyConflict      → 500
    SQLAlchemyError          → 500

Startup
=======
With SEED_DATABASE=true (the default) the tables are created and an empty
store receives the baseline authors, genres and books. Shutdown disposes of
the engine's connection pool.

Run locally with:
    uvicorn bookstore.main:app --reload
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from bookstore import __version__
from bookstore.config import get_settings
from bookstore.context import BookStoreContext
from bookstore.database import SessionLocal, create_tables, engine
from bookstore.exceptions import ConcurrencyConflict, IntegrityViolation, NotFoundError
from bookstore.routers import (
    authors_router,
    books_router,
    genres_router,
    reviews_router,
)

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def init_database() -> None:
    """Create the schema and insert the baseline rows into an empty store."""
    create_tables()
    with SessionLocal() as session:
        BookStoreContext(session).seed()


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Seed on startup, release pooled connections on shutdown."""
    logger.info(
        f"{settings.app_name} starting "
        f"({settings.environment}, database: {engine.url.get_backend_name()})"
    )

    if settings.seed_database:
        init_database()
    else:
        logger.info("Database seeding disabled")

    yield

    logger.info(f"{settings.app_name} stopping")
    engine.dispose()


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """Assemble the app: middleware, error mapping, routers, service endpoints."""
    app = FastAPI(
        title=settings.app_name,
        description="""
## BookStore API

Inventory management for a bookstore.

### Resources
- **Authors**: deleting an author deletes their books and reviews
- **Genres**: a genre in use by books cannot be deleted
- **Books**: always belong to an existing author and genre
- **Book reviews**: 1-5 star ratings, dated by the server
        """,
        version=settings.api_version,
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Report invalid input as 400 Bad Request.

        Covers missing required fields, values over their maximum length,
        ratings outside 1-5 and malformed ids. Nothing is persisted.
        """
        logger.info(f"Validation failed for {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
        """Missing entities are reported as 404 with an empty body."""
        logger.debug(str(exc))
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(IntegrityViolation)
    async def integrity_violation_handler(
        request: Request,
        exc: IntegrityViolation,
    ) -> JSONResponse:
        """
        A change broke a foreign key or restrict rule that no route checked
        beforehand (e.g. a book pointing at a missing author).
        """
        logger.error(f"Integrity violation on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": str(exc) if settings.debug
                else "The change violates a data integrity rule."
            },
        )

    @app.exception_handler(ConcurrencyConflict)
    async def concurrency_conflict_handler(
        request: Request,
        exc: ConcurrencyConflict,
    ) -> JSONResponse:
        logger.error(f"Concurrency conflict on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "The record was modified by another request."},
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """Any other database failure. The driver message stays in the log."""
        logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "The database could not complete the request."
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        detail = str(exc) if settings.debug else "Unexpected server error."
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": detail},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    # /api/authors, /api/books, /api/genres, /api/bookreviews
    api_prefix = "/api"

    app.include_router(authors_router, prefix=api_prefix)
    app.include_router(books_router, prefix=api_prefix)
    app.include_router(genres_router, prefix=api_prefix)
    app.include_router(reviews_router, prefix=api_prefix)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and the database answers.",
    )
    def health_check() -> dict:
        """
        Health check endpoint.

        Used by load balancers, container orchestrators and monitoring.
        """
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            database = "ok"
        except SQLAlchemyError as exc:
            logger.warning(f"Health check could not reach the database: {exc}")
            database = "unavailable"

        return {
            "status": "healthy" if database == "ok" else "degraded",
            "app": settings.app_name,
            "version": __version__,
            "database": database,
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Service name, version and links to the docs.",
    )
    async def root() -> dict:
        return {
            "name": settings.app_name,
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookstore.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# This allows running the app directly with: python -m bookstore.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
