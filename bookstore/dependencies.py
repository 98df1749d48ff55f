"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Per-request object graph:

    get_db() ─► Session ─► BookStoreContext ─► XxxRepository

FastAPI caches a dependency within one request, so every repository used by
a route shares the same context (and therefore the same unit of work).

Type Aliases with Annotated
===========================
Instead of writing:
    def get_books(repo: BookRepository = Depends(get_book_repository)):

routes write:
    def get_books(repo: Books):
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from bookstore.context import BookStoreContext
from bookstore.database import get_db
from bookstore.repositories import (
    AuthorRepository,
    BookRepository,
    BookReviewRepository,
    GenreRepository,
)

DbSession = Annotated[Session, Depends(get_db)]


def get_context(db: DbSession) -> BookStoreContext:
    """Persistence context bound to the request's session."""
    return BookStoreContext(db)


Context = Annotated[BookStoreContext, Depends(get_context)]


# =============================================================================
# Repositories
# =============================================================================
def get_author_repository(context: Context) -> AuthorRepository:
    return AuthorRepository(context)


def get_book_repository(context: Context) -> BookRepository:
    return BookRepository(context)


def get_genre_repository(context: Context) -> GenreRepository:
    return GenreRepository(context)


def get_review_repository(context: Context) -> BookReviewRepository:
    return BookReviewRepository(context)


Authors = Annotated[AuthorRepository, Depends(get_author_repository)]
Books = Annotated[BookRepository, Depends(get_book_repository)]
Genres = Annotated[GenreRepository, Depends(get_genre_repository)]
Reviews = Annotated[BookReviewRepository, Depends(get_review_repository)]
