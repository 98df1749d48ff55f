"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schema Naming Convention:
- XxxBase: Shared fields and validation rules
- XxxCreate: Body of POST requests (no id)
- XxxUpdate: Body of PUT requests (full replace, id must match the URL)
- XxxSummary: The entity's own fields plus its id
- XxxResponse: Summary plus eager-loaded related entities (responses.py)
"""

from bookstore.schemas.author import (
    AuthorBase,
    AuthorCreate,
    AuthorSummary,
    AuthorUpdate,
)
from bookstore.schemas.book import (
    BookBase,
    BookCreate,
    BookSummary,
    BookUpdate,
)
from bookstore.schemas.genre import (
    GenreBase,
    GenreCreate,
    GenreSummary,
    GenreUpdate,
)
from bookstore.schemas.review import (
    BookReviewBase,
    BookReviewCreate,
    BookReviewUpdate,
    ReviewSummary,
)
from bookstore.schemas.responses import (
    AuthorResponse,
    BookResponse,
    BookReviewResponse,
    GenreResponse,
)

__all__ = [
    # Author schemas
    "AuthorBase",
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorSummary",
    "AuthorResponse",
    # Genre schemas
    "GenreBase",
    "GenreCreate",
    "GenreUpdate",
    "GenreSummary",
    "GenreResponse",
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookSummary",
    "BookResponse",
    # Review schemas
    "BookReviewBase",
    "BookReviewCreate",
    "BookReviewUpdate",
    "ReviewSummary",
    "BookReviewResponse",
]
