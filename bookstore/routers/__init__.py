"""
API Routers Package

This package contains FastAPI routers that handle API endpoints.

Router Structure:
- authors.py: /api/authors/* endpoints
- books.py: /api/books/* endpoints
- genres.py: /api/genres/* endpoints
- reviews.py: /api/bookreviews/* endpoints

Each router is imported and registered in main.py.
"""

from bookstore.routers.authors import router as authors_router
from bookstore.routers.books import router as books_router
from bookstore.routers.genres import router as genres_router
from bookstore.routers.reviews import router as reviews_router

__all__ = [
    "authors_router",
    "books_router",
    "genres_router",
    "reviews_router",
]
