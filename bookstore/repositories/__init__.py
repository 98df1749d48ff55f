"""
Repositories Package

Per-entity query helpers. Reads add explicit eager loading of related
entities; writes go through the BookStoreContext unchanged.
"""

from bookstore.repositories.author import AuthorRepository
from bookstore.repositories.base import Repository
from bookstore.repositories.book import BookRepository
from bookstore.repositories.genre import GenreRepository
from bookstore.repositories.review import BookReviewRepository

__all__ = [
    "Repository",
    "AuthorRepository",
    "BookRepository",
    "GenreRepository",
    "BookReviewRepository",
]
