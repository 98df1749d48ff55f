"""
SQLAlchemy Models Package

This package contains all database models for the BookStore API.

Model Relationships:
- Author 1-N Book: deleting an author deletes its books (cascade)
- Genre 1-N Book: a genre cannot be deleted while books use it (restrict)
- Book 1-N BookReview: deleting a book deletes its reviews (cascade)

Relations are declared from the child side (Book.author, Book.genre,
BookReview.book). The parent-side collections are read-only lookups keyed
by the parent id and are only loaded when a query asks for them.

Import all models here so that Alembic and Base.metadata.create_all()
discover every table.
"""

# The order matters for SQLAlchemy to resolve relationships
from bookstore.models.author import Author
from bookstore.models.genre import Genre
from bookstore.models.book import Book
from bookstore.models.review import BookReview

__all__ = [
    "Author",
    "Genre",
    "Book",
    "BookReview",
]
