"""
Book queries.

Books are returned with their author and genre (many-to-one, loaded with a
JOIN) and their reviews (loaded with a second SELECT ... IN query).
"""

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import joinedload, selectinload

from bookstore.models import Book
from bookstore.repositories.base import Repository


class BookRepository(Repository[Book]):
    """Books with author, genre and reviews."""

    model = Book
    relations = {
        "author": joinedload(Book.author),
        "genre": joinedload(Book.genre),
        "reviews": selectinload(Book.reviews),
    }

    def get_by_author_id(
        self,
        author_id: int,
        include: Iterable[str] | None = None,
    ) -> list[Book]:
        """
        All books written by an author.

        An unknown author simply yields an empty list.
        """
        return self._all(self.query(include).where(Book.author_id == author_id))

    def get_by_genre_id(
        self,
        genre_id: int,
        include: Iterable[str] | None = None,
    ) -> list[Book]:
        """All books filed under a genre (empty list if none)."""
        return self._all(self.query(include).where(Book.genre_id == genre_id))

    def genre_has_books(self, genre_id: int) -> bool:
        """Check whether at least one book uses the genre."""
        stmt = select(Book.id).where(Book.genre_id == genre_id).limit(1)
        return self.session.execute(stmt).first() is not None
