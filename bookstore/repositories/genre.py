"""Genre queries."""

from sqlalchemy.orm import selectinload

from bookstore.models import Genre
from bookstore.repositories.base import Repository


class GenreRepository(Repository[Genre]):
    """Genres with the books filed under them."""

    model = Genre
    relations = {
        "books": selectinload(Genre.books),
    }
