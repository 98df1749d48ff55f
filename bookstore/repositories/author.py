"""Author queries."""

from sqlalchemy.orm import selectinload

from bookstore.models import Author
from bookstore.repositories.base import Repository


class AuthorRepository(Repository[Author]):
    """Authors with their books."""

    model = Author
    relations = {
        "books": selectinload(Author.books),
    }
