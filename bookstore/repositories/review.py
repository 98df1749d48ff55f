"""BookReview queries."""

from collections.abc import Iterable

from sqlalchemy.orm import joinedload

from bookstore.models import BookReview
from bookstore.repositories.base import Repository


class BookReviewRepository(Repository[BookReview]):
    """Reviews with the reviewed book."""

    model = BookReview
    relations = {
        "book": joinedload(BookReview.book),
    }

    def get_by_book_id(
        self,
        book_id: int,
        include: Iterable[str] | None = None,
    ) -> list[BookReview]:
        """All reviews of a book (empty list if none)."""
        return self._all(self.query(include).where(BookReview.book_id == book_id))
