"""
Book Model

The central model of the BookStore API, representing books in the store.

Foreign Keys and Delete Rules
=============================
A book belongs to exactly one author and one genre:

- author_id → authors.id  ON DELETE CASCADE
  Removing an author removes the author's books.
- genre_id  → genres.id   ON DELETE RESTRICT
  A genre cannot be removed while any book still references it.

The same rules are applied explicitly by BookStoreContext, so the behaviour
does not depend on the storage engine's own cascade support.
"""

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

if TYPE_CHECKING:
    from bookstore.models.author import Author
    from bookstore.models.genre import Genre
    from bookstore.models.review import BookReview


class Book(Base):
    """
    Book model representing books in the store.

    Table: books

    Fields:
    - title: Book title (required)
    - isbn: International Standard Book Number
    - published_date: When the book was published
    - price: Book price with 2 decimal precision
    - author_id: Owning author (required)
    - genre_id: Genre the book is filed under (required)

    Relationships:
    - author: Many-to-One
    - genre: Many-to-One
    - reviews: every BookReview of this book (read-only lookup)

    Example:
        book = Book(
            title="1984",
            isbn="978-0-452-28423-4",
            published_date=date(1949, 6, 8),
            price=Decimal("299.99"),
            author_id=1,
            genre_id=2,
        )
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    title: Mapped[str] = mapped_column(
        String(200),
        index=True,
        nullable=False,
        comment="Book title"
    )

    isbn: Mapped[str | None] = mapped_column(
        String(20),
        nullable=True,
        comment="International Standard Book Number"
    )

    published_date: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
        comment="Date of publication"
    )

    # Numeric(10, 2) = up to 10 digits, 2 after decimal point
    # Using Decimal (not float) for precise money calculations
    price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        default=Decimal("0.00"),
        comment="Book price"
    )

    # -------------------------------------------------------------------------
    # Foreign Keys
    # -------------------------------------------------------------------------
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("authors.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    genre_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("genres.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # No back_populates: the reverse direction is a separate read-only lookup
    # on Author/Genre, which keeps loaded object graphs acyclic.
    author: Mapped["Author"] = relationship("Author", lazy="raise")

    genre: Mapped["Genre"] = relationship("Genre", lazy="raise")

    reviews: Mapped[list["BookReview"]] = relationship(
        "BookReview",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', isbn='{self.isbn}')"
