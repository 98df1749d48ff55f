"""
Author Model

Represents an author in the bookstore database.

SQLAlchemy 2.0 Features Used:
- mapped_column(): New way to define columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
- relationship(viewonly=True): a read-only lookup of related rows
"""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

# TYPE_CHECKING is True only during type checking (mypy, IDE)
# This prevents circular imports at runtime while enabling type hints
if TYPE_CHECKING:
    from bookstore.models.book import Book


class Author(Base):
    """
    Author model representing writers in the store.

    Table: authors

    Relationships:
    - books: every Book whose author_id points here (read-only lookup)

    Deleting an author removes all of their books and those books' reviews.
    The cascade is carried out by BookStoreContext.delete_author and backed
    by ON DELETE CASCADE on books.author_id.

    Example:
        author = Author(
            first_name="George",
            last_name="Orwell",
            email="orwell@example.com",
            date_of_birth=date(1903, 6, 25),
        )
        context.add(author)
        context.save()
    """

    __tablename__ = "authors"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    # Assigned by the database on insert, never updated afterwards
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    first_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Author's first name"
    )

    last_name: Mapped[str] = mapped_column(
        String(100),
        index=True,
        nullable=False,
        comment="Author's last name"
    )

    email: Mapped[str | None] = mapped_column(
        String(200),
        nullable=True,
        comment="Contact email"
    )

    # Date (not DateTime) because only the day matters
    date_of_birth: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
        comment="Author's date of birth"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # viewonly: the author does not own the Book objects in the session, so
    # no ORM cascade or back-reference is involved.
    # lazy="raise": books are only available when the query eager-loads them
    # (see AuthorRepository.load_options).
    books: Mapped[list["Book"]] = relationship(
        "Book",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name='{self.first_name} {self.last_name}')"
