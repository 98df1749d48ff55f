"""
Genre Model

Represents a book genre/category in the database.

Genres are shared reference data: a genre that is still used by at least one
book cannot be deleted.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

if TYPE_CHECKING:
    from bookstore.models.book import Book


class Genre(Base):
    """
    Genre model representing book categories.

    Table: genres

    Relationships:
    - books: every Book whose genre_id points here (read-only lookup)

    Example:
        genre = Genre(
            name="Science Fiction",
            description="Fiction dealing with futuristic concepts...",
        )
    """

    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(50),
        index=True,
        nullable=False,
        comment="Genre name (e.g., 'Science Fiction', 'Dystopia')"
    )

    description: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
        comment="Description of what this genre encompasses"
    )

    books: Mapped[List["Book"]] = relationship(
        "Book",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"Genre(id={self.id}, name='{self.name}')"
