"""
BookReview Model

Represents a reader's review of a book: a 1-5 rating and an optional comment.

Business Rules:
- Rating must be 1-5 (validated by the schema and by a CHECK constraint)
- Reviews are removed together with their book
- review_date is stamped by the server when a review is created
"""

from datetime import UTC, datetime

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base


class BookReview(Base):
    """
    Review model for book reviews.

    Attributes:
        id: Primary key
        book_id: Foreign key to books table
        reviewer_name: Who wrote the review
        rating: 1-5 star rating
        comment: Review text
        review_date: When the review was written
    """

    __tablename__ = "book_reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    book_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("books.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    reviewer_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Name of the reviewer",
    )
    rating: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Rating from 1-5 stars",
    )
    comment: Mapped[str | None] = mapped_column(
        String(1000),
        nullable=True,
        comment="Review text",
    )

    review_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    book = relationship("Book", lazy="raise")

    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_book_review_rating_range"),
    )

    def __repr__(self) -> str:
        return f"<BookReview(id={self.id}, book_id={self.book_id}, rating={self.rating})>"
