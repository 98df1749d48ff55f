"""
Book Pydantic Schemas

Handles:
- Required author and genre references
- Price validation (non-negative, 2 decimal places)
- Length limits on title and ISBN
"""

from datetime import date
from decimal import Decimal

from pydantic import Field, field_validator

from bookstore.schemas.base import CamelModel, strip_required


class BookBase(CamelModel):
    """
    Base schema with shared book fields.

    authorId and genreId must point at existing rows; that is checked by
    the database when the book is saved.
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Book title",
        examples=["1984", "Fahrenheit 451"],
    )

    isbn: str | None = Field(
        default=None,
        max_length=20,
        description="ISBN as printed on the book",
        examples=["978-0-452-28423-4"],
    )

    published_date: date | None = Field(
        default=None,
        description="Date of publication",
        examples=["1949-06-08"],
    )

    price: Decimal = Field(
        default=Decimal("0.00"),
        ge=0,  # ge = greater than or equal (free books allowed)
        max_digits=10,
        decimal_places=2,
        description="Book price",
        examples=["299.99", "349.99"],
    )

    author_id: int = Field(
        ...,
        description="Id of the book's author",
        examples=[1],
    )

    genre_id: int = Field(
        ...,
        description="Id of the book's genre",
        examples=[2],
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        return strip_required(v, "Title")


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "1984",
        "isbn": "978-0-452-28423-4",
        "publishedDate": "1949-06-08",
        "price": 299.99,
        "authorId": 1,
        "genreId": 2
    }
    """
    pass


class BookUpdate(BookBase):
    """Schema for replacing a book. bookId must match the URL."""

    id: int | None = Field(
        default=None,
        alias="bookId",
        description="Must match the book id in the URL",
    )


class BookSummary(BookBase):
    """Book without nested author, genre or reviews."""

    id: int = Field(..., alias="bookId", description="Unique identifier")
