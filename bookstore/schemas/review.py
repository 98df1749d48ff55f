"""
BookReview Pydantic Schemas

Validation rules:
- Rating: 1-5 inclusive (out-of-range values are rejected with 400)
- reviewerName: required, at most 100 characters
- comment: at most 1000 characters
"""

from datetime import datetime

from pydantic import Field, field_validator

from bookstore.schemas.base import CamelModel, strip_required


class BookReviewBase(CamelModel):
    """Base schema with shared review fields."""

    book_id: int = Field(
        ...,
        description="Id of the reviewed book",
        examples=[1],
    )

    reviewer_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Name of the reviewer",
        examples=["Alice"],
    )

    rating: int = Field(
        ...,
        ge=1,
        le=5,
        description="Rating from 1 to 5 stars",
        examples=[4, 5],
    )

    comment: str | None = Field(
        default=None,
        max_length=1000,
        description="Review text",
        examples=["A chilling look at surveillance."],
    )

    @field_validator("reviewer_name")
    @classmethod
    def reviewer_name_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize reviewer name."""
        return strip_required(v, "Reviewer name")


class BookReviewCreate(BookReviewBase):
    """
    Schema for creating a review.

    reviewDate is not accepted from the client: the server stamps the
    current time when the review is stored.
    """
    pass


class BookReviewUpdate(BookReviewBase):
    """
    Schema for replacing a review. reviewId must match the URL.

    reviewDate is optional here; when omitted the stored date is kept.
    """

    id: int | None = Field(
        default=None,
        alias="reviewId",
        description="Must match the review id in the URL",
    )

    review_date: datetime | None = Field(
        default=None,
        description="When the review was written",
    )


class ReviewSummary(BookReviewBase):
    """Review without its book."""

    id: int = Field(..., alias="reviewId", description="Unique identifier")

    review_date: datetime = Field(..., description="When the review was written")
