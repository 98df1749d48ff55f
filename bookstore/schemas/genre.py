"""
Genre Pydantic Schemas

Schemas for genre-related API operations.
Follows the same pattern as Author schemas.
"""

from typing import Optional

from pydantic import Field, field_validator

from bookstore.schemas.base import CamelModel, strip_required


class GenreBase(CamelModel):
    """Base schema with shared genre fields."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Genre name",
        examples=["Science Fiction", "Dystopia"],
    )

    description: Optional[str] = Field(
        default=None,
        max_length=500,
        description="Description of the genre",
        examples=["Fiction dealing with futuristic science and technology"],
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize genre name."""
        return strip_required(v, "Genre name")


class GenreCreate(GenreBase):
    """Schema for creating a new genre."""
    pass


class GenreUpdate(GenreBase):
    """Schema for replacing a genre. genreId must match the URL."""

    id: Optional[int] = Field(
        default=None,
        alias="genreId",
        description="Must match the genre id in the URL",
    )


class GenreSummary(GenreBase):
    """Genre without its books."""

    id: int = Field(..., alias="genreId", description="Unique identifier")
