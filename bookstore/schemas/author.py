"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.

Wire format (camelCase):
    {
        "authorId": 1,
        "firstName": "George",
        "lastName": "Orwell",
        "email": "orwell@example.com",
        "dateOfBirth": "1903-06-25"
    }
"""

from datetime import date

from pydantic import Field, field_validator

from bookstore.schemas.base import CamelModel, strip_required


class AuthorBase(CamelModel):
    """
    Base schema with shared author fields.

    Contains the fields common to create, update, and response schemas, so
    the length rules are defined once.
    """

    first_name: str = Field(
        ...,  # ... means required (no default)
        min_length=1,
        max_length=100,
        description="Author's first name",
        examples=["George", "Ray"],
    )

    last_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Author's last name",
        examples=["Orwell", "Bradbury"],
    )

    email: str | None = Field(
        default=None,
        max_length=200,
        description="Contact email",
        examples=["orwell@example.com"],
    )

    date_of_birth: date | None = Field(
        default=None,
        description="Date of birth",
        examples=["1903-06-25"],
    )

    @field_validator("first_name", "last_name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """
        Validate that names are not just whitespace.

        Args:
            v: The value being validated

        Returns:
            The stripped value

        Raises:
            ValueError: If the name is blank
        """
        return strip_required(v, "Name")


class AuthorCreate(AuthorBase):
    """
    Schema for creating a new author.

    Any authorId sent by the client is ignored; the database assigns it.
    """
    pass


class AuthorUpdate(AuthorBase):
    """
    Schema for replacing an existing author (PUT).

    This is a full replace: every field is written, omitted optional fields
    become null. authorId must repeat the id from the URL path.
    """

    id: int | None = Field(
        default=None,
        alias="authorId",
        description="Must match the author id in the URL",
    )


class AuthorSummary(AuthorBase):
    """Author without related collections, used when nested in other responses."""

    id: int = Field(
        ...,
        alias="authorId",
        description="Unique identifier",
        examples=[1, 42],
    )
