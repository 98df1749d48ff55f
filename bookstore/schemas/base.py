"""
Shared Schema Base

All BookStore schemas speak camelCase on the wire (firstName, dateOfBirth,
bookReviews) while the Python attributes stay snake_case.

- alias_generator=to_camel: derives the JSON name of every field
- populate_by_name=True: snake_case input is accepted as well
- from_attributes=True: schemas can be built from SQLAlchemy objects

FastAPI serializes response models by alias, so responses are camelCase.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def strip_required(v: str, label: str) -> str:
    """Strip a required text field, rejecting blank values."""
    if not v.strip():
        raise ValueError(f"{label} cannot be empty or whitespace")
    return v.strip()
