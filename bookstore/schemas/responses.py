"""
Response Schemas With Related Entities

What the API returns for reads. Each response nests the *summaries* of its
direct relations, never their own relations, so the JSON is always a tree:

    AuthorResponse      → books: [BookSummary]
    GenreResponse       → books: [BookSummary]
    BookResponse        → author, genre, bookReviews: [ReviewSummary]
    BookReviewResponse  → book: BookSummary

They are built with model_validate() from ORM objects whose relations were
eager-loaded by the repositories.
"""

from pydantic import ConfigDict, Field

from bookstore.schemas.author import AuthorSummary
from bookstore.schemas.book import BookSummary
from bookstore.schemas.genre import GenreSummary
from bookstore.schemas.review import ReviewSummary


class AuthorResponse(AuthorSummary):
    """Author with the books they wrote."""

    books: list[BookSummary] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "authorId": 1,
                "firstName": "Джордж",
                "lastName": "Орвелл",
                "email": "orwell@example.com",
                "dateOfBirth": "1903-06-25",
                "books": [],
            }
        },
    )


class GenreResponse(GenreSummary):
    """Genre with the books filed under it."""

    books: list[BookSummary] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "genreId": 2,
                "name": "Антиутопия",
                "description": "Жанр художественной литературы",
                "books": [],
            }
        },
    )


class BookResponse(BookSummary):
    """Book with its author, genre and reviews."""

    author: AuthorSummary | None = None
    genre: GenreSummary | None = None
    reviews: list[ReviewSummary] = Field(default_factory=list, alias="bookReviews")


class BookReviewResponse(ReviewSummary):
    """Review with the reviewed book."""

    book: BookSummary | None = None
