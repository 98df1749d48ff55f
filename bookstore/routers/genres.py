"""
Genres Router

CRUD endpoints for genres.
Follows the same patterns as the authors router, except for deletion: a
genre that is still used by any book cannot be deleted (400).
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, Request, Response, status

from bookstore.dependencies import Books, Context, Genres
from bookstore.exceptions import ConcurrencyConflict, NotFoundError
from bookstore.models import Genre
from bookstore.schemas import GenreCreate, GenreResponse, GenreUpdate

logger = logging.getLogger(__name__)

GENRE_IN_USE_MESSAGE = "Cannot delete a genre that is used by books"

router = APIRouter(
    prefix="/genres",
    tags=["Genres"],
    responses={
        404: {"description": "Genre not found"},
    },
)


def get_genre_or_404(genres: Genres, genre_id: int) -> Genre:
    """Get a genre by ID (with books) or raise NotFoundError."""
    genre = genres.get_by_id(genre_id)
    if genre is None:
        raise NotFoundError("Genre", genre_id)
    return genre


@router.get(
    "",
    response_model=List[GenreResponse],
    summary="List all genres",
    description="Get every genre together with its books.",
)
def list_genres(genres: Genres) -> List[GenreResponse]:
    """List all genres."""
    return [GenreResponse.model_validate(g) for g in genres.get_all()]


@router.get(
    "/{genre_id}",
    response_model=GenreResponse,
    summary="Get a genre by ID",
)
def get_genre(genre_id: int, genres: Genres) -> GenreResponse:
    """Get a single genre by ID."""
    return GenreResponse.model_validate(get_genre_or_404(genres, genre_id))


@router.post(
    "",
    response_model=GenreResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new genre",
)
def create_genre(
    genre_data: GenreCreate,
    request: Request,
    response: Response,
    genres: Genres,
    context: Context,
) -> GenreResponse:
    """Create a new genre."""
    genre = genres.add(Genre(**genre_data.model_dump()))
    context.save()

    response.headers["Location"] = str(request.url_for("get_genre", genre_id=genre.id))
    return GenreResponse.model_validate(get_genre_or_404(genres, genre.id))


@router.put(
    "/{genre_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a genre",
    responses={400: {"description": "Body id does not match URL id"}},
)
def update_genre(
    genre_id: int,
    genre_data: GenreUpdate,
    genres: Genres,
    context: Context,
) -> None:
    """Replace an existing genre. genreId in the body must equal the URL id."""
    if genre_data.id != genre_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"genreId {genre_data.id} does not match URL id {genre_id}",
        )

    try:
        genres.replace(genre_id, genre_data.model_dump(exclude={"id"}))
        context.save()
    except ConcurrencyConflict:
        if not genres.exists(genre_id):
            raise NotFoundError("Genre", genre_id)
        raise


@router.delete(
    "/{genre_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a genre",
    description="Delete a genre. Rejected with 400 while any book uses it.",
    responses={400: {"description": "Genre is used by books"}},
)
def delete_genre(
    genre_id: int,
    genres: Genres,
    books: Books,
    context: Context,
) -> None:
    """Delete a genre that no book references."""
    if not genres.exists(genre_id):
        raise NotFoundError("Genre", genre_id)

    if books.genre_has_books(genre_id):
        logger.info(f"Refusing to delete genre {genre_id}: still used by books")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=GENRE_IN_USE_MESSAGE,
        )

    context.delete_genre(genre_id)
    context.save()
