"""
Authors Router

CRUD endpoints for authors.

Endpoints:
- GET    /authors             - List authors with their books
- GET    /authors/{author_id} - Get one author
- POST   /authors             - Create an author
- PUT    /authors/{author_id} - Replace an author
- DELETE /authors/{author_id} - Delete an author, their books and reviews
"""

from typing import List

from fastapi import APIRouter, HTTPException, Request, Response, status

from bookstore.dependencies import Authors, Context
from bookstore.exceptions import ConcurrencyConflict, NotFoundError
from bookstore.models import Author
from bookstore.schemas import AuthorCreate, AuthorResponse, AuthorUpdate

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        404: {"description": "Author not found"},
    },
)


def get_author_or_404(authors: Authors, author_id: int) -> Author:
    """Get an author by ID (with books) or raise NotFoundError."""
    author = authors.get_by_id(author_id)
    if author is None:
        raise NotFoundError("Author", author_id)
    return author


@router.get(
    "",
    response_model=List[AuthorResponse],
    summary="List all authors",
    description="Get every author together with the books they wrote.",
)
def list_authors(authors: Authors) -> List[AuthorResponse]:
    """List all authors."""
    return [AuthorResponse.model_validate(a) for a in authors.get_all()]


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Get an author by ID",
)
def get_author(author_id: int, authors: Authors) -> AuthorResponse:
    """Get a single author by ID."""
    return AuthorResponse.model_validate(get_author_or_404(authors, author_id))


@router.post(
    "",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
)
def create_author(
    author_data: AuthorCreate,
    request: Request,
    response: Response,
    authors: Authors,
    context: Context,
) -> AuthorResponse:
    """Create a new author. The response carries the assigned authorId."""
    author = authors.add(Author(**author_data.model_dump()))
    context.save()

    response.headers["Location"] = str(request.url_for("get_author", author_id=author.id))
    return AuthorResponse.model_validate(get_author_or_404(authors, author.id))


@router.put(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace an author",
    description="Full replace: every field is overwritten. "
                "authorId in the body must equal the id in the URL.",
    responses={400: {"description": "Body id does not match URL id"}},
)
def update_author(
    author_id: int,
    author_data: AuthorUpdate,
    authors: Authors,
    context: Context,
) -> None:
    """Replace an existing author."""
    if author_data.id != author_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"authorId {author_data.id} does not match URL id {author_id}",
        )

    try:
        authors.replace(author_id, author_data.model_dump(exclude={"id"}))
        context.save()
    except ConcurrencyConflict:
        if not authors.exists(author_id):
            raise NotFoundError("Author", author_id)
        raise


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
    description="Permanently delete an author together with all of their "
                "books and the reviews of those books.",
)
def delete_author(author_id: int, authors: Authors, context: Context) -> None:
    """Delete an author (cascades to books and reviews)."""
    if not authors.exists(author_id):
        raise NotFoundError("Author", author_id)

    context.delete_author(author_id)
    context.save()
