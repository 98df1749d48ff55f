"""
Books Router

CRUD endpoints for books, plus listings filtered by author or genre.

Every book is returned with its author, genre and reviews.

Endpoints:
- GET    /books                     - List all books
- GET    /books/author/{author_id}  - Books by one author
- GET    /books/genre/{genre_id}    - Books in one genre
- GET    /books/{book_id}           - Get one book
- POST   /books                     - Create a book
- PUT    /books/{book_id}           - Replace a book
- DELETE /books/{book_id}           - Delete a book and its reviews

authorId and genreId must reference existing rows; the database rejects
anything else when the change is saved.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Request, Response, status

from bookstore.dependencies import Books, Context
from bookstore.exceptions import ConcurrencyConflict, NotFoundError
from bookstore.models import Book
from bookstore.schemas import BookCreate, BookResponse, BookUpdate

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


def get_book_or_404(books: Books, book_id: int) -> Book:
    """Get a book by ID (with author, genre, reviews) or raise NotFoundError."""
    book = books.get_by_id(book_id)
    if book is None:
        raise NotFoundError("Book", book_id)
    return book


# =============================================================================
# LIST ENDPOINTS
# =============================================================================

@router.get(
    "",
    response_model=List[BookResponse],
    summary="List all books",
    description="Get every book with its author, genre and reviews.",
)
def list_books(books: Books) -> List[BookResponse]:
    """List all books."""
    return [BookResponse.model_validate(b) for b in books.get_all()]


@router.get(
    "/author/{author_id}",
    response_model=List[BookResponse],
    summary="Get books by author",
    description="Books written by one author. Unknown authors give an empty list.",
)
def list_books_by_author(author_id: int, books: Books) -> List[BookResponse]:
    """List the books of one author."""
    return [BookResponse.model_validate(b) for b in books.get_by_author_id(author_id)]


@router.get(
    "/genre/{genre_id}",
    response_model=List[BookResponse],
    summary="Get books by genre",
    description="Books filed under one genre. Unknown genres give an empty list.",
)
def list_books_by_genre(genre_id: int, books: Books) -> List[BookResponse]:
    """List the books of one genre."""
    return [BookResponse.model_validate(b) for b in books.get_by_genre_id(genre_id)]


# =============================================================================
# SINGLE BOOK ENDPOINTS
# =============================================================================

@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
)
def get_book(book_id: int, books: Books) -> BookResponse:
    """Get a single book by ID."""
    return BookResponse.model_validate(get_book_or_404(books, book_id))


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
)
def create_book(
    book_data: BookCreate,
    request: Request,
    response: Response,
    books: Books,
    context: Context,
) -> BookResponse:
    """Create a new book for an existing author and genre."""
    book = books.add(Book(**book_data.model_dump()))
    context.save()

    response.headers["Location"] = str(request.url_for("get_book", book_id=book.id))
    return BookResponse.model_validate(get_book_or_404(books, book.id))


@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a book",
    responses={400: {"description": "Body id does not match URL id"}},
)
def update_book(
    book_id: int,
    book_data: BookUpdate,
    books: Books,
    context: Context,
) -> None:
    """Replace an existing book. bookId in the body must equal the URL id."""
    if book_data.id != book_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"bookId {book_data.id} does not match URL id {book_id}",
        )

    try:
        books.replace(book_id, book_data.model_dump(exclude={"id"}))
        context.save()
    except ConcurrencyConflict:
        if not books.exists(book_id):
            raise NotFoundError("Book", book_id)
        raise


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Permanently delete a book and all of its reviews.",
)
def delete_book(book_id: int, books: Books, context: Context) -> None:
    """Delete a book (cascades to reviews)."""
    if not books.exists(book_id):
        raise NotFoundError("Book", book_id)

    context.delete_book(book_id)
    context.save()
