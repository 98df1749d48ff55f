"""
Book Reviews Router

CRUD endpoints for book reviews.

Endpoints:
- GET    /bookreviews                - List all reviews
- GET    /bookreviews/book/{book_id} - Reviews of one book
- GET    /bookreviews/{review_id}    - Get one review
- POST   /bookreviews                - Create a review
- PUT    /bookreviews/{review_id}    - Replace a review
- DELETE /bookreviews/{review_id}    - Delete a review

Business Rules:
- Rating must be between 1 and 5 (400 otherwise)
- reviewDate is set by the server on creation
"""

from datetime import UTC, datetime
from typing import List

from fastapi import APIRouter, HTTPException, Request, Response, status

from bookstore.dependencies import Context, Reviews
from bookstore.exceptions import ConcurrencyConflict, NotFoundError
from bookstore.models import BookReview
from bookstore.schemas import BookReviewCreate, BookReviewResponse, BookReviewUpdate

router = APIRouter(
    prefix="/bookreviews",
    tags=["Reviews"],
    responses={
        404: {"description": "Review not found"},
    },
)


def get_review_or_404(reviews: Reviews, review_id: int) -> BookReview:
    """Get a review by ID (with its book) or raise NotFoundError."""
    review = reviews.get_by_id(review_id)
    if review is None:
        raise NotFoundError("BookReview", review_id)
    return review


@router.get(
    "",
    response_model=List[BookReviewResponse],
    summary="List all reviews",
)
def list_reviews(reviews: Reviews) -> List[BookReviewResponse]:
    """List all reviews with their books."""
    return [BookReviewResponse.model_validate(r) for r in reviews.get_all()]


@router.get(
    "/book/{book_id}",
    response_model=List[BookReviewResponse],
    summary="Get reviews for a book",
    description="Reviews of one book. A book without reviews gives an empty list.",
)
def list_reviews_for_book(book_id: int, reviews: Reviews) -> List[BookReviewResponse]:
    """List the reviews of one book."""
    return [BookReviewResponse.model_validate(r) for r in reviews.get_by_book_id(book_id)]


@router.get(
    "/{review_id}",
    response_model=BookReviewResponse,
    summary="Get a review by ID",
)
def get_review(review_id: int, reviews: Reviews) -> BookReviewResponse:
    """Get a single review by ID."""
    return BookReviewResponse.model_validate(get_review_or_404(reviews, review_id))


@router.post(
    "",
    response_model=BookReviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a review",
    description="Create a review for an existing book. "
                "reviewDate is always set to the current server time.",
)
def create_review(
    review_data: BookReviewCreate,
    request: Request,
    response: Response,
    reviews: Reviews,
    context: Context,
) -> BookReviewResponse:
    """Create a new review stamped with the current time."""
    review = reviews.add(
        BookReview(
            **review_data.model_dump(),
            review_date=datetime.now(UTC),
        )
    )
    context.save()

    response.headers["Location"] = str(request.url_for("get_review", review_id=review.id))
    return BookReviewResponse.model_validate(get_review_or_404(reviews, review.id))


@router.put(
    "/{review_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a review",
    responses={400: {"description": "Body id does not match URL id"}},
)
def update_review(
    review_id: int,
    review_data: BookReviewUpdate,
    reviews: Reviews,
    context: Context,
) -> None:
    """
    Replace an existing review. reviewId in the body must equal the URL id.

    If reviewDate is omitted the stored date is kept.
    """
    if review_data.id != review_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"reviewId {review_data.id} does not match URL id {review_id}",
        )

    values = review_data.model_dump(exclude={"id"})
    if values["review_date"] is None:
        del values["review_date"]

    try:
        reviews.replace(review_id, values)
        context.save()
    except ConcurrencyConflict:
        if not reviews.exists(review_id):
            raise NotFoundError("BookReview", review_id)
        raise


@router.delete(
    "/{review_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a review",
)
def delete_review(review_id: int, reviews: Reviews, context: Context) -> None:
    """Delete a review."""
    if not reviews.exists(review_id):
        raise NotFoundError("BookReview", review_id)

    context.delete_review(review_id)
    context.save()
