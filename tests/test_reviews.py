"""
Tests for Book Reviews API Endpoints

Tests for /api/bookreviews endpoints, including rating validation and the
server-side review date.
"""

from datetime import datetime

import pytest
from fastapi import status


def review_payload(book_id: int, **overrides) -> dict:
    """Valid create body for a review of book_id."""
    payload = {
        "bookId": book_id,
        "reviewerName": "Bob",
        "rating": 5,
        "comment": "Loved it.",
    }
    payload.update(overrides)
    return payload


class TestListReviews:
    """Tests for GET /api/bookreviews endpoint."""

    def test_list_reviews_empty(self, client):
        """Test listing reviews when database is empty."""
        response = client.get("/api/bookreviews")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_reviews_with_book(self, client, sample_review):
        """Each review carries the reviewed book."""
        response = client.get("/api/bookreviews")

        data = response.json()
        assert len(data) == 1
        assert data[0]["reviewerName"] == "Alice"
        assert data[0]["book"]["title"] == "1984"
        # The nested book does not carry its own reviews
        assert "bookReviews" not in data[0]["book"]

    def test_reviews_for_book(self, client, author_with_library):
        """Only the reviews of the requested book are returned."""
        book_id = author_with_library["book_ids"][1]

        response = client.get(f"/api/bookreviews/book/{book_id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 2
        assert all(r["bookId"] == book_id for r in data)

    def test_reviews_for_book_without_reviews(self, client, sample_book):
        """A book without reviews gives an empty list."""
        response = client.get(f"/api/bookreviews/book/{sample_book.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []


class TestGetReview:
    """Tests for GET /api/bookreviews/{review_id} endpoint."""

    def test_get_review_success(self, client, sample_review):
        """Test getting a review by ID."""
        response = client.get(f"/api/bookreviews/{sample_review.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["reviewId"] == sample_review.id
        assert data["rating"] == 4
        assert data["comment"] == "Chilling and still relevant."
        assert data["reviewDate"] is not None

    def test_get_review_not_found(self, client):
        """Test getting a non-existent review returns 404."""
        response = client.get("/api/bookreviews/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestCreateReview:
    """Tests for POST /api/bookreviews endpoint."""

    @pytest.mark.parametrize("rating", [1, 5])
    def test_create_review_rating_bounds(self, client, sample_book, rating):
        """Ratings at both ends of the range are accepted."""
        response = client.post(
            "/api/bookreviews",
            json=review_payload(sample_book.id, rating=rating),
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["rating"] == rating

    @pytest.mark.parametrize("rating", [0, 6, -1])
    def test_create_review_rating_out_of_range(self, client, sample_book, rating):
        """Ratings outside 1-5 are rejected and nothing is stored."""
        response = client.post(
            "/api/bookreviews",
            json=review_payload(sample_book.id, rating=rating),
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get("/api/bookreviews").json() == []

    def test_create_review_sets_review_date(self, client, sample_book):
        """The server stamps the review date; a client value is ignored."""
        response = client.post(
            "/api/bookreviews",
            json=review_payload(sample_book.id, reviewDate="2001-01-01T00:00:00"),
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert datetime.fromisoformat(data["reviewDate"]).year > 2001
        assert not data["reviewDate"].startswith("2001-01-01")
        assert response.headers["location"].endswith(f"/api/bookreviews/{data['reviewId']}")

    def test_create_review_includes_book(self, client, sample_book):
        """The created review is returned with its book."""
        response = client.post("/api/bookreviews", json=review_payload(sample_book.id))

        assert response.json()["book"]["bookId"] == sample_book.id

    def test_create_review_missing_reviewer(self, client, sample_book):
        """reviewerName is required."""
        payload = review_payload(sample_book.id)
        del payload["reviewerName"]

        response = client.post("/api/bookreviews", json=payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_review_comment_too_long(self, client, sample_book):
        """Comments are limited to 1000 characters."""
        response = client.post(
            "/api/bookreviews",
            json=review_payload(sample_book.id, comment="c" * 1001),
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_review_unknown_book(self, client):
        """Reviews must point at an existing book."""
        response = client.post("/api/bookreviews", json=review_payload(99999))

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR


class TestUpdateReview:
    """Tests for PUT /api/bookreviews/{review_id} endpoint."""

    def test_update_review(self, client, sample_review):
        """Test replacing a review keeps its stored date when none is sent."""
        review_id = sample_review.id
        original_date = client.get(f"/api/bookreviews/{review_id}").json()["reviewDate"]

        response = client.put(
            f"/api/bookreviews/{review_id}",
            json={
                "reviewId": review_id,
                "bookId": sample_review.book_id,
                "reviewerName": "Alice",
                "rating": 2,
            },
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT
        data = client.get(f"/api/bookreviews/{review_id}").json()
        assert data["rating"] == 2
        assert data["comment"] is None
        assert data["reviewDate"] == original_date

    def test_update_review_rating_out_of_range(self, client, sample_review):
        """Updates are validated like creates."""
        review_id = sample_review.id
        response = client.put(
            f"/api/bookreviews/{review_id}",
            json={
                "reviewId": review_id,
                "bookId": sample_review.book_id,
                "reviewerName": "Alice",
                "rating": 6,
            },
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get(f"/api/bookreviews/{review_id}").json()["rating"] == 4

    def test_update_review_id_mismatch(self, client, sample_review):
        """Mismatched ids are rejected."""
        review_id = sample_review.id
        response = client.put(
            f"/api/bookreviews/{review_id}",
            json={
                "reviewId": review_id + 1,
                "bookId": sample_review.book_id,
                "reviewerName": "Mallory",
                "rating": 1,
            },
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get(f"/api/bookreviews/{review_id}").json()["reviewerName"] == "Alice"

    def test_update_review_not_found(self, client, sample_book):
        """Test updating a non-existent review returns 404."""
        response = client.put(
            "/api/bookreviews/99999",
            json={
                "reviewId": 99999,
                "bookId": sample_book.id,
                "reviewerName": "Nobody",
                "rating": 3,
            },
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteReview:
    """Tests for DELETE /api/bookreviews/{review_id} endpoint."""

    def test_delete_review(self, client, sample_review):
        """Deleting a review leaves its book alone."""
        review_id = sample_review.id
        book_id = sample_review.book_id

        response = client.delete(f"/api/bookreviews/{review_id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/api/bookreviews/{review_id}").status_code == status.HTTP_404_NOT_FOUND
        book = client.get(f"/api/books/{book_id}").json()
        assert book["bookReviews"] == []

    def test_delete_review_not_found(self, client):
        """Test deleting a non-existent review returns 404."""
        response = client.delete("/api/bookreviews/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
