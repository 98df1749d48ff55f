"""
Tests for Authors API Endpoints

Tests for /api/authors endpoints.
"""

from fastapi import status
from sqlalchemy import func, select

from bookstore.models import Book, BookReview


class TestListAuthors:
    """Tests for GET /api/authors endpoint."""

    def test_list_authors_empty(self, client):
        """Test listing authors when database is empty."""
        response = client.get("/api/authors")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_authors_includes_books(self, client, sample_book):
        """Each author carries the books they wrote."""
        response = client.get("/api/authors")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        assert data[0]["lastName"] == "Orwell"
        assert [b["title"] for b in data[0]["books"]] == ["1984"]
        # Nested books are summaries: no author back-reference
        assert "author" not in data[0]["books"][0]

    def test_list_seeded_authors(self, client, seeded):
        """The seed inserts two authors with fixed ids."""
        response = client.get("/api/authors")

        data = response.json()
        assert {a["authorId"] for a in data} == {1, 2}
        names = {(a["firstName"], a["lastName"]) for a in data}
        assert ("Джордж", "Орвелл") in names
        assert ("Рей", "Бредбери") in names


class TestGetAuthor:
    """Tests for GET /api/authors/{author_id} endpoint."""

    def test_get_author_success(self, client, sample_author):
        """Test getting an author by ID."""
        response = client.get(f"/api/authors/{sample_author.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["authorId"] == sample_author.id
        assert data["firstName"] == "George"
        assert data["email"] == "orwell@example.com"
        assert data["dateOfBirth"] == "1903-06-25"
        assert data["books"] == []

    def test_get_author_not_found(self, client):
        """A missing author is 404 with an empty body."""
        response = client.get("/api/authors/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.content == b""


class TestCreateAuthor:
    """Tests for POST /api/authors endpoint."""

    def test_create_then_get_roundtrip(self, client):
        """POST then GET by the returned id yields the input plus an id."""
        author_data = {
            "firstName": "A",
            "lastName": "B",
            "email": "a@b.com",
            "dateOfBirth": "1990-01-01",
        }

        response = client.post("/api/authors", json=author_data)

        assert response.status_code == status.HTTP_201_CREATED
        created = response.json()
        assert created["authorId"] > 0
        assert response.headers["location"].endswith(f"/api/authors/{created['authorId']}")

        fetched = client.get(f"/api/authors/{created['authorId']}").json()
        for field, value in author_data.items():
            assert fetched[field] == value

    def test_create_author_minimal(self, client):
        """Only first and last name are required."""
        response = client.post(
            "/api/authors",
            json={"firstName": "Jane", "lastName": "Austen"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["email"] is None
        assert data["dateOfBirth"] is None

    def test_create_author_ignores_client_id(self, client, sample_author):
        """The database assigns the id, whatever the client sends."""
        response = client.post(
            "/api/authors",
            json={"authorId": sample_author.id, "firstName": "Jane", "lastName": "Austen"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["authorId"] != sample_author.id

    def test_create_author_accepts_snake_case(self, client):
        """Field names may also be sent in snake_case."""
        response = client.post(
            "/api/authors",
            json={"first_name": "Ray", "last_name": "Bradbury"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["firstName"] == "Ray"

    def test_create_author_missing_last_name(self, client):
        """Missing required fields are rejected with 400."""
        response = client.post("/api/authors", json={"firstName": "Solo"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_author_blank_name(self, client):
        """Whitespace-only names are rejected."""
        response = client.post(
            "/api/authors",
            json={"firstName": "   ", "lastName": "Nobody"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_author_name_too_long(self, client):
        """Names over 100 characters are rejected."""
        response = client.post(
            "/api/authors",
            json={"firstName": "x" * 101, "lastName": "Long"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_author_email_too_long(self, client):
        """Emails over 200 characters are rejected."""
        response = client.post(
            "/api/authors",
            json={"firstName": "A", "lastName": "B", "email": "a" * 195 + "@b.com"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestUpdateAuthor:
    """Tests for PUT /api/authors/{author_id} endpoint."""

    def test_update_author_full_replace(self, client, sample_author):
        """PUT overwrites every field and returns 204."""
        author_id = sample_author.id
        update_data = {
            "authorId": author_id,
            "firstName": "Eric",
            "lastName": "Blair",
        }

        response = client.put(f"/api/authors/{author_id}", json=update_data)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""

        data = client.get(f"/api/authors/{author_id}").json()
        assert data["firstName"] == "Eric"
        assert data["lastName"] == "Blair"
        # Omitted optional fields are cleared by a full replace
        assert data["email"] is None
        assert data["dateOfBirth"] is None

    def test_update_author_id_mismatch(self, client, sample_author):
        """A body id different from the URL id is 400 and changes nothing."""
        author_id = sample_author.id
        update_data = {
            "authorId": author_id + 1,
            "firstName": "Changed",
            "lastName": "Changed",
        }

        response = client.put(f"/api/authors/{author_id}", json=update_data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = client.get(f"/api/authors/{author_id}").json()
        assert data["firstName"] == "George"

    def test_update_author_without_body_id(self, client, sample_author):
        """Omitting authorId counts as a mismatch."""
        response = client.put(
            f"/api/authors/{sample_author.id}",
            json={"firstName": "Eric", "lastName": "Blair"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_author_not_found(self, client):
        """Updating a non-existent author returns 404."""
        response = client.put(
            "/api/authors/99999",
            json={"authorId": 99999, "firstName": "Not", "lastName": "There"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_author_invalid_body(self, client, sample_author):
        """Validation runs before the id check."""
        response = client.put(
            f"/api/authors/{sample_author.id}",
            json={"authorId": sample_author.id, "firstName": ""},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestDeleteAuthor:
    """Tests for DELETE /api/authors/{author_id} endpoint."""

    def test_author_lifecycle(self, client):
        """Create, read, delete, then the author is gone."""
        created = client.post(
            "/api/authors",
            json={
                "firstName": "A",
                "lastName": "B",
                "email": "a@b.com",
                "dateOfBirth": "1990-01-01",
            },
        ).json()
        author_id = created["authorId"]

        assert client.get(f"/api/authors/{author_id}").status_code == status.HTTP_200_OK
        assert client.delete(f"/api/authors/{author_id}").status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/api/authors/{author_id}").status_code == status.HTTP_404_NOT_FOUND

    def test_delete_author_cascades(self, client, db_session, author_with_library):
        """Deleting an author removes their books and those books' reviews."""
        author_id = author_with_library["author_id"]

        response = client.delete(f"/api/authors/{author_id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/api/authors/{author_id}").status_code == status.HTTP_404_NOT_FOUND
        for book_id in author_with_library["book_ids"]:
            assert client.get(f"/api/books/{book_id}").status_code == status.HTTP_404_NOT_FOUND
        for review_id in author_with_library["review_ids"]:
            assert client.get(f"/api/bookreviews/{review_id}").status_code == status.HTTP_404_NOT_FOUND

        assert db_session.execute(select(func.count(Book.id))).scalar() == 0
        assert db_session.execute(select(func.count(BookReview.id))).scalar() == 0

    def test_delete_author_keeps_other_authors_books(self, client, seeded):
        """Only the deleted author's books go away."""
        response = client.delete("/api/authors/1")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        remaining = client.get("/api/books").json()
        assert [b["bookId"] for b in remaining] == [2]
        # Genres are never cascaded
        assert client.get("/api/genres/2").status_code == status.HTTP_200_OK

    def test_delete_author_not_found(self, client):
        """Deleting a non-existent author returns 404."""
        response = client.delete("/api/authors/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
