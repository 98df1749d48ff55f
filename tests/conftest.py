"""
pytest Fixtures for BookStore API Tests

This file contains shared fixtures used across all test files.

FIXTURE SCOPES:
- engine: function scope, a fresh in-memory SQLite database per test
- db_session: function scope, the session used by the test and the app
- client: function scope, TestClient wired to db_session

Each test gets its own database, so tests never see each other's rows and
ids start from 1 again.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app.
# The application engine points at a throwaway in-memory database and the
# startup seeding is disabled; tests seed explicitly when they need it.
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DATABASE"] = "false"

from collections.abc import Generator
from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookstore.context import BookStoreContext
from bookstore.database import create_tables, drop_tables, get_db
from bookstore.main import app
from bookstore.models import Author, Book, BookReview, Genre


# =============================================================================
# DATABASE FIXTURES
# =============================================================================

@pytest.fixture
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole test.
    Without it, the in-memory database would disappear between connections.
    Foreign keys are switched on by the connect listener in
    bookstore.database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    create_tables(bind=engine)

    yield engine

    drop_tables(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Create a database session for the test."""
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestSessionLocal()

    yield session

    session.close()


@pytest.fixture
def context(db_session: Session) -> BookStoreContext:
    """Persistence context over the test session."""
    return BookStoreContext(db_session)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency to use our test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    author = Author(
        first_name="George",
        last_name="Orwell",
        email="orwell@example.com",
        date_of_birth=date(1903, 6, 25),
    )
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_genre(db_session: Session) -> Genre:
    """Create a sample genre for testing."""
    genre = Genre(
        name="Dystopia",
        description="Fiction set in an oppressive society.",
    )
    db_session.add(genre)
    db_session.commit()
    db_session.refresh(genre)
    return genre


@pytest.fixture
def unused_genre(db_session: Session) -> Genre:
    """A genre that no book references."""
    genre = Genre(name="Poetry")
    db_session.add(genre)
    db_session.commit()
    db_session.refresh(genre)
    return genre


@pytest.fixture
def sample_book(
    db_session: Session,
    sample_author: Author,
    sample_genre: Genre,
) -> Book:
    """
    Create a sample book for the sample author and genre.

    pytest resolves the sample_author and sample_genre fixtures first.
    """
    book = Book(
        title="1984",
        isbn="978-0-452-28423-4",
        published_date=date(1949, 6, 8),
        price=Decimal("299.99"),
        author_id=sample_author.id,
        genre_id=sample_genre.id,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def sample_review(db_session: Session, sample_book: Book) -> BookReview:
    """Create a sample review of the sample book."""
    review = BookReview(
        book_id=sample_book.id,
        reviewer_name="Alice",
        rating=4,
        comment="Chilling and still relevant.",
    )
    db_session.add(review)
    db_session.commit()
    db_session.refresh(review)
    return review


@pytest.fixture
def author_with_library(
    db_session: Session,
    sample_author: Author,
    sample_genre: Genre,
) -> dict[str, list[int] | int]:
    """
    An author with three books, each with two reviews.

    Returns the ids, captured before any test deletes the rows.
    """
    books = [
        Book(title=f"Book {i}", author_id=sample_author.id, genre_id=sample_genre.id)
        for i in range(3)
    ]
    db_session.add_all(books)
    db_session.flush()

    reviews = [
        BookReview(book_id=book.id, reviewer_name=f"Reader {n}", rating=n + 3)
        for book in books
        for n in range(2)
    ]
    db_session.add_all(reviews)
    db_session.commit()

    return {
        "author_id": sample_author.id,
        "genre_id": sample_genre.id,
        "book_ids": [book.id for book in books],
        "review_ids": [review.id for review in reviews],
    }


@pytest.fixture
def seeded(context: BookStoreContext) -> BookStoreContext:
    """Store with the baseline seed data."""
    context.seed()
    return context
