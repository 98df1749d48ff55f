"""
Test Suite for BookStore API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_authors.py: Tests for /api/authors endpoints
- test_books.py: Tests for /api/books endpoints
- test_genres.py: Tests for /api/genres endpoints
- test_reviews.py: Tests for /api/bookreviews endpoints
- test_context.py: Unit of work, delete rules and seeding
- test_repositories.py: Eager loading and filtered reads
- test_config.py: Settings parsing and validation

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_books.py

    # Run with verbose output
    pytest -v
"""
