"""
Persistence Context

BookStoreContext wraps the request's SQLAlchemy Session and is the single
place where entity changes are staged and committed.

Unit of Work
============
Routers stage changes (add, replace, delete_*) and then call save() once.
save() commits everything as one transaction. If the database rejects any
part of it, the whole unit is rolled back and a domain exception is raised:

    IntegrityError  → IntegrityViolation
    StaleDataError  → ConcurrencyConflict

Delete Rules
============
The delete policy declared on the models is also applied here with explicit
statements, so it holds on every backend:

    authors → books         CASCADE   (reviews of those books go too)
    genres  → books         RESTRICT
    books   → book_reviews  CASCADE
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
from decimal import Decimal
from typing import Any

from sqlalchemy import delete, select, text, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from bookstore.database import Base
from bookstore.exceptions import ConcurrencyConflict, IntegrityViolation
from bookstore.models import Author, Book, BookReview, Genre

logger = logging.getLogger(__name__)


# =============================================================================
# Seed Data
# =============================================================================
# Inserted with explicit ids so that a fresh store always has the same keys.

SEED_AUTHORS = [
    {
        "id": 1,
        "first_name": "Джордж",
        "last_name": "Орвелл",
        "email": "orwell@example.com",
        "date_of_birth": date(1903, 6, 25),
    },
    {
        "id": 2,
        "first_name": "Рей",
        "last_name": "Бредбери",
        "email": "bradbury@example.com",
        "date_of_birth": date(1920, 8, 22),
    },
]

SEED_GENRES = [
    {"id": 1, "name": "Научная фантастика", "description": "Жанр художественной литературы"},
    {"id": 2, "name": "Антиутопия", "description": "Жанр художественной литературы"},
]

SEED_BOOKS = [
    {
        "id": 1,
        "title": "1984",
        "isbn": "978-0-452-28423-4",
        "published_date": date(1949, 6, 8),
        "price": Decimal("299.99"),
        "author_id": 1,
        "genre_id": 2,
    },
    {
        "id": 2,
        "title": "451 градус по Фаренгейту",
        "isbn": "978-1-451-67331-9",
        "published_date": date(1953, 10, 19),
        "price": Decimal("349.99"),
        "author_id": 2,
        "genre_id": 1,
    },
]


class BookStoreContext:
    """
    Unit of work over one SQLAlchemy session.

    One context is created per request (see bookstore.dependencies) and is
    never shared between requests.

    Example:
        context = BookStoreContext(session)
        context.add(Genre(name="Poetry"))
        context.save()
    """

    # (parent table, child table) → ON DELETE behaviour
    DELETE_RULES = {
        ("authors", "books"): "CASCADE",
        ("genres", "books"): "RESTRICT",
        ("books", "book_reviews"): "CASCADE",
    }

    def __init__(self, session: Session) -> None:
        self.session = session

    @contextmanager
    def _unit_of_work(self) -> Iterator[None]:
        """Roll back and translate database errors raised inside the block."""
        try:
            yield
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning(f"Integrity violation, unit of work rolled back: {exc.orig}")
            raise IntegrityViolation(str(exc.orig)) from exc
        except StaleDataError as exc:
            self.session.rollback()
            logger.warning(f"Concurrency conflict, unit of work rolled back: {exc}")
            raise ConcurrencyConflict(str(exc)) from exc

    # -------------------------------------------------------------------------
    # Staging
    # -------------------------------------------------------------------------
    def add(self, entity: Base) -> Base:
        """Stage a new entity for insertion. Its id is assigned by save()."""
        self.session.add(entity)
        return entity

    def replace(self, model: type[Base], entity_id: int, values: dict[str, Any]) -> None:
        """
        Overwrite every column of one row (full-record replace).

        Args:
            model: Mapped class of the row
            entity_id: Primary key of the row
            values: New column values; must not contain the primary key

        Raises:
            ConcurrencyConflict: If no row with that key exists anymore
            IntegrityViolation: If a foreign key in values points nowhere
        """
        stmt = update(model).where(model.id == entity_id).values(**values)
        with self._unit_of_work():
            result = self.session.execute(stmt)

        if result.rowcount == 0:
            self.session.rollback()
            raise ConcurrencyConflict(
                f"{model.__name__} with id {entity_id} was not updated: no matching row"
            )

    def delete_review(self, review_id: int) -> None:
        """Stage deletion of a single review."""
        with self._unit_of_work():
            self.session.execute(delete(BookReview).where(BookReview.id == review_id))

    def delete_book(self, book_id: int) -> None:
        """Stage deletion of a book together with its reviews."""
        with self._unit_of_work():
            reviews = self.session.execute(
                delete(BookReview).where(BookReview.book_id == book_id)
            )
            self.session.execute(delete(Book).where(Book.id == book_id))

        logger.info(f"Book {book_id} deleted with {reviews.rowcount} review(s)")

    def delete_author(self, author_id: int) -> None:
        """
        Stage deletion of an author, all of the author's books, and every
        review of those books.
        """
        author_books = select(Book.id).where(Book.author_id == author_id)

        with self._unit_of_work():
            reviews = self.session.execute(
                delete(BookReview).where(BookReview.book_id.in_(author_books))
            )
            books = self.session.execute(delete(Book).where(Book.author_id == author_id))
            self.session.execute(delete(Author).where(Author.id == author_id))

        logger.info(
            f"Author {author_id} deleted with {books.rowcount} book(s) "
            f"and {reviews.rowcount} review(s)"
        )

    def delete_genre(self, genre_id: int) -> None:
        """
        Stage deletion of a genre.

        Raises:
            IntegrityViolation: If at least one book still uses the genre
        """
        if self.genre_in_use(genre_id):
            raise IntegrityViolation(
                f"Genre {genre_id} is referenced by existing books and cannot be deleted"
            )

        with self._unit_of_work():
            self.session.execute(delete(Genre).where(Genre.id == genre_id))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def exists(self, model: type[Base], entity_id: int) -> bool:
        """Check whether a row with the given primary key exists."""
        stmt = select(model.id).where(model.id == entity_id)
        return self.session.execute(stmt).scalar_one_or_none() is not None

    def genre_in_use(self, genre_id: int) -> bool:
        """Check whether any book references the genre."""
        stmt = select(Book.id).where(Book.genre_id == genre_id).limit(1)
        return self.session.execute(stmt).first() is not None

    def is_empty(self) -> bool:
        """True when there are no authors, genres or books."""
        return all(
            self.session.execute(select(model.id).limit(1)).first() is None
            for model in (Author, Genre, Book)
        )

    # -------------------------------------------------------------------------
    # Commit
    # -------------------------------------------------------------------------
    def save(self) -> None:
        """
        Commit all staged changes as one transaction.

        Raises:
            IntegrityViolation: A constraint rejected the changes
            ConcurrencyConflict: A staged update lost its row
        """
        with self._unit_of_work():
            self.session.commit()

    # -------------------------------------------------------------------------
    # Seeding
    # -------------------------------------------------------------------------
    def seed(self) -> bool:
        """
        Insert the baseline authors, genres and books into an empty store.

        Returns:
            True if rows were inserted, False if the store already had data
        """
        if not self.is_empty():
            logger.info("Store already contains data, skipping seed")
            return False

        self.session.add_all([Author(**data) for data in SEED_AUTHORS])
        self.session.add_all([Genre(**data) for data in SEED_GENRES])
        with self._unit_of_work():
            # Parents first: books reference authors and genres by id only
            self.session.flush()
            self.session.add_all([Book(**data) for data in SEED_BOOKS])
            self.session.flush()

        self._sync_id_sequences()
        self.save()

        logger.info(
            f"Seeded {len(SEED_AUTHORS)} authors, {len(SEED_GENRES)} genres "
            f"and {len(SEED_BOOKS)} books"
        )
        return True

    def _sync_id_sequences(self) -> None:
        """Move PostgreSQL id sequences past explicitly inserted ids."""
        if self.session.get_bind().dialect.name != "postgresql":
            return

        for table in ("authors", "genres", "books"):
            self.session.execute(
                text(
                    f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                    f"(SELECT MAX(id) FROM {table}))"
                )
            )
