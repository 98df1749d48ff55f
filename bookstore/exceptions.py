"""
BookStore Exceptions

Domain errors raised below the HTTP layer. The exception handlers registered
in bookstore.main turn them into responses:

- NotFoundError        → 404 (empty body)
- IntegrityViolation   → 500
- ConcurrencyConflict  → 404 when the row is gone, otherwise 500
"""


class BookStoreError(Exception):
    """Base class for all BookStore errors."""

    pass


class NotFoundError(BookStoreError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class IntegrityViolation(BookStoreError):
    """
    Raised when a unit of work would break referential integrity.

    Covers foreign keys pointing at missing rows on insert/update and
    restrict-delete rules (a genre that is still used by books). The unit of
    work is rolled back before this is raised.
    """

    pass


class ConcurrencyConflict(BookStoreError):
    """Raised when an update found no row to modify (deleted meanwhile)."""

    pass
