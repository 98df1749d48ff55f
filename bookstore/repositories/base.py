"""
Generic Repository

Read helpers shared by all entity repositories. Every read names the related
entities it loads; nothing is loaded lazily (the model relationships use
lazy="raise"), so a response can only touch relations the query fetched.

Mutations are passed straight through to the BookStoreContext.
"""

from collections.abc import Iterable
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.orm import Session
from sqlalchemy.orm.interfaces import LoaderOption

from bookstore.context import BookStoreContext
from bookstore.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """
    Base repository for one mapped class.

    Subclasses set:
    - model: the mapped class
    - relations: relation name → loader option (selectinload/joinedload)

    include=None loads every relation in `relations`; pass a subset (or an
    empty tuple) to load less.
    """

    model: ClassVar[type[Any]]
    relations: ClassVar[dict[str, LoaderOption]] = {}

    def __init__(self, context: BookStoreContext) -> None:
        self.context = context

    @property
    def session(self) -> Session:
        return self.context.session

    # -------------------------------------------------------------------------
    # Query building
    # -------------------------------------------------------------------------
    def load_options(self, include: Iterable[str] | None = None) -> list[LoaderOption]:
        """
        Translate relation names into loader options.

        Raises:
            ValueError: If a name is not a relation of this entity
        """
        if include is None:
            return list(self.relations.values())

        options = []
        for name in include:
            if name not in self.relations:
                raise ValueError(f"{self.model.__name__} has no relation '{name}'")
            options.append(self.relations[name])
        return options

    def query(self, include: Iterable[str] | None = None) -> Select:
        """SELECT of the entity with the requested relations eager-loaded."""
        return (
            select(self.model)
            .options(*self.load_options(include))
            .execution_options(populate_existing=True)
        )

    def _all(self, stmt: Select) -> list[ModelT]:
        return list(self.session.execute(stmt).scalars().all())

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    def get_all(self, include: Iterable[str] | None = None) -> list[ModelT]:
        """Every row, in storage order, with relations loaded."""
        return self._all(self.query(include))

    def get_by_id(self, entity_id: int, include: Iterable[str] | None = None) -> ModelT | None:
        """The row with the given key, or None."""
        stmt = self.query(include).where(self.model.id == entity_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def exists(self, entity_id: int) -> bool:
        return self.context.exists(self.model, entity_id)

    # -------------------------------------------------------------------------
    # Mutations (delegated)
    # -------------------------------------------------------------------------
    def add(self, entity: ModelT) -> ModelT:
        return self.context.add(entity)

    def replace(self, entity_id: int, values: dict[str, Any]) -> None:
        self.context.replace(self.model, entity_id, values)
