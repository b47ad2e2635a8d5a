from __future__ import annotations

from typing import Any, Generic, Hashable, Iterable, TypeVar

from crudrepo.core.logging import get_logger
from crudrepo.exceptions import EntityNotFoundError, require_not_none
from sqlalchemy import Delete, Select, delete, select

from .base import BaseRepository, PersistenceContext

T = TypeVar("T")
ID = TypeVar("ID", bound=Hashable)


class CrudRepository(BaseRepository, Generic[T, ID]):
    """CRUD operations for a single mapped entity class.

    Every call is forwarded to the injected session. The repository never
    commits, rolls back or closes it; flushing only happens in ``flush`` and
    ``save_and_flush`` (or implicitly when the session autoflushes).

    Errors raised by SQLAlchemy propagate unchanged. The only errors raised
    here are :class:`~crudrepo.exceptions.InvalidArgumentError` for ``None``
    arguments, before the session is touched, and
    :class:`~crudrepo.exceptions.EntityNotFoundError` from ``require_one``.
    """

    def __init__(self, session: PersistenceContext, entity_class: type[T]) -> None:
        super().__init__(session)
        self.entity_class: type[T] = require_not_none(entity_class, "entity_class")
        self._entity_name = self.entity_class.__name__
        self._logger = get_logger(__name__)

        self._find_all_query: Select[tuple[T]] = select(self.entity_class)
        # Bulk delete goes straight to the table. Instances already loaded in
        # the session are left as they are and may be stale afterwards.
        self._delete_all_query: Delete = delete(self.entity_class).execution_options(
            synchronize_session=False
        )

    @property
    def find_all_query(self) -> Select[tuple[T]]:
        return self._find_all_query

    @property
    def delete_all_query(self) -> Delete:
        return self._delete_all_query

    def save(self, entity: T) -> T:
        """Merge ``entity`` into the session and return the managed instance.

        Use the returned object from then on: it may not be ``entity``
        itself. Nothing is flushed unless the session autoflushes.
        """

        require_not_none(entity, "entity")
        return self.session.merge(entity)

    def save_and_flush(self, entity: T) -> T:
        """Merge ``entity`` and flush the whole unit of work.

        Database generated values, such as autoincrement ids, are populated
        on the returned instance.
        """

        require_not_none(entity, "entity")
        saved = self.session.merge(entity)
        self.session.flush()
        self._logger.debug(
            "repository.saved_and_flushed",
            extra={"entity": self._entity_name, "entity_id": _identity_of(saved)},
        )
        return saved

    def flush(self) -> None:
        """Flush all pending changes of the session, not only this entity type."""

        self.session.flush()

    def save_all(self, entities: Iterable[T]) -> list[T]:
        """Save each entity in iteration order, one merge per entity.

        Not atomic: if an element fails, the earlier ones stay merged and the
        rest are not processed.
        """

        require_not_none(entities, "entities")
        saved = [self.save(entity) for entity in entities]
        self._logger.debug(
            "repository.saved_all",
            extra={"entity": self._entity_name, "count": len(saved)},
        )
        return saved

    def find_one(self, entity_id: ID) -> T | None:
        """Return the entity with ``entity_id`` or ``None`` when absent.

        Entities already present in the session's identity map are returned
        without emitting SQL.
        """

        require_not_none(entity_id, "entity_id")
        return self.session.get(self.entity_class, entity_id)

    def require_one(self, entity_id: ID) -> T:
        require_not_none(entity_id, "entity_id")
        entity = self.find_one(entity_id)
        if entity is None:
            raise EntityNotFoundError(entity_id, self.entity_class)
        return entity

    def exists(self, entity_id: ID) -> bool:
        require_not_none(entity_id, "entity_id")
        return self.find_one(entity_id) is not None

    def find_all(self) -> list[T]:
        """Return every row of the entity's table in the order the store yields them."""

        return list(self.session.scalars(self._find_all_query).all())

    def delete(self, entity: T) -> None:
        """Mark ``entity`` for deletion; the DELETE is emitted on the next flush."""

        require_not_none(entity, "entity")
        self.session.delete(entity)

    def delete_all(self, entities: Iterable[T]) -> None:
        """Delete each entity in iteration order.

        A failure part way leaves the earlier entities marked for deletion.
        """

        require_not_none(entities, "entities")
        count = 0
        for entity in entities:
            self.delete(entity)
            count += 1
        self._logger.debug(
            "repository.deleted_all",
            extra={"entity": self._entity_name, "count": count},
        )

    def delete_all_of_type(self) -> int:
        """Delete every row of the entity's table with one bulk statement.

        Returns the number of rows the driver reports as deleted.
        """

        result: Any = self.session.execute(self._delete_all_query)
        count = result.rowcount
        self._logger.debug(
            "repository.deleted_all_of_type",
            extra={"entity": self._entity_name, "count": count},
        )
        return count

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(entity_class={self._entity_name})"


def _identity_of(entity: Any) -> Any:
    return getattr(entity, "id", None)
