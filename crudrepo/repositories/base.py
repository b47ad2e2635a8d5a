from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from sqlalchemy.engine import Result, ScalarResult
from sqlalchemy.sql import Executable


@runtime_checkable
class PersistenceContext(Protocol):
    """The slice of ``sqlalchemy.orm.Session`` that repositories rely on."""

    def merge(self, instance: Any) -> Any: ...

    def flush(self) -> None: ...

    def get(self, entity: Any, ident: Any) -> Any: ...

    def delete(self, instance: Any) -> None: ...

    def scalars(self, statement: Executable, *args: Any, **kwargs: Any) -> ScalarResult[Any]: ...

    def execute(self, statement: Executable, *args: Any, **kwargs: Any) -> Result[Any]: ...


class BaseRepository:
    """Lightweight repository wrapper holding the injected session."""

    def __init__(self, session: PersistenceContext) -> None:
        self.session = session
