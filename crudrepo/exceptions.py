from __future__ import annotations

from typing import Any, TypeVar

_V = TypeVar("_V")


class RepositoryError(Exception):
    """Base class for errors raised by the repository layer itself.

    Errors coming from SQLAlchemy are never wrapped in this hierarchy.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.__class__.__name__, "message": self.message}


class InvalidArgumentError(RepositoryError, ValueError):
    """A required entity, identifier or iterable argument was ``None``."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Argument '{argument}' must not be None")
        self.argument = argument

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["argument"] = self.argument
        return payload


class EntityNotFoundError(RepositoryError, LookupError):
    """No entity of ``entity_class`` exists for ``entity_id``."""

    def __init__(self, entity_id: Any, entity_class: type | None = None) -> None:
        super().__init__(f"Entity not found with id {entity_id}")
        self.entity_id = entity_id
        self.entity_class = entity_class

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["entity_id"] = self.entity_id
        payload["entity"] = (
            self.entity_class.__name__ if self.entity_class is not None else None
        )
        return payload


def require_not_none(value: _V | None, argument: str) -> _V:
    if value is None:
        raise InvalidArgumentError(argument)
    return value
