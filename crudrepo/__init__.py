from crudrepo.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    RepositoryError,
)
from crudrepo.repositories import BaseRepository, CrudRepository, PersistenceContext

__version__ = "0.1.0"

__all__ = [
    "BaseRepository",
    "CrudRepository",
    "EntityNotFoundError",
    "InvalidArgumentError",
    "PersistenceContext",
    "RepositoryError",
]
