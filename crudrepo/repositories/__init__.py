from .base import BaseRepository, PersistenceContext
from .crud_repository import CrudRepository

__all__ = [
    "BaseRepository",
    "CrudRepository",
    "PersistenceContext",
]
