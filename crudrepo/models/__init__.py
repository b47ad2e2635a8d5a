from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for entities managed through crudrepo repositories."""


__all__ = ["Base"]
