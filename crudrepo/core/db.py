from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator

from crudrepo.core.settings import settings
from sqlalchemy import MetaData, create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _is_sqlite_memory(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (
        None,
        "",
        ":memory:",
    )


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        connect_args: dict[str, Any] = {}
        engine_kwargs: dict[str, Any] = {}
        if settings.database_url.startswith("postgresql"):
            connect_args["connect_timeout"] = 1
        if _is_sqlite_memory(settings.database_url):
            # every session must see the same in-memory database
            connect_args["check_same_thread"] = False
            engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True
        _engine = create_engine(
            settings.database_url,
            connect_args=connect_args,
            echo=settings.database_echo,
            **engine_kwargs,
        )
    return _engine


def _get_session_factory() -> sessionmaker[Session]:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(
            bind=get_engine(),
            autoflush=settings.session_autoflush,
            expire_on_commit=settings.session_expire_on_commit,
        )
    return _session_factory


def get_session() -> Session:
    """Return a new SQLAlchemy session bound to the shared engine."""

    factory = _get_session_factory()
    return factory()


@contextmanager
def session_scope() -> Generator[Session, None, None]:
    """Provide transactional scope for DB interactions."""

    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def create_schema(metadata: MetaData) -> None:
    """Create all tables registered on ``metadata`` against the shared engine."""

    metadata.create_all(get_engine())


def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
        _engine = None
    _session_factory = None
