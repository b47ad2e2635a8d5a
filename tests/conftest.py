from __future__ import annotations

import pytest
from crudrepo.core.db import create_schema, dispose_engine, get_engine, get_session
from crudrepo.core.settings import settings
from crudrepo.models import Base
from crudrepo.repositories import CrudRepository
from sqlalchemy import delete
from sqlalchemy.orm import Session

from tests.utils.entities import SampleEntity

TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"


@pytest.fixture(scope="session", autouse=True)
def configure_test_database() -> str:
    """Point settings.database_url to a shared in-memory SQLite database."""

    original_url = settings.database_url
    original_autoflush = settings.session_autoflush
    settings.database_url = TEST_DATABASE_URL
    # deferred flush, so the tests control when SQL is emitted
    settings.session_autoflush = False
    dispose_engine()
    create_schema(Base.metadata)
    yield settings.database_url
    dispose_engine()
    settings.database_url = original_url
    settings.session_autoflush = original_autoflush


@pytest.fixture(autouse=True)
def clean_tables(configure_test_database: str) -> None:
    yield
    with get_engine().begin() as connection:
        connection.execute(delete(SampleEntity.__table__))


@pytest.fixture()
def session() -> Session:
    db_session = get_session()
    yield db_session
    db_session.rollback()
    db_session.close()


@pytest.fixture()
def repository(session: Session) -> CrudRepository[SampleEntity, int]:
    return CrudRepository(session, SampleEntity)
