from __future__ import annotations

import pytest
from crudrepo.core.db import get_engine, get_session, session_scope
from sqlalchemy.pool import StaticPool

from tests.utils.db import count_rows
from tests.utils.entities import SampleEntity


def test_in_memory_engine_shares_one_connection():
    engine = get_engine()

    assert engine is get_engine()
    assert isinstance(engine.pool, StaticPool)


def test_session_scope_commits_on_success():
    with session_scope() as session:
        session.add(SampleEntity("committed"))

    with session_scope() as session:
        assert count_rows(session, "sample_entities") == 1


def test_session_scope_rolls_back_on_error():
    with pytest.raises(RuntimeError):
        with session_scope() as session:
            session.add(SampleEntity("discarded"))
            session.flush()
            raise RuntimeError("boom")

    with session_scope() as session:
        assert count_rows(session, "sample_entities") == 0


def test_sessions_use_deferred_flush():
    session = get_session()
    try:
        assert session.autoflush is False
    finally:
        session.close()
