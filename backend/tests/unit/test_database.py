"""
Unit tests for database engine and session helpers.
"""

from sqlalchemy import inspect
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from backend.src.db import database


class TestDatabase:
    """Tests for engine creation and sessions"""

    def test_sqlite_engine_uses_static_pool(self):
        engine = database.create_db_engine("sqlite:///:memory:")

        assert isinstance(engine.pool, StaticPool)
        engine.dispose()

    def test_module_engine_follows_settings(self):
        assert database.DATABASE_URL == "sqlite:///:memory:"

    def test_init_db_creates_performances_table(self):
        database.init_db()

        assert "performances" in inspect(database.engine).get_table_names()

    def test_get_db_yields_and_closes_session(self):
        generator = database.get_db()
        db = next(generator)

        assert isinstance(db, Session)
        generator.close()
