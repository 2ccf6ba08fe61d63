"""
Pytest configuration and fixtures for backend tests.

Provides shared fixtures for:
- Test database sessions
- Record store
- Fake folder service
- Mock diagnostic logger
- Sample data factories
"""

import logging
import os
from datetime import datetime
from typing import Dict, List, Optional, Tuple
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app modules
os.environ['PERFREC_DB_URL'] = 'sqlite:///:memory:'

from backend.src.models import Base, Performance
from backend.src.services.remote.base import FolderService
from backend.src.services.record_store import SqlAlchemyRecordStore


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture(scope='function')
def test_db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope='function')
def test_db_session(test_db_engine):
    """Create a test database session."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def mock_logger():
    """Diagnostic sink that records every logging call."""
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def record_store(test_db_session, mock_logger):
    """SqlAlchemyRecordStore bound to the test session."""
    return SqlAlchemyRecordStore(test_db_session, logger=mock_logger)


# ============================================================================
# Folder Service Fixtures
# ============================================================================

class FakeFolderService(FolderService):
    """
    In-memory folder service.

    Attributes:
        folders: Live folders by id
        created: Names passed to create_folder(), in call order
        deleted: Ids passed to delete_folder(), in call order
        create_returns_none: Make create_folder() return None
        delete_result: Override delete_folder() return value
        create_error / delete_error: Exceptions to raise instead
    """

    def __init__(self):
        super().__init__({})
        self.folders: Dict[str, str] = {}
        self.created: List[str] = []
        self.deleted: List[str] = []
        self.create_returns_none = False
        self.delete_result: Optional[bool] = None
        self.create_error: Optional[Exception] = None
        self.delete_error: Optional[Exception] = None

    def create_folder(self, name: str) -> Optional[str]:
        self.created.append(name)
        if self.create_error is not None:
            raise self.create_error
        if self.create_returns_none:
            return None
        folder_id = f"fld_{len(self.created)}"
        self.folders[folder_id] = name
        return folder_id

    def delete_folder(self, folder_id: str) -> bool:
        self.deleted.append(folder_id)
        if self.delete_error is not None:
            raise self.delete_error
        if self.delete_result is not None:
            return self.delete_result
        return self.folders.pop(folder_id, None) is not None

    def test_connection(self) -> Tuple[bool, str]:
        return True, "fake"


@pytest.fixture
def fake_folder_service():
    """Create a FakeFolderService."""
    return FakeFolderService()


# ============================================================================
# Sample Data Factories
# ============================================================================

@pytest.fixture
def sample_performance(test_db_session):
    """Factory for inserting Performance rows directly."""
    def _create(
        title="Spring Recital",
        created_by="u1",
        description=None,
        tagged_users=None,
        drive_folder_id=None,
        created_at=None,
    ):
        performance = Performance(
            title=title,
            created_by=created_by,
            description=description,
            tagged_users=tagged_users,
            drive_folder_id=drive_folder_id,
        )
        if created_at is not None:
            performance.created_at = created_at
            performance.updated_at = created_at
        test_db_session.add(performance)
        test_db_session.commit()
        test_db_session.refresh(performance)
        return performance
    return _create


@pytest.fixture
def timestamps():
    """Distinct creation timestamps, oldest first."""
    return [datetime(2025, 1, day, 12, 0, 0) for day in range(1, 6)]
