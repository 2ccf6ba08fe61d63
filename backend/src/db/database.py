"""
Database connection and session management.

This module provides SQLAlchemy engine configuration for PostgreSQL
(with connection pooling) and SQLite (development and tests).
"""

from pathlib import Path
from typing import Generator

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from backend.src.config.settings import get_settings


# Look for .env in backend directory (parent of src)
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

DATABASE_URL = get_settings().database_url


def create_db_engine(database_url: str) -> Engine:
    """
    Create an engine suited to the database backend.

    SQLite doesn't support pool_size, max_overflow, or pool_recycle, so it
    gets a StaticPool; PostgreSQL gets a pre-pinged connection pool.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={'check_same_thread': False},
            poolclass=StaticPool,
            echo=False,
            future=True
        )
    return create_engine(
        database_url,
        pool_size=20,
        max_overflow=10,
        pool_pre_ping=True,
        pool_recycle=3600,     # Recycle connections after 1 hour
        echo=False,
        future=True
    )


engine = create_db_engine(DATABASE_URL)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    future=True
)


def get_db() -> Generator[Session, None, None]:
    """
    Yield a database session and close it afterwards.

    Usage:
        db = next(get_db())
        service = create_performance_service(db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize database tables.

    This should only be called during initial setup or testing.
    For production, use Alembic migrations instead.
    """
    from backend.src.models import Base
    Base.metadata.create_all(bind=engine)


def dispose_engine():
    """Dispose of the engine and close all connections."""
    engine.dispose()
