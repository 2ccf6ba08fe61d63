"""
SQLAlchemy models for the performance records backend.

This module provides the declarative base class and imports all models
to ensure they are registered with SQLAlchemy's metadata.
"""

from sqlalchemy.orm import declarative_base

# All models inherit from this Base class
Base = declarative_base()


# Imported here so they are registered with Base.metadata
# (required for Alembic autogenerate and for RecordStore table lookup)
from backend.src.models.performance import Performance

__all__ = [
    "Base",
    "Performance",
]
