"""
Service layer for business logic.

This module exports the service classes and their collaborators.
"""

from backend.src.services.exceptions import (
    ServiceError,
    StoreError,
    FolderServiceError,
)
from backend.src.services.result import ErrorKind, Result
from backend.src.services.record_store import RecordStore, SqlAlchemyRecordStore
from backend.src.services.performance_service import (
    PerformanceService,
    create_performance_service,
)

__all__ = [
    "ServiceError",
    "StoreError",
    "FolderServiceError",
    "ErrorKind",
    "Result",
    "RecordStore",
    "SqlAlchemyRecordStore",
    "PerformanceService",
    "create_performance_service",
]
