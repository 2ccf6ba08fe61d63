"""
Pydantic schemas for performance record validation and field translation.

This module exports all schema classes used by the service layer.
"""

from backend.src.schemas.performance import (
    PerformanceCreate,
    PerformanceUpdate,
    PerformanceResponse,
)

__all__ = [
    "PerformanceCreate",
    "PerformanceUpdate",
    "PerformanceResponse",
]
