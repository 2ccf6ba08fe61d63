"""
Result type for service operations.

Service operations report outcomes as a Result carrying either a value or
an ErrorKind with a message. The public PerformanceService API converts
Results into sentinel values (None, [], False) at the boundary.
"""

import enum
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar


T = TypeVar("T")


class ErrorKind(str, enum.Enum):
    """Failure categories reported by service operations."""

    NOT_FOUND = "not_found"
    STORE_ERROR = "store_error"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a service operation.

    Exactly one of ``value`` (on success) or ``error`` (on failure) is meaningful.

    Usage:
        >>> result = Result.ok(performance)
        >>> result.is_ok
        True
        >>> Result.err(ErrorKind.NOT_FOUND, "Performance pfm_x not found").unwrap_or(None)
    """

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def err(cls, error: ErrorKind, message: str) -> "Result[T]":
        return cls(error=error, message=message)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: T) -> T:
        """Return the value on success, ``default`` otherwise."""
        if self.is_ok:
            return self.value
        return default
