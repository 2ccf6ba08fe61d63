"""
Custom exceptions for service layer.

Provides specific exception types for record store and remote folder
failures. None of these cross the public boundary of PerformanceService;
they are converted to sentinel results there.
"""

from typing import Optional


class ServiceError(Exception):
    """Base exception for service layer errors."""
    pass


class StoreError(ServiceError):
    """Raised when a record store read or write fails."""

    def __init__(self, message: str, table: Optional[str] = None):
        self.message = message
        self.table = table
        super().__init__(message)


class FolderServiceError(ServiceError):
    """Raised when the remote folder service cannot be reached or authenticated."""

    def __init__(self, message: str, folder_id: Optional[str] = None):
        self.message = message
        self.folder_id = folder_id
        super().__init__(message)
