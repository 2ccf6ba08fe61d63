"""
Abstract base class for remote folder services.

Defines the interface for creating and deleting the folder that accompanies
a performance record (Google Drive, local filesystem).
All concrete services must implement create_folder(), delete_folder() and
test_connection().

Design Pattern: Strategy pattern for pluggable folder backends
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple


class FolderService(ABC):
    """
    Abstract base class for remote folder services.

    Folders are referenced by an opaque string id chosen by the backend.
    Implementations may raise FolderServiceError (or any other exception);
    callers treat every failure as recoverable.

    Methods:
        create_folder(): Create a named folder, returning its id
        delete_folder(): Delete a folder by id
        test_connection(): Validate credentials and connectivity

    Usage:
        >>> service = GoogleDriveFolderService(credentials, parent_folder_id="0AbC...")
        >>> folder_id = service.create_folder("Winter Concert")
        >>> service.delete_folder(folder_id)
        True
    """

    def __init__(self, credentials: Dict[str, Any]):
        """
        Initialize folder service with credentials.

        Args:
            credentials: Backend credentials dictionary
                Drive: {"service_account_json": "..."}
                Local: {} (no credentials needed)
        """
        self.credentials = credentials

    @abstractmethod
    def create_folder(self, name: str) -> Optional[str]:
        """
        Create a folder.

        Args:
            name: Folder display name (the performance title)

        Returns:
            Identifier of the new folder, or None if the backend did not create one

        Raises:
            FolderServiceError: If the backend cannot be reached or authenticated
        """
        pass

    @abstractmethod
    def delete_folder(self, folder_id: str) -> bool:
        """
        Delete a folder and its contents.

        Args:
            folder_id: Identifier returned by create_folder()

        Returns:
            True if the folder was deleted, False otherwise

        Raises:
            FolderServiceError: If the backend cannot be reached or authenticated
        """
        pass

    @abstractmethod
    def test_connection(self) -> Tuple[bool, str]:
        """
        Test connectivity and credentials.

        Returns:
            Tuple of (success: bool, message: str)
        """
        pass

    def close(self) -> None:
        """Release backend resources (HTTP clients). No-op by default."""

    def __enter__(self) -> "FolderService":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
