"""
Google Drive folder service implementation.

Creates and deletes performance folders through the Drive v3 REST API.
Authenticates with a service account (google-auth) and issues requests
with httpx. Calls are single-shot: no retry, no backoff.
"""

import json
from typing import Any, Dict, Optional, Tuple

import httpx
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request as GoogleAuthRequest
from google.oauth2 import service_account

from backend.src.services.exceptions import FolderServiceError
from backend.src.services.remote.base import FolderService
from backend.src.utils.logging_config import get_logger


logger = get_logger("remote.drive")


DRIVE_API_BASE = "https://www.googleapis.com/drive/v3"
DRIVE_SCOPES = ["https://www.googleapis.com/auth/drive"]
FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
DEFAULT_TIMEOUT = 30.0  # seconds


class GoogleDriveFolderService(FolderService):
    """
    Google Drive folder service.

    Credentials Format:
        {
            "service_account_json": "{...}"  # JSON string of service account key
        }

    Folders are created under ``parent_folder_id`` when given (the folder must
    be shared with the service account), otherwise in the service account's
    own Drive. Shared drives are supported.

    Usage:
        >>> service = GoogleDriveFolderService({"service_account_json": "{...}"})
        >>> folder_id = service.create_folder("Winter Concert")
        >>> success, msg = service.test_connection()
    """

    def __init__(
        self,
        credentials: Dict[str, Any],
        parent_folder_id: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize Drive folder service.

        Args:
            credentials: Dictionary with service_account_json key
            parent_folder_id: Drive folder to create performance folders in
            timeout: Request timeout in seconds
            http_client: Preconfigured client (base_url must be the Drive API root)

        Raises:
            ValueError: If required credential keys are missing or invalid
        """
        super().__init__(credentials)

        if "service_account_json" not in credentials:
            raise ValueError("Missing required credential: service_account_json")

        try:
            service_account_info = json.loads(credentials["service_account_json"])
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid service_account_json format: {str(e)}")

        try:
            self._google_credentials = service_account.Credentials.from_service_account_info(
                service_account_info, scopes=DRIVE_SCOPES
            )
        except Exception as e:
            raise ValueError(f"Failed to load service account credentials: {str(e)}")

        self.parent_folder_id = parent_folder_id
        self._client = http_client or httpx.Client(base_url=DRIVE_API_BASE, timeout=timeout)

    def _auth_headers(self) -> Dict[str, str]:
        """Bearer header, refreshing the access token when it is missing or expired."""
        if not self._google_credentials.valid:
            try:
                self._google_credentials.refresh(GoogleAuthRequest())
            except GoogleAuthError as e:
                logger.error(f"Drive credential refresh failed: {e}")
                raise FolderServiceError(f"Google authentication failed: {str(e)}")
        return {"Authorization": f"Bearer {self._google_credentials.token}"}

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        headers = self._auth_headers()
        try:
            return self._client.request(method, url, headers=headers, **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"Drive {method} {url} timed out: {e}")
            raise FolderServiceError(f"Google Drive request timed out: {e}")
        except httpx.HTTPError as e:
            logger.error(f"Drive {method} {url} failed: {e}")
            raise FolderServiceError(f"Failed to reach Google Drive: {e}")

    def create_folder(self, name: str) -> Optional[str]:
        """
        Create a Drive folder.

        Args:
            name: Folder name

        Returns:
            New folder ID, or None if Drive rejected the request

        Raises:
            FolderServiceError: On authentication or transport failure
        """
        metadata: Dict[str, Any] = {"name": name, "mimeType": FOLDER_MIME_TYPE}
        if self.parent_folder_id:
            metadata["parents"] = [self.parent_folder_id]

        response = self._request(
            "POST",
            "/files",
            params={"fields": "id", "supportsAllDrives": "true"},
            json=metadata,
        )

        if response.status_code != 200:
            logger.warning(
                f"Drive folder creation for '{name}' returned {response.status_code}: {response.text[:200]}"
            )
            return None

        folder_id = response.json().get("id")
        if not folder_id:
            logger.warning(f"Drive folder creation for '{name}' returned no folder id")
            return None

        logger.info(f"Created Drive folder '{name}' id={folder_id}")
        return folder_id

    def delete_folder(self, folder_id: str) -> bool:
        """
        Permanently delete a Drive folder (and its contents).

        Returns:
            True on success, False if Drive rejected the request or the folder is gone

        Raises:
            FolderServiceError: On authentication or transport failure
        """
        response = self._request(
            "DELETE",
            f"/files/{folder_id}",
            params={"supportsAllDrives": "true"},
        )

        if response.status_code in (200, 204):
            logger.info(f"Deleted Drive folder id={folder_id}")
            return True

        if response.status_code == 404:
            logger.warning(f"Drive folder {folder_id} not found")
        else:
            logger.warning(
                f"Drive folder deletion for {folder_id} returned {response.status_code}: {response.text[:200]}"
            )
        return False

    def test_connection(self) -> Tuple[bool, str]:
        """
        Test Drive access by reading the service account's "about" resource.

        Returns:
            Tuple of (success: bool, message: str)
        """
        try:
            response = self._request("GET", "/about", params={"fields": "user"})
        except FolderServiceError as e:
            return False, str(e)

        if response.status_code == 200:
            email = response.json().get("user", {}).get("emailAddress", "unknown")
            return True, f"Connected to Google Drive as {email}"
        if response.status_code in (401, 403):
            return False, f"Google Drive access denied ({response.status_code})"
        return False, f"Google Drive returned {response.status_code}"

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()
