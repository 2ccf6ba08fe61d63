"""
Remote folder services for performance records.

This package provides a unified interface for the folder that accompanies
each performance through the FolderService abstract base class.

Services:
- GoogleDriveFolderService: Google Drive (google-auth + httpx)
- LocalFolderService: Local filesystem (no dependencies)

Usage:
    >>> from backend.src.services.remote import get_folder_service
    >>> folder_service = get_folder_service(get_settings())
    >>> folder_id = folder_service.create_folder("Winter Concert")

get_folder_service() shares one service per folder configuration, so the
Drive HTTP client and access token outlive a single request. Call
close_folder_services() on application shutdown.
"""

import threading
from typing import Dict, Optional, Tuple

from backend.src.config.settings import AppSettings
from backend.src.services.remote.base import FolderService
from backend.src.services.remote.drive_adapter import GoogleDriveFolderService
from backend.src.services.remote.local_adapter import LocalFolderService


_folder_services: Dict[Tuple, Optional[FolderService]] = {}
_folder_services_lock = threading.Lock()


def create_folder_service(settings: AppSettings) -> Optional[FolderService]:
    """
    Build the folder service selected by settings.

    Google Drive wins when credentials are configured, then a local folder
    root; otherwise folders are disabled and None is returned. The caller
    owns the returned service and must close() it.

    Raises:
        ValueError: If Drive credentials are configured but unusable
    """
    if settings.drive_configured:
        return GoogleDriveFolderService(
            settings.drive_credentials,
            parent_folder_id=settings.parent_folder_id,
            timeout=settings.drive_timeout,
        )
    if settings.local_folder_root:
        return LocalFolderService(settings.local_folder_root)
    return None


def _folder_settings_key(settings: AppSettings) -> Tuple:
    return (
        settings.drive_service_account_json,
        settings.drive_parent_folder_id,
        settings.drive_timeout,
        settings.local_folder_root,
    )


def get_folder_service(settings: AppSettings) -> Optional[FolderService]:
    """
    Get the shared folder service for settings.

    Built with create_folder_service() on first use and reused by every later
    call with the same folder configuration.

    Raises:
        ValueError: If Drive credentials are configured but unusable
    """
    key = _folder_settings_key(settings)
    with _folder_services_lock:
        if key not in _folder_services:
            _folder_services[key] = create_folder_service(settings)
        return _folder_services[key]


def close_folder_services() -> None:
    """Close and forget every shared folder service."""
    with _folder_services_lock:
        services = list(_folder_services.values())
        _folder_services.clear()

    for service in services:
        if service is not None:
            service.close()


__all__ = [
    "FolderService",
    "GoogleDriveFolderService",
    "LocalFolderService",
    "create_folder_service",
    "get_folder_service",
    "close_folder_services",
]
