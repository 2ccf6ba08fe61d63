"""
Configuration module for the performance records backend.

Provides centralized configuration for:
- Database connection
- Remote folder services (Google Drive, local folders)
- Orphaned folder policy
"""

from backend.src.config.settings import AppSettings, get_settings

__all__ = [
    "AppSettings",
    "get_settings",
]
