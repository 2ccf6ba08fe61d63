"""
Local filesystem folder service.

Implements FolderService on a local directory so performance folders work
without Google Drive (development, offline installs). Folder ids are the
directory names created under the configured root.
"""

import re
import shutil
import uuid
from pathlib import Path
from typing import Optional, Tuple, Union

from backend.src.services.remote.base import FolderService
from backend.src.utils.logging_config import get_logger


logger = get_logger("remote.local")

_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def _slugify(name: str) -> str:
    slug = _SLUG_PATTERN.sub("-", name.lower()).strip("-")
    return slug[:60] or "performance"


class LocalFolderService(FolderService):
    """
    Local filesystem folder service.

    Example:
        >>> service = LocalFolderService("/var/lib/performances")
        >>> service.create_folder("Winter Concert")
        'winter-concert-3f2a9c1d'
    """

    def __init__(self, root: Union[str, Path]):
        """
        Initialize LocalFolderService.

        Args:
            root: Directory in which folders are created (created if missing)
        """
        super().__init__({})
        self.root = Path(root).expanduser().resolve()

    def _resolve(self, folder_id: str) -> Optional[Path]:
        """Path for ``folder_id``, or None if it would escape the root."""
        if not folder_id:
            return None
        path = (self.root / folder_id).resolve()
        if path.parent != self.root:
            return None
        return path

    def create_folder(self, name: str) -> Optional[str]:
        """
        Create a directory named after ``name``.

        Returns:
            Directory name used as the folder id

        Raises:
            OSError: If the directory cannot be created
        """
        self.root.mkdir(parents=True, exist_ok=True)
        folder_id = f"{_slugify(name)}-{uuid.uuid4().hex[:8]}"
        (self.root / folder_id).mkdir()
        logger.info(f"Created local folder '{name}' id={folder_id}")
        return folder_id

    def delete_folder(self, folder_id: str) -> bool:
        """
        Remove the directory and its contents.

        Returns:
            True if removed, False if it does not exist or lies outside the root
        """
        path = self._resolve(folder_id)
        if path is None:
            logger.warning(f"Rejected local folder id outside root: {folder_id!r}")
            return False
        if not path.is_dir():
            logger.warning(f"Local folder {folder_id} not found")
            return False

        shutil.rmtree(path)
        logger.info(f"Deleted local folder id={folder_id}")
        return True

    def test_connection(self) -> Tuple[bool, str]:
        """Check that the root exists (or can be created) and is a directory."""
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return False, f"Cannot create folder root {self.root}: {e}"
        if not self.root.is_dir():
            return False, f"Folder root is not a directory: {self.root}"
        return True, f"Folder root accessible: {self.root}"
