"""
Performance service for managing performance records.

Provides business logic for creating, reading, updating, and deleting
performances, and for keeping each performance's remote folder in step
with its record.

Design:
- Create: folder first (so its id can be stored), then the record
- Delete: look up the folder id, delete the folder, then delete the record
- Folder failures are logged and never change the record outcome
- No cross-system transaction: a folder may outlive its record (or never
  get one) when a step fails. Opt in to delete_folder_on_insert_failure to
  remove the folder when the insert fails.
- The *_result methods return a Result; the public methods reduce it to
  None / [] / False and never raise
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from backend.src.config.settings import AppSettings, get_settings
from backend.src.schemas.performance import (
    PerformanceCreate,
    PerformanceResponse,
    PerformanceUpdate,
)
from backend.src.services.exceptions import StoreError
from backend.src.services.record_store import RecordStore, SqlAlchemyRecordStore
from backend.src.services.remote import FolderService, get_folder_service
from backend.src.services.result import ErrorKind, Result
from backend.src.utils.logging_config import get_logger, log_fields


PERFORMANCES_TABLE = "performances"


class PerformanceService:
    """
    Service for managing performance records and their remote folders.

    Usage:
        >>> service = PerformanceService(SqlAlchemyRecordStore(db), folder_service)
        >>> performance = service.create_performance(
        ...     PerformanceCreate(title="Winter Concert", createdBy="u1")
        ... )
        >>> performance.drive_folder_id
        '1AbCdEf...'
        >>> service.delete_performance(performance.id)
        True
    """

    def __init__(
        self,
        record_store: RecordStore,
        folder_service: Optional[FolderService] = None,
        logger: Optional[logging.Logger] = None,
        delete_folder_on_insert_failure: bool = False,
    ):
        """
        Initialize performance service.

        Args:
            record_store: Store holding the performances table
            folder_service: Remote folder backend (None disables folders)
            logger: Diagnostic sink (defaults to the "services" logger)
            delete_folder_on_insert_failure: Delete the new folder when the insert fails
        """
        self.record_store = record_store
        self.folder_service = folder_service
        self.logger = logger or get_logger("services")
        self.delete_folder_on_insert_failure = delete_folder_on_insert_failure

    # -------------------------------------------------------------------------
    # Public API (sentinel results)
    # -------------------------------------------------------------------------

    def list_performances(self) -> List[PerformanceResponse]:
        """All performances, newest first; empty list on failure."""
        return self.list_performances_result().unwrap_or([])

    def get_performance(self, performance_id: str) -> Optional[PerformanceResponse]:
        """The matching performance, or None if missing or unreadable."""
        return self.get_performance_result(performance_id).unwrap_or(None)

    def create_performance(self, data: PerformanceCreate) -> Optional[PerformanceResponse]:
        """
        Create a performance and its remote folder.

        Args:
            data: Validated creation input

        Returns:
            The created performance, or None if the insert failed
        """
        return self.create_performance_result(data).unwrap_or(None)

    def update_performance(self, data: PerformanceUpdate) -> Optional[PerformanceResponse]:
        """
        Apply a partial update.

        Returns:
            The updated performance, or None if missing or the write failed
        """
        return self.update_performance_result(data).unwrap_or(None)

    def delete_performance(self, performance_id: str) -> bool:
        """
        Delete a performance and, best effort, its remote folder.

        Returns:
            True only if the record was deleted
        """
        return self.delete_performance_result(performance_id).is_ok

    # -------------------------------------------------------------------------
    # Result API
    # -------------------------------------------------------------------------

    def list_performances_result(self) -> Result[List[PerformanceResponse]]:
        try:
            rows = self.record_store.select(
                PERFORMANCES_TABLE, order_by="created_at", descending=True
            )
            return Result.ok([PerformanceResponse.from_row(row) for row in rows])
        except StoreError as e:
            self.logger.error(f"Error fetching performances: {e}")
            return Result.err(ErrorKind.STORE_ERROR, str(e))
        except Exception as e:
            self.logger.exception(f"Unexpected error fetching performances: {e}")
            return Result.err(ErrorKind.UNEXPECTED, str(e))

    def get_performance_result(self, performance_id: str) -> Result[PerformanceResponse]:
        self.logger.debug(f"Fetching performance with ID: {performance_id}")

        try:
            rows = self.record_store.select(PERFORMANCES_TABLE, filters={"id": performance_id})
            if not rows:
                self.logger.info(f"No performance found with ID: {performance_id}")
                return Result.err(ErrorKind.NOT_FOUND, f"Performance {performance_id} not found")
            return Result.ok(PerformanceResponse.from_row(rows[0]))
        except StoreError as e:
            self.logger.error(f"Error fetching performance {performance_id}: {e}")
            return Result.err(ErrorKind.STORE_ERROR, str(e))
        except Exception as e:
            self.logger.exception(f"Unexpected error fetching performance {performance_id}: {e}")
            return Result.err(ErrorKind.UNEXPECTED, str(e))

    def create_performance_result(self, data: PerformanceCreate) -> Result[PerformanceResponse]:
        self.logger.info(f"Creating performance '{data.title}' for user {data.created_by}")

        try:
            drive_folder_id = self._create_folder(data.title)

            try:
                row = self.record_store.insert(PERFORMANCES_TABLE, data.to_row(drive_folder_id))
            except StoreError as e:
                self.logger.error(f"Error creating performance '{data.title}': {e}")
                if drive_folder_id:
                    self._handle_orphaned_folder(drive_folder_id, data.title)
                return Result.err(ErrorKind.STORE_ERROR, str(e))

            performance = PerformanceResponse.from_row(row)
            self.logger.info(
                f"Created performance: {performance.title} ({performance.id})",
                extra=log_fields(
                    performance_id=performance.id, drive_folder_id=performance.drive_folder_id
                ),
            )
            return Result.ok(performance)

        except Exception as e:
            self.logger.exception(f"Unexpected error during performance creation: {e}")
            return Result.err(ErrorKind.UNEXPECTED, str(e))

    def update_performance_result(self, data: PerformanceUpdate) -> Result[PerformanceResponse]:
        values = data.to_row()

        try:
            row = self.record_store.update(PERFORMANCES_TABLE, data.id, values)
        except StoreError as e:
            self.logger.error(f"Error updating performance {data.id}: {e}")
            return Result.err(ErrorKind.STORE_ERROR, str(e))
        except Exception as e:
            self.logger.exception(f"Unexpected error updating performance {data.id}: {e}")
            return Result.err(ErrorKind.UNEXPECTED, str(e))

        if row is None:
            self.logger.info(f"No performance found to update with ID: {data.id}")
            return Result.err(ErrorKind.NOT_FOUND, f"Performance {data.id} not found")

        self.logger.info(
            f"Updated performance {data.id}: {', '.join(sorted(values)) or 'no changes'}",
            extra=log_fields(performance_id=data.id, fields=sorted(values)),
        )
        return Result.ok(PerformanceResponse.from_row(row))

    def delete_performance_result(self, performance_id: str) -> Result[bool]:
        try:
            # Folder id is unknown when the lookup fails; the record delete
            # is still attempted.
            lookup = self.get_performance_result(performance_id)
            if lookup.is_ok and lookup.value.drive_folder_id:
                self._delete_performance_folder(performance_id, lookup.value.drive_folder_id)
            elif lookup.error == ErrorKind.NOT_FOUND:
                self.logger.info(f"Performance {performance_id} not found; no folder to clean up")
            elif not lookup.is_ok:
                self.logger.warning(
                    f"Could not read performance {performance_id} before deletion "
                    f"({lookup.error.value}); skipping folder cleanup"
                )

            try:
                deleted = self.record_store.delete(PERFORMANCES_TABLE, performance_id)
            except StoreError as e:
                self.logger.error(f"Error deleting performance {performance_id}: {e}")
                return Result.err(ErrorKind.STORE_ERROR, str(e))

            if not deleted:
                self.logger.info(f"No performance deleted with ID: {performance_id}")
                return Result.err(ErrorKind.NOT_FOUND, f"Performance {performance_id} not found")

            self.logger.info(
                f"Deleted performance {performance_id}",
                extra=log_fields(performance_id=performance_id),
            )
            return Result.ok(True)

        except Exception as e:
            self.logger.exception(f"Unexpected error during performance deletion: {e}")
            return Result.err(ErrorKind.UNEXPECTED, str(e))

    # -------------------------------------------------------------------------
    # Folder side effects (never raise)
    # -------------------------------------------------------------------------

    def _create_folder(self, title: str) -> Optional[str]:
        """Create the performance folder; None when disabled or on any failure."""
        if self.folder_service is None:
            return None

        try:
            folder_id = self.folder_service.create_folder(title)
        except Exception as e:
            self.logger.error(f"Error creating folder for performance '{title}': {e}")
            return None

        if not folder_id:
            self.logger.warning(
                f"Could not create folder for performance '{title}'. "
                "Continuing without folder ID."
            )
            return None

        self.logger.info(f"Created folder {folder_id} for performance '{title}'")
        return folder_id

    def _delete_folder(self, folder_id: str) -> bool:
        try:
            return bool(self.folder_service.delete_folder(folder_id))
        except Exception as e:
            self.logger.error(f"Error deleting folder {folder_id}: {e}")
            return False

    def _delete_performance_folder(self, performance_id: str, folder_id: str) -> None:
        if self.folder_service is None:
            self.logger.warning(
                f"Folder {folder_id} of performance {performance_id} left in place: "
                "no folder service configured"
            )
            return

        self.logger.info(f"Deleting folder {folder_id} of performance {performance_id}")
        if self._delete_folder(folder_id):
            self.logger.info(f"Deleted folder {folder_id} of performance {performance_id}")
        else:
            self.logger.warning(
                f"Failed to delete folder {folder_id} of performance {performance_id}"
            )

    def _handle_orphaned_folder(self, folder_id: str, title: str) -> None:
        """Folder created for a performance whose insert failed."""
        if not self.delete_folder_on_insert_failure:
            self.logger.warning(f"Folder {folder_id} created for '{title}' has no performance record")
            return

        if self._delete_folder(folder_id):
            self.logger.info(f"Deleted orphaned folder {folder_id} for '{title}'")
        else:
            self.logger.warning(f"Failed to delete orphaned folder {folder_id} for '{title}'")


def create_performance_service(
    db: Session,
    settings: Optional[AppSettings] = None,
    folder_service: Optional[FolderService] = None,
) -> PerformanceService:
    """
    Build a PerformanceService for a database session.

    The record store is per session; the folder service is the shared one
    from get_folder_service() unless one is passed in.

    Args:
        db: SQLAlchemy database session
        settings: Application settings (defaults to get_settings())
        folder_service: Folder backend to use instead of the shared one

    Example:
        >>> with SessionLocal() as db:
        ...     service = create_performance_service(db)
        ...     service.list_performances()
    """
    settings = settings or get_settings()
    if folder_service is None:
        folder_service = get_folder_service(settings)
    return PerformanceService(
        SqlAlchemyRecordStore(db),
        folder_service=folder_service,
        delete_folder_on_insert_failure=settings.delete_folder_on_insert_failure,
    )
