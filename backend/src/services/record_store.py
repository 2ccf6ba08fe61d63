"""
Record store for table-level CRUD access.

Defines the RecordStore interface consumed by the service layer and its
SQLAlchemy implementation. Rows cross this boundary as plain dictionaries
keyed by column name, so services never hold ORM instances.

Design:
- One commit per write; a failed statement rolls the session back
- Every SQLAlchemyError is re-raised as StoreError
- update() returns None and delete() returns False when no row matches
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.src.models import Base
from backend.src.services.exceptions import StoreError
from backend.src.utils.logging_config import get_logger


Row = Dict[str, Any]


class RecordStore(ABC):
    """
    Abstract record store.

    Methods:
        select(): Read rows matching equality filters, optionally ordered
        insert(): Insert one row and return it with store-assigned values
        update(): Partially update one row by primary key
        delete(): Delete one row by primary key
    """

    @abstractmethod
    def select(
        self,
        table: str,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> List[Row]:
        """
        Select rows from a table.

        Args:
            table: Table name
            filters: Column/value pairs combined with AND equality
            order_by: Column to order by
            descending: Order direction

        Raises:
            StoreError: If the read fails
        """
        pass

    @abstractmethod
    def insert(self, table: str, row: Mapping[str, Any]) -> Row:
        """
        Insert a row.

        Returns:
            The stored row including generated id and timestamps

        Raises:
            StoreError: If the write fails
        """
        pass

    @abstractmethod
    def update(self, table: str, record_id: str, values: Mapping[str, Any]) -> Optional[Row]:
        """
        Update the given columns of one row.

        Returns:
            The updated row, or None if no row has this id

        Raises:
            StoreError: If the write fails
        """
        pass

    @abstractmethod
    def delete(self, table: str, record_id: str) -> bool:
        """
        Delete one row.

        Returns:
            True if a row was deleted, False if no row has this id

        Raises:
            StoreError: If the write fails
        """
        pass


class SqlAlchemyRecordStore(RecordStore):
    """
    RecordStore backed by a SQLAlchemy session.

    Table names are resolved to the mapped models registered on Base.

    Usage:
        >>> store = SqlAlchemyRecordStore(db_session)
        >>> row = store.insert("performances", {"title": "Gala", "created_by": "u1"})
        >>> store.select("performances", order_by="created_at", descending=True)
    """

    def __init__(self, db: Session, logger: Optional[logging.Logger] = None):
        """
        Initialize record store.

        Args:
            db: SQLAlchemy database session
            logger: Logger for store failures (defaults to the "db" logger)
        """
        self.db = db
        self.logger = logger or get_logger("db")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _model(table: str):
        for mapper in Base.registry.mappers:
            if getattr(mapper.class_, "__tablename__", None) == table:
                return mapper.class_
        raise StoreError(f"Unknown table: {table}", table=table)

    @staticmethod
    def _column(model, name: str):
        if name not in model.__table__.columns:
            raise StoreError(
                f"Unknown column '{name}' for table {model.__tablename__}",
                table=model.__tablename__,
            )
        return getattr(model, name)

    @staticmethod
    def _primary_key(model):
        return inspect(model).primary_key[0]

    @staticmethod
    def _to_row(instance) -> Row:
        return {
            column.name: getattr(instance, column.key)
            for column in instance.__table__.columns
        }

    def _fail(self, table: str, action: str, error: SQLAlchemyError) -> StoreError:
        self.db.rollback()
        self.logger.error(f"Failed to {action} {table}: {error}")
        return StoreError(f"Failed to {action} {table}: {error}", table=table)

    # -------------------------------------------------------------------------
    # RecordStore
    # -------------------------------------------------------------------------

    def select(
        self,
        table: str,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> List[Row]:
        model = self._model(table)

        try:
            query = self.db.query(model)
            for name, value in (filters or {}).items():
                query = query.filter(self._column(model, name) == value)

            if order_by:
                column = self._column(model, order_by)
                query = query.order_by(column.desc() if descending else column.asc())

            return [self._to_row(instance) for instance in query.all()]
        except SQLAlchemyError as e:
            raise self._fail(table, "select from", e) from e

    def insert(self, table: str, row: Mapping[str, Any]) -> Row:
        model = self._model(table)
        for name in row:
            self._column(model, name)

        try:
            instance = model(**row)
            self.db.add(instance)
            self.db.commit()
            self.db.refresh(instance)
        except SQLAlchemyError as e:
            raise self._fail(table, "insert into", e) from e

        self.logger.debug(f"Inserted row {self._primary_key_value(instance)} into {table}")
        return self._to_row(instance)

    def update(self, table: str, record_id: str, values: Mapping[str, Any]) -> Optional[Row]:
        model = self._model(table)
        columns = [self._column(model, name) for name in values]

        try:
            instance = (
                self.db.query(model)
                .filter(self._primary_key(model) == record_id)
                .first()
            )
            if instance is None:
                return None
            if not columns:
                return self._to_row(instance)

            for name, value in values.items():
                setattr(instance, name, value)
            self.db.commit()
            self.db.refresh(instance)
        except SQLAlchemyError as e:
            raise self._fail(table, "update", e) from e

        return self._to_row(instance)

    def delete(self, table: str, record_id: str) -> bool:
        model = self._model(table)

        try:
            deleted = (
                self.db.query(model)
                .filter(self._primary_key(model) == record_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail(table, "delete from", e) from e

        return deleted > 0

    def _primary_key_value(self, instance) -> Any:
        return getattr(instance, self._primary_key(type(instance)).key)
