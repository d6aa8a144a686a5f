"""
Color Picker API - Record Service Base
========================================

What:  Generic data-access layer shared by ProjectService and PaletteService.
How:   Each subclass names its ORM model, its natural-key column and the
       columns a client may write. Every method is one SQL statement against
       the session the caller passes in; committing is left to the
       per-request session dependency (database.get_db_session).

Operations:
    find_all       SELECT * ORDER BY id
    find_by_key    SELECT * WHERE <key> = :key
    insert         INSERT, flushed so the generated id is available
    update_by_key  UPDATE of the writable columns present in `values`
    delete_by_key  DELETE WHERE <key> = :key

Error Handling:
    SQLAlchemy errors (connection loss, unique/foreign key violations) are
    logged and re-raised as DatabaseError. "No row" is not an error here:
    callers receive None / 0 and decide how to respond.
"""

import logging
from typing import Any, Dict, Generic, List, Mapping, Optional, Tuple, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from colorpicker.database import Base
from colorpicker.exceptions import DatabaseError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class RecordService(Generic[ModelT]):
    """
    CRUD by natural key for a single table.

    Subclasses set:
        model:           ORM class
        key_field:       natural key attribute ("name", "palette_name")
        writable_fields: columns accepted from request bodies, in order
    """

    model: Type[ModelT]
    key_field: str
    writable_fields: Tuple[str, ...] = ()

    @property
    def resource(self) -> str:
        return self.model.__tablename__

    def _key_column(self):
        return getattr(self.model, self.key_field)

    def writable_values(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Keep only the columns a client may set.

        Unknown keys are dropped, and so are null values: a null counts as
        "not supplied", the same rule request validation applies.
        """
        return {
            field: values[field]
            for field in self.writable_fields
            if values.get(field) is not None
        }

    def _wrap(self, operation: str, exc: SQLAlchemyError, key: Optional[str] = None) -> DatabaseError:
        logger.error(
            "Database error during %s on %s (key=%r): %s",
            operation, self.resource, key, str(exc),
        )
        return DatabaseError(
            context={
                "operation": operation,
                "resource": self.resource,
                "key": key,
                "original_error": type(exc).__name__,
            },
        )

    async def find_all(self, db: AsyncSession) -> List[ModelT]:
        """All records in insertion order."""
        try:
            result = await db.execute(select(self.model).order_by(self.model.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise self._wrap("find_all", e)

    async def find_by_key(self, db: AsyncSession, key: str) -> Optional[ModelT]:
        """Exact match on the natural key, or None."""
        try:
            result = await db.execute(
                select(self.model).where(self._key_column() == key)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._wrap("find_by_key", e, key)

    async def insert(self, db: AsyncSession, values: Mapping[str, Any]) -> ModelT:
        """
        Insert a new record built from the writable columns in `values`.

        The flush sends the INSERT immediately so that the generated id is
        assigned and constraint violations surface here (as DatabaseError)
        rather than at commit time.
        """
        record = self.model(**self.writable_values(values))
        try:
            db.add(record)
            await db.flush()
        except SQLAlchemyError as e:
            raise self._wrap("insert", e, values.get(self.key_field))
        logger.info("Inserted %s %r (id=%s)", self.resource, getattr(record, self.key_field), record.id)
        return record

    async def update_by_key(
        self, db: AsyncSession, key: str, values: Mapping[str, Any]
    ) -> Optional[ModelT]:
        """
        Apply the writable columns in `values` to the record named `key`.

        Returns the updated record, or None when no record has that key.
        """
        record = await self.find_by_key(db, key)
        if record is None:
            return None

        changes = self.writable_values(values)
        for field, value in changes.items():
            setattr(record, field, value)

        try:
            await db.flush()
        except SQLAlchemyError as e:
            raise self._wrap("update_by_key", e, key)
        logger.info("Updated %s %r: %s", self.resource, key, sorted(changes))
        return record

    async def delete_by_key(self, db: AsyncSession, key: str) -> int:
        """Delete the record named `key`; returns the number of rows removed (0 or 1)."""
        try:
            result = await db.execute(
                delete(self.model).where(self._key_column() == key)
            )
        except SQLAlchemyError as e:
            raise self._wrap("delete_by_key", e, key)
        logger.info("Deleted %d %s row(s) with key %r", result.rowcount, self.resource, key)
        return result.rowcount
