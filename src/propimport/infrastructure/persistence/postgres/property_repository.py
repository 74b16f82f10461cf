"""PostgreSQL property repository implementation."""

from typing import Any

import psycopg
from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from propimport.domain.entities import PropertyRecord
from propimport.domain.exceptions import PersistenceError
from propimport.domain.value_objects import EXTRACTION_FIELDS

INSERT_COLUMNS = ("id", "user_id", *EXTRACTION_FIELDS, "status", "source_pdf_name", "created_at")

INSERT_SQL = (
    f"INSERT INTO property ({', '.join(INSERT_COLUMNS)}) "
    f"VALUES ({', '.join(['%s'] * len(INSERT_COLUMNS))})"
)


def _jsonb(value: Any) -> Jsonb | None:
    """Wrap an extracted value for a JSONB column; absent stays SQL NULL."""
    return Jsonb(value) if value is not None else None


def insert_params(record: PropertyRecord) -> tuple[Any, ...]:
    """Parameters for INSERT_SQL, in INSERT_COLUMNS order."""
    return (
        record.id,
        record.user_id,
        *(_jsonb(getattr(record, name)) for name in EXTRACTION_FIELDS),
        record.status.value,
        record.source_pdf_name,
        record.created_at,
    )


class PostgresPropertyRepository:
    """Property repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, record: PropertyRecord) -> PropertyRecord:
        """Insert property. Raises PersistenceError when the store rejects it."""
        try:
            await self._conn.execute(INSERT_SQL, insert_params(record))
        except psycopg.Error as e:
            raise PersistenceError(f"Database insert error: {e}") from e
        return record
