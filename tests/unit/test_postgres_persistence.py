"""Unit tests for the PostgreSQL repository and unit of work."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import psycopg
import pytest
from psycopg.types.json import Jsonb

from propimport.domain.entities import PropertyRecord
from propimport.domain.exceptions import PersistenceError
from propimport.domain.value_objects import EXTRACTION_FIELDS
from propimport.infrastructure.persistence.postgres.property_repository import (
    INSERT_COLUMNS,
    INSERT_SQL,
    PostgresPropertyRepository,
    insert_params,
)
from propimport.infrastructure.persistence.postgres.unit_of_work import (
    PostgresUnitOfWork,
    create_uow_factory,
)


def _record(**fields) -> PropertyRecord:
    return PropertyRecord(
        id=uuid4(),
        user_id="user-1",
        source_pdf_name="listing.pdf",
        created_at=datetime(2026, 1, 1, tzinfo=UTC),
        **fields,
    )


def _pool(conn: AsyncMock) -> MagicMock:
    cm = MagicMock()
    cm.__aenter__ = AsyncMock(return_value=conn)
    cm.__aexit__ = AsyncMock(return_value=False)
    pool = MagicMock()
    pool.connection.return_value = cm
    return pool


class TestInsertParams:
    def test_columns_and_placeholders_line_up(self) -> None:
        assert INSERT_COLUMNS[:2] == ("id", "user_id")
        assert INSERT_COLUMNS[2:11] == EXTRACTION_FIELDS
        assert INSERT_COLUMNS[11:] == ("status", "source_pdf_name", "created_at")
        assert INSERT_SQL.count("%s") == len(INSERT_COLUMNS)
        assert "address, price, bedrooms" in INSERT_SQL

    def test_values_follow_column_order(self) -> None:
        record = _record(address="1 Main St", price=850000, features=["Pool", "Garage"])

        params = insert_params(record)

        assert len(params) == len(INSERT_COLUMNS)
        by_column = dict(zip(INSERT_COLUMNS, params))
        assert by_column["id"] == record.id
        assert by_column["user_id"] == "user-1"
        assert by_column["status"] == "imported"
        assert by_column["source_pdf_name"] == "listing.pdf"
        assert by_column["created_at"] == record.created_at
        assert isinstance(by_column["features"], Jsonb)
        assert by_column["features"].obj == ["Pool", "Garage"]
        assert by_column["price"].obj == 850000
        assert by_column["address"].obj == "1 Main St"

    def test_values_are_not_coerced(self) -> None:
        params = dict(zip(INSERT_COLUMNS, insert_params(_record(price="POA", bedrooms="4+"))))
        assert params["price"].obj == "POA"
        assert params["bedrooms"].obj == "4+"

    def test_missing_fields_are_sql_null(self) -> None:
        params = dict(zip(INSERT_COLUMNS, insert_params(_record())))
        for name in EXTRACTION_FIELDS:
            assert params[name] is None


class TestPostgresPropertyRepository:
    @pytest.mark.asyncio
    async def test_create_executes_insert(self) -> None:
        conn = AsyncMock()
        record = _record(address="1 Main St")

        result = await PostgresPropertyRepository(conn).create(record)

        assert result is record
        conn.execute.assert_awaited_once()
        sql, params = conn.execute.await_args.args
        assert sql == INSERT_SQL
        assert params[0] == record.id

    @pytest.mark.asyncio
    async def test_create_maps_database_error(self) -> None:
        conn = AsyncMock()
        conn.execute.side_effect = psycopg.DataError("invalid input syntax")

        with pytest.raises(PersistenceError, match="Database insert error: invalid input syntax"):
            await PostgresPropertyRepository(conn).create(_record())


class TestPostgresUnitOfWork:
    @pytest.mark.asyncio
    async def test_factory_commits_on_success(self) -> None:
        conn = AsyncMock()
        factory = create_uow_factory(_pool(conn))

        async with factory() as uow:
            assert isinstance(uow, PostgresUnitOfWork)
            await uow.properties.create(_record())

        conn.commit.assert_awaited_once()
        conn.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_factory_rolls_back_on_insert_error(self) -> None:
        conn = AsyncMock()
        conn.execute.side_effect = psycopg.IntegrityError("duplicate key")
        factory = create_uow_factory(_pool(conn))

        with pytest.raises(PersistenceError):
            async with factory() as uow:
                await uow.properties.create(_record())

        conn.commit.assert_not_awaited()
        conn.rollback.assert_awaited()

    @pytest.mark.asyncio
    async def test_commit_failure_is_persistence_error(self) -> None:
        conn = AsyncMock()
        conn.commit.side_effect = psycopg.OperationalError("connection lost")
        pool = _pool(conn)
        factory = create_uow_factory(pool)

        with pytest.raises(PersistenceError, match="connection lost"):
            async with factory() as uow:
                await uow.properties.create(_record())

        conn.rollback.assert_awaited()
        pool.connection.return_value.__aexit__.assert_awaited_once()
