"""Tests for the persistence gateway: execution, error kinds, pool sizing."""

import pytest
from sqlalchemy import exc as sa_exc
from sqlalchemy import insert, text

from devicehub.common.database import Database, classify_store_error, pool_options
from devicehub.common.exceptions import StoreError, StoreErrorKind
from devicehub.tenants.models import TenantModel
from tests.conftest import make_settings


class _FakePgError(Exception):
    def __init__(self, sqlstate: str, message: str = "pg failure"):
        super().__init__(message)
        self.sqlstate = sqlstate


class TestClassifyStoreError:
    @pytest.mark.parametrize("sqlstate, kind", [
        ("23505", StoreErrorKind.UNIQUE_VIOLATION),
        ("23503", StoreErrorKind.FOREIGN_KEY_VIOLATION),
        ("23502", StoreErrorKind.NOT_NULL_VIOLATION),
        ("22P02", StoreErrorKind.INVALID_INPUT),
    ])
    def test_postgres_sqlstate(self, sqlstate, kind):
        exc = sa_exc.IntegrityError("INSERT", {}, _FakePgError(sqlstate))
        assert classify_store_error(exc) is kind

    def test_sqlite_unique_message(self):
        exc = sa_exc.IntegrityError(
            "INSERT", {}, Exception("UNIQUE constraint failed: tenants.name")
        )
        assert classify_store_error(exc) is StoreErrorKind.UNIQUE_VIOLATION

    def test_pool_timeout(self):
        assert classify_store_error(sa_exc.TimeoutError()) is StoreErrorKind.TIMEOUT

    def test_operational_error_is_connection(self):
        exc = sa_exc.OperationalError("SELECT 1", {}, Exception("connection refused"))
        assert classify_store_error(exc) is StoreErrorKind.CONNECTION

    def test_unknown(self):
        assert classify_store_error(sa_exc.SQLAlchemyError("?")) is StoreErrorKind.UNKNOWN


class TestPoolOptions:
    def test_sqlite_takes_no_pool_sizing(self):
        assert pool_options(make_settings()) == {}

    def test_postgres_pool_from_settings(self):
        settings = make_settings(
            db_url="", db_pool_max=20, db_pool_min=5,
            db_pool_acquire_ms=2500, db_pool_idle_ms=9000, db_pool_evict_ms=1000,
        )
        options = pool_options(settings)
        assert options["pool_size"] == 5
        assert options["max_overflow"] == 15
        assert options["pool_timeout"] == 2.5
        assert options["pool_recycle"] == 10.0
        assert options["pool_pre_ping"] is True
        assert "connect_args" not in options

    def test_zero_min_keeps_one_pooled_connection(self):
        options = pool_options(make_settings(db_url="", db_pool_min=0, db_pool_max=10))
        assert options["pool_size"] == 1
        assert options["max_overflow"] == 9

    def test_production_requires_tls(self):
        settings = make_settings(db_url="", environment="production", db_password="s3cret")
        assert pool_options(settings)["connect_args"] == {"ssl": "require"}


class TestDatabase:
    async def test_execute_returns_dict_rows(self, db):
        rows = await db.execute(
            insert(TenantModel).values(name="Rowful").returning(TenantModel.id, TenantModel.name)
        )
        assert rows[0]["name"] == "Rowful"
        assert isinstance(rows[0], dict)

    async def test_execute_without_rows(self, db):
        assert await db.execute(text("DELETE FROM tenants")) == []

    async def test_unique_violation_raises_store_error(self, db):
        await db.execute(insert(TenantModel).values(name="Dup"))
        with pytest.raises(StoreError) as exc_info:
            await db.execute(insert(TenantModel).values(name="Dup"))
        assert exc_info.value.kind is StoreErrorKind.UNIQUE_VIOLATION
        assert exc_info.value.status_code == 500

    async def test_bad_sql_is_store_error(self, db):
        with pytest.raises(StoreError):
            await db.execute(text("SELECT * FROM no_such_table"))

    async def test_ping(self, db):
        assert await db.ping() is not None

    async def test_execute_before_init(self):
        with pytest.raises(RuntimeError):
            await Database(make_settings()).execute(text("SELECT 1"))

    async def test_close_is_idempotent(self, db):
        await db.close()
        await db.close()
        assert db.engine is None
