"""Async persistence gateway for DeviceHub.

A ``Database`` owns one SQLAlchemy engine and its connection pool. It is
built once by the application factory and handed to the entity services
through FastAPI dependencies. Every call to :meth:`Database.execute` checks
out a connection, runs exactly one statement in its own transaction and
returns the connection to the pool.
"""

from typing import Any

from sqlalchemy import event, text
from sqlalchemy import exc as sa_exc
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.sql import Executable

from devicehub.common.config import DeviceHubSettings, get_settings
from devicehub.common.exceptions import StoreError, StoreErrorKind
from devicehub.common.logging import get_logger
from devicehub.common.models import Base

# Import all model modules so Base.metadata is complete for create_all().
import devicehub.tenants.models  # noqa: F401
import devicehub.users.models  # noqa: F401
import devicehub.devices.models  # noqa: F401
import devicehub.apps.models  # noqa: F401

logger = get_logger("database")

_SQLSTATE_KINDS = {
    "23505": StoreErrorKind.UNIQUE_VIOLATION,
    "23503": StoreErrorKind.FOREIGN_KEY_VIOLATION,
    "23502": StoreErrorKind.NOT_NULL_VIOLATION,
    "23514": StoreErrorKind.CHECK_VIOLATION,
    "22P02": StoreErrorKind.INVALID_INPUT,
    "22001": StoreErrorKind.INVALID_INPUT,
}

# SQLite reports constraint failures only through the message text.
_MESSAGE_KINDS = (
    ("UNIQUE constraint failed", StoreErrorKind.UNIQUE_VIOLATION),
    ("FOREIGN KEY constraint failed", StoreErrorKind.FOREIGN_KEY_VIOLATION),
    ("NOT NULL constraint failed", StoreErrorKind.NOT_NULL_VIOLATION),
    ("CHECK constraint failed", StoreErrorKind.CHECK_VIOLATION),
)


def classify_store_error(exc: BaseException) -> StoreErrorKind:
    """Map a driver/SQLAlchemy exception onto a StoreErrorKind."""
    if isinstance(exc, (sa_exc.TimeoutError, TimeoutError)):
        return StoreErrorKind.TIMEOUT

    orig = getattr(exc, "orig", None)
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate in _SQLSTATE_KINDS:
        return _SQLSTATE_KINDS[sqlstate]

    message = str(orig if orig is not None else exc)
    for needle, kind in _MESSAGE_KINDS:
        if needle in message:
            return kind

    if isinstance(exc, sa_exc.IntegrityError):
        return StoreErrorKind.UNKNOWN
    if isinstance(exc, (sa_exc.OperationalError, sa_exc.InterfaceError, OSError)):
        return StoreErrorKind.CONNECTION
    return StoreErrorKind.UNKNOWN


def pool_options(settings: DeviceHubSettings) -> dict[str, Any]:
    """Translate pool settings into create_async_engine() keyword arguments.

    SQLite databases keep the dialect's default pool and take no sizing.
    """
    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite":
        return {}

    pool_size = max(settings.db_pool_min, 1)
    options: dict[str, Any] = {
        "pool_size": pool_size,
        "max_overflow": max(settings.db_pool_max - pool_size, 0),
        "pool_timeout": settings.db_pool_acquire_ms / 1000,
        "pool_recycle": (settings.db_pool_idle_ms + settings.db_pool_evict_ms) / 1000,
        "pool_pre_ping": True,
    }
    if settings.is_production and url.get_driver_name() == "asyncpg":
        options["connect_args"] = {"ssl": "require"}
    return options


def _on_connect(dbapi_connection, connection_record) -> None:
    logger.info("Opened database connection")


class Database:
    """Connection pool plus single-statement execution."""

    def __init__(self, settings: DeviceHubSettings | None = None):
        self._settings = settings or get_settings()
        self.engine: AsyncEngine | None = None

    async def init(self) -> None:
        if self.engine is not None:
            return
        self.engine = create_async_engine(
            self._settings.database_url, echo=False, **pool_options(self._settings)
        )
        event.listen(self.engine.sync_engine, "connect", _on_connect)

    def _require_engine(self) -> AsyncEngine:
        if self.engine is None:
            raise RuntimeError("Database not initialized, call init() first")
        return self.engine

    async def execute(self, statement: Executable) -> list[dict[str, Any]]:
        """Run one statement and return its rows as plain dicts.

        Raises StoreError with the classified kind on any store failure.
        """
        engine = self._require_engine()
        try:
            async with engine.begin() as conn:
                result = await conn.execute(statement)
                if not result.returns_rows:
                    return []
                return [dict(row) for row in result.mappings().all()]
        except (sa_exc.SQLAlchemyError, OSError) as exc:
            kind = classify_store_error(exc)
            logger.debug("Statement failed (%s): %s", kind.value, exc)
            raise StoreError(kind, str(getattr(exc, "orig", None) or exc)) from exc

    async def ping(self) -> Any:
        """Round-trip a trivial query and return the store's current time."""
        rows = await self.execute(text("SELECT CURRENT_TIMESTAMP AS now"))
        return rows[0]["now"]

    async def create_all(self) -> None:
        engine = self._require_engine()
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        """Dispose of the engine, closing every pooled connection."""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
