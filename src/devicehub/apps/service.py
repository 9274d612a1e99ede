"""Installed-app CRUD service.

Apps have no soft-delete state: every query sees every row and delete
removes the row outright.
"""

from typing import Any

from sqlalchemy import delete, insert, select, update

from devicehub.common.database import Database
from devicehub.common.exceptions import NotFoundError, unique_violation_as_conflict
from devicehub.common.models import utcnow
from devicehub.apps.models import InstalledAppModel

MUTABLE_FIELDS = ("app_name", "app_version", "app_details")
CONFLICT_MESSAGE = "App already exists"

_columns = InstalledAppModel.__table__.c


class AppService:
    """Installed-app operations, one statement each."""

    def __init__(self, db: Database):
        self.db = db

    async def list_apps(self) -> list[dict[str, Any]]:
        return await self.db.execute(
            select(*_columns).order_by(InstalledAppModel.created_at.desc())
        )

    async def get_app(self, app_id: str) -> dict[str, Any]:
        rows = await self.db.execute(
            select(*_columns).where(InstalledAppModel.id == app_id)
        )
        if not rows:
            raise NotFoundError("App not found")
        return rows[0]

    async def create_app(
        self,
        tenant_id: str,
        device_id: str,
        app_package: str,
        app_name: str | None = None,
        app_version: str | None = None,
        app_details: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        with unique_violation_as_conflict(CONFLICT_MESSAGE):
            rows = await self.db.execute(
                insert(InstalledAppModel)
                .values(
                    tenant_id=tenant_id,
                    device_id=device_id,
                    app_package=app_package,
                    app_name=app_name,
                    app_version=app_version,
                    app_details=app_details,
                )
                .returning(*_columns)
            )
        return rows[0]

    async def update_app(self, app_id: str, **updates) -> dict[str, Any]:
        values = {
            field: updates[field]
            for field in MUTABLE_FIELDS
            if field in updates
        }
        with unique_violation_as_conflict(CONFLICT_MESSAGE):
            rows = await self.db.execute(
                update(InstalledAppModel)
                .where(InstalledAppModel.id == app_id)
                .values(**values, updated_at=utcnow())
                .returning(*_columns)
            )
        if not rows:
            raise NotFoundError("App not found")
        return rows[0]

    async def delete_app(self, app_id: str) -> None:
        rows = await self.db.execute(
            delete(InstalledAppModel)
            .where(InstalledAppModel.id == app_id)
            .returning(InstalledAppModel.id)
        )
        if not rows:
            raise NotFoundError("App not found")
