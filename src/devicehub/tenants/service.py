"""Tenant CRUD service."""

from typing import Any

from sqlalchemy import func, insert, select, update

from devicehub.common.database import Database
from devicehub.common.exceptions import NotFoundError, unique_violation_as_conflict
from devicehub.common.models import utcnow
from devicehub.devices.models import DeviceModel
from devicehub.tenants.models import TenantModel
from devicehub.users.models import UserModel

MUTABLE_FIELDS = ("name",)
CONFLICT_MESSAGE = "Tenant name already exists"

_columns = TenantModel.__table__.c


def _live_count(model):
    """Correlated count of a tenant's non-deleted rows in another table."""
    return (
        select(func.count(model.id))
        .where(model.tenant_id == TenantModel.id, model.deleted_at.is_(None))
        .correlate(TenantModel)
        .scalar_subquery()
    )


def _summary_query():
    return select(
        *_columns,
        _live_count(UserModel).label("user_count"),
        _live_count(DeviceModel).label("device_count"),
    ).where(TenantModel.deleted_at.is_(None))


class TenantService:
    """Tenant management operations, one statement each."""

    def __init__(self, db: Database):
        self.db = db

    async def list_tenants(self) -> list[dict[str, Any]]:
        """Live tenants, newest first, with live user/device counts."""
        return await self.db.execute(
            _summary_query().order_by(TenantModel.created_at.desc())
        )

    async def get_tenant(self, tenant_id: str) -> dict[str, Any]:
        rows = await self.db.execute(_summary_query().where(TenantModel.id == tenant_id))
        if not rows:
            raise NotFoundError("Tenant not found")
        return rows[0]

    async def create_tenant(self, name: str) -> dict[str, Any]:
        with unique_violation_as_conflict(CONFLICT_MESSAGE):
            rows = await self.db.execute(
                insert(TenantModel).values(name=name).returning(*_columns)
            )
        return rows[0]

    async def update_tenant(self, tenant_id: str, **updates) -> dict[str, Any]:
        values = {
            field: updates[field]
            for field in MUTABLE_FIELDS
            if field in updates
        }
        with unique_violation_as_conflict(CONFLICT_MESSAGE):
            rows = await self.db.execute(
                update(TenantModel)
                .where(TenantModel.id == tenant_id, TenantModel.deleted_at.is_(None))
                .values(**values, updated_at=utcnow())
                .returning(*_columns)
            )
        if not rows:
            raise NotFoundError("Tenant not found")
        return rows[0]

    async def delete_tenant(self, tenant_id: str) -> None:
        """Soft delete: the row stays but drops out of every query."""
        rows = await self.db.execute(
            update(TenantModel)
            .where(TenantModel.id == tenant_id, TenantModel.deleted_at.is_(None))
            .values(deleted_at=utcnow())
            .returning(TenantModel.id)
        )
        if not rows:
            raise NotFoundError("Tenant not found")
