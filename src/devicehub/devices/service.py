"""Device CRUD service."""

from typing import Any

from sqlalchemy import insert, select, update

from devicehub.common.database import Database
from devicehub.common.exceptions import NotFoundError, unique_violation_as_conflict
from devicehub.common.models import utcnow
from devicehub.devices.models import DeviceModel

MUTABLE_FIELDS = (
    "device_name",
    "device_type",
    "owner_user_id",
    "child_id",
    "os",
    "os_version",
    "status",
)
CONFLICT_MESSAGE = "Device already exists"

_columns = DeviceModel.__table__.c
_live = DeviceModel.deleted_at.is_(None)


class DeviceService:
    """Device registry operations, one statement each.

    owner_user_id and child_id are stored as given; nothing checks that the
    referenced users belong to the device's tenant.
    """

    def __init__(self, db: Database):
        self.db = db

    async def list_devices(self) -> list[dict[str, Any]]:
        return await self.db.execute(
            select(*_columns).where(_live).order_by(DeviceModel.created_at.desc())
        )

    async def get_device(self, device_id: str) -> dict[str, Any]:
        rows = await self.db.execute(
            select(*_columns).where(DeviceModel.id == device_id, _live)
        )
        if not rows:
            raise NotFoundError("Device not found")
        return rows[0]

    async def create_device(
        self,
        tenant_id: str,
        device_uid: str,
        device_type: str,
        device_name: str | None = None,
        owner_user_id: str | None = None,
        child_id: str | None = None,
        os: str | None = None,
        os_version: str | None = None,
        status: str = "active",
    ) -> dict[str, Any]:
        with unique_violation_as_conflict(CONFLICT_MESSAGE):
            rows = await self.db.execute(
                insert(DeviceModel)
                .values(
                    tenant_id=tenant_id,
                    device_uid=device_uid,
                    device_name=device_name,
                    device_type=device_type,
                    owner_user_id=owner_user_id,
                    child_id=child_id,
                    os=os,
                    os_version=os_version,
                    status=status,
                )
                .returning(*_columns)
            )
        return rows[0]

    async def update_device(self, device_id: str, **updates) -> dict[str, Any]:
        values = {
            field: updates[field]
            for field in MUTABLE_FIELDS
            if field in updates
        }
        with unique_violation_as_conflict(CONFLICT_MESSAGE):
            rows = await self.db.execute(
                update(DeviceModel)
                .where(DeviceModel.id == device_id, _live)
                .values(**values, updated_at=utcnow())
                .returning(*_columns)
            )
        if not rows:
            raise NotFoundError("Device not found")
        return rows[0]

    async def delete_device(self, device_id: str) -> None:
        rows = await self.db.execute(
            update(DeviceModel)
            .where(DeviceModel.id == device_id, _live)
            .values(deleted_at=utcnow())
            .returning(DeviceModel.id)
        )
        if not rows:
            raise NotFoundError("Device not found")
