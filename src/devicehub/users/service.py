"""User CRUD service."""

from typing import Any

from sqlalchemy import insert, select, update

from devicehub.common.database import Database
from devicehub.common.exceptions import NotFoundError, unique_violation_as_conflict
from devicehub.common.models import utcnow
from devicehub.users.models import UserModel

# tenant_id, external_auth_id and email are fixed once the user exists.
MUTABLE_FIELDS = ("name", "role")
CONFLICT_MESSAGE = "User already exists"

_columns = UserModel.__table__.c
_live = UserModel.deleted_at.is_(None)


class UserService:
    """User management operations, one statement each."""

    def __init__(self, db: Database):
        self.db = db

    async def list_users(self) -> list[dict[str, Any]]:
        return await self.db.execute(
            select(*_columns).where(_live).order_by(UserModel.created_at.desc())
        )

    async def get_user(self, user_id: str) -> dict[str, Any]:
        rows = await self.db.execute(
            select(*_columns).where(UserModel.id == user_id, _live)
        )
        if not rows:
            raise NotFoundError("User not found")
        return rows[0]

    async def create_user(
        self,
        tenant_id: str,
        external_auth_id: str,
        email: str,
        role: str,
        name: str | None = None,
    ) -> dict[str, Any]:
        with unique_violation_as_conflict(CONFLICT_MESSAGE):
            rows = await self.db.execute(
                insert(UserModel)
                .values(
                    tenant_id=tenant_id,
                    external_auth_id=external_auth_id,
                    email=email,
                    name=name,
                    role=role,
                )
                .returning(*_columns)
            )
        return rows[0]

    async def update_user(self, user_id: str, **updates) -> dict[str, Any]:
        values = {
            field: updates[field]
            for field in MUTABLE_FIELDS
            if field in updates
        }
        with unique_violation_as_conflict(CONFLICT_MESSAGE):
            rows = await self.db.execute(
                update(UserModel)
                .where(UserModel.id == user_id, _live)
                .values(**values, updated_at=utcnow())
                .returning(*_columns)
            )
        if not rows:
            raise NotFoundError("User not found")
        return rows[0]

    async def delete_user(self, user_id: str) -> None:
        rows = await self.db.execute(
            update(UserModel)
            .where(UserModel.id == user_id, _live)
            .values(deleted_at=utcnow())
            .returning(UserModel.id)
        )
        if not rows:
            raise NotFoundError("User not found")
