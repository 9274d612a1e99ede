"""SQLAlchemy model for tenants."""

from sqlalchemy import Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from devicehub.common.models import Base, SoftDeleteMixin, TimestampMixin, generate_uuid


class TenantModel(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "tenants"
    __table_args__ = (
        # Names are unique among live tenants only, so a deleted name can be reused.
        Index(
            "uq_tenants_name_active",
            "name",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
