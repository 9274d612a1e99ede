"""SQLAlchemy model for apps installed on a device.

Installed apps carry no deleted_at column; deleting one removes the row.
"""

from sqlalchemy import JSON, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from devicehub.common.models import Base, TimestampMixin, generate_uuid


class InstalledAppModel(Base, TimestampMixin):
    __tablename__ = "installed_apps"
    __table_args__ = (
        UniqueConstraint(
            "tenant_id", "device_id", "app_package", name="uq_installed_app_device_package"
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    tenant_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("tenants.id"), nullable=False, index=True
    )
    device_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("devices.id"), nullable=False, index=True
    )
    app_package: Mapped[str] = mapped_column(String(255), nullable=False)
    app_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    app_version: Mapped[str | None] = mapped_column(String(100), nullable=True)
    app_details: Mapped[dict | None] = mapped_column(JSON(none_as_null=True), nullable=True)
