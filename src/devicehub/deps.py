"""FastAPI dependency providers for DeviceHub.

The gateway is created by the application factory and lives on
``app.state.db``; services are cheap, stateless wrappers built per request.
"""

from fastapi import Depends, Request

from devicehub.common.database import Database
from devicehub.apps.service import AppService
from devicehub.devices.service import DeviceService
from devicehub.tenants.service import TenantService
from devicehub.users.service import UserService


def get_db(request: Request) -> Database:
    return request.app.state.db


def get_tenant_service(db: Database = Depends(get_db)) -> TenantService:
    return TenantService(db)


def get_user_service(db: Database = Depends(get_db)) -> UserService:
    return UserService(db)


def get_device_service(db: Database = Depends(get_db)) -> DeviceService:
    return DeviceService(db)


def get_app_service(db: Database = Depends(get_db)) -> AppService:
    return AppService(db)
