#!/usr/bin/env python3
"""Seed the database with a demo family tenant.

Usage:
    python -m scripts.seed_demo
    # or from project root:
    python scripts/seed_demo.py
"""

import asyncio
import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from devicehub.apps.service import AppService
from devicehub.common.config import get_settings
from devicehub.common.database import Database
from devicehub.common.exceptions import ConflictError
from devicehub.devices.service import DeviceService
from devicehub.tenants.service import TenantService
from devicehub.users.service import UserService

DEMO_TENANT = "Demo Family"

DEMO_USERS = [
    {"external_auth_id": "demo|parent", "email": "parent@demo.example.com",
     "name": "Demo Parent", "role": "parent"},
    {"external_auth_id": "demo|child", "email": "child@demo.example.com",
     "name": "Demo Child", "role": "child"},
]

DEMO_APPS = [
    {"app_package": "com.android.chrome", "app_name": "Chrome", "app_version": "120.0"},
    {"app_package": "com.mojang.minecraftpe", "app_name": "Minecraft",
     "app_version": "1.20.50", "app_details": {"category": "games"}},
]


async def seed_demo() -> None:
    db = Database(get_settings())
    await db.init()
    await db.create_all()

    try:
        try:
            tenant = await TenantService(db).create_tenant(name=DEMO_TENANT)
        except ConflictError:
            print(f"  [skip] tenant {DEMO_TENANT!r} already exists")
            return
        print(f"  [created] tenant {tenant['name']} ({tenant['id']})")

        users = {}
        for seed in DEMO_USERS:
            user = await UserService(db).create_user(tenant_id=tenant["id"], **seed)
            users[seed["role"]] = user
            print(f"  [created] {seed['role']} {seed['email']}")

        device = await DeviceService(db).create_device(
            tenant_id=tenant["id"],
            device_uid="demo-tablet-0001",
            device_name="Kids Tablet",
            device_type="android",
            owner_user_id=users["parent"]["id"],
            child_id=users["child"]["id"],
            os="Android",
            os_version="14",
        )
        print(f"  [created] device {device['device_uid']}")

        for seed in DEMO_APPS:
            await AppService(db).create_app(
                tenant_id=tenant["id"], device_id=device["id"], **seed
            )
            print(f"  [created] app {seed['app_package']}")
    finally:
        await db.close()

    print("\nDone. Demo tenant seeded.")


if __name__ == "__main__":
    asyncio.run(seed_demo())
