"""Shared test fixtures for DeviceHub."""

import pytest
from httpx import ASGITransport, AsyncClient

from devicehub.common.config import DeviceHubSettings
from devicehub.common.database import Database

DB_URL = "sqlite+aiosqlite://"


def make_settings(**overrides) -> DeviceHubSettings:
    defaults = {"db_url": DB_URL, "environment": "test", "log_level": "WARNING"}
    defaults.update(overrides)
    return DeviceHubSettings(**defaults)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
async def db(settings):
    """Initialised in-memory database with all tables created."""
    manager = Database(settings)
    await manager.init()
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
def app(settings):
    from devicehub.app import create_app
    return create_app(settings)


@pytest.fixture
async def client(app):
    # Manually init DB since ASGITransport doesn't run lifespan
    db = app.state.db
    await db.init()
    await db.create_all()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await db.close()


@pytest.fixture
async def tenant(client):
    resp = await client.post("/api/tenants", json={"name": "Acme"})
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
async def device(client, tenant):
    resp = await client.post("/api/devices", json={
        "tenant_id": tenant["id"],
        "device_uid": "pixel-7-0001",
        "device_type": "android",
    })
    assert resp.status_code == 201
    return resp.json()
