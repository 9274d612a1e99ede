"""Integration tests for user endpoints."""

import pytest


@pytest.fixture
def user_payload(tenant):
    return {
        "tenant_id": tenant["id"],
        "external_auth_id": "auth0|abc",
        "email": "parent@example.com",
        "name": "Pat Parent",
        "role": "parent",
    }


class TestUserRouter:
    async def test_create_and_get(self, client, user_payload):
        resp = await client.post("/api/users", json=user_payload)
        assert resp.status_code == 201
        created = resp.json()
        for field, value in user_payload.items():
            assert created[field] == value

        fetched = await client.get(f"/api/users/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == created

    async def test_missing_role(self, client, user_payload):
        del user_payload["role"]
        resp = await client.post("/api/users", json=user_payload)
        assert resp.status_code == 400
        body = resp.json()
        assert body["message"] == "role: field is required"
        assert body["requestId"]

    async def test_invalid_email(self, client, user_payload):
        user_payload["email"] = "not-an-email"
        resp = await client.post("/api/users", json=user_payload)
        assert resp.status_code == 400
        assert resp.json()["message"].startswith("email:")

    async def test_duplicate_external_identity(self, client, user_payload):
        await client.post("/api/users", json=user_payload)
        resp = await client.post("/api/users", json=user_payload)
        assert resp.status_code == 409
        assert resp.json()["message"] == "User already exists"

    async def test_update_role(self, client, user_payload):
        created = (await client.post("/api/users", json=user_payload)).json()
        resp = await client.put(f"/api/users/{created['id']}", json={"role": "admin"})
        assert resp.status_code == 200
        assert resp.json()["role"] == "admin"
        assert resp.json()["name"] == "Pat Parent"

    async def test_update_rejects_tenant_change(self, client, user_payload):
        created = (await client.post("/api/users", json=user_payload)).json()
        resp = await client.put(
            f"/api/users/{created['id']}", json={"tenant_id": user_payload["tenant_id"]}
        )
        assert resp.status_code == 400
        assert resp.json()["message"] == "tenant_id: field is not allowed"

    async def test_delete_then_get(self, client, user_payload):
        created = (await client.post("/api/users", json=user_payload)).json()
        resp = await client.delete(f"/api/users/{created['id']}")
        assert resp.status_code == 200
        assert (await client.get(f"/api/users/{created['id']}")).status_code == 404
        assert (await client.get("/api/users")).json() == []

    async def test_display_name_email_rejected(self, client, user_payload):
        user_payload["email"] = "Pat Parent <pat@example.com>"
        resp = await client.post("/api/users", json=user_payload)
        assert resp.status_code == 400
        assert resp.json()["message"].startswith("email:")

    async def test_email_stored_as_given(self, client, user_payload):
        user_payload["email"] = "Pat@Example.COM"
        resp = await client.post("/api/users", json=user_payload)
        assert resp.status_code == 201
        assert resp.json()["email"] == "Pat@Example.COM"

    async def test_clear_name(self, client, user_payload):
        created = (await client.post("/api/users", json=user_payload)).json()
        resp = await client.put(f"/api/users/{created['id']}", json={"name": None})
        assert resp.status_code == 200
        assert resp.json()["name"] is None
        assert resp.json()["role"] == "parent"
