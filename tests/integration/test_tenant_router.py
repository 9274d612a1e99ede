"""Integration tests for tenant endpoints."""


class TestTenantRouter:
    async def test_create_tenant(self, client):
        resp = await client.post("/api/tenants", json={"name": "Acme Corp"})
        assert resp.status_code == 201
        data = resp.json()
        assert data["name"] == "Acme Corp"
        assert data["id"]
        assert data["deleted_at"] is None

    async def test_get_matches_created(self, client, tenant):
        resp = await client.get(f"/api/tenants/{tenant['id']}")
        assert resp.status_code == 200
        data = resp.json()
        for field in ("id", "name", "created_at", "updated_at"):
            assert data[field] == tenant[field]
        assert data["user_count"] == 0
        assert data["device_count"] == 0

    async def test_name_lifecycle(self, client):
        first = await client.post("/api/tenants", json={"name": "Acme"})
        assert first.status_code == 201

        dup = await client.post("/api/tenants", json={"name": "Acme"})
        assert dup.status_code == 409
        assert dup.json()["message"] == "Tenant name already exists"

        deleted = await client.delete(f"/api/tenants/{first.json()['id']}")
        assert deleted.status_code == 200
        assert deleted.json() == {"message": "Tenant deleted successfully"}

        again = await client.post("/api/tenants", json={"name": "Acme"})
        assert again.status_code == 201
        assert again.json()["id"] != first.json()["id"]

    async def test_list_counts(self, client, tenant):
        for i in range(3):
            resp = await client.post("/api/users", json={
                "tenant_id": tenant["id"],
                "external_auth_id": f"auth0|{i}",
                "email": f"member{i}@example.com",
                "role": "child",
            })
            assert resp.status_code == 201
        await client.delete(f"/api/users/{resp.json()['id']}")
        await client.post("/api/devices", json={
            "tenant_id": tenant["id"], "device_uid": "ipad-1", "device_type": "ios",
        })

        resp = await client.get("/api/tenants")
        assert resp.status_code == 200
        [entry] = resp.json()
        assert entry["user_count"] == 2
        assert entry["device_count"] == 1

    async def test_update_tenant(self, client, tenant):
        resp = await client.put(f"/api/tenants/{tenant['id']}", json={"name": "Acme Two"})
        assert resp.status_code == 200
        assert resp.json()["name"] == "Acme Two"

    async def test_update_null_name_rejected(self, client, tenant):
        resp = await client.put(f"/api/tenants/{tenant['id']}", json={"name": None})
        assert resp.status_code == 400
        assert resp.json()["message"] == "name: Value error, must not be null"
        fetched = await client.get(f"/api/tenants/{tenant['id']}")
        assert fetched.json()["name"] == tenant["name"]

    async def test_update_unknown_tenant(self, client):
        resp = await client.put("/api/tenants/does-not-exist", json={"name": "Nope"})
        assert resp.status_code == 404
        assert resp.json()["message"] == "Tenant not found"

    async def test_update_deleted_tenant_does_not_mutate(self, client, tenant):
        await client.delete(f"/api/tenants/{tenant['id']}")
        resp = await client.put(f"/api/tenants/{tenant['id']}", json={"name": "Zombie"})
        assert resp.status_code == 404
        listing = await client.get("/api/tenants")
        assert listing.json() == []

    async def test_create_invalid_name(self, client):
        resp = await client.post("/api/tenants", json={"name": "A"})
        assert resp.status_code == 400
        assert resp.json()["message"].startswith("name:")

    async def test_get_after_delete(self, client, tenant):
        await client.delete(f"/api/tenants/{tenant['id']}")
        resp = await client.get(f"/api/tenants/{tenant['id']}")
        assert resp.status_code == 404
