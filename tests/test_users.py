import pytest
from httpx import AsyncClient, ASGITransport
from account_service.main import app


@pytest.mark.asyncio
async def test_list_users_omits_password_hash(override_store, memory_store):
    override_store(memory_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        await client.post("/signup", json={"username": "alice", "email": "a@x.com", "password": "pw1"})
        await client.post("/signup", json={"email": "b@x.com", "password": "pw2"})
        response = await client.get("/api/users")

    assert response.status_code == 200
    assert response.json() == [
        {"id": "u-1", "username": "alice", "email": "a@x.com"},
        {"id": "u-2", "username": None, "email": "b@x.com"},
    ]


@pytest.mark.asyncio
async def test_list_users_against_database():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        await client.post("/signup", json={"username": "dave", "email": "dave-list@x.com", "password": "pw"})
        response = await client.get("/api/users")

    assert response.status_code == 200
    emails = [u["email"] for u in response.json()]
    assert "dave-list@x.com" in emails


@pytest.mark.asyncio
async def test_list_users_storage_failure(override_store, unavailable_store):
    override_store(unavailable_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/users")

    assert response.status_code == 500
    assert response.json() == {"message": "Server error"}


@pytest.mark.asyncio
async def test_list_users_unexpected_failure(override_store):
    class BrokenStore:
        async def list_all(self):
            raise RuntimeError("boom")

    override_store(BrokenStore())
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/users")

    assert response.status_code == 500
    assert response.json() == {"message": "Server error"}
