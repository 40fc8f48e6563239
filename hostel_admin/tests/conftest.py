import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient

from hostel_admin.main import app
from hostel_admin.database.mongo_connection import get_database
from hostel_admin.models.hostel import create_hostel

@pytest_asyncio.fixture
async def test_db():
    """In-memory database, fresh for every test."""
    client = AsyncMongoMockClient()
    return client["hostel-management-test"]

@pytest_asyncio.fixture
async def async_client(test_db):
    """Async test client with the database dependency pointed at test_db."""
    async def override_get_database():
        return test_db

    app.dependency_overrides[get_database] = override_get_database
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

@pytest_asyncio.fixture
async def hostel(test_db):
    """A hostel admins can register against."""
    return await create_hostel(test_db, {"name": "Jinnah Hall", "city": "Lahore"})

@pytest.fixture
def admin_data(hostel):
    """Complete registration payload."""
    return {
        "name": "Ayesha Khan",
        "email": "ayesha.khan@hostel.com",
        "father_name": "Imran Khan",
        "contact": "+923001234567",
        "address": "12 Canal Road, Lahore",
        "dob": "1990-04-15",
        "cnic": "35202-1234567-1",
        "hostel": hostel["name"],
        "password": "HostelPass123"
    }

@pytest_asyncio.fixture
async def registered_admin(async_client, admin_data):
    """Register an admin and return the registration response body."""
    response = await async_client.post("/api/admin/register", json=admin_data)
    assert response.status_code == 200
    return response.json()
