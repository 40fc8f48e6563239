import pytest
from bson import ObjectId
from datetime import timedelta

from hostel_admin.core.security import generate_token


@pytest.fixture
def update_data(admin_data):
    return {
        "name": "Ayesha Malik",
        "email": admin_data["email"],
        "father_name": "Imran Malik",
        "contact": "0300-7654321",
        "address": "5 Mall Road, Lahore",
        "dob": "1991-05-20",
        "cnic": "3520276543211"
    }


class TestAdminUpdate:
    """Test cases for admin profile updates."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["POST", "PUT"])
    async def test_update_success(self, async_client, registered_admin, update_data, test_db, method):
        response = await async_client.request(method, "/api/admin/update", json=update_data)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        admin = data["admin"]
        assert admin["name"] == "Ayesha Malik"
        assert admin["father_name"] == "Imran Malik"
        assert admin["cnic"] == "3520276543211"
        assert admin["id"] == registered_admin["admin"]["id"]

        stored = await test_db.admins.find_one({"_id": ObjectId(admin["id"])})
        assert stored["address"] == "5 Mall Road, Lahore"
        assert stored["user"] == ObjectId(registered_admin["admin"]["user"])

    @pytest.mark.asyncio
    async def test_update_unknown_admin(self, async_client, update_data):
        update_data["email"] = "nobody@hostel.com"

        response = await async_client.put("/api/admin/update", json=update_data)

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["errors"] == [{"msg": "Admin does not exist"}]

    @pytest.mark.asyncio
    async def test_update_missing_field(self, async_client, registered_admin, update_data):
        update_data.pop("name")

        response = await async_client.put("/api/admin/update", json=update_data)

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert [error["field"] for error in errors] == ["name"]

    @pytest.mark.asyncio
    async def test_update_invalid_fields(self, async_client, registered_admin, update_data):
        update_data["cnic"] = "12345"
        update_data["dob"] = "15/04/1990"

        response = await async_client.put("/api/admin/update", json=update_data)

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"cnic", "dob"}


class TestAdminHostel:
    """Test cases for looking up an admin's hostel."""

    @pytest.mark.asyncio
    async def test_get_hostel(self, async_client, registered_admin, hostel):
        response = await async_client.post(
            "/api/admin/hostel", json={"id": registered_admin["admin"]["id"]}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["hostel"]["id"] == str(hostel["_id"])
        assert data["hostel"]["name"] == "Jinnah Hall"
        assert data["hostel"]["city"] == "Lahore"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("admin_id", [str(ObjectId()), "not-an-object-id"])
    async def test_get_hostel_unknown_admin(self, async_client, admin_id):
        response = await async_client.post("/api/admin/hostel", json={"id": admin_id})

        assert response.status_code == 400
        assert response.json()["message"] == "Admin does not exist"


class TestAdminTokenLookup:
    """Test cases for resolving the admin behind a token."""

    @pytest.mark.asyncio
    async def test_get_admin(self, async_client, registered_admin):
        response = await async_client.post(
            "/api/admin/me", json={"isAdmin": True, "token": registered_admin["token"]}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["admin"]["id"] == registered_admin["admin"]["id"]
        assert "password" not in data["admin"]

    @pytest.mark.asyncio
    async def test_get_admin_from_header(self, async_client, registered_admin):
        response = await async_client.post(
            "/api/admin/me",
            json={"isAdmin": True},
            headers={"Authorization": f"Bearer {registered_admin['token']}"}
        )

        assert response.status_code == 200
        assert response.json()["admin"]["email"] == registered_admin["admin"]["email"]

    @pytest.mark.asyncio
    async def test_not_admin(self, async_client, registered_admin):
        response = await async_client.post(
            "/api/admin/me", json={"isAdmin": False, "token": registered_admin["token"]}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Not an Admin, authorization denied"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("flag", ["yes", 1, "true"])
    async def test_truthy_admin_flag(self, async_client, registered_admin, flag):
        response = await async_client.post(
            "/api/admin/me", json={"isAdmin": flag, "token": registered_admin["token"]}
        )

        assert response.status_code == 200
        assert response.json()["admin"]["id"] == registered_admin["admin"]["id"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("flag", [0, "", None])
    async def test_falsy_admin_flag(self, async_client, registered_admin, flag):
        response = await async_client.post(
            "/api/admin/me", json={"isAdmin": flag, "token": registered_admin["token"]}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Not an Admin, authorization denied"

    @pytest.mark.asyncio
    async def test_missing_token(self, async_client):
        response = await async_client.post("/api/admin/me", json={"isAdmin": True})

        assert response.status_code == 401
        assert response.json()["message"] == "No token, authorization denied"

    @pytest.mark.asyncio
    async def test_invalid_token(self, async_client, registered_admin):
        response = await async_client.post(
            "/api/admin/me", json={"isAdmin": True, "token": "not.a.jwt"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Token is not valid"

    @pytest.mark.asyncio
    async def test_expired_token(self, async_client, registered_admin):
        token = generate_token(
            registered_admin["admin"]["user"], True, expires_delta=timedelta(minutes=-5)
        )

        response = await async_client.post("/api/admin/me", json={"isAdmin": True, "token": token})

        assert response.status_code == 401
        assert response.json()["message"] == "Token is not valid"

    @pytest.mark.asyncio
    async def test_token_without_admin(self, async_client):
        token = generate_token(ObjectId(), True)

        response = await async_client.post("/api/admin/me", json={"isAdmin": True, "token": token})

        assert response.status_code == 401
        assert response.json()["message"] == "Token is not valid"


class TestAdminDeletion:
    """Test cases for deleting admins."""

    @pytest.mark.asyncio
    async def test_delete_admin(self, async_client, registered_admin, test_db):
        response = await async_client.request(
            "DELETE", "/api/admin", json={"email": registered_admin["admin"]["email"]}
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "msg": "Admin deleted"}
        assert await test_db.admins.count_documents({}) == 0
        assert await test_db.users.count_documents({}) == 0

        response = await async_client.post(
            "/api/admin/me", json={"isAdmin": True, "token": registered_admin["token"]}
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_delete_unknown_admin(self, async_client, registered_admin, test_db):
        response = await async_client.request(
            "DELETE", "/api/admin", json={"email": "nobody@hostel.com"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Admin does not exist"
        assert await test_db.admins.count_documents({}) == 1
        assert await test_db.users.count_documents({}) == 1
