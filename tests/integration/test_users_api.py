"""
API tests for users, login and notifications.
"""

import pytest
import pytest_asyncio

from jobdesk.application.services.auth_service import hash_password
from jobdesk.domain.value_objects.role import Role
from jobdesk.infrastructure.database.models.user import UserModel


@pytest_asyncio.fixture
async def seed_user(session_factory):
    """Insert a user straight into the store, bypassing registration rules."""

    async def create(username, role=Role.USER, password="s3cret-pass"):
        async with session_factory() as session:
            user = UserModel(
                username=username, password=hash_password(password), role=role
            )
            session.add(user)
            await session.commit()
            return user.id

    return create


async def register(client, username, password="s3cret-pass"):
    payload = {"username": username, "password": password}
    response = await client.post("/users", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def login(client, username, password="s3cret-pass"):
    response = await client.post("/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


class TestRegistrationAndLogin:
    @pytest.mark.asyncio
    async def test_register_hides_password(self, client):
        user = await register(client, "dispatcher")

        assert user["username"] == "dispatcher"
        assert user["role"] == "User"
        assert user["uid"]
        assert "password" not in user

    @pytest.mark.asyncio
    async def test_duplicate_username_conflicts(self, client):
        await register(client, "dispatcher")

        response = await client.post(
            "/users", json={"username": "dispatcher", "password": "other-pass"}
        )
        assert response.status_code == 409
        assert response.json() == {"error": "A user with the same details already exists."}

    @pytest.mark.asyncio
    async def test_login_returns_token(self, client):
        user = await register(client, "dispatcher")

        response = await client.post(
            "/login", json={"username": "dispatcher", "password": "s3cret-pass"}
        )

        body = response.json()
        assert response.status_code == 200
        assert body["message"] == "Login successful"
        assert body["user"]["id"] == user["id"]
        assert body["token"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,password", [("dispatcher", "wrong-pass"), ("nobody", "s3cret-pass")]
    )
    async def test_bad_credentials(self, client, username, password):
        await register(client, "dispatcher")

        response = await client.post(
            "/login", json={"username": username, "password": password}
        )
        assert response.status_code == 401
        assert response.json() == {"error": "Incorrect username or password"}


    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", ["Admin", "Moderator"])
    async def test_anonymous_registration_cannot_claim_role(self, client, role):
        response = await client.post(
            "/users",
            json={"username": "intruder", "password": "s3cret-pass", "role": role},
        )

        assert response.status_code == 403
        assert response.json() == {
            "error": "Only an admin can register users with this role"
        }
        rejected = await client.post(
            "/login", json={"username": "intruder", "password": "s3cret-pass"}
        )
        assert rejected.status_code == 401

    @pytest.mark.asyncio
    async def test_plain_user_cannot_grant_role(self, client):
        await register(client, "dispatcher")
        headers = await login(client, "dispatcher")

        response = await client.post(
            "/users",
            json={"username": "sidekick", "password": "s3cret-pass", "role": "Admin"},
            headers=headers,
        )
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_registers_staff(self, client, seed_user):
        await seed_user("root", Role.ADMIN)
        headers = await login(client, "root")

        response = await client.post(
            "/users",
            json={"username": "mod", "password": "s3cret-pass", "role": "Moderator"},
            headers=headers,
        )
        assert response.status_code == 201
        assert response.json()["role"] == "Moderator"


class TestUserAccess:
    @pytest.mark.asyncio
    async def test_listing_requires_token(self, client):
        response = await client.get("/users")
        assert response.status_code == 401
        assert response.json() == {"error": "Not authenticated"}

        response = await client.get(
            "/users", headers={"Authorization": "Bearer not-a-token"}
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_list_and_get(self, client):
        user = await register(client, "dispatcher")
        headers = await login(client, "dispatcher")

        listed = await client.get("/users", headers=headers)
        assert [u["username"] for u in listed.json()] == ["dispatcher"]

        fetched = await client.get(f"/users/{user['id']}", headers=headers)
        assert fetched.json()["uid"] == user["uid"]

        missing = await client.get("/users/999", headers=headers)
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_user_edits_self_but_not_others(self, client):
        me = await register(client, "dispatcher")
        other = await register(client, "foreman")
        headers = await login(client, "dispatcher")

        renamed = await client.put(
            f"/users/{me['id']}", json={"username": "lead-dispatcher"}, headers=headers
        )
        assert renamed.status_code == 200
        assert renamed.json()["username"] == "lead-dispatcher"

        forbidden = await client.put(
            f"/users/{other['id']}", json={"username": "x"}, headers=headers
        )
        assert forbidden.status_code == 403

        promoted = await client.put(
            f"/users/{me['id']}", json={"role": "Admin"}, headers=headers
        )
        assert promoted.status_code == 403

    @pytest.mark.asyncio
    async def test_password_change_takes_effect(self, client):
        me = await register(client, "dispatcher")
        headers = await login(client, "dispatcher")

        await client.put(
            f"/users/{me['id']}", json={"password": "n3w-pass"}, headers=headers
        )

        old = await client.post(
            "/login", json={"username": "dispatcher", "password": "s3cret-pass"}
        )
        assert old.status_code == 401
        await login(client, "dispatcher", "n3w-pass")

    @pytest.mark.asyncio
    async def test_admin_manages_other_users(self, client, seed_user):
        await seed_user("root", Role.ADMIN)
        other = await register(client, "foreman")
        headers = await login(client, "root")

        promoted = await client.put(
            f"/users/{other['id']}", json={"role": "Moderator"}, headers=headers
        )
        assert promoted.json()["role"] == "Moderator"

        deleted = await client.delete(f"/users/{other['id']}", headers=headers)
        assert deleted.status_code == 200

        missing = await client.delete(f"/users/{other['id']}", headers=headers)
        assert missing.status_code == 404
        assert missing.json() == {
            "error": "The user you are trying to delete does not exist."
        }


class TestNotifications:
    @pytest.mark.asyncio
    async def test_publishing_requires_staff_role(self, client, seed_user):
        payload = {"text": "Depot closed Friday", "link": "https://example.com/depot"}

        anonymous = await client.post("/notifications", json=payload)
        assert anonymous.status_code == 401

        await register(client, "dispatcher")
        user_headers = await login(client, "dispatcher")
        forbidden = await client.post("/notifications", json=payload, headers=user_headers)
        assert forbidden.status_code == 403
        assert forbidden.json() == {"error": "Insufficient permissions"}

        await seed_user("mod", Role.MODERATOR)
        mod_headers = await login(client, "mod")
        created = await client.post("/notifications", json=payload, headers=mod_headers)
        assert created.status_code == 201
        assert created.json()["active"] is True

    @pytest.mark.asyncio
    async def test_dismiss_hides_notification(self, client, seed_user):
        await seed_user("root", Role.ADMIN)
        headers = await login(client, "root")
        first = (
            await client.post("/notifications", json={"text": "One"}, headers=headers)
        ).json()
        await client.post("/notifications", json={"text": "Two"}, headers=headers)

        dismissed = await client.patch(f"/notifications/{first['id']}/dismiss")
        assert dismissed.status_code == 200
        assert dismissed.json()["active"] is False

        active = (await client.get("/notifications")).json()
        assert [n["text"] for n in active] == ["Two"]

    @pytest.mark.asyncio
    async def test_dismiss_missing_notification(self, client):
        response = await client.patch("/notifications/31/dismiss")
        assert response.status_code == 404
