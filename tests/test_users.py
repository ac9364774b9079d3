"""
User API tests - profile read/update and the admin user listing.
"""

import pytest
from httpx import AsyncClient

from minitracker.core.security import verify_password
from tests.conftest import PASSWORD


@pytest.mark.asyncio
async def test_me_requires_session(client: AsyncClient):
    response = await client.get("/api/v1/users/me")
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_me_returns_profile(client: AsyncClient, test_user, auth_headers):
    response = await client.get("/api/v1/users/me", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["username"] == test_user.username
    assert data["email"] == test_user.email
    assert "passwordHash" not in data


@pytest.mark.asyncio
async def test_update_requires_a_field(client: AsyncClient, auth_headers):
    response = await client.put("/api/v1/users/me", headers=auth_headers, json={})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_change_password_needs_current(client: AsyncClient, auth_headers):
    response = await client.put(
        "/api/v1/users/me", headers=auth_headers, json={"password": "brandnew123"}
    )
    assert response.status_code == 400
    assert response.json()["error"]["field"] == "currentPassword"


@pytest.mark.asyncio
async def test_change_password_wrong_current(client: AsyncClient, test_user, auth_headers):
    response = await client.put(
        "/api/v1/users/me",
        headers=auth_headers,
        json={"password": "brandnew123", "currentPassword": "nope-nope", "email": "moved@example.com"},
    )
    assert response.status_code == 401
    error = response.json()["error"]
    assert error["code"] == "INVALID_CREDENTIALS"
    assert error["field"] == "currentPassword"
    # Nothing applied when a check fails
    assert test_user.email == "collector@example.com"


@pytest.mark.asyncio
async def test_change_password(client: AsyncClient, test_user, auth_headers):
    response = await client.put(
        "/api/v1/users/me",
        headers=auth_headers,
        json={"password": "brandnew123", "currentPassword": PASSWORD},
    )
    assert response.status_code == 200
    assert verify_password("brandnew123", test_user.password_hash)


@pytest.mark.asyncio
async def test_change_email_taken(client: AsyncClient, other_user, auth_headers):
    response = await client.put("/api/v1/users/me", headers=auth_headers, json={"email": other_user.email})
    assert response.status_code == 409
    assert response.json()["error"]["field"] == "email"


@pytest.mark.asyncio
async def test_list_users_admin_only(client: AsyncClient, test_user, admin_user, auth_headers, admin_headers):
    anonymous = await client.get("/api/v1/users")
    assert anonymous.status_code == 401

    regular = await client.get("/api/v1/users", headers=auth_headers)
    assert regular.status_code == 403

    admin = await client.get("/api/v1/users", headers=admin_headers)
    assert admin.status_code == 200
    usernames = {u["username"] for u in admin.json()["data"]}
    assert {test_user.username, admin_user.username} <= usernames
