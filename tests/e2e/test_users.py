"""End-to-end tests for user endpoints."""

import httpx
import pytest

from letsconnect.domain.value import Role
from letsconnect.interface.api.app import create_app
from letsconnect.persistence.repository.inmemory import (
    InMemoryDocumentStore,
    InMemoryUserRepository,
)
from tests.conftest import auth_headers, make_principal, make_user
from tests.di import build_test_container


class TestUserEndpoints:
    """Users are created by the identity service, so tests seed the store."""

    @pytest.mark.asyncio
    async def test_profile_and_flags(self):
        # Arrange
        container = build_test_container()
        store = await container.get(InMemoryDocumentStore)
        user = await InMemoryUserRepository(store).save(make_user(name="Sana"))
        headers = auth_headers(make_principal(user_id=user.id))
        transport = httpx.ASGITransport(app=create_app(container))

        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            # Act
            me = await client.get("/users/me", headers=headers)
            hidden = await client.post(
                f"/users/{user.id}/toggle/show_points", headers=headers
            )
            banned = await client.post(
                f"/users/{user.id}/toggle/is_banned",
                headers=auth_headers(make_principal(Role.ADMIN)),
            )
            profile = await client.get(f"/users/{user.id}", headers=headers)

        # Assert
        assert me.json()["user"]["name"] == "Sana"
        assert hidden.json()["message"] == "Points Are Hidden Now"
        assert banned.json()["message"] == "User Is Banned Now"
        assert profile.json()["user"]["show_points"] is False
        assert profile.json()["user"]["is_banned"] is True
        await container.close()

    @pytest.mark.asyncio
    async def test_user_cannot_ban(self):
        container = build_test_container()
        store = await container.get(InMemoryDocumentStore)
        user = await InMemoryUserRepository(store).save(make_user())
        transport = httpx.ASGITransport(app=create_app(container))

        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post(
                f"/users/{user.id}/toggle/is_banned",
                headers=auth_headers(make_principal()),
            )

        assert response.status_code == 403
        await container.close()
