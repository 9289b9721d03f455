"""User CRUD through the HTTP API."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.taskboard.models import User
from tests.factories import UserFactory

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]

API = "/api/go"


@pytest.fixture
async def user(db_session: AsyncSession) -> User:
    user = UserFactory.build()
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


async def test_create_then_get_returns_same_fields(client: AsyncClient) -> None:
    response = await client.post(
        f"{API}/users", json={"name": "Ada Lovelace", "email": "ada@example.com"}
    )

    assert response.status_code == 201
    created = response.json()
    assert created == {"id": created["id"], "name": "Ada Lovelace", "email": "ada@example.com"}

    response = await client.get(f"{API}/users/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "a@example.com"},
        {"name": "No Email"},
        {"name": "", "email": "a@example.com"},
        {"name": "Bad Email", "email": "not-an-email"},
    ],
)
async def test_create_rejects_invalid_payload(client: AsyncClient, payload: dict) -> None:
    response = await client.post(f"{API}/users", json=payload)

    assert response.status_code == 400


async def test_create_duplicate_email_conflicts(client: AsyncClient, user: User) -> None:
    response = await client.post(
        f"{API}/users", json={"name": "Someone Else", "email": user.email.upper()}
    )

    assert response.status_code == 409
    assert "already exists" in response.json()["detail"]


async def test_list_users(client: AsyncClient, user: User) -> None:
    response = await client.get(f"{API}/users")

    assert response.status_code == 200
    assert response.json() == [{"id": user.id, "name": user.name, "email": user.email}]


async def test_update_changes_only_targeted_fields(client: AsyncClient, user: User) -> None:
    response = await client.put(f"{API}/users/{user.id}", json={"name": "New Name"})

    assert response.status_code == 200
    assert response.json() == {"id": user.id, "name": "New Name", "email": user.email}


async def test_update_keeps_own_email(client: AsyncClient, user: User) -> None:
    response = await client.patch(f"{API}/users/{user.id}", json={"email": user.email})

    assert response.status_code == 200


async def test_update_to_taken_email_conflicts(client: AsyncClient, user: User) -> None:
    other = (
        await client.post(f"{API}/users", json={"name": "Other", "email": "other@example.com"})
    ).json()

    response = await client.put(f"{API}/users/{other['id']}", json={"email": user.email})

    assert response.status_code == 409


async def test_update_missing_user_returns_404(client: AsyncClient) -> None:
    response = await client.put(f"{API}/users/9999", json={"name": "Ghost"})

    assert response.status_code == 404


async def test_delete_user(client: AsyncClient, user: User) -> None:
    response = await client.delete(f"{API}/users/{user.id}")

    assert response.status_code == 200
    assert response.json() == {"message": "User deleted successfully"}

    response = await client.get(f"{API}/users/{user.id}")
    assert response.status_code == 404


async def test_delete_missing_user_returns_404(client: AsyncClient) -> None:
    response = await client.delete(f"{API}/users/9999")

    assert response.status_code == 404
