"""
Root conftest for the pytest test suite.

This file contains the main fixtures that are used across the entire test suite.

Each test runs against a fresh, isolated in-memory SQLite database that is
initialized inside the test's own event loop. Requests go through an
httpx.AsyncClient bound to the ASGI app, so the app and the fixtures share
that loop and the same Tortoise connection. The ASGI transport does not run
the app lifespan, so the production database is never opened.

Key Fixtures:
- `initialize_test_db`: (autouse) Creates a fresh DB schema and seed users for each test.
- `reports_dir`: (autouse) Points REPORTS_DIR at a per-test temporary directory.
- `client`: Provides a non-authenticated AsyncClient.
- `admin_client`: Provides an AsyncClient authenticated as the seeded admin.
- `staff_client`: Provides an AsyncClient authenticated as the seeded non-admin user.
"""

from pathlib import Path
from typing import Any, AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from relief_admin.core import config
from relief_admin.features.auth.models import User
from relief_admin.features.auth.security import get_password_hash
from relief_admin.main import app

ADMIN_USERNAME = "adminfixture"
ADMIN_PASSWORD = "adminpassword123"
STAFF_USERNAME = "stafffixture"
STAFF_PASSWORD = "staffpassword123"


async def add_admin_user() -> User:
    return await User.create(
        username=ADMIN_USERNAME,
        email="adminfixture@example.com",
        hashed_password=get_password_hash(ADMIN_PASSWORD),
        role="admin",
    )


async def add_staff_user() -> User:
    return await User.create(
        username=STAFF_USERNAME,
        email="stafffixture@example.com",
        hashed_password=get_password_hash(STAFF_PASSWORD),
        role="staff",
    )


@pytest_asyncio.fixture(scope="function", autouse=True)
async def initialize_test_db() -> AsyncGenerator[None, None]:
    """
    Initializes the database for each test function.

    Creates a fresh in-memory database and schema for each test,
    seeds one admin and one staff user, and tears it down afterwards.
    """
    await Tortoise.init(config=config.tortoise_config("sqlite://:memory:"))
    await Tortoise.generate_schemas()
    await add_admin_user()
    await add_staff_user()

    yield

    await Tortoise.close_connections()


@pytest.fixture(scope="function", autouse=True)
def reports_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirects spreadsheet exports into a directory that does not exist yet."""
    target = tmp_path / "reports"
    monkeypatch.setattr(config, "REPORTS_DIR", str(target))
    return target


async def _login(client: AsyncClient, username: str, password: str) -> str:
    response = await client.post(
        "/api/v1/auth/token",
        data={"username": username, "password": password},
    )
    if response.status_code != 200:
        raise Exception(f"Authentication failed for {username}: {response.text}")
    return response.json()["access_token"]


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, Any]:
    """
    Provides a non-authenticated AsyncClient.
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def admin_client() -> AsyncGenerator[AsyncClient, Any]:
    """
    Provides an AsyncClient authenticated as the seeded admin user.
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        token = await _login(ac, ADMIN_USERNAME, ADMIN_PASSWORD)
        ac.headers["Authorization"] = f"Bearer {token}"
        yield ac


@pytest_asyncio.fixture(scope="function")
async def staff_client() -> AsyncGenerator[AsyncClient, Any]:
    """
    Provides an AsyncClient authenticated as the seeded staff (non-admin) user.
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        token = await _login(ac, STAFF_USERNAME, STAFF_PASSWORD)
        ac.headers["Authorization"] = f"Bearer {token}"
        yield ac
