"""Pytest configuration and fixtures.

SECRET_KEY is set before app.main is imported so create_app() can load
settings. Uses app.main:app for HTTP tests.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")

from collections.abc import Callable  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.core.config import get_settings  # noqa: E402
from app.infrastructure.security.jwt import create_session_token  # noqa: E402
from app.main import app  # noqa: E402

# Grant list a tenant owner receives at login (subset of the backend vocabulary).
OWNER_SESSION_PERMISSIONS = [
    "users:create",
    "users:read",
    "users:update",
    "users:delete",
    "users:manage",
    "users:export",
    "users:import",
    "roles:create",
    "roles:read",
    "roles:update",
    "roles:manage",
    "permissions:read",
    "permissions:manage",
    "audit:read",
    "audit:export",
    "dashboard:read",
    "sessions:read",
    "sessions:delete",
    "sessions:manage",
    "profile:read",
    "profile:update",
    "system:read",
    "system:update",
    "system:manage",
    "categories:create",
    "categories:read",
    "categories:update",
    "categories:delete",
    "categories:manage",
]


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def session_headers() -> Callable[..., dict[str, str]]:
    """Return a factory building Authorization headers for a role and grant list."""

    def _make(role: str, permissions: list[str] | None = None, user_id: str = "u-1") -> dict[str, str]:
        token = create_session_token(user_id, role, permissions)
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def owner_permissions() -> list[str]:
    return list(OWNER_SESSION_PERMISSIONS)


@pytest.fixture
def restore_settings():
    """Clear the settings cache after a test that changes environment variables."""
    yield
    get_settings.cache_clear()
