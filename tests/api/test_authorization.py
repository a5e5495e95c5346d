"""Authorization API tests (bearer session tokens, no external services)."""

from collections.abc import Callable

import pytest
from httpx import AsyncClient

from app.core.config import get_settings

Headers = Callable[..., dict[str, str]]


async def test_me_requires_session(client: AsyncClient) -> None:
    response = await client.get("/api/v1/authorization/me")
    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"


async def test_me_rejects_garbage_token(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/authorization/me", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


async def test_me_static_staff(client: AsyncClient, session_headers: Headers) -> None:
    response = await client.get("/api/v1/authorization/me", headers=session_headers("staff"))
    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "staff"
    assert data["source"] == "static"
    assert data["dashboard_url"] == "/dashboard"
    assert data["role_display_key"] == "common.roles.staff"
    assert data["can_manage_permissions"] is False
    assert data["can_view_audit"] is False
    assert data["navigation"] == ["dashboard", "customers", "rentals", "profile"]
    assert data["resource_actions"]["rentals"] == ["read", "update"]
    assert data["resource_actions"]["inventory"] == []


async def test_me_dynamic_owner(
    client: AsyncClient, session_headers: Headers, owner_permissions: list[str]
) -> None:
    response = await client.get(
        "/api/v1/authorization/me",
        headers=session_headers("tenant_owner", owner_permissions),
    )
    data = response.json()
    assert data["source"] == "dynamic"
    assert data["can_manage_permissions"] is True
    assert data["can_view_audit"] is True
    assert "categories" in data["navigation"]
    assert "inventory" not in data["navigation"]
    assert data["resource_actions"]["inventory"] == []


@pytest.mark.parametrize(
    ("role", "resource", "action", "allowed"),
    [
        ("manager", "inventory", "create", True),
        ("manager", "users", "create", False),
        ("employee", "rentals", "delete", False),
        ("admin", "settings", "read", False),
        ("tenant_owner", "permissions", "manage", True),
        ("manager", "spaceships", "launch", False),
        ("overlord", "inventory", "read", False),
    ],
)
async def test_check_static(
    client: AsyncClient,
    session_headers: Headers,
    role: str,
    resource: str,
    action: str,
    allowed: bool,
) -> None:
    response = await client.post(
        "/api/v1/authorization/check",
        json={"resource": resource, "action": action},
        headers=session_headers(role),
    )
    assert response.status_code == 200
    assert response.json() == {"resource": resource, "action": action, "allowed": allowed}


async def test_check_dynamic_list_is_authoritative(
    client: AsyncClient, session_headers: Headers
) -> None:
    response = await client.post(
        "/api/v1/authorization/check",
        json={"resource": "inventory", "action": "create"},
        headers=session_headers("manager", ["reports:read"]),
    )
    assert response.json()["allowed"] is False


async def test_check_validates_body(client: AsyncClient, session_headers: Headers) -> None:
    response = await client.post(
        "/api/v1/authorization/check",
        json={"resource": ""},
        headers=session_headers("admin"),
    )
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


@pytest.mark.parametrize(
    ("role", "target", "manage_user", "modify_permissions"),
    [
        ("admin", "staff", True, True),
        ("admin", "admin", False, False),
        ("admin", "tenant_owner", False, False),
        ("tenant_owner", "tenant_owner", True, True),
        ("manager", "staff", False, False),
        ("admin", "contractor", False, False),
    ],
)
async def test_target_role_capabilities(
    client: AsyncClient,
    session_headers: Headers,
    role: str,
    target: str,
    manage_user: bool,
    modify_permissions: bool,
) -> None:
    response = await client.get(
        f"/api/v1/authorization/roles/{target}", headers=session_headers(role)
    )
    assert response.status_code == 200
    assert response.json() == {
        "target_role": target,
        "can_manage_user": manage_user,
        "can_modify_role_permissions": modify_permissions,
    }


async def test_audit_access_guard(client: AsyncClient, session_headers: Headers) -> None:
    allowed = await client.get(
        "/api/v1/authorization/audit-access", headers=session_headers("admin")
    )
    assert allowed.status_code == 200
    denied = await client.get(
        "/api/v1/authorization/audit-access", headers=session_headers("manager")
    )
    assert denied.status_code == 403
    body = denied.json()
    assert body["error"] == "PERMISSION_DENIED"
    assert body["details"] == {"resource": "audit", "action": "read"}


async def test_audit_access_guard_uses_session_list(
    client: AsyncClient, session_headers: Headers
) -> None:
    response = await client.get(
        "/api/v1/authorization/audit-access",
        headers=session_headers("manager", ["audit:read"]),
    )
    assert response.status_code == 200


async def test_dynamic_permissions_disabled(
    client: AsyncClient,
    session_headers: Headers,
    monkeypatch: pytest.MonkeyPatch,
    restore_settings: None,
) -> None:
    monkeypatch.setenv("DYNAMIC_PERMISSIONS_ENABLED", "false")
    get_settings.cache_clear()
    response = await client.post(
        "/api/v1/authorization/check",
        json={"resource": "inventory", "action": "create"},
        headers=session_headers("manager", ["reports:read"]),
    )
    assert response.json()["allowed"] is True
