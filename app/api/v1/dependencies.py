"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the current session actor and the
authorization service. Routes depend only on these dependencies.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.services.authorization_service import AuthorizationService
from app.core.config import get_settings
from app.domain.exceptions import AuthenticationException
from app.domain.value_objects.core import Actor
from app.infrastructure.security.jwt import actor_from_claims, verify_token

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_actor_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> Actor | None:
    """Return the session actor from the bearer token if present and valid; else None."""
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except ValueError:
        return None
    return actor_from_claims(payload)


async def get_current_actor(
    actor: Annotated[Actor | None, Depends(get_current_actor_optional)],
) -> Actor:
    """Return the session actor; raise AuthenticationException (401) if missing or invalid."""
    if actor is None:
        raise AuthenticationException("Not authenticated")
    return actor


async def get_authorization_service(
    actor: Annotated[Actor, Depends(get_current_actor)],
) -> AuthorizationService:
    """Build the AuthorizationService for the current session (composition root)."""
    settings = get_settings()
    return AuthorizationService(
        actor,
        dynamic_enabled=settings.dynamic_permissions_enabled,
        dashboard_url=settings.dashboard_url,
    )


def require_permission(resource: str, action: str):
    """Dependency factory: require a session that may perform action on resource."""

    async def _require(
        auth_svc: Annotated[AuthorizationService, Depends(get_authorization_service)],
    ) -> Actor:
        auth_svc.require_permission(resource, action)
        return auth_svc.actor

    return _require
