"""Authorization API: what the current session may see and do.

Answers are derived from the bearer session only. Unknown roles,
resources and actions are answered as denials, never as 4xx.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_authorization_service, require_permission
from app.application.services.authorization_service import AuthorizationService
from app.domain.value_objects.core import Actor
from app.schemas.authorization import (
    AuthorizationSummaryResponse,
    PermissionCheckRequest,
    PermissionCheckResponse,
    TargetRoleCapabilitiesResponse,
)

router = APIRouter()


@router.get("/me", response_model=AuthorizationSummaryResponse)
async def get_my_authorization(
    auth_svc: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> AuthorizationSummaryResponse:
    """Role, landing page, open navigation items and per-resource actions."""
    return AuthorizationSummaryResponse.from_summary(auth_svc.summary())


@router.post("/check", response_model=PermissionCheckResponse)
async def check_permission(
    body: PermissionCheckRequest,
    auth_svc: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> PermissionCheckResponse:
    """Check one resource/action pair for the current session."""
    return PermissionCheckResponse(
        resource=body.resource,
        action=body.action,
        allowed=auth_svc.has_permission(body.resource, body.action),
    )


@router.get("/roles/{target_role}", response_model=TargetRoleCapabilitiesResponse)
async def get_target_role_capabilities(
    target_role: str,
    auth_svc: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> TargetRoleCapabilitiesResponse:
    """Whether the session may manage users of, or edit permissions of, target_role."""
    return TargetRoleCapabilitiesResponse.from_capabilities(
        auth_svc.target_role_capabilities(target_role)
    )


@router.get("/audit-access", response_model=PermissionCheckResponse)
async def get_audit_access(
    _: Annotated[Actor, Depends(require_permission("audit", "read"))],
) -> PermissionCheckResponse:
    """Route guarded by audit:read; 403 for sessions without it."""
    return PermissionCheckResponse(resource="audit", action="read", allowed=True)
