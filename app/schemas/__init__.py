"""Pydantic request/response schemas for the API."""

from app.schemas.authorization import (
    AuthorizationSummaryResponse,
    PermissionCheckRequest,
    PermissionCheckResponse,
    TargetRoleCapabilitiesResponse,
)
from app.schemas.health import HealthResponse

__all__ = [
    "AuthorizationSummaryResponse",
    "HealthResponse",
    "PermissionCheckRequest",
    "PermissionCheckResponse",
    "TargetRoleCapabilitiesResponse",
]
