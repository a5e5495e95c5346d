"""Application DTOs (no HTTP schema dependency)."""

from app.application.dtos.authorization import (
    AuthorizationSummary,
    TargetRoleCapabilities,
)

__all__ = [
    "AuthorizationSummary",
    "TargetRoleCapabilities",
]
