"""Authorization API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from app.application.dtos.authorization import (
    AuthorizationSummary,
    TargetRoleCapabilities,
)


class PermissionCheckRequest(BaseModel):
    """Request body for checking one resource/action pair.

    Identifiers are plain strings: unknown values are answered with
    ``allowed: false`` rather than a validation error.
    """

    resource: str = Field(..., min_length=1, max_length=64)
    action: str = Field(..., min_length=1, max_length=64)


class PermissionCheckResponse(BaseModel):
    """Result of a permission check."""

    resource: str
    action: str
    allowed: bool


class AuthorizationSummaryResponse(BaseModel):
    """What the dashboard shell may render for the current session."""

    model_config = ConfigDict(from_attributes=True)

    role: str
    source: str = Field(..., description="'dynamic' (session grants) or 'static' (role table)")
    dashboard_url: str
    role_display_key: str
    can_manage_permissions: bool
    can_view_audit: bool
    navigation: list[str]
    resource_actions: dict[str, list[str]]

    @classmethod
    def from_summary(cls, summary: AuthorizationSummary) -> "AuthorizationSummaryResponse":
        return cls(
            role=summary.role,
            source=summary.source.value,
            dashboard_url=summary.dashboard_url,
            role_display_key=summary.role_display_key,
            can_manage_permissions=summary.can_manage_permissions,
            can_view_audit=summary.can_view_audit,
            navigation=[item.value for item in summary.navigation],
            resource_actions={
                resource: sorted(a.value for a in actions)
                for resource, actions in summary.resource_actions.items()
            },
        )


class TargetRoleCapabilitiesResponse(BaseModel):
    """What the current session may do to users and permission sets of a role."""

    model_config = ConfigDict(from_attributes=True)

    target_role: str
    can_manage_user: bool
    can_modify_role_permissions: bool

    @classmethod
    def from_capabilities(
        cls, capabilities: TargetRoleCapabilities
    ) -> "TargetRoleCapabilitiesResponse":
        return cls.model_validate(capabilities)
