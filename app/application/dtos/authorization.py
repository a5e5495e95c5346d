"""DTOs for authorization queries (no dependency on HTTP schemas)."""

from dataclasses import dataclass, field

from app.domain.enums import Action, NavigationItem, PermissionSourceKind


@dataclass(frozen=True)
class AuthorizationSummary:
    """Everything the dashboard shell needs to render for one session."""

    role: str
    source: PermissionSourceKind
    dashboard_url: str
    role_display_key: str
    can_manage_permissions: bool
    can_view_audit: bool
    navigation: tuple[NavigationItem, ...] = ()
    resource_actions: dict[str, frozenset[Action]] = field(default_factory=dict)


@dataclass(frozen=True)
class TargetRoleCapabilities:
    """What the session may do to users and permission sets of a target role."""

    target_role: str
    can_manage_user: bool
    can_modify_role_permissions: bool
