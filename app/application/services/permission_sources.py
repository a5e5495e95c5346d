"""Permission sources: the static role table and the session grant list.

select_permission_source() picks exactly one source per actor. The two are
never merged, so a grant the session list withholds cannot come back via
the role table.
"""

from __future__ import annotations

from app.application.services import dynamic_permissions, role_permissions
from app.domain.enums import Action, NavigationItem, PermissionSourceKind, Resource
from app.domain.value_objects.core import Actor


class StaticPermissionSource:
    """Answers from the legacy role tables for one role."""

    kind = PermissionSourceKind.STATIC

    def __init__(self, role: str) -> None:
        self.role = role

    def decide(self, resource: Resource | str, action: Action | str) -> bool:
        return role_permissions.has_resource_action(self.role, resource, action)

    def allowed_actions(self, resource: Resource | str) -> frozenset[Action]:
        return role_permissions.get_allowed_actions(self.role, resource)

    def has_any(self, resource: Resource | str) -> bool:
        return bool(self.allowed_actions(resource))

    def can_access(self, nav_item_id: NavigationItem | str) -> bool:
        return role_permissions.can_open_navigation_item(self.role, nav_item_id)

    def __repr__(self) -> str:
        return f"StaticPermissionSource(role={self.role!r})"


class DynamicPermissionSource:
    """Answers from the permission strings delivered with the session."""

    kind = PermissionSourceKind.DYNAMIC

    def __init__(self, permissions: frozenset[str]) -> None:
        self.permissions = permissions

    def decide(self, resource: Resource | str, action: Action | str) -> bool:
        return dynamic_permissions.has_dynamic_permission(
            self.permissions, resource, action
        )

    def allowed_actions(self, resource: Resource | str) -> frozenset[Action]:
        return dynamic_permissions.get_dynamic_allowed_actions(
            self.permissions, resource
        )

    def has_any(self, resource: Resource | str) -> bool:
        return dynamic_permissions.has_any_resource_permission(
            self.permissions, resource
        )

    def can_access(self, nav_item_id: NavigationItem | str) -> bool:
        return dynamic_permissions.can_access(self.permissions, nav_item_id)

    def __repr__(self) -> str:
        return f"DynamicPermissionSource(permissions={len(self.permissions)})"


def select_permission_source(
    actor: Actor,
    dynamic_enabled: bool = True,
) -> StaticPermissionSource | DynamicPermissionSource:
    """Return the single source that decides for actor.

    A non-empty session permission list is authoritative. The role table
    is the fallback when the list is empty or dynamic grants are disabled.
    """
    if dynamic_enabled and actor.has_dynamic_permissions:
        return DynamicPermissionSource(actor.permissions)
    return StaticPermissionSource(actor.role)
