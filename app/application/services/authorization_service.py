"""Authorization service: one query interface over the actor's permission source."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TypeVar

from app.application.dtos.authorization import (
    AuthorizationSummary,
    TargetRoleCapabilities,
)
from app.application.services import dynamic_permissions, role_policy
from app.application.services.permission_sources import select_permission_source
from app.application.services.role_permissions import navigation_item_id
from app.domain.enums import (
    Action,
    NavigationItem,
    PermissionSourceKind,
    Resource,
    Role,
)
from app.domain.exceptions import AuthorizationException
from app.domain.value_objects.core import Actor

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class AuthorizationService:
    """Answers every authorization question for one actor.

    The source (session grants or role table) is chosen once at
    construction and used for all resource/action and navigation checks.
    Role policy checks (user management, role permission editing) use the
    actor's role; editing role permissions additionally requires
    can_manage_permissions from the chosen source.
    """

    def __init__(
        self,
        actor: Actor,
        dynamic_enabled: bool = True,
        dashboard_url: str = role_policy.DEFAULT_DASHBOARD_URL,
    ) -> None:
        self.actor = actor
        self.source = select_permission_source(actor, dynamic_enabled=dynamic_enabled)
        self._dashboard_url = dashboard_url

    @property
    def source_kind(self) -> PermissionSourceKind:
        return self.source.kind

    def has_permission(self, resource: Resource | str, action: Action | str) -> bool:
        """Return True if the actor may perform action on resource."""
        return self.source.decide(resource, action)

    def can_create(self, resource: Resource | str) -> bool:
        return self.has_permission(resource, Action.CREATE)

    def can_read(self, resource: Resource | str) -> bool:
        return self.has_permission(resource, Action.READ)

    def can_update(self, resource: Resource | str) -> bool:
        return self.has_permission(resource, Action.UPDATE)

    def can_delete(self, resource: Resource | str) -> bool:
        return self.has_permission(resource, Action.DELETE)

    def can_import(self, resource: Resource | str) -> bool:
        return self.has_permission(resource, Action.IMPORT)

    def can_export(self, resource: Resource | str) -> bool:
        return self.has_permission(resource, Action.EXPORT)

    def can_manage(self, resource: Resource | str) -> bool:
        return self.has_permission(resource, Action.MANAGE)

    def allowed_actions(self, resource: Resource | str) -> frozenset[Action]:
        """Return every action the actor may perform on resource."""
        return self.source.allowed_actions(resource)

    def has_any_permission(self, resource: Resource | str) -> bool:
        return self.source.has_any(resource)

    def can_access(self, nav_item_id: NavigationItem | str) -> bool:
        """Return True if the navigation item is open to the actor."""
        return self.source.can_access(nav_item_id)

    def visible_navigation(self) -> tuple[NavigationItem, ...]:
        """Return every navigation item open to the actor, in menu order."""
        return tuple(item for item in NavigationItem if self.can_access(item))

    def filter_navigation(self, items: Iterable[_T]) -> list[_T]:
        """Return the items (mappings or objects with ``id``) open to the actor."""
        return [item for item in items if self.can_access(navigation_item_id(item))]

    @property
    def can_manage_permissions(self) -> bool:
        """True if the actor may open the permission editing screen."""
        if self.source_kind is PermissionSourceKind.DYNAMIC:
            return dynamic_permissions.has_dynamic_permission(
                self.actor.permissions, Resource.PERMISSIONS, Action.MANAGE
            )
        return role_policy.can_manage_permissions(self.actor.role)

    @property
    def can_view_audit(self) -> bool:
        """True if the actor may view audit logs."""
        if self.source_kind is PermissionSourceKind.DYNAMIC:
            return dynamic_permissions.has_dynamic_permission(
                self.actor.permissions, Resource.AUDIT, Action.READ
            )
        return role_policy.can_view_audit(self.actor.role)

    def can_manage_user(self, target_role: Role | str) -> bool:
        return role_policy.can_manage_user(self.actor.role, target_role)

    def can_modify_role_permissions(self, target_role: Role | str) -> bool:
        return self.can_manage_permissions and role_policy.can_modify_role_permissions(
            self.actor.role, target_role
        )

    def target_role_capabilities(self, target_role: Role | str) -> TargetRoleCapabilities:
        return TargetRoleCapabilities(
            target_role=str(getattr(target_role, "value", target_role)),
            can_manage_user=self.can_manage_user(target_role),
            can_modify_role_permissions=self.can_modify_role_permissions(target_role),
        )

    @property
    def dashboard_url(self) -> str:
        return role_policy.get_role_dashboard_url(self.actor.role, self._dashboard_url)

    def require_permission(self, resource: Resource | str, action: Action | str) -> None:
        """Raise AuthorizationException if the actor may not perform action on resource."""
        if self.has_permission(resource, action):
            return
        resource_name = str(getattr(resource, "value", resource))
        action_name = str(getattr(action, "value", action))
        logger.info(
            "Permission denied: user=%s role=%s source=%s %s:%s",
            self.actor.user_id,
            self.actor.role,
            self.source_kind.value,
            resource_name,
            action_name,
        )
        raise AuthorizationException(resource=resource_name, action=action_name)

    def summary(self) -> AuthorizationSummary:
        """Return the role, navigation and per-resource actions for the dashboard shell."""
        return AuthorizationSummary(
            role=self.actor.role,
            source=self.source_kind,
            dashboard_url=self.dashboard_url,
            role_display_key=role_policy.get_role_display_key(self.actor.role),
            can_manage_permissions=self.can_manage_permissions,
            can_view_audit=self.can_view_audit,
            navigation=self.visible_navigation(),
            resource_actions={
                resource.value: self.allowed_actions(resource) for resource in Resource
            },
        )
