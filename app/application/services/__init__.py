"""Application services: static role lookups, session grant lookups, role policy, authorization."""

from app.application.services.authorization_service import AuthorizationService
from app.application.services.dynamic_permissions import (
    can_access,
    get_dynamic_allowed_actions,
    has_any_resource_permission,
    has_dynamic_permission,
)
from app.application.services.permission_sources import (
    DynamicPermissionSource,
    StaticPermissionSource,
    select_permission_source,
)
from app.application.services.role_permissions import (
    get_allowed_actions,
    get_navigation_items_for_role,
    has_permission,
    has_resource_action,
)
from app.application.services.role_policy import (
    can_manage_permissions,
    can_manage_user,
    can_modify_role_permissions,
    can_view_audit,
    get_role_dashboard_url,
    get_role_display_key,
    get_role_level,
)

__all__ = [
    "AuthorizationService",
    "DynamicPermissionSource",
    "StaticPermissionSource",
    "can_access",
    "can_manage_permissions",
    "can_manage_user",
    "can_modify_role_permissions",
    "can_view_audit",
    "get_allowed_actions",
    "get_dynamic_allowed_actions",
    "get_navigation_items_for_role",
    "get_role_dashboard_url",
    "get_role_display_key",
    "get_role_level",
    "has_any_resource_permission",
    "has_dynamic_permission",
    "has_permission",
    "has_resource_action",
    "select_permission_source",
]
