"""Role policy: who may manage permissions, users and audit logs.

Decision tables keyed on role names. The admin carve-outs are explicit
rules and do not consult ROLE_HIERARCHY.
"""

from __future__ import annotations

from app.domain.enums import Role
from app.domain.permission_tables import ROLE_DISPLAY_KEYS, ROLE_HIERARCHY

DEFAULT_DASHBOARD_URL = "/dashboard"

_PERMISSION_MANAGERS = frozenset({Role.TENANT_OWNER, Role.ADMIN})
_AUDIT_VIEWERS = frozenset({Role.TENANT_OWNER, Role.ADMIN})
# Roles an admin may never edit or manage.
_ADMIN_PROTECTED = frozenset({Role.TENANT_OWNER, Role.ADMIN})


def can_manage_permissions(role: Role | str) -> bool:
    """Return True if the role may reach the permission editing screen."""
    return Role.parse(role) in _PERMISSION_MANAGERS


def can_modify_role_permissions(actor_role: Role | str, target_role: Role | str) -> bool:
    """Return True if actor_role may edit the permission set of target_role.

    Tenant owners may edit any role, other owners included. Admins may edit
    every role except tenant_owner and admin. Nobody else may edit roles.
    """
    if not can_manage_permissions(actor_role):
        return False
    actor = Role.parse(actor_role)
    if actor is Role.TENANT_OWNER:
        return True
    if actor is Role.ADMIN:
        target = Role.parse(target_role)
        return target is not None and target not in _ADMIN_PROTECTED
    return False


def can_manage_user(actor_role: Role | str, target_role: Role | str) -> bool:
    """Return True if actor_role may manage a user holding target_role."""
    actor = Role.parse(actor_role)
    if actor is Role.TENANT_OWNER:
        return True
    if actor is Role.ADMIN:
        target = Role.parse(target_role)
        return target is not None and target not in _ADMIN_PROTECTED
    return False


def can_view_audit(role: Role | str) -> bool:
    """Return True if the role may view audit logs."""
    return Role.parse(role) in _AUDIT_VIEWERS


def get_role_level(role: Role | str) -> int:
    """Return the hierarchy level of role (staff=1 .. tenant_owner=5); 0 if unknown."""
    r = Role.parse(role)
    if r is None:
        return 0
    return ROLE_HIERARCHY.get(r, 0)


def get_role_dashboard_url(
    role: Role | str, dashboard_url: str = DEFAULT_DASHBOARD_URL
) -> str:
    """Return the landing page after login.

    Every role lands on the same dashboard, which customizes itself by role.
    """
    return dashboard_url


def get_role_display_key(role: Role | str) -> str:
    """Return the i18n key for the role's display name; the raw value when unknown."""
    r = Role.parse(role)
    if r is None:
        return str(role)
    return ROLE_DISPLAY_KEYS[r]
