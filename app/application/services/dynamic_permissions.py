"""Lookups over the permission list delivered with the session at login.

Grants are ``resource:action`` strings. The vocabulary is open (the
backend also sends e.g. ``categories:*`` and ``system:*`` grants), so these
helpers match strings rather than enum members. An empty or missing list
grants nothing.
"""

from __future__ import annotations

from collections.abc import Collection

from app.domain.enums import Action, NavigationItem, Resource
from app.domain.permission_tables import NAVIGATION_REQUIRED_PERMISSIONS
from app.domain.value_objects.core import PERMISSION_SEPARATOR, PermissionCode


def _name(value: Resource | Action | str) -> str:
    return str(getattr(value, "value", value))


def has_dynamic_permission(
    permissions: Collection[str] | None,
    resource: Resource | str,
    action: Action | str,
) -> bool:
    """Return True if ``resource:action`` is in the permission list."""
    if not permissions:
        return False
    return f"{_name(resource)}{PERMISSION_SEPARATOR}{_name(action)}" in permissions


def has_any_resource_permission(
    permissions: Collection[str] | None,
    resource: Resource | str,
) -> bool:
    """Return True if the list holds any grant on resource."""
    if not permissions:
        return False
    prefix = f"{_name(resource)}{PERMISSION_SEPARATOR}"
    return any(isinstance(p, str) and p.startswith(prefix) for p in permissions)


def get_dynamic_allowed_actions(
    permissions: Collection[str] | None,
    resource: Resource | str,
) -> frozenset[Action]:
    """Return the actions granted on resource; unknown action names are dropped."""
    if not permissions:
        return frozenset()
    name = _name(resource)
    actions: set[Action] = set()
    for raw in permissions:
        code = PermissionCode.parse(raw)
        if code is None or code.resource != name:
            continue
        action = Action.parse(code.action)
        if action is not None:
            actions.add(action)
    return frozenset(actions)


def can_access(
    permissions: Collection[str] | None,
    nav_item_id: NavigationItem | str,
) -> bool:
    """Return True if any grant in the list opens the navigation item.

    An empty or missing list opens nothing, PROFILE included. With a
    non-empty list PROFILE needs no specific grant. Unknown item ids are
    closed.
    """
    if not permissions:
        return False
    nav = NavigationItem.parse(nav_item_id)
    if nav is None:
        return False
    required = NAVIGATION_REQUIRED_PERMISSIONS.get(nav, frozenset())
    if not required:
        return nav is NavigationItem.PROFILE
    return any(p in permissions for p in required)
