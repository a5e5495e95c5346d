"""Static role lookups over the legacy role permission tables.

Used where a session carries no permission list. Every lookup is a pure,
fail-closed read: an unknown role, flag, resource or action resolves to
False or an empty set, never to an exception.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from app.domain.enums import Action, NavigationItem, Resource, Role, SectionFlag
from app.domain.permission_tables import ROLE_RESOURCE_ACTIONS, ROLE_SECTION_FLAGS

_T = TypeVar("_T")


def has_permission(role: Role | str, flag: SectionFlag | str) -> bool:
    """Return True if the role may see the section at all (coarse page gate)."""
    r = Role.parse(role)
    f = SectionFlag.parse(flag)
    if r is None or f is None:
        return False
    return ROLE_SECTION_FLAGS.get(r, {}).get(f, False) is True


def get_allowed_actions(role: Role | str, resource: Resource | str) -> frozenset[Action]:
    """Return the role's action set for resource; empty for unknown inputs."""
    r = Role.parse(role)
    res = Resource.parse(resource)
    if r is None or res is None:
        return frozenset()
    return ROLE_RESOURCE_ACTIONS.get(r, {}).get(res, frozenset())


def has_resource_action(
    role: Role | str,
    resource: Resource | str,
    action: Action | str,
) -> bool:
    """Return True if the role's action set for resource contains action.

    Membership is exact: MANAGE is not expanded into the other actions.
    """
    a = Action.parse(action)
    if a is None:
        return False
    return a in get_allowed_actions(role, resource)


def navigation_item_id(item: Any) -> object:
    """Return the ``id`` of a navigation item given as a mapping or an object."""
    if isinstance(item, Mapping):
        return item.get("id")
    return getattr(item, "id", None)


def can_open_navigation_item(role: Role | str, item_id: NavigationItem | str) -> bool:
    """Return True if the role's section flags open the navigation item.

    PROFILE is open to every known role. CATEGORIES has no legacy section
    flag and is therefore closed on this path.
    """
    nav = NavigationItem.parse(item_id)
    if nav is None or Role.parse(role) is None:
        return False
    if nav is NavigationItem.PROFILE:
        return True
    return has_permission(role, nav.value)


def get_navigation_items_for_role(role: Role | str, items: Iterable[_T]) -> list[_T]:
    """Return the items (mappings or objects with ``id``) the role may open, in order."""
    return [item for item in items if can_open_navigation_item(role, navigation_item_id(item))]
