"""Static role permission tables.

Declarative, read-only data: the legacy coarse section table, the
role -> resource -> actions table, the role hierarchy, the navigation map
used with session permission lists, and role display keys. Lookups over
these tables live in app.application.services; nothing here branches.

Tables are wrapped in MappingProxyType with frozenset values so they
cannot be mutated at runtime. A (role, resource) pair missing from a table
means "no grant".
"""

from collections.abc import Mapping
from types import MappingProxyType

from app.domain.enums import Action, NavigationItem, Resource, Role, SectionFlag

_C = Action.CREATE
_R = Action.READ
_U = Action.UPDATE
_D = Action.DELETE
_IMP = Action.IMPORT
_EXP = Action.EXPORT
_M = Action.MANAGE


def _freeze(table: dict) -> Mapping:
    """Wrap a two-level dict so neither level can be mutated."""
    return MappingProxyType({k: MappingProxyType(dict(v)) for k, v in table.items()})


def _sections(*granted: SectionFlag) -> dict[SectionFlag, bool]:
    return {flag: flag in granted for flag in SectionFlag}


ROLE_SECTION_FLAGS: Mapping[Role, Mapping[SectionFlag, bool]] = _freeze(
    {
        Role.TENANT_OWNER: _sections(*SectionFlag),
        Role.ADMIN: _sections(
            SectionFlag.DASHBOARD,
            SectionFlag.USERS,
            SectionFlag.AUDIT,
            SectionFlag.INVENTORY,
            SectionFlag.CUSTOMERS,
            SectionFlag.RENTALS,
            SectionFlag.REPORTS,
        ),
        Role.MANAGER: _sections(
            SectionFlag.DASHBOARD,
            SectionFlag.INVENTORY,
            SectionFlag.CUSTOMERS,
            SectionFlag.RENTALS,
            SectionFlag.REPORTS,
        ),
        Role.EMPLOYEE: _sections(
            SectionFlag.DASHBOARD,
            SectionFlag.INVENTORY,
            SectionFlag.CUSTOMERS,
            SectionFlag.RENTALS,
        ),
        Role.STAFF: _sections(
            SectionFlag.DASHBOARD,
            SectionFlag.CUSTOMERS,
            SectionFlag.RENTALS,
        ),
    }
)

ROLE_RESOURCE_ACTIONS: Mapping[Role, Mapping[Resource, frozenset[Action]]] = _freeze(
    {
        Role.TENANT_OWNER: {
            Resource.USERS: frozenset({_C, _R, _U, _D, _M}),
            Resource.AUDIT: frozenset({_R, _EXP, _M}),
            Resource.INVENTORY: frozenset({_C, _R, _U, _D, _IMP, _EXP}),
            Resource.CUSTOMERS: frozenset({_C, _R, _U, _D, _IMP, _EXP}),
            Resource.RENTALS: frozenset({_C, _R, _U, _D, _M}),
            Resource.REPORTS: frozenset({_R, _EXP, _M}),
            Resource.SETTINGS: frozenset({_R, _U, _M}),
            Resource.PERMISSIONS: frozenset({_R, _U, _M}),
        },
        Role.ADMIN: {
            Resource.USERS: frozenset({_C, _R, _U, _D}),
            Resource.AUDIT: frozenset({_R, _EXP}),
            Resource.INVENTORY: frozenset({_C, _R, _U, _D, _IMP, _EXP}),
            Resource.CUSTOMERS: frozenset({_C, _R, _U, _D, _IMP, _EXP}),
            Resource.RENTALS: frozenset({_C, _R, _U, _D}),
            Resource.REPORTS: frozenset({_R, _EXP}),
            Resource.SETTINGS: frozenset(),
            Resource.PERMISSIONS: frozenset(),
        },
        Role.MANAGER: {
            Resource.USERS: frozenset(),
            Resource.AUDIT: frozenset(),
            Resource.INVENTORY: frozenset({_C, _R, _U}),
            Resource.CUSTOMERS: frozenset({_C, _R, _U}),
            Resource.RENTALS: frozenset({_C, _R, _U}),
            Resource.REPORTS: frozenset({_R}),
            Resource.SETTINGS: frozenset(),
            Resource.PERMISSIONS: frozenset(),
        },
        Role.EMPLOYEE: {
            Resource.USERS: frozenset(),
            Resource.AUDIT: frozenset(),
            Resource.INVENTORY: frozenset({_R, _U}),
            Resource.CUSTOMERS: frozenset({_R, _U}),
            Resource.RENTALS: frozenset({_C, _R, _U}),
            Resource.REPORTS: frozenset(),
            Resource.SETTINGS: frozenset(),
            Resource.PERMISSIONS: frozenset(),
        },
        Role.STAFF: {
            Resource.USERS: frozenset(),
            Resource.AUDIT: frozenset(),
            Resource.INVENTORY: frozenset(),
            Resource.CUSTOMERS: frozenset({_R}),
            Resource.RENTALS: frozenset({_R, _U}),
            Resource.REPORTS: frozenset(),
            Resource.SETTINGS: frozenset(),
            Resource.PERMISSIONS: frozenset(),
        },
    }
)

# staff < employee < manager < admin < tenant_owner
ROLE_HIERARCHY: Mapping[Role, int] = MappingProxyType(
    {
        Role.STAFF: 1,
        Role.EMPLOYEE: 2,
        Role.MANAGER: 3,
        Role.ADMIN: 4,
        Role.TENANT_OWNER: 5,
    }
)

# Any one listed grant opens the item. PROFILE needs none.
NAVIGATION_REQUIRED_PERMISSIONS: Mapping[NavigationItem, frozenset[str]] = (
    MappingProxyType(
        {
            NavigationItem.DASHBOARD: frozenset({"dashboard:read"}),
            NavigationItem.USERS: frozenset(
                {
                    "users:read",
                    "users:create",
                    "users:update",
                    "users:delete",
                    "users:manage",
                }
            ),
            NavigationItem.AUDIT: frozenset({"audit:read"}),
            NavigationItem.PERMISSIONS: frozenset(
                {"permissions:read", "permissions:manage"}
            ),
            NavigationItem.CATEGORIES: frozenset(
                {
                    "categories:read",
                    "categories:create",
                    "categories:update",
                    "categories:delete",
                    "categories:manage",
                }
            ),
            NavigationItem.INVENTORY: frozenset(
                {
                    "inventory:read",
                    "inventory:create",
                    "inventory:update",
                    "inventory:delete",
                }
            ),
            NavigationItem.CUSTOMERS: frozenset(
                {
                    "customers:read",
                    "customers:create",
                    "customers:update",
                    "customers:delete",
                }
            ),
            NavigationItem.RENTALS: frozenset(
                {
                    "rentals:read",
                    "rentals:create",
                    "rentals:update",
                    "rentals:delete",
                }
            ),
            NavigationItem.REPORTS: frozenset({"reports:read"}),
            NavigationItem.SETTINGS: frozenset(
                {"settings:read", "settings:update", "system:read", "system:update"}
            ),
            NavigationItem.PROFILE: frozenset(),
        }
    )
)

ROLE_DISPLAY_KEYS: Mapping[Role, str] = MappingProxyType(
    {role: f"common.roles.{role.value}" for role in Role}
)
