"""Domain enumerations for the rental dashboard authorization model.

Enums represent the closed vocabularies the authorization engine decides
over: roles, resources, actions, page-level section flags and navigation
items. Every enum offers a fail-closed parse() that maps unknown
identifiers to None instead of raising.
"""

from enum import Enum
from typing import TypeVar

_E = TypeVar("_E", bound="_VocabularyMixin")


class _VocabularyMixin:
    """Mixin that adds values() and a fail-closed parse() to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]  # type: ignore[attr-defined]

    @classmethod
    def parse(cls: type[_E], value: object) -> _E | None:
        """Return the member for value, or None when value is not a known identifier.

        Accepts members of this enum and their plain string values. Anything
        else (unknown strings, other enums, None, non-strings) yields None.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)  # type: ignore[call-arg]
        except ValueError:
            return None


class Role(_VocabularyMixin, str, Enum):
    """Actor classification assigned by the backend; never mutated client-side."""

    TENANT_OWNER = "tenant_owner"
    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"
    STAFF = "staff"


class Resource(_VocabularyMixin, str, Enum):
    """Named capability area an action is performed on."""

    USERS = "users"
    AUDIT = "audit"
    INVENTORY = "inventory"
    CUSTOMERS = "customers"
    RENTALS = "rentals"
    REPORTS = "reports"
    SETTINGS = "settings"
    PERMISSIONS = "permissions"


class Action(_VocabularyMixin, str, Enum):
    """Operation on a resource. MANAGE is the blanket grant of the top role."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    IMPORT = "import"
    EXPORT = "export"
    MANAGE = "manage"


class SectionFlag(_VocabularyMixin, str, Enum):
    """Coarse page-level flags ("can the user see this section at all")."""

    DASHBOARD = "dashboard"
    USERS = "users"
    AUDIT = "audit"
    INVENTORY = "inventory"
    CUSTOMERS = "customers"
    RENTALS = "rentals"
    REPORTS = "reports"
    SETTINGS = "settings"
    PERMISSIONS = "permissions"


class NavigationItem(_VocabularyMixin, str, Enum):
    """Dashboard navigation entries gated by authorization."""

    DASHBOARD = "dashboard"
    USERS = "users"
    AUDIT = "audit"
    PERMISSIONS = "permissions"
    CATEGORIES = "categories"
    INVENTORY = "inventory"
    CUSTOMERS = "customers"
    RENTALS = "rentals"
    REPORTS = "reports"
    SETTINGS = "settings"
    PROFILE = "profile"


class PermissionSourceKind(_VocabularyMixin, str, Enum):
    """Which authorization source answered for an actor."""

    STATIC = "static"
    DYNAMIC = "dynamic"
