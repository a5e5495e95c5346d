"""Domain layer: enums, permission tables, value objects, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import (
    Action,
    NavigationItem,
    PermissionSourceKind,
    Resource,
    Role,
    SectionFlag,
)
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    DashboardException,
    ValidationException,
)
from app.domain.value_objects import Actor, PermissionCode

__all__ = [
    "Action",
    "Actor",
    "AuthenticationException",
    "AuthorizationException",
    "DashboardException",
    "NavigationItem",
    "PermissionCode",
    "PermissionSourceKind",
    "Resource",
    "Role",
    "SectionFlag",
    "ValidationException",
]
