"""Domain value objects and shared value types."""

from app.domain.value_objects.core import (
    PERMISSION_SEPARATOR,
    Actor,
    PermissionCode,
    normalize_permissions,
)

__all__ = [
    "PERMISSION_SEPARATOR",
    "Actor",
    "PermissionCode",
    "normalize_permissions",
]
