"""Domain value objects for the authorization model.

Value objects are immutable types with no identity, only value.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

PERMISSION_SEPARATOR = ":"


@dataclass(frozen=True)
class PermissionCode:
    """A session permission string of the form ``resource:action``.

    The backend vocabulary is open (e.g. ``categories:delete``,
    ``system:update``), so resource and action are kept as plain strings.
    """

    resource: str
    action: str

    def __str__(self) -> str:
        return f"{self.resource}{PERMISSION_SEPARATOR}{self.action}"

    @classmethod
    def parse(cls, raw: object) -> "PermissionCode | None":
        """Return the code for ``resource:action``; None when raw is malformed.

        Exactly one separator with non-empty halves is required.
        """
        if not isinstance(raw, str):
            return None
        resource, sep, action = raw.partition(PERMISSION_SEPARATOR)
        if not sep or not resource or not action or PERMISSION_SEPARATOR in action:
            return None
        return cls(resource=resource, action=action)


def normalize_permissions(permissions: Iterable[object] | str | None) -> frozenset[str]:
    """Return the string grants in permissions as a frozenset (None -> empty).

    A bare string is one grant, not a sequence of characters.
    """
    if not permissions:
        return frozenset()
    if isinstance(permissions, str):
        return frozenset({permissions})
    return frozenset(p for p in permissions if isinstance(p, str) and p)


@dataclass(frozen=True)
class Actor:
    """Who is asking: the role and dynamic grants of one authenticated session.

    Built from the login/session payload and passed explicitly to every
    authorization call. ``role`` is kept as the raw backend string so that an
    unknown role still reaches the engine and is denied there.
    """

    role: str
    permissions: frozenset[str] = field(default_factory=frozenset)
    user_id: str | None = None
    session_expires_at: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "permissions", normalize_permissions(self.permissions))

    @property
    def has_dynamic_permissions(self) -> bool:
        """True when the session carries a non-empty permission list."""
        return bool(self.permissions)
