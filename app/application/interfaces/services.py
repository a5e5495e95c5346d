"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.enums import Action, NavigationItem, PermissionSourceKind, Resource


class IPermissionSource(Protocol):
    """One authorization source for one actor: the role table or the session grants.

    Implementations are pure and fail-closed; unknown identifiers yield
    False or an empty set.
    """

    @property
    def kind(self) -> PermissionSourceKind:
        """Which source this is (static role table or dynamic grant list)."""

    def decide(self, resource: Resource | str, action: Action | str) -> bool:
        """Return True if action on resource is granted."""

    def allowed_actions(self, resource: Resource | str) -> frozenset[Action]:
        """Return every granted action on resource."""

    def has_any(self, resource: Resource | str) -> bool:
        """Return True if any action on resource is granted."""

    def can_access(self, nav_item_id: NavigationItem | str) -> bool:
        """Return True if the navigation item is open."""
