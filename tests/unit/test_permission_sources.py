"""Tests for permission sources and per-actor source selection."""

from app.application.services.permission_sources import (
    DynamicPermissionSource,
    StaticPermissionSource,
    select_permission_source,
)
from app.domain.enums import Action, PermissionSourceKind, Resource
from app.domain.value_objects.core import Actor


class TestSelectPermissionSource:
    def test_non_empty_list_selects_dynamic(self) -> None:
        actor = Actor(role="manager", permissions=frozenset({"reports:read"}))
        source = select_permission_source(actor)
        assert isinstance(source, DynamicPermissionSource)
        assert source.kind is PermissionSourceKind.DYNAMIC

    def test_empty_list_selects_static(self) -> None:
        source = select_permission_source(Actor(role="manager"))
        assert isinstance(source, StaticPermissionSource)
        assert source.kind is PermissionSourceKind.STATIC

    def test_blank_frozenset_selects_static(self) -> None:
        actor = Actor(role="manager", permissions=frozenset({""}))
        source = select_permission_source(actor)
        assert source.kind is PermissionSourceKind.STATIC
        assert source.decide(Resource.INVENTORY, Action.CREATE)

    def test_non_string_frozenset_selects_static(self) -> None:
        actor = Actor(role="manager", permissions=frozenset({1, None}))  # type: ignore[arg-type]
        assert isinstance(select_permission_source(actor), StaticPermissionSource)

    def test_dynamic_disabled_selects_static(self) -> None:
        actor = Actor(role="manager", permissions=frozenset({"reports:read"}))
        source = select_permission_source(actor, dynamic_enabled=False)
        assert isinstance(source, StaticPermissionSource)


class TestSourcesAreNotMerged:
    def test_dynamic_list_withholds_what_table_grants(self) -> None:
        """Manager's role table grants inventory; its session list does not."""
        actor = Actor(role="manager", permissions=frozenset({"reports:read"}))
        source = select_permission_source(actor)
        assert not source.decide(Resource.INVENTORY, Action.CREATE)
        assert not source.can_access("inventory")
        assert StaticPermissionSource("manager").can_access("inventory")

    def test_dynamic_list_grants_what_table_withholds(self) -> None:
        actor = Actor(role="staff", permissions=frozenset({"inventory:read"}))
        source = select_permission_source(actor)
        assert source.decide("inventory", "read")
        assert not StaticPermissionSource("staff").decide("inventory", "read")


class TestStaticPermissionSource:
    def test_decide_and_allowed(self) -> None:
        source = StaticPermissionSource("employee")
        assert source.decide("rentals", "create")
        assert not source.decide("rentals", "delete")
        assert source.allowed_actions("rentals") == {Action.CREATE, Action.READ, Action.UPDATE}

    def test_has_any(self) -> None:
        source = StaticPermissionSource("staff")
        assert source.has_any("customers")
        assert not source.has_any("inventory")

    def test_unknown_role_denies_everything(self) -> None:
        source = StaticPermissionSource("ghost")
        assert not source.decide("rentals", "read")
        assert not source.can_access("profile")


class TestDynamicPermissionSource:
    def test_decide_and_allowed(self) -> None:
        source = DynamicPermissionSource(frozenset({"inventory:read", "inventory:export"}))
        assert source.decide(Resource.INVENTORY, Action.EXPORT)
        assert source.allowed_actions("inventory") == {Action.READ, Action.EXPORT}
        assert source.has_any("inventory")
        assert source.can_access("inventory")
        assert not source.can_access("users")
