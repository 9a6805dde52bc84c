"""Tests for PluginManager — registration, hook relay and membership types."""

from __future__ import annotations

import logging
from typing import ClassVar

import pytest

from clubctl.domain.factory import MembershipFactory
from clubctl.domain.membership import Membership, MonthlyMembership
from clubctl.plugins.hookspecs import hookimpl
from clubctl.plugins.manager import PluginManager


class _StudentMembership(Membership):
    label: ClassVar[str] = "student"

    def get_price(self) -> float:
        return 300.0


class _DummyPlugin:
    @hookimpl
    def post_enroll(self, client_name: str, membership_type: str) -> None:
        pass


class _MembershipTypePlugin:
    @hookimpl
    def register_membership_types(self) -> dict[str, type[Membership]]:
        return {"Student": _StudentMembership}


class _ConflictingPlugin:
    @hookimpl
    def register_membership_types(self) -> dict[str, type[Membership]]:
        return {"month": MonthlyMembership}


class _BrokenPlugin:
    @hookimpl
    def register_membership_types(self) -> dict[str, type[Membership]]:
        raise RuntimeError("boom")


class _NonDictPlugin:
    @hookimpl
    def register_membership_types(self) -> list[str]:
        return ["student"]


class TestPluginManager:
    def test_hook_relay_accessible(self) -> None:
        pm = PluginManager()
        assert hasattr(pm.hook, "post_enroll")
        assert hasattr(pm.hook, "register_membership_types")

    def test_register_plugin(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin(), name="dummy")
        assert "dummy" in pm.list_plugin_names()

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin())
        assert "_DummyPlugin" in pm.list_plugin_names()

    def test_unregister_plugin(self) -> None:
        pm = PluginManager()
        plugin = _DummyPlugin()
        pm.register_plugin(plugin, name="dummy")
        pm.unregister(plugin)
        assert "dummy" not in pm.list_plugin_names()

    def test_discover_and_load_keeps_direct_registrations(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin(), name="dummy")
        names = pm.discover_and_load()
        assert "dummy" in names
        assert isinstance(names, list)


class TestLoadMembershipTypes:
    def test_registers_plugin_types(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_MembershipTypePlugin())
        factory = MembershipFactory()

        added = pm.load_membership_types(factory)

        assert added == ["student"]
        membership = factory.create_membership("STUDENT")
        assert isinstance(membership, _StudentMembership)
        assert membership.get_price() == 300.0

    def test_conflict_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        pm = PluginManager()
        pm.register_plugin(_ConflictingPlugin())
        factory = MembershipFactory()
        with caplog.at_level(logging.WARNING, logger="clubctl"):
            added = pm.load_membership_types(factory)
        assert added == []
        assert "Skipping membership type" in caplog.text
        assert factory.types()["month"] is MonthlyMembership

    def test_failing_hook_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        pm = PluginManager()
        pm.register_plugin(_BrokenPlugin())
        pm.register_plugin(_MembershipTypePlugin())
        with caplog.at_level(logging.WARNING, logger="clubctl"):
            added = pm.load_membership_types(MembershipFactory())
        assert added == ["student"]
        assert "Failed to collect membership types" in caplog.text

    def test_non_dict_is_skipped(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_NonDictPlugin())
        assert pm.load_membership_types(MembershipFactory()) == []

    def test_plugin_without_hook_ignored(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin())
        assert pm.load_membership_types(MembershipFactory()) == []
