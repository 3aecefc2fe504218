# tests/extensions/test_plugins.py
"""
Tests for entry-point discovery of extensions.
"""

import logging

import pytest

from cannot import Cannot
from cannot.core.extensions import plugins
from cannot.core.extensions.plugins import (
    EXTENSION_ENTRY_POINT_GROUP,
    discover_plugin_extensions,
    load_plugins,
)


class FakeEntryPoint:
    def __init__(self, name, target, fail=False):
        self.name = name
        self.value = f"fake_plugin:{name}"
        self._target = target
        self._fail = fail

    def load(self):
        if self._fail:
            raise ImportError(f"no module named {self.name}")
        return self._target


def http_status_extension(cls):
    cls.extend("http_status", lambda err: 503 if err.reason else 500, type="get")


@pytest.fixture
def entry_points(monkeypatch):
    found = []

    def fake_entry_points(group=None):
        assert group == EXTENSION_ENTRY_POINT_GROUP
        return list(found)

    monkeypatch.setattr(plugins.importlib.metadata, "entry_points", fake_entry_points)
    return found


class TestDiscovery:

    def test_nothing_installed(self, entry_points):
        assert discover_plugin_extensions() == []
        assert load_plugins() == 0

    def test_loads_callables(self, entry_points):
        entry_points.append(FakeEntryPoint("http_status", http_status_extension))

        assert discover_plugin_extensions() == [http_status_extension]

    def test_broken_plugin_is_skipped(self, entry_points, caplog):
        entry_points.append(FakeEntryPoint("broken", None, fail=True))
        entry_points.append(FakeEntryPoint("http_status", http_status_extension))

        with caplog.at_level(logging.WARNING, logger="cannot.core.extensions.plugins"):
            extensions = discover_plugin_extensions()

        assert extensions == [http_status_extension]
        assert "broken" in caplog.text

    def test_non_callable_is_skipped(self, entry_points):
        entry_points.append(FakeEntryPoint("constant", 42))
        assert discover_plugin_extensions() == []


class TestLoadPlugins:

    def test_installs_once(self, entry_points):
        entry_points.append(FakeEntryPoint("http_status", http_status_extension))

        assert load_plugins() == 1
        assert load_plugins() == 0
        assert Cannot("load", "user").http_status == 500
        assert Cannot("load", "user", "down").http_status == 503

    def test_conflicting_plugin_is_skipped(self, entry_points):
        def conflicting(cls):
            cls.extend("message", "nope")

        entry_points.append(FakeEntryPoint("conflicting", conflicting))
        entry_points.append(FakeEntryPoint("http_status", http_status_extension))

        assert load_plugins() == 1
        assert Cannot("load", "user").message == "I could not load user. (No reason)"
