from __future__ import annotations

import json

from tentapress_export.collectors import ResultKind, collect_plugins, read_plugin_cache
from tentapress_export.utils.paths import StoragePaths

from conftest import FakePluginManager


class ExplodingManager:
    def enabled_plugin_ids(self):
        raise AssertionError("live registry must not be consulted")


def _paths(tmp_path, cache):
    return StoragePaths(export_dir=tmp_path / "exports", plugin_cache=cache)


def test_cache_file_wins_over_live_registry(tmp_path, plugin_cache):
    plugin_cache.parent.mkdir(parents=True)
    plugin_cache.write_text(json.dumps({"enabled": ["a", "b"]}), encoding="utf-8")

    result = collect_plugins(_paths(tmp_path, plugin_cache), ExplodingManager())

    assert result.kind is ResultKind.OK
    assert result.document == {"enabled": ["a", "b"], "cache_path": str(plugin_cache)}


def test_cache_ids_are_stringified(tmp_path, plugin_cache):
    plugin_cache.parent.mkdir(parents=True)
    plugin_cache.write_text(json.dumps({"enabled": [1, "x", 2.5]}), encoding="utf-8")

    assert read_plugin_cache(str(plugin_cache)) == ["1", "x", "2.5"]


def test_falls_back_to_live_registry_when_cache_missing(tmp_path, plugin_cache):
    result = collect_plugins(_paths(tmp_path, plugin_cache), FakePluginManager(["p1", 7]))

    assert result.document == {"enabled": ["p1", "7"], "cache_path": str(plugin_cache)}


def test_falls_back_when_cache_has_no_enabled_list(tmp_path, plugin_cache):
    plugin_cache.parent.mkdir(parents=True)
    plugin_cache.write_text(json.dumps({"enabled": "p1"}), encoding="utf-8")

    result = collect_plugins(_paths(tmp_path, plugin_cache), FakePluginManager(["p2"]))
    assert result.document["enabled"] == ["p2"]


def test_malformed_cache_is_ignored(tmp_path, plugin_cache):
    plugin_cache.parent.mkdir(parents=True)
    plugin_cache.write_text("{broken", encoding="utf-8")

    assert read_plugin_cache(str(plugin_cache)) is None
    result = collect_plugins(_paths(tmp_path, plugin_cache), None)
    assert result.document == {"enabled": [], "cache_path": str(plugin_cache)}


def test_alternate_registry_accessor_names(tmp_path, plugin_cache):
    class Legacy:
        def get_enabled_plugin_ids(self):
            return None

        def enabled(self):
            return ("x", "y")

    result = collect_plugins(_paths(tmp_path, plugin_cache), Legacy())
    assert result.document["enabled"] == ["x", "y"]


def test_no_sources_at_all():
    result = collect_plugins(None, None)

    assert result.kind is ResultKind.OK
    assert result.document == {"enabled": [], "cache_path": None}


def test_resolver_returning_nothing():
    class Blank:
        def plugin_cache_path(self):
            return ""

    result = collect_plugins(Blank(), FakePluginManager(["z"]))
    assert result.document == {"enabled": ["z"], "cache_path": None}
