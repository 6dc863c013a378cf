from __future__ import annotations

from tentapress_export.collectors import (
    SETTINGS_NOT_FOUND,
    ResultKind,
    build_settings_document,
    collect_settings,
)
from tentapress_export.stores import SettingsStore


def test_collect_settings_exports_all_rows_ordered_by_key(seeded_pool):
    result = collect_settings(SettingsStore(seeded_pool))

    assert result.kind is ResultKind.OK
    assert result.document == {
        "count": 2,
        "items": [
            {"key": "mail.from", "value": None, "autoload": False},
            {"key": "site.title", "value": "Café / Bar", "autoload": True},
        ],
    }


def test_collect_settings_missing_table(pool):
    result = collect_settings(SettingsStore(pool))

    assert result.kind is ResultKind.UNAVAILABLE
    assert result.document == {"error": SETTINGS_NOT_FOUND, "items": []}
    assert "tp_settings" in SETTINGS_NOT_FOUND


def test_build_settings_document_coerces_values():
    doc = build_settings_document([
        {"key": "a", "value": 12, "autoload": None},
        {"key": "b", "value": "x", "autoload": "0"},
        {"key": "c", "value": "y", "autoload": "1"},
        {"key": None, "value": None, "autoload": True},
    ])

    assert doc["count"] == 4
    assert doc["items"][0] == {"key": "a", "value": "12", "autoload": True}
    assert doc["items"][1]["autoload"] is False
    assert doc["items"][2]["autoload"] is True
    assert doc["items"][3] == {"key": "", "value": None, "autoload": True}
