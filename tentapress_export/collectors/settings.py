"""
Settings collector.

Exports all tp_settings rows, not just the autoloaded ones, so a
restore elsewhere sees the full configuration.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..stores.settings import SETTINGS_TABLE, SettingsStore
from .result import CollectorResult, JsonDict, listing, unavailable_listing
from .values import as_bool, as_optional_str, as_str

SETTINGS_NOT_FOUND = f"Settings table {SETTINGS_TABLE} not found."


def build_settings_document(rows: Iterable[dict]) -> JsonDict:
    return listing([
        {
            "key": as_str(row.get("key")),
            "value": as_optional_str(row.get("value")),
            "autoload": as_bool(row.get("autoload"), default=True),
        }
        for row in rows
    ])


def collect_settings(store: Optional[SettingsStore]) -> CollectorResult:
    if store is None or not store.exists():
        return unavailable_listing(SETTINGS_NOT_FOUND)

    return CollectorResult.ok(build_settings_document(store.list_settings()))
