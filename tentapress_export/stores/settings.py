"""
DB-backed settings store.

Schema (canonical):
    tp_settings(
        key TEXT PRIMARY KEY,
        value TEXT,
        autoload BOOLEAN DEFAULT TRUE
    )
"""

from __future__ import annotations

from typing import List

from ..db.connection import DBPool

SETTINGS_TABLE = "tp_settings"


class SettingsStore:
    """
    Database-backed access to the key/value settings table.

    Rows are never filtered by autoload; the export wants all of them.
    """

    def __init__(self, pool: DBPool):
        self.pool = pool

    def exists(self) -> bool:
        return self.pool.has_table(SETTINGS_TABLE)

    def list_settings(self) -> List[dict]:
        with self.pool.connection() as conn:
            return conn.fetch_all(
                f"""
                SELECT "key", "value", autoload
                FROM {SETTINGS_TABLE}
                ORDER BY "key"
                """
            )


__all__ = [
    "SETTINGS_TABLE",
    "SettingsStore",
]
