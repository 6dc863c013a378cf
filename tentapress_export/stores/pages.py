"""
DB-backed page store.

Read-only access to the content records owned by the Pages plugin.

Schema (canonical):
    tp_pages(
        id INTEGER PRIMARY KEY,
        title TEXT,
        slug TEXT,
        status TEXT,        -- optional, added by later plugin versions
        layout TEXT,        -- optional
        blocks TEXT/JSON,   -- optional
        created_at TIMESTAMP,
        updated_at TIMESTAMP
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List

from ..db.connection import DBPool

PAGES_TABLE = "tp_pages"

OPTIONAL_PAGE_FIELDS = ("status", "layout", "blocks")


@dataclass(frozen=True)
class PageSchema:
    """
    Descriptor of which optional page fields the live schema defines.

    Collectors receive this value instead of querying the schema while
    they iterate, so the same rows can be rendered against any schema.
    """

    optional_fields: FrozenSet[str] = frozenset()

    def has(self, field: str) -> bool:
        return field in self.optional_fields

    @classmethod
    def full(cls) -> "PageSchema":
        return cls(frozenset(OPTIONAL_PAGE_FIELDS))


class PageStore:
    """
    Database-backed access to tp_pages.
    """

    def __init__(self, pool: DBPool):
        self.pool = pool

    def is_installed(self) -> bool:
        """
        True when the pages table exists, i.e. the Pages plugin has
        been installed and migrated.
        """
        return self.pool.has_table(PAGES_TABLE)

    def schema(self) -> PageSchema:
        columns = self.pool.column_names(PAGES_TABLE)
        return PageSchema(
            frozenset(f for f in OPTIONAL_PAGE_FIELDS if f in columns)
        )

    def list_pages(self) -> List[dict]:
        """
        Return every page row ordered by id ascending.
        """
        with self.pool.connection() as conn:
            return conn.fetch_all(f"SELECT * FROM {PAGES_TABLE} ORDER BY id")


__all__ = [
    "PAGES_TABLE",
    "OPTIONAL_PAGE_FIELDS",
    "PageSchema",
    "PageStore",
]
