"""
DB-backed store for per-page SEO metadata.

The table is created by the optional SEO plugin; installs without it
simply have no tp_seo_pages table.
"""

from __future__ import annotations

from typing import List

from ..db.connection import DBPool

SEO_TABLE = "tp_seo_pages"


class SeoStore:
    def __init__(self, pool: DBPool):
        self.pool = pool

    def exists(self) -> bool:
        return self.pool.has_table(SEO_TABLE)

    def list_rows(self) -> List[dict]:
        """
        Return every SEO row ordered by page_id ascending.
        """
        with self.pool.connection() as conn:
            return conn.fetch_all(f"SELECT * FROM {SEO_TABLE} ORDER BY page_id")


__all__ = [
    "SEO_TABLE",
    "SeoStore",
]
