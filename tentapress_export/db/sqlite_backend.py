"""
SQLite backend for the exporter.

Used for:
    - local development
    - tests
    - small single-file TentaPress installs

Implements:
    - connect()
    - helpers
    - has_table() / column_names()
    - init_schema()
"""

from __future__ import annotations
from typing import Set
import sqlite3
from pathlib import Path

from . import helpers
from .backend_base import DBBackend


# ----------------------------------------------------------------------
# Canonical TentaPress schema (pages, settings, SEO)
# ----------------------------------------------------------------------

SQL_SCHEMA = """
CREATE TABLE IF NOT EXISTS tp_pages (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    title       TEXT,
    slug        TEXT,
    status      TEXT DEFAULT 'draft',
    layout      TEXT,
    blocks      TEXT,
    created_at  TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at  TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE UNIQUE INDEX IF NOT EXISTS idx_tp_pages_slug
    ON tp_pages(slug);

CREATE TABLE IF NOT EXISTS tp_settings (
    "key"       TEXT PRIMARY KEY,
    "value"     TEXT,
    autoload    INTEGER DEFAULT 1
);

CREATE TABLE IF NOT EXISTS tp_seo_pages (
    page_id              INTEGER PRIMARY KEY,
    title                TEXT,
    description          TEXT,
    canonical_url        TEXT,
    robots               TEXT,
    og_title             TEXT,
    og_description       TEXT,
    og_image             TEXT,
    twitter_title        TEXT,
    twitter_description  TEXT,
    twitter_image        TEXT,
    FOREIGN KEY (page_id) REFERENCES tp_pages(id)
);
"""


# ----------------------------------------------------------------------
# Backend implementation
# ----------------------------------------------------------------------

class SQLiteBackend(DBBackend):
    """
    Minimal SQLite backend.

    Parameters
    ----------
    db_path : str
        Path to the SQLite database file.
    """

    def __init__(self, db_path: str):
        self.path = Path(db_path)
        self._helpers = helpers

    @property
    def helpers(self):
        return self._helpers

    # ------------------------------------------------------------------
    # Connection handling
    # ------------------------------------------------------------------

    def connect(self) -> sqlite3.Connection:
        """
        Open a SQLite3 connection with row_factory=dict-like access.
        """
        conn = sqlite3.connect(str(self.path))
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def has_table(self, conn, table: str) -> bool:
        row = conn.fetch_one(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?",
            (table,),
        )
        return row is not None

    def column_names(self, conn, table: str) -> Set[str]:
        # PRAGMA arguments cannot be bound; only accept plain identifiers.
        if not table.replace("_", "").isalnum():
            raise ValueError(f"Invalid table name: {table!r}")
        rows = conn.fetch_all(f"PRAGMA table_info({table})")
        return {r["name"] for r in rows}

    # ------------------------------------------------------------------
    # Schema initializer
    # ------------------------------------------------------------------

    def init_schema(self, conn) -> None:
        """
        Create the TentaPress tables and indices if they do not exist.

        Idempotent – safe to call multiple times. Accepts either a raw
        sqlite3 connection or a DBConnection wrapper.
        """
        raw = getattr(conn, "raw", conn)
        raw.executescript(SQL_SCHEMA)
        raw.commit()
