from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List

import pytest

from tentapress_export.db import DBPool, SQLiteBackend
from tentapress_export.export import Exporter
from tentapress_export.stores import PageStore, SeoStore, SettingsStore
from tentapress_export.utils.paths import StoragePaths

FIXED_NOW = datetime(2026, 10, 16, 9, 30, 0, tzinfo=timezone.utc)


def insert_rows(pool: DBPool, table: str, rows: Iterable[dict]) -> None:
    rows = list(rows)
    if not rows:
        return
    columns = list(rows[0].keys())
    quoted = ", ".join(f'"{c}"' for c in columns)
    marks = ", ".join("?" for _ in columns)
    with pool.connection() as conn:
        conn.raw.executemany(
            f"INSERT INTO {table} ({quoted}) VALUES ({marks})",
            [tuple(r[c] for c in columns) for r in rows],
        )
        conn.raw.commit()


def run_sql(pool: DBPool, script: str) -> None:
    with pool.connection() as conn:
        conn.raw.executescript(script)
        conn.raw.commit()


class FakeThemeManager:
    def __init__(self, theme_id="tp-classic", layouts=None):
        self._theme_id = theme_id
        self._layouts = ["default", "landing"] if layouts is None else layouts

    def active_theme_id(self):
        return self._theme_id

    def layouts(self):
        return self._layouts


class FakePluginManager:
    def __init__(self, ids: List = None):
        self._ids = ["tentapress/pages", "tentapress/seo"] if ids is None else ids

    def enabled_plugin_ids(self):
        return self._ids


class FixedClock:
    """Clock that can be advanced between exports."""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


# --- Database fixtures ---


@pytest.fixture()
def backend(tmp_path: Path) -> SQLiteBackend:
    return SQLiteBackend(str(tmp_path / "tentapress.db"))


@pytest.fixture()
def pool(backend: SQLiteBackend) -> DBPool:
    return DBPool(backend)


@pytest.fixture()
def schema_pool(pool: DBPool, backend: SQLiteBackend) -> DBPool:
    """Pool over a database with every TentaPress table created."""
    with pool.connection() as conn:
        backend.init_schema(conn)
    return pool


@pytest.fixture()
def seeded_pool(schema_pool: DBPool) -> DBPool:
    insert_rows(schema_pool, "tp_pages", [
        {
            "id": 2,
            "title": "About",
            "slug": "about",
            "status": "published",
            "layout": "default",
            "blocks": '[{"type": "hero", "text": "Hi / there"}]',
            "created_at": "2026-01-02 10:00:00",
            "updated_at": "2026-01-03 11:00:00",
        },
        {
            "id": 1,
            "title": "Home",
            "slug": "home",
            "status": "published",
            "layout": "landing",
            "blocks": "[]",
            "created_at": "2026-01-01 09:00:00",
            "updated_at": "2026-01-01 09:00:00",
        },
    ])
    insert_rows(schema_pool, "tp_settings", [
        {"key": "site.title", "value": "Café / Bar", "autoload": 1},
        {"key": "mail.from", "value": None, "autoload": 0},
    ])
    insert_rows(schema_pool, "tp_seo_pages", [
        {"page_id": 1, "title": "Home | Café", "robots": "index,follow"},
    ])
    return schema_pool


# --- Exporter fixtures ---


@pytest.fixture()
def export_dir(tmp_path: Path) -> Path:
    return tmp_path / "exports"


@pytest.fixture()
def plugin_cache(tmp_path: Path) -> Path:
    return tmp_path / "cache" / "tp_plugins.json"


@pytest.fixture()
def make_exporter(export_dir: Path, plugin_cache: Path):
    def _make(pool: DBPool, **overrides) -> Exporter:
        kwargs = dict(
            pages=PageStore(pool),
            settings=SettingsStore(pool),
            seo=SeoStore(pool),
            theme_manager=FakeThemeManager(),
            plugin_manager=FakePluginManager(),
            cache_resolver=StoragePaths(export_dir=export_dir, plugin_cache=plugin_cache),
            clock=FixedClock(),
        )
        kwargs.update(overrides)
        return Exporter(export_dir, **kwargs)

    return _make
