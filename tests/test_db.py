from __future__ import annotations

import pytest

from tentapress_export.config import ExportConfig
from tentapress_export.db import (
    PostgresBackend,
    SQLiteBackend,
    create_backend,
    ensure_backend,
    row_to_dict,
)
from tentapress_export.stores import PageStore, SeoStore, SettingsStore

from conftest import run_sql


def test_create_backend_selects_by_name(tmp_path):
    sqlite = create_backend(ExportConfig(db_backend="SQLite", db_uri=str(tmp_path / "x.db")))
    pg = create_backend(ExportConfig(db_backend="postgresql", db_uri="postgresql://h/db"))

    assert isinstance(sqlite, SQLiteBackend)
    assert isinstance(pg, PostgresBackend)
    assert pg.dsn == "postgresql://h/db"


def test_create_backend_rejects_unknown():
    with pytest.raises(ValueError):
        create_backend(ExportConfig(db_backend="mysql"))


def test_ensure_backend_reports_missing_attributes():
    class NotABackend:
        def connect(self):
            return None

    with pytest.raises(TypeError) as exc:
        ensure_backend(NotABackend())
    assert "has_table" in str(exc.value)


def test_ensure_backend_accepts_sqlite(backend):
    assert ensure_backend(backend) is backend


def test_has_table_and_columns(pool):
    assert pool.has_table("tp_pages") is False
    assert pool.column_names("tp_pages") == set()

    run_sql(pool, "CREATE TABLE tp_pages (id INTEGER PRIMARY KEY, title TEXT, slug TEXT);")

    assert pool.has_table("tp_pages") is True
    assert pool.column_names("tp_pages") == {"id", "title", "slug"}


def test_column_names_rejects_odd_identifiers(pool, backend):
    with pool.connection() as conn:
        with pytest.raises(ValueError):
            backend.column_names(conn, "tp_pages); DROP TABLE x; --")


def test_init_schema_is_idempotent(schema_pool, backend):
    with schema_pool.connection() as conn:
        backend.init_schema(conn)

    assert PageStore(schema_pool).is_installed()
    assert SettingsStore(schema_pool).exists()
    assert SeoStore(schema_pool).exists()


def test_execute_errors_are_wrapped(pool):
    with pool.connection() as conn:
        with pytest.raises(RuntimeError) as exc:
            conn.fetch_all("SELECT * FROM missing_table")
    assert "missing_table" in str(exc.value)


def test_row_to_dict_variants():
    assert row_to_dict(None) == {}
    assert row_to_dict({"a": 1}) == {"a": 1}
    assert row_to_dict(("x", "y")) == {0: "x", 1: "y"}


def test_postgres_connect_without_driver(monkeypatch):
    from tentapress_export.db import postgres_backend

    monkeypatch.setattr(postgres_backend, "psycopg2", None)
    with pytest.raises(RuntimeError):
        PostgresBackend("postgresql://h/db").connect()


def test_connection_wrapper_is_read_only(seeded_pool):
    with seeded_pool.connection() as conn:
        assert not hasattr(conn, "commit")
        assert not hasattr(conn, "executemany")
        row = conn.fetch_one("SELECT slug FROM tp_pages WHERE id = ?", (2,))
        missing = conn.fetch_one("SELECT slug FROM tp_pages WHERE id = ?", (999,))

    assert row == {"slug": "about"}
    assert missing is None


def test_failed_query_is_reported_on_one_line(pool):
    with pool.connection() as conn:
        with pytest.raises(RuntimeError) as exc:
            conn.fetch_all("SELECT id\n  FROM missing_table\n WHERE id = ?", (1,))
    assert "'SELECT id FROM missing_table WHERE id = ?'" in str(exc.value)
