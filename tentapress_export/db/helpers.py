"""
Read helpers shared by the SQLite and Postgres backends.

The exporter only ever runs SELECTs and schema lookups, so this module
is limited to running one query, fetching its rows, and turning driver
rows into plain dicts. Driver errors are re-raised as RuntimeError with
the failing query attached, which is what ends up in a domain's
`error` field when a collector degrades.
"""

from __future__ import annotations
from typing import Any, List, Optional


def safe_execute(conn: Any, query: str, params: Optional[tuple] = None):
    """
    Run `query` on a fresh cursor of the raw DB-API connection and
    return that cursor.
    """
    cur = conn.cursor()
    try:
        cur.execute(query, params or ())
    except Exception as e:
        raise RuntimeError(
            f"Export query failed: {e} | Query: {' '.join(query.split())!r}"
        ) from e
    return cur


def safe_fetch_all(conn: Any, query: str, params: Optional[tuple] = None) -> List[Any]:
    return safe_execute(conn, query, params).fetchall()


def safe_fetch_one(conn: Any, query: str, params: Optional[tuple] = None) -> Any:
    return safe_execute(conn, query, params).fetchone()


def row_to_dict(row: Any) -> dict:
    """
    Normalize a driver row (sqlite3.Row, psycopg2 RealDictRow) into a
    plain dict keyed by column name. Tuple rows are keyed by position.
    """
    if row is None:
        return {}
    if hasattr(row, "keys"):
        return {k: row[k] for k in row.keys()}
    return dict(enumerate(row))


__all__ = [
    "safe_execute",
    "safe_fetch_all",
    "safe_fetch_one",
    "row_to_dict",
]
