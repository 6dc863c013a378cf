"""
Unified database connection abstraction.

This file defines:
- DBConnection: a wrapper around a live database handle
- DBPool: simple factory that allocates backend connections

Backends must expose:
    backend.connect() -> raw connection
    backend.helpers   -> module with:
        safe_execute
        safe_fetch_all
        safe_fetch_one
        row_to_dict
    backend.has_table(conn, table)
    backend.column_names(conn, table)
"""

from __future__ import annotations
from typing import Any, List, Optional, Set


class DBConnection:
    """
    Thin wrapper around a raw DB-API 2.0 connection.

    Responsibilities:
        - Provide a stable read API (fetch_all, fetch_one)
        - Normalize rows across backends (return Python dicts)
        - Leave transaction handling to the caller

    Notes:
        - The exporter only reads, so there is no commit()
        - Safe to close() multiple times
    """

    def __init__(self, raw_conn: Any, helpers: Any):
        self.raw = raw_conn
        self.helpers = helpers

    # ------------------------------------------------------------------
    # Query wrappers
    # ------------------------------------------------------------------

    def fetch_all(self, query: str, params: Optional[tuple] = None) -> List[dict]:
        """
        Execute a SELECT statement and return a list of dict rows.
        """
        rows = self.helpers.safe_fetch_all(self.raw, query, params)
        return [self.helpers.row_to_dict(r) for r in rows]

    def fetch_one(self, query: str, params: Optional[tuple] = None):
        """
        Execute a SELECT statement and return a single dict row or None.
        """
        row = self.helpers.safe_fetch_one(self.raw, query, params)
        return self.helpers.row_to_dict(row) if row else None

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def rollback(self) -> None:
        try:
            self.raw.rollback()
        except Exception:
            # Some backends auto-handle rollback; this is best-effort only.
            pass

    def close(self) -> None:
        try:
            self.raw.close()
        except Exception:
            # Allow double-close or backend errors w/out propagating
            pass


# ----------------------------------------------------------------------
# DB Pool
# ----------------------------------------------------------------------

class DBPool:
    """
    Simple database connection factory.

    Besides handing out connections, the pool answers schema questions
    by delegating to the backend, so stores never need to know which
    dialect they are talking to.
    """

    def __init__(self, backend: Any):
        self.backend = backend

    def get(self) -> DBConnection:
        """
        Acquire a new DBConnection wrapper.
        """
        raw = self.backend.connect()
        return DBConnection(raw, self.backend.helpers)

    def connection(self):
        """
        Context manager syntax:

            with pool.connection() as conn:
                ...
        """
        return _ConnectionContext(self)

    # ------------------------------------------------------------------
    # Schema introspection
    # ------------------------------------------------------------------

    def has_table(self, table: str) -> bool:
        with self.connection() as conn:
            return bool(self.backend.has_table(conn, table))

    def column_names(self, table: str) -> Set[str]:
        with self.connection() as conn:
            return set(self.backend.column_names(conn, table))


class _ConnectionContext:
    """
    Internal context manager for DBConnection.
    """

    def __init__(self, pool: DBPool):
        self.pool = pool
        self.conn: Optional[DBConnection] = None

    def __enter__(self) -> DBConnection:
        self.conn = self.pool.get()
        return self.conn

    def __exit__(self, exc_type, exc, tb):
        if self.conn is None:
            return False

        if exc_type is not None:
            self.conn.rollback()

        self.conn.close()

        # Propagate exceptions
        return False
