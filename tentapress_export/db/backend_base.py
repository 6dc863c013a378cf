"""
Backend base interfaces for the exporter's database access.

This module defines the minimal contracts that all database backends
(SQLite, Postgres, etc.) must satisfy.

It is intentionally light-weight:

- It does NOT depend on any specific DB driver.
- It only encodes the structural requirements assumed by:
      * tentapress_export.db.connection.DBPool
      * tentapress_export.db.helpers
      * tentapress_export.stores

Backends must expose:

    backend.connect() -> raw_connection
    backend.helpers   -> module with:
                           - safe_execute(conn, query, params)
                           - safe_fetch_all(conn, query, params)
                           - safe_fetch_one(conn, query, params)
                           - row_to_dict(row)

    backend.has_table(conn, table)     -> bool
    backend.column_names(conn, table)  -> set of column names
    backend.init_schema(conn)          # optional

This file provides:
- DBBackend: abstract base class
- BackendLike: structural protocol
- ensure_backend: runtime validator
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol, Set, runtime_checkable


# ---------------------------------------------------------------------------
# Abstract Base Backend
# ---------------------------------------------------------------------------

class DBBackend(ABC):
    """
    Abstract base class for an exporter DB backend.

    Concrete subclasses may define any constructor signature they want
    (e.g. SQLiteBackend(db_path), PostgresBackend(dsn)).
    """

    @property
    @abstractmethod
    def helpers(self) -> Any:
        """
        Return the helper module associated with this backend.

        Normally this is tentapress_export.db.helpers, but test backends
        may provide compatible modules.
        """
        raise NotImplementedError

    @abstractmethod
    def connect(self) -> Any:
        """
        Acquire and return a new raw DB-API 2.0 connection.
        """
        raise NotImplementedError

    @abstractmethod
    def has_table(self, conn: Any, table: str) -> bool:
        """
        Return True if `table` exists in the connected database.

        `conn` is a DBConnection wrapper.
        """
        raise NotImplementedError

    @abstractmethod
    def column_names(self, conn: Any, table: str) -> Set[str]:
        """
        Return the set of column names currently defined on `table`.

        An empty set is returned for a missing table.
        """
        raise NotImplementedError

    def init_schema(self, conn: Any) -> None:
        """
        Optional schema bootstrap.

        SQLite backends populate the canonical TentaPress tables here.
        Postgres backends leave this empty; the CMS owns that schema.

        Default: no-op.
        """
        return None


# ---------------------------------------------------------------------------
# Structural Protocol
# ---------------------------------------------------------------------------

@runtime_checkable
class BackendLike(Protocol):
    """
    Structural protocol for objects usable as an exporter backend.
    """

    helpers: Any

    def connect(self) -> Any:
        ...

    def has_table(self, conn: Any, table: str) -> bool:
        ...

    def column_names(self, conn: Any, table: str) -> Set[str]:
        ...


# ---------------------------------------------------------------------------
# Runtime Guard
# ---------------------------------------------------------------------------

def ensure_backend(backend: Any) -> BackendLike:
    """
    Validate that an object behaves like an exporter backend.

    Raises:
        TypeError if required attributes are missing.
    """
    if not isinstance(backend, BackendLike):
        missing = [
            name
            for name in ("connect", "helpers", "has_table", "column_names")
            if not hasattr(backend, name)
        ]

        if missing:
            raise TypeError(
                f"Invalid export DB backend {backend!r}: missing attributes {missing}"
            )

    return backend  # type: ignore[return-value]


__all__ = [
    "DBBackend",
    "BackendLike",
    "ensure_backend",
]
