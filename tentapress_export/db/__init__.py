"""
tentapress_export.db

Database backend abstraction layer used by the export stores.

This package provides:

- A backend-agnostic connection abstraction:
      * DBConnection
      * DBPool

- Read helpers and row mapping:
      * safe_execute
      * safe_fetch_all
      * safe_fetch_one
      * row_to_dict

- Concrete database backend implementations:
      * SQLiteBackend   (local development + tests)
      * PostgresBackend (production installs)

- Backend contracts:
      * DBBackend
      * BackendLike
      * ensure_backend

- create_backend(config): pick a backend from ExportConfig
"""

from __future__ import annotations

from ..config import ExportConfig
from .connection import DBConnection, DBPool
from .sqlite_backend import SQLiteBackend
from .postgres_backend import PostgresBackend
from .backend_base import DBBackend, BackendLike, ensure_backend
from .helpers import (
    safe_execute,
    safe_fetch_all,
    safe_fetch_one,
    row_to_dict,
)


def create_backend(config: ExportConfig) -> DBBackend:
    """
    Instantiate the appropriate DB backend for a given configuration.
    """
    name = (config.db_backend or "").lower()

    if name == "sqlite":
        return SQLiteBackend(config.db_uri)

    if name in ("postgres", "postgresql", "psql"):
        return PostgresBackend(config.db_uri)

    raise ValueError(f"Unsupported export DB backend: {config.db_backend!r}")


__all__ = [
    # Connection / Pool
    "DBConnection",
    "DBPool",

    # Backends
    "SQLiteBackend",
    "PostgresBackend",
    "DBBackend",
    "BackendLike",
    "ensure_backend",
    "create_backend",

    # Helpers
    "safe_execute",
    "safe_fetch_all",
    "safe_fetch_one",
    "row_to_dict",
]
