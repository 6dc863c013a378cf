"""
tentapress_export

Portable snapshot of a TentaPress installation as a single ZIP archive.

Submodules include:
    - export/       archive assembly, manifest, container writer
    - collectors/   one collector per exported domain
    - stores/       read-only views over the CMS tables
    - db/           SQLite / Postgres backends
    - capabilities  optional theme / plugin accessors
    - api           FastAPI router for the admin download endpoint
    - cli           command line entrypoint

The root package re-exports the pieces most callers need.
"""

from .config import ExportConfig, load_config
from .errors import ExportError, ExportInitError, ExportWriteError
from .export import (
    ArchiveResult,
    ExportManifest,
    ExportOptions,
    Exporter,
    create_exporter,
    read_manifest,
)

__version__ = "0.1.0"

__all__ = [
    "ExportConfig",
    "load_config",
    "ExportError",
    "ExportInitError",
    "ExportWriteError",
    "ArchiveResult",
    "ExportManifest",
    "ExportOptions",
    "Exporter",
    "create_exporter",
    "read_manifest",
]
