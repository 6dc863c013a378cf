"""
tentapress_export.export

Archive assembly for TentaPress exports.

This package provides:

    - Exporter / create_exporter : build an export archive from options
    - ExportOptions, ArchiveResult, ExportStage
    - ExportManifest             : manifest.json model
    - read_manifest / read_document : inspect a finished archive
    - ArchiveWriter              : the ZIP container itself
"""

from .manifest import (
    APP_NAME,
    MANIFEST_ENTRY,
    SCHEMA_VERSION,
    ExportManifest,
    read_document,
    read_manifest,
)
from .archive import ArchiveWriter
from .exporter import (
    DOMAINS,
    ArchiveResult,
    Domain,
    ExportOptions,
    ExportStage,
    Exporter,
    create_exporter,
)

__all__ = [
    # Manifest
    "APP_NAME",
    "MANIFEST_ENTRY",
    "SCHEMA_VERSION",
    "ExportManifest",
    "read_document",
    "read_manifest",

    # Container
    "ArchiveWriter",

    # Assembly
    "DOMAINS",
    "ArchiveResult",
    "Domain",
    "ExportOptions",
    "ExportStage",
    "Exporter",
    "create_exporter",
]
