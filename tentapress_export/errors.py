"""
Exception types raised by the export pipeline.

Only container I/O problems escalate to the caller. A missing table or
subsystem is reported inside the affected document instead.
"""

from __future__ import annotations


class ExportError(RuntimeError):
    """Base class for export failures visible to the caller."""


class ExportInitError(ExportError):
    """The archive could not be created or opened for writing."""


class ExportWriteError(ExportError):
    """Writing an entry or sealing the archive failed after it was opened."""


__all__ = [
    "ExportError",
    "ExportInitError",
    "ExportWriteError",
]
