"""
Staging-directory utilities for export archives.

Export archives are written into a working directory, handed to the
caller, and removed after delivery. These helpers:

    - create the working directory on demand
    - compute time-derived archive names
    - reserve a path that no other export is using
    - clean up after delivery

Cleanup is best-effort and error-tolerant.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

EXPORT_PREFIX = "tentapress-export-"
EXPORT_SUFFIX = ".zip"


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


def ensure_export_dir(path: Union[str, Path]) -> Path:
    """
    Create the export working directory if it is missing.

    Raises OSError if the path cannot be created (e.g. a regular file
    sits at that location).
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def export_filename(now: Optional[datetime] = None, suffix: Optional[str] = None) -> str:
    """
    Archive name for a given instant, e.g.

        tentapress-export-20261016-093000.zip

    `suffix` is inserted before the extension when the plain name is
    already taken.
    """
    now = now or utc_now()
    stamp = now.astimezone(timezone.utc).strftime("%Y%m%d-%H%M%S")
    extra = f"-{suffix}" if suffix else ""
    return f"{EXPORT_PREFIX}{stamp}{extra}{EXPORT_SUFFIX}"


def reserve_export_path(directory: Union[str, Path], now: Optional[datetime] = None) -> Path:
    """
    Pick an archive path inside `directory` that does not exist yet.

    Two exports started within the same second would share a name, so
    the second one gets a short random suffix. The caller still opens
    the path in exclusive mode; this only makes the common collision
    cheap to avoid.
    """
    directory = Path(directory)
    candidate = directory / export_filename(now)
    if not candidate.exists():
        return candidate
    return directory / export_filename(now, suffix=uuid.uuid4().hex[:8])


def cleanup_export(path: Optional[Union[str, Path]]) -> None:
    """
    Remove a delivered archive. Does nothing for None or a missing file.
    """
    if not path:
        return

    try:
        Path(path).unlink()
    except FileNotFoundError:
        pass
    except OSError:
        logger.warning("Could not remove export archive %s", path, exc_info=True)


__all__ = [
    "EXPORT_PREFIX",
    "EXPORT_SUFFIX",
    "utc_now",
    "ensure_export_dir",
    "export_filename",
    "reserve_export_path",
    "cleanup_export",
]
