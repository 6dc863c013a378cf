"""
ZIP container for export documents.

ArchiveWriter owns exactly one archive file:

    writer = ArchiveWriter(path)
    writer.open()                     # ExportInitError on failure
    writer.add_document("pages.json", {...})
    writer.close()                    # sealed, no further writes

If anything goes wrong after open(), discard() closes the handle and
removes the partial file so no half-written archive is left behind.
Entries are stored in the order they are written.
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Any, List, Optional, Union

from ..errors import ExportInitError, ExportWriteError
from ..utils.json_io import encode_document

logger = logging.getLogger(__name__)


class ArchiveWriter:
    """
    Parameters
    ----------
    path :
        Archive location. The file must not exist yet; it is created
        in exclusive mode so two exports never share one archive.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self.entries: List[str] = []
        self._zip: Optional[zipfile.ZipFile] = None
        self._sealed = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def open(self) -> "ArchiveWriter":
        if self._zip is not None or self._sealed:
            raise ExportInitError(f"Archive {self.path} already opened")
        try:
            self._zip = zipfile.ZipFile(self.path, "x", zipfile.ZIP_DEFLATED)
        except OSError as exc:
            raise ExportInitError(f"Unable to create export zip {self.path}: {exc}") from exc
        return self

    @property
    def is_open(self) -> bool:
        return self._zip is not None

    @property
    def sealed(self) -> bool:
        return self._sealed

    def add_document(self, name: str, data: Any) -> None:
        """
        Write `data` as a canonical JSON entry called `name`.
        """
        if self._zip is None:
            raise ExportWriteError(f"Cannot write {name}: archive {self.path} is not open")
        try:
            self._zip.writestr(name, encode_document(data))
        except (OSError, ValueError, TypeError) as exc:
            raise ExportWriteError(f"Failed to write {name} to {self.path}: {exc}") from exc
        self.entries.append(name)

    def close(self) -> None:
        """
        Seal the archive. Writing the central directory happens here,
        so I/O errors are still possible.
        """
        if self._zip is None:
            return
        zf, self._zip = self._zip, None
        try:
            zf.close()
        except OSError as exc:
            raise ExportWriteError(f"Failed to finalize {self.path}: {exc}") from exc
        self._sealed = True

    def discard(self) -> None:
        """
        Close the handle without caring about errors and delete the file.
        """
        zf, self._zip = self._zip, None
        if zf is not None:
            try:
                zf.close()
            except OSError:
                logger.debug("Ignoring close error while discarding %s", self.path, exc_info=True)
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError:
            logger.warning("Could not remove partial archive %s", self.path, exc_info=True)
        self.entries.clear()

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> "ArchiveWriter":
        if self._zip is None:
            self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None:
            self.discard()
        else:
            self.close()
        return False


__all__ = [
    "ArchiveWriter",
]
