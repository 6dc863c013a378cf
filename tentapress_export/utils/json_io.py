"""
JSON encode/read helpers.

These functions guarantee:
- UTF-8 text
- deterministic indentation
- slashes and non-ASCII characters left unescaped
- a trailing newline on every encoded document
- graceful failure on malformed input files
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


def encode_document(data: Any) -> str:
    """
    Serialize a document the way every archive entry is written.
    """
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def decode_document(text: Union[str, bytes]) -> Any:
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    return json.loads(text)


def json_read(path: Path) -> Optional[Any]:
    """
    Read and parse a JSON file.

    Returns
    -------
    Optional[Any]
        Parsed object if valid JSON, else None.
    """
    path = Path(path)
    if not path.is_file():
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        logger.warning("Unreadable JSON file %s", path, exc_info=True)
        return None


__all__ = [
    "encode_document",
    "decode_document",
    "json_read",
]
