"""
Export manifest.

The manifest is the last entry written to every archive. It records
the format version, when the archive was generated, and which domains
the archive actually contains.

Design constraints:

    - "pages" is always included.
    - "seo" is only true when seo.json was written.
    - every other domain mirrors the flag the caller requested.
"""

from __future__ import annotations

import zipfile
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..utils.json_io import decode_document

JsonDict = Dict[str, Any]

SCHEMA_VERSION = 1
APP_NAME = "TentaPress"
MANIFEST_ENTRY = "manifest.json"


@dataclass
class ExportManifest:
    """
    In-memory form of manifest.json.
    """

    generated_at_utc: str
    includes: Dict[str, bool] = field(default_factory=dict)
    schema_version: int = SCHEMA_VERSION
    app_name: str = APP_NAME

    @classmethod
    def build(
        cls,
        *,
        settings: bool,
        theme: bool,
        plugins: bool,
        seo: bool,
        generated_at: Optional[datetime] = None,
    ) -> "ExportManifest":
        generated_at = generated_at or datetime.now(timezone.utc)
        stamp = generated_at.astimezone(timezone.utc).replace(microsecond=0).isoformat()
        return cls(
            generated_at_utc=stamp,
            includes={
                "pages": True,
                "settings": bool(settings),
                "theme": bool(theme),
                "plugins": bool(plugins),
                "seo": bool(seo),
            },
        )

    def to_dict(self) -> JsonDict:
        return {
            "schema_version": self.schema_version,
            "generated_at_utc": self.generated_at_utc,
            "app": {
                "name": self.app_name,
            },
            "includes": dict(self.includes),
        }

    @classmethod
    def from_dict(cls, d: JsonDict) -> "ExportManifest":
        app = d.get("app") or {}
        return cls(
            generated_at_utc=str(d.get("generated_at_utc", "")),
            includes={str(k): bool(v) for k, v in (d.get("includes") or {}).items()},
            schema_version=int(d.get("schema_version", SCHEMA_VERSION)),
            app_name=str(app.get("name", APP_NAME)),
        )


# - - - Archive inspection - - -

def read_document(zip_path: Union[str, Path], name: str) -> Any:
    """
    Decode one JSON entry from an export archive.

    Raises KeyError if the entry does not exist.
    """
    with zipfile.ZipFile(zip_path, "r") as zf:
        return decode_document(zf.read(name))


def read_manifest(zip_path: Union[str, Path]) -> Optional[ExportManifest]:
    """
    Load the manifest of an export archive, or None if it has none.
    """
    try:
        data = read_document(zip_path, MANIFEST_ENTRY)
    except KeyError:
        return None
    if not isinstance(data, dict):
        return None
    return ExportManifest.from_dict(data)


__all__ = [
    "SCHEMA_VERSION",
    "APP_NAME",
    "MANIFEST_ENTRY",
    "ExportManifest",
    "read_document",
    "read_manifest",
]
