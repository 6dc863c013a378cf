"""
Well-known filesystem locations inside a TentaPress install.

StoragePaths answers the two questions the exporter asks of the
filesystem: where archives are staged, and where the enabled-plugins
cache lives. It satisfies the PluginCachePathResolver capability.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..config import ExportConfig


@dataclass(frozen=True)
class StoragePaths:
    export_dir: Path
    plugin_cache: Path

    @classmethod
    def from_config(cls, config: ExportConfig) -> "StoragePaths":
        return cls(
            export_dir=config.resolved_export_dir(),
            plugin_cache=config.resolved_plugin_cache_path(),
        )

    def plugin_cache_path(self) -> str:
        return str(self.plugin_cache)


__all__ = [
    "StoragePaths",
]
