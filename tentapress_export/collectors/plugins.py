"""
Plugins collector.

Two sources, tried in order:

    1) the enabled-plugins cache file (JSON object with an "enabled" list)
    2) a live plugin manager exposing one of the enabled-ids accessors

The resolved cache path is always reported, even when it did not
contribute, so an operator can see where the exporter looked.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional

from ..capabilities import (
    ENABLED_PLUGIN_CAPABILITIES,
    PluginCachePathResolver,
    first_result,
)
from ..utils.json_io import json_read
from .result import CollectorResult

logger = logging.getLogger(__name__)


def _stringify(ids) -> List[str]:
    return [str(i) for i in ids]


def resolve_cache_path(resolver: Any) -> Optional[str]:
    if not isinstance(resolver, PluginCachePathResolver):
        return None
    try:
        path = resolver.plugin_cache_path()
    except Exception:
        logger.warning("Plugin cache path resolver failed", exc_info=True)
        return None
    return str(path) if path else None


def read_plugin_cache(cache_path: str) -> Optional[List[str]]:
    """
    Enabled ids from the cache file, or None if the file is missing,
    unreadable, or has no "enabled" list.
    """
    data = json_read(Path(cache_path))
    if not isinstance(data, dict):
        return None
    enabled = data.get("enabled")
    if not isinstance(enabled, list):
        return None
    return _stringify(enabled)


def collect_plugins(
    cache_resolver: Any = None,
    plugin_manager: Any = None,
) -> CollectorResult:
    out = {
        "enabled": [],
        "cache_path": None,
    }

    cache_path = resolve_cache_path(cache_resolver)
    out["cache_path"] = cache_path

    if cache_path is not None:
        cached = read_plugin_cache(cache_path)
        if cached is not None:
            out["enabled"] = cached
            return CollectorResult.ok(out)

    ids = first_result(
        plugin_manager,
        ENABLED_PLUGIN_CAPABILITIES,
        lambda v: isinstance(v, (list, tuple)),
    )
    if ids is not None:
        out["enabled"] = _stringify(ids)

    return CollectorResult.ok(out)
