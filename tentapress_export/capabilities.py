"""
Optional capability protocols for the theme and plugin subsystems.

The exporter never depends on a concrete ThemeManager or PluginManager
class. Instead each accessor it knows how to use is a small
runtime-checkable protocol, and collectors test the object they were
given against these protocols in order.

Older and newer subsystem releases name their accessors differently,
which is why several protocols describe the same capability.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List, Optional, Protocol, Tuple, Type, runtime_checkable

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Active theme id
# ---------------------------------------------------------------------------

@runtime_checkable
class ActiveThemeIdProvider(Protocol):
    def active_theme_id(self) -> Any:
        ...


@runtime_checkable
class GetActiveThemeIdProvider(Protocol):
    def get_active_theme_id(self) -> Any:
        ...


@runtime_checkable
class ActiveIdProvider(Protocol):
    def active_id(self) -> Any:
        ...


@runtime_checkable
class GetActiveIdProvider(Protocol):
    def get_active_id(self) -> Any:
        ...


# ---------------------------------------------------------------------------
# Layout listing
# ---------------------------------------------------------------------------

@runtime_checkable
class LayoutLister(Protocol):
    def layouts(self) -> Any:
        ...


@runtime_checkable
class GetLayoutsLister(Protocol):
    def get_layouts(self) -> Any:
        ...


@runtime_checkable
class LayoutDiscoverer(Protocol):
    def discover_layouts(self) -> Any:
        ...


# ---------------------------------------------------------------------------
# Enabled plugins
# ---------------------------------------------------------------------------

@runtime_checkable
class EnabledPluginIdsProvider(Protocol):
    def enabled_plugin_ids(self) -> Any:
        ...


@runtime_checkable
class GetEnabledPluginIdsProvider(Protocol):
    def get_enabled_plugin_ids(self) -> Any:
        ...


@runtime_checkable
class EnabledProvider(Protocol):
    def enabled(self) -> Any:
        ...


@runtime_checkable
class PluginCachePathResolver(Protocol):
    def plugin_cache_path(self) -> Any:
        ...


# (protocol, accessor name) pairs in probing order.
Capability = Tuple[Type[Any], str]

ACTIVE_THEME_CAPABILITIES: Tuple[Capability, ...] = (
    (ActiveThemeIdProvider, "active_theme_id"),
    (GetActiveThemeIdProvider, "get_active_theme_id"),
    (ActiveIdProvider, "active_id"),
    (GetActiveIdProvider, "get_active_id"),
)

LAYOUT_CAPABILITIES: Tuple[Capability, ...] = (
    (LayoutLister, "layouts"),
    (GetLayoutsLister, "get_layouts"),
    (LayoutDiscoverer, "discover_layouts"),
)

ENABLED_PLUGIN_CAPABILITIES: Tuple[Capability, ...] = (
    (EnabledPluginIdsProvider, "enabled_plugin_ids"),
    (GetEnabledPluginIdsProvider, "get_enabled_plugin_ids"),
    (EnabledProvider, "enabled"),
)


def supported(target: Any, capabilities: Iterable[Capability]) -> List[str]:
    """
    Names of the accessors in `capabilities` that `target` implements.
    """
    if target is None:
        return []
    return [
        name
        for proto, name in capabilities
        if isinstance(target, proto) and callable(getattr(target, name, None))
    ]


def probe(target: Any, capabilities: Iterable[Capability]) -> Iterator[Tuple[str, Any]]:
    """
    Yield (accessor name, result) for every capability `target`
    implements, in order.

    An accessor that raises is logged and skipped; the subsystem is
    external and a broken accessor must not abort an export.
    """
    for name in supported(target, capabilities):
        try:
            result = getattr(target, name)()
        except Exception:
            logger.warning("Capability %s on %r raised; ignoring", name, target, exc_info=True)
            continue
        yield name, result


def first_result(
    target: Any,
    capabilities: Iterable[Capability],
    accept,
) -> Optional[Any]:
    """
    Return the first probed result for which `accept(result)` is true.
    """
    for _, result in probe(target, capabilities):
        if accept(result):
            return result
    return None


__all__ = [
    "ActiveThemeIdProvider",
    "GetActiveThemeIdProvider",
    "ActiveIdProvider",
    "GetActiveIdProvider",
    "LayoutLister",
    "GetLayoutsLister",
    "LayoutDiscoverer",
    "EnabledPluginIdsProvider",
    "GetEnabledPluginIdsProvider",
    "EnabledProvider",
    "PluginCachePathResolver",
    "ACTIVE_THEME_CAPABILITIES",
    "LAYOUT_CAPABILITIES",
    "ENABLED_PLUGIN_CAPABILITIES",
    "supported",
    "probe",
    "first_result",
]
