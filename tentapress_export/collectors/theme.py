"""
Theme collector.

Reports the active theme id and its layouts, using whatever accessors
the installed theme manager happens to offer. This collector never
raises: the emptiest answer it gives is still a valid document.
"""

from __future__ import annotations

from typing import Any

from ..capabilities import (
    ACTIVE_THEME_CAPABILITIES,
    LAYOUT_CAPABILITIES,
    first_result,
)
from .result import CollectorResult, JsonDict
from .values import json_safe

THEME_MANAGER_MISSING = "ThemeManager not available."


def _empty_theme() -> JsonDict:
    return {
        "active_theme_id": None,
        "layouts": [],
    }


def _is_theme_id(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_list_shaped(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def collect_theme(theme_manager: Any) -> CollectorResult:
    out = _empty_theme()

    if theme_manager is None:
        out["error"] = THEME_MANAGER_MISSING
        return CollectorResult.unavailable(THEME_MANAGER_MISSING, out)

    active_id = first_result(theme_manager, ACTIVE_THEME_CAPABILITIES, _is_theme_id)
    if active_id is not None:
        out["active_theme_id"] = active_id

    layouts = first_result(theme_manager, LAYOUT_CAPABILITIES, _is_list_shaped)
    if layouts is not None:
        out["layouts"] = json_safe(list(layouts))

    return CollectorResult.ok(out)
