"""
tentapress_export.collectors

One collector per exported domain. Each returns a CollectorResult:

    - collect_pages     -> pages.json
    - collect_settings  -> settings.json
    - collect_theme     -> theme.json
    - collect_plugins   -> plugins.json
    - collect_seo       -> seo.json (omitted when UNAVAILABLE)

The build_*_document functions render rows without touching the
database and are what the tests mostly exercise.
"""

from .result import CollectorResult, ResultKind, JsonDict
from .pages import collect_pages, build_pages_document, PAGES_NOT_INSTALLED
from .settings import collect_settings, build_settings_document, SETTINGS_NOT_FOUND
from .theme import collect_theme, THEME_MANAGER_MISSING
from .plugins import collect_plugins, read_plugin_cache
from .seo import collect_seo, build_seo_document, SEO_TEXT_FIELDS

__all__ = [
    "CollectorResult",
    "ResultKind",
    "JsonDict",
    "collect_pages",
    "build_pages_document",
    "PAGES_NOT_INSTALLED",
    "collect_settings",
    "build_settings_document",
    "SETTINGS_NOT_FOUND",
    "collect_theme",
    "THEME_MANAGER_MISSING",
    "collect_plugins",
    "read_plugin_cache",
    "collect_seo",
    "build_seo_document",
    "SEO_TEXT_FIELDS",
]
