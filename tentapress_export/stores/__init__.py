"""
tentapress_export.stores

Read-only, DB-backed views over the TentaPress tables the exporter
reads from:

    - PageStore      (tp_pages)
    - SettingsStore  (tp_settings)
    - SeoStore       (tp_seo_pages)
"""

from .pages import PageSchema, PageStore, PAGES_TABLE, OPTIONAL_PAGE_FIELDS
from .settings import SettingsStore, SETTINGS_TABLE
from .seo import SeoStore, SEO_TABLE

__all__ = [
    "PageSchema",
    "PageStore",
    "PAGES_TABLE",
    "OPTIONAL_PAGE_FIELDS",
    "SettingsStore",
    "SETTINGS_TABLE",
    "SeoStore",
    "SEO_TABLE",
]
