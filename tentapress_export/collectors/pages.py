"""
Pages collector.

Exports every content record ordered by id. The status / layout /
blocks fields only appear when the live schema defines them.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..stores.pages import PageSchema, PageStore
from .result import CollectorResult, JsonDict, listing, unavailable_listing
from .values import as_int, as_list, as_optional_str, as_str

PAGES_NOT_INSTALLED = "Pages plugin not installed."


def build_page_item(row: dict, schema: PageSchema) -> JsonDict:
    item: JsonDict = {
        "id": as_int(row.get("id")),
        "title": as_str(row.get("title")),
        "slug": as_str(row.get("slug")),
        "created_at": as_optional_str(row.get("created_at")),
        "updated_at": as_optional_str(row.get("updated_at")),
    }

    if schema.has("status"):
        item["status"] = as_str(row.get("status"))

    if schema.has("layout"):
        item["layout"] = as_str(row.get("layout"))

    if schema.has("blocks"):
        item["blocks"] = as_list(row.get("blocks"))

    return item


def build_pages_document(rows: Iterable[dict], schema: PageSchema) -> JsonDict:
    """
    Render page rows against a schema descriptor. Pure; no DB access.
    """
    return listing([build_page_item(row, schema) for row in rows])


def collect_pages(store: Optional[PageStore]) -> CollectorResult:
    if store is None or not store.is_installed():
        return unavailable_listing(PAGES_NOT_INSTALLED)

    schema = store.schema()
    return CollectorResult.ok(build_pages_document(store.list_pages(), schema))
