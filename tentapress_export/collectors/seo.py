"""
SEO collector.

Unlike the other domains, a missing tp_seo_pages table means the SEO
plugin is not part of this install, so no document is produced at all.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..stores.seo import SEO_TABLE, SeoStore
from .result import CollectorResult, JsonDict, listing
from .values import as_int, as_optional_str

SEO_TABLE_MISSING = f"SEO table {SEO_TABLE} not found."

SEO_TEXT_FIELDS = (
    "title",
    "description",
    "canonical_url",
    "robots",
    "og_title",
    "og_description",
    "og_image",
    "twitter_title",
    "twitter_description",
    "twitter_image",
)


def build_seo_item(row: dict) -> JsonDict:
    item: JsonDict = {"page_id": as_int(row.get("page_id"))}
    for field in SEO_TEXT_FIELDS:
        item[field] = as_optional_str(row.get(field))
    return item


def build_seo_document(rows: Iterable[dict]) -> JsonDict:
    return listing([build_seo_item(row) for row in rows])


def collect_seo(store: Optional[SeoStore]) -> CollectorResult:
    if store is None or not store.exists():
        return CollectorResult.unavailable(SEO_TABLE_MISSING)

    return CollectorResult.ok(build_seo_document(store.list_rows()))
