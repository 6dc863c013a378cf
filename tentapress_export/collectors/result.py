"""
Collector results.

Every collector answers with a CollectorResult tagged either OK or
UNAVAILABLE. UNAVAILABLE carries the reason and, for domains that still
get an archive entry when their backing data is missing, the
placeholder document to write. A domain whose UNAVAILABLE result has no
document is left out of the archive entirely.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

JsonDict = Dict[str, Any]


class ResultKind(str, Enum):
    OK = "ok"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class CollectorResult:
    kind: ResultKind
    document: Optional[JsonDict] = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls, document: JsonDict) -> "CollectorResult":
        return cls(ResultKind.OK, document=document)

    @classmethod
    def unavailable(
        cls,
        reason: str,
        document: Optional[JsonDict] = None,
    ) -> "CollectorResult":
        return cls(ResultKind.UNAVAILABLE, document=document, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.kind is ResultKind.OK

    @property
    def writes_entry(self) -> bool:
        """True when there is a document to put in the archive."""
        return self.document is not None


def unavailable_listing(reason: str) -> CollectorResult:
    """
    UNAVAILABLE result for the list-shaped domains (pages, settings).
    """
    return CollectorResult.unavailable(reason, {"error": reason, "items": []})


def listing(items: list) -> JsonDict:
    return {
        "count": len(items),
        "items": items,
    }


__all__ = [
    "JsonDict",
    "ResultKind",
    "CollectorResult",
    "unavailable_listing",
    "listing",
]
