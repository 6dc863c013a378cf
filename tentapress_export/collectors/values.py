"""Value coercions shared by the collectors."""

from __future__ import annotations

import dataclasses
import json
import math
from typing import Any, List, Optional


def as_str(value: Any, default: str = "") -> str:
    return default if value is None else str(value)


def as_optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def as_int(value: Any, default: int = 0) -> int:
    if value is None or value == "":
        return default
    return int(value)


def as_bool(value: Any, default: bool = True) -> bool:
    """
    Coerce a stored flag. Text columns hold "0"/"1", so the empty
    string and "0" are false.
    """
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip() not in ("", "0")
    return bool(value)


def as_list(value: Any) -> List[Any]:
    """
    Return `value` as a list, decoding JSON text first. Anything that
    is not list-shaped becomes an empty list.
    """
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def json_safe(value: Any) -> Any:
    """
    Make a value from an external subsystem JSON safe:

        - dataclasses become dicts
        - mappings and sequences are walked recursively
        - non-finite floats become None
        - anything else unknown becomes its str()
    """
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return json_safe(dataclasses.asdict(value))
    if isinstance(value, dict):
        return {str(k): json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [json_safe(v) for v in value]
    return str(value)
