"""
tentapress_export.utils

Lightweight utility helpers shared across the exporter.

This package aggregates:

    - temp:     export staging directory and filename helpers
    - paths:    well-known install locations
    - json_io:  canonical JSON encoding and safe reads

All public symbols from these modules are re-exported for convenience.
"""

from . import temp
from . import paths
from . import json_io

from .temp import *        # noqa: F401,F403
from .paths import *       # noqa: F401,F403
from .json_io import *     # noqa: F401,F403

__all__ = (
    temp.__all__
    + paths.__all__
    + json_io.__all__
)
