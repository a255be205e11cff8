"""
Bundled pattern library: example patterns stored as YAML and loaded into
an immutable registry at import time.
"""

from .registry import PatternLibrary, get_library, row_from_data, stitch_from_data

__all__ = [
    "PatternLibrary",
    "get_library",
    "stitch_from_data",
    "row_from_data",
]
