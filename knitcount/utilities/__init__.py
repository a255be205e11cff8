"""
Stitch arithmetic shared by the checker and callers sizing a project:
consumed/produced counts and cast-on inference.
"""

from .cast_on import MIN_SIZING_REPEAT, cast_on_counts, infer_cast_on, suggest_cast_on
from .counts import consumed, produced, total_consumed, total_produced

__all__ = [
    # counts
    "consumed",
    "produced",
    "total_consumed",
    "total_produced",
    # cast-on
    "MIN_SIZING_REPEAT",
    "infer_cast_on",
    "cast_on_counts",
    "suggest_cast_on",
]
