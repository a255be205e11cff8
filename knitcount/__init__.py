"""
knitcount: stitch-count arithmetic for knitting patterns.

Patterns are built from structured Row and Stitch values. The package
answers three questions about them: how many stitches to cast on, how many
stitches are live after working a row, and where a knitter is after
advancing one more row through a pattern that repeats indefinitely.
"""

from .checker import (
    KnittingState,
    RowResult,
    advance_row,
    start_knitting,
    stitches_after_knitting,
    work_row,
)
from .errors import (
    DivisionByZeroRepeatError,
    InsufficientStitchesError,
    KnittingError,
    RowIndexOutOfRangeError,
)
from .library import PatternLibrary, get_library
from .schemas import (
    CastOn,
    Group,
    Knit,
    KnitTogether,
    Pattern,
    Purl,
    PurlTogether,
    Row,
    SlipKnitPassOver,
    SlipSlipKnit,
    Stitch,
    YarnOver,
)
from .utilities import (
    consumed,
    infer_cast_on,
    produced,
    suggest_cast_on,
    total_consumed,
    total_produced,
)

# Short name used by display code: cast_on(pattern) -> CastOn.
cast_on = infer_cast_on

__all__ = [
    # schemas
    "Stitch",
    "Knit",
    "KnitTogether",
    "SlipSlipKnit",
    "Purl",
    "PurlTogether",
    "YarnOver",
    "SlipKnitPassOver",
    "Group",
    "Row",
    "Pattern",
    "CastOn",
    # counts
    "consumed",
    "produced",
    "total_consumed",
    "total_produced",
    # cast-on
    "cast_on",
    "infer_cast_on",
    "suggest_cast_on",
    # simulation
    "stitches_after_knitting",
    "work_row",
    "RowResult",
    # state machine
    "KnittingState",
    "start_knitting",
    "advance_row",
    # library
    "PatternLibrary",
    "get_library",
    # errors
    "KnittingError",
    "DivisionByZeroRepeatError",
    "InsufficientStitchesError",
    "RowIndexOutOfRangeError",
]
