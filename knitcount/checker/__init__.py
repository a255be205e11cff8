"""
Row simulation and the knitting state machine.

Works rows against a live stitch count and steps through a pattern one row
at a time, wrapping to row 1 and counting repetitions of the whole pattern.
"""

from .knitting_state import KnittingState, advance_row, start_knitting
from .simulate import RowResult, stitches_after_knitting, work_row

__all__ = [
    # Simulation
    "work_row",
    "stitches_after_knitting",
    "RowResult",
    # State machine
    "KnittingState",
    "start_knitting",
    "advance_row",
]
