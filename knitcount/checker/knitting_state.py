"""
Knitting state machine.

KnittingState tracks where a knitter is in a pattern: the row about to be
worked, how many passes through the pattern have been started, and the
live stitch count. KnittingState is frozen; advance_row returns a new
state rather than mutating in place. The pattern cycles forever, so there
is no terminal state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from knitcount.errors import RowIndexOutOfRangeError
from knitcount.schemas.pattern import Pattern, Row
from knitcount.utilities.cast_on import infer_cast_on

from .simulate import stitches_after_knitting

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KnittingState:
    """
    Position within a pattern.

    Attributes:
        stitches: Live stitches on the needle.
        repetition: Current pass through the pattern, starting at 1.
        current_row: Row about to be worked, 1-based.
        pattern: The pattern being worked.
    """

    stitches: int
    repetition: int
    current_row: int
    pattern: Pattern

    def __post_init__(self) -> None:
        if self.stitches < 0:
            raise ValueError(f"stitches cannot be negative, got {self.stitches}")
        if self.repetition < 1:
            raise ValueError(f"repetition must be >= 1, got {self.repetition}")
        if not 1 <= self.current_row <= len(self.pattern):
            raise RowIndexOutOfRangeError(
                f"current_row {self.current_row} is outside pattern "
                f"{self.pattern.name!r} with {len(self.pattern)} rows"
            )

    @property
    def row(self) -> Row:
        """The row about to be worked."""
        return self.pattern.row(self.current_row)

    def advance(self) -> KnittingState:
        return advance_row(self)


def start_knitting(pattern: Pattern, stitches: int | None = None) -> KnittingState:
    """
    Initial state for ``pattern``: row 1 of the first repetition.

    When ``stitches`` is omitted, casts on the smallest count with one pass
    of the pattern's sizing repeat.
    """
    if stitches is None:
        stitches = infer_cast_on(pattern).stitches(1)
    return KnittingState(stitches=stitches, repetition=1, current_row=1, pattern=pattern)


def advance_row(state: KnittingState) -> KnittingState:
    """
    Work the current row and move to the next one.

    After the last row the state wraps to row 1 and the repetition counter
    increments. Errors from row simulation propagate unchanged.
    """
    pattern = state.pattern
    new_stitches = stitches_after_knitting(pattern.row(state.current_row), state.stitches)

    if state.current_row < len(pattern):
        next_row, repetition = state.current_row + 1, state.repetition
    else:
        next_row, repetition = 1, state.repetition + 1
        logger.debug("Finished repetition %d of %r", state.repetition, pattern.name)

    logger.debug(
        "Row %d of %r: %d -> %d stitches",
        state.current_row,
        pattern.name,
        state.stitches,
        new_stitches,
    )
    return KnittingState(
        stitches=new_stitches,
        repetition=repetition,
        current_row=next_row,
        pattern=pattern,
    )
