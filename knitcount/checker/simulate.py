"""
Row simulation: the stitch count after working one row.

The fixed start and end of a row are worked once. Whatever stitches remain
are filled with as many whole passes of the repeating section as fit;
stitches that do not make up a whole pass are left unworked and dropped
from the outgoing count.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from knitcount.errors import DivisionByZeroRepeatError, InsufficientStitchesError
from knitcount.schemas.pattern import Row
from knitcount.utilities.counts import total_consumed, total_produced

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RowResult:
    """
    Breakdown of a worked row.

    Attributes:
        initial_stitches: Live stitches before the row.
        repeats: Whole passes of the repeating section worked.
        leftover: Stitches left after the last whole pass.
        stitches: Live stitches after the row.
    """

    initial_stitches: int
    repeats: int
    leftover: int
    stitches: int


def work_row(row: Row, initial_stitches: int) -> RowResult:
    """
    Work ``row`` starting from ``initial_stitches`` live stitches.

    Raises:
        InsufficientStitchesError: ``initial_stitches`` does not cover the
            row's fixed start and end.
        DivisionByZeroRepeatError: the repeating section consumes no
            stitches but some are left to fill.
    """
    fixed = total_consumed(row.start) + total_consumed(row.end)
    available = initial_stitches - fixed
    if available < 0:
        raise InsufficientStitchesError(
            f"Row needs at least {fixed} stitches for its fixed sections, "
            f"got {initial_stitches}"
        )

    per_repeat = total_consumed(row.repetition)
    if per_repeat == 0:
        if available != 0:
            raise DivisionByZeroRepeatError(
                f"Repeating section consumes no stitches but {available} remain to fill"
            )
        repeats, leftover = 0, 0
    else:
        repeats, leftover = divmod(available, per_repeat)

    if leftover:
        logger.debug(
            "%d stitches left after %d repeats of %d", leftover, repeats, per_repeat
        )

    stitches = (
        total_produced(row.start)
        + total_produced(row.repetition) * repeats
        + total_produced(row.end)
    )
    return RowResult(
        initial_stitches=initial_stitches,
        repeats=repeats,
        leftover=leftover,
        stitches=stitches,
    )


def stitches_after_knitting(row: Row, initial_stitches: int) -> int:
    """Live stitch count after working ``row`` from ``initial_stitches``."""
    return work_row(row, initial_stitches).stitches
