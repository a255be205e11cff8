"""
Cast-on inference and sizing.

infer_cast_on picks the row whose repeating section should drive the
cast-on count. It is a heuristic: the first row whose repeat consumes two
or more stitches wins, and rows before it only matter when no such row
exists. Patterns that deliberately rely on a narrow repeat on an earlier
row will be sized from the later one.
"""

from __future__ import annotations

import logging

from knitcount.schemas.pattern import CastOn, Pattern

from .counts import total_consumed

logger = logging.getLogger(__name__)

# Repeats consuming fewer stitches than this say nothing about sizing.
MIN_SIZING_REPEAT = 2

# Returned for a pattern with no rows.
_EMPTY_CAST_ON = CastOn(multiple=1, rest=0)


def infer_cast_on(pattern: Pattern) -> CastOn:
    """
    Estimate the cast-on for ``pattern`` as ``rest + k * multiple``.

    Walks the rows in order. Each row's repeat and fixed sections replace
    the running guess; the walk stops at the first row whose repeat
    consumes at least MIN_SIZING_REPEAT stitches. If no row qualifies, the
    last row's values are returned. A last row with no repeat gives a
    multiple of 0: the only workable cast-on is its fixed sections.
    """
    guess = _EMPTY_CAST_ON
    for number, row in enumerate(pattern, start=1):
        rest = total_consumed(row.start) + total_consumed(row.end)
        multiple = total_consumed(row.repetition)
        guess = CastOn(multiple=multiple, rest=rest)
        if multiple >= MIN_SIZING_REPEAT:
            logger.debug("Cast-on for %r sized from row %d: %s", pattern.name, number, guess)
            return guess
    logger.debug("No sizing repeat in %r, using last row: %s", pattern.name, guess)
    return guess


def cast_on_counts(cast_on: CastOn, low: int, high: int) -> list[int]:
    """
    Every viable cast-on count in the closed range ``[low, high]``.

    Returns:
        Sorted list of counts ``rest + k * multiple`` (k >= 0). Empty if
        none fall inside the range.
    """
    if low > high:
        raise ValueError(f"low must be <= high, got {low} > {high}")
    if cast_on.multiple == 0:
        return [cast_on.rest] if low <= cast_on.rest <= high else []

    first_k = max(0, -(-(low - cast_on.rest) // cast_on.multiple))
    result: list[int] = []
    count = cast_on.stitches(first_k)
    while count <= high:
        result.append(count)
        count += cast_on.multiple
    return result


def suggest_cast_on(pattern: Pattern, target: int) -> int:
    """
    The viable cast-on count for ``pattern`` closest to ``target``.

    On a tie prefers the larger count. Never returns fewer than the
    sizing row's fixed sections consume.
    """
    cast_on = infer_cast_on(pattern)
    if cast_on.multiple == 0 or target <= cast_on.rest:
        return cast_on.rest

    below = cast_on.stitches((target - cast_on.rest) // cast_on.multiple)
    above = below + cast_on.multiple if below < target else below
    return min((below, above), key=lambda c: (abs(c - target), -c))
