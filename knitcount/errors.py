"""
Exceptions raised by stitch-count simulation and the knitting state machine.

Construction checks on stitches, rows and cast-ons raise plain ValueError;
the classes here cover failures that only show up when a row is worked.
"""

from __future__ import annotations


class KnittingError(Exception):
    """Base class for errors raised while working a pattern."""


class DivisionByZeroRepeatError(KnittingError, ZeroDivisionError):
    """A row's repeating section consumes no stitches but stitches remain to fill."""


class InsufficientStitchesError(KnittingError, ValueError):
    """Fewer stitches are on the needle than a row's fixed sections consume."""


class RowIndexOutOfRangeError(KnittingError, IndexError):
    """A row number outside the pattern was requested. Indicates a caller bug."""
