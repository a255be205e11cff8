"""
Row, Pattern and CastOn: the structures stitch arithmetic runs over.

A Row is split into a fixed start, a middle section repeated as many times
as the live stitches allow, and a fixed end. A Pattern is an ordered
sequence of rows worked top to bottom and then again from row 1. All types
are frozen; sequences given as lists are stored as tuples.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from knitcount.errors import RowIndexOutOfRangeError

from .stitch import Stitch, as_stitches


@dataclass(frozen=True)
class Row:
    """
    One row of a pattern.

    Attributes:
        start: Stitches worked once at the beginning of the row.
        repetition: Stitches repeated to fill the middle of the row.
        end: Stitches worked once at the end of the row.
    """

    start: tuple[Stitch, ...] = ()
    repetition: tuple[Stitch, ...] = ()
    end: tuple[Stitch, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_stitches(self.start))
        object.__setattr__(self, "repetition", as_stitches(self.repetition))
        object.__setattr__(self, "end", as_stitches(self.end))


@dataclass(frozen=True)
class Pattern:
    """
    A named, cyclically worked sequence of rows.

    Rows are numbered from 1 to match how knitters read patterns.
    """

    name: str
    rows: tuple[Row, ...]

    def __post_init__(self) -> None:
        rows = tuple(self.rows)
        for r in rows:
            if not isinstance(r, Row):
                raise TypeError(f"Pattern rows must be Row instances, got {type(r).__name__}")
        object.__setattr__(self, "rows", rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def row(self, number: int) -> Row:
        """Return row ``number`` (1-based)."""
        if not 1 <= number <= len(self.rows):
            raise RowIndexOutOfRangeError(
                f"Row {number} is outside pattern {self.name!r} with {len(self.rows)} rows"
            )
        return self.rows[number - 1]


@dataclass(frozen=True)
class CastOn:
    """
    Cast-on sizing for a pattern: ``rest + k * multiple`` stitches for k >= 0.

    Attributes:
        multiple: Stitches consumed by one pass of the sizing row's repeat.
        rest: Stitches consumed by the sizing row's fixed start and end.
    """

    multiple: int
    rest: int

    def __post_init__(self) -> None:
        if self.multiple < 0:
            raise ValueError(f"multiple must be >= 0, got {self.multiple}")
        if self.rest < 0:
            raise ValueError(f"rest must be >= 0, got {self.rest}")

    def stitches(self, repeats: int) -> int:
        """Cast-on count for ``repeats`` passes of the repeating section."""
        if repeats < 0:
            raise ValueError(f"repeats must be >= 0, got {repeats}")
        return self.rest + repeats * self.multiple
