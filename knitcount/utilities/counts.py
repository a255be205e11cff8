"""
Stitches consumed and produced by stitch instructions.

``consumed`` is how many live stitches an instruction works; ``produced`` is
how many stitches sit on the right needle afterwards. Both recurse through
groups and extend additively over sequences. No validation happens here:
counts are checked when stitches are constructed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from knitcount.schemas.stitch import (
    Group,
    Knit,
    KnitTogether,
    Purl,
    PurlTogether,
    SlipKnitPassOver,
    SlipSlipKnit,
    Stitch,
    YarnOver,
)

_CountFn = Callable[[Stitch], int]


def consumed(stitch: Stitch) -> int:
    """Number of existing stitches worked by ``stitch``."""
    return _CONSUMED[type(stitch)](stitch)


def produced(stitch: Stitch) -> int:
    """Number of stitches left on the needle after working ``stitch``."""
    return _PRODUCED[type(stitch)](stitch)


def total_consumed(stitches: Iterable[Stitch]) -> int:
    """Sum of ``consumed`` over a sequence of stitches."""
    return sum(consumed(s) for s in stitches)


def total_produced(stitches: Iterable[Stitch]) -> int:
    """Sum of ``produced`` over a sequence of stitches."""
    return sum(produced(s) for s in stitches)


_CONSUMED: dict[type, _CountFn] = {
    Knit: lambda s: s.count,
    KnitTogether: lambda s: s.count,
    Purl: lambda s: s.count,
    PurlTogether: lambda s: s.count,
    SlipSlipKnit: lambda s: 2,
    SlipKnitPassOver: lambda s: 2,
    YarnOver: lambda s: 0,
    Group: lambda s: s.repeat * total_consumed(s.stitches),
}

_PRODUCED: dict[type, _CountFn] = {
    Knit: lambda s: s.count,
    Purl: lambda s: s.count,
    KnitTogether: lambda s: 1,
    PurlTogether: lambda s: 1,
    SlipSlipKnit: lambda s: 1,
    SlipKnitPassOver: lambda s: 1,
    YarnOver: lambda s: 1,
    Group: lambda s: s.repeat * total_produced(s.stitches),
}
