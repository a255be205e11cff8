"""
Stitch instructions: the leaves and groups a row is built from.

Each variant is a frozen dataclass with fail-fast validation in
__post_init__. Counting lives in utilities.counts; these types only carry
the structure. Groups own their children as tuples, so stitches are
hashable and safe to share between rows and patterns.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Knit:
    """``count`` plain knit stitches."""

    count: int = 1

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"Knit count must be >= 1, got {self.count}")


@dataclass(frozen=True)
class KnitTogether:
    """``count`` stitches knit together into one."""

    count: int = 2

    def __post_init__(self) -> None:
        if self.count < 2:
            raise ValueError(f"KnitTogether count must be >= 2, got {self.count}")


@dataclass(frozen=True)
class SlipSlipKnit:
    """Left-leaning two-stitch decrease."""


@dataclass(frozen=True)
class Purl:
    """``count`` plain purl stitches."""

    count: int = 1

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"Purl count must be >= 1, got {self.count}")


@dataclass(frozen=True)
class PurlTogether:
    """``count`` stitches purled together into one."""

    count: int = 2

    def __post_init__(self) -> None:
        if self.count < 2:
            raise ValueError(f"PurlTogether count must be >= 2, got {self.count}")


@dataclass(frozen=True)
class YarnOver:
    """Wrap the yarn to make a new stitch without working an existing one."""


@dataclass(frozen=True)
class SlipKnitPassOver:
    """Slip one, knit one, pass the slipped stitch over."""


@dataclass(frozen=True)
class Group:
    """
    A bracketed sequence of stitches worked ``repeat`` times.

    Groups may nest. A repeat of 0 is allowed and contributes nothing.

    Attributes:
        repeat: Number of times the children are worked.
        stitches: Ordered child stitches.
    """

    repeat: int
    stitches: tuple[Stitch, ...] = ()

    def __post_init__(self) -> None:
        if self.repeat < 0:
            raise ValueError(f"Group repeat must be >= 0, got {self.repeat}")
        # Accept lists at construction sites and store an immutable tuple.
        object.__setattr__(self, "stitches", as_stitches(self.stitches))


Stitch = Union[
    Knit,
    KnitTogether,
    SlipSlipKnit,
    Purl,
    PurlTogether,
    YarnOver,
    SlipKnitPassOver,
    Group,
]

STITCH_TYPES: tuple[type, ...] = (
    Knit,
    KnitTogether,
    SlipSlipKnit,
    Purl,
    PurlTogether,
    YarnOver,
    SlipKnitPassOver,
    Group,
)


def as_stitches(stitches: Iterable[Stitch]) -> tuple[Stitch, ...]:
    """Return ``stitches`` as a tuple, rejecting anything that is not a Stitch."""
    result = tuple(stitches)
    for s in result:
        if not isinstance(s, STITCH_TYPES):
            raise TypeError(f"Expected a Stitch, got {type(s).__name__}: {s!r}")
    return result
