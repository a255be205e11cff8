"""
Schema definitions for knitting patterns.

Stitch variants, rows, patterns and cast-on sizing. Everything here is an
immutable value; arithmetic over these types lives in utilities and checker.
"""

from .pattern import CastOn, Pattern, Row
from .stitch import (
    STITCH_TYPES,
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

__all__ = [
    # stitch
    "Stitch",
    "STITCH_TYPES",
    "Knit",
    "KnitTogether",
    "SlipSlipKnit",
    "Purl",
    "PurlTogether",
    "YarnOver",
    "SlipKnitPassOver",
    "Group",
    # pattern
    "Row",
    "Pattern",
    "CastOn",
]
