"""Tests for knitcount.utilities.counts: consumed and produced stitch counts."""

import pytest

from knitcount.schemas.stitch import (
    Group,
    Knit,
    KnitTogether,
    Purl,
    PurlTogether,
    SlipKnitPassOver,
    SlipSlipKnit,
    YarnOver,
)
from knitcount.utilities.counts import consumed, produced, total_consumed, total_produced


class TestLeafStitches:
    @pytest.mark.parametrize(
        ("stitch", "expected_consumed", "expected_produced"),
        [
            (Knit(1), 1, 1),
            (Knit(5), 5, 5),
            (Purl(3), 3, 3),
            (KnitTogether(2), 2, 1),
            (KnitTogether(3), 3, 1),
            (PurlTogether(2), 2, 1),
            (SlipSlipKnit(), 2, 1),
            (SlipKnitPassOver(), 2, 1),
            (YarnOver(), 0, 1),
        ],
    )
    def test_counts(self, stitch, expected_consumed, expected_produced):
        assert consumed(stitch) == expected_consumed
        assert produced(stitch) == expected_produced


class TestGroup:
    def test_scales_children(self):
        g = Group(4, [YarnOver(), Knit(1)])
        assert consumed(g) == 4
        assert produced(g) == 8

    def test_zero_repeat(self):
        g = Group(0, [Knit(3), KnitTogether(2)])
        assert consumed(g) == 0
        assert produced(g) == 0

    def test_empty_children(self):
        assert consumed(Group(5)) == 0
        assert produced(Group(5)) == 0

    def test_nested(self):
        inner = Group(3, [KnitTogether(2)])
        outer = Group(2, [inner, YarnOver()])
        assert consumed(outer) == 2 * (3 * 2 + 0)
        assert produced(outer) == 2 * (3 * 1 + 1)

    @pytest.mark.parametrize("repeat", [0, 1, 2, 7])
    def test_multiplies_sequence_totals(self, repeat):
        children = [Knit(2), SlipSlipKnit(), YarnOver(), Purl(1)]
        g = Group(repeat, children)
        assert consumed(g) == repeat * total_consumed(children)
        assert produced(g) == repeat * total_produced(children)


class TestSequences:
    def test_empty_sequence(self):
        assert total_consumed([]) == 0
        assert total_produced([]) == 0

    def test_sums_elements(self):
        stitches = [Knit(2), Purl(2)]
        assert total_consumed(stitches) == 4
        assert total_produced(stitches) == 4

    def test_balanced_lace_repeat(self):
        repeat = [
            KnitTogether(2),
            Knit(1),
            YarnOver(),
            Knit(1),
            YarnOver(),
            Knit(1),
            SlipSlipKnit(),
            Knit(1),
        ]
        assert total_consumed(repeat) == 8
        assert total_produced(repeat) == 8

    def test_accepts_generator(self):
        assert total_consumed(Knit(n) for n in (1, 2, 3)) == 6
