"""Tests for knitcount.checker.simulate: working a single row."""

import pytest

from knitcount.checker.simulate import RowResult, stitches_after_knitting, work_row
from knitcount.errors import DivisionByZeroRepeatError, InsufficientStitchesError, KnittingError
from knitcount.schemas.pattern import Row
from knitcount.schemas.stitch import (
    Group,
    Knit,
    KnitTogether,
    Purl,
    SlipSlipKnit,
    YarnOver,
)


class TestStitchesAfterKnitting:
    @pytest.mark.parametrize("n", [0, 1, 10, 137])
    def test_plain_purl_row_preserves_count(self, n):
        assert stitches_after_knitting(Row(repetition=[Purl(1)]), n) == n

    def test_mistake_stitch_row(self):
        row = Row([], [Knit(2), Purl(2)], [Knit(2), Purl(1)])
        assert stitches_after_knitting(row, 11) == 11

    def test_decrease_row(self):
        # k1, *k2tog* to last st, k1
        row = Row([Knit(1)], [KnitTogether(2)], [Knit(1)])
        assert stitches_after_knitting(row, 20) == 11

    def test_increase_row(self):
        row = Row(repetition=[Knit(1), YarnOver()])
        assert stitches_after_knitting(row, 10) == 20

    def test_grouped_repeat(self):
        row = Row(
            repetition=[
                Group(2, [KnitTogether(2)]),
                Group(4, [YarnOver(), Knit(1)]),
                Group(2, [KnitTogether(2)]),
            ]
        )
        assert stitches_after_knitting(row, 36) == 36

    def test_only_fixed_sections(self):
        row = Row(start=[Knit(3)], end=[SlipSlipKnit()])
        assert stitches_after_knitting(row, 5) == 4


class TestWorkRow:
    def test_breakdown(self):
        row = Row([], [Knit(2), Purl(2)], [Knit(2), Purl(1)])
        assert work_row(row, 11) == RowResult(
            initial_stitches=11, repeats=2, leftover=0, stitches=11
        )

    def test_leftover_stitches_dropped(self):
        row = Row(repetition=[Knit(2), Purl(2)])
        result = work_row(row, 10)
        assert result.repeats == 2
        assert result.leftover == 2
        assert result.stitches == 8

    def test_fixed_sections_exactly_fill(self):
        row = Row(start=[Knit(2)], repetition=[Knit(4)], end=[Knit(2)])
        result = work_row(row, 4)
        assert result.repeats == 0
        assert result.stitches == 4


class TestErrors:
    def test_zero_consuming_repeat_with_stitches_left(self):
        row = Row(start=[Knit(2)], repetition=[YarnOver()])
        with pytest.raises(DivisionByZeroRepeatError, match="consumes no stitches"):
            work_row(row, 5)

    def test_empty_repeat_with_stitches_left(self):
        with pytest.raises(DivisionByZeroRepeatError):
            stitches_after_knitting(Row(start=[Knit(2)]), 3)

    def test_division_error_is_zero_division(self):
        with pytest.raises(ZeroDivisionError):
            stitches_after_knitting(Row(repetition=[Group(0, [Knit(1)])]), 4)

    def test_zero_consuming_repeat_with_nothing_left(self):
        row = Row(start=[Knit(2)], repetition=[YarnOver()], end=[Knit(1)])
        result = work_row(row, 3)
        assert result.repeats == 0
        assert result.stitches == 3

    def test_too_few_stitches_for_fixed_sections(self):
        row = Row([Knit(3)], [Purl(1)], [Knit(3)])
        with pytest.raises(InsufficientStitchesError, match="at least 6 stitches"):
            work_row(row, 5)

    def test_insufficient_is_value_error(self):
        with pytest.raises(ValueError):
            stitches_after_knitting(Row(start=[Knit(2)]), 1)

    def test_errors_share_base(self):
        assert issubclass(DivisionByZeroRepeatError, KnittingError)
        assert issubclass(InsufficientStitchesError, KnittingError)
