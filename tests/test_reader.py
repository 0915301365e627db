"""Reading and printing Lisp time syntax."""

import math

import pytest
from lark.exceptions import LarkError

from lisptime import (
    DottedList,
    InvalidTimeError,
    TimeErrorKind,
    TimeValue,
    decode,
    print_time,
    read_time,
    time_add,
)


class TestReadTime:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            pytest.param("(1 2 3 4)", (1, 2, 3, 4), id="list"),
            pytest.param("(24000 . 1234)", DottedList((24000,), 1234), id="dotted_pair"),
            pytest.param("(1 2 . 3)", DottedList((1, 2), 3), id="dotted_usec"),
            pytest.param("(1 . nil)", (1,), id="nil_tail"),
            pytest.param("  ( 1\n 2 ) ", (1, 2), id="whitespace"),
            pytest.param("12", 12, id="integer"),
            pytest.param("12.", 12, id="integer_trailing_dot"),
            pytest.param("-3", -3, id="negative_integer"),
            pytest.param("1.5", 1.5, id="float"),
            pytest.param(".5", 0.5, id="leading_dot_float"),
            pytest.param("1e3", 1000.0, id="exponent"),
            pytest.param("(1 .5)", (1, 0.5), id="float_not_dot"),
            pytest.param("(1 . (2 3))", (1, 2, 3), id="dotted_list_tail"),
            pytest.param("(0 1 . (500000 7))", (0, 1, 500000, 7), id="dotted_list_tail_full"),
            pytest.param("(1 . (2 . 3))", DottedList((1, 2), 3), id="dotted_nested_dotted"),
            pytest.param("(1 . ())", (1,), id="empty_list_tail"),
        ],
    )
    def test_values(self, text, expected):
        assert read_time(text) == expected

    @pytest.mark.parametrize("text", ["nil", "()"])
    def test_nil(self, text):
        assert read_time(text) is None

    def test_infinity(self):
        assert read_time("1.0e+INF") == math.inf
        assert read_time("-1.0e+INF") == -math.inf

    def test_nan(self):
        assert math.isnan(read_time("0.0e+NaN"))

    @pytest.mark.parametrize("text", ["(1 2", "abc", "", "(1 . 2 3)", "1 2"])
    def test_malformed(self, text):
        with pytest.raises(InvalidTimeError) as excinfo:
            read_time(text)
        assert isinstance(excinfo.value.wrapped, LarkError)

    def test_dot_without_items(self):
        with pytest.raises(InvalidTimeError, match="Invalid time specification"):
            read_time("(. 1)")


class TestPrintTime:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            pytest.param((1, 2, 3, 4), "(1 2 3 4)", id="tuple"),
            pytest.param([0, 5], "(0 5)", id="list"),
            pytest.param(None, "nil", id="nil"),
            pytest.param((), "nil", id="empty"),
            pytest.param(DottedList((1,), 2), "(1 . 2)", id="dotted"),
            pytest.param(1.5, "1.5", id="float"),
            pytest.param(math.inf, "1.0e+INF", id="inf"),
            pytest.param(-math.inf, "-1.0e+INF", id="negative_inf"),
            pytest.param(math.nan, "0.0e+NaN", id="nan"),
        ],
    )
    def test_values(self, value, expected):
        assert print_time(value) == expected

    @pytest.mark.parametrize("value", [True, "x", {"a": 1}])
    def test_unprintable(self, value):
        with pytest.raises(TypeError):
            print_time(value)


class TestReadDecode:
    def test_carry(self):
        assert decode(read_time("(0 0 1500000 0)")).value == TimeValue(0, 1, 500_000, 0)

    def test_arithmetic_on_text(self):
        result = time_add(read_time("(0 1)"), read_time("(0 2 3 4)"))
        assert print_time(result) == "(0 3 3 4)"

    def test_obsolete_pair(self):
        assert decode(read_time("(1 . 2)")).value == TimeValue(1, 2)

    def test_float_low_rejected(self):
        assert decode(read_time("(0 1.5 0 0)")).error is TimeErrorKind.TYPE_MISMATCH

    def test_infinity_out_of_range(self):
        assert decode(read_time("1.0e+INF")).error is TimeErrorKind.OUT_OF_RANGE

    def test_list_tail_decodes_with_full_length(self):
        result = decode(read_time("(1 . (2 3))"))
        assert result.value == TimeValue(1, 2, 3, 0)
        assert result.length == 3

    def test_list_tail_with_picoseconds(self):
        result = decode(read_time("(0 1 . (500000 7))"))
        assert result.value == TimeValue(0, 1, 500_000, 7)
        assert result.length == 4

    def test_nested_dotted_tail_is_pair_with_usec(self):
        assert decode(read_time("(1 . (2 . 3))")).value == TimeValue(1, 2, 3, 0)
