"""Encoding TimeValue into external tuples."""

import pytest

from lisptime import TimeOverflowError, TimeValue, decode, encode, hi_time, lo_time, make_time
from tests.conftest import NOW_SECONDS, NOW_TUPLE

SAMPLES = [
    pytest.param(TimeValue(1, 2, 3, 4), id="small"),
    pytest.param(TimeValue(-1, 65535, 999_999, 999_999), id="just_below_zero"),
    pytest.param(TimeValue(*NOW_TUPLE), id="now"),
]


class TestEncode:
    def test_whole_seconds_only(self):
        assert encode(TimeValue(1, 2, 3, 4), 2) == (1, 2)

    def test_microseconds(self):
        assert encode(TimeValue(1, 2, 3, 4), 3) == (1, 2, 3)

    def test_full(self):
        assert encode(TimeValue(1, 2, 3, 4), 4) == (1, 2, 3, 4)

    def test_default_is_full(self):
        assert encode(TimeValue(1, 2, 3, 4)) == (1, 2, 3, 4)

    def test_matches_truncated_value(self):
        t = TimeValue(1, 2, 3, 4)
        assert encode(t, 3) == encode(t.truncated(3), 3)
        assert encode(t.truncated(2)) == (1, 2, 0, 0)

    @pytest.mark.parametrize("length", [0, 1, 5])
    def test_bad_length(self, length):
        with pytest.raises(ValueError, match="effective length"):
            encode(TimeValue(), length)

    @pytest.mark.parametrize("t", SAMPLES)
    @pytest.mark.parametrize("length", [2, 3, 4])
    def test_decode_truncates_not_rounds(self, t, length):
        result = decode(encode(t, length))
        assert result.value == t.truncated(length)
        assert result.length == length


class TestHiLoTime:
    def test_split(self):
        assert hi_time(NOW_SECONDS) == 25939
        assert lo_time(NOW_SECONDS) == 61696

    def test_negative(self):
        assert hi_time(-1) == -1
        assert lo_time(-1) == 65535

    def test_hi_overflow(self, narrow_range):
        with pytest.raises(TimeOverflowError):
            hi_time(8 * 65536, safe_range=narrow_range)

    def test_hi_at_limit(self, narrow_range):
        assert hi_time(8 * 65536 - 1, safe_range=narrow_range) == 7


class TestMakeTime:
    def test_timespec(self):
        assert make_time(NOW_SECONDS, 123_456_789) == NOW_TUPLE

    def test_negative_nanoseconds_stay_negative(self):
        assert make_time(0, -1) == (0, 0, 0, -1000)

    def test_negative_nanoseconds_truncate_toward_zero(self):
        assert make_time(0, -1500) == (0, 0, -1, -500_000)

    def test_result_decodes(self):
        assert decode(make_time(0, -1)).value == TimeValue(-1, 65535, 999_999, 999_000)
