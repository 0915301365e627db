"""Current-time source tests."""

import pytest

from lisptime import FixedClock, SystemClock, TimeOverflowError, current_time
from lisptime.clock import Clock
from tests.conftest import NOW_SECONDS, NOW_TUPLE


class TestClocks:
    def test_fixed_clock(self, fixed_clock):
        assert fixed_clock.now() == (NOW_SECONDS, 123_456_789)

    def test_fixed_clock_rejects_bad_nanoseconds(self):
        with pytest.raises(ValueError):
            FixedClock(0, 1_000_000_000)

    def test_system_clock(self):
        seconds, nanoseconds = SystemClock().now()
        assert seconds > NOW_SECONDS
        assert 0 <= nanoseconds < 1_000_000_000

    @pytest.mark.parametrize("clock", [SystemClock(), FixedClock(0)])
    def test_satisfies_protocol(self, clock):
        assert isinstance(clock, Clock)


class TestCurrentTime:
    def test_four_fields(self, fixed_clock):
        assert current_time(clock=fixed_clock) == NOW_TUPLE

    def test_system_clock_default(self):
        hi, lo, us, ps = current_time()
        assert hi > 0
        assert 0 <= lo < 65536
        assert 0 <= us < 1_000_000
        assert ps % 1000 == 0

    def test_overflow(self, narrow_range):
        with pytest.raises(TimeOverflowError):
            current_time(clock=FixedClock(NOW_SECONDS), safe_range=narrow_range)
