"""Shared test fixtures."""

import pytest

from lisptime import FixedClock, SafeRange

# 1_700_000_000 seconds == 25939 * 65536 + 61696
NOW_SECONDS = 1_700_000_000
NOW_NANOSECONDS = 123_456_789
NOW_TUPLE = (25939, 61696, 123456, 789000)


@pytest.fixture
def fixed_clock():
    return FixedClock(NOW_SECONDS, NOW_NANOSECONDS)


@pytest.fixture
def narrow_range():
    """A safe range small enough to overflow with everyday numbers."""
    return SafeRange(min=-8, max=7)
