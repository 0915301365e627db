"""Current-time sources.

The decoder samples a clock whenever a caller passes ``None`` ("now").
A clock is sampled at call time and never cached.
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable

from lisptime._constants import NS_PER_SECOND


@runtime_checkable
class Clock(Protocol):
    """Minimal current-time source protocol."""

    def now(self) -> tuple[int, int]:
        """Return ``(seconds, nanoseconds)`` with ``0 <= nanoseconds < 10**9``."""
        ...


class SystemClock:
    """Wall clock backed by :func:`time.time_ns`."""

    def now(self) -> tuple[int, int]:
        return divmod(time.time_ns(), NS_PER_SECOND)


class FixedClock:
    """Clock frozen at one instant, for reproducible callers and tests."""

    def __init__(self, seconds: int, nanoseconds: int = 0) -> None:
        if not 0 <= nanoseconds < NS_PER_SECOND:
            raise ValueError(f"nanoseconds out of range: {nanoseconds}")
        self._seconds = seconds
        self._nanoseconds = nanoseconds

    def now(self) -> tuple[int, int]:
        return self._seconds, self._nanoseconds


SYSTEM_CLOCK = SystemClock()
