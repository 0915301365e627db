"""Safe integer range for the high-order seconds field."""

from __future__ import annotations

from dataclasses import dataclass

from lisptime._constants import (
    LO_TIME_RADIX,
    MOST_NEGATIVE_FIXNUM,
    MOST_POSITIVE_FIXNUM,
)


@dataclass(frozen=True)
class SafeRange:
    """Inclusive bounds on ``TimeValue.hi``.

    Stands in for the host's tagged integer range. Every decode,
    arithmetic and float conversion checks its result against one
    of these explicitly.
    """

    min: int = MOST_NEGATIVE_FIXNUM
    max: int = MOST_POSITIVE_FIXNUM

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(f"safe range is empty: min {self.min} > max {self.max}")
        if self.min >= 0:
            # The float window is derived from min, so it has to be negative.
            raise ValueError(f"safe range min must be negative, got {self.min}")

    def fits(self, n: int) -> bool:
        return self.min <= n <= self.max

    def float_bounds(self) -> tuple[float, float]:
        """Return the half-open window ``[lower, upper)`` for float seconds."""
        lower = self.min * float(LO_TIME_RADIX)
        return lower, -lower


DEFAULT_SAFE_RANGE = SafeRange()
