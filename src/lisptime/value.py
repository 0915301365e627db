"""Fixed-shape internal representation of a timestamp or duration."""

from __future__ import annotations

from dataclasses import dataclass

from lisptime._constants import (
    LO_TIME_BITS,
    LO_TIME_MASK,
    LO_TIME_RADIX,
    NS_PER_US,
    PS_PER_NS,
    PS_PER_US,
    US_PER_SECOND,
)
from lisptime._errors import ERR_MSG_NOT_REPRESENTABLE, TimeOutOfRangeError
from lisptime.clock import SYSTEM_CLOCK, Clock
from lisptime.limits import DEFAULT_SAFE_RANGE, SafeRange


def normalize_components(
    high: int, low: int, usec: int, psec: int
) -> tuple[int, int, int, int]:
    """Carry out-of-range lower-order components into higher-order ones.

    Each component may be any integer, including negative ones. Carries use
    floor division so that the three trailing digits always end up
    non-negative; the sign of the whole value lives in ``hi``.
    The result's ``hi`` is not range checked.
    """
    carry, ps = divmod(psec, PS_PER_US)
    us_total = usec + carry
    carry, us = divmod(us_total, US_PER_SECOND)
    lo = low + carry
    hi = high + (lo >> LO_TIME_BITS)
    # Safe only after the shift above has moved the overflow into hi.
    lo &= LO_TIME_MASK
    return hi, lo, us, ps


@dataclass(frozen=True)
class TimeValue:
    """A time as ``(hi * 65536 + lo)`` seconds plus ``us`` microseconds plus ``ps`` picoseconds.

    ``lo``, ``us`` and ``ps`` are always within their digit ranges, so a
    negative time carries its sign only in ``hi``: one second before the
    epoch is ``TimeValue(-1, 65535, 0, 0)``.

    Instances are normally built through :meth:`from_components`,
    :meth:`from_seconds_nanoseconds` or :meth:`from_current_time`, which
    normalize their input and check ``hi`` against a :class:`SafeRange`.
    The plain constructor only accepts already normalized digits.
    """

    hi: int = 0
    lo: int = 0
    us: int = 0
    ps: int = 0

    def __post_init__(self) -> None:
        for name in ("hi", "lo", "us", "ps"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"TimeValue.{name} must be an int, got {value!r}")
        if not 0 <= self.lo < LO_TIME_RADIX:
            raise ValueError(f"TimeValue.lo out of range: {self.lo}")
        if not 0 <= self.us < US_PER_SECOND:
            raise ValueError(f"TimeValue.us out of range: {self.us}")
        if not 0 <= self.ps < PS_PER_US:
            raise ValueError(f"TimeValue.ps out of range: {self.ps}")

    @classmethod
    def from_components(
        cls,
        high: int,
        low: int,
        usec: int = 0,
        psec: int = 0,
        *,
        safe_range: SafeRange = DEFAULT_SAFE_RANGE,
    ) -> TimeValue:
        """Normalize arbitrary integer components into a TimeValue.

        Raises:
            TimeOutOfRangeError: If the normalized ``hi`` does not fit ``safe_range``.
        """
        hi, lo, us, ps = normalize_components(high, low, usec, psec)
        if not safe_range.fits(hi):
            raise TimeOutOfRangeError(
                ERR_MSG_NOT_REPRESENTABLE,
                f"high seconds {hi} outside [{safe_range.min}, {safe_range.max}]",
            )
        return cls(hi, lo, us, ps)

    @classmethod
    def from_seconds_nanoseconds(
        cls,
        seconds: int,
        nanoseconds: int,
        *,
        safe_range: SafeRange = DEFAULT_SAFE_RANGE,
    ) -> TimeValue:
        us, ns = divmod(nanoseconds, NS_PER_US)
        return cls.from_components(
            0, seconds, us, ns * PS_PER_NS, safe_range=safe_range
        )

    @classmethod
    def from_current_time(
        cls,
        clock: Clock | None = None,
        *,
        safe_range: SafeRange = DEFAULT_SAFE_RANGE,
    ) -> TimeValue:
        seconds, nanoseconds = (clock or SYSTEM_CLOCK).now()
        return cls.from_seconds_nanoseconds(
            seconds, nanoseconds, safe_range=safe_range
        )

    @property
    def seconds(self) -> int:
        """Whole seconds, ``hi * 65536 + lo``."""
        return (self.hi << LO_TIME_BITS) + self.lo

    def to_raw_seconds_nanoseconds(self) -> tuple[int, int]:
        """Return an OS-style ``(seconds, nanoseconds)`` pair.

        Lossy: picoseconds below one nanosecond are truncated.
        """
        return self.seconds, self.us * NS_PER_US + self.ps // PS_PER_NS

    def truncated(self, length: int) -> TimeValue:
        """Return this value with the fields beyond ``length`` zeroed."""
        if length >= 4:
            return self
        if length == 3:
            return TimeValue(self.hi, self.lo, self.us, 0)
        return TimeValue(self.hi, self.lo, 0, 0)


ZERO = TimeValue()
