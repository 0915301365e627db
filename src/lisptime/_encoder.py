"""Encoding of TimeValue back into external tuples."""

from __future__ import annotations

from lisptime._constants import (
    LO_TIME_BITS,
    LO_TIME_MASK,
    NS_PER_US,
    PS_PER_NS,
)
from lisptime._errors import ERR_MSG_NOT_REPRESENTABLE, TimeOverflowError
from lisptime.limits import DEFAULT_SAFE_RANGE, SafeRange
from lisptime.value import TimeValue


def encode(t: TimeValue, length: int = 4) -> tuple[int, ...]:
    """Return the external tuple for ``t`` at effective length 2, 3 or 4.

    Length 2 keeps whole seconds only and length 3 drops picoseconds.
    Dropped fields are truncated, never rounded into the kept ones.
    """
    if length not in (2, 3, 4):
        raise ValueError(f"effective length must be 2, 3 or 4, got {length}")
    kept = t.truncated(length)
    return (kept.hi, kept.lo, kept.us, kept.ps)[:length]


def hi_time(seconds: int, *, safe_range: SafeRange = DEFAULT_SAFE_RANGE) -> int:
    """Return the upper part of ``seconds`` (everything but the bottom 16 bits)."""
    hi = seconds >> LO_TIME_BITS
    if not safe_range.fits(hi):
        raise TimeOverflowError(
            ERR_MSG_NOT_REPRESENTABLE,
            f"seconds {seconds} give high part {hi} outside "
            f"[{safe_range.min}, {safe_range.max}]",
        )
    return hi


def lo_time(seconds: int) -> int:
    """Return the bottom 16 bits of ``seconds``."""
    return seconds & LO_TIME_MASK


def _truncating_divmod(n: int, d: int) -> tuple[int, int]:
    q = abs(n) // d
    if n < 0:
        q = -q
    return q, n - q * d


def make_time(
    seconds: int,
    nanoseconds: int,
    *,
    safe_range: SafeRange = DEFAULT_SAFE_RANGE,
) -> tuple[int, int, int, int]:
    """Build the 4-element tuple for an OS ``(seconds, nanoseconds)`` pair.

    The nanosecond count is not normalized. A slightly negative count,
    as used for unknown file modification times, produces a
    correspondingly negative picosecond field: ``make_time(0, -1)`` is
    ``(0, 0, 0, -1000)``.
    """
    us, ns = _truncating_divmod(nanoseconds, NS_PER_US)
    return (
        hi_time(seconds, safe_range=safe_range),
        lo_time(seconds),
        us,
        ns * PS_PER_NS,
    )
