"""Lossy conversion between TimeValue and float seconds."""

from __future__ import annotations

from lisptime._constants import LO_TIME_RADIX, NS_PER_SECOND
from lisptime._decoder import decode_float_time, decode_form, disassemble
from lisptime._errors import ERR_MSG_INVALID_TIME, InvalidTimeError
from lisptime.clock import SYSTEM_CLOCK, Clock
from lisptime.forms import FloatForm, NowForm, TimeSpec
from lisptime.limits import DEFAULT_SAFE_RANGE, SafeRange
from lisptime.value import TimeValue


def to_float(t: TimeValue) -> float:
    """Return ``t`` as float seconds. May lose precision."""
    # Fraction first, so the large hi term is added last.
    return (t.us * 1e6 + t.ps) / 1e12 + t.lo + t.hi * float(LO_TIME_RADIX)


def from_float(
    t: float, *, safe_range: SafeRange = DEFAULT_SAFE_RANGE
) -> TimeValue:
    """Convert float seconds to a TimeValue, truncating toward minus infinity.

    Raises:
        TimeOutOfRangeError: If ``t`` is outside the float window of
            ``safe_range``, or is NaN.
    """
    value, _ = decode_float_time(float(t), safe_range=safe_range).unwrap()
    return value


def float_time(
    time: TimeSpec = None,
    *,
    clock: Clock | None = None,
    safe_range: SafeRange = DEFAULT_SAFE_RANGE,
) -> float:
    """Return a time specification as float seconds since the epoch.

    ``None`` means the current time. Accepts ``(HIGH LOW)``,
    ``(HIGH LOW USEC)``, ``(HIGH LOW USEC PSEC)``, the obsolete
    ``(HIGH . LOW)``, an integer or a float. Floats are returned as is.
    The result may not be exact; use :func:`current_time` when precise
    timestamps are required.

    Raises:
        InvalidTimeError: If ``time`` does not represent a time.
        TimeOutOfRangeError: If the high-order seconds leave ``safe_range``.
    """
    form = disassemble(time)
    if form is None:
        raise InvalidTimeError(
            ERR_MSG_INVALID_TIME, f"not a time specification: {time!r}"
        )
    if isinstance(form, NowForm):
        seconds, nanoseconds = (clock or SYSTEM_CLOCK).now()
        return seconds + nanoseconds / NS_PER_SECOND
    if isinstance(form, FloatForm):
        return form.value
    value, _ = decode_form(form, safe_range=safe_range).unwrap()
    return to_float(value)
