"""Carry-correct addition and subtraction of time values."""

from __future__ import annotations

import logging
from collections.abc import Callable

from lisptime._constants import LO_TIME_RADIX, PS_PER_US, US_PER_SECOND
from lisptime._decoder import decode_time
from lisptime._encoder import encode
from lisptime._errors import ERR_MSG_NOT_REPRESENTABLE, TimeOverflowError
from lisptime.clock import Clock
from lisptime.forms import TimeSpec
from lisptime.limits import DEFAULT_SAFE_RANGE, SafeRange
from lisptime.value import TimeValue

logger = logging.getLogger(__name__)

Fields = tuple[int, int, int, int]
FieldOp = Callable[[TimeValue, TimeValue], Fields]


def _add_fields(a: TimeValue, b: TimeValue) -> Fields:
    hi = a.hi + b.hi
    lo = a.lo + b.lo
    us = a.us + b.us
    ps = a.ps + b.ps
    # Normalized operands can only overflow each digit upward, by at most one.
    if ps >= PS_PER_US:
        us += 1
        ps -= PS_PER_US
    if us >= US_PER_SECOND:
        lo += 1
        us -= US_PER_SECOND
    if lo >= LO_TIME_RADIX:
        hi += 1
        lo -= LO_TIME_RADIX
    return hi, lo, us, ps


def _subtract_fields(a: TimeValue, b: TimeValue) -> Fields:
    hi = a.hi - b.hi
    lo = a.lo - b.lo
    us = a.us - b.us
    ps = a.ps - b.ps
    # Normalized operands can only drive each digit negative, by at most one.
    if ps < 0:
        us -= 1
        ps += PS_PER_US
    if us < 0:
        lo -= 1
        us += US_PER_SECOND
    if lo < 0:
        hi -= 1
        lo += LO_TIME_RADIX
    return hi, lo, us, ps


def _checked(
    op: FieldOp, a: TimeValue, b: TimeValue, safe_range: SafeRange
) -> TimeValue:
    hi, lo, us, ps = op(a, b)
    # Only hi is checked; lo, us and ps are in range by construction.
    if not safe_range.fits(hi):
        err = TimeOverflowError(
            ERR_MSG_NOT_REPRESENTABLE,
            f"result high seconds {hi} from {a} and {b} "
            f"outside [{safe_range.min}, {safe_range.max}]",
        )
        logger.debug("time arithmetic overflow: %s", err.internal())
        raise err
    return TimeValue(hi, lo, us, ps)


def add(
    a: TimeValue, b: TimeValue, *, safe_range: SafeRange = DEFAULT_SAFE_RANGE
) -> TimeValue:
    """Return ``a + b``.

    Raises:
        TimeOverflowError: If the sum's high-order seconds leave ``safe_range``.
    """
    return _checked(_add_fields, a, b, safe_range)


def subtract(
    a: TimeValue, b: TimeValue, *, safe_range: SafeRange = DEFAULT_SAFE_RANGE
) -> TimeValue:
    """Return ``a - b``.

    Raises:
        TimeOverflowError: If the difference's high-order seconds leave ``safe_range``.
    """
    return _checked(_subtract_fields, a, b, safe_range)


def _time_arith(
    a: TimeSpec,
    b: TimeSpec,
    op: FieldOp,
    clock: Clock | None,
    safe_range: SafeRange,
) -> tuple[int, ...]:
    ta, alen = decode_time(a, clock=clock, safe_range=safe_range)
    tb, blen = decode_time(b, clock=clock, safe_range=safe_range)
    t = _checked(op, ta, tb, safe_range)
    return encode(t, max(alen, blen))


def time_add(
    a: TimeSpec,
    b: TimeSpec,
    *,
    clock: Clock | None = None,
    safe_range: SafeRange = DEFAULT_SAFE_RANGE,
) -> tuple[int, ...]:
    """Return the sum of two time specifications as an external tuple.

    ``None`` for either argument stands for the current time. The result
    is as long as the longer operand.

    Raises:
        InvalidTimeError: If either argument does not represent a time.
        TimeOutOfRangeError: If either argument or the sum is not representable.
    """
    return _time_arith(a, b, _add_fields, clock, safe_range)


def time_subtract(
    a: TimeSpec,
    b: TimeSpec,
    *,
    clock: Clock | None = None,
    safe_range: SafeRange = DEFAULT_SAFE_RANGE,
) -> tuple[int, ...]:
    """Return ``a - b`` as an external tuple.

    Use :func:`float_time` to turn the difference into elapsed seconds.
    ``None`` for either argument stands for the current time.

    Raises:
        InvalidTimeError: If either argument does not represent a time.
        TimeOutOfRangeError: If either argument or the difference is not representable.
    """
    return _time_arith(a, b, _subtract_fields, clock, safe_range)
