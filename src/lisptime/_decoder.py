"""Decoding of external time specifications into TimeValue."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from lisptime._constants import (
    LO_TIME_RADIX,
    MAX_TIME_LENGTH,
    MIN_TIME_LENGTH,
    NS_PER_US,
    PS_PER_NS,
)
from lisptime._errors import TimeErrorKind
from lisptime.clock import SYSTEM_CLOCK, Clock
from lisptime.forms import (
    ComponentsForm,
    DottedList,
    FloatForm,
    NowForm,
    TimeForm,
    TimeSpec,
)
from lisptime.limits import DEFAULT_SAFE_RANGE, SafeRange
from lisptime.value import TimeValue, normalize_components

logger = logging.getLogger(__name__)


def is_fixnum(obj: Any) -> bool:
    """True for ints other than bools."""
    return isinstance(obj, int) and not isinstance(obj, bool)


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding one time specification.

    On success ``value`` holds the normalized time and ``length`` its
    effective length (2, 3 or 4). On failure ``value`` is None and
    ``error`` names the failure; a wrong-shaped input reports length 0.
    """

    value: TimeValue | None = None
    length: int = 0
    error: TimeErrorKind | None = None
    detail: str = ""

    @classmethod
    def success(cls, value: TimeValue, length: int) -> DecodeResult:
        return cls(value=value, length=length)

    @classmethod
    def failure(
        cls, error: TimeErrorKind, detail: str, length: int = 0
    ) -> DecodeResult:
        logger.debug("time decode failed (%s): %s", error, detail)
        return cls(error=error, detail=detail, length=length)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> tuple[TimeValue, int]:
        """Return ``(value, length)`` or raise the error's exception."""
        if self.error is not None:
            raise self.error.to_exception(self.detail)
        assert self.value is not None
        return self.value, self.length


def check_time_validity(result: DecodeResult) -> None:
    """Raise the exception matching a failed decode; do nothing on success."""
    if not result.ok:
        result.unwrap()


def _bind_positional(items: Sequence[Any]) -> ComponentsForm | None:
    if len(items) < MIN_TIME_LENGTH:
        return None
    high, low = items[0], items[1]
    usec = items[2] if len(items) > 2 else 0
    psec = items[3] if len(items) > 3 else 0
    if not is_fixnum(low):
        # Adding up times requires LOW to be an exact integer.
        return None
    return ComponentsForm(high, low, usec, psec, min(len(items), MAX_TIME_LENGTH))


def _bind_dotted(spec: DottedList) -> ComponentsForm | None:
    items = spec.items
    if spec.tail is None:
        return _bind_positional(items)
    if len(items) == 1:
        # (HIGH . LOW)
        high, low, usec, length = items[0], spec.tail, 0, 2
    elif len(items) == 2:
        # (HIGH LOW . USEC)
        high, low, usec, length = items[0], items[1], spec.tail, 3
    elif len(items) == 3:
        # (HIGH LOW USEC . X): the tail is not a PSEC slot
        high, low, usec, length = items[0], items[1], items[2], 3
    else:
        return _bind_positional(items)
    if not is_fixnum(low):
        return None
    return ComponentsForm(high, low, usec, 0, length)


def disassemble(spec: TimeSpec) -> TimeForm | None:
    """Classify a time specification into a :data:`TimeForm` variant.

    Returns None when ``spec`` does not have the shape of a time.
    Field values other than LOW are not checked here.
    """
    if spec is None:
        return NowForm()
    if isinstance(spec, bool):
        return None
    if isinstance(spec, int):
        return ComponentsForm(0, spec, 0, 0, 2)
    if isinstance(spec, float):
        return FloatForm(spec)
    if isinstance(spec, DottedList):
        return _bind_dotted(spec)
    if isinstance(spec, (tuple, list)):
        return _bind_positional(spec)
    return None


def _check_hi(
    hi: int, lo: int, us: int, ps: int, length: int, safe_range: SafeRange
) -> DecodeResult:
    if not safe_range.fits(hi):
        return DecodeResult.failure(
            TimeErrorKind.OUT_OF_RANGE,
            f"high seconds {hi} outside [{safe_range.min}, {safe_range.max}]",
            length,
        )
    return DecodeResult.success(TimeValue(hi, lo, us, ps), length)


def decode_float_time(
    t: float, *, safe_range: SafeRange = DEFAULT_SAFE_RANGE
) -> DecodeResult:
    """Convert float seconds into a TimeValue, truncating toward minus infinity."""
    lower, upper = safe_range.float_bounds()
    if not lower <= t < upper:
        return DecodeResult.failure(
            TimeErrorKind.OUT_OF_RANGE,
            f"float time {t!r} outside [{lower!r}, {upper!r})",
            MAX_TIME_LENGTH,
        )

    hi = math.floor(t / LO_TIME_RADIX)
    t_sans_hi = t - hi * float(LO_TIME_RADIX)
    lo = int(t_sans_hi)
    fracps = (t_sans_hi - lo) * 1e12
    us = int(fracps / 1e6)
    ps = int(fracps - us * 1e6)
    # Float rounding can push any of the digits one unit outside its range
    # in either direction; the integer carry puts them back.
    hi, lo, us, ps = normalize_components(hi, lo, us, ps)
    return _check_hi(hi, lo, us, ps, MAX_TIME_LENGTH, safe_range)


def decode_form(
    form: TimeForm,
    *,
    clock: Clock | None = None,
    safe_range: SafeRange = DEFAULT_SAFE_RANGE,
) -> DecodeResult:
    """Decode an already classified time form."""
    if isinstance(form, NowForm):
        seconds, nanoseconds = (clock or SYSTEM_CLOCK).now()
        us, ns = divmod(nanoseconds, NS_PER_US)
        hi, lo, us, ps = normalize_components(0, seconds, us, ns * PS_PER_NS)
        return _check_hi(hi, lo, us, ps, MAX_TIME_LENGTH, safe_range)

    if isinstance(form, FloatForm):
        return decode_float_time(form.value, safe_range=safe_range)

    if not (is_fixnum(form.high) and is_fixnum(form.usec) and is_fixnum(form.psec)):
        return DecodeResult.failure(
            TimeErrorKind.TYPE_MISMATCH,
            f"non-integer time components: high={form.high!r} "
            f"usec={form.usec!r} psec={form.psec!r}",
        )
    hi, lo, us, ps = normalize_components(form.high, form.low, form.usec, form.psec)
    return _check_hi(hi, lo, us, ps, form.length, safe_range)


def decode(
    spec: TimeSpec,
    *,
    clock: Clock | None = None,
    safe_range: SafeRange = DEFAULT_SAFE_RANGE,
) -> DecodeResult:
    """Decode any external time specification.

    Never raises for bad input: wrong shapes come back as a zero-length
    ``TYPE_MISMATCH`` result and unrepresentable times as ``OUT_OF_RANGE``.
    """
    form = disassemble(spec)
    if form is None:
        return DecodeResult.failure(
            TimeErrorKind.TYPE_MISMATCH, f"not a time specification: {spec!r}"
        )
    return decode_form(form, clock=clock, safe_range=safe_range)


def decode_time(
    spec: TimeSpec,
    *,
    clock: Clock | None = None,
    safe_range: SafeRange = DEFAULT_SAFE_RANGE,
) -> tuple[TimeValue, int]:
    """Decode ``spec`` and return ``(value, effective_length)``.

    Raises:
        InvalidTimeError: If ``spec`` does not represent a time.
        TimeOutOfRangeError: If the time is not representable.
    """
    result = decode(spec, clock=clock, safe_range=safe_range)
    check_time_validity(result)
    assert result.value is not None
    return result.value, result.length
