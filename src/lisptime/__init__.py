"""lisptime - Extended-precision Lisp time values: decoding, encoding and arithmetic."""

from __future__ import annotations

__version__ = "0.1.0"

from lisptime._arith import add, subtract, time_add, time_subtract
from lisptime._decoder import (
    DecodeResult,
    check_time_validity,
    decode,
    decode_float_time,
    decode_time,
    disassemble,
)
from lisptime._encoder import encode, hi_time, lo_time, make_time
from lisptime._errors import (
    InvalidTimeError,
    TimeError,
    TimeErrorKind,
    TimeOutOfRangeError,
    TimeOverflowError,
)
from lisptime._float import float_time, from_float, to_float
from lisptime.clock import SYSTEM_CLOCK, Clock, FixedClock, SystemClock
from lisptime.forms import DottedList, TimeSpec
from lisptime.limits import DEFAULT_SAFE_RANGE, SafeRange
from lisptime.reader import print_time, read_time
from lisptime.value import ZERO, TimeValue

__all__ = [
    "add",
    "check_time_validity",
    "current_time",
    "decode",
    "decode_float_time",
    "decode_time",
    "disassemble",
    "encode",
    "float_time",
    "from_float",
    "hi_time",
    "lo_time",
    "make_time",
    "print_time",
    "read_time",
    "subtract",
    "time_add",
    "time_subtract",
    "to_float",
    "Clock",
    "DecodeResult",
    "DottedList",
    "FixedClock",
    "SafeRange",
    "SystemClock",
    "TimeError",
    "TimeErrorKind",
    "TimeOutOfRangeError",
    "TimeOverflowError",
    "TimeSpec",
    "TimeValue",
    "InvalidTimeError",
    "DEFAULT_SAFE_RANGE",
    "ZERO",
]


def current_time(
    *,
    clock: Clock | None = None,
    safe_range: SafeRange = DEFAULT_SAFE_RANGE,
) -> tuple[int, int, int, int]:
    """Return the current time as ``(HIGH, LOW, USEC, PSEC)``.

    HIGH has the most significant bits of the seconds since the epoch and
    LOW the least significant 16 bits. USEC and PSEC are the microsecond
    and picosecond counts.

    Args:
        clock: Current-time source. Defaults to the system wall clock.
        safe_range: Bounds for HIGH. Defaults to a 62-bit tagged integer.

    Raises:
        TimeOverflowError: If HIGH does not fit ``safe_range``.
    """
    seconds, nanoseconds = (clock or SYSTEM_CLOCK).now()
    return make_time(seconds, nanoseconds, safe_range=safe_range)
