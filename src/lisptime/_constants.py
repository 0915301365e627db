"""Radix and range constants for the mixed-radix time representation."""

LO_TIME_BITS = 16
"""Width of the low-order seconds digit."""

LO_TIME_RADIX = 1 << LO_TIME_BITS
"""Radix of the low-order seconds digit (65536)."""

LO_TIME_MASK = LO_TIME_RADIX - 1

US_PER_SECOND = 1_000_000
PS_PER_US = 1_000_000
NS_PER_SECOND = 1_000_000_000
NS_PER_US = 1_000
PS_PER_NS = 1_000

FIXNUM_BITS = 62
"""Tagged integer width on a 64-bit host."""

MOST_POSITIVE_FIXNUM = (1 << (FIXNUM_BITS - 1)) - 1
MOST_NEGATIVE_FIXNUM = -(1 << (FIXNUM_BITS - 1))

MIN_TIME_LENGTH = 2
MAX_TIME_LENGTH = 4
"""Effective lengths of an external time tuple: (HIGH LOW [USEC [PSEC]])."""
