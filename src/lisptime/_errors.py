"""Exception hierarchy for time decoding and arithmetic."""

from __future__ import annotations

import enum


class TimeError(Exception):
    """Base exception for time value errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidTimeError(TimeError):
    """Raised when a value does not have the shape of a time specification."""


class TimeOutOfRangeError(TimeError):
    """Raised when a time's magnitude cannot be represented."""


class TimeOverflowError(TimeOutOfRangeError):
    """Raised when an arithmetic result's high-order seconds leave the safe range."""


ERR_MSG_INVALID_TIME = "Invalid time specification"
ERR_MSG_NOT_REPRESENTABLE = "Specified time is not representable"


class TimeErrorKind(enum.StrEnum):
    """Failure categories reported by the decoder and arithmetic."""

    TYPE_MISMATCH = "type_mismatch"
    OUT_OF_RANGE = "out_of_range"
    OVERFLOW = "overflow"

    def to_exception(self, internal_details: str = "") -> TimeError:
        cls, message = _KIND_TO_ERROR[self]
        return cls(message, internal_details)


_KIND_TO_ERROR: dict[TimeErrorKind, tuple[type[TimeError], str]] = {
    TimeErrorKind.TYPE_MISMATCH: (InvalidTimeError, ERR_MSG_INVALID_TIME),
    TimeErrorKind.OUT_OF_RANGE: (TimeOutOfRangeError, ERR_MSG_NOT_REPRESENTABLE),
    TimeErrorKind.OVERFLOW: (TimeOverflowError, ERR_MSG_NOT_REPRESENTABLE),
}
