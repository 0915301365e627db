"""Boundary shapes of an external time specification.

Callers hand the library plain Python values:

* ``None`` for "now",
* an ``int`` of whole seconds,
* a ``float`` of seconds since the epoch,
* a tuple or list ``(HIGH, LOW[, USEC[, PSEC]])``,
* a :class:`DottedList` for the older ``(HIGH . LOW)`` and
  ``(HIGH LOW . USEC)`` forms.

The decoder first classifies such a value into one of the closed set of
:data:`TimeForm` variants below, then decodes the variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DottedList:
    """An improper list: ``items`` followed by a non-nil ``tail``."""

    items: tuple[Any, ...]
    tail: Any

    def __post_init__(self) -> None:
        if not self.items:
            raise ValueError("a dotted list needs at least one item before the tail")


@dataclass(frozen=True)
class NowForm:
    """The current time, sampled from a clock at decode time."""


@dataclass(frozen=True)
class FloatForm:
    """Seconds since the epoch as a float."""

    value: float


@dataclass(frozen=True)
class ComponentsForm:
    """Positionally bound ``HIGH LOW USEC PSEC`` fields.

    ``low`` is known to be an integer; the other fields are only checked
    when the form is decoded.
    """

    high: Any
    low: int
    usec: Any = 0
    psec: Any = 0
    length: int = 4


TimeForm = NowForm | FloatForm | ComponentsForm

TimeSpec = int | float | tuple | list | DottedList | None
"""Anything a caller may pass where a time is expected."""
