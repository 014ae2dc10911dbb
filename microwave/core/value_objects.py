"""Value Objects — Power and Duration, immutable and validated on construction.

Invariants:
    - Power(v) exists iff MIN_POWER <= v <= MAX_POWER
    - Duration(s) exists iff MIN_DURATION_SECONDS <= s <= MAX_DURATION_SECONDS,
      unless bypass=True, in which case only s >= 1 is required
    - Both are frozen: no mutation after construction

Design Decisions:
    - Frozen dataclass + __post_init__ validation: construction is the only gate
    - Bypass kept on the Duration instance (not a subclass): sessions seeded from the
      catalog may exceed 120s, everything else goes through the normal band
"""

from dataclasses import dataclass

from microwave.core.domain_types import (
    MIN_POWER, MAX_POWER, MIN_DURATION_SECONDS, MAX_DURATION_SECONDS,
)
from microwave.core.errors import OutOfRangeError
from microwave.core.format_status import format_duration


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Power:
    """Heating power level."""
    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value) or not MIN_POWER <= self.value <= MAX_POWER:
            raise OutOfRangeError("power", self.value, MIN_POWER, MAX_POWER)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Duration:
    """Whole-second heating interval."""
    seconds: int
    bypass: bool = False

    def __post_init__(self) -> None:
        if not _is_int(self.seconds):
            raise OutOfRangeError(
                "duration_seconds", self.seconds, MIN_DURATION_SECONDS,
                None if self.bypass else MAX_DURATION_SECONDS,
            )
        if self.bypass:
            if self.seconds < MIN_DURATION_SECONDS:
                raise OutOfRangeError(
                    "duration_seconds", self.seconds, MIN_DURATION_SECONDS, None,
                )
            return
        if not MIN_DURATION_SECONDS <= self.seconds <= MAX_DURATION_SECONDS:
            raise OutOfRangeError(
                "duration_seconds", self.seconds,
                MIN_DURATION_SECONDS, MAX_DURATION_SECONDS,
            )

    @property
    def display(self) -> str:
        return format_duration(self.seconds)
