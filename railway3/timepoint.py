"""Clock times measured in hours and minutes."""

from __future__ import annotations

from dataclasses import dataclass

MINUTES_IN_HOUR = 60
HOURS_IN_DAY = 24


def _c_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    remainder = abs(a) % abs(b)
    return remainder if a >= 0 else -remainder


@dataclass(frozen=True)
class TimePoint:
    """A time of day; unset times are -1:-1."""

    hour: int = -1
    minute: int = -1

    def add_minutes(self, minutes: int) -> TimePoint:
        """Return the time moved forward by the sub-hour part of ``minutes``."""
        hour = self.hour
        minute = self.minute + _c_mod(minutes, MINUTES_IN_HOUR)
        if minute >= MINUTES_IN_HOUR:
            minute -= MINUTES_IN_HOUR
            hour += 1
        if hour >= HOURS_IN_DAY:
            hour -= HOURS_IN_DAY
        return TimePoint(hour, minute)

    def subtract_minutes(self, minutes: int) -> TimePoint:
        """Return the time moved back by the sub-hour part of ``minutes``."""
        hour = self.hour
        minute = self.minute - _c_mod(minutes, MINUTES_IN_HOUR)
        if minute < 0:
            minute += MINUTES_IN_HOUR
            hour -= 1
        if hour < 0:
            hour += HOURS_IN_DAY
        return TimePoint(hour, minute)

    def is_earlier_than(self, other: TimePoint) -> bool:
        """True if this time is not later than ``other`` within the same day."""
        if self.hour == other.hour:
            return self.minute <= other.minute
        return self.hour < other.hour

    def minutes_to(self, other: TimePoint) -> int:
        """Minutes from this time forward to ``other``, wrapping over midnight."""
        minutes = (other.hour - self.hour) * MINUTES_IN_HOUR + other.minute - self.minute
        if minutes < 0:
            minutes += MINUTES_IN_HOUR * HOURS_IN_DAY
        return minutes


def is_less_than_hour(minutes: int) -> bool:
    return minutes < MINUTES_IN_HOUR


def correct_minutes(minutes: int) -> int:
    """Halve a span under two hours; cap longer spans at one hour."""
    if minutes < MINUTES_IN_HOUR * 2:
        return int(minutes / 2)
    return MINUTES_IN_HOUR