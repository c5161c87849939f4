"""One train's stop at one station."""

from __future__ import annotations

from dataclasses import dataclass, field

from railway3.timepoint import TimePoint


@dataclass
class Schedule:
    """Arrival and departure of a train at the station numbered ``number``."""

    arrive: TimePoint = field(default_factory=TimePoint)
    wait: int = -1
    depart: TimePoint = field(default_factory=TimePoint)
    number: int = -1