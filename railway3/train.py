"""Trains and their timetables."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from railway3.point import Point
from railway3.schedule import Schedule

DEFAULT_START_TIME = Point(12, 0)


class TrainType(IntEnum):
    NONE = 0
    FAST = 1
    PASSENGER = 2
    LOCAL = 3


@dataclass
class Train:
    """A numbered train with its ordered list of stops."""

    number: int = 0
    type: TrainType = TrainType.NONE
    start_time: Point = DEFAULT_START_TIME
    stations: list[Schedule] = field(default_factory=list)

    def stations_quantity(self) -> int:
        return len(self.stations)

    def station(self, index: int) -> Schedule:
        """The stop at ``index``; raises IndexError when out of range."""
        if not 0 <= index < len(self.stations):
            raise IndexError(f"stop index {index} out of range")
        return self.stations[index]