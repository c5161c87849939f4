"""Stations placed on the map."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from railway3.point import Point, _HasXY
from railway3.schedule import Schedule

DEFAULT_NAME = "Місто N"


class StationStatus(IntEnum):
    NONE = 0
    TOWN = 1
    CITY = 2
    CAPITAL = 3


@dataclass
class Station:
    """A station at a map position with its rank and timetable slots."""

    x: int = 0
    y: int = 0
    status: StationStatus = StationStatus.NONE
    connections: int = 0
    name: str = DEFAULT_NAME
    trains: list[Schedule] = field(default_factory=list)

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def inc_connections(self) -> None:
        self.connections += 1

    def distance(self, other: _HasXY) -> int:
        """Rounded distance from this station to a point or another station."""
        return self.position.distance(other)