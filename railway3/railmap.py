"""Map generation: stations, railway links, district colours and train tracking."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Any

from railway3.point import Point
from railway3.schedule import Schedule
from railway3.station import Station, StationStatus
from railway3.timepoint import TimePoint, correct_minutes, is_less_than_hour
from railway3.train import Train

DEFAULT_WIDTH = 300
DEFAULT_HEIGHT = 300
DEFAULT_COLUMNS = 3
DEFAULT_ROWS = 3
DEFAULT_DISTRICT_STATIONS = 5

_STEP = 3
_MARGIN = 5


class Color(IntEnum):
    LAVENDER_BLUSH = 0
    LAVENDER = 1
    HONEYDEW = 2
    MISTY_ROSE = 3


# Indexed by [district column is odd][district index is odd].
_PALETTE = (
    (Color.LAVENDER_BLUSH, Color.LAVENDER),
    (Color.HONEYDEW, Color.MISTY_ROSE),
)


class RailwayMap:
    """A rectangular map split into districts, each holding a fixed number of stations."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        columns: int = DEFAULT_COLUMNS,
        rows: int = DEFAULT_ROWS,
        district_stations: int = DEFAULT_DISTRICT_STATIONS,
        rng: Any = None,
    ) -> None:
        self.dimension = Point(width, height)
        self.district_quantity = Point(columns, rows)
        self.district_stations = district_stations
        count = max(self.district_quantity.size() * district_stations, 0)
        self.stations: list[Station] = [Station() for _ in range(count)]
        self.ways: list[Point] = []
        self.trains: list[Train] = []
        self.colors: list[Color] = []
        self.time = Point(-1, -1)
        self._rng = rng if rng is not None else random.Random()

    def generate(self) -> None:
        """Place stations, link them, rank district centres and colour the map."""
        self._generate_stations()
        self._connect()
        self._update_statuses()
        self._fill_colors()

    def _generate_stations(self) -> None:
        district = self.dimension / self.district_quantity
        slots = len(self.stations) ** 2
        rows = self.district_quantity.y
        for i in range(self.district_quantity.x):
            for j in range(rows):
                for k in range(self.district_stations):
                    index = (i * rows + j) * self.district_stations + k
                    dx = self._rng.randrange(district.x - 2 * _MARGIN)
                    dy = self._rng.randrange(district.y - 2 * _MARGIN)
                    self.stations[index] = Station(
                        x=i * district.x + dx + _MARGIN,
                        y=j * district.y + dy + _MARGIN,
                        status=StationStatus.TOWN,
                        trains=[Schedule() for _ in range(slots)],
                    )

    def _connect(self) -> None:
        count = len(self.stations)
        self.ways = []
        if count < 2:
            return
        candidates = [
            sorted(
                ((self.stations[a].distance(self.stations[b]), b) for b in range(a + 1, count)),
                key=lambda pair: pair[0],
            )
            for a in range(count - 1)
        ]
        cursors = [0] * len(candidates)
        groups = [0] * count
        new_group = 1
        while len(self.ways) < len(candidates):
            open_rows = [
                (row[cursors[first]][0], first)
                for first, row in enumerate(candidates)
                if cursors[first] < len(row)
            ]
            if not open_rows:
                break
            _, first = min(open_rows, key=lambda item: item[0])
            second = candidates[first][cursors[first]][1]
            self.ways.append(Point(first, second))
            if groups[first] == 0:
                cursors[first] += 1
            if groups[second] == 0 and second < len(cursors):
                cursors[second] += 1
            if groups[first] == 0 and groups[second] == 0:
                groups[first] = groups[second] = new_group
                new_group += 1
            elif groups[first] == 0:
                groups[first] = groups[second]
            elif groups[second] == 0:
                groups[second] = groups[first]
            else:
                # The comparison rereads groups[first], which changes mid-pass.
                for index in range(count):
                    if groups[index] == groups[first]:
                        groups[index] = groups[second]

    def _update_statuses(self) -> None:
        half = Point(2, 2)
        columns, rows = self.district_quantity.x, self.district_quantity.y
        for i in range(columns):
            for j in range(rows):
                centre = Point(2 * i + 1, 2 * j + 1) * self.dimension / self.district_quantity / half
                start = (i * rows + j) * self.district_stations
                best = start
                for candidate in range(start + 1, start + self.district_stations):
                    challenger = self.stations[candidate]
                    holder = self.stations[best]
                    if challenger.connections > holder.connections or (
                        challenger.connections == holder.connections
                        and centre.distance(challenger) < centre.distance(holder)
                    ):
                        best = candidate
                is_capital = columns // 2 == i and rows // 2 == j
                self.stations[best].status = (
                    StationStatus.CAPITAL if is_capital else StationStatus.CITY
                )

    def _fill_colors(self) -> None:
        if not self.stations:
            raise ValueError("the map has no stations to colour around")
        width, height = self.dimension.x, self.dimension.y
        rows = self.district_quantity.y
        self.colors = [Color.LAVENDER_BLUSH] * (width * height // _STEP)
        for i in range(0, width, _STEP):
            base = i * height // (_STEP * _STEP)
            for j in range(0, height, _STEP):
                cell = Point(i, j)
                distances = [station.distance(cell) for station in self.stations]
                nearest = min(distances)
                radius = nearest - nearest % 2 + 2
                owner = next(k for k, d in enumerate(distances) if d < radius)
                district = owner // self.district_stations
                self.colors[base + j // _STEP] = _PALETTE[(district // rows) % 2][district % 2]

    def _stop_point(self, stop: Schedule) -> Point:
        if not 0 <= stop.number < len(self.stations):
            raise IndexError(f"station number {stop.number} out of range")
        return self.stations[stop.number].position

    def find_train_position(self, train: Train, time: TimePoint) -> Point:
        """Where ``train`` is on the map at ``time``; Point(-1, -1) if not on the map."""
        stops = train.stations
        if not stops:
            raise ValueError("train has no stops")

        for stop in stops[1:-1]:
            if stop.arrive.is_earlier_than(time) and time.is_earlier_than(stop.depart):
                return self._stop_point(stop)

        position: Point | None = None
        for previous, stop in zip(stops, stops[1:]):
            if time.is_earlier_than(stop.arrive) and previous.depart.is_earlier_than(time):
                elapsed = previous.depart.minutes_to(time)
                total = previous.depart.minutes_to(stop.arrive)
                relation = elapsed / total if total else 0.0
                start = self._stop_point(previous)
                end = self._stop_point(stop)
                position = Point(
                    start.x + int((end.x - start.x) * relation),
                    start.y + int((end.y - start.y) * relation),
                )
        if position is not None:
            return position

        first, last = stops[0], stops[-1]
        minutes = correct_minutes(last.arrive.minutes_to(first.depart))
        first_time = first.depart.subtract_minutes(minutes)
        last_time = last.arrive.add_minutes(minutes)
        if time.is_earlier_than(first_time) and is_less_than_hour(time.minutes_to(first_time)):
            return self._stop_point(first)
        if last_time.is_earlier_than(time) and is_less_than_hour(last_time.minutes_to(time)):
            return self._stop_point(last)
        return Point(-1, -1)