"""Turns a generated railway map into shapes scaled to a drawing area."""

from __future__ import annotations

from dataclasses import dataclass

from railway3.railmap import Color, RailwayMap
from railway3.station import StationStatus

RGB = tuple[int, int, int]

COLOR_RGB: dict[Color, RGB] = {
    Color.LAVENDER_BLUSH: (255, 240, 245),
    Color.LAVENDER: (230, 230, 250),
    Color.HONEYDEW: (240, 255, 240),
    Color.MISTY_ROSE: (255, 228, 225),
}
NAVY: RGB = (0, 0, 128)

TILE_WIDTH = 20
TILE_HEIGHT = 20
LINE_WIDTH = 5
FONT_FAMILY = "Arial"
FONT_SIZE = 10
CAPITAL_FONT_SIZE = 15

_STEP = 3


@dataclass(frozen=True)
class DistrictTile:
    """A filled square of district colour; ``x`` and ``y`` are its top-left corner."""

    x: int
    y: int
    width: int
    height: int
    color: RGB


@dataclass(frozen=True)
class StationMark:
    """A station circle (bounding box at ``x``, ``y``) with its label's baseline start."""

    x: int
    y: int
    diameter: int
    label_x: float
    label_y: float
    name: str
    font_size: int
    status: StationStatus


@dataclass(frozen=True)
class WayLine:
    """A railway link drawn between two station positions."""

    x1: int
    y1: int
    x2: int
    y2: int


class Display:
    """Holds a map and lays out its districts, stations and links for drawing."""

    def __init__(self, railmap: RailwayMap | None = None) -> None:
        self.railmap = railmap if railmap is not None else RailwayMap()
        self.parts: list[RGB] = []

    def generate(self) -> None:
        """Generate the map and rebuild the district colour cells."""
        self.railmap.generate()
        self.parts = [COLOR_RGB[color] for color in self.railmap.colors]

    def districts(self, width: int, height: int) -> list[DistrictTile]:
        """Colour tiles for an area of ``width`` by ``height``; empty before generation."""
        if not self.parts:
            return []
        dimension = self.railmap.dimension
        kx = width / dimension.x
        ky = height * _STEP / dimension.y
        tiles = []
        for i in range(0, dimension.x, _STEP):
            left = int(kx * i) - TILE_WIDTH // 2
            base = i * dimension.y // (_STEP * _STEP)
            for j in range(dimension.y // _STEP):
                tiles.append(
                    DistrictTile(
                        left,
                        int(ky * j) - TILE_HEIGHT // 2,
                        TILE_WIDTH,
                        TILE_HEIGHT,
                        self.parts[base + j],
                    )
                )
        return tiles

    def stations_and_ways(
        self, width: int, height: int
    ) -> tuple[list[StationMark], list[WayLine]]:
        """Station marks and link lines for an area of ``width`` by ``height``."""
        railmap = self.railmap
        dimension = railmap.dimension
        base_diameter = dimension.x // railmap.district_stations // 20
        kx = width / dimension.x
        ky = height * _STEP / dimension.y
        scale = int(kx * base_diameter / _STEP)

        marks = []
        for station in railmap.stations:
            radius = scale * int(station.status)
            cx = kx * station.x
            cy = ky * station.y
            marks.append(
                StationMark(
                    x=int(cx - radius),
                    y=int(cy - radius),
                    diameter=2 * radius,
                    label_x=cx + radius,
                    label_y=cy,
                    name=station.name,
                    font_size=(
                        CAPITAL_FONT_SIZE
                        if station.status == StationStatus.CAPITAL
                        else FONT_SIZE
                    ),
                    status=station.status,
                )
            )

        lines = []
        for way in railmap.ways:
            start = railmap.stations[way.x]
            end = railmap.stations[way.y]
            lines.append(
                WayLine(
                    int(kx * start.x),
                    int(ky * start.y),
                    int(kx * end.x),
                    int(ky * end.y),
                )
            )
        return marks, lines