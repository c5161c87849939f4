import pytest

from railway3.point import Point
from railway3.schedule import Schedule
from railway3.train import Train, TrainType


def test_defaults():
    t = Train()
    assert t.number == 0
    assert t.type is TrainType.NONE
    assert t.start_time == Point(12, 0)
    assert t.stations_quantity() == 0


def test_type_values():
    assert TrainType(3) is TrainType.LOCAL
    assert TrainType.FAST < TrainType.PASSENGER


def test_stations_quantity_counts_stops():
    t = Train(stations=[Schedule() for _ in range(5)])
    assert t.stations_quantity() == 5


def test_station_returns_stop():
    stops = [Schedule(number=n) for n in range(3)]
    t = Train(stations=stops)
    assert t.station(2).number == 2
    assert t.station(0) is stops[0]


def test_station_out_of_range():
    t = Train(stations=[Schedule()])
    with pytest.raises(IndexError):
        t.station(1)
    with pytest.raises(IndexError):
        t.station(-1)