from railway3.point import Point
from railway3.schedule import Schedule
from railway3.station import DEFAULT_NAME, Station, StationStatus


def test_defaults():
    s = Station()
    assert s.status is StationStatus.NONE
    assert s.connections == 0
    assert s.name == "Місто N"
    assert s.name == DEFAULT_NAME
    assert s.trains == []


def test_status_order_matches_rank():
    assert StationStatus(3) is StationStatus.CAPITAL
    assert StationStatus.TOWN < StationStatus.CITY < StationStatus.CAPITAL


def test_inc_connections_counts():
    s = Station(1, 2)
    for _ in range(4):
        s.inc_connections()
    assert s.connections == 4


def test_position():
    assert Station(7, 9).position == Point(7, 9)


def test_distance_matches_point_distance():
    s = Station(3, 4)
    target = Point(10, -2)
    assert s.distance(target) == Point(3, 4).distance(target)


def test_distance_between_stations_symmetric():
    a = Station(0, 0)
    b = Station(12, 5)
    assert a.distance(b) == b.distance(a)


def test_trains_slots_kept():
    slots = [Schedule() for _ in range(3)]
    s = Station(1, 1, StationStatus.TOWN, trains=slots)
    assert len(s.trains) == 3
    assert s.status is StationStatus.TOWN