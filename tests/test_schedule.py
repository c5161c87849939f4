from railway3.schedule import Schedule
from railway3.timepoint import TimePoint


def test_defaults_are_unset():
    s = Schedule()
    assert s.arrive == TimePoint()
    assert s.depart == TimePoint()
    assert s.wait == -1
    assert s.number == -1


def test_fields_are_kept():
    s = Schedule(arrive=TimePoint(9, 0), depart=TimePoint(9, 5), number=4)
    assert s.arrive == TimePoint(9, 0)
    assert s.depart == TimePoint(9, 5)
    assert s.number == 4


def test_wait_between_arrive_and_depart():
    s = Schedule(arrive=TimePoint(9, 0), wait=5, depart=TimePoint(9, 5), number=1)
    assert s.arrive.minutes_to(s.depart) == s.wait