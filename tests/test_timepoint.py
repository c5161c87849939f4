from railway3.timepoint import TimePoint, correct_minutes, is_less_than_hour


def test_default_is_unset():
    t = TimePoint()
    assert (t.hour, t.minute) == (-1, -1)


def test_add_minutes_carries_into_hour():
    assert TimePoint(10, 45).add_minutes(30) == TimePoint(11, 15)


def test_add_minutes_wraps_midnight():
    assert TimePoint(23, 50).add_minutes(20) == TimePoint(0, 10)


def test_add_whole_hour_changes_nothing():
    assert TimePoint(10, 0).add_minutes(60) == TimePoint(10, 0)


def test_add_then_subtract_round_trip():
    for minutes in (0, 1, 25, 59):
        start = TimePoint(0, 5)
        assert start.add_minutes(minutes).subtract_minutes(minutes) == start


def test_subtract_wraps_before_midnight():
    start = TimePoint(23, 50)
    assert TimePoint(0, 10).subtract_minutes(20) == start


def test_is_earlier_than_is_reflexive():
    t = TimePoint(8, 30)
    assert t.is_earlier_than(t)


def test_is_earlier_than_across_hours():
    assert TimePoint(9, 59).is_earlier_than(TimePoint(10, 0))
    assert not TimePoint(10, 0).is_earlier_than(TimePoint(9, 59))


def test_minutes_to_self_is_zero():
    assert TimePoint(7, 7).minutes_to(TimePoint(7, 7)) == 0


def test_minutes_to_both_ways_cover_a_day():
    a = TimePoint(6, 15)
    b = TimePoint(20, 40)
    assert a.minutes_to(b) + b.minutes_to(a) == 24 * 60


def test_minutes_to_is_inverse_of_add():
    start = TimePoint(14, 20)
    assert start.minutes_to(start.add_minutes(35)) == 35


def test_is_less_than_hour():
    assert is_less_than_hour(59)
    assert not is_less_than_hour(60)


def test_correct_minutes_halves_short_spans():
    assert correct_minutes(100) == 50


def test_correct_minutes_caps_long_spans():
    assert correct_minutes(120) == 60
    assert correct_minutes(500) == 60