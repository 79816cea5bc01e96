import numpy as np
import pytest

from intervo.interval import FloatInterval, Int8Interval, UInt8Interval
from intervo.intervalset import IntervalSet
from intervo.ops import InvalidOperationError

UI = UInt8Interval


def S(*intervals):
    return IntervalSet(intervals, intvl=UI)


def assert_canonical(x):
    for a in x:
        assert not a.isempty()

    for a, b in zip(x, x[1:]):
        assert int(b.lower) - int(a.upper) >= 2


def test_construction():
    x = IntervalSet([UI(7, 9), UI(2, 5), UI(6, 6), UI(), UI(20, 30), UI(25, 40)])
    assert x.intervals == (UI(2, 9), UI(20, 40))
    assert x.interval is UI
    assert_canonical(x)
    assert IntervalSet([(7, 9), 3, (1, 2)], intvl=UI) == S(UI(1, 3), UI(7, 9))
    assert IntervalSet.fromvalues([5, 1, 2, 3, 9], UI) == S(UI(1, 3), UI(5), UI(9))
    assert IntervalSet.whole(UI) == S(UI(0, 255))
    assert IntervalSet.empty(UI) == S()
    assert IntervalSet.empty(UI).isempty()

    with pytest.raises(TypeError):
        IntervalSet([])

    with pytest.raises(TypeError):
        IntervalSet([UI(1, 2), Int8Interval(1, 2)])

    with pytest.raises(TypeError):
        IntervalSet([], intvl=int)  # type: ignore


def test_union():
    assert S(UI(2, 5)).union(S(UI(7, 9))) == S(UI(2, 5), UI(7, 9))
    assert S(UI(2, 5)) | S(UI(6, 9)) == S(UI(2, 9))
    assert S(UI(2, 5)) | UI(6, 9) == S(UI(2, 9))
    assert UI(6, 9) | S(UI(2, 5)) == S(UI(2, 9))
    assert S(UI(0, 3), UI(10, 12)) | S(UI(4, 9)) == S(UI(0, 12))
    assert S(UI(2, 5)) | S() == S(UI(2, 5))


def test_intersection():
    x = S(UI(0, 5), UI(10, 15), UI(20, 25))
    y = S(UI(3, 12), UI(14, 22))
    assert x & y == S(UI(3, 5), UI(10, 12), UI(14, 15), UI(20, 22))
    assert x & S() == S()
    assert x & UI(4, 11) == S(UI(4, 5), UI(10, 11))
    assert UI(4, 11) & x == S(UI(4, 5), UI(10, 11))


def test_difference():
    x = S(UI(0, 10), UI(20, 30))
    assert x - S(UI(4, 6), UI(9, 22)) == S(UI(0, 3), UI(7, 8), UI(23, 30))
    assert x - S() == x
    assert x - x == S()
    assert x - UI(0, 255) == S()
    assert x - S(UI(1, 1), UI(3, 3), UI(5, 5)) == S(
        UI(0), UI(2), UI(4), UI(6, 10), UI(20, 30)
    )
    assert UI(0, 30) - S(UI(11, 19)) == x


def test_symmetric_difference():
    x = S(UI(0, 10))
    y = S(UI(5, 15))
    assert x ^ y == S(UI(0, 4), UI(11, 15))
    assert x ^ x == S()


def test_complement():
    assert S(UI(0, 3), UI(7, 10)).complement() == S(UI(4, 6), UI(11, 255))
    assert ~S() == IntervalSet.whole(UI)
    assert ~IntervalSet.whole(UI) == S()
    assert ~~S(UI(3, 4)) == S(UI(3, 4))


def test_predicates():
    x = S(UI(0, 5), UI(10, 15))
    assert S(UI(1, 2), UI(11, 15)).issubset(x)
    assert not S(UI(1, 2), UI(9, 15)).issubset(x)
    assert not S(UI(4, 11)).issubset(x)
    assert S().issubset(x) and S() <= S()
    assert x >= S(UI(3)) and x > S(UI(3))
    assert not x < x
    assert x.overlaps(UI(5, 9))
    assert not x.overlaps(S(UI(6, 9), UI(16, 255)))
    assert x.isdisjoint(S(UI(6, 9)))
    assert x.isdisjoint(S())


def test_contains():
    x = S(UI(0, 5), UI(10, 15))
    assert 0 in x and 5 in x and 12 in x and np.uint8(15) in x
    assert 6 not in x and 9 not in x and 16 not in x and 300 not in x
    assert UI(11, 13) in x and UI(4, 10) not in x
    assert S(UI(1), UI(14)) in x
    assert 3 not in S()


def test_size_and_bounds():
    x = S(UI(0, 5), UI(10, 15))
    assert x.size() == 12
    assert IntervalSet.whole(UI).size() == 256
    assert S().size() == 0
    assert x.lower_bound() == 0 and x.upper_bound() == 15
    assert x.hull() == UI(0, 15)
    assert x.hull(UI(20, 21)) == UI(0, 21)
    assert S().hull() == UI()
    assert S(UI(4)).issingleton() and not x.issingleton()

    with pytest.raises(InvalidOperationError):
        S().lower_bound()

    with pytest.raises(InvalidOperationError):
        S().upper_bound()


def test_shrink():
    x = S(UI(2, 4), UI(8, 9))
    assert x.shrink_left(1) == S(UI(3, 4), UI(8, 9))
    assert x.shrink_left(3) == S(UI(8, 9))
    assert x.shrink_left(5) == S(UI(8, 9))
    assert x.shrink_right(1) == S(UI(2, 4), UI(8))
    assert x.shrink_right(2) == S(UI(2, 4))
    assert x.shrink_left(0) == x
    assert x.strict_shrink_left(1) == x.shrink_left(1)
    assert x.strict_shrink_right(1) == x.shrink_right(1)
    assert S().shrink_left(3) == S()

    with pytest.raises(InvalidOperationError):
        x.strict_shrink_left(0)

    with pytest.raises(InvalidOperationError):
        S().strict_shrink_right(0)

    with pytest.raises(ValueError):
        x.shrink_right(-1)


def test_sequence():
    x = S(UI(0, 5), UI(10, 15), UI(20, 25))
    assert len(x) == 3
    assert x[1] == UI(10, 15)
    assert x[1:] == S(UI(10, 15), UI(20, 25))
    assert list(x) == [UI(0, 5), UI(10, 15), UI(20, 25)]
    assert not S() and x


def test_value_semantics():
    x = S(UI(0, 5))
    y = x | UI(7, 9)
    assert x == S(UI(0, 5)) and y == S(UI(0, 5), UI(7, 9))
    assert hash(x) == hash(S(UI(5, 0), UI(0, 5)))
    assert x.copy() == x and x.copy() is not x
    assert x != IntervalSet([Int8Interval(0, 5)])


def test_mismatched_types():
    with pytest.raises(TypeError):
        S(UI(0, 5)) | IntervalSet([Int8Interval(0, 5)])

    with pytest.raises(TypeError):
        S(UI(0, 5)) & Int8Interval(0, 5)


def test_float():
    x = IntervalSet([FloatInterval(0.0, 1.0), FloatInterval(2.0, 3.0)])
    gap = FloatInterval(1.0, 2.0).strict_shrink_left(1).strict_shrink_right(1)
    assert x | gap == IntervalSet([FloatInterval(0.0, 3.0)])
    assert 1.5 not in x and 2.5 in x


def test_repr():
    assert repr(S(UI(2, 5), UI(7, 9))) == (
        "IntervalSet([UInt8Interval(2, 5), UInt8Interval(7, 9)])"
    )
    assert repr(S()) == "IntervalSet([], intvl=UInt8Interval)"
