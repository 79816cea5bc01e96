import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from intervo import ops
from intervo.interval import UInt8Interval
from intervo.intervalset import IntervalSet
from intervo.ops import InvalidOperationError

UI = UInt8Interval
VALUES = range(256)

intervals = st.builds(UI, st.integers(0, 255), st.integers(0, 255))
short_intervals = st.builds(
    lambda start, length: UI(start, min(start + length, 255)),
    st.integers(0, 255),
    st.integers(0, 8),
)
intervalsets = st.lists(intervals | short_intervals, max_size=6).map(
    lambda xs: IntervalSet(xs, intvl=UI)
)


def members(x) -> set[int]:
    if isinstance(x, tuple):
        return set().union(*(members(y) for y in x))

    return {v for v in VALUES if v in x}


def assert_canonical(x):
    for a in x:
        assert not a.isempty()

    for a, b in zip(x, x[1:]):
        assert int(b.lower) - int(a.upper) >= 2


def asinterval(x):
    return x


def asset(x):
    return IntervalSet([x], intvl=UI)


@pytest.fixture(params=[asinterval, asset], ids=["interval", "intervalset"])
def lift(request):
    return request.param


def test_traits():
    for cls in (UI, IntervalSet):
        for trait in (
            ops.Bounded,
            ops.Cardinality,
            ops.Complement,
            ops.Contains,
            ops.Difference,
            ops.Disjoint,
            ops.Hull,
            ops.Intersection,
            ops.Overlap,
            ops.ShrinkLeft,
            ops.ShrinkRight,
            ops.StrictShrinkLeft,
            ops.StrictShrinkRight,
            ops.Subset,
            ops.Union,
        ):
            assert issubclass(cls, trait)


def test_empty_is_identity_and_absorbing(lift):
    x = lift(UI(3, 9))
    empty = lift(UI())
    assert x.union(empty) == x
    assert empty.union(x) == x
    assert x.intersection(empty) == empty
    assert empty.intersection(x) == empty
    assert empty.issubset(x)
    assert x.isdisjoint(empty) and not x.overlaps(empty)
    assert empty.size() == 0 and empty.isempty()
    assert not empty.contains(3)


def test_shared_queries(lift):
    x = lift(UI(3, 9))
    assert x.size() == 7
    assert x.lower_bound() == 3 and x.upper_bound() == 9
    assert x.contains(3) and x.contains(9) and not x.contains(10)
    assert x.issubset(lift(UI(0, 9))) and not x.issubset(lift(UI(4, 9)))
    assert x.overlaps(lift(UI(9, 20))) and x.isdisjoint(lift(UI(10, 20)))
    assert x.hull(lift(UI(20, 21))) == UI(3, 21)

    with pytest.raises(InvalidOperationError):
        lift(UI()).lower_bound()


def test_shared_transforms(lift):
    x = lift(UI(3, 9))
    assert members(x.union(lift(UI(10, 12)))) == set(range(3, 13))
    assert members(x.intersection(lift(UI(8, 20)))) == {8, 9}
    assert members(x.difference(lift(UI(5, 6)))) == {3, 4, 7, 8, 9}
    assert members(x.complement()) == set(VALUES) - set(range(3, 10))
    assert members(x.shrink_left(2)) == set(range(5, 10))
    assert members(x.shrink_right(2)) == set(range(3, 8))
    assert x.shrink_left(7).isempty() and x.shrink_right(100).isempty()

    with pytest.raises(InvalidOperationError):
        x.strict_shrink_left(0)

    with pytest.raises(InvalidOperationError):
        x.strict_shrink_right(0)


@given(intervals, intervals)
def test_interval_operations(x, y):
    a, b = members(x), members(y)
    assert members(x.intersection(y)) == a & b
    assert members(x.difference(y)) == a - b
    assert members(x.complement()) == set(VALUES) - a
    assert x.issubset(y) == (a <= b)
    assert x.overlaps(y) == bool(a & b)
    assert x.isdisjoint(y) == (not a & b)
    assert x.size() == len(a)

    pieces = x.difference(y)
    assert list(pieces) == sorted(pieces, key=lambda z: z.lower)
    assert all(not z.isempty() for z in pieces)

    if not a or not b or min(b) <= max(a) + 1 and min(a) <= max(b) + 1:
        assert members(x.union(y)) == a | b
    else:
        with pytest.raises(InvalidOperationError):
            x.union(y)


@given(intervalsets, intervalsets)
def test_intervalset_operations(x, y):
    a, b = members(x), members(y)

    for result, expected in [
        (x | y, a | b),
        (x & y, a & b),
        (x - y, a - b),
        (x ^ y, a ^ b),
        (~x, set(VALUES) - a),
    ]:
        assert_canonical(result)
        assert members(result) == expected

    assert x.issubset(y) == (a <= b)
    assert x.overlaps(y) == bool(a & b)
    assert x.isdisjoint(y) == (not a & b)
    assert x.size() == len(a)


@given(intervalsets, intervalsets, intervalsets)
def test_union_laws(x, y, z):
    empty = IntervalSet.empty(UI)
    assert x | x == x
    assert x | empty == x
    assert x | y == y | x
    assert (x | y) | z == x | (y | z)
    assert x & x == x
    assert x & y == y & x
    assert (x & y) & z == x & (y & z)


@given(intervalsets)
def test_complement_duality(x):
    assert x & x.complement() == IntervalSet.empty(UI)
    assert x | x.complement() == IntervalSet.whole(UI)
    assert x.complement().complement() == x


@given(intervalsets, intervalsets)
def test_size_additivity(x, y):
    y = y - x
    assert (x | y).size() == x.size() + y.size()


@given(st.lists(intervals | short_intervals, max_size=6), st.randoms())
def test_order_independence(xs, random):
    ys = list(xs)
    random.shuffle(ys)
    x = IntervalSet(xs, intvl=UI)
    assert IntervalSet(ys, intvl=UI) == x
    assert x | IntervalSet(xs, intvl=UI) == x
    assert_canonical(x)
    assert members(x) == set().union(*(members(z) for z in xs))


@given(intervalsets, st.integers(0, 300))
def test_shrink(x, n):
    left = x.shrink_left(n)
    right = x.shrink_right(n)
    assert_canonical(left)
    assert_canonical(right)

    if x.isempty():
        assert left.isempty() and right.isempty()
        return

    first = x[0].shrink_left(n)
    assert members(left) == members(first) | members(x[1:])
    last = x[-1].shrink_right(n)
    assert members(right) == members(last) | members(x[:-1])


def test_exhaustive_small():
    small = [UI(a, b) for a, b in itertools.product(range(4), repeat=2)]

    for x, y in itertools.product(small, repeat=2):
        a, b = members(x), members(y)
        assert members(IntervalSet([x, y])) == a | b
        assert members(asset(x) - asset(y)) == a - b
