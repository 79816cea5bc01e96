"""
##########################################
Interval sets (:mod:`intervo.intervalset`)
##########################################

.. currentmodule:: intervo.intervalset

This module provides arbitrary unions of intervals.

.. autoclass:: IntervalSet
    :show-inheritance:
    :members:
    :inherited-members:
    :member-order: groupwise

"""

import bisect
import operator
from collections.abc import Iterable, Iterator
from typing import Any, Self, overload

from intervo.interval.interval import Interval
from intervo.ops import (
    Bounded,
    Cardinality,
    Complement,
    Contains,
    Difference,
    Disjoint,
    Hull,
    Intersection,
    InvalidOperationError,
    Overlap,
    ShrinkLeft,
    ShrinkRight,
    StrictShrinkLeft,
    StrictShrinkRight,
    Subset,
    Union,
)


def _merge[T: Interval](intervals: Iterable[T]) -> list[T]:
    # `intervals` must be sorted by lower bound.
    result: list[T] = []

    for x in intervals:
        if x.isempty():
            continue

        if result and (result[-1].overlaps(x) or result[-1].isadjacent(x)):
            result[-1] = result[-1].union(x)
        else:
            result.append(x)

    return result


def _normalize[T: Interval](intervals: Iterable[T]) -> list[T]:
    return _merge(sorted(intervals, key=lambda x: x.lower))


class IntervalSet[T: Interval](
    Bounded,
    Cardinality,
    Contains,
    Hull,
    Union,
    Intersection,
    Difference,
    Complement,
    Subset,
    Overlap,
    Disjoint,
    ShrinkLeft,
    ShrinkRight,
    StrictShrinkLeft,
    StrictShrinkRight,
):
    """Union of intervals in canonical form.

    Parameters
    ----------
    intervals : Iterable[Interval | tuple | endtype | float | int], default=()
        Intervals of the set, in any order. Pairs ``(lower, upper)`` and single
        values are converted to intervals of class `intvl`. Overlapping and adjacent
        intervals are merged, and empty intervals are dropped.
    intvl : type[Interval] | None, optional
        Interval type. If omitted, it is taken from the first interval in
        `intervals`.

    Attributes
    ----------
    intervals : tuple[Interval, ...]
        Intervals of the set in canonical form.
    interval : type[Interval]
        Interval type.

    Notes
    -----
    The intervals of a set are always sorted by lower bound, pairwise disjoint,
    pairwise non-adjacent, and non-empty. Every operation returns a new set in this
    form.

    Examples
    --------
    >>> from intervo import UInt8Interval as UI
    >>> x = IntervalSet([UI(7, 9), UI(2, 5), UI(6, 6)])
    >>> x
    IntervalSet([UInt8Interval(2, 9)])
    >>> y = IntervalSet([UI(0, 3), UI(7, 10)])
    >>> y.complement()
    IntervalSet([UInt8Interval(4, 6), UInt8Interval(11, 255)])
    >>> y.size()
    8
    """

    __slots__ = ("_intervals", "_intvl")
    _intervals: tuple[T, ...]
    _intvl: type[T]

    def __init__(
        self,
        intervals: Iterable[T | tuple[Any, Any] | Any] = (),
        *,
        intvl: type[T] | None = None,
        **kwargs,
    ):
        intervals = list(intervals)

        if intvl is None:
            intvl = next((type(x) for x in intervals if isinstance(x, Interval)), None)

            if intvl is None:
                raise TypeError("interval type cannot be inferred")

        if not issubclass(intvl, Interval):
            raise TypeError

        self._intvl = intvl

        if kwargs.get("_skipcheck"):
            self._intervals = tuple(intervals)
            return

        items = []

        for item in intervals:
            match item:
                case Interval():
                    if type(item) is not intvl:
                        raise TypeError(f"{item!r} is not an instance of {intvl!r}")

                    items.append(item)

                case (lower, upper):
                    items.append(intvl(lower, upper))

                case _:
                    items.append(intvl(item))

        self._intervals = tuple(_normalize(items))

    @property
    def intervals(self) -> tuple[T, ...]:
        return self._intervals

    @property
    def interval(self) -> type[T]:
        return self._intvl

    @classmethod
    def empty(cls, intvl: type[T]) -> Self:
        """Return the empty set of intervals of type `intvl`."""
        return cls((), intvl=intvl)

    @classmethod
    def whole(cls, intvl: type[T]) -> Self:
        """Return ``[min_value(), max_value()]`` of the bound type as a set."""
        return cls((intvl.whole(),), intvl=intvl, _skipcheck=True)

    @classmethod
    def fromvalues(cls, values: Iterable[Any], intvl: type[T]) -> Self:
        """Return the smallest set containing every value of `values`.

        Examples
        --------
        >>> from intervo import UInt8Interval
        >>> IntervalSet.fromvalues([5, 1, 2, 3, 9], UInt8Interval)
        IntervalSet([UInt8Interval(1, 3), UInt8Interval(5, 5), UInt8Interval(9, 9)])
        """
        return cls((intvl(x) for x in values), intvl=intvl)

    def copy(self) -> Self:
        """Return a shallow copy of the set."""
        return self._new(self._intervals)

    def _new(self, intervals: Iterable[T]) -> Self:
        return self.__class__(intervals, intvl=self._intvl, _skipcheck=True)

    def _ensure(self, value: Any) -> Self:
        if isinstance(value, IntervalSet):
            if value._intvl is not self._intvl:
                raise TypeError(f"{value!r} is not a set of {self._intvl!r}")

            return value  # type: ignore

        return self.__class__((value,), intvl=self._intvl)

    def isempty(self) -> bool:
        return not self._intervals

    def issingleton(self) -> bool:
        return len(self._intervals) == 1 and self._intervals[0].issingleton()

    def size(self) -> int:
        """Return the number of values in the set."""
        return sum(x.size() for x in self._intervals)

    def lower_bound(self) -> Any:
        if not self._intervals:
            raise InvalidOperationError("empty set has no lower bound")

        return self._intervals[0].lower

    def upper_bound(self) -> Any:
        if not self._intervals:
            raise InvalidOperationError("empty set has no upper bound")

        return self._intervals[-1].upper

    def contains(self, value: Any) -> bool:
        """Return ``True`` if `value` is in the set.

        If `value` is an interval or a set of intervals, this is the same as
        ``value.issubset(self)``.
        """
        if isinstance(value, Interval | IntervalSet):
            return self._ensure(value).issubset(self)

        exact = self._intvl.width.exact(value)
        toexact = self._intvl.width.toexact
        i = bisect.bisect_right(self._intervals, exact, key=lambda x: toexact(x.lower))
        return i > 0 and exact <= toexact(self._intervals[i - 1].upper)

    def hull(self, *args: Self | T | Any) -> T:
        """Return the smallest interval containing the set and every argument."""
        result = self._intvl.empty()

        if self._intervals:
            result = self._intervals[0].hull(self._intervals[-1])

        for arg in map(self._ensure, args):
            if arg._intervals:
                result = result.hull(arg._intervals[0], arg._intervals[-1])

        return result

    def union(self, other: Self | T | Any) -> Self:
        """Return the set of values in either the set or `other`.

        Examples
        --------
        >>> from intervo import UInt8Interval as UI
        >>> x = IntervalSet([UI(2, 5)])
        >>> x.union(IntervalSet([UI(7, 9)]))
        IntervalSet([UInt8Interval(2, 5), UInt8Interval(7, 9)])
        >>> x.union(UI(6, 6))
        IntervalSet([UInt8Interval(2, 6)])
        """
        other = self._ensure(other)
        return self._new(_normalize(self._intervals + other._intervals))

    def intersection(self, other: Self | T | Any) -> Self:
        other = self._ensure(other)
        lhs = self._intervals
        rhs = other._intervals
        result = []
        i = j = 0

        while i < len(lhs) and j < len(rhs):
            tmp = lhs[i].intersection(rhs[j])

            if not tmp.isempty():
                result.append(tmp)

            if lhs[i].upper < rhs[j].upper:
                i += 1
            else:
                j += 1

        return self._new(_merge(result))

    def difference(self, other: Self | T | Any) -> Self:
        """Return the set of values in the set but not in `other`.

        Examples
        --------
        >>> from intervo import UInt8Interval as UI
        >>> x = IntervalSet([UI(0, 10), UI(20, 30)])
        >>> x.difference(IntervalSet([UI(4, 6), UI(9, 22)]))
        IntervalSet([UInt8Interval(0, 3), UInt8Interval(7, 8), UInt8Interval(23, 30)])
        """
        other = self._ensure(other)
        rhs = other._intervals
        result = []
        j = 0

        for x in self._intervals:
            while j < len(rhs) and rhs[j].upper < x.lower:
                j += 1

            rest = x
            k = j

            while k < len(rhs) and not rest.isempty() and rhs[k].lower <= rest.upper:
                pieces = rest.difference(rhs[k])
                rest = rest.empty()

                for piece in pieces:
                    if piece.upper < rhs[k].lower:
                        result.append(piece)
                    else:
                        rest = piece

                k += 1

            if not rest.isempty():
                result.append(rest)

        return self._new(result)

    def symmetric_difference(self, other: Self | T | Any) -> Self:
        """Return the set of values in exactly one of the set and `other`."""
        other = self._ensure(other)
        return self.difference(other).union(other.difference(self))

    def complement(self) -> Self:
        """Return the values of ``[min_value(), max_value()]`` not in the set."""
        return self.whole(self._intvl).difference(self)

    def issubset(self, other: Self | T | Any) -> bool:
        """Test whether every value in the set is in `other`."""
        other = self._ensure(other)
        rhs = other._intervals
        j = 0

        for x in self._intervals:
            while j < len(rhs) and rhs[j].upper < x.lower:
                j += 1

            if j == len(rhs) or not x.issubset(rhs[j]):
                return False

        return True

    def issuperset(self, other: Self | T | Any) -> bool:
        """Test whether every value in `other` is in the set."""
        return self._ensure(other).issubset(self)

    def overlaps(self, other: Self | T | Any) -> bool:
        other = self._ensure(other)
        lhs = self._intervals
        rhs = other._intervals
        i = j = 0

        while i < len(lhs) and j < len(rhs):
            if lhs[i].overlaps(rhs[j]):
                return True

            if lhs[i].upper < rhs[j].upper:
                i += 1
            else:
                j += 1

        return False

    def isdisjoint(self, other: Self | T | Any) -> bool:
        """Return ``True`` if the set has no values in common with `other`."""
        return not self.overlaps(other)

    def shrink_left(self, n: int) -> Self:
        """Shrink the first interval by `n` values, dropping it if it becomes empty.

        Examples
        --------
        >>> from intervo import UInt8Interval as UI
        >>> x = IntervalSet([UI(2, 4), UI(8, 9)])
        >>> x.shrink_left(1)
        IntervalSet([UInt8Interval(3, 4), UInt8Interval(8, 9)])
        >>> x.shrink_left(5)
        IntervalSet([UInt8Interval(8, 9)])
        """
        n = operator.index(n)

        if n < 0:
            raise ValueError(f"cannot shrink by a negative amount: {n}")

        if not self._intervals:
            return self.copy()

        first = self._intervals[0].shrink_left(n)
        rest = self._intervals[1:]
        return self._new(rest if first.isempty() else (first, *rest))

    def shrink_right(self, n: int) -> Self:
        """Shrink the last interval by `n` values, dropping it if it becomes empty."""
        n = operator.index(n)

        if n < 0:
            raise ValueError(f"cannot shrink by a negative amount: {n}")

        if not self._intervals:
            return self.copy()

        last = self._intervals[-1].shrink_right(n)
        rest = self._intervals[:-1]
        return self._new(rest if last.isempty() else (*rest, last))

    def strict_shrink_left(self, n: int) -> Self:
        if operator.index(n) == 0:
            raise InvalidOperationError("strict shrink must move at least one value")

        return self.shrink_left(n)

    def strict_shrink_right(self, n: int) -> Self:
        if operator.index(n) == 0:
            raise InvalidOperationError("strict shrink must move at least one value")

        return self.shrink_right(n)

    def __repr__(self) -> str:
        if not self._intervals:
            return f"{type(self).__name__}([], intvl={self._intvl.__name__})"

        return f"{type(self).__name__}({list(self._intervals)!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, IntervalSet):
            return NotImplemented

        return self._intvl is other._intvl and self._intervals == other._intervals

    def __hash__(self) -> int:
        return hash((self._intvl, self._intervals))

    def __len__(self) -> int:
        return len(self._intervals)

    def __iter__(self) -> Iterator[T]:
        return iter(self._intervals)

    @overload
    def __getitem__(self, key: int) -> T: ...

    @overload
    def __getitem__(self, key: slice) -> Self: ...

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self._new(self._intervals[key])

        return self._intervals[key]

    def __contains__(self, item) -> bool:
        return self.contains(item)

    def __le__(self, rhs: Self) -> bool:
        if not isinstance(rhs, IntervalSet):
            return NotImplemented

        return self.issubset(rhs)

    def __lt__(self, rhs: Self) -> bool:
        if not isinstance(rhs, IntervalSet):
            return NotImplemented

        return self.issubset(rhs) and self != rhs

    def __ge__(self, rhs: Self) -> bool:
        if not isinstance(rhs, IntervalSet):
            return NotImplemented

        return self.issuperset(rhs)

    def __gt__(self, rhs: Self) -> bool:
        if not isinstance(rhs, IntervalSet):
            return NotImplemented

        return self.issuperset(rhs) and self != rhs

    def __or__(self, rhs: Self | T) -> Self:
        if not isinstance(rhs, Interval | IntervalSet):
            return NotImplemented

        return self.union(rhs)

    def __and__(self, rhs: Self | T) -> Self:
        if not isinstance(rhs, Interval | IntervalSet):
            return NotImplemented

        return self.intersection(rhs)

    def __sub__(self, rhs: Self | T) -> Self:
        if not isinstance(rhs, Interval | IntervalSet):
            return NotImplemented

        return self.difference(rhs)

    def __xor__(self, rhs: Self | T) -> Self:
        if not isinstance(rhs, Interval | IntervalSet):
            return NotImplemented

        return self.symmetric_difference(rhs)

    def __ror__(self, lhs: T) -> Self:
        return self.__or__(lhs)

    def __rand__(self, lhs: T) -> Self:
        return self.__and__(lhs)

    def __rsub__(self, lhs: T) -> Self:
        if not isinstance(lhs, Interval):
            return NotImplemented

        return self._ensure(lhs).difference(self)

    def __rxor__(self, lhs: T) -> Self:
        return self.__xor__(lhs)

    def __invert__(self) -> Self:
        return self.complement()

    def __copy__(self) -> Self:
        return self.copy()
