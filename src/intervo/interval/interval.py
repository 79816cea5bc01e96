import operator
from abc import abstractmethod
from typing import Self

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
from intervo.typing import Bound
from intervo.width import ROUND_CEILING, ROUND_FLOOR, Exact, Width


class Interval[T: Bound](
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
    """Abstract base class for closed intervals over a bound type.

    Parameters
    ----------
    lower : endtype | float | int | None, optional
        Lower bound of the interval.
    upper : endtype | float | int | None, optional
        Upper bound of the interval.

    Attributes
    ----------
    lower : endtype
        Lower bound of the interval.
    upper : endtype
        Upper bound of the interval.
    endtype : type[endtype]
    width : Width

    Notes
    -----
    Classes that inherit from this must define class constants `width` and
    `endtype`, where `endtype` is a type of endpoints.

    An interval is empty if and only if ``lower > upper``. Such bounds are not an
    error; they are normalized to a single empty value, so that all empty intervals
    compare equal. If both bounds are omitted, the interval is empty; if only one is
    given, the interval is a singleton.

    Bounds that are not representable are rounded inwards, so that the interval holds
    exactly the representable values between the given bounds. Bounds outside the
    limits of `width` raise :class:`~intervo.width.OutOfRangeError`.

    Intervals are immutable: every operation returns a new interval.
    """

    __slots__ = ("lower", "upper")
    lower: T
    upper: T
    endtype: type[T]

    @property
    @abstractmethod
    def width(self) -> Width[T]:
        raise NotImplementedError

    def __init__(
        self,
        lower: T | float | int | None = None,
        upper: T | float | int | None = None,
    ):
        if lower is None:
            if upper is None:
                self.lower = self.width.max_value()
                self.upper = self.width.min_value()
                return

            lower = upper

        if upper is None:
            upper = lower

        self.lower = self.width.ensure(lower, ROUND_CEILING)
        self.upper = self.width.ensure(upper, ROUND_FLOOR)

        if self.lower > self.upper:
            self.lower = self.width.max_value()
            self.upper = self.width.min_value()

    @classmethod
    def empty(cls) -> Self:
        """Return the empty interval."""
        return cls()

    @classmethod
    def singleton(cls, value: T | float | int) -> Self:
        """Return the interval containing only `value`."""
        return cls(value)

    @classmethod
    def whole(cls) -> Self:
        """Return ``[min_value(), max_value()]`` of the bound type."""
        return cls._new(cls.width.min_value(), cls.width.max_value())

    @classmethod
    def ensure(cls, value: Self | T | float | int) -> Self:
        """Convert `value` to an interval.

        Raises
        ------
        TypeError
            If `value` is an interval of another class.
        """
        return value if isinstance(value, cls) else cls(value)  # type: ignore

    @classmethod
    def _new(cls, lower: T, upper: T) -> Self:
        result = object.__new__(cls)

        if lower > upper:
            result.lower = cls.width.max_value()
            result.upper = cls.width.min_value()
        else:
            result.lower = lower
            result.upper = upper

        return result

    @classmethod
    def _fromexact(cls, lower: Exact, upper: Exact) -> Self:
        lower = cls.width.fromexact(lower, ROUND_FLOOR)
        upper = cls.width.fromexact(upper, ROUND_CEILING)
        return cls._new(lower, upper)

    def copy(self) -> Self:
        """Return a shallow copy of the interval."""
        return self._new(self.lower, self.upper)

    def isempty(self) -> bool:
        """Return ``True`` if ``lower > upper``.

        Examples
        --------
        >>> from intervo import UInt8Interval
        >>> UInt8Interval(5, 5).isempty()
        False
        >>> UInt8Interval(5, 4).isempty()
        True
        """
        return self.lower > self.upper

    def issingleton(self) -> bool:
        return self.lower == self.upper

    def size(self) -> int:
        """Return the number of values in the interval.

        Examples
        --------
        >>> from intervo import UInt8Interval
        >>> UInt8Interval(0, 255).size()
        256
        """
        return self.width.width(self.lower, self.upper)

    def lower_bound(self) -> T:
        if self.isempty():
            raise InvalidOperationError("empty interval has no lower bound")

        return self.lower

    def upper_bound(self) -> T:
        if self.isempty():
            raise InvalidOperationError("empty interval has no upper bound")

        return self.upper

    def contains(self, value: Self | T | float | int) -> bool:
        """Return ``True`` if `value` is in the interval.

        If `value` is an interval, this is the same as ``value.issubset(self)``.
        """
        if isinstance(value, Interval):
            return self.ensure(value).issubset(self)

        if self.isempty():
            return False

        exact = self.width.exact(value)
        toexact = self.width.toexact
        return toexact(self.lower) <= exact <= toexact(self.upper)

    def hull(self, *args: Self | T | float | int) -> Self:
        """Return an interval hull.

        Examples
        --------
        >>> from intervo import UInt8Interval
        >>> UInt8Interval(2, 3).hull(UInt8Interval(7, 9), 12)
        UInt8Interval(2, 12)
        """
        lower = self.lower
        upper = self.upper

        for arg in map(self.ensure, args):
            if arg.isempty():
                continue

            if lower > upper:
                lower, upper = arg.lower, arg.upper
            else:
                lower = min(lower, arg.lower)
                upper = max(upper, arg.upper)

        return self._new(lower, upper)

    def isadjacent(self, other: Self | T | float | int) -> bool:
        """Return ``True`` if the intervals are disjoint and no value lies between
        them."""
        other = self.ensure(other)

        if self.isempty() or other.isempty():
            return False

        isadjacent = self.width.isadjacent
        return isadjacent(self.upper, other.lower) or isadjacent(
            other.upper, self.lower
        )

    def union(self, other: Self | T | float | int) -> Self:
        """Return the union of overlapping or adjacent intervals.

        Raises
        ------
        InvalidOperationError
            If the intervals are neither overlapping nor adjacent. Use
            :class:`~intervo.intervalset.IntervalSet` for such unions.

        Examples
        --------
        >>> from intervo import UInt8Interval
        >>> UInt8Interval(2, 5).union(UInt8Interval(6, 9))
        UInt8Interval(2, 9)
        """
        other = self.ensure(other)

        if self.isempty() or other.isempty():
            return self.hull(other)

        if self.overlaps(other) or self.isadjacent(other):
            return self.hull(other)

        raise InvalidOperationError(f"{self!r} and {other!r} are not contiguous")

    def intersection(self, other: Self | T | float | int) -> Self:
        other = self.ensure(other)
        return self._new(max(self.lower, other.lower), min(self.upper, other.upper))

    def difference(self, other: Self | T | float | int) -> tuple[Self, ...]:
        """Return the set difference as a sorted tuple of zero, one, or two intervals.

        Examples
        --------
        >>> from intervo import UInt8Interval
        >>> UInt8Interval(0, 10).difference(UInt8Interval(4, 6))
        (UInt8Interval(0, 3), UInt8Interval(7, 10))
        """
        other = self.ensure(other)

        if self.isempty():
            return ()

        if self.isdisjoint(other):
            return (self,)

        result = []

        if self.lower < other.lower:
            result.append(self._new(self.lower, self.width.pred(other.lower)))

        if other.upper < self.upper:
            result.append(self._new(self.width.succ(other.upper), self.upper))

        return tuple(result)

    def complement(self) -> tuple[Self, ...]:
        """Return the complement as a sorted tuple of zero, one, or two intervals.

        Examples
        --------
        >>> from intervo import UInt8Interval
        >>> UInt8Interval(0, 3).complement()
        (UInt8Interval(4, 255),)
        """
        return self.whole().difference(self)

    def issubset(self, other: Self | T | float | int) -> bool:
        """Test whether every element in the interval is in `other`.

        `other` may also be a set of intervals of the same class.
        """
        if isinstance(other, Subset) and not isinstance(other, Interval):
            return other.issuperset(self)

        other = self.ensure(other)

        if self.isempty():
            return True

        return other.lower <= self.lower and self.upper <= other.upper

    def issuperset(self, other: Self | T | float | int) -> bool:
        """Test whether every element in `other` is in the interval."""
        if isinstance(other, Subset) and not isinstance(other, Interval):
            return other.issubset(self)

        return self.ensure(other).issubset(self)

    def overlaps(self, other: Self | T | float | int) -> bool:
        other = self.ensure(other)

        if self.isempty() or other.isempty():
            return False

        return self.lower <= other.upper and other.lower <= self.upper

    def isdisjoint(self, other: Self | T | float | int) -> bool:
        """Return ``True`` if the interval has no elements in common with `other`."""
        return not self.overlaps(other)

    def shrink_left(self, n: int) -> Self:
        n = operator.index(n)

        if n < 0:
            raise ValueError(f"cannot shrink by a negative amount: {n}")

        if n >= self.size():
            return self.empty()

        return self._new(self.width.advance(self.lower, n), self.upper)

    def shrink_right(self, n: int) -> Self:
        n = operator.index(n)

        if n < 0:
            raise ValueError(f"cannot shrink by a negative amount: {n}")

        if n >= self.size():
            return self.empty()

        return self._new(self.lower, self.width.advance(self.upper, -n))

    def strict_shrink_left(self, n: int) -> Self:
        if operator.index(n) == 0:
            raise InvalidOperationError("strict shrink must move at least one value")

        return self.shrink_left(n)

    def strict_shrink_right(self, n: int) -> Self:
        if operator.index(n) == 0:
            raise InvalidOperationError("strict shrink must move at least one value")

        return self.shrink_right(n)

    def __repr__(self) -> str:
        name = type(self).__name__

        if self.isempty():
            return f"{name}()"

        return f"{name}({self.lower!s}, {self.upper!s})"

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return other.lower == self.lower and other.upper == self.upper

    def __hash__(self) -> int:
        return hash((type(self), self.lower, self.upper))

    def __contains__(self, item) -> bool:
        return self.contains(item)

    def __le__(self, rhs: Self) -> bool:
        if type(rhs) is not type(self):
            return NotImplemented

        return self.issubset(rhs)

    def __lt__(self, rhs: Self) -> bool:
        if type(rhs) is not type(self):
            return NotImplemented

        return self.issubset(rhs) and self != rhs

    def __ge__(self, rhs: Self) -> bool:
        if type(rhs) is not type(self):
            return NotImplemented

        return self.issuperset(rhs)

    def __gt__(self, rhs: Self) -> bool:
        if type(rhs) is not type(self):
            return NotImplemented

        return self.issuperset(rhs) and self != rhs

    def __add__(self, rhs: Self | T | float | int) -> Self:
        toexact = self.width.toexact

        match rhs:
            case self.__class__():
                if self.isempty() or rhs.isempty():
                    return self.empty()

                lower = toexact(self.lower) + toexact(rhs.lower)
                upper = toexact(self.upper) + toexact(rhs.upper)
                return self._fromexact(lower, upper)

            case Interval():
                return NotImplemented

        try:
            value = self.width.exact(rhs)
        except TypeError:
            return NotImplemented

        if self.isempty():
            return self.empty()

        return self._fromexact(toexact(self.lower) + value, toexact(self.upper) + value)

    def __sub__(self, rhs: Self | T | float | int) -> Self:
        match rhs:
            case self.__class__():
                if self.isempty() or rhs.isempty():
                    return self.empty()

                toexact = self.width.toexact
                lower = toexact(self.lower) - toexact(rhs.upper)
                upper = toexact(self.upper) - toexact(rhs.lower)
                return self._fromexact(lower, upper)

            case Interval():
                return NotImplemented

        try:
            value = self.width.exact(rhs)
        except TypeError:
            return NotImplemented

        return self.__add__(-value)

    def __mul__(self, rhs: Self | T | float | int) -> Self:
        toexact = self.width.toexact

        match rhs:
            case self.__class__():
                if self.isempty() or rhs.isempty():
                    return self.empty()

                lhs_bounds = (toexact(self.lower), toexact(self.upper))
                rhs_bounds = (toexact(rhs.lower), toexact(rhs.upper))

            case Interval():
                return NotImplemented

            case _:
                try:
                    rhs_bounds = (self.width.exact(rhs),)
                except TypeError:
                    return NotImplemented

                if self.isempty():
                    return self.empty()

                lhs_bounds = (toexact(self.lower), toexact(self.upper))

        products = [x * y for x in lhs_bounds for y in rhs_bounds]
        return self._fromexact(min(products), max(products))

    def __and__(self, rhs: Self | T | float | int) -> Self:
        try:
            rhs = self.ensure(rhs)
        except TypeError:
            return NotImplemented

        return self.intersection(rhs)

    def __or__(self, rhs: Self | T | float | int) -> Self:
        try:
            rhs = self.ensure(rhs)
        except TypeError:
            return NotImplemented

        return self.union(rhs)

    def __radd__(self, lhs: T | float | int) -> Self:
        return self.__add__(lhs)

    def __rsub__(self, lhs: T | float | int) -> Self:
        try:
            value = self.width.exact(lhs)
        except TypeError:
            return NotImplemented

        if self.isempty():
            return self.empty()

        toexact = self.width.toexact
        return self._fromexact(value - toexact(self.upper), value - toexact(self.lower))

    def __rmul__(self, lhs: T | float | int) -> Self:
        return self.__mul__(lhs)

    def __rand__(self, lhs: T | float | int) -> Self:
        return self.__and__(lhs)

    def __ror__(self, lhs: T | float | int) -> Self:
        return self.__or__(lhs)

    def __neg__(self) -> Self:
        if self.isempty():
            return self.empty()

        toexact = self.width.toexact
        return self._fromexact(-toexact(self.upper), -toexact(self.lower))

    def __pos__(self) -> Self:
        return self.copy()

    def __copy__(self) -> Self:
        return self.copy()
