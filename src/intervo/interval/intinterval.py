from collections.abc import Iterator

import numpy as np

from intervo.interval.interval import Interval
from intervo.width import IntegerWidth


class IntegerInterval[T: np.integer](Interval[T]):
    """Abstract base class for intervals over fixed-width NumPy integers.

    Examples
    --------
    >>> from intervo import Int8Interval
    >>> x = Int8Interval(-2, 1)
    >>> [int(v) for v in x]
    [-2, -1, 0, 1]
    >>> x.size()
    4
    """

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        for value in range(int(self.lower), int(self.upper) + 1):
            yield self.endtype(value)


class Int8Interval(IntegerInterval[np.int8]):
    """Interval over 8-bit signed integers."""

    __slots__ = ()
    endtype = np.int8
    width = IntegerWidth(np.int8)


class Int16Interval(IntegerInterval[np.int16]):
    """Interval over 16-bit signed integers."""

    __slots__ = ()
    endtype = np.int16
    width = IntegerWidth(np.int16)


class Int32Interval(IntegerInterval[np.int32]):
    """Interval over 32-bit signed integers."""

    __slots__ = ()
    endtype = np.int32
    width = IntegerWidth(np.int32)


class Int64Interval(IntegerInterval[np.int64]):
    """Interval over 64-bit signed integers."""

    __slots__ = ()
    endtype = np.int64
    width = IntegerWidth(np.int64)


class UInt8Interval(IntegerInterval[np.uint8]):
    """Interval over 8-bit unsigned integers.

    Examples
    --------
    >>> x = UInt8Interval(0, 255)
    >>> x.size()
    256
    >>> x.shrink_left(250)
    UInt8Interval(250, 255)
    """

    __slots__ = ()
    endtype = np.uint8
    width = IntegerWidth(np.uint8)


class UInt16Interval(IntegerInterval[np.uint16]):
    """Interval over 16-bit unsigned integers."""

    __slots__ = ()
    endtype = np.uint16
    width = IntegerWidth(np.uint16)


class UInt32Interval(IntegerInterval[np.uint32]):
    """Interval over 32-bit unsigned integers."""

    __slots__ = ()
    endtype = np.uint32
    width = IntegerWidth(np.uint32)


class UInt64Interval(IntegerInterval[np.uint64]):
    """Interval over 64-bit unsigned integers."""

    __slots__ = ()
    endtype = np.uint64
    width = IntegerWidth(np.uint64)
