"""
############################
Width (:mod:`intervo.width`)
############################

.. currentmodule:: intervo.width

This module provides safe limits, steps, and cardinalities for bound types.

The size of an n-bit interval does not fit in an n-bit integer: ``[0, 255]`` over
8-bit unsigned integers has 256 elements. Every size, step, and adjacency
computation therefore goes through :class:`Width`, which performs it on exact Python
numbers and narrows the result back to the bound type only after checking it
against :meth:`Width.min_value` and :meth:`Width.max_value`.

.. autosummary::
    :toctree: generated/

    Width
    IntegerWidth
    FloatWidth
    OutOfRangeError
    RoundingMode

"""

import enum
import fractions
import logging
import math
from abc import ABC, abstractmethod
from typing import Final

import numpy as np

from intervo.context import getcontext
from intervo.typing import Bound

_logger = logging.getLogger(__name__)

type Exact = int | fractions.Fraction


class OutOfRangeError(OverflowError):
    """Error raised when a value leaves the limits of a bound type."""


class RoundingMode(enum.Enum):
    """Rounding mode specifier.

    Attributes
    ----------
    ROUND_CEILING
    ROUND_FLOOR
    """

    ROUND_CEILING = enum.auto()
    ROUND_FLOOR = enum.auto()

    def __repr__(self):
        return f"<{self.__class__.__name__}.{self.name}>"


ROUND_CEILING: Final = RoundingMode.ROUND_CEILING
ROUND_FLOOR: Final = RoundingMode.ROUND_FLOOR


class Width[T: Bound](ABC):
    """Provides limits, steps, and cardinalities of a bound type.

    A width maps every bound value within ``[min_value(), max_value()]`` to an
    ordinal, a Python integer, such that consecutive representable values have
    consecutive ordinals. Successor, predecessor, adjacency, and size are all defined
    on ordinals, so they never overflow the bound type.

    Notes
    -----
    Classes that inherit from this must define the attribute `endtype`.
    """

    __slots__ = ()
    endtype: type[T]

    @abstractmethod
    def min_value(self) -> T:
        """Return the smallest usable bound."""
        raise NotImplementedError

    @abstractmethod
    def max_value(self) -> T:
        """Return the largest usable bound."""
        raise NotImplementedError

    @abstractmethod
    def ordinal(self, value: T) -> int:
        """Return the ordinal of `value`."""
        raise NotImplementedError

    @abstractmethod
    def fromordinal(self, value: int) -> T:
        """Return the bound whose ordinal is `value`.

        `value` must lie between the ordinals of the limits.
        """
        raise NotImplementedError

    @abstractmethod
    def toexact(self, value: T) -> Exact:
        """Convert the bound to an exact Python number."""
        raise NotImplementedError

    @abstractmethod
    def round(self, value: Exact, rounding: RoundingMode) -> T:
        """Round the exact number within the limits to a bound."""
        raise NotImplementedError

    def width(self, lower: T, upper: T) -> int:
        """Return the number of values in ``[lower, upper]``.

        The result is ``0`` if `lower` is greater than `upper`.

        Examples
        --------
        >>> width = IntegerWidth(np.uint8)
        >>> width.width(np.uint8(0), np.uint8(255))
        256
        """
        if lower > upper:
            return 0

        return self.ordinal(upper) - self.ordinal(lower) + 1

    def advance(self, value: T, n: int) -> T:
        """Move `value` by `n` steps, where a negative `n` moves downwards.

        Raises
        ------
        OutOfRangeError
            If the result leaves the limits and the overflow policy is ``"RAISE"``.
        """
        lo = self.ordinal(self.min_value())
        hi = self.ordinal(self.max_value())
        result = self.ordinal(value) + n

        if not lo <= result <= hi:
            result = self._saturate(
                result, lo, hi, f"moving {value!r} by {n} steps leaves {self!r}"
            )

        return self.fromordinal(result)

    def succ(self, value: T) -> T:
        """Return the next value.

        Raises
        ------
        OutOfRangeError
            If `value` is the largest usable bound and the overflow policy is
            ``"RAISE"``.
        """
        return self.advance(value, 1)

    def pred(self, value: T) -> T:
        """Return the previous value.

        Raises
        ------
        OutOfRangeError
            If `value` is the smallest usable bound and the overflow policy is
            ``"RAISE"``.
        """
        return self.advance(value, -1)

    def isadjacent(self, lhs: T, rhs: T) -> bool:
        """Return ``True`` if `rhs` is the next value of `lhs`."""
        return lhs < rhs and self.ordinal(rhs) - self.ordinal(lhs) == 1

    def contains(self, value: T) -> bool:
        """Return ``True`` if `value` is within the limits."""
        return self.min_value() <= value <= self.max_value()

    def ensure(self, value, rounding: RoundingMode = ROUND_FLOOR) -> T:
        """Convert `value` to the bound type.

        Values that are not representable are rounded in the direction of
        `rounding`.

        Raises
        ------
        OutOfRangeError
            If `value` is outside the limits. The overflow policy does not apply.
        TypeError
            If `value` is not a number.
        ValueError
            If `value` is NaN.
        """
        exact = self.exact(value)

        lo = self.toexact(self.min_value())
        hi = self.toexact(self.max_value())

        if not lo <= exact <= hi:
            raise OutOfRangeError(f"{value!r} is out of {self!r}")

        return self.round(exact, rounding)

    def fromexact(self, value: Exact, rounding: RoundingMode) -> T:
        """Narrow the exact number to a bound, rounding in the direction of
        `rounding`.

        Raises
        ------
        OutOfRangeError
            If `value` is outside the limits and the overflow policy is ``"RAISE"``.
        """
        lo = self.toexact(self.min_value())
        hi = self.toexact(self.max_value())

        if not lo <= value <= hi:
            value = self._saturate(value, lo, hi, f"{value} is out of {self!r}")

        return self.round(value, rounding)

    def exact(self, value) -> Exact:
        """Convert a number to an exact Python number without range checks."""
        match value:
            case bool() | np.bool_():
                raise TypeError(f"invalid bound: {value!r}")

            case int() | np.integer():
                return int(value)

            case fractions.Fraction():
                return value

            case float() | np.floating():
                if math.isnan(value):
                    raise ValueError("NaN is not a valid bound")

                if math.isinf(value):
                    raise OutOfRangeError(f"{value!r} is out of {self!r}")

                return fractions.Fraction(float(value))

            case self.endtype():
                return self.toexact(value)

        raise TypeError(f"invalid bound: {value!r}")

    def _saturate(self, value: Exact, lo: Exact, hi: Exact, message: str) -> Exact:
        if getcontext().overflow == "RAISE":
            raise OutOfRangeError(message)

        result = lo if value < lo else hi
        _logger.debug("saturated %s to %s", value, result)
        return result

    def __repr__(self):
        return f"{type(self).__name__}[{self.min_value()!r}, {self.max_value()!r}]"


class IntegerWidth[T: np.integer](Width[T]):
    """Width of a fixed-width NumPy integer type.

    Parameters
    ----------
    endtype : type[numpy.integer]
        Bound type, e.g. ``numpy.uint8``.
    min_value : int | None, optional
        Smallest usable bound. Defaults to the smallest value of `endtype`.
    max_value : int | None, optional
        Largest usable bound. Defaults to the largest value of `endtype`.

    Examples
    --------
    >>> width = IntegerWidth(np.int8)
    >>> width.min_value(), width.max_value()
    (np.int8(-128), np.int8(127))
    >>> width.width(width.min_value(), width.max_value())
    256
    """

    __slots__ = ("endtype", "_min", "_max")
    _min: T
    _max: T

    def __init__(
        self,
        endtype: type[T],
        min_value: int | None = None,
        max_value: int | None = None,
    ):
        if not issubclass(endtype, np.integer):
            raise TypeError

        info = np.iinfo(endtype)
        lo = int(info.min) if min_value is None else int(min_value)
        hi = int(info.max) if max_value is None else int(max_value)

        if not info.min <= lo < hi <= info.max:
            raise ValueError(f"invalid limits [{lo}, {hi}] for {endtype.__name__}")

        self.endtype = endtype
        self._min = endtype(lo)
        self._max = endtype(hi)

    def min_value(self) -> T:
        return self._min

    def max_value(self) -> T:
        return self._max

    def ordinal(self, value: T) -> int:
        return int(value)

    def fromordinal(self, value: int) -> T:
        return self.endtype(value)

    def toexact(self, value: T) -> int:
        return int(value)

    def round(self, value: Exact, rounding: RoundingMode) -> T:
        match rounding:
            case RoundingMode.ROUND_CEILING:
                return self.endtype(math.ceil(value))

            case RoundingMode.ROUND_FLOOR:
                return self.endtype(math.floor(value))

        raise TypeError


_SIGN_MASK: Final = 0x7FFF_FFFF_FFFF_FFFF


class FloatWidth(Width[np.float64]):
    """Width of double-precision floating-point numbers.

    Ordinals follow the IEEE 754 bit patterns, so the successor of a float is the
    next representable float and two intervals are adjacent when no float lies
    between them. Both zeros share the ordinal 0. Infinities and NaNs are never
    usable bounds.

    Parameters
    ----------
    min_value : float | None, optional
        Smallest usable bound. Defaults to the most negative finite float.
    max_value : float | None, optional
        Largest usable bound. Defaults to the largest finite float.
    """

    __slots__ = ("_min", "_max")
    endtype = np.float64
    _min: np.float64
    _max: np.float64

    def __init__(self, min_value: float | None = None, max_value: float | None = None):
        fmax = float(np.finfo(np.float64).max)
        lo = -fmax if min_value is None else float(min_value)
        hi = fmax if max_value is None else float(max_value)

        if not -fmax <= lo < hi <= fmax:
            raise ValueError(f"invalid limits [{lo}, {hi}] for float64")

        self._min = np.float64(lo)
        self._max = np.float64(hi)

    def min_value(self) -> np.float64:
        return self._min

    def max_value(self) -> np.float64:
        return self._max

    def ordinal(self, value: np.float64) -> int:
        bits = int(np.array([value], np.float64).view(np.int64)[0])
        return bits if bits >= 0 else -(bits & _SIGN_MASK)

    def fromordinal(self, value: int) -> np.float64:
        bits = np.array([abs(value)], np.int64).view(np.float64)[0]
        return np.float64(-bits if value < 0 else bits)

    def toexact(self, value: np.float64) -> fractions.Fraction:
        return fractions.Fraction(float(value))

    def round(self, value: Exact, rounding: RoundingMode) -> np.float64:
        result = float(value)
        diff = fractions.Fraction(result) - value

        match rounding:
            case RoundingMode.ROUND_CEILING:
                if diff < 0:
                    result = math.nextafter(result, math.inf)

            case RoundingMode.ROUND_FLOOR:
                if diff > 0:
                    result = math.nextafter(result, -math.inf)

            case _:
                raise TypeError

        return np.float64(result)
