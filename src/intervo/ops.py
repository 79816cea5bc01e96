"""
###################################
Set operations (:mod:`intervo.ops`)
###################################

.. currentmodule:: intervo.ops

This module provides the abstract set operations shared by
:class:`~intervo.interval.Interval` and :class:`~intervo.intervalset.IntervalSet`.

Each class states one contract. Both representations implement every contract with
the same meaning, so generic code written against these classes behaves identically
whichever representation it receives. Throughout, an empty operand is the identity of
union and the absorbing element of intersection.

Queries
=======

.. autosummary::
    :toctree: generated/

    Bounded
    Cardinality
    Contains
    Disjoint
    Overlap
    Subset

Transformations
===============

.. autosummary::
    :toctree: generated/

    Complement
    Difference
    Hull
    Intersection
    ShrinkLeft
    ShrinkRight
    StrictShrinkLeft
    StrictShrinkRight
    Union

Miscellaneous
=============

.. autosummary::
    :toctree: generated/

    InvalidOperationError

"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Self


class InvalidOperationError(ValueError):
    """Error raised when an operation is undefined for its operands."""


class Bounded(ABC):
    """Overall span of a set."""

    __slots__ = ()

    @abstractmethod
    def lower_bound(self) -> Any:
        """Return the smallest element.

        Raises
        ------
        InvalidOperationError
            If the set is empty.
        """
        raise NotImplementedError

    @abstractmethod
    def upper_bound(self) -> Any:
        """Return the largest element.

        Raises
        ------
        InvalidOperationError
            If the set is empty.
        """
        raise NotImplementedError


class Cardinality(ABC):
    """Number of elements of a set."""

    __slots__ = ()

    @abstractmethod
    def size(self) -> int:
        """Return the number of elements.

        The result is a Python integer, so it is exact even when it does not fit in
        the bound type. It is ``0`` if and only if the set is empty.
        """
        raise NotImplementedError

    @abstractmethod
    def isempty(self) -> bool:
        """Return ``True`` if the set has no elements."""
        raise NotImplementedError

    @abstractmethod
    def issingleton(self) -> bool:
        """Return ``True`` if the set has exactly one element."""
        raise NotImplementedError


class Contains(ABC):
    __slots__ = ()

    @abstractmethod
    def contains(self, value: Any) -> bool:
        """Return ``True`` if `value` is an element. Always ``False`` for an empty
        set."""
        raise NotImplementedError


class Hull(ABC):
    __slots__ = ()

    @abstractmethod
    def hull(self, *args: Self) -> Any:
        """Return the smallest interval containing the set and every argument.

        Empty operands are ignored.
        """
        raise NotImplementedError


class Union(ABC):
    __slots__ = ()

    @abstractmethod
    def union(self, other: Self) -> Self:
        """Return the set of elements in either operand.

        Commutative, associative, and idempotent, with the empty set as identity.
        """
        raise NotImplementedError


class Intersection(ABC):
    __slots__ = ()

    @abstractmethod
    def intersection(self, other: Self) -> Self:
        """Return the set of elements common to both operands.

        Commutative, associative, and idempotent, with the empty set as absorbing
        element.
        """
        raise NotImplementedError


class Difference(ABC):
    __slots__ = ()

    @abstractmethod
    def difference(self, other: Self) -> Self | Sequence[Self]:
        """Return the elements of the set that are not in `other`.

        ``x`` is an element of the result if and only if ``x`` is an element of the
        set and not of `other`. An empty `other` leaves the set unchanged.
        """
        raise NotImplementedError


class Complement(ABC):
    __slots__ = ()

    @abstractmethod
    def complement(self) -> Self | Sequence[Self]:
        """Return the elements between ``min_value()`` and ``max_value()`` of the
        bound type that are not in the set."""
        raise NotImplementedError


class Subset(ABC):
    __slots__ = ()

    @abstractmethod
    def issubset(self, other: Self) -> bool:
        """Test whether every element of the set is in `other`.

        The empty set is a subset of every set.
        """
        raise NotImplementedError


class Overlap(ABC):
    __slots__ = ()

    @abstractmethod
    def overlaps(self, other: Self) -> bool:
        """Return ``True`` if the set has at least one element in common with
        `other`."""
        raise NotImplementedError


class Disjoint(ABC):
    __slots__ = ()

    @abstractmethod
    def isdisjoint(self, other: Self) -> bool:
        """Return ``True`` if the set has no elements in common with `other`.

        Always the negation of :meth:`Overlap.overlaps`.
        """
        raise NotImplementedError


class ShrinkLeft(ABC):
    __slots__ = ()

    @abstractmethod
    def shrink_left(self, n: int) -> Self:
        """Move the lower end of the set `n` values upwards.

        An interval becomes empty when `n` is at least its size. A set of intervals
        shrinks its first interval only and drops it when it becomes empty. Shrinking
        by zero returns an equal set.

        Raises
        ------
        ValueError
            If `n` is negative.
        """
        raise NotImplementedError


class ShrinkRight(ABC):
    __slots__ = ()

    @abstractmethod
    def shrink_right(self, n: int) -> Self:
        """Move the upper end of the set `n` values downwards.

        An interval becomes empty when `n` is at least its size. A set of intervals
        shrinks its last interval only and drops it when it becomes empty. Shrinking
        by zero returns an equal set.

        Raises
        ------
        ValueError
            If `n` is negative.
        """
        raise NotImplementedError


class StrictShrinkLeft(ABC):
    __slots__ = ()

    @abstractmethod
    def strict_shrink_left(self, n: int) -> Self:
        """Same as :meth:`ShrinkLeft.shrink_left`, but `n` must be at least one.

        Raises
        ------
        InvalidOperationError
            If `n` is zero.
        """
        raise NotImplementedError


class StrictShrinkRight(ABC):
    __slots__ = ()

    @abstractmethod
    def strict_shrink_right(self, n: int) -> Self:
        """Same as :meth:`ShrinkRight.shrink_right`, but `n` must be at least one.

        Raises
        ------
        InvalidOperationError
            If `n` is zero.
        """
        raise NotImplementedError
