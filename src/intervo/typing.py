"""
##############################
Typing (:mod:`intervo.typing`)
##############################

This module provides type definitions commonly used between modules.

.. autoclass:: Bound
    :show-inheritance:
    :no-members:

"""

from abc import abstractmethod
from typing import Protocol, Self


class Bound(Protocol):
    """Protocol for totally ordered endpoint values, like a fixed-width integer.

    Arithmetic is never performed directly on objects implementing this protocol;
    it is routed through :class:`intervo.width.Width` instead.
    """

    __slots__ = ()

    @abstractmethod
    def __lt__(self, rhs: Self) -> bool: ...

    @abstractmethod
    def __le__(self, rhs: Self) -> bool: ...

    @abstractmethod
    def __gt__(self, rhs: Self) -> bool: ...

    @abstractmethod
    def __ge__(self, rhs: Self) -> bool: ...
