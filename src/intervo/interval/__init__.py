"""
###################################
Intervals (:mod:`intervo.interval`)
###################################

.. currentmodule:: intervo.interval

This module provides closed intervals over fixed-width bound types.

Intervals
=========

.. autosummary::
    :toctree: generated/

    Interval
    IntegerInterval
    Int8Interval
    Int16Interval
    Int32Interval
    Int64Interval
    UInt8Interval
    UInt16Interval
    UInt32Interval
    UInt64Interval
    FloatInterval

"""

from .floatinterval import FloatInterval
from .interval import Interval
from .intinterval import (
    Int8Interval,
    Int16Interval,
    Int32Interval,
    Int64Interval,
    IntegerInterval,
    UInt8Interval,
    UInt16Interval,
    UInt32Interval,
    UInt64Interval,
)

__all__ = [
    "FloatInterval",
    "Interval",
    "IntegerInterval",
    "Int8Interval",
    "Int16Interval",
    "Int32Interval",
    "Int64Interval",
    "UInt8Interval",
    "UInt16Interval",
    "UInt32Interval",
    "UInt64Interval",
]
