from .context import Context, getcontext, localcontext, setcontext
from .interval import (
    FloatInterval,
    Int8Interval,
    Int16Interval,
    Int32Interval,
    Int64Interval,
    IntegerInterval,
    Interval,
    UInt8Interval,
    UInt16Interval,
    UInt32Interval,
    UInt64Interval,
)
from .intervalset import IntervalSet
from .ops import InvalidOperationError
from .width import FloatWidth, IntegerWidth, OutOfRangeError, Width

__all__ = [
    "Context",
    "getcontext",
    "localcontext",
    "setcontext",
    "FloatInterval",
    "Int8Interval",
    "Int16Interval",
    "Int32Interval",
    "Int64Interval",
    "IntegerInterval",
    "Interval",
    "UInt8Interval",
    "UInt16Interval",
    "UInt32Interval",
    "UInt64Interval",
    "IntervalSet",
    "InvalidOperationError",
    "FloatWidth",
    "IntegerWidth",
    "OutOfRangeError",
    "Width",
]
