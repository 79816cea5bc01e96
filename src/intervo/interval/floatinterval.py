import fractions
import math

import numpy as np

from intervo.interval.interval import Interval
from intervo.width import FloatWidth


class FloatInterval(Interval[np.float64]):
    """Interval over the double-precision floats between two bounds.

    Parameters
    ----------
    lower : numpy.float64 | float | int | None, optional
        Lower bound of the interval.
    upper : numpy.float64 | float | int | None, optional
        Upper bound of the interval.

    Attributes
    ----------
    lower : numpy.float64
        Lower bound of the interval.
    upper : numpy.float64
        Upper bound of the interval.
    endtype : type[numpy.float64]
    width : FloatWidth

    Notes
    -----
    The interval is a finite set: it holds the representable floats between its
    bounds, and :meth:`size` counts them. Two intervals are adjacent when no float lies
    between them.

    Examples
    --------
    >>> x = FloatInterval(1.0, 1.0)
    >>> x.size()
    1
    >>> y = FloatInterval(1.0, 2.0).shrink_left(1)
    >>> float(y.lower) == float.fromhex("0x1.0000000000001p+0")
    True
    """

    __slots__ = ()
    endtype = np.float64
    width = FloatWidth()

    def diam(self) -> np.float64:
        """Return an upper bound of the diameter.

        The diameter of the empty interval is ``0.0``.

        Warning
        -------
        ``x.diam()`` might not be finite even if `x` is bounded.

        Examples
        --------
        >>> FloatInterval(-1e308, 1e308).diam()
        np.float64(inf)
        """
        if self.isempty():
            return np.float64(0.0)

        diff = self.width.toexact(self.upper) - self.width.toexact(self.lower)
        result = float(self.upper) - float(self.lower)

        if math.isfinite(result) and fractions.Fraction(result) < diff:
            result = math.nextafter(result, math.inf)

        return np.float64(result)

    def mid(self) -> np.float64:
        """Return an approximation of the midpoint.

        ``x.mid() in x`` is guaranteed to be ``True`` for any non-empty `x`.
        """
        toexact = self.width.toexact
        exact = (toexact(self.lower) + toexact(self.upper)) / 2
        result = np.float64(float(exact))
        return min(max(result, self.lower), self.upper)
