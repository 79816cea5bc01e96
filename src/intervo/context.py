"""
################################
Context (:mod:`intervo.context`)
################################

.. currentmodule:: intervo.context

This module provides the overflow policy used by steps and arithmetic on bounds.

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

import contextlib
import contextvars
from typing import Literal, Self


class Context:
    """Create a new context.

    Parameters
    ----------
    overflow : Literal["RAISE", "SATURATE"], default="RAISE"
        Overflow policy. If `overflow` is ``"RAISE"``, a step or an arithmetic result
        leaving the limits of the bound type raises
        :class:`intervo.width.OutOfRangeError`. If it is ``"SATURATE"``, the value is
        clamped to the nearest limit instead.
    """

    __slots__ = ("_overflow",)
    _overflow: Literal["RAISE", "SATURATE"]

    def __init__(self, overflow: Literal["RAISE", "SATURATE"] = "RAISE"):
        if overflow not in ("RAISE", "SATURATE"):
            raise ValueError(f"unknown overflow policy: {overflow!r}")

        self._overflow = overflow

    @property
    def overflow(self) -> Literal["RAISE", "SATURATE"]:
        return self._overflow

    def copy(self) -> Self:
        return self.__class__(self._overflow)

    def __repr__(self):
        return f"{type(self).__name__}(overflow={self._overflow!r})"

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("intervo")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    if not isinstance(ctx, Context):
        raise TypeError

    _var.set(ctx)


@contextlib.contextmanager
def localcontext(
    ctx: Context | None = None,
    *,
    overflow: Literal["RAISE", "SATURATE"] | None = None,
):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Examples
    --------
    >>> from intervo import UInt8Interval
    >>> with localcontext(overflow="SATURATE"):
    ...     UInt8Interval(250, 255) + 10
    UInt8Interval(255, 255)
    """
    if ctx is None:
        ctx = getcontext()

    if overflow is None:
        overflow = ctx.overflow

    ctx = Context(overflow)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)
