"""
#################################
Context (:mod:`dualdiff.context`)
#################################

.. currentmodule:: dualdiff.context

This module provides the floating-point context used by dual arithmetic.

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

import contextlib
import contextvars
from typing import Final, Literal, Self

import numpy as np

type FPErrorPolicy = Literal["ignore", "warn", "raise"]

_POLICIES: Final = ("ignore", "warn", "raise")


class Context:
    """Create a new context.

    Division by zero, overflow, and invalid operations do not raise during dual
    arithmetic; they produce ``inf`` or ``nan`` exactly as IEEE 754 arithmetic does.
    The context decides whether numpy reports these events.

    Parameters
    ----------
    fperror : Literal["ignore", "warn", "raise"], default="ignore"
        Floating-point error policy passed to :func:`numpy.errstate`. If `fperror` is
        ``"warn"``, a :class:`RuntimeWarning` is issued. If `fperror` is ``"raise"``,
        :class:`FloatingPointError` is raised where a non-finite value first appears.

    Raises
    ------
    ValueError
        If `fperror` is not a known policy.
    """

    __slots__ = ("_fperror",)
    _fperror: FPErrorPolicy

    def __init__(self, fperror: FPErrorPolicy = "ignore"):
        if fperror not in _POLICIES:
            raise ValueError(f"unknown floating-point error policy: {fperror!r}")

        self._fperror = fperror

    @property
    def fperror(self) -> FPErrorPolicy:
        return self._fperror

    def copy(self) -> Self:
        return self.__class__(self._fperror)

    def errstate(self) -> np.errstate:
        """Return a numpy error-state context manager following `fperror`.

        Underflow is always ignored since it yields a finite value.
        """
        return np.errstate(all=self._fperror, under="ignore")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fperror={self._fperror!r})"

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("dualdiff")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    _var.set(ctx)


@contextlib.contextmanager
def localcontext(ctx: Context | None = None, *, fperror: FPErrorPolicy | None = None):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Examples
    --------
    >>> with localcontext(fperror="raise") as ctx:
    ...     ctx.fperror
    'raise'
    >>> getcontext().fperror
    'ignore'
    """
    if ctx is None:
        ctx = getcontext()

    if fperror is None:
        fperror = ctx.fperror

    ctx = Context(fperror)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)
