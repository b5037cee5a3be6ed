r"""
###################################
Dual numbers (:mod:`dualdiff.dual`)
###################################

.. currentmodule:: dualdiff.dual

This module provides dual numbers and their arithmetic.

A dual number :math:`a+b\varepsilon` with :math:`\varepsilon^2=0` is a truncated
first-order Taylor expansion. Evaluating a function on :math:`x+\varepsilon` gives
:math:`f(x)+f'(x)\varepsilon`, which is the basis of forward-mode automatic
differentiation.

Examples
--------
>>> x = variable(2.0)
>>> print(3 * x**2 + 2 * x - 1)
DualNumber(primal=15.0, tangent=14.0)

Dual number
===========

.. autosummary::
    :toctree: generated/

    DualNumber
    promote
    variable

Arithmetic
==========

.. autosummary::
    :toctree: generated/

    add
    divide
    invert
    multiply
    negate
    power
    subtract

"""

import dataclasses
from collections.abc import Iterator
from typing import Self

import numpy as np

from dualdiff.context import getcontext
from dualdiff.typing import Real


@dataclasses.dataclass(frozen=True, slots=True)
class DualNumber:
    """Dual number, that is, a real value paired with its derivative.

    Parameters
    ----------
    primal : Real
    tangent : Real

    Attributes
    ----------
    primal : Real
        Value of the underlying real quantity.
    tangent : Real
        Coefficient of the infinitesimal part, i.e., the derivative with respect to
        the tracked variable.

    Notes
    -----
    Instances are immutable. Arithmetic operators accept plain reals on either side,
    which are promoted by :func:`promote` first.
    """

    __array_ufunc__ = None
    primal: Real
    tangent: Real

    def __str__(self) -> str:
        return f"{type(self).__name__}(primal={self.primal}, tangent={self.tangent})"

    def __iter__(self) -> Iterator[Real]:
        yield self.primal
        yield self.tangent

    def __add__(self, rhs: Self | Real) -> Self:
        if not _is_acceptable(rhs):
            return NotImplemented

        return add(self, _coerce(rhs))

    def __sub__(self, rhs: Self | Real) -> Self:
        if not _is_acceptable(rhs):
            return NotImplemented

        return subtract(self, _coerce(rhs))

    def __mul__(self, rhs: Self | Real) -> Self:
        if not _is_acceptable(rhs):
            return NotImplemented

        return multiply(self, _coerce(rhs))

    def __truediv__(self, rhs: Self | Real) -> Self:
        if not _is_acceptable(rhs):
            return NotImplemented

        return divide(self, _coerce(rhs))

    def __pow__(self, rhs: int) -> Self:
        if isinstance(rhs, DualNumber) or not _is_acceptable(rhs):
            return NotImplemented

        return power(self, rhs)

    def __neg__(self) -> Self:
        return negate(self)

    def __pos__(self) -> Self:
        return self

    def __radd__(self, lhs: Real) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        return add(_coerce(lhs), self)

    def __rsub__(self, lhs: Real) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        return subtract(_coerce(lhs), self)

    def __rmul__(self, lhs: Real) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        return multiply(_coerce(lhs), self)

    def __rtruediv__(self, lhs: Real) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        return divide(_coerce(lhs), self)


def _is_acceptable(value: object) -> bool:
    return isinstance(value, DualNumber | int | float | np.integer | np.floating)


def _coerce(value: DualNumber | Real) -> DualNumber:
    return value if isinstance(value, DualNumber) else promote(value)


def _components(x: DualNumber) -> tuple[np.float64, np.float64]:
    return np.float64(x.primal), np.float64(x.tangent)


def promote(a: Real) -> DualNumber:
    """Embed a constant into the dual numbers.

    The tangent is zero since a constant has zero derivative.

    Examples
    --------
    >>> print(promote(3))
    DualNumber(primal=3, tangent=0)
    """
    return DualNumber(a, 0)


def variable(a: Real) -> DualNumber:
    """Return the independent variable seeded at `a`, i.e., ``DualNumber(a, 1)``."""
    return DualNumber(a, 1)


def add(x: DualNumber, y: DualNumber) -> DualNumber:
    """Return ``x + y``. Tangents are summed.

    Components are evaluated in IEEE 754 double precision, as in all the arithmetic of
    this module, so overflow gives ``inf`` and ``inf - inf`` gives ``nan``.
    """
    with getcontext().errstate():
        a, b = _components(x)
        c, d = _components(y)
        return DualNumber(a + c, b + d)


def negate(x: DualNumber) -> DualNumber:
    """Return ``-x``."""
    return DualNumber(-x.primal, -x.tangent)


def subtract(x: DualNumber, y: DualNumber) -> DualNumber:
    """Return ``x - y``."""
    return add(x, negate(y))


def multiply(x: DualNumber, y: DualNumber) -> DualNumber:
    """Return ``x * y`` following the product rule.

    Examples
    --------
    >>> print(multiply(DualNumber(2, 3), DualNumber(5, 7)))
    DualNumber(primal=10.0, tangent=29.0)
    """
    with getcontext().errstate():
        a, b = _components(x)
        c, d = _components(y)
        return DualNumber(a * c, b * c + a * d)


def power(x: DualNumber, n: int) -> DualNumber:
    """Return `x` raised to the power `n`.

    The tangent is ``n * x.primal**(n - 1) * x.tangent``. Evaluation uses IEEE 754
    double precision, so a zero primal with non-positive `n` gives a non-finite value
    rather than raising.

    Examples
    --------
    >>> print(power(DualNumber(3.0, 1.0), 2))
    DualNumber(primal=9.0, tangent=6.0)
    >>> print(power(DualNumber(0.0, 1.0), -1).primal)
    inf
    """
    with getcontext().errstate():
        a = np.float64(x.primal)
        return DualNumber(np.power(a, n), n * np.power(a, n - 1) * x.tangent)


def invert(x: DualNumber) -> DualNumber:
    """Return the reciprocal of `x`.

    A zero primal gives non-finite components, as ordinary division by zero does in
    IEEE 754 arithmetic.

    Examples
    --------
    >>> print(invert(DualNumber(2.0, 1.0)))
    DualNumber(primal=0.5, tangent=-0.25)
    >>> print(invert(DualNumber(0.0, 1.0)))
    DualNumber(primal=inf, tangent=-inf)
    """
    with getcontext().errstate():
        a = np.float64(x.primal)
        return DualNumber(np.divide(1.0, a), np.divide(-x.tangent, a * a))


def divide(x: DualNumber, y: DualNumber) -> DualNumber:
    """Return ``x / y``."""
    return multiply(x, invert(y))
