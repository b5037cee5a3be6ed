import functools
from collections.abc import Callable

from dualdiff.context import getcontext
from dualdiff.dual import DualNumber
from dualdiff.typing import Real, RealFunction


def lift(
    fun: RealFunction, deriv: RealFunction
) -> Callable[[DualNumber | Real], DualNumber | Real]:
    """Lift the real function to dual numbers.

    Parameters
    ----------
    fun : Callable
        Real function of one variable.
    deriv : Callable
        Derivative of `fun`.

    Returns
    -------
    Callable
        Function that maps ``DualNumber(a, b)`` to ``DualNumber(fun(a), b * deriv(a))``.
        Arguments that are not dual numbers are passed to `fun` as they are.

    Warnings
    --------
    `deriv` must be the exact derivative of `fun`. This is not verified, and a wrong
    pair silently yields wrong derivatives wherever the lifted function is used.

    Examples
    --------
    >>> square = lift(lambda x: x * x, lambda x: 2 * x)
    >>> print(square(DualNumber(3.0, 1.0)))
    DualNumber(primal=9.0, tangent=6.0)
    >>> square(3.0)
    9.0
    """

    @functools.wraps(fun)
    def wrapper(x: DualNumber | Real) -> DualNumber | Real:
        with getcontext().errstate():
            if not isinstance(x, DualNumber):
                return fun(x)

            return DualNumber(fun(x.primal), x.tangent * deriv(x.primal))

    return wrapper
