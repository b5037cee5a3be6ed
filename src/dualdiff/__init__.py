"""
########################################################
Forward-mode automatic differentiation (:mod:`dualdiff`)
########################################################

.. currentmodule:: dualdiff

This package provides forward-mode automatic differentiation of functions of one real
variable, based on dual numbers.

Differential operators
----------------------

.. autosummary::
    :toctree: generated/

    differentiate
    lower
    value_and_deriv

Dual numbers
------------

.. autosummary::
    :toctree: generated/

    DualNumber
    lift
    promote
    variable

Examples
--------
>>> from dualdiff import function as ddf
>>> f = lambda x: x * ddf.sin(x)
>>> print(format(differentiate(f)(1.0), ".6f"))
1.381773
"""

from .autodiff import differentiate, lower, value_and_deriv
from .dual import DualNumber, promote, variable
from .lifting import lift

__all__ = [
    "differentiate",
    "lower",
    "value_and_deriv",
    "DualNumber",
    "lift",
    "promote",
    "variable",
]
