"""
###############################
Typing (:mod:`dualdiff.typing`)
###############################

This module provides type definitions commonly used between modules.

.. autodata:: Real
.. autodata:: RealFunction
.. autodata:: DualFunction

"""

from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from dualdiff.dual import DualNumber

type Real = float | int | np.floating
"""Real numbers accepted as primal and tangent components."""

type RealFunction = Callable[[Real], Real]
"""Ordinary function of one real variable."""

type DualFunction = Callable[[DualNumber], DualNumber]
"""Function from dual numbers to dual numbers.

Such a function must never inspect or branch on the tangent of its argument; it may
only pass it through the arithmetic of :mod:`dualdiff.dual` and lifted functions.
"""
