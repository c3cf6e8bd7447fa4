"""Floating-point equality policy shared by every numeric type.

Provides:
    - EPSILON: half of the float64 machine epsilon
    - float_equal: scalar approximate equality
    - tuples_equal: component-wise approximate equality for fixed-size tuples
    - ieee_div: float division with IEEE-754 inf/nan results instead of
      ZeroDivisionError

Used by:
    - Vector / Point / Color __eq__
    - Tests: all assertions on algebra results

Invariants:
    - One tolerance for the whole system; callers never pass their own
    - Identical values (including matching infinities) always compare equal
    - nan never compares equal, not even to itself
"""

import sys
from typing import Sequence

import numpy as np

EPSILON: float = sys.float_info.epsilon / 2.0


def float_equal(a: float, b: float) -> bool:
    """Return True if ``a`` and ``b`` differ by less than EPSILON.

    Parameters
    ----------
    a, b : float
        Values to compare

    Returns
    -------
    bool
        True when the values are identical or within EPSILON of each other

    Notes
    -----
    The exact-match short circuit lets ``inf == inf`` hold; ``inf - inf``
    is nan and would otherwise fail the tolerance test.
    """
    return a == b or abs(a - b) < EPSILON


def tuples_equal(a: Sequence[float], b: Sequence[float]) -> bool:
    """Component-wise ``float_equal`` over two sequences of equal length."""
    if len(a) != len(b):
        return False
    return all(float_equal(x, y) for x, y in zip(a, b))


def ieee_div(a: float, b: float) -> float:
    """Divide with IEEE-754 semantics.

    Parameters
    ----------
    a : float
        Dividend
    b : float
        Divisor, may be zero

    Returns
    -------
    float
        ``a / b``; ±inf for a non-zero dividend over zero, nan for ``0 / 0``

    Notes
    -----
    Python floats raise ZeroDivisionError; numpy float64 follows the
    hardware rules, so the division runs there with the warnings muted.
    """
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return float(np.float64(a) / np.float64(b))
