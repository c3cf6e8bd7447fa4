"""Test the shared floating-point equality policy.

Tests for src.utils.float_cmp:
    - EPSILON is half of the float64 machine epsilon
    - float_equal tolerates accumulated rounding noise
    - float_equal rejects differences >= EPSILON
    - Infinities equal themselves, nan never equals anything
    - ieee_div returns inf/nan instead of raising

Run:
    pytest tests/test_float_cmp.py -v
"""

import math
import sys

from src.utils.float_cmp import EPSILON, float_equal, ieee_div, tuples_equal


def test_epsilon_is_half_machine_epsilon():
    assert EPSILON == sys.float_info.epsilon / 2


def test_float_equal_absorbs_rounding_noise():
    assert float_equal(1.0 - 0.9, 0.1)
    assert float_equal(0.1 + 0.2 - 0.3, 0.0)


def test_float_equal_rejects_larger_differences():
    assert not float_equal(1.0, 1.0 + 1e-12)
    assert not float_equal(0.0, EPSILON)


def test_float_equal_special_values():
    assert float_equal(math.inf, math.inf)
    assert not float_equal(math.inf, -math.inf)
    assert not float_equal(math.nan, math.nan)


def test_tuples_equal_length_mismatch():
    assert tuples_equal((1.0, 2.0), (1.0, 2.0))
    assert not tuples_equal((1.0, 2.0), (1.0, 2.0, 3.0))


def test_ieee_div():
    assert ieee_div(6.0, 3.0) == 2.0
    assert ieee_div(1.0, 0.0) == math.inf
    assert ieee_div(-1.0, 0.0) == -math.inf
    assert ieee_div(1.0, -0.0) == -math.inf
    assert math.isnan(ieee_div(0.0, 0.0))
