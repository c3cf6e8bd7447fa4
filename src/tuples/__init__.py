"""Homogeneous tuple algebra: vectors, points and colors.

Immutable value types shared by every later rendering stage:
    - Vector (w=0): directions, with magnitude / normalize / dot / cross
    - Point (w=1): positions; Point - Point yields a Vector
    - Color: RGB with Hadamard product for filtering

All equality goes through utils.float_cmp (EPSILON = half machine epsilon).
"""

from .color import BLACK, WHITE, Channel, Color
from .point import Point
from .vector import Axis, Vector, cross, dot

__all__ = [
    'Axis',
    'BLACK',
    'Channel',
    'Color',
    'Point',
    'Vector',
    'WHITE',
    'cross',
    'dot',
]
