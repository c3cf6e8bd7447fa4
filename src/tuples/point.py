"""Positions in homogeneous coordinates.

A Point carries w = 1. Mixing with Vector follows affine rules:

    Point + Vector -> Point     (translate)
    Point - Vector -> Point     (translate backwards)
    Point - Point  -> Vector    (w: 1 - 1 = 0, the type changes)

Scaling and division touch x, y, z only; w stays 1.
Magnitude, normalize, dot and cross are meaningless for a position and are
not defined here.
"""

from dataclasses import dataclass, field
from numbers import Real
from typing import Iterator, Sequence, Tuple, Union

import numpy as np

from ..utils.float_cmp import ieee_div, tuples_equal
from .vector import Axis, Vector


@dataclass(frozen=True, eq=False)
class Point:
    """A position in 3D space (homogeneous w fixed at 1)."""
    x: float
    y: float
    z: float
    w: float = field(default=1.0, init=False)

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))
        object.__setattr__(self, 'z', float(self.z))

    @classmethod
    def from_array(cls, vals: Sequence[float]) -> 'Point':
        if len(vals) != 3:
            raise ValueError(f"Point.from_array expects 3 values, got {len(vals)}")
        return cls(vals[0], vals[1], vals[2])

    def components(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def as_array(self) -> np.ndarray:
        return np.array(self.components(), dtype=np.float64)

    def __getitem__(self, axis: Axis) -> float:
        if not isinstance(axis, Axis):
            raise TypeError(f"Point index must be an Axis, got {type(axis).__name__}")
        return self.components()[axis.value]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def add(self, v: Vector) -> 'Point':
        """Translate by a direction."""
        if not isinstance(v, Vector):
            raise TypeError(f"Point.add expects a Vector, got {type(v).__name__}")
        return Point(self.x + v.x, self.y + v.y, self.z + v.z)

    def sub(self, other: Union['Point', Vector]) -> Union[Vector, 'Point']:
        """Subtract a Point (-> Vector) or a Vector (-> Point).

        Parameters
        ----------
        other : Point or Vector
            Position to measure from, or direction to move back along

        Returns
        -------
        Vector or Point
            Displacement from ``other`` to self when ``other`` is a Point,
            otherwise the translated Point

        Raises
        ------
        TypeError
            If ``other`` is neither a Point nor a Vector
        """
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        raise TypeError(f"Point.sub expects a Point or Vector, got {type(other).__name__}")

    def scale(self, scalar: float) -> 'Point':
        """Scale x, y, z; w keeps its value."""
        return Point(self.x * scalar, self.y * scalar, self.z * scalar)

    def div(self, scalar: float) -> 'Point':
        """Divide x, y, z with IEEE semantics; w keeps its value."""
        return Point(
            ieee_div(self.x, scalar),
            ieee_div(self.y, scalar),
            ieee_div(self.z, scalar),
        )

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return tuples_equal(self.components(), other.components())

    def __add__(self, other):
        if isinstance(other, Vector):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, (Point, Vector)):
            return self.sub(other)
        return NotImplemented

    def __mul__(self, scalar):
        if isinstance(scalar, Real):
            return self.scale(scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, Real):
            return self.div(scalar)
        return NotImplemented
