"""Direction vectors in homogeneous coordinates.

Provides:
    - Vector: immutable (x, y, z, w=0) direction
    - Axis: named component index (X, Y, Z)
    - dot, cross: free-function forms of the vector products

Invariants:
    - w is exactly 0.0 after every operation; scalars never touch w
    - magnitude() runs over the stored 4-tuple (x, y, z, w), not a
      3-component special case
    - Division by zero propagates IEEE-754 inf/nan, it never raises
    - Equality is component-wise within EPSILON (see utils.float_cmp)

Usage:
    from src.tuples import Vector, Axis, cross

    v = Vector(1.0, 2.0, 3.0).normalize()
    up = cross(Vector(1, 0, 0), Vector(0, 1, 0))   # Vector(0, 0, 1)
    v[Axis.Y]
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Iterator, Sequence, Tuple

import numpy as np

from ..utils.float_cmp import ieee_div, tuples_equal


class Axis(Enum):
    """Named spatial component, used for read-only indexing."""
    X = 0
    Y = 1
    Z = 2


@dataclass(frozen=True, eq=False)
class Vector:
    """A direction in 3D space (homogeneous w fixed at 0).

    Parameters
    ----------
    x, y, z : float
        Components; coerced to float
    """
    x: float
    y: float
    z: float
    w: float = field(default=0.0, init=False)

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))
        object.__setattr__(self, 'z', float(self.z))

    @classmethod
    def from_array(cls, vals: Sequence[float]) -> 'Vector':
        """Build from a length-3 sequence (list, tuple or numpy array).

        Raises
        ------
        ValueError
            If ``vals`` does not hold exactly three values
        """
        if len(vals) != 3:
            raise ValueError(f"Vector.from_array expects 3 values, got {len(vals)}")
        return cls(vals[0], vals[1], vals[2])

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def components(self) -> Tuple[float, float, float, float]:
        """Stored homogeneous 4-tuple (x, y, z, w)."""
        return (self.x, self.y, self.z, self.w)

    def as_array(self) -> np.ndarray:
        """Homogeneous 4-vector as a fresh float64 array."""
        return np.array(self.components(), dtype=np.float64)

    def __getitem__(self, axis: Axis) -> float:
        if not isinstance(axis, Axis):
            raise TypeError(f"Vector index must be an Axis, got {type(axis).__name__}")
        return self.components()[axis.value]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def add(self, other: 'Vector') -> 'Vector':
        """Component-wise sum; w stays 0 (0 + 0)."""
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: 'Vector') -> 'Vector':
        """Component-wise difference; w stays 0 (0 - 0)."""
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, scalar: float) -> 'Vector':
        """Multiply x, y, z by ``scalar``. w is not scaled."""
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def div(self, scalar: float) -> 'Vector':
        """Divide x, y, z by ``scalar``.

        Parameters
        ----------
        scalar : float
            Divisor; zero is allowed

        Returns
        -------
        Vector
            Quotient; a zero divisor yields ±inf (or nan for 0/0) components
        """
        return Vector(
            ieee_div(self.x, scalar),
            ieee_div(self.y, scalar),
            ieee_div(self.z, scalar),
        )

    def negate(self) -> 'Vector':
        return Vector(-self.x, -self.y, -self.z)

    def magnitude(self) -> float:
        """Euclidean norm over the stored (x, y, z, w) tuple."""
        total = 0.0
        for c in self.components():
            total += c * c
        return math.sqrt(total)

    def normalize(self) -> 'Vector':
        """Unit vector in the same direction.

        Notes
        -----
        A zero vector has magnitude 0 and normalizes to nan components.
        This is not guarded; callers that can produce zero vectors must
        check first.
        """
        return self.div(self.magnitude())

    def dot(self, other: 'Vector') -> float:
        return dot(self, other)

    def cross(self, other: 'Vector') -> 'Vector':
        return cross(self, other)

    # ------------------------------------------------------------------
    # Operators (thin aliases of the named methods)
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return tuples_equal(self.components(), other.components())

    def __add__(self, other):
        if isinstance(other, Vector):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
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

    def __neg__(self):
        return self.negate()


def dot(a: Vector, b: Vector) -> float:
    """Dot product over x, y, z.

    Examples
    --------
    >>> dot(Vector(1, 2, 3), Vector(2, 3, 4))
    20.0
    """
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector, b: Vector) -> Vector:
    """Cross product; perpendicular to both inputs.

    Not commutative: ``cross(a, b) == -cross(b, a)``.

    Examples
    --------
    >>> cross(Vector(1, 2, 3), Vector(2, 3, 4))
    Vector(x=-1.0, y=2.0, z=-1.0, w=0.0)
    """
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )
