"""RGB colors for the canvas pipeline.

Channels are unbounded floats: values outside [0, 1] are legal intermediate
results (bright highlights, subtractive mixes). Clamping happens only when
the canvas is encoded to bytes (see raster.export).

Equality is component-wise within EPSILON so that 0.9 + 0.1 == 1.0.
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Iterator, Tuple, Union

from ..utils.float_cmp import tuples_equal


class Channel(Enum):
    """Named color channel, used for read-only indexing."""
    R = 0
    G = 1
    B = 2


@dataclass(frozen=True, eq=False)
class Color:
    r: float
    g: float
    b: float

    def __post_init__(self):
        object.__setattr__(self, 'r', float(self.r))
        object.__setattr__(self, 'g', float(self.g))
        object.__setattr__(self, 'b', float(self.b))

    @classmethod
    def default(cls) -> 'Color':
        """Black, the value every canvas cell starts with."""
        return cls(0.0, 0.0, 0.0)

    def channels(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def __getitem__(self, channel: Channel) -> float:
        if not isinstance(channel, Channel):
            raise TypeError(f"Color index must be a Channel, got {type(channel).__name__}")
        return self.channels()[channel.value]

    def __iter__(self) -> Iterator[float]:
        return iter(self.channels())

    def add(self, other: 'Color') -> 'Color':
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def sub(self, other: 'Color') -> 'Color':
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def mul(self, other: Union['Color', float]) -> 'Color':
        """Hadamard product with a Color, or per-channel scaling by a number.

        Parameters
        ----------
        other : Color or float
            Filter color (component-wise product, not a dot product) or
            scalar gain

        Returns
        -------
        Color
            Attenuated / scaled color

        Raises
        ------
        TypeError
            If ``other`` is neither a Color nor a real number
        """
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        raise TypeError(f"Color.mul expects a Color or number, got {type(other).__name__}")

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return tuples_equal(self.channels(), other.channels())

    def __add__(self, other):
        if isinstance(other, Color):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Color):
            return self.sub(other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, (Color, Real)):
            return self.mul(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self.mul(other)
        return NotImplemented


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
