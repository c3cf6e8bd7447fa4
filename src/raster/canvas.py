"""Fixed-size pixel grid of Colors with PNG export.

Lifecycle:
    EMPTY      constructed, every cell black
    POPULATED  at least one write_color() call
    EXPORTED   encode_png() / export() succeeded; further writes are refused

Addressing:
    GridCoord(x, y), 0-indexed, x < width, y < height. Storage is a numpy
    float64 array of shape (height, width, 3) so rows are contiguous and
    to_image_data() is a single reshape (y outer, x inner).

Contracts:
    - cell_at() outside the grid returns None; it is a query, not an error
    - write_color() outside the grid raises OutOfBoundsWrite. That is a
      programming error in the caller and is not meant to be caught
    - Channel values are stored unclamped; clamping/truncation is decided by
      the ChannelEncoding at export time

Usage:
    from src.raster import Canvas, GridCoord
    from src.tuples import Color

    canvas = Canvas(10, 20)
    canvas.write_color(GridCoord(0, 0), Color(1.0, 1.0, 1.0))
    with open("out.png", "wb") as f:
        canvas.export(f, encoding="scaled")
"""

import logging
from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Tuple, Union

import numpy as np

from ..tuples.color import Color
from ..utils import fs
from . import export as export_utils
from .export import ChannelEncoding

logger = logging.getLogger(__name__)

CoordLike = Union['GridCoord', Tuple[int, int]]


# ============================================================================
# ERRORS
# ============================================================================

class OutOfBoundsWrite(IndexError):
    """write_color() was called with a coordinate outside the canvas."""
    pass


class CanvasExportedError(RuntimeError):
    """The canvas was consumed by export and no longer accepts writes."""
    pass


# ============================================================================
# TYPES
# ============================================================================

@dataclass(frozen=True)
class GridCoord:
    """Canvas cell address. Equality and hashing by value."""
    x: int
    y: int

    def __post_init__(self):
        for name in ('x', 'y'):
            val = getattr(self, name)
            if isinstance(val, bool) or not isinstance(val, Integral):
                raise ValueError(f"GridCoord.{name} must be an integer, got {val!r}")
            if val < 0:
                raise ValueError(f"GridCoord.{name} must be non-negative, got {val}")
            object.__setattr__(self, name, int(val))

    @classmethod
    def of(cls, coord: CoordLike) -> 'GridCoord':
        """Accept a GridCoord or an (x, y) pair."""
        if isinstance(coord, GridCoord):
            return coord
        x, y = coord
        return cls(x, y)

    def __str__(self):
        return f"({self.x} {self.y})"


class CanvasState(Enum):
    EMPTY = "empty"
    POPULATED = "populated"
    EXPORTED = "exported"


# ============================================================================
# CANVAS
# ============================================================================

class Canvas:
    """width × height grid of Colors, initialised to black.

    Parameters
    ----------
    width, height : int
        Grid size in pixels; 0 is legal and yields an empty buffer

    Raises
    ------
    ValueError
        If either dimension is negative or not an integer
    """

    def __init__(self, width: int, height: int):
        for name, val in (('width', width), ('height', height)):
            if isinstance(val, bool) or not isinstance(val, Integral):
                raise ValueError(f"Canvas {name} must be an integer, got {val!r}")
            if val < 0:
                raise ValueError(f"Canvas {name} must be non-negative, got {val}")

        self.width = int(width)
        self.height = int(height)
        self._pixels = np.zeros((self.height, self.width, 3), dtype=np.float64)
        self._state = CanvasState.EMPTY

        logger.debug(f"Canvas created: {self.width}x{self.height}")

    def __repr__(self):
        return f"Canvas(width={self.width}, height={self.height}, state={self._state.value})"

    @property
    def state(self) -> CanvasState:
        return self._state

    def in_bounds(self, coord: CoordLike) -> bool:
        coord = GridCoord.of(coord)
        return coord.x < self.width and coord.y < self.height

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def cell_at(self, coord: CoordLike) -> Optional[Color]:
        """Current color at ``coord``, or None when outside the grid."""
        coord = GridCoord.of(coord)
        if not self.in_bounds(coord):
            return None
        r, g, b = self._pixels[coord.y, coord.x]
        return Color(r, g, b)

    def write_color(self, coord: CoordLike, color: Color) -> None:
        """Overwrite the cell at ``coord``.

        Parameters
        ----------
        coord : GridCoord or (int, int)
            Target cell; must be inside the grid
        color : Color
            New value, stored unclamped

        Raises
        ------
        OutOfBoundsWrite
            If ``coord`` lies outside the grid (caller bug)
        CanvasExportedError
            If the canvas has already been exported
        TypeError
            If ``color`` is not a Color
        """
        coord = GridCoord.of(coord)
        if self._state is CanvasState.EXPORTED:
            raise CanvasExportedError(f"cannot write {coord} on an exported canvas")
        if not isinstance(color, Color):
            raise TypeError(f"write_color expects a Color, got {type(color).__name__}")
        if not self.in_bounds(coord):
            raise OutOfBoundsWrite(
                f"write at {coord} outside {self.width}x{self.height} canvas"
            )

        self._pixels[coord.y, coord.x] = color.channels()
        if self._state is CanvasState.EMPTY:
            self._state = CanvasState.POPULATED
            logger.debug("Canvas populated")

    def pixels(self) -> Iterator[Tuple[GridCoord, Color]]:
        """Yield (coord, color) in row-major order, y outer."""
        for y in range(self.height):
            for x in range(self.width):
                r, g, b = self._pixels[y, x]
                yield GridCoord(x, y), Color(r, g, b)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_image_data(
        self,
        encoding: Union[str, ChannelEncoding] = ChannelEncoding.TRUNCATE
    ) -> bytes:
        """Flat RGB8 bytes, 3 per pixel, row-major (y outer, x inner).

        Does not change the canvas state; only a PNG export consumes it.
        """
        return export_utils.encode_channels(self._pixels, encoding).tobytes()

    def encode_png(
        self,
        encoding: Union[str, ChannelEncoding] = ChannelEncoding.TRUNCATE
    ) -> bytes:
        """Encode the canvas as PNG bytes and mark it exported."""
        png = export_utils.encode_png(self.width, self.height, self.to_image_data(encoding))
        self._mark_exported()
        return png

    def export(
        self,
        sink: BinaryIO,
        encoding: Union[str, ChannelEncoding] = ChannelEncoding.TRUNCATE
    ) -> None:
        """Write the canvas as a PNG stream to ``sink``.

        Parameters
        ----------
        sink : BinaryIO
            Writable binary stream supplied by the caller
        encoding : str or ChannelEncoding
            Float → uint8 policy, default "truncate"

        Raises
        ------
        ImageHeaderError
            Zero-area canvas (PNG has no representation for it)
        ImageDataError
            Encoding or sink write failed

        Notes
        -----
        Repeated exports are allowed and produce identical streams; writes
        after the first successful export are not.
        """
        export_utils.write_png(sink, self.width, self.height, self.to_image_data(encoding))
        self._mark_exported()

    def save(
        self,
        path: Union[str, Path],
        encoding: Union[str, ChannelEncoding] = ChannelEncoding.TRUNCATE
    ) -> Path:
        """Encode to PNG and write ``path`` atomically; returns the path.

        The canvas only becomes EXPORTED once the file is in place.

        Raises
        ------
        ExportError
            If encoding fails (nothing is written)
        RuntimeError
            If the file cannot be written
        """
        path = Path(path)
        png = export_utils.encode_png(self.width, self.height, self.to_image_data(encoding))
        fs.atomic_write_bytes(path, png)
        self._mark_exported()
        logger.info(f"Canvas saved: {path}")
        return path

    def _mark_exported(self) -> None:
        if self._state is not CanvasState.EXPORTED:
            logger.info(f"Canvas exported: {self.width}x{self.height}")
        self._state = CanvasState.EXPORTED
