"""Raster layer: canvas of Colors and its PNG export path."""

from .canvas import (
    Canvas,
    CanvasExportedError,
    CanvasState,
    GridCoord,
    OutOfBoundsWrite,
)
from .export import (
    ChannelEncoding,
    ExportError,
    ImageDataError,
    ImageHeaderError,
    encode_channels,
    encode_png,
    write_png,
)

__all__ = [
    'Canvas',
    'CanvasExportedError',
    'CanvasState',
    'ChannelEncoding',
    'ExportError',
    'GridCoord',
    'ImageDataError',
    'ImageHeaderError',
    'OutOfBoundsWrite',
    'encode_channels',
    'encode_png',
    'write_png',
]
