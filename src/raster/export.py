"""Pixel-buffer → RGB8 bytes → PNG stream.

Provides:
    - ChannelEncoding: float channel → uint8 policy ("truncate" | "scaled")
    - encode_channels: (H, W, 3) float buffer → (H, W, 3) uint8 array
    - write_png / encode_png: RGB8 bytes → PNG via Pillow
    - ExportError hierarchy distinguishing header and data failures

Encoder contract:
    input  = (width, height, RGB8 bytes of length width*height*3, row-major,
              y outer, no alpha)
    output = PNG byte stream, or ImageHeaderError / ImageDataError

Channel encodings:
    truncate: raw value truncated toward zero, saturated to [0, 255],
              nan → 0. Channels are taken as byte values directly, so a
              [0, 1] color mostly lands on byte 0 or 1.
    scaled:   clamp to [0, 1], × 255, round half to even, nan → 0.

PNG cannot describe a zero-width or zero-height image. Such a request fails
at the header stage with ImageHeaderError instead of reaching the codec.
"""

import io
import logging
from enum import Enum
from typing import BinaryIO, Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


# ============================================================================
# ERRORS
# ============================================================================

class ExportError(RuntimeError):
    """Raised when the canvas cannot be encoded or written."""

    stage = "export"
    context = "failed to export image"

    def __init__(self, detail: str = ""):
        self.detail = detail
        msg = f"{self.context}: {detail}" if detail else self.context
        super().__init__(msg)


class ImageHeaderError(ExportError):
    """Image dimensions rejected before any pixel data is written."""

    stage = "header"
    context = "failed to write image header"


class ImageDataError(ExportError):
    """Pixel data could not be encoded or written to the sink."""

    stage = "data"
    context = "failed to write image data"


# ============================================================================
# CHANNEL ENCODING
# ============================================================================

class ChannelEncoding(str, Enum):
    TRUNCATE = "truncate"
    SCALED = "scaled"


def encode_channels(
    buffer: np.ndarray,
    encoding: Union[str, ChannelEncoding] = ChannelEncoding.TRUNCATE
) -> np.ndarray:
    """Convert float channels to uint8.

    Parameters
    ----------
    buffer : np.ndarray
        Float pixel buffer, shape (H, W, 3), any range
    encoding : str or ChannelEncoding
        "truncate" (default) or "scaled"

    Returns
    -------
    np.ndarray
        uint8 array, same shape

    Raises
    ------
    ValueError
        If ``encoding`` is not a known policy

    Examples
    --------
    >>> encode_channels(np.array([[[300.0, -4.0, 1.9]]])).tolist()
    [[[255, 0, 1]]]
    >>> encode_channels(np.array([[[1.0, 0.5, 2.0]]]), "scaled").tolist()
    [[[255, 128, 255]]]
    """
    encoding = ChannelEncoding(encoding)
    vals = np.asarray(buffer, dtype=np.float64)

    if encoding is ChannelEncoding.TRUNCATE:
        vals = np.nan_to_num(vals, nan=0.0, posinf=255.0, neginf=0.0)
        vals = np.clip(np.trunc(vals), 0.0, 255.0)
    else:
        vals = np.nan_to_num(vals, nan=0.0, posinf=1.0, neginf=0.0)
        vals = np.rint(np.clip(vals, 0.0, 1.0) * 255.0)

    return vals.astype(np.uint8)


# ============================================================================
# PNG ENCODING
# ============================================================================

def encode_png(width: int, height: int, data: bytes) -> bytes:
    """Encode RGB8 bytes as a complete in-memory PNG byte string.

    Parameters
    ----------
    width, height : int
        Image dimensions in pixels
    data : bytes
        Exactly width*height*3 bytes, row-major RGB

    Raises
    ------
    ImageHeaderError
        If the dimensions cannot describe a PNG image (zero area)
    ImageDataError
        If ``data`` has the wrong length or the codec rejects it
    """
    if width <= 0 or height <= 0:
        raise ImageHeaderError(f"zero-area image {width}x{height}")

    try:
        image = Image.new("RGB", (width, height))
    except (ValueError, MemoryError) as e:
        raise ImageHeaderError(f"{width}x{height}: {e}") from e

    expected = width * height * 3
    if len(data) != expected:
        raise ImageDataError(
            f"expected {expected} bytes for {width}x{height} RGB8, got {len(data)}"
        )

    buf = io.BytesIO()
    try:
        image.frombytes(bytes(data))
        image.save(buf, format="PNG")
    except (ValueError, OSError) as e:
        raise ImageDataError(str(e)) from e

    logger.debug(f"Encoded {width}x{height} PNG ({expected} pixel bytes)")
    return buf.getvalue()


def write_png(sink: BinaryIO, width: int, height: int, data: bytes) -> None:
    """Encode fully in memory, then hand ``sink`` the stream in one write.

    Nothing reaches ``sink`` unless encoding succeeded. A failing sink
    raises ImageDataError chained to its OSError.
    """
    png = encode_png(width, height, data)
    try:
        sink.write(png)
    except OSError as e:
        raise ImageDataError(f"sink write failed: {e}") from e
