"""Test RGB8 channel encoding and PNG export.

Tests for src.raster.export and Canvas.export / Canvas.save:
    - truncate encoding: toward zero, saturating, nan → 0
    - scaled encoding: clamp [0, 1], ×255, round
    - unknown encoding rejected
    - PNG round trip through Pillow preserves size and RGB8 bytes
    - all-black export decodes to zero bytes
    - zero-area canvas fails at the header stage without crashing
    - wrong data length and failing sinks fail at the data stage
    - Canvas.save writes atomically to disk

Run:
    pytest tests/test_export.py -v
"""

import io
import math

import numpy as np
import pytest
from PIL import Image

from src.raster import (
    Canvas,
    ChannelEncoding,
    ExportError,
    ImageDataError,
    ImageHeaderError,
    encode_channels,
    encode_png,
    write_png,
)
from src.tuples import Color


def _decode(png: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(png))
    img.load()
    return img


class _BrokenSink(io.RawIOBase):
    """Binary sink whose writes always fail."""

    def writable(self):
        return True

    def write(self, b):
        raise OSError("disk full")


# ============================================================================
# CHANNEL ENCODING
# ============================================================================

def test_truncate_encoding():
    buf = np.array([[[300.0, -4.0, 1.9], [255.9, 0.99, math.nan]]])
    out = encode_channels(buf, "truncate")
    assert out.dtype == np.uint8
    assert out.tolist() == [[[255, 0, 1], [255, 0, 0]]]


def test_truncate_encoding_infinities():
    buf = np.array([[[math.inf, -math.inf, 2.0]]])
    assert encode_channels(buf).tolist() == [[[255, 0, 2]]]


def test_scaled_encoding():
    buf = np.array([[[1.0, 0.5, 2.0], [0.0, -1.0, math.nan]]])
    out = encode_channels(buf, ChannelEncoding.SCALED)
    assert out.tolist() == [[[255, 128, 255], [0, 0, 0]]]


def test_unknown_encoding():
    with pytest.raises(ValueError):
        encode_channels(np.zeros((1, 1, 3)), "gamma")


# ============================================================================
# PNG ENCODING
# ============================================================================

def test_png_round_trip():
    width, height = 4, 3
    data = bytes(range(width * height * 3))

    img = _decode(encode_png(width, height, data))
    assert img.size == (width, height)
    assert img.mode == "RGB"
    assert img.tobytes() == data


def test_all_black_canvas_export():
    canvas = Canvas(5, 4)
    assert canvas.to_image_data() == bytes(5 * 4 * 3)

    img = _decode(canvas.encode_png())
    assert img.size == (5, 4)
    assert img.tobytes() == bytes(5 * 4 * 3)


def test_canvas_export_to_sink():
    canvas = Canvas(10, 20)
    canvas.write_color((0, 0), Color(1.0, 1.0, 1.0))
    canvas.write_color((9, 19), Color(0.0, 0.5, 1.0))

    sink = io.BytesIO()
    canvas.export(sink, encoding="scaled")

    img = _decode(sink.getvalue())
    assert img.size == (10, 20)
    assert img.getpixel((0, 0)) == (255, 255, 255)
    assert img.getpixel((9, 19)) == (0, 128, 255)
    assert img.getpixel((1, 0)) == (0, 0, 0)


@pytest.mark.parametrize("w, h", [(0, 0), (0, 5), (5, 0)])
def test_zero_area_export_fails_at_header(w, h):
    canvas = Canvas(w, h)
    with pytest.raises(ImageHeaderError, match="failed to write image header") as exc:
        canvas.export(io.BytesIO())
    assert exc.value.stage == "header"
    assert isinstance(exc.value, ExportError)
    assert canvas.state.value == "empty"


def test_wrong_data_length_fails_at_data_stage():
    with pytest.raises(ImageDataError, match="failed to write image data") as exc:
        encode_png(2, 2, bytes(5))
    assert exc.value.stage == "data"


def test_broken_sink_fails_at_data_stage():
    with pytest.raises(ImageDataError) as exc:
        write_png(_BrokenSink(), 2, 2, bytes(12))
    assert isinstance(exc.value.__cause__, OSError)


# ============================================================================
# SAVE TO DISK
# ============================================================================

def test_canvas_save(tmp_path):
    canvas = Canvas(3, 3)
    canvas.write_color((1, 1), Color(1.0, 0.0, 0.0))

    out = canvas.save(tmp_path / "nested" / "canvas.png", encoding="scaled")

    assert out.exists()
    assert not (tmp_path / "nested" / "canvas.png.tmp").exists()
    with Image.open(out) as img:
        assert img.getpixel((1, 1)) == (255, 0, 0)


def test_canvas_save_zero_area_writes_nothing(tmp_path):
    with pytest.raises(ImageHeaderError):
        Canvas(0, 0).save(tmp_path / "empty.png")
    assert not (tmp_path / "empty.png").exists()


def test_canvas_save_failure_keeps_canvas_writable(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    canvas = Canvas(2, 2)
    canvas.write_color((0, 0), Color(1.0, 1.0, 1.0))

    with pytest.raises(RuntimeError, match="Failed to write") as exc:
        canvas.save(blocker / "out.png")
    assert isinstance(exc.value.__cause__, OSError)
    assert canvas.state.value == "populated"

    canvas.write_color((1, 1), Color(1.0, 1.0, 1.0))
    assert canvas.save(tmp_path / "out.png").exists()
    assert canvas.state.value == "exported"


def test_failed_encoding_leaves_sink_untouched():
    sink = io.BytesIO()
    with pytest.raises(ImageDataError):
        write_png(sink, 2, 2, bytes(5))
    assert sink.getvalue() == b""
