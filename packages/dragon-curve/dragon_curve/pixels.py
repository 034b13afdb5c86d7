"""Raster sink protocol, in-memory framebuffer and pixel packing."""
from __future__ import annotations

from typing import Callable, Protocol

from dragon_curve.types import Color

BYTES_PER_PIXEL = 4

PixelPacker = Callable[[Color], bytes]


class PixelSink(Protocol):
    @property
    def width(self) -> int: ...
    @property
    def height(self) -> int: ...
    def write_pixel(self, index: int, pixel: bytes) -> None: ...


def _channel(value: float) -> int:
    return int(value * 255.99)


def pack_rgba(color: Color) -> bytes:
    return bytes((_channel(color[0]), _channel(color[1]), _channel(color[2]), 0xFF))


def pack_bgra(color: Color) -> bytes:
    """Byte order of a little-endian 0xAARRGGBB word."""
    return bytes((_channel(color[2]), _channel(color[1]), _channel(color[0]), 0xFF))


PIXEL_FORMATS: dict[str, PixelPacker] = {
    "RGBA": pack_rgba,
    "BGRA": pack_bgra,
}


def packer_for(pixel_format: str) -> PixelPacker:
    try:
        return PIXEL_FORMATS[pixel_format]
    except KeyError:
        raise ValueError(
            f"Unknown pixel format {pixel_format!r}, expected one of "
            f"{sorted(PIXEL_FORMATS)}"
        ) from None


class Framebuffer:
    """Fixed-size 4-byte-per-pixel buffer, row-major from the top-left."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"framebuffer size must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._data = bytearray(width * height * BYTES_PER_PIXEL)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def data(self) -> bytearray:
        return self._data

    def write_pixel(self, index: int, pixel: bytes) -> None:
        if len(pixel) != BYTES_PER_PIXEL:
            raise ValueError(
                f"pixel must be {BYTES_PER_PIXEL} bytes, got {len(pixel)}"
            )
        if not 0 <= index < self._width * self._height:
            raise ValueError(
                f"pixel index {index} out of range for {self._width}x{self._height} buffer"
            )
        offset = index * BYTES_PER_PIXEL
        self._data[offset:offset + BYTES_PER_PIXEL] = pixel

    def pixel(self, x: int, y: int) -> bytes:
        offset = (x + y * self._width) * BYTES_PER_PIXEL
        return bytes(self._data[offset:offset + BYTES_PER_PIXEL])

    def clear(self, pixel: bytes = b"\x00\x00\x00\x00") -> None:
        self._data[:] = pixel * (self._width * self._height)


def draw_test_card(sink: PixelSink, pack: PixelPacker = pack_rgba) -> None:
    """Paint a red-down, green-across calibration gradient over the sink."""
    width, height = sink.width, sink.height
    for y in range(height):
        for x in range(width):
            color = (y / height, x / width, 0.0)
            sink.write_pixel(x + y * width, pack(color))
