from __future__ import annotations

from dataclasses import dataclass
import struct

from .base import MalformedHeaderError
from .types import PixelFormat


MAGIC = b"qoif"
HEADER_SIZE = 14
# Reference encoder limit; guards the raster allocation against hostile headers.
DEFAULT_MAX_PIXELS = 400_000_000

_HEADER = struct.Struct(">4sIIBB")


@dataclass(frozen=True)
class QoiHeader:
    width: int
    height: int
    channels: int
    colorspace: int
    format: PixelFormat

    @property
    def stride(self) -> int:
        return self.channels

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def raster_size(self) -> int:
        return self.pixel_count * self.stride


def parse_header(data: bytes | bytearray | memoryview, max_pixels: int | None = DEFAULT_MAX_PIXELS) -> QoiHeader:
    """Validate the 14-byte QOI header and return its fields.

    The output stride always follows the channel byte. ``max_pixels=None``
    disables the size ceiling.
    """

    if len(data) < HEADER_SIZE:
        raise MalformedHeaderError(f"header needs {HEADER_SIZE} bytes, got {len(data)}")

    magic, width, height, channels, colorspace = _HEADER.unpack_from(data, 0)
    if magic != MAGIC:
        raise MalformedHeaderError(f"bad magic {magic!r}, expected {MAGIC!r}")

    fmt = PixelFormat.from_header(channels, colorspace)
    if fmt is None:
        raise MalformedHeaderError(f"unsupported channels/colorspace pair ({channels}, {colorspace})")

    if max_pixels is not None and width * height > max_pixels:
        raise MalformedHeaderError(f"{width}x{height} exceeds the {max_pixels} pixel limit")

    return QoiHeader(width=width, height=height, channels=channels, colorspace=colorspace, format=fmt)
