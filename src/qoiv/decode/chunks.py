from __future__ import annotations

import enum

from .types import Pixel


CACHE_SIZE = 64

OP_RGB = 0xFE
OP_RGBA = 0xFF
_MASK_2 = 0xC0
_LOW_6 = 0x3F
# 0xFE and 0xFF are literals, so a run field tops out below 0x3E.
MAX_RUN_FIELD = 0x3D


class ChunkTag(enum.Enum):
    RGB = "rgb"
    RGBA = "rgba"
    INDEX = "index"
    DIFF = "diff"
    LUMA = "luma"
    RUN = "run"

    @property
    def payload_size(self) -> int:
        """Bytes consumed after the tag byte."""
        return _PAYLOAD_SIZES[self]


_PAYLOAD_SIZES = {
    ChunkTag.RGB: 3,
    ChunkTag.RGBA: 4,
    ChunkTag.INDEX: 0,
    ChunkTag.DIFF: 0,
    ChunkTag.LUMA: 1,
    ChunkTag.RUN: 0,
}

_BY_TOP_BITS = (ChunkTag.INDEX, ChunkTag.DIFF, ChunkTag.LUMA, ChunkTag.RUN)


def classify_tag(byte: int) -> ChunkTag:
    # 0xFE/0xFF would otherwise read as runs.
    if byte == OP_RGB:
        return ChunkTag.RGB
    if byte == OP_RGBA:
        return ChunkTag.RGBA
    return _BY_TOP_BITS[(byte & _MASK_2) >> 6]


def pixel_hash(pixel: Pixel) -> int:
    r, g, b, a = pixel
    return (r * 3 + g * 5 + b * 7 + a * 11) % CACHE_SIZE


class RunningCache:
    """64 recently seen pixels, addressed by ``pixel_hash``.

    Colliding pixels overwrite each other; that is how the format works.
    """

    def __init__(self) -> None:
        self._slots: list[Pixel] = [(0, 0, 0, 0)] * CACHE_SIZE

    def __getitem__(self, index: int) -> Pixel:
        return self._slots[index & _LOW_6]

    def __len__(self) -> int:
        return CACHE_SIZE

    def store(self, pixel: Pixel) -> None:
        self._slots[pixel_hash(pixel)] = pixel


def apply_diff(prev: Pixel, tag: int) -> Pixel:
    r, g, b, a = prev
    dr = ((tag >> 4) & 0x03) - 2
    dg = ((tag >> 2) & 0x03) - 2
    db = (tag & 0x03) - 2
    return ((r + dr) & 0xFF, (g + dg) & 0xFF, (b + db) & 0xFF, a)


def apply_luma(prev: Pixel, tag: int, second: int) -> Pixel:
    r, g, b, a = prev
    dg = (tag & _LOW_6) - 32
    dr_dg = ((second >> 4) & 0x0F) - 8
    db_dg = (second & 0x0F) - 8
    return ((r + dg + dr_dg) & 0xFF, (g + dg) & 0xFF, (b + dg + db_dg) & 0xFF, a)


def apply_rgb(prev: Pixel, r: int, g: int, b: int) -> Pixel:
    return (r, g, b, prev[3])


def run_length(tag: int, bias: int = 0) -> int:
    return (tag & _LOW_6) + bias
