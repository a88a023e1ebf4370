from __future__ import annotations

from dataclasses import dataclass
import enum

import numpy as np


Pixel = tuple[int, int, int, int]


class PixelFormat(enum.Enum):
    SRGB = (3, 0)
    SRGBA = (4, 0)
    LINEAR_RGB = (3, 1)
    LINEAR_RGBA = (4, 1)

    @property
    def channels(self) -> int:
        return self.value[0]

    @property
    def colorspace(self) -> int:
        return self.value[1]

    @property
    def has_alpha(self) -> bool:
        return self.channels == 4

    @property
    def is_linear(self) -> bool:
        return self.colorspace == 1

    @classmethod
    def from_header(cls, channels: int, colorspace: int) -> PixelFormat | None:
        for fmt in cls:
            if fmt.value == (channels, colorspace):
                return fmt
        return None


@dataclass
class Image:
    width: int
    height: int
    format: PixelFormat
    samples: bytes

    @property
    def channels(self) -> int:
        return self.format.channels

    @property
    def stride(self) -> int:
        return self.format.channels

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def pixel(self, x: int, y: int) -> tuple[int, ...]:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        start = (y * self.width + x) * self.stride
        return tuple(self.samples[start : start + self.stride])

    def as_array(self) -> np.ndarray:
        """Return samples as a read-only (height, width, channels) uint8 array."""
        arr = np.frombuffer(self.samples, dtype=np.uint8)
        return arr.reshape(self.height, self.width, self.channels)
