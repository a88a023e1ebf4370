from __future__ import annotations

import struct
from typing import Callable

import pytest


def _qoi_bytes(width: int, height: int, chunks: bytes, channels: int = 3, colorspace: int = 0) -> bytes:
    return struct.pack(">4sIIBB", b"qoif", width, height, channels, colorspace) + bytes(chunks)


@pytest.fixture
def make_qoi() -> Callable[..., bytes]:
    return _qoi_bytes
