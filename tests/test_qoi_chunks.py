from __future__ import annotations

import pytest

from qoiv.decode.chunks import (
    CACHE_SIZE,
    ChunkTag,
    RunningCache,
    apply_diff,
    apply_luma,
    apply_rgb,
    classify_tag,
    pixel_hash,
    run_length,
)


@pytest.mark.parametrize(
    ("byte", "tag"),
    [
        (0xFE, ChunkTag.RGB),
        (0xFF, ChunkTag.RGBA),
        (0x00, ChunkTag.INDEX),
        (0x3F, ChunkTag.INDEX),
        (0x40, ChunkTag.DIFF),
        (0x7F, ChunkTag.DIFF),
        (0x80, ChunkTag.LUMA),
        (0xBF, ChunkTag.LUMA),
        (0xC0, ChunkTag.RUN),
        (0xFD, ChunkTag.RUN),
    ],
)
def test_classify_tag(byte: int, tag: ChunkTag) -> None:
    assert classify_tag(byte) is tag


def test_payload_sizes() -> None:
    assert ChunkTag.RGB.payload_size == 3
    assert ChunkTag.RGBA.payload_size == 4
    assert ChunkTag.LUMA.payload_size == 1
    assert ChunkTag.INDEX.payload_size == 0
    assert ChunkTag.DIFF.payload_size == 0
    assert ChunkTag.RUN.payload_size == 0


def test_pixel_hash_coefficients() -> None:
    assert pixel_hash((1, 0, 0, 0)) == 3
    assert pixel_hash((0, 1, 0, 0)) == 5
    assert pixel_hash((0, 0, 1, 0)) == 7
    assert pixel_hash((0, 0, 0, 1)) == 11
    assert pixel_hash((0, 0, 0, 255)) == 53
    assert pixel_hash((255, 255, 255, 255)) == 38


def test_running_cache_starts_transparent_black() -> None:
    cache = RunningCache()
    assert len(cache) == CACHE_SIZE
    assert all(cache[i] == (0, 0, 0, 0) for i in range(CACHE_SIZE))


def test_running_cache_store_is_content_addressed() -> None:
    cache = RunningCache()
    pixel = (16, 32, 48, 0)
    cache.store(pixel)
    assert cache[pixel_hash(pixel)] == pixel
    # Index chunks carry the slot in the low six bits.
    assert cache[0x40 | pixel_hash(pixel)] == pixel


def test_running_cache_collisions_overwrite() -> None:
    cache = RunningCache()
    first = (1, 0, 0, 0)
    second = (0, 0, 0, 41)
    assert pixel_hash(first) == pixel_hash(second)

    cache.store(first)
    cache.store(second)
    assert cache[pixel_hash(first)] == second


def test_diff_zero_delta_is_identity() -> None:
    assert apply_diff((10, 20, 30, 255), 0b01_10_10_10) == (10, 20, 30, 255)


def test_diff_extremes() -> None:
    assert apply_diff((10, 20, 30, 255), 0b01_11_11_11) == (11, 21, 31, 255)
    assert apply_diff((10, 20, 30, 255), 0b01_00_00_00) == (8, 18, 28, 255)


def test_diff_wraps_modulo_256() -> None:
    assert apply_diff((0, 1, 2, 7), 0b01_00_00_00) == (254, 255, 0, 7)
    assert apply_diff((255, 255, 255, 7), 0b01_11_11_11) == (0, 0, 0, 7)


def test_luma_zero_delta_is_identity() -> None:
    assert apply_luma((10, 20, 30, 255), 0x80 | 32, 0x88) == (10, 20, 30, 255)


def test_luma_adds_green_delta_to_all_channels() -> None:
    # dg = -32, dr-dg = -8, db-dg = -8
    assert apply_luma((100, 100, 100, 9), 0x80, 0x00) == (60, 68, 60, 9)
    # dg = +31, dr-dg = +7, db-dg = 0
    assert apply_luma((0, 0, 0, 9), 0xBF, 0xF8) == (38, 31, 31, 9)


def test_luma_wraps_modulo_256() -> None:
    assert apply_luma((255, 255, 255, 255), 0xBF, 0xFF) == (37, 30, 37, 255)


def test_rgb_literal_keeps_alpha() -> None:
    assert apply_rgb((1, 2, 3, 77), 10, 20, 30) == (10, 20, 30, 77)


def test_run_length() -> None:
    assert run_length(0xC0) == 0
    assert run_length(0xC3) == 3
    assert run_length(0xFD) == 61
    assert run_length(0xC3, bias=1) == 4
