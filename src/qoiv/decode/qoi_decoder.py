from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from pathlib import Path

from .base import FailedToReadFileError, MissingDataError
from .chunks import (
    MAX_RUN_FIELD,
    ChunkTag,
    RunningCache,
    apply_diff,
    apply_luma,
    apply_rgb,
    classify_tag,
    run_length,
)
from .header import DEFAULT_MAX_PIXELS, HEADER_SIZE, parse_header
from .types import Image, Pixel


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeOptions:
    """Knobs for the places where QOI-family writers disagree.

    ``run_bias`` is added to the 6-bit run field and ``initial_pixel`` seeds the
    previous pixel before the first chunk.
    """

    run_bias: int = 0
    initial_pixel: Pixel = (0, 0, 0, 0)
    max_pixels: int | None = DEFAULT_MAX_PIXELS

    def __post_init__(self) -> None:
        if self.run_bias < 0:
            raise ValueError(f"run_bias must be >= 0, got {self.run_bias}")
        if len(self.initial_pixel) != 4 or any(not 0 <= c <= 255 for c in self.initial_pixel):
            raise ValueError(f"initial_pixel must be four components in 0..255, got {self.initial_pixel!r}")

    @property
    def max_pixels_per_byte(self) -> int:
        return MAX_RUN_FIELD + self.run_bias


PROFILES: dict[str, DecodeOptions] = {
    "native": DecodeOptions(),
    "reference": DecodeOptions(run_bias=1, initial_pixel=(0, 0, 0, 255)),
}


def options_for_profile(name: str, max_pixels: int | None = DEFAULT_MAX_PIXELS) -> DecodeOptions:
    try:
        base = PROFILES[name.lower()]
    except KeyError:
        raise ValueError(f"unknown decode profile {name!r}, expected one of {sorted(PROFILES)}") from None
    return replace(base, max_pixels=max_pixels)


def decode_from_bytes(data: bytes | bytearray | memoryview, options: DecodeOptions | None = None) -> Image:
    opts = options or DecodeOptions()
    header = parse_header(data, max_pixels=opts.max_pixels)
    stride = header.stride

    # Refuse to allocate a raster the input could never fill.
    if (len(data) - HEADER_SIZE) * opts.max_pixels_per_byte < header.pixel_count:
        raise MissingDataError(
            f"{len(data) - HEADER_SIZE} chunk bytes cannot cover {header.width}x{header.height} pixels"
        )

    out = bytearray(header.raster_size)
    end = len(out)
    size = len(data)
    cache = RunningCache()
    prev: Pixel = opts.initial_pixel

    pos = HEADER_SIZE
    di = 0
    while di < end:
        if pos >= size:
            raise MissingDataError(f"chunk stream ended at byte {pos} with {(end - di) // stride} pixels left")

        tag = data[pos]
        kind = classify_tag(tag)
        if pos + kind.payload_size >= size:
            raise MissingDataError(f"{kind.value} chunk at byte {pos} needs {kind.payload_size} more bytes")

        if kind is ChunkTag.RUN:
            count = max(0, min(run_length(tag, opts.run_bias), (end - di) // stride))
            span = count * stride
            out[di : di + span] = bytes(prev[:stride]) * count
            di += span
            pos += 1
            continue

        if kind is ChunkTag.RGB:
            prev = apply_rgb(prev, data[pos + 1], data[pos + 2], data[pos + 3])
        elif kind is ChunkTag.RGBA:
            prev = (data[pos + 1], data[pos + 2], data[pos + 3], data[pos + 4])
        elif kind is ChunkTag.INDEX:
            prev = cache[tag]
        elif kind is ChunkTag.DIFF:
            prev = apply_diff(prev, tag)
        else:
            prev = apply_luma(prev, tag, data[pos + 1])
        pos += 1 + kind.payload_size

        cache.store(prev)
        out[di : di + stride] = bytes(prev[:stride])
        di += stride

    logger.debug(
        "decoded %dx%d %s image (%d of %d input bytes used)",
        header.width,
        header.height,
        header.format.name,
        pos,
        size,
    )
    return Image(width=header.width, height=header.height, format=header.format, samples=bytes(out))


def decode_from_path(path: str | Path, options: DecodeOptions | None = None) -> Image:
    src = Path(path)
    try:
        data = src.read_bytes()
    except OSError as exc:
        raise FailedToReadFileError(f"failed to read {src}: {exc}") from exc
    return decode_from_bytes(data, options=options)


class QoiDecoder:
    """Path decoder for .qoi files."""

    def __init__(self, options: DecodeOptions | None = None) -> None:
        self.options = options or DecodeOptions()

    def decode(self, path: Path) -> Image:
        return decode_from_path(path, options=self.options)

    def decode_bytes(self, data: bytes | bytearray | memoryview) -> Image:
        return decode_from_bytes(data, options=self.options)
