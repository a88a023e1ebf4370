from __future__ import annotations

from pathlib import Path

from .base import Decoder, UnsupportedFormatError
from .qoi_decoder import DecodeOptions, QoiDecoder
from .types import Image


class DecoderRegistry:
    def __init__(self, options: DecodeOptions | None = None) -> None:
        self._decoders: dict[str, Decoder] = {".qoi": QoiDecoder(options)}

    @property
    def extensions(self) -> tuple[str, ...]:
        return tuple(sorted(self._decoders))

    def register(self, ext: str, decoder: Decoder) -> None:
        self._decoders[ext.lower()] = decoder

    def decode(self, path: Path) -> Image:
        ext = path.suffix.lower()
        decoder = self._decoders.get(ext)
        if decoder is None:
            raise UnsupportedFormatError(f"unsupported extension {ext or '<none>'} for {path}")
        return decoder.decode(path)
