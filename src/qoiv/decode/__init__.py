from .base import (
    DecodeError,
    FailedToReadFileError,
    MalformedHeaderError,
    MissingDataError,
    MissingDependencyError,
    UnsupportedFormatError,
)
from .header import QoiHeader, parse_header
from .qoi_decoder import DecodeOptions, QoiDecoder, decode_from_bytes, decode_from_path, options_for_profile
from .registry import DecoderRegistry
from .types import Image, PixelFormat

__all__ = [
    "DecodeError",
    "FailedToReadFileError",
    "MalformedHeaderError",
    "MissingDataError",
    "MissingDependencyError",
    "UnsupportedFormatError",
    "QoiHeader",
    "parse_header",
    "DecodeOptions",
    "QoiDecoder",
    "decode_from_bytes",
    "decode_from_path",
    "options_for_profile",
    "DecoderRegistry",
    "Image",
    "PixelFormat",
]
