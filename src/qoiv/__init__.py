from .decode import (
    DecodeError,
    DecodeOptions,
    FailedToReadFileError,
    Image,
    MalformedHeaderError,
    MissingDataError,
    PixelFormat,
    decode_from_bytes,
    decode_from_path,
)

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "DecodeOptions",
    "FailedToReadFileError",
    "Image",
    "MalformedHeaderError",
    "MissingDataError",
    "PixelFormat",
    "decode_from_bytes",
    "decode_from_path",
    "__version__",
]
