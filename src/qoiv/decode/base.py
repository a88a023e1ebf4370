from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .types import Image


class DecodeError(RuntimeError):
    pass


class MalformedHeaderError(DecodeError):
    pass


class MissingDataError(DecodeError):
    pass


class FailedToReadFileError(DecodeError):
    pass


class UnsupportedFormatError(DecodeError):
    pass


class MissingDependencyError(DecodeError):
    pass


class Decoder(Protocol):
    def decode(self, path: Path) -> Image:
        ...
