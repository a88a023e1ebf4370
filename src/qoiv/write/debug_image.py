from __future__ import annotations

from pathlib import Path

from qoiv.decode import Image, MissingDependencyError


def write_image_tiff(path: Path, image: Image) -> None:
    """Write a decoded raster as an 8-bit TIFF for inspection."""
    try:
        import tifffile  # type: ignore
    except Exception as exc:  # pragma: no cover - optional dependency
        raise MissingDependencyError("tifffile is required for TIFF export. Install with: pip install '.[io]'") from exc

    arr = image.as_array()
    extrasamples = ("unassalpha",) if image.format.has_alpha else None
    path.parent.mkdir(parents=True, exist_ok=True)
    tifffile.imwrite(str(path), arr, photometric="rgb", extrasamples=extrasamples)
