from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from qoiv.config import AppConfig, load_config
from qoiv.decode import DecoderRegistry, Image
from qoiv.decode.qoi_decoder import PROFILES
from qoiv.utils.logging_utils import configure_logging


logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="qoiv")
    sub = parser.add_subparsers(dest="command", required=True)

    info = sub.add_parser("info", help="Decode a QOI image and print its header and raster size")
    info.add_argument("input", help="Input .qoi path")
    info.add_argument("--config", default=None, help="Optional path to YAML config")
    info.add_argument("--profile", choices=sorted(PROFILES), default=None, help="Decode profile override")
    info.add_argument("--json", action="store_true", help="Emit machine-readable JSON")

    export = sub.add_parser("export", help="Decode a QOI image and write it as TIFF")
    export.add_argument("input", help="Input .qoi path")
    export.add_argument("--out", default=None, help="Output .tiff path (default: <export_dir or input dir>/<stem>.tiff)")
    export.add_argument("--config", default=None, help="Optional path to YAML config")
    export.add_argument("--profile", choices=sorted(PROFILES), default=None, help="Decode profile override")

    return parser


def _load(args: argparse.Namespace) -> AppConfig:
    config = load_config(args.config) if args.config else AppConfig()
    if args.profile:
        config.decode.profile = args.profile
    configure_logging(config.log_level, config.log_file)
    return config


def _decode(config: AppConfig, input_path: Path) -> Image:
    return DecoderRegistry(config.decode.to_options()).decode(input_path)


def _image_summary(input_path: Path, image: Image) -> dict[str, object]:
    return {
        "path": str(input_path),
        "width": image.width,
        "height": image.height,
        "format": image.format.name,
        "channels": image.channels,
        "colorspace": "linear" if image.format.is_linear else "srgb",
        "sample_bytes": len(image.samples),
    }


def _cmd_info(args: argparse.Namespace) -> int:
    config = _load(args)
    input_path = Path(args.input).expanduser().resolve()
    image = _decode(config, input_path)
    payload = _image_summary(input_path, image)

    if args.json:
        print(json.dumps(payload, indent=2))
        return 0

    print(f"Image: {payload['path']}")
    print(f"  size: {image.width}x{image.height}")
    print(f"  format: {payload['format']} ({payload['channels']} channels, {payload['colorspace']})")
    print(f"  samples: {payload['sample_bytes']} bytes")
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    from qoiv.write import write_image_tiff

    config = _load(args)
    input_path = Path(args.input).expanduser().resolve()
    if args.out:
        out_path = Path(args.out).expanduser().resolve()
    else:
        out_dir = config.output.export_dir or input_path.parent
        out_path = out_dir / f"{input_path.stem}.tiff"

    image = _decode(config, input_path)
    write_image_tiff(out_path, image)
    logger.info("exported %s -> %s", input_path, out_path)
    print(str(out_path))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "info":
            return _cmd_info(args)
        if args.command == "export":
            return _cmd_export(args)

        parser.error(f"unknown command: {args.command}")
        return 2
    except Exception as exc:
        logger.exception("fatal error")
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
