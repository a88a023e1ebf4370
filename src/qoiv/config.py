from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from qoiv.decode import DecodeOptions, options_for_profile
from qoiv.decode.header import DEFAULT_MAX_PIXELS


@dataclass
class DecodeConfig:
    profile: str = "native"
    max_pixels: int | None = DEFAULT_MAX_PIXELS

    def to_options(self) -> DecodeOptions:
        return options_for_profile(self.profile, max_pixels=self.max_pixels)


@dataclass
class OutputConfig:
    export_dir: Path | None = None


@dataclass
class AppConfig:
    decode: DecodeConfig = field(default_factory=DecodeConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"
    log_file: Path | None = None


def _expand_path(value: str | None, base: Path) -> Path | None:
    if value in (None, ""):
        return None
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = (base / path).resolve()
    return path


def _as_max_pixels(value: Any) -> int | None:
    if value is None:
        return None
    max_pixels = int(value)
    if max_pixels <= 0:
        raise ValueError("decode.max_pixels must be positive (or null to disable)")
    return max_pixels


def _section(raw: dict[str, Any], key: str, cfg_path: Path) -> dict[str, Any]:
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        raise ValueError(f"config {cfg_path}: {key} must be a mapping, got {type(value).__name__}")
    return value


def load_config(path: str | Path) -> AppConfig:
    try:
        import yaml  # type: ignore
    except Exception as exc:
        raise RuntimeError("PyYAML is required for config loading. Install with: pip install PyYAML") from exc

    cfg_path = Path(path).expanduser().resolve()
    with cfg_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"config {cfg_path} must be a mapping at the top level, got {type(raw).__name__}")

    base = cfg_path.parent
    decode_raw = _section(raw, "decode", cfg_path)
    output_raw = _section(raw, "output", cfg_path)

    decode = DecodeConfig(
        profile=str(decode_raw.get("profile", "native")).lower(),
        max_pixels=_as_max_pixels(decode_raw.get("max_pixels", DEFAULT_MAX_PIXELS)),
    )
    # Fail at load time rather than on the first decode.
    decode.to_options()

    output = OutputConfig(export_dir=_expand_path(output_raw.get("export_dir"), base))

    app = AppConfig(
        decode=decode,
        output=output,
        log_level=str(raw.get("log_level", "INFO")),
        log_file=_expand_path(raw.get("log_file"), base),
    )

    ensure_dirs(app)
    return app


def ensure_dirs(config: AppConfig) -> None:
    if config.output.export_dir is not None:
        config.output.export_dir.mkdir(parents=True, exist_ok=True)
    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
