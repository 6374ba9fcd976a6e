"""Configuration management for tickbar."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any, TextIO

import yaml

from tickbar.core.state import DEFAULT_BAR_SIZE, DEFAULT_MIN_UPDATE_TIME
from tickbar.exceptions import ConfigurationError
from tickbar.utils.logging import LEVEL_NAMES

STREAMS = ("stderr", "stdout")


def _is_number(value: Any, integral: bool = False) -> bool:
    # YAML booleans load as bool, which is an int subclass
    if isinstance(value, bool):
        return False
    return isinstance(value, int) if integral else isinstance(value, (int, float))


@dataclass
class ProgressConfig:
    """Display settings applied to every bar built from this config."""

    prefix: str = ""
    bar_size: int = DEFAULT_BAR_SIZE
    # Seconds between two redraws of the same line
    min_update_time: float = DEFAULT_MIN_UPDATE_TIME
    # Destination stream name: 'stderr' | 'stdout'
    stream: str = "stderr"

    def resolve_sink(self) -> TextIO:
        """Return the stream object named by ``stream``."""
        return sys.stdout if self.stream == "stdout" else sys.stderr


@dataclass
class RuntimeConfig:
    """Runtime configuration."""

    log_level: str = "WARNING"
    log_file: Optional[Path] = None


@dataclass
class Config:
    """Main configuration class."""

    progress: ProgressConfig = field(default_factory=ProgressConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)

    def validate(self) -> None:
        """Validate configuration."""
        progress = self.progress
        if not isinstance(progress.prefix, str):
            raise ConfigurationError(
                f"progress.prefix must be a string, got {progress.prefix!r}"
            )
        if not _is_number(progress.bar_size, integral=True):
            raise ConfigurationError(
                f"progress.bar_size must be an integer, got {progress.bar_size!r}"
            )
        if not _is_number(progress.min_update_time):
            raise ConfigurationError(
                f"progress.min_update_time must be a number, "
                f"got {progress.min_update_time!r}"
            )
        if self.progress.bar_size < 0:
            raise ConfigurationError("progress.bar_size must be >= 0")
        if self.progress.min_update_time < 0:
            raise ConfigurationError("progress.min_update_time must be >= 0")
        if self.progress.stream not in STREAMS:
            raise ConfigurationError(
                f"progress.stream must be one of {', '.join(STREAMS)}, "
                f"got {self.progress.stream!r}"
            )
        if str(self.runtime.log_level).upper() not in LEVEL_NAMES:
            raise ConfigurationError(
                f"runtime.log_level must be one of {', '.join(LEVEL_NAMES)}, "
                f"got {self.runtime.log_level!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""

        def path_to_str(obj):
            if isinstance(obj, Path):
                return str(obj)
            elif isinstance(obj, dict):
                return {k: path_to_str(v) for k, v in obj.items()}
            elif isinstance(obj, (list, tuple)):
                return [path_to_str(item) for item in obj]
            return obj

        return path_to_str(asdict(self))


def load_config(path: Path) -> Config:
    """Load configuration from YAML file."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration root must be a mapping: {path}")

    unknown = sorted(set(data) - {"progress", "runtime"})
    if unknown:
        raise ConfigurationError("Unsupported config option(s): " + ", ".join(unknown))

    cfg = Config()

    for key, value in (data.get("progress") or {}).items():
        if not hasattr(cfg.progress, key):
            raise ConfigurationError(f"Unsupported progress option: {key}")
        setattr(cfg.progress, key, value)

    for key, value in (data.get("runtime") or {}).items():
        if not hasattr(cfg.runtime, key):
            raise ConfigurationError(f"Unsupported runtime option: {key}")
        if key == "log_file" and value:
            value = Path(value)
        setattr(cfg.runtime, key, value)

    cfg.validate()
    return cfg


def save_config(cfg: Config, path: Path) -> None:
    """Save configuration to YAML file."""
    data = cfg.to_dict()
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
