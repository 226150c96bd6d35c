"""Configuration management for CpGDiscord."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from cpgdiscord.constants import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MIN_OVERLAP,
    DEFAULT_MIN_QUAL,
    MAX_MAPQ,
    PROGRESS_INTERVAL,
)
from cpgdiscord.exceptions import ConfigurationError


@dataclass
class RuntimeConfig:
    """Runtime configuration."""

    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    # Enable tqdm progress where available
    enable_progress: bool = True
    progress_interval: int = PROGRESS_INTERVAL


@dataclass
class FdrpConfig:
    """FDRP computation parameters."""

    min_qual: int = DEFAULT_MIN_QUAL
    max_depth: int = DEFAULT_MAX_DEPTH
    min_overlap: int = DEFAULT_MIN_OVERLAP
    # Seed for reservoir sampling; None draws fresh entropy
    seed: Optional[int] = None


@dataclass
class Config:
    """Main configuration class."""

    # Required parameters (set via CLI or config file)
    input_file: Optional[Path] = None
    output_file: Optional[Path] = None
    # Optional target CpG file; None scores every covered CpG
    cpg_set: Optional[Path] = None

    # Sub-configurations
    fdrp: FdrpConfig = field(default_factory=FdrpConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)

    def validate(self) -> None:
        """Validate configuration."""
        if not self.input_file:
            raise ConfigurationError("Input BAM file is required")
        if not self.output_file:
            raise ConfigurationError("Output file is required")
        if not Path(self.input_file).exists():
            raise ConfigurationError(f"Input file not found: {self.input_file}")
        if self.cpg_set is not None and not Path(self.cpg_set).exists():
            raise ConfigurationError(f"CpG set file not found: {self.cpg_set}")

        # Validate numeric ranges
        if not 0 <= self.fdrp.min_qual <= MAX_MAPQ:
            raise ConfigurationError(f"min_qual must be between 0 and {MAX_MAPQ}")
        if self.fdrp.max_depth < 1:
            raise ConfigurationError("max_depth must be >= 1")
        if self.fdrp.min_overlap < 0:
            raise ConfigurationError("min_overlap must be >= 0")
        if self.runtime.progress_interval < 1:
            raise ConfigurationError("progress_interval must be >= 1")

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
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration root must be a mapping: {path}")

    def build_config(data: Dict[str, Any]) -> Config:
        cfg = Config()

        # Direct attributes
        for key in ("input_file", "output_file", "cpg_set"):
            if data.get(key) is not None:
                setattr(cfg, key, Path(data[key]))

        # FDRP parameters
        if data.get("fdrp"):
            for key, value in data["fdrp"].items():
                if not hasattr(cfg.fdrp, key):
                    raise ConfigurationError(f"Unsupported config option: fdrp.{key}")
                setattr(cfg.fdrp, key, value)

        # Runtime config
        if data.get("runtime"):
            for key, value in data["runtime"].items():
                if hasattr(cfg.runtime, key):
                    if key == "log_file" and value:
                        value = Path(value)
                    setattr(cfg.runtime, key, value)

        return cfg

    return build_config(data)


def save_config(cfg: Config, path: Path) -> None:
    """Save configuration to YAML file."""
    data = cfg.to_dict()
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
