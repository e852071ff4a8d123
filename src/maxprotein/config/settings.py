"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".maxprotein"


def default_config_path() -> Path:
    """Return the default config file path."""
    return _default_config_dir() / "config.yaml"


@dataclass
class DataConfig:
    """Dataset configuration."""

    abbrev_path: Optional[Path] = None
    encoding: str = "latin-1"


@dataclass
class SelectionConfig:
    """Candidate filtering and selection defaults."""

    min_kcal: int = 0
    max_kcal: int = 2000
    total_kcal: int = 5000
    candidate_count: int = 20
    algorithm: str = "greedy"  # "greedy" or "exhaustive"


@dataclass
class BenchmarkConfig:
    """Benchmark configuration."""

    sizes: list[int] = field(default_factory=lambda: [5, 10, 15, 20])


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    output_format: str = "table"  # "table", "json", "text"


@dataclass
class Settings:
    """Main application settings."""

    data: DataConfig = field(default_factory=DataConfig)
    selection: SelectionConfig = field(default_factory=SelectionConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.maxprotein/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse data config
        if "data" in data:
            data_cfg = data["data"] or {}
            if data_cfg.get("abbrev_path"):
                settings.data.abbrev_path = Path(data_cfg["abbrev_path"]).expanduser()
            if "encoding" in data_cfg:
                settings.data.encoding = data_cfg["encoding"]

        # Parse selection config
        if "selection" in data:
            sel_data = data["selection"] or {}
            for key in ("min_kcal", "max_kcal", "total_kcal", "candidate_count"):
                if key in sel_data:
                    setattr(settings.selection, key, int(sel_data[key]))
            if "algorithm" in sel_data:
                settings.selection.algorithm = sel_data["algorithm"]

        # Parse benchmark config
        if "benchmark" in data:
            bench_data = data["benchmark"] or {}
            if "sizes" in bench_data:
                settings.benchmark.sizes = [int(n) for n in bench_data["sizes"]]

        # Parse defaults
        if "defaults" in data:
            def_data = data["defaults"] or {}
            if "output_format" in def_data:
                settings.defaults.output_format = def_data["output_format"]

        return settings

    def to_dict(self) -> dict:
        """Return settings as a plain dict, as written to config.yaml."""
        return {
            "data": {
                "abbrev_path": str(self.data.abbrev_path) if self.data.abbrev_path else None,
                "encoding": self.data.encoding,
            },
            "selection": {
                "min_kcal": self.selection.min_kcal,
                "max_kcal": self.selection.max_kcal,
                "total_kcal": self.selection.total_kcal,
                "candidate_count": self.selection.candidate_count,
                "algorithm": self.selection.algorithm,
            },
            "benchmark": {
                "sizes": list(self.benchmark.sizes),
            },
            "defaults": {
                "output_format": self.defaults.output_format,
            },
        }

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.maxprotein/config.yaml
        """
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings
