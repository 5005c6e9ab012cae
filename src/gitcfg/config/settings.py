"""
Settings for the gitcfg command line tool.

Hierarchical settings loading: defaults → config file → environment variables

Modified: 2025-11-07
"""

import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional

from gitcfg.core.exceptions import ConfigurationError

OUTPUT_FORMATS = ("yaml", "text")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingSettings:
    """Logging settings."""

    level: str = "WARNING"


@dataclass
class OutputSettings:
    """Output settings."""

    format: str = "yaml"  # yaml, text
    sort_remotes: bool = False  # write remotes sorted by name


@dataclass
class Settings:
    """Main settings container."""

    logging: LoggingSettings = field(default_factory=LoggingSettings)
    output: OutputSettings = field(default_factory=OutputSettings)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """
        Load settings from file and environment variables.

        Priority:
        1. Default values (defined in dataclasses)
        2. Config file (~/.config/gitcfg/config.yaml)
        3. Environment variables (override everything)

        Args:
            config_path: Optional path to config file

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the file or an environment variable is invalid
        """
        settings = cls()

        if config_path is None:
            config_path = Path.home() / ".config" / "gitcfg" / "config.yaml"

        if config_path.exists():
            try:
                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid settings file {config_path}: {e}") from e

            if "logging" in config_data:
                log = config_data["logging"] or {}
                settings.logging = LoggingSettings(level=log.get("level", "WARNING"))

            if "output" in config_data:
                output = config_data["output"] or {}
                settings.output = OutputSettings(
                    format=output.get("format", "yaml"),
                    sort_remotes=output.get("sort_remotes", False),
                )

        # Override with environment variables
        level_env = os.getenv("GITCFG_LOG_LEVEL")
        if level_env:
            settings.logging.level = level_env

        format_env = os.getenv("GITCFG_FORMAT")
        if format_env:
            settings.output.format = format_env

        sort_env = os.getenv("GITCFG_SORT_REMOTES")
        if sort_env:
            settings.output.sort_remotes = _parse_bool("GITCFG_SORT_REMOTES", sort_env)

        settings.validate()
        return settings

    def validate(self) -> None:
        """Check enumerated values, normalizing the log level to upper case."""
        self.logging.level = str(self.logging.level).upper()
        if self.logging.level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.logging.level}")

        if self.output.format not in OUTPUT_FORMATS:
            raise ConfigurationError(f"Unknown output format: {self.output.format}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "logging": {"level": self.logging.level},
            "output": {
                "format": self.output.format,
                "sort_remotes": self.output.sort_remotes,
            },
        }


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


def get_config_dir() -> Path:
    """Get configuration directory, creating if needed."""
    config_dir = Path.home() / ".config" / "gitcfg"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir
