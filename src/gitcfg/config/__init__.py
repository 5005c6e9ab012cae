"""
Settings management for the gitcfg tool.

Handles loading and merging settings from multiple sources:
- Default settings
- User config file (~/.config/gitcfg/config.yaml)
- Environment variables

Modified: 2025-11-07
"""

from gitcfg.config.settings import (
    Settings,
    LoggingSettings,
    OutputSettings,
    get_config_dir,
)

__all__ = [
    "Settings",
    "LoggingSettings",
    "OutputSettings",
    "get_config_dir",
]
