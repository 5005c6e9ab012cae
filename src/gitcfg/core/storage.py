"""
Config storage backends.

Modified: 2025-11-07
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from gitcfg.core.models import Config, new_config

logger = logging.getLogger(__name__)


class ConfigStorer(ABC):
    """Generic storage of a Config object."""

    @abstractmethod
    def config(self) -> Config:
        """Return the stored configuration."""

    @abstractmethod
    def set_config(self, cfg: Config) -> None:
        """Validate and store a configuration."""


class MemoryConfigStorage(ConfigStorer):
    """
    Keeps the configuration as encoded git-config text in memory.

    Each call to ``config`` decodes a fresh Config, so callers never share
    mutable state with the storage or with each other.
    """

    def __init__(self, data: Optional[bytes] = None):
        """
        Initialize storage.

        Args:
            data: Initial git-config text (default: empty configuration)
        """
        self._data = data

    def config(self) -> Config:
        cfg = new_config()
        if self._data is not None:
            cfg.unmarshal(self._data)
        return cfg

    def set_config(self, cfg: Config) -> None:
        """
        Store a configuration.

        Raises:
            GitCfgError: If validation or encoding fails; nothing is stored
        """
        cfg.validate()
        self._data = cfg.marshal()
        logger.debug(f"Stored config with {len(cfg.remotes)} remotes")
