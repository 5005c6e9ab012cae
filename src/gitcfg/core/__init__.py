"""
Core typed git configuration model for gitcfg.

Interface-agnostic: the CLI and any library caller share these types.

Modified: 2025-11-07
"""

from gitcfg.core.exceptions import (
    GitCfgError,
    ConfigDecodeError,
    ConfigEncodeError,
    InvalidRemoteNameError,
    RemoteConfigNotFoundError,
    RemoteConfigEmptyURLError,
    RemoteConfigEmptyNameError,
)
from gitcfg.core.models import Config, CoreConfig, RemoteConfig, new_config
from gitcfg.core.refspec import (
    DEFAULT_FETCH_REFSPEC,
    DEFAULT_PUSH_REFSPEC,
    RefSpec,
    match_any,
)
from gitcfg.core.storage import ConfigStorer, MemoryConfigStorage

__all__ = [
    "GitCfgError",
    "ConfigDecodeError",
    "ConfigEncodeError",
    "InvalidRemoteNameError",
    "RemoteConfigNotFoundError",
    "RemoteConfigEmptyURLError",
    "RemoteConfigEmptyNameError",
    "Config",
    "CoreConfig",
    "RemoteConfig",
    "new_config",
    "DEFAULT_FETCH_REFSPEC",
    "DEFAULT_PUSH_REFSPEC",
    "RefSpec",
    "match_any",
    "ConfigStorer",
    "MemoryConfigStorage",
]
