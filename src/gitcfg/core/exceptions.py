"""
Custom exceptions for gitcfg.

Modified: 2025-11-07
"""


class GitCfgError(Exception):
    """Base exception for all gitcfg errors."""

    pass


class ConfigDecodeError(GitCfgError, ValueError):
    """Raised when git-config text cannot be parsed."""

    pass


class ConfigEncodeError(GitCfgError):
    """Raised when the raw config tree cannot be serialized."""

    pass


class InvalidRemoteNameError(GitCfgError):
    """Raised when a remote is stored under a key other than its own name."""

    def __init__(self, message: str = "config invalid remote", key: str = "", name: str = ""):
        super().__init__(message)
        self.key = key
        self.name = name


class RemoteConfigNotFoundError(GitCfgError):
    """Raised when a remote is not present in the configuration."""

    def __init__(self, message: str = "remote config not found", name: str = ""):
        super().__init__(message)
        self.name = name


class RemoteConfigEmptyURLError(GitCfgError):
    """Raised when a remote has no URL."""

    def __init__(self, message: str = "remote config: empty URL"):
        super().__init__(message)


class RemoteConfigEmptyNameError(GitCfgError):
    """Raised when a remote has no name."""

    def __init__(self, message: str = "remote config: empty name"):
        super().__init__(message)


class ConfigurationError(GitCfgError):
    """Raised when gitcfg's own settings are invalid."""

    pass
