"""
Typed git configuration model.

A Config overlays typed fields (core.bare, remotes) on top of a raw
dulwich ConfigFile. The raw tree keeps every section and option the typed
model does not understand, so unknown entries survive an
unmarshal -> marshal round trip.

Modified: 2025-11-07
"""

import logging
from dataclasses import dataclass, field
from io import BytesIO
from typing import Any, Dict, List, Optional

from dulwich.config import CaseInsensitiveOrderedMultiDict, ConfigFile

from gitcfg.core.exceptions import (
    ConfigDecodeError,
    ConfigEncodeError,
    InvalidRemoteNameError,
    RemoteConfigEmptyNameError,
    RemoteConfigEmptyURLError,
    RemoteConfigNotFoundError,
)
from gitcfg.core.refspec import RefSpec

logger = logging.getLogger(__name__)

REMOTE_SECTION = b"remote"
CORE_SECTION = b"core"
FETCH_KEY = b"fetch"
URL_KEY = b"url"
BARE_KEY = b"bare"

# Raw option bytes round-trip through str losslessly, even when not UTF-8
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _decode(value: bytes) -> str:
    return value.decode(_ENCODING, _ERRORS)


def _encode(value: str) -> bytes:
    return value.encode(_ENCODING, _ERRORS)


def _refuse_include(path):
    # include.path is kept as a plain option; included files are never merged
    raise OSError(f"includes are not followed: {path}")


def _format_value(value: bytes) -> bytes:
    escaped = (
        value.replace(b"\\", b"\\\\")
        .replace(b"\n", b"\\n")
        .replace(b"\t", b"\\t")
        .replace(b'"', b'\\"')
    )
    # Both # and ; start a comment in git-config
    if (
        value.startswith((b" ", b"\t"))
        or value.endswith((b" ", b"\t"))
        or b"#" in value
        or b";" in value
    ):
        return b'"' + escaped + b'"'
    return escaped


class _RawConfig(ConfigFile):
    """ConfigFile whose writer quotes every value git would cut at a comment."""

    def write_to_file(self, f) -> None:
        for section in self.sections():
            if len(section) == 1:
                f.write(b"[" + section[0] + b"]\n")
            else:
                f.write(b"[" + section[0] + b' "' + section[1] + b'"]\n')
            for key, value in self.items(section):
                f.write(b"\t" + key + b" = " + _format_value(value) + b"\n")


def _copy_options(options: CaseInsensitiveOrderedMultiDict) -> CaseInsensitiveOrderedMultiDict:
    copied = CaseInsensitiveOrderedMultiDict()
    for key, value in options.items():
        copied[key] = value
    return copied


def _is_remote_section(section: tuple) -> bool:
    return len(section) == 2 and section[0].lower() == REMOTE_SECTION


def _set_option(options: CaseInsensitiveOrderedMultiDict, key: bytes, value: bytes) -> None:
    # Upsert: drop every previous value of the key, then append
    if key in options:
        del options[key]
    options[key] = value


@dataclass
class CoreConfig:
    """Variables of the [core] section."""

    # No working directory is associated with the repository
    is_bare: bool = False


@dataclass
class RemoteConfig:
    """
    Configuration of a single remote repository.

    ``fetch`` may be empty until ``validate`` fills in the default refspec.
    """

    name: str = ""
    url: str = ""
    fetch: List[RefSpec] = field(default_factory=list)

    # Options of the [remote "<name>"] subsection this remote was parsed
    # from; None until the first unmarshal or marshal
    _raw: Optional[CaseInsensitiveOrderedMultiDict] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        self.fetch = [RefSpec(spec) for spec in self.fetch]

    def validate(self) -> None:
        """
        Check required fields and apply defaults.

        Checks run in order (name, URL, then fetch defaulting) and the first
        failure wins. Calling it again on a valid remote changes nothing.

        Raises:
            RemoteConfigEmptyNameError: If name is empty
            RemoteConfigEmptyURLError: If url is empty
        """
        self.check_required()
        self.apply_defaults()

    def check_required(self) -> None:
        """Raise if name or url is missing, without mutating anything."""
        if not self.name:
            raise RemoteConfigEmptyNameError()

        if not self.url:
            raise RemoteConfigEmptyURLError()

    def apply_defaults(self) -> None:
        """Set the default fetch refspec when none is configured."""
        if not self.fetch:
            self.fetch = [RefSpec.default_fetch(self.name)]

    def _unmarshal(self, name: str, options: CaseInsensitiveOrderedMultiDict) -> None:
        self._raw = options

        fetch = []
        for value in options.get_all(FETCH_KEY):
            spec = RefSpec(_decode(value))
            if spec.is_valid():
                fetch.append(spec)
            else:
                logger.debug(f"Dropping invalid fetch refspec {spec!r} of remote '{name}'")

        urls = list(options.get_all(URL_KEY))

        self.name = name
        self.url = _decode(urls[-1]) if urls else ""
        self.fetch = fetch

    def _marshal(self) -> CaseInsensitiveOrderedMultiDict:
        if self._raw is None:
            self._raw = CaseInsensitiveOrderedMultiDict()

        _set_option(self._raw, URL_KEY, _encode(self.url))

        # Replace, not accumulate, fetch values written by a previous marshal
        if FETCH_KEY in self._raw:
            del self._raw[FETCH_KEY]
        for spec in self.fetch:
            self._raw[FETCH_KEY] = _encode(str(spec))

        return self._raw

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for display."""
        return {
            "name": self.name,
            "url": self.url,
            "fetch": [str(spec) for spec in self.fetch],
        }


@dataclass
class Config:
    """
    Repository configuration.

    Only core.bare and remote.<name>.{url,fetch} are modeled; everything
    else lives in the raw tree and is written back untouched. Not safe for
    concurrent use.
    """

    core: CoreConfig = field(default_factory=CoreConfig)
    remotes: Dict[str, RemoteConfig] = field(default_factory=dict)

    # Raw information of the config file, preserving what is not modeled
    _raw: ConfigFile = field(default_factory=_RawConfig, init=False, repr=False, compare=False)

    def validate(self) -> None:
        """
        Validate every remote and set default values.

        Defaults applied to remotes checked before a failing one stay applied.

        Raises:
            InvalidRemoteNameError: If a remote is keyed under another name
            RemoteConfigEmptyNameError: If a remote has no name
            RemoteConfigEmptyURLError: If a remote has no URL
        """
        for key, remote in self.remotes.items():
            if remote.name != key:
                raise InvalidRemoteNameError(key=key, name=remote.name)

            remote.validate()

    def unmarshal(self, data: bytes) -> None:
        """
        Parse git-config text and derive the typed fields from it.

        The raw tree is replaced before parsing, so a failed parse leaves
        this Config with an empty raw tree.

        Args:
            data: Contents of a git config file

        Raises:
            ConfigDecodeError: If the text is malformed
        """
        self._raw = _RawConfig()
        try:
            raw = _RawConfig.from_file(BytesIO(data), file_opener=_refuse_include)
        except ValueError as e:
            raise ConfigDecodeError(str(e)) from e

        self._raw = raw
        self._unmarshal_core()
        self._unmarshal_remotes()
        logger.debug(f"Parsed config with {len(self.remotes)} remotes")

    def _unmarshal_core(self) -> None:
        try:
            bare = self._raw.get((CORE_SECTION,), BARE_KEY)
        except KeyError:
            bare = None

        self.core = CoreConfig(is_bare=bare == b"true")

    def _unmarshal_remotes(self) -> None:
        remotes = {}
        for section in self._raw.keys():
            if not _is_remote_section(section):
                continue

            remote = RemoteConfig()
            remote._unmarshal(_decode(section[1]), self._raw[section])
            remotes[remote.name] = remote

        self.remotes = remotes

    def marshal(self, sort_remotes: bool = False) -> bytes:
        """
        Encode the configuration as git-config text.

        Every [remote "<name>"] subsection is regenerated from ``remotes``;
        remote subsections without a RemoteConfig are dropped. The remotes
        are written where the first remote section was, or at the end when
        there was none. All other sections are written back as parsed, and
        values git would cut at a comment character are quoted.

        Args:
            sort_remotes: Write remotes sorted by name instead of in
                insertion order

        Returns:
            Encoded config file contents

        Raises:
            ConfigEncodeError: If a remote name cannot be encoded
        """
        self._marshal_core()
        self._marshal_remotes(sort_remotes)

        buf = BytesIO()
        try:
            self._raw.write_to_file(buf)
        except (TypeError, ValueError) as e:
            raise ConfigEncodeError(str(e)) from e

        return buf.getvalue()

    def _marshal_core(self) -> None:
        try:
            options = self._raw[(CORE_SECTION,)]
        except KeyError:
            options = CaseInsensitiveOrderedMultiDict()
            self._raw[(CORE_SECTION,)] = options

        _set_option(options, BARE_KEY, b"true" if self.core.is_bare else b"false")

    def _marshal_remotes(self, sort_remotes: bool) -> None:
        remotes = list(self.remotes.values())
        if sort_remotes:
            remotes.sort(key=lambda r: r.name)

        for remote in remotes:
            if "\n" in remote.name or "\0" in remote.name:
                raise ConfigEncodeError(f"invalid remote name {remote.name!r}")

        sections = [(section, self._raw[section]) for section in self._raw.keys()]

        # Option dicts of another Config's tree are copied, never shared
        owned = {id(options) for section, options in sections if _is_remote_section(section)}
        for remote in remotes:
            if remote._raw is not None and id(remote._raw) not in owned:
                remote._raw = _copy_options(remote._raw)

        rebuilt = [((REMOTE_SECTION, _encode(r.name)), r._marshal()) for r in remotes]

        for section, _ in sections:
            del self._raw[section]

        # Remotes take the place of the first remote section, or go last
        placed = False
        for section, options in sections:
            if _is_remote_section(section):
                if not placed:
                    self._put_sections(rebuilt)
                    placed = True
                continue

            self._raw[section] = options
            if not placed and section[0].lower() == REMOTE_SECTION:
                self._put_sections(rebuilt)
                placed = True

        if not placed:
            self._put_sections(rebuilt)

    def _put_sections(self, sections) -> None:
        for section, options in sections:
            self._raw[section] = options

    def remote(self, name: str) -> RemoteConfig:
        """
        Look up a remote by name.

        Raises:
            RemoteConfigNotFoundError: If no such remote is configured
        """
        try:
            return self.remotes[name]
        except KeyError:
            raise RemoteConfigNotFoundError(name=name) from None

    def add_remote(self, remote: RemoteConfig) -> None:
        """Add or replace a remote, keyed by its name."""
        self.remotes[remote.name] = remote

    def remove_remote(self, name: str) -> RemoteConfig:
        """
        Remove a remote; its subsection disappears on the next marshal.

        Raises:
            RemoteConfigNotFoundError: If no such remote is configured
        """
        try:
            return self.remotes.pop(name)
        except KeyError:
            raise RemoteConfigNotFoundError(name=name) from None

    def to_dict(self) -> Dict[str, Any]:
        """Convert typed fields to a dictionary for display."""
        return {
            "core": {"is_bare": self.core.is_bare},
            "remotes": {name: remote.to_dict() for name, remote in self.remotes.items()},
        }


def new_config() -> Config:
    """Return an empty Config with a fresh raw tree."""
    return Config()
