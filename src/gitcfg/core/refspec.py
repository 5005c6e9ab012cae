"""
Refspec handling.

A refspec maps source refs to destination refs for fetch and push, e.g.
``+refs/heads/*:refs/remotes/origin/*``. A leading ``+`` forces
non-fast-forward updates, and a single ``*`` on each side acts as a glob.

Modified: 2025-11-07
"""

from typing import Iterable

DEFAULT_FETCH_REFSPEC = "+refs/heads/*:refs/remotes/%s/*"
DEFAULT_PUSH_REFSPEC = "refs/heads/*:refs/heads/*"

_WILDCARD = "*"
_FORCE = "+"
_SEPARATOR = ":"


class RefSpec(str):
    """
    A refspec string.

    Instances are plain strings, so they compare, hash and serialize like
    the text they were built from. Use ``is_valid`` before relying on the
    other helpers.
    """

    @classmethod
    def default_fetch(cls, remote_name: str) -> "RefSpec":
        """Build the default fetch refspec for a remote."""
        return cls(DEFAULT_FETCH_REFSPEC % remote_name)

    def is_valid(self) -> bool:
        """Check the refspec grammar."""
        if self.count(_SEPARATOR) != 1:
            return False

        sep = self.index(_SEPARATOR)
        if sep == len(self) - 1:
            return False

        ws = self[:sep].count(_WILDCARD)
        wd = self[sep + 1 :].count(_WILDCARD)
        return ws == wd and ws < 2

    def is_force_update(self) -> bool:
        """True when non-fast-forward updates are allowed."""
        return self.startswith(_FORCE)

    def is_delete(self) -> bool:
        """True for push refspecs with an empty source (``:refs/heads/x``)."""
        return self.startswith(_SEPARATOR)

    def is_wildcard(self) -> bool:
        return _WILDCARD in self

    def src(self) -> str:
        """Source side, without the force marker."""
        start = 1 if self.is_force_update() else 0
        return self[start : self.index(_SEPARATOR)]

    def match(self, ref_name: str) -> bool:
        """Check whether ``ref_name`` is selected by the source side."""
        if not self.is_wildcard():
            return self.src() == ref_name

        src = self.src()
        wildcard = src.index(_WILDCARD)
        prefix = src[:wildcard]
        suffix = src[wildcard + 1 :]

        return (
            len(ref_name) > len(prefix) + len(suffix)
            and ref_name.startswith(prefix)
            and ref_name.endswith(suffix)
        )

    def dst(self, ref_name: str) -> str:
        """
        Map a source ref to its destination.

        Args:
            ref_name: Ref matched by this refspec

        Returns:
            Destination ref name; for wildcard refspecs the part matched by
            ``*`` on the source side replaces ``*`` on the destination side
        """
        dst = self[self.index(_SEPARATOR) + 1 :]
        if not self.is_wildcard():
            return dst

        src = self.src()
        ws = src.index(_WILDCARD)
        wd = dst.index(_WILDCARD)
        matched = ref_name[ws : len(ref_name) - (len(src) - (ws + 1))]
        return dst[:wd] + matched + dst[wd + 1 :]


def match_any(specs: Iterable[RefSpec], ref_name: str) -> bool:
    """Return True if any refspec matches ``ref_name``."""
    return any(spec.match(ref_name) for spec in specs)
