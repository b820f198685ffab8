"""Symlink handling: skip links outright, or follow them without looping.

Following links turns the directory tree into a graph that may contain
cycles. ``FollowSymlinks`` keeps the set of canonical paths already walked
and refuses to enter any of them twice, which is what guarantees a walk
terminates.
"""

from __future__ import annotations

import errno
import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from repohunt.candidate import Candidate

# Windows reports readlink() on a regular directory as this error
_WIN_NOT_A_REPARSE_POINT = 4390


@dataclass(frozen=True)
class NotSymlink:
    pass


@dataclass(frozen=True)
class SkipSymlink:
    pass


@dataclass(frozen=True)
class FollowSymlink:
    real_path: str


@dataclass(frozen=True)
class AlreadyTraversed:
    path: str


@dataclass(frozen=True)
class ResolveError:
    reason: str


SymlinkResolution = Union[NotSymlink, SkipSymlink, FollowSymlink, AlreadyTraversed, ResolveError]


class SkipSymlinks:
    """Default policy: never step through a symlink."""

    follow = False

    def resolve(self, candidate: Candidate) -> SymlinkResolution:
        try:
            mode = candidate.lstat().st_mode
        except OSError:
            # Can't tell what it is, so don't go in
            return SkipSymlink()
        # Sockets, FIFOs and devices are treated like links
        if stat.S_ISDIR(mode) or stat.S_ISREG(mode):
            return NotSymlink()
        return SkipSymlink()


@dataclass
class FollowSymlinks:
    """Follow links, remembering every real directory already entered."""

    visited: set[str] = field(default_factory=set)

    follow = True

    def seen(self, real_path: str) -> bool:
        """Mark ``real_path`` visited; return True if it already was."""
        if real_path in self.visited:
            return True
        self.visited.add(real_path)
        return False

    def resolve(self, candidate: Candidate) -> SymlinkResolution:
        try:
            os.readlink(candidate.path)
        except OSError as exc:
            if not _is_not_a_link(exc):
                return ResolveError(f"could not read link: {exc.strerror or exc}")
            real = os.path.realpath(candidate.path)
            if self.seen(real):
                return AlreadyTraversed(real)
            return NotSymlink()

        try:
            real = str(Path(candidate.path).resolve(strict=True))
        except (OSError, RuntimeError) as exc:
            return ResolveError(str(exc))

        if self.seen(real):
            return AlreadyTraversed(real)
        return FollowSymlink(real)


SymlinkPolicy = Union[SkipSymlinks, FollowSymlinks]


def make_policy(follow: bool) -> SymlinkPolicy:
    """Build a fresh policy; each walk needs its own visited set."""
    return FollowSymlinks() if follow else SkipSymlinks()


def _is_not_a_link(exc: OSError) -> bool:
    return exc.errno == errno.EINVAL or getattr(exc, "winerror", None) == _WIN_NOT_A_REPARSE_POINT
