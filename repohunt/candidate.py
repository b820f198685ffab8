"""Search candidates: the unit of work on the walk stack."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Candidate:
    path: str
    depth: int = 0
    entry: Optional[os.DirEntry] = None

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"depth must be non-negative, got {self.depth}")

    @classmethod
    def from_path(cls, path: str, depth: int = 0) -> Candidate:
        return cls(path=path, depth=depth)

    @classmethod
    def from_entry(cls, entry: os.DirEntry, depth: int) -> Candidate:
        return cls(path=entry.path, depth=depth, entry=entry)

    def lstat(self) -> os.stat_result:
        """Metadata for the path itself, without following a final symlink.

        Uses the cached directory entry when there is one.
        """
        if self.entry is not None:
            return self.entry.stat(follow_symlinks=False)
        return os.lstat(self.path)

    def with_path(self, path: str) -> Candidate:
        """Same candidate, relocated to ``path`` (drops the cached entry)."""
        return replace(self, path=path, entry=None)
