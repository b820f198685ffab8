"""Walk configuration and search-root resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from repohunt.errors import StartupError

DEFAULT_MAX_DEPTH = 10


@dataclass(frozen=True)
class WalkOptions:
    root: str
    follow_symlinks: bool = False
    show_all: bool = False
    paranoid: bool = False
    verbose: bool = False
    # None means no depth limit
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH
    # Keep searching below directories the paranoid check rejected
    descend_rejected: bool = False

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")

    def within_depth(self, depth: int) -> bool:
        return self.max_depth is None or depth <= self.max_depth


def resolve_search_root(path: Optional[str] = None) -> str:
    """Canonicalize the search root, defaulting to the current directory.

    Raises StartupError if the root can't be determined or isn't a directory.
    """
    if path is None:
        try:
            return os.getcwd()
        except OSError as exc:
            raise StartupError(f"Could not get current directory => {exc}") from exc

    expanded = os.path.expanduser(path)
    try:
        canonical = os.path.realpath(expanded, strict=True)
    except OSError as exc:
        raise StartupError(f"Directory `{path}` is invalid or does not exist => {exc}") from exc
    if not os.path.isdir(canonical):
        raise StartupError(f"{path} is not a directory.")
    return canonical
