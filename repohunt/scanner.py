"""Repo discovery: walk a directory tree and report every git repository root.

The walk is an explicit depth-first search over a list used as a stack.
When a directory turns out to be a repository, everything pushed while
scanning it is popped straight back off, so nothing beneath a reported
repository (submodules, vendored checkouts) is ever visited.
"""

from __future__ import annotations

import os
from typing import Iterator, Optional

from repohunt import events
from repohunt.candidate import Candidate
from repohunt.events import Event, Match
from repohunt.git import GIT_DIR, RepoDetector, RepositoryValidator
from repohunt.options import DEFAULT_MAX_DEPTH, WalkOptions
from repohunt.paths import display_path
from repohunt.symlinks import (
    AlreadyTraversed,
    FollowSymlink,
    NotSymlink,
    ResolveError,
    SkipSymlink,
    SymlinkPolicy,
    make_policy,
)


def should_skip(name: str | bytes, show_all: bool) -> bool:
    """True if a directory called ``name`` should not be searched."""
    if show_all:
        return False
    try:
        text = name.decode("utf-8") if isinstance(name, bytes) else name
        text.encode("utf-8")
    except UnicodeError:
        # Undecodable names are treated as hidden
        return True
    return text.startswith(".")


def _resolve(candidate: Candidate, policy: SymlinkPolicy) -> tuple[Optional[Candidate], list[events.Diagnostic]]:
    """Apply the symlink policy. Returns (candidate to scan or None, diagnostics)."""
    shown = display_path(candidate.path)
    resolution = policy.resolve(candidate)

    if isinstance(resolution, NotSymlink):
        return candidate, []
    if isinstance(resolution, FollowSymlink):
        return candidate.with_path(resolution.real_path), [
            events.info(f"Following symlink {shown} -> {display_path(resolution.real_path)}")
        ]
    if isinstance(resolution, SkipSymlink):
        return None, [events.info(f"Skipping {shown}, because it is a symlink")]
    if isinstance(resolution, AlreadyTraversed):
        return None, [events.info(f"Skipping {shown}, the directory has already been traversed")]
    if isinstance(resolution, ResolveError):
        return None, [events.warning(
            f"Tried to follow symlink {shown}, but there was an error resolving "
            f"the link target => {resolution.reason}"
        )]
    raise TypeError(f"unexpected symlink resolution: {resolution!r}")


def walk(options: WalkOptions, validator: Optional[RepositoryValidator] = None) -> Iterator[Event]:
    """Yield a Match for every repository under ``options.root``, plus diagnostics.

    The root itself counts: if it holds ``.git`` it is the only match.
    """
    policy = make_policy(options.follow_symlinks)
    detector = RepoDetector(options.paranoid, validator)
    stack: list[Candidate] = [Candidate.from_path(options.root, 0)]

    while stack:
        candidate, notes = _resolve(stack.pop(), policy)
        yield from notes
        if candidate is None:
            continue

        shown = display_path(candidate.path)
        child_depth = candidate.depth + 1
        descend = options.within_depth(child_depth)
        checkpoint = len(stack)
        matched = False
        rejected = False

        try:
            with os.scandir(candidate.path) as entries:
                for entry in entries:
                    try:
                        is_dir = entry.is_dir()
                    except OSError as exc:
                        yield events.warning(f"Can't inspect {display_path(entry.path)}. {exc.strerror or exc}")
                        continue
                    if not is_dir:
                        continue
                    if entry.name == GIT_DIR:
                        verdict = detector.evaluate(candidate.path)
                        yield from verdict.diagnostics
                        if verdict.confirmed:
                            matched = True
                            break
                        rejected = True
                        if not options.descend_rejected:
                            break
                        continue
                    if not descend or should_skip(entry.name, options.show_all):
                        continue
                    stack.append(Candidate.from_entry(entry, child_depth))
        except OSError as exc:
            del stack[checkpoint:]
            yield events.error(f"Can't walk directory {shown}. {exc.strerror or exc}")
            continue

        if matched:
            yield Match(candidate.path)
        if matched or (rejected and not options.descend_rejected):
            # Backtrack: nothing below this directory gets searched
            del stack[checkpoint:]


def find_repos(
    root: str,
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
    *,
    follow_symlinks: bool = False,
    show_all: bool = False,
    paranoid: bool = False,
    validator: Optional[RepositoryValidator] = None,
) -> list[str]:
    """Library shortcut around walk(): the matched paths under ``root``, sorted.

    Paths are returned exactly as found on disk, undecodable bytes included.
    Diagnostics are dropped; iterate walk() directly to see them.
    """
    root = os.path.abspath(os.path.expanduser(root))
    options = WalkOptions(
        root=root,
        follow_symlinks=follow_symlinks,
        show_all=show_all,
        paranoid=paranoid,
        max_depth=max_depth,
    )
    repos = [event.path for event in walk(options, validator) if isinstance(event, Match)]
    repos.sort()
    return repos
