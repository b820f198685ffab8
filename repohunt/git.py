"""Repository detection: ``.git`` lookup plus the optional paranoid check."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field
from typing import Optional, Protocol

from repohunt import events
from repohunt.errors import ParanoidCheckError
from repohunt.events import Diagnostic

GIT_DIR = ".git"


class RepositoryValidator(Protocol):
    def validate(self, path: str) -> bool:
        """Return True if ``path`` is a working repository.

        Raises ParanoidCheckError when the check itself can't be run.
        """
        ...


class GitHeadValidator:
    """Confirm a repository by asking git to resolve HEAD."""

    def __init__(self, git: str = "git") -> None:
        self.git = git

    def validate(self, path: str) -> bool:
        try:
            result = subprocess.run(
                [self.git, "rev-parse", "HEAD"],
                cwd=path,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            raise ParanoidCheckError(str(exc)) from exc
        return result.returncode == 0


@dataclass
class Verdict:
    confirmed: bool
    diagnostics: list[Diagnostic] = field(default_factory=list)


class RepoDetector:
    """Decide whether a directory holding ``.git`` should count as a repo."""

    def __init__(self, paranoid: bool = False, validator: Optional[RepositoryValidator] = None) -> None:
        self.paranoid = paranoid
        self.validator = validator if validator is not None else GitHeadValidator()

    def evaluate(self, path: str) -> Verdict:
        if not self.paranoid:
            return Verdict(True)

        verdict = Verdict(False, [events.info(f"Paranoid: checking {path}")])
        try:
            verdict.confirmed = self.validator.validate(path)
        except ParanoidCheckError as exc:
            verdict.diagnostics.append(events.error(
                "Failed to run the paranoid repository check. "
                "Is git installed and configured correctly?"
            ))
            verdict.diagnostics.append(events.error(str(exc)))
            return verdict

        if not verdict.confirmed:
            verdict.diagnostics.append(events.info(f"Paranoid: {path} has no resolvable HEAD, ignoring it"))
        return verdict


def has_git_dir(path: str) -> bool:
    """True if ``path/.git`` is a directory. Worktree ``.git`` files don't count."""
    return os.path.isdir(os.path.join(path, GIT_DIR))


def is_repo(path: str, paranoid: bool = False, validator: Optional[RepositoryValidator] = None) -> bool:
    if not has_git_dir(path):
        return False
    return RepoDetector(paranoid, validator).evaluate(path).confirmed
