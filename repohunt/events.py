"""Events produced by a walk: matched repositories and diagnostics."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class Level(enum.Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Match:
    """A directory confirmed as a repository root.

    ``path`` is the raw path as found on disk; pass it through
    ``paths.display_path`` before printing.
    """

    path: str


@dataclass(frozen=True)
class Diagnostic:
    level: Level
    message: str


Event = Union[Match, Diagnostic]


def info(message: str) -> Diagnostic:
    return Diagnostic(Level.INFO, message)


def warning(message: str) -> Diagnostic:
    return Diagnostic(Level.WARNING, message)


def error(message: str) -> Diagnostic:
    return Diagnostic(Level.ERROR, message)
