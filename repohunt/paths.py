"""Path display helpers."""

from __future__ import annotations

import os

# Windows extended-length prefix, e.g. \\?\C:\code
WIN_EXTENDED_PREFIX = "\\\\?\\"

# Paths shorter than this don't need the extended prefix to be usable
WIN_STANDARD_MAX_PATH = 160


def printable(text: str) -> str:
    """Make ``text`` safe to write to a UTF-8 stream.

    Undecodable bytes in file names come back from ``os`` as surrogate
    escapes; they are shown as U+FFFD instead.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def display_path(path: str, *, windows: bool | None = None) -> str:
    """Return ``path`` in the form users expect to see it printed.

    On Windows, canonicalization can hand back ``\\\\?\\``-prefixed paths.
    The prefix is stripped when the remaining path is short enough to be
    used without it. The result is always printable, lossily if needed.
    """
    if windows is None:
        windows = os.name == "nt"
    if (
        windows
        and path.startswith(WIN_EXTENDED_PREFIX)
        and len(path) < WIN_STANDARD_MAX_PATH + len(WIN_EXTENDED_PREFIX)
    ):
        path = path[len(WIN_EXTENDED_PREFIX):]
    return printable(path)
