"""Reporter: prints matches to stdout and diagnostics to stderr."""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console

from repohunt.events import Diagnostic, Event, Level, Match
from repohunt.paths import display_path, printable
from repohunt.theme import LEVEL_STYLES, MATCH_STYLE


class Reporter:
    """Render walk events.

    Errors always reach stderr; info and warnings only when verbose.
    """

    def __init__(
        self,
        verbose: bool = False,
        out: Optional[Console] = None,
        err: Optional[Console] = None,
    ) -> None:
        self.verbose = verbose
        self.out = out if out is not None else Console(emoji=False)
        self.err = err if err is not None else Console(stderr=True, emoji=False)
        self.matches = 0
        self.errors = 0

    def wants(self, level: Level) -> bool:
        return self.verbose or level is Level.ERROR

    def match(self, match: Match) -> None:
        self.matches += 1
        self.out.print(
            display_path(match.path),
            style=MATCH_STYLE,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def diagnostic(self, diagnostic: Diagnostic) -> None:
        if diagnostic.level is Level.ERROR:
            self.errors += 1
        if not self.wants(diagnostic.level):
            return
        self.err.print(
            printable(diagnostic.message),
            style=LEVEL_STYLES[diagnostic.level],
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def handle(self, event: Event) -> None:
        if isinstance(event, Match):
            self.match(event)
        elif isinstance(event, Diagnostic):
            self.diagnostic(event)
        else:
            raise TypeError(f"unexpected event: {event!r}")

    def consume(self, stream: Iterable[Event]) -> None:
        for event in stream:
            self.handle(event)
