"""Shared visual constants for repohunt output."""

from __future__ import annotations

from rich.style import Style

from repohunt.events import Level

# ── Color Palette (GitHub Dark) ─────────────────────────────────────────

CYAN = "#58a6ff"
GREEN = "#39d353"
YELLOW = "#e3b341"
RED = "#f85149"

# Diagnostic colors by severity
LEVEL_STYLES: dict[Level, Style] = {
    Level.INFO: Style(color=CYAN),
    Level.WARNING: Style(color=YELLOW),
    Level.ERROR: Style(color=RED, bold=True),
}

MATCH_STYLE = Style(color=GREEN)
