"""Exception types raised by repohunt."""

from __future__ import annotations


class RepohuntError(Exception):
    """Base class for all repohunt errors."""


class StartupError(RepohuntError):
    """The search cannot begin (bad search root, no current directory)."""


class ParanoidCheckError(RepohuntError):
    """The external repository check could not be launched."""
