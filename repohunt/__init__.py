"""repohunt: find every git repository under a directory tree."""

__version__ = "0.1.0"
