"""Analyse, categorize and sort the contents of a folder, with settings and update checks."""

__version__ = "0.1.0"
__all__ = [
    "analysis",
    "categorize",
    "models",
    "movable",
    "settings",
    "updater",
    "utils",
    "version",
]