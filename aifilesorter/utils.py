"""Small helpers for paths, directories, the network and the environment."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def is_network_available(host: str = "google.com") -> bool:
    """Return True if a single ping to ``host`` succeeds."""
    count_flag = "-n" if sys.platform.startswith("win") else "-c"
    try:
        result = subprocess.run(
            ["ping", count_flag, "1", host],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0


def get_executable_path() -> str:
    """Return the absolute path of the running program."""
    argv0 = sys.argv[0] if sys.argv else ""
    if argv0 and Path(argv0).is_file():
        return str(Path(argv0).resolve())
    if sys.executable:
        return str(Path(sys.executable).resolve())
    raise RuntimeError("Cannot determine the executable path")


def is_valid_directory(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` names an existing directory."""
    return os.path.isdir(path)


def hex_to_bytes(text: str) -> bytes:
    """Decode a string of hexadecimal digits, two per byte.

    A trailing single digit is decoded as a byte of its own.
    """
    return bytes(int(text[start:start + 2], 16) for start in range(0, len(text), 2))


def ensure_directory_exists(path: str | os.PathLike[str]) -> None:
    """Create ``path`` and any missing parents if it does not exist."""
    try:
        if not os.path.exists(path):
            os.makedirs(path)
    except OSError as exc:
        logger.error("Error creating directory %s: %s", path, exc)
        raise


def add_to_path(directory: str) -> str:
    """Append ``directory`` to this process's PATH and return the new value."""
    current = os.environ.get("PATH")
    if not current:
        raise LookupError("Failed to retrieve PATH environment variable.")
    new_path = current + os.pathsep + directory
    os.environ["PATH"] = new_path
    logger.info("Updated PATH: %s", new_path)
    return new_path