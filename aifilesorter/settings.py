"""Persistent user settings stored in an INI file."""

from __future__ import annotations

import configparser
import logging
import os
import re
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

APP_NAME = "AIFileSorter"
SECTION = "Settings"

_USER_DIRS_LINE = re.compile(r'^\s*XDG_DOWNLOAD_DIR\s*=\s*"?(?P<value>[^"]*)"?\s*$')


def define_config_path() -> str:
    """Return the platform-specific path of the configuration file."""
    if sys.platform.startswith("win"):
        app_data = os.environ.get("APPDATA")
        if app_data:
            return str(Path(app_data) / APP_NAME / "config.ini")
    else:
        home = os.environ.get("HOME")
        if home:
            if sys.platform == "darwin":
                return str(Path(home) / "Library" / "Application Support" / APP_NAME / "config.ini")
            return str(Path(home) / ".config" / APP_NAME / "config.ini")
    return "config.ini"


def _xdg_download_dir(home: Path) -> str | None:
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(home / ".config")
    user_dirs = Path(config_home) / "user-dirs.dirs"
    try:
        lines = user_dirs.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        return None
    for line in lines:
        match = _USER_DIRS_LINE.match(line)
        if match:
            value = match.group("value").replace("$HOME", str(home))
            if value and value.rstrip("/") != str(home).rstrip("/"):
                return value
    return None


def default_sort_folder() -> str:
    """Return the user's download folder, or the home folder if there is none."""
    home = Path.home()
    if not (sys.platform.startswith("win") or sys.platform == "darwin"):
        xdg = _xdg_download_dir(home)
        if xdg:
            return xdg
    downloads = home / "Downloads"
    if downloads.is_dir():
        return str(downloads)
    return str(home)


class Settings:
    """Application settings backed by the ``[Settings]`` section of an INI file."""

    def __init__(self, config_path: str | os.PathLike[str] | None = None) -> None:
        self.config_path = Path(config_path if config_path is not None else define_config_path())
        self.use_subcategories = True
        self.categorize_files = True
        self.categorize_directories = False
        self.skipped_version = ""
        self.default_folder = default_sort_folder()
        self.sort_folder = self.default_folder
        self._config = self._new_parser()

        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Failed to create configuration directory: %s", exc)

    @staticmethod
    def _new_parser() -> configparser.ConfigParser:
        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str  # keep key case as written
        return parser

    @property
    def config_dir(self) -> Path:
        """Directory that holds the configuration file."""
        return self.config_path.parent

    def load(self) -> bool:
        """Read the settings file; return False and keep defaults if it cannot be read."""
        parser = self._new_parser()
        try:
            read = parser.read(self.config_path, encoding="utf-8")
        except (configparser.Error, OSError, UnicodeDecodeError) as exc:
            logger.info("Cannot read settings file %s: %s", self.config_path, exc)
            read = []
        if not read:
            self.sort_folder = self.default_folder or "/"
            return False

        self._config = parser

        def value(key: str, default: str) -> str:
            return parser.get(SECTION, key, fallback=default)

        self.use_subcategories = value("UseSubcategories", "false") == "true"
        self.categorize_files = value("CategorizeFiles", "true") == "true"
        self.categorize_directories = value("CategorizeDirectories", "false") == "true"
        self.sort_folder = value("SortFolder", self.default_folder or "/")
        self.skipped_version = value("SkippedVersion", "0.0.0")
        return True

    def save(self) -> bool:
        """Write the settings file; return True on success."""
        if not self._config.has_section(SECTION):
            self._config.add_section(SECTION)
        section = self._config[SECTION]
        section["UseSubcategories"] = "true" if self.use_subcategories else "false"
        section["CategorizeFiles"] = "true" if self.categorize_files else "false"
        section["CategorizeDirectories"] = "true" if self.categorize_directories else "false"
        section["SortFolder"] = self.sort_folder
        if self.skipped_version:
            section["SkippedVersion"] = self.skipped_version

        try:
            with open(self.config_path, "w", encoding="utf-8") as handle:
                self._config.write(handle)
        except OSError as exc:
            logger.error("Failed to save settings to %s: %s", self.config_path, exc)
            return False
        return True

    def __repr__(self) -> str:
        return (
            f"Settings(config_path={str(self.config_path)!r}, "
            f"use_subcategories={self.use_subcategories}, "
            f"categorize_files={self.categorize_files}, "
            f"categorize_directories={self.categorize_directories}, "
            f"sort_folder={self.sort_folder!r}, skipped_version={self.skipped_version!r})"
        )