"""A categorized file that can be moved into its category folder."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class MovableCategorizedFile:
    """A file (or directory) in ``dir_path`` assigned a category and subcategory."""

    def __init__(
        self,
        dir_path: str | os.PathLike[str],
        category: str,
        subcategory: str,
        file_name: str,
        file_type: str,
    ) -> None:
        if not str(dir_path) or not category or not subcategory or not file_name:
            raise ValueError("Invalid path component in categorized file.")
        self.dir_path = Path(dir_path)
        self.category = category
        self.subcategory = subcategory
        self.file_name = file_name
        self.file_type = file_type

    @property
    def category_path(self) -> Path:
        """Folder for the category inside ``dir_path``."""
        return self.dir_path / self.category

    @property
    def subcategory_path(self) -> Path:
        """Folder for the subcategory inside the category folder."""
        return self.category_path / self.subcategory

    @property
    def destination_path(self) -> Path:
        """Where the file lands when moved into its subcategory folder."""
        return self.subcategory_path / self.file_name

    def create_cat_dirs(self, use_subcategory: bool) -> None:
        """Create the category folder, and the subcategory folder if asked."""
        try:
            if not self.category_path.exists():
                self.category_path.mkdir()
            if use_subcategory and not self.subcategory_path.exists():
                self.subcategory_path.mkdir()
        except OSError as exc:
            logger.error("Error creating directories: %s", exc)
            raise

    def move_file(self, use_subcategory: bool) -> bool:
        """Move the file into its category folder; return True on success."""
        target_dir = self.subcategory_path if use_subcategory else self.category_path
        destination = target_dir / self.file_name
        source = self.dir_path / self.file_name

        if not source.exists():
            logger.error("Source file does not exist: %s", source)
            return False
        if destination.exists():
            logger.warning("File %s already exists in %s", source, destination)
            return False
        try:
            os.rename(source, destination)
        except OSError as exc:
            logger.error("Error moving file: %s", exc)
            return False
        logger.info("File %s moved to %s", source, destination)
        return True

    def __repr__(self) -> str:
        return (
            f"MovableCategorizedFile(dir_path={str(self.dir_path)!r}, "
            f"category={self.category!r}, subcategory={self.subcategory!r}, "
            f"file_name={self.file_name!r}, file_type={self.file_type!r})"
        )