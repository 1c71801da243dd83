"""Entries found in a folder and the category data attached to them."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass


class FileType(str, enum.Enum):
    """Whether an entry is a regular file or a directory."""

    FILE = "F"
    DIRECTORY = "D"


class FileScanOptions(enum.Flag):
    """Which kinds of entries a folder scan includes."""

    NONE = 0
    FILES = enum.auto()
    DIRECTORIES = enum.auto()


@dataclass(frozen=True)
class FileEntry:
    """An entry found in a scanned folder."""

    full_path: str
    file_name: str
    type: FileType


@dataclass(frozen=True)
class CategorizedFile:
    """An entry together with the category and subcategory assigned to it."""

    file_path: str
    file_name: str
    type: FileType
    category: str
    subcategory: str


def update_scan_options(
    options: FileScanOptions, option: FileScanOptions, is_active: bool
) -> FileScanOptions:
    """Return ``options`` with ``option`` switched on or off."""
    return options | option if is_active else options & ~option


def extract_file_names(categorized_files: Iterable[CategorizedFile]) -> set[str]:
    """Return the set of names of the given categorized files."""
    return {item.file_name for item in categorized_files}


def find_files_to_categorize(
    entries: Iterable[FileEntry], cached_names: set[str] | frozenset[str]
) -> list[FileEntry]:
    """Return the entries whose names are not already cached, in order."""
    return [entry for entry in entries if entry.file_name not in cached_names]


def compute_files_to_sort(
    entries: Iterable[FileEntry], categorized_files: Iterable[CategorizedFile]
) -> list[CategorizedFile]:
    """Return category data for each entry still present, in entry order.

    An entry matches the first categorized file with the same name and type;
    entries without a match are left out.
    """
    known: dict[tuple[str, FileType], CategorizedFile] = {}
    for item in categorized_files:
        known.setdefault((item.file_name, item.type), item)
    return [
        known[key]
        for key in ((entry.file_name, entry.type) for entry in entries)
        if key in known
    ]