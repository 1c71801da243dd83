"""One run of analysing a folder: reuse known categories, categorize the rest."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable, Iterable
from pathlib import PurePath

from .models import (
    CategorizedFile,
    FileEntry,
    FileScanOptions,
    FileType,
    compute_files_to_sort,
    extract_file_names,
    find_files_to_categorize,
)

logger = logging.getLogger(__name__)

Scanner = Callable[[str, FileScanOptions], Iterable[FileEntry]]
ProgressReporter = Callable[[str], None]
ItemCategorizer = Callable[[str, FileType, ProgressReporter], "tuple[str, str]"]


def _ignore(_message: str) -> None:
    return None


class AnalysisSession:
    """Analyse a folder, categorizing entries not yet known.

    ``scan(directory, options)`` lists the entries of the folder,
    ``cached_files`` are the categorized files already known for it, and
    ``categorize(name, file_type, report_progress)`` returns the category and
    subcategory of one entry. Progress text goes to ``report``.
    """

    def __init__(
        self,
        directory: str | os.PathLike[str],
        scan: Scanner,
        cached_files: Iterable[CategorizedFile] = (),
        categorize: ItemCategorizer | None = None,
        options: FileScanOptions = FileScanOptions.FILES,
        report: ProgressReporter | None = None,
    ) -> None:
        self.directory = os.fspath(directory)
        self.scan = scan
        self.categorize = categorize
        self.options = options
        self.report = report or _ignore
        self.already_categorized_files: list[CategorizedFile] = list(cached_files)
        self.files_to_categorize: list[FileEntry] = []
        self.new_files_with_categories: list[CategorizedFile] = []
        self.files_to_sort: list[CategorizedFile] = []
        self._stop = threading.Event()

    @property
    def stopped(self) -> bool:
        """True once :meth:`stop` has been called."""
        return self._stop.is_set()

    def stop(self) -> None:
        """Ask the analysis to stop at the next opportunity."""
        self._stop.set()

    def _report_progress(self, message: str) -> None:
        self.report(message + "\n")

    def categorize_files(self, entries: Iterable[FileEntry]) -> list[CategorizedFile]:
        """Categorize each entry in turn; stop early on request or on the first error."""
        if self.categorize is None:
            raise ValueError("No categorizer given.")
        categorized: list[CategorizedFile] = []
        for entry in entries:
            if self.stopped:
                logger.info("Stopping categorization...")
                return categorized
            try:
                dir_path = str(PurePath(entry.full_path).parent)
                category, subcategory = self.categorize(
                    entry.file_name, entry.type, self._report_progress
                )
                categorized.append(
                    CategorizedFile(dir_path, entry.file_name, entry.type, category, subcategory)
                )
            except Exception as exc:
                message = f'Error categorizing file "{entry.file_name}": {exc}'
                self._report_progress(message)
                logger.error("%s", message)
                break
        return categorized

    def run(self) -> list[CategorizedFile]:
        """Run the analysis and return the categorized entries still in the folder.

        Returns an empty list if the analysis was stopped before it finished.
        """
        if not self.directory:
            raise ValueError("No folder path provided.")

        self.report(f"Analyzing contents of {self.directory}\n")
        if self.stopped:
            return []

        if self.already_categorized_files:
            self.report("\nAlready categorized files:\n")
        for item in self.already_categorized_files:
            self.report(f"{item.file_name} [{item.category}/{item.subcategory}]\n")

        cached_names = extract_file_names(self.already_categorized_files)
        if self.stopped:
            return []

        self.files_to_categorize = find_files_to_categorize(
            self.scan(self.directory, self.options), cached_names
        )
        if self.files_to_categorize:
            self.report("\nFiles to categorize:\n")
        else:
            self.report("\nNo files to categorize\n")
        for entry in self.files_to_categorize:
            self.report(f"{entry.file_name}\n")

        if self.stopped:
            return []

        self.report("\n")
        self.new_files_with_categories = self.categorize_files(self.files_to_categorize)
        self.already_categorized_files.extend(self.new_files_with_categories)

        self.files_to_sort = compute_files_to_sort(
            self.scan(self.directory, self.options), self.already_categorized_files
        )
        return self.files_to_sort