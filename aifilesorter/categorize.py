"""Assigning a category and subcategory to a single file or directory."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError

from .models import FileType

logger = logging.getLogger(__name__)

DELIMITER = " : "
DEFAULT_TIMEOUT_SECONDS = 10

Categorizer = Callable[[str, FileType], str]
Lookup = Callable[[str, FileType], "Sequence[str] | None"]
ProgressReporter = Callable[[str], None]


class CategorizationTimeout(TimeoutError):
    """Raised when the categorizer does not answer in time."""


def split_category_subcategory(text: str) -> tuple[str, str]:
    """Split ``"Category : Subcategory"`` at the first delimiter.

    Without a delimiter the whole text is the category and the subcategory is empty.
    """
    category, found, subcategory = text.partition(DELIMITER)
    if not found:
        return text, ""
    return category, subcategory


def categorize_with_timeout(
    categorize: Categorizer,
    item_name: str,
    file_type: FileType,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> str:
    """Call ``categorize`` in a background thread and wait at most ``timeout_seconds``.

    Errors raised by ``categorize`` are raised again here. A call that is still
    running when the time is up is left to finish on its own.
    """
    future: Future[str] = Future()

    def worker() -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            result = categorize(item_name, file_type)
        except BaseException as exc:  # handed over to the waiting caller
            future.set_exception(exc)
        else:
            future.set_result(result)

    threading.Thread(target=worker, name="categorize", daemon=True).start()
    try:
        return future.result(timeout=timeout_seconds)
    except FutureTimeoutError:
        raise CategorizationTimeout(
            "Network timeout: LLM response took too long."
        ) from None


def _ignore(_message: str) -> None:
    return None


def categorize_file(
    lookup: Lookup,
    categorize: Categorizer,
    item_name: str,
    file_type: FileType,
    report_progress: ProgressReporter | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> tuple[str, str]:
    """Return the category and subcategory of an item.

    The local ``lookup`` is asked first; if it knows the item, its answer is used.
    Otherwise ``categorize`` is asked, within ``timeout_seconds``. If that fails or
    times out, the result is a pair of empty strings.
    """
    report = report_progress or _ignore

    known = lookup(item_name, file_type)
    if known is not None and len(known) >= 2:
        category, subcategory = known[0], known[1]
        logger.info(
            "Found in local DB: %s - Category: %s, Subcategory: %s",
            item_name,
            category,
            subcategory,
        )
        report(f"\nFound in local DB: {item_name} [{category}/{subcategory}]")
        return category, subcategory

    try:
        try:
            answer = categorize_with_timeout(categorize, item_name, file_type, timeout_seconds)
        except Exception as exc:
            message = f"LLM Timeout/Error: {exc}"
            report(message)
            logger.error("%s", message)
            return "", ""

        category, subcategory = split_category_subcategory(answer)
        report(f"Suggested by AI: {item_name} [{category}/{subcategory}]")
        return category, subcategory
    except Exception as exc:
        message = f'LLM Error "{exc}'
        logger.error("%s", message)
        report(message)
        raise