"""Checking a remote update description against the running version."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any

import requests

from .settings import Settings
from .version import Version

logger = logging.getLogger(__name__)

URL_ENV_VAR = "UPDATE_SPEC_FILE_URL"
REQUEST_TIMEOUT_SECONDS = 5


class UpdateError(RuntimeError):
    """Raised when update metadata cannot be fetched or understood."""


@dataclass(frozen=True)
class UpdateInfo:
    """What the update description says about the newest release."""

    current_version: str = ""
    min_version: str = ""
    download_url: str = ""


def _as_version(value: Version | str) -> Version:
    return value if isinstance(value, Version) else Version.parse(value)


def _string_field(update: dict[str, Any], key: str) -> str:
    value = update.get(key)
    return value if isinstance(value, str) else ""


def parse_update_spec(text: str, app_version: Version | str) -> UpdateInfo | None:
    """Parse an update description; return it only if it offers a newer version.

    The document looks like ``{"update": {"current_version": ..., "min_version": ...,
    "download_url": ...}}``. Fields that are missing or not strings are left empty.
    """
    try:
        root = json.loads(text)
    except json.JSONDecodeError as exc:
        raise UpdateError(f"JSON Parse Error: {exc}") from exc

    if not isinstance(root, dict) or "update" not in root:
        return None

    update = root["update"]
    if not isinstance(update, dict):
        update = {}

    info = UpdateInfo(
        current_version=_string_field(update, "current_version"),
        min_version=_string_field(update, "min_version"),
        download_url=_string_field(update, "download_url"),
    )

    if _as_version(app_version) >= Version.parse(info.current_version):
        return None
    return info


class Updater:
    """Fetches the update description and decides what to offer the user."""

    def __init__(
        self,
        settings: Settings,
        app_version: Version | str,
        url: str | None = None,
    ) -> None:
        if url is None:
            url = os.environ.get(URL_ENV_VAR)
            if not url:
                raise UpdateError(f"Environment variable {URL_ENV_VAR} is not set")
        self.settings = settings
        self.app_version = _as_version(app_version)
        self.url = url
        self.update_info: UpdateInfo | None = None

    def fetch_update_metadata(self) -> str:
        """Download the update description and return its text."""
        try:
            response = requests.get(
                self.url,
                headers={"Content-Type": "application/json"},
                timeout=REQUEST_TIMEOUT_SECONDS,
            )
        except requests.RequestException as exc:
            raise UpdateError(f"Network Error: {exc}") from exc

        status = response.status_code
        if status == 401:
            raise UpdateError("Authentication Error: Invalid or missing API key.")
        if status == 403:
            raise UpdateError(
                "Authorization Error: API key does not have sufficient permissions."
            )
        if status >= 500:
            raise UpdateError(
                f"Server Error: The server returned an error. Status code: {status}"
            )
        if status >= 400:
            raise UpdateError(
                f"Client Error: The server returned an error. Status code: {status}"
            )
        return response.text

    def check_updates(self) -> UpdateInfo | None:
        """Fetch the description and remember the update it offers, if any."""
        self.update_info = parse_update_spec(self.fetch_update_metadata(), self.app_version)
        return self.update_info

    def is_update_available(self) -> bool:
        """Check for updates and report whether a newer version exists."""
        return self.check_updates() is not None

    def is_update_required(self) -> bool:
        """True if the running version is older than the update's minimum version."""
        info = self.update_info or UpdateInfo()
        return Version.parse(info.min_version) > self.app_version

    def is_update_skipped(self) -> bool:
        """True if the user chose to skip a version at least as new as this one."""
        return self.app_version <= Version.parse(self.settings.skipped_version)

    def skip_current_update(self) -> bool:
        """Record the offered version as skipped and save settings; True on success."""
        if self.update_info is None:
            raise UpdateError("No update information available.")
        skipped = self.update_info.current_version
        self.settings.skipped_version = skipped
        if not self.settings.save():
            logger.error("Failed to save skipped version to settings.")
            return False
        logger.info("User chose to skip version %s.", skipped)
        return True