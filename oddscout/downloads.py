"""Downloading a page through the browser and keeping a copy on disk."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from .storage import save
from .webdriver import WebDriverError

DEFAULT_DIRECTORY = "downloads"


class DownloadError(Exception):
    """Raised when a page could not be downloaded or its copy not saved."""

    def __init__(self, stage: str, cause: Exception) -> None:
        label = "Download" if stage == "download" else "SaveHTML"
        super().__init__(f"{label}({cause})")
        self.stage = stage
        self.cause = cause


def save_html(
    name: str, html: str, directory: str | os.PathLike[str] = DEFAULT_DIRECTORY
) -> Path:
    """Write the HTML to ``<directory>/<name>.html`` and return that path."""
    path = Path(directory) / f"{name}.html"
    save(html, path)
    return path


def run(
    client: Any, page: Any, directory: str | os.PathLike[str] = DEFAULT_DIRECTORY
) -> str:
    """Download ``page`` with ``client``, save a copy and return the HTML."""
    try:
        html = page.download(client)
    except WebDriverError as error:
        raise DownloadError("download", error) from error
    try:
        save_html(page.name(), html, directory)
    except OSError as error:
        raise DownloadError("save", error) from error
    return html