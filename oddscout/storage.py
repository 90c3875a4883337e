"""Reading saved match files and writing downloaded content."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path


def read_files(path: str | os.PathLike[str]) -> Iterator[str]:
    """Yield the text of every readable UTF-8 file directly inside ``path``.

    Raises OSError when the directory itself cannot be listed; entries that
    cannot be read as text are skipped.
    """
    entries = sorted(Path(path).iterdir())
    return _read_entries(entries)


def _read_entries(entries: list[Path]) -> Iterator[str]:
    for entry in entries:
        try:
            yield entry.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            continue


def save(content: bytes | str, path: str | os.PathLike[str]) -> None:
    """Write ``content`` to ``path``, replacing any existing file."""
    data = content.encode("utf-8") if isinstance(content, str) else content
    Path(path).write_bytes(data)