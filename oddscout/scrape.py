"""Helpers for pulling text out of parsed HTML."""

from __future__ import annotations

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString


def clean_text(element: Tag) -> str:
    """Join the element's text pieces, each stripped, skipping empty ones."""
    pieces = (piece.strip() for piece in element.strings)
    return " ".join(piece for piece in pieces if piece)


def main_text(element: Tag) -> str:
    """Return the stripped first child of the element if it is plain text."""
    child = next(iter(element.children), None)
    if isinstance(child, NavigableString) and not isinstance(
        child, PreformattedString
    ):
        return child.strip()
    return ""


def split2(text: str, on: str) -> tuple[str, str] | None:
    """Split ``text`` on ``on`` into exactly two parts, or return None."""
    parts = text.split(on)
    if len(parts) != 2:
        return None
    first, second = parts
    return first, second