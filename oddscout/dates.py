"""Parsing of the date formats used by the bookmaker pages and saved files."""

from __future__ import annotations

from datetime import datetime, timedelta

_SHORT_FORMAT = "%d.%m. %H:%M.%Y"
_FULL_FORMAT = "%Y-%m-%d %H:%M"


def _parse(text: str, fmt: str) -> datetime | None:
    try:
        return datetime.strptime(text, fmt)
    except ValueError:
        return None


def eat(text: str, now: datetime | None = None) -> datetime | None:
    """Parse ``"dd.mm. HH:MM"`` as the next such moment not before ``now``.

    The current year is tried first; if that moment has already passed,
    the following year is used. Returns None when the text does not parse.
    """
    if now is None:
        now = datetime.now()
    first = _parse(f"{text}.{now.year}", _SHORT_FORMAT)
    if first is None:
        return None
    if first >= now:
        return first
    return _parse(f"{text}.{now.year + 1}", _SHORT_FORMAT)


def eat2(text: str) -> datetime | None:
    """Parse ``"YYYY-mm-dd HH:MM"``, returning None when it does not match."""
    return _parse(text, _FULL_FORMAT)


def in_hours(date: datetime, hours: int, now: datetime | None = None) -> bool:
    """Tell whether ``date`` is no later than ``hours`` hours from ``now``."""
    if now is None:
        now = datetime.now()
    return date <= now + timedelta(hours=hours)