"""Searching the odds comparison site for a match."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from bs4 import BeautifulSoup, Tag

from .scrape import clean_text, split2
from .webdriver import ENTER

URL = "https://www.bmbets.com"
SEARCH_DELAY = 4.0


def find_match(client: Any, name: str, delay: float = SEARCH_DELAY) -> str:
    """Search the site for ``name`` and return the results page HTML."""
    client.goto(URL)
    search = client.find('[id="search"]')
    search.send_keys(name)
    search.send_keys(ENTER)
    time.sleep(delay)
    return client.source()


@dataclass(frozen=True)
class Hit:
    """A match found by the search."""

    players: tuple[str, str]
    date: datetime
    relative_url: str


def _parent(element: Tag) -> Tag | None:
    parent = element.parent
    if parent is None or isinstance(parent, BeautifulSoup):
        return None
    return parent


def _parse(text: str, fmt: str) -> datetime | None:
    try:
        return datetime.strptime(text, fmt)
    except ValueError:
        return None


def _hit(link: Tag, year: int) -> Hit | None:
    players = split2(clean_text(link), " - ")
    if players is None:
        return None
    href = link.get("href")
    if href is None:
        return None
    cell = _parent(link)
    row = None if cell is None else _parent(cell)
    if row is None:
        return None
    parts = [clean_text(div) for div in row.select("td.date-col div")]
    if len(parts) < 2:
        return None
    day = _parse(f"{parts[0]}-{year}", "%b-%d-%Y")
    clock = _parse(parts[1], "%H:%M")
    if day is None or clock is None:
        return None
    return Hit(players, datetime.combine(day.date(), clock.time()), str(href))


def hits(html: str | Tag, year: int | None = None) -> list[Hit]:
    """Matches listed on a search results page.

    Dates on the page carry no year; ``year`` (the current one by default)
    is assumed.
    """
    if year is None:
        year = datetime.now().year
    soup = html if isinstance(html, Tag) else BeautifulSoup(html, "html.parser")
    found = []
    for span in soup.select("span.hit"):
        link = _parent(span)
        if link is None:
            continue
        hit = _hit(link, year)
        if hit is not None:
            found.append(hit)
    return found