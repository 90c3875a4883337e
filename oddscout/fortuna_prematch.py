"""Fortuna pre-match pages: addresses, the football listing and match pages."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime

from bs4 import BeautifulSoup, Tag

from . import dates
from .event import Event, Match, ParseError
from .scrape import clean_text, main_text, split2
from .webdriver import Client, try_accepting_cookie

COOKIE_ACCEPT = 'button[id="cookie-consent-button-accept"]'
PREMATCH_URL = "https://www.efortuna.pl"
FOOTBALL_PATH = "/zaklady-bukmacherskie/pilka-nozna"

_SCROLL = "window.scrollTo(0, document.body.scrollHeight);"


def _soup(html: str | Tag) -> Tag:
    if isinstance(html, Tag):
        return html
    return BeautifulSoup(html, "html.parser")


def _parse_odd(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


@dataclass(frozen=True)
class Subpage:
    """A single match page, addressed by its path below the site root."""

    path: str

    def name(self) -> str:
        return self.path.replace("/", ".")

    def url(self) -> str:
        return f"{PREMATCH_URL}{self.path}"

    def download(self, client: Client) -> str:
        """Open the match page and return its HTML."""
        client.goto(self.url())
        return client.source()


@dataclass(frozen=True)
class FortunaUrl:
    """A recognised pre-match address: the root, the football listing or a match."""

    football: bool = False
    subpage: Subpage | None = None

    def name(self) -> str:
        if not self.football:
            return "fortuna."
        suffix = self.subpage.name() if self.subpage is not None else ""
        return f"fortuna.football{suffix}"


def parse_url(text: str) -> FortunaUrl:
    """Recognise a pre-match address; raise ParseError for other sites."""
    if not text.startswith(PREMATCH_URL):
        raise ParseError(f"not a pre-match address: {text!r}")
    rest = text[len(PREMATCH_URL):]
    if not rest.startswith(FOOTBALL_PATH):
        return FortunaUrl()
    path = rest[len(FOOTBALL_PATH):]
    return FortunaUrl(football=True, subpage=Subpage(path) if path else None)


@dataclass(frozen=True)
class FootballPage:
    """The football listing, which loads more matches as it is scrolled."""

    scroll_delay: float = 2.0

    def name(self) -> str:
        return "fortuna.football"

    def url(self) -> str:
        return f"{PREMATCH_URL}{FOOTBALL_PATH}"

    def download(self, client: Client) -> str:
        """Open the listing, scroll until no new matches appear, return the HTML."""
        client.goto(self.url())
        try_accepting_cookie(client, COOKIE_ACCEPT)
        previous = 0
        while True:
            count = len(client.find_all(".event-link"))
            if count == previous:
                print("nothing new")
                break
            print(f"found: {count}")
            previous = count
            client.execute(_SCROLL, [])
            time.sleep(self.scroll_delay)
        return client.source()

    def subpages(
        self, html: str | Tag, now: datetime | None = None
    ) -> list[tuple[Subpage, datetime]]:
        """Match pages listed in the HTML with their start times.

        Raises ParseError when a listed start time cannot be read.
        """
        found = []
        for row in _soup(html).select("table.events-table tr"):
            link = row.select_one("a.event-link[href]")
            if link is None:
                continue
            stamp = row.select_one("span.event-datetime")
            if stamp is None:
                continue
            text = clean_text(stamp)
            when = dates.eat(text, now)
            if when is None:
                raise ParseError(f"bad event time: {text!r}")
            found.append((Subpage(link["href"]), when))
        return found


def players(html: str | Tag) -> tuple[str, str] | None:
    """The two sides named on a match page, or None if not split by " - "."""
    name = _soup(html).select_one("span.event-name")
    if name is None:
        raise ParseError("match page has no event name")
    return split2(clean_text(name), " - ")


def result_event(html: str | Tag) -> Event | None:
    """The main market from the page's events table, if there is one."""
    table = _soup(html).select_one("table.events-table")
    if table is None:
        return None
    head = table.select_one("thead")
    body = table.select_one("tbody")
    if head is None or body is None:
        raise ParseError("events table without head or body")
    market = head.select_one("span.market-sub-name")
    if market is None:
        raise ParseError("events table without market name")
    names = [main_text(n) for n in head.select("span.odds-name")]
    values = [
        odd
        for odd in (_parse_odd(clean_text(v)) for v in body.select("span.odds-value"))
        if odd is not None
    ]
    return Event(main_text(market), list(zip(names, values)))


def _market_event(market: Tag) -> Event:
    title = market.select_one("h3 > a")
    if title is None:
        raise ParseError("market without a title")
    odds = []
    for link in market.select("div.odds a"):
        name = link.select_one("span.odds-name")
        value = link.select_one("span.odds-value")
        if name is None or value is None:
            continue
        odd = _parse_odd(clean_text(value))
        if odd is None:
            continue
        odds.append((main_text(name), odd))
    return Event(clean_text(title), odds)


def events(html: str | Tag) -> list[Event]:
    """All markets of a match page, the main one first."""
    soup = _soup(html)
    rest = [_market_event(market) for market in soup.select("div.market")]
    main = result_event(soup)
    return ([main] if main is not None else []) + rest


def event_date(html: str | Tag) -> str:
    """The start time text shown on a match page."""
    stamp = _soup(html).select_one("span.event-datetime")
    if stamp is None:
        raise ParseError("match page has no event time")
    return clean_text(stamp)


def to_match(url: str, html: str | Tag, now: datetime | None = None) -> Match | None:
    """Build a match from a match page; None without sides, markets or a date."""
    soup = _soup(html)
    sides = players(soup)
    if sides is None:
        return None
    found = events(soup)
    if not found:
        return None
    when = dates.eat(event_date(soup), now)
    if when is None:
        return None
    return Match(url, when, sides, found)