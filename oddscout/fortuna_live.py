"""Fortuna live pages: the overview, single live matches and tennis."""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from .fortuna_prematch import COOKIE_ACCEPT
from .webdriver import Client, try_accepting_cookie

LIVE_URL = "https://live.efortuna.pl"


def _soup(html: str | Tag) -> Tag:
    if isinstance(html, Tag):
        return html
    return BeautifulSoup(html, "html.parser")


@dataclass(frozen=True)
class LiveSubpage:
    """A single live match page, addressed by its path."""

    path: str

    def name(self) -> str:
        _, sep, rest = self.path.partition("/mecz/")
        if sep:
            return f"fortuna.live.{rest}"
        return self.path

    def url(self) -> str:
        return f"{LIVE_URL}{self.path}"

    def download(self, client: Client) -> str:
        client.goto(self.url())
        return client.source()


@dataclass(frozen=True)
class LivePage:
    """The live betting overview."""

    def name(self) -> str:
        return "fortuna.live"

    def url(self) -> str:
        return LIVE_URL

    def download(self, client: Client) -> str:
        client.goto(self.url())
        try_accepting_cookie(client, COOKIE_ACCEPT)
        return client.source()

    def subpages(self, html: str | Tag) -> list[LiveSubpage]:
        """Live match pages linked from the overview."""
        return [
            LiveSubpage(link["href"])
            for link in _soup(html).select("div.live-match a[href]")
        ]


@dataclass(frozen=True)
class TennisPage:
    """The live tennis listing."""

    def url(self) -> str:
        return f"{LIVE_URL}/sports/LPLTENNIS"

    def download(self, client: Client) -> str:
        client.goto(self.url())
        try_accepting_cookie(client, COOKIE_ACCEPT)
        return client.source()