"""STS live pages, including the tennis listing and its matches."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from .scrape import clean_text
from .webdriver import Client, localhost, try_accepting_cookie

LIVE_URL = "https://www.sts.pl/live"
TENNIS_PATH = "/tenis"
COOKIE_ACCEPT = 'button[id="CybotCookiebotDialogBodyLevelButtonLevelOptinAllowAll"]'
WEBDRIVER_PORT = 4444

_SCROLL = """
    let el = document.querySelector('.live-matchtiles-wrapper');
    if (!el) return "no .live-matchtiles-wrapper";
    let event = new MouseEvent('wheel', {
        deltaY: 1000,
        bubbles: true,
        cancelable: true,
        view: window,
    });

    el.dispatchEvent(event);
    return "scrolled";
"""


def _soup(html: str | Tag) -> Tag:
    if isinstance(html, Tag):
        return html
    return BeautifulSoup(html, "html.parser")


@dataclass(frozen=True)
class LivePage:
    """The live betting overview."""

    def name(self) -> str:
        return "sts.live"

    def url(self) -> str:
        return LIVE_URL

    def download(self, client: Client) -> str:
        client.goto(self.url())
        try_accepting_cookie(client, COOKIE_ACCEPT)
        return client.source()


@dataclass(frozen=True)
class Subpage:
    """A live match linked from a league, with the league's name."""

    url: str
    tournament: str


@dataclass(frozen=True)
class TennisPage:
    """The live tennis listing, which loads more leagues as it is scrolled."""

    settle_delay: float = 1.0
    scroll_delay: float = 2.0
    final_delay: float = 4.0

    def name(self) -> str:
        return "sts.live.tennis"

    def url(self) -> str:
        return f"{LIVE_URL}{TENNIS_PATH}"

    def download(self, client: Client) -> str:
        """Open the listing, scroll until no new leagues appear, return the HTML."""
        client.goto(self.url())
        time.sleep(self.settle_delay)
        try_accepting_cookie(client, COOKIE_ACCEPT)
        previous = 0
        while True:
            count = len(client.find_all("bb-live-league"))
            if count == previous:
                print("nothing new")
                break
            print(f"found: {count}")
            previous = count
            result = client.execute(_SCROLL, [])
            print(f"scroll result: {result!r}")
            time.sleep(self.scroll_delay)
        time.sleep(self.final_delay)
        return client.source()

    def subpages(self, html: str | Tag) -> list[Subpage]:
        """The first match of every league that has a link and a name."""
        found = []
        for league in _soup(html).select("bb-live-league"):
            link = league.select_one("bb-live-match-tile a[href]")
            if link is None:
                continue
            region = league.select_one(".match-tile-region-info__text")
            if region is None:
                continue
            found.append(Subpage(str(link["href"]), clean_text(region)))
        return found


def main(argv: list[str] | None = None) -> int:
    """List the live tennis matches with their tournaments."""
    parser = argparse.ArgumentParser(
        prog="sts", description="List live tennis matches."
    )
    parser.add_argument("--port", type=int, default=WEBDRIVER_PORT)
    args = parser.parse_args(argv)
    start = time.perf_counter()
    client = Client(localhost(args.port), {})
    page = TennisPage()
    html = page.download(client)
    for subpage in page.subpages(html):
        print(f"{subpage.url} {subpage.tournament}")
    print(f"Elapsed time: {time.perf_counter() - start:.2f}s")
    return 0