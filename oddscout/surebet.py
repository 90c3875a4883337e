"""The value bets listing of a surebet site."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass

from .webdriver import Client, localhost

VALUE_URL = "https://en.surebet.com/valuebets"
WEBDRIVER_PORT = 4444


@dataclass(frozen=True)
class ValuePage:
    """The value bets page."""

    def url(self) -> str:
        return VALUE_URL

    def download(self, client: Client) -> str:
        client.goto(self.url())
        return client.source()


def main(argv: list[str] | None = None) -> int:
    """Print the HTML of the value bets page."""
    parser = argparse.ArgumentParser(
        prog="surebet", description="Print the value bets page."
    )
    parser.add_argument("--port", type=int, default=WEBDRIVER_PORT)
    args = parser.parse_args(argv)
    start = time.perf_counter()
    with Client(localhost(args.port), {}) as client:
        html = ValuePage().download(client)
    print(html)
    print(f"Elapsed time: {time.perf_counter() - start:.2f}s")
    return 0