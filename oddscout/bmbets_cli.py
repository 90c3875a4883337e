"""Interactive matching of saved matches with the odds comparison site."""

from __future__ import annotations

import argparse
import re
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any
from urllib.parse import urljoin

from .bmbets_football import GotoError, goto
from .bmbets_search import URL, Hit, find_match, hits
from .event import Event, Match, ParseError, eat_match, match_contents
from .football import Kind
from .fortuna_football import translate_match
from .fortuna_prematch import parse_url
from .storage import read_files, save
from .webdriver import Client, localhost

WEBDRIVER_PORT = 4444
SOURCE_DIRECTORY = "maybe_safe"
TARGET_DIRECTORY = "safe"

_CHOICE = re.compile(r"\+?[0-9]+")

Reader = Callable[[str], str]


class _NoHits(Exception):
    """The search found nothing usable, or the choice could not be read."""


def _capabilities() -> dict[str, Any]:
    return {"moz:firefoxOptions": {}, "pageLoadStrategy": "eager"}


def filter_event(event: Event) -> Event | None:
    """Keep only total goals markets."""
    return event if event.id.kind is Kind.GOALS else None


def parse_choice(text: str) -> int | None:
    """Read a hit number; "-" means none. Raise ValueError for anything else."""
    trimmed = text.strip()
    if trimmed == "-":
        return None
    if not _CHOICE.fullmatch(trimmed):
        raise ValueError(f"not a choice: {text!r}")
    return int(trimmed)


def _choose(read: Reader) -> int | None:
    try:
        return parse_choice(read("choose: "))
    except ValueError as error:
        raise _NoHits() from error


def _get_match(client: Any, prompt: str, read: Reader) -> Hit | None:
    found = hits(find_match(client, prompt))
    if not found:
        raise _NoHits()
    for number, hit in enumerate(found):
        first, second = hit.players
        print(f"{number}: {hit.date:%Y-%m-%d %H:%M} | {first} - {second}")
    choice = _choose(read)
    while choice is not None and choice >= len(found):
        choice = _choose(read)
    return None if choice is None else found[choice]


def _get_hit(client: Any, match: Match, read: Reader) -> Hit | None:
    first, second = match.players
    while True:
        print(f"{match.date:%Y-%m-%d %H:%M}")
        print(f"{first} - {second}")
        prompt = read("search: ")
        if prompt.strip() == "skip":
            return None
        try:
            hit = _get_match(client, prompt, read)
        except _NoHits:
            print("no hits")
            continue
        if hit is not None:
            return hit


def _match_filter(match: Match, hit: Hit, client: Any) -> Match:
    client.goto(urljoin(URL, hit.relative_url))
    events = []
    for event in match.events:
        try:
            valued = goto(client, event)
        except GotoError as error:
            print(repr(event))
            print(repr(error))
            continue
        if valued.odds:
            events.append(valued)
    return Match(match.url, match.date, match.players, events)


def _load_matches(directory: str) -> Iterator[Match]:
    for text in read_files(directory):
        try:
            match = eat_match(text)
        except ParseError:
            continue
        translated = translate_match(match, filter_event)
        if translated is not None:
            yield translated


def _process(client: Any, match: Match, target: Path, read: Reader) -> None:
    hit = _get_hit(client, match, read)
    if hit is None:
        return
    filtered = _match_filter(match, hit, client)
    if not filtered.events:
        return
    try:
        url = parse_url(filtered.url)
    except ParseError:
        return
    print(filtered.url)
    print(f"{URL}{hit.relative_url}")
    contents = match_contents(filtered)
    if contents is None:
        return
    try:
        save(contents, target / url.name())
    except OSError:
        pass


def main(argv: list[str] | None = None) -> int:
    """Match saved matches on the comparison site and keep their valuable odds."""
    parser = argparse.ArgumentParser(
        prog="bmbets",
        description="Compare saved odds with the odds comparison site.",
    )
    parser.add_argument("--source", default=SOURCE_DIRECTORY)
    parser.add_argument("--target", default=TARGET_DIRECTORY)
    parser.add_argument("--port", type=int, default=WEBDRIVER_PORT)
    args = parser.parse_args(argv)
    matches = list(_load_matches(args.source))
    if not matches:
        print("no matches")
        return 0
    target = Path(args.target)
    with Client(localhost(args.port), _capabilities()) as client:
        for match in matches:
            try:
                _process(client, match, target, input)
            except EOFError:
                break
    return 0