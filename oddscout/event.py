"""Matches, their betting events, and the saved text format for them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from .dates import eat2
from .scrape import split2

SAFE_MIN_ODD = 3.1
SAFE_MAX_ODD = 3.3

_DATE_FORMAT = "%Y-%m-%d %H:%M"

_TRANSLITERATION = str.maketrans(
    {
        "ą": "a",
        "ć": "c",
        "ę": "e",
        "ł": "l",
        "ń": "n",
        "ó": "o",
        "ś": "s",
        "ź": "z",
        "ż": "z",
        "Ą": "A",
        "Ć": "C",
        "Ę": "E",
        "Ł": "L",
        "Ń": "N",
        "Ó": "O",
        "Ś": "S",
        "Ź": "Z",
        "Ż": "Z",
        " ": "_",
        "á": "a",
    }
)


class ParseError(ValueError):
    """Raised when saved match text cannot be parsed."""


@dataclass(frozen=True, repr=False)
class Teams:
    """The two sides of a match."""

    team1: str
    team2: str

    def __repr__(self) -> str:
        return f"{self.team1} vs {self.team2}"


@dataclass
class Event:
    """A betting market and its offered odds, as (outcome, odd) pairs."""

    id: Any
    odds: list[tuple[Any, float]] = field(default_factory=list)


@dataclass
class Match:
    """A match with its page address, start time, sides and markets."""

    url: str
    date: datetime
    players: tuple[str, str]
    events: list[Event] = field(default_factory=list)

    def get_id(self) -> str:
        """Identifier built from both sanitized player names."""
        return f"{sanitize(self.players[0])}_vs_{sanitize(self.players[1])}"


def sanitize(text: str) -> str:
    """Transliterate Polish letters, turn spaces into underscores, drop the rest."""
    mapped = text.translate(_TRANSLITERATION)
    return "".join(c for c in mapped if c.isalnum() or c in "_-")


def _eat_pair(line: str) -> tuple[str, str] | None:
    if not line.startswith('("'):
        return None
    name, sep, rest = line[2:].partition('"')
    if not sep or not rest.startswith(", "):
        return None
    value, sep, _ = rest[2:].partition(")")
    if not sep:
        return None
    return name, value


def _parse_odds(lines: list[str]) -> list[tuple[str, float]]:
    odds = []
    for line in lines:
        pair = _eat_pair(line)
        if pair is None:
            continue
        name, value = pair
        try:
            odds.append((name, float(value)))
        except ValueError:
            continue
    return odds


def eat_match(text: str) -> Match:
    """Parse a match from its saved text form."""
    parts = text.split("\n\n")
    if len(parts) < 3:
        raise ParseError("expected url, date and players sections")
    url, date_text, players_text, *event_parts = parts
    date = eat2(date_text)
    if date is None:
        raise ParseError(f"bad date: {date_text!r}")
    players = split2(players_text, "\n")
    if players is None:
        raise ParseError(f"bad players: {players_text!r}")
    events = []
    for part in event_parts:
        event_id, *lines = part.split("\n")
        events.append(Event(event_id, _parse_odds(lines)))
    return Match(url, date, players, events)


def _quote(value: Any) -> str:
    if not isinstance(value, str):
        return repr(value)
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def event_contents(event: Event) -> str:
    """Render an event as its id line followed by one line per odd."""
    odds = "\n".join(f"({_quote(name)}, {float(odd)!r})" for name, odd in event.odds)
    return f"{event.id}\n{odds}"


def match_contents(match: Match) -> str | None:
    """Render a match in the saved text form, or None if it has no events."""
    if not match.events:
        return None
    events = "\n\n".join(event_contents(event) for event in match.events)
    return (
        f"{match.url}\n\n{match.date.strftime(_DATE_FORMAT)}\n\n"
        f"{match.players[0]}\n{match.players[1]}\n\n{events}"
    )


def match_events_to_db(match: Match) -> list[str]:
    """Database records of all event ids, or none if any id has no record."""
    records = [event.id.to_db_record() for event in match.events]
    if any(record is None for record in records):
        return []
    return records


def _safe_event(event: Event) -> Event | None:
    odds = [(name, odd) for name, odd in event.odds if SAFE_MIN_ODD <= odd <= SAFE_MAX_ODD]
    if not odds:
        return None
    return replace(event, odds=odds)


def safe_match_filter(match: Match) -> Match | None:
    """Keep only odds within the safe range; None if nothing is left."""
    events = [e for e in (_safe_event(event) for event in match.events) if e]
    if not events:
        return None
    return replace(match, events=events)