"""Finding football markets on the odds comparison site and valuing odds."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, TypeVar

from . import bmbets_menu as menu
from .event import Event, ParseError
from .football import Football, Kind, Part, Player
from .webdriver import WebDriverError

VALUE_THRESHOLD = 0.97

T = TypeVar("T")


class Tab(Enum):
    """Market tabs of a match page."""

    WINNER = "1x2"
    ASIAN_HANDICAP = "Asian Handicap"
    EUROPEAN_HANDICAP = "European Handicap"
    CORNERS = "Corners"
    TOTALS_GOALS = "Totals Goals"
    TOTAL_GOALS_BY_INTERVALS = "Total Goals By Intervals"
    TOTAL_GOALS_NUMBER_BY_RANGE = "Total Goals Number By Range"
    TOTAL_GOALS_BOTH_TEAMS_TO_SCORE = "Total Goals/Both Teams To Score"
    DOUBLE_CHANCE = "Double Chance"
    CARDS = "Cards"
    INDIVIDUAL_TOTAL_GOALS = "Individual Total Goals"
    INDIVIDUAL_CORNERS = "Individual Corners"
    BOTH_TEAMS_TO_SCORE = "Both Teams To Score"
    DRAW_NO_BET = "Draw No Bet"
    EXACT_GOALS_NUMBER = "Exact Goals Number"
    PENALTY = "Penalty"


_TAB_ORDER = [
    Tab.WINNER,
    Tab.ASIAN_HANDICAP,
    Tab.EUROPEAN_HANDICAP,
    Tab.CORNERS,
    Tab.TOTAL_GOALS_BY_INTERVALS,
    Tab.TOTAL_GOALS_NUMBER_BY_RANGE,
    Tab.TOTAL_GOALS_BOTH_TEAMS_TO_SCORE,
    Tab.TOTALS_GOALS,
    Tab.DOUBLE_CHANCE,
    Tab.CARDS,
    Tab.INDIVIDUAL_TOTAL_GOALS,
    Tab.INDIVIDUAL_CORNERS,
    Tab.BOTH_TEAMS_TO_SCORE,
    Tab.DRAW_NO_BET,
    Tab.EXACT_GOALS_NUMBER,
    Tab.PENALTY,
]


class ToolbarKind(Enum):
    """Kinds of toolbar buttons under a market tab."""

    PART = "Part"
    WINNER = "Winner"
    ASIAN_HANDICAP = "AsianHandicap"
    TOTAL = "Total"
    DOUBLE_CHANCE = "DoubleChance"
    HOME_TOTAL = "HomeTotal"
    AWAY_TOTAL = "AwayTotal"
    HOME = "Home"
    AWAY = "Away"


@dataclass(frozen=True)
class Toolbar:
    """A toolbar button: its kind and, for most kinds, the match part."""

    kind: ToolbarKind
    part: Part | None = None


class OverUnder(Enum):
    OVER = "Over"
    UNDER = "Under"


@dataclass(frozen=True)
class Variant:
    """An outcome of a market, as needed to find its odds table."""

    HANDICAP: ClassVar[str] = "handicap"
    TOTAL: ClassVar[str] = "total"
    UNKNOWN: ClassVar[str] = "unknown"

    kind: str
    line: str
    over_under: OverUnder | None = None

    def table_name(self) -> str:
        """Caption of the odds table that lists this outcome's line."""
        if self.kind == Variant.TOTAL:
            return f"Total {pos_line(self.line)}"
        if self.kind == Variant.HANDICAP:
            return f"Handicap {pos_line(self.line)}"
        raise ValueError(f"no odds table for {self!r}")

    def choose(self, values: Sequence[float]) -> float:
        """Pick this outcome's value from a table row."""
        if self.kind == Variant.TOTAL and self.over_under is OverUnder.OVER:
            return values[0]
        if self.kind == Variant.TOTAL and self.over_under is OverUnder.UNDER:
            return values[1]
        raise ValueError(f"no column for {self!r}")


class GotoError(Exception):
    """Raised when the market of an event cannot be opened on the page."""

    def __init__(
        self, stage: str, cause: Exception | None = None, toolbar: Toolbar | None = None
    ) -> None:
        super().__init__(stage)
        self.stage = stage
        self.cause = cause
        self.toolbar = toolbar


_TABS = {
    Kind.WINNER: Tab.WINNER,
    Kind.GOALS: Tab.TOTALS_GOALS,
    Kind.GOALS_PLAYER: Tab.INDIVIDUAL_TOTAL_GOALS,
    Kind.EXACT_GOALS: Tab.EXACT_GOALS_NUMBER,
    Kind.BOTH_TO_SCORE: Tab.BOTH_TEAMS_TO_SCORE,
    Kind.HANDICAP: Tab.ASIAN_HANDICAP,
    Kind.CORNERS: Tab.CORNERS,
    Kind.CORNERS_PLAYER: Tab.INDIVIDUAL_CORNERS,
}


def tab_for(event: Football) -> Tab | None:
    """The tab listing the given market, if there is one."""
    return _TABS.get(event.kind)


def toolbar_for(event: Football) -> Toolbar | None:
    """The toolbar button selecting the given market, if there is one."""
    kind = event.kind
    if kind in (Kind.WINNER, Kind.GOALS, Kind.EXACT_GOALS):
        return Toolbar(ToolbarKind.PART, event.args[0])
    if kind is Kind.CORNERS:
        return Toolbar(ToolbarKind.TOTAL, event.args[0])
    if kind is Kind.GOALS_PLAYER:
        player, part = event.args
        side = ToolbarKind.HOME if player is Player.P1 else ToolbarKind.AWAY
        return Toolbar(side, part)
    if kind is Kind.CORNERS_PLAYER:
        player, part = event.args
        side = ToolbarKind.HOME_TOTAL if player is Player.P1 else ToolbarKind.AWAY_TOTAL
        return Toolbar(side, part)
    return None


def parse_tab(text: str) -> tuple[Tab, str]:
    """Recognise a tab name at the start of ``text``; return it and the rest."""
    for tab in _TAB_ORDER:
        if text.startswith(tab.value):
            return tab, text[len(tab.value):]
    raise ParseError(f"unknown tab: {text!r}")


def parse_part(text: str, parens: bool) -> tuple[Part, str]:
    """Read a match part suffix such as " (H1)" or, without parens, " H1".

    With parens a missing suffix means full time; without, it is an error.
    """
    if parens:
        table = [(" (H1)", Part.FIRST_HALF), (" (H2)", Part.SECOND_HALF)]
    else:
        table = [(" FT", Part.FULL_TIME), (" H1", Part.FIRST_HALF), (" H2", Part.SECOND_HALF)]
    for prefix, part in table:
        if text.startswith(prefix):
            return part, text[len(prefix):]
    if parens:
        return Part.FULL_TIME, text
    raise ParseError(f"expected a part at {text!r}")


_TOOLBAR_PARTS = [
    ("Full Time", Part.FULL_TIME),
    ("1st Half", Part.FIRST_HALF),
    ("2nd Half", Part.SECOND_HALF),
]

_TOOLBAR_PREFIXES = [
    ("1x2", ToolbarKind.WINNER, True),
    ("Asian Handicap", ToolbarKind.ASIAN_HANDICAP, True),
    ("Total", ToolbarKind.TOTAL, True),
    ("Double Chance", ToolbarKind.DOUBLE_CHANCE, None),
    ("Home Total", ToolbarKind.HOME_TOTAL, True),
    ("Away Total", ToolbarKind.AWAY_TOTAL, True),
    ("Home", ToolbarKind.HOME, False),
    ("Away", ToolbarKind.AWAY, False),
]


def parse_toolbar(text: str) -> tuple[Toolbar, str]:
    """Recognise a toolbar button name; return it and the rest of the text."""
    for prefix, part in _TOOLBAR_PARTS:
        if text.startswith(prefix):
            return Toolbar(ToolbarKind.PART, part), text[len(prefix):]
    for prefix, kind, parens in _TOOLBAR_PREFIXES:
        if not text.startswith(prefix):
            continue
        rest = text[len(prefix):]
        if parens is None:
            return Toolbar(kind), rest
        part, rest = parse_part(rest, parens)
        return Toolbar(kind, part), rest
    raise ParseError(f"unknown toolbar: {text!r}")


def chances(odds: Sequence[float]) -> list[float]:
    """Implied probabilities of the odds, normalised to sum to one."""
    inverse = [1.0 / odd for odd in odds]
    scale = 1.0 / sum(inverse)
    return [value * scale for value in inverse]


def pos_line(text: str) -> str:
    """The line with an explicit sign: "+" added unless it is negative."""
    trimmed = text.strip()
    return trimmed if trimmed.startswith("-") else f"+{trimmed}"


_OVER_UNDER = [
    ("mniej", OverUnder.UNDER),
    ("Mniej", OverUnder.UNDER),
    ("wiecej", OverUnder.OVER),
    ("Wiecej", OverUnder.OVER),
]


def eat_variant(event: Football, text: str) -> Variant:
    """Interpret an outcome name of the given market."""
    for prefix, over_under in _OVER_UNDER:
        if text.startswith(prefix):
            rest = text[len(prefix):]
            if event.kind is Kind.GOALS:
                return Variant(Variant.TOTAL, rest, over_under)
            if event.kind is Kind.GOALS_PLAYER:
                return Variant(Variant.HANDICAP, rest, over_under)
            raise ValueError(f"over/under outcome of unsupported market {event}")
    return Variant(Variant.UNKNOWN, text)


def _pick(
    entries: list[tuple[str, Any]], parser: Callable[[str], tuple[T, str]], wanted: T
) -> tuple[str, Any] | None:
    for name, element in entries:
        try:
            value, _ = parser(name)
        except ParseError:
            continue
        if value == wanted:
            return name, element
    return None


def _mean_odds(table: list[tuple[str, list[float]]]) -> list[float]:
    sums: list[float] = []
    for _, odds in table:
        if not sums:
            sums = list(odds)
        elif len(sums) == len(odds):
            sums = [total + odd for total, odd in zip(sums, odds)]
        else:
            raise ValueError("bookmakers list different numbers of odds")
    return [total / len(table) for total in sums]


def _valued_odd(
    event: Event, variant_text: str, odd: float, divs: list[tuple[str, Any]]
) -> bool:
    variant = eat_variant(event.id, variant_text)
    if variant.kind == Variant.UNKNOWN:
        return False
    name = variant.table_name()
    print(f"{variant!r} {name!r}")
    div = next((element for caption, element in divs if caption == name), None)
    if div is None:
        return False
    try:
        table = menu.odds_table(div)
    except WebDriverError:
        return False
    if not table:
        return False
    mean = _mean_odds(table)
    probabilities = chances(mean)
    value = odd * variant.choose(probabilities)
    if value <= VALUE_THRESHOLD:
        return False
    print(" ".join(book for book, _ in table))
    print(f"{mean!r} {probabilities!r} {value}")
    return True


def goto(client: Any, event: Event) -> Event:
    """Open the event's market on the current match page and keep its valuable odds.

    An odd is kept when it times the mean implied chance across bookmakers
    exceeds the value threshold. Raises GotoError when the market cannot
    be opened.
    """
    try:
        menu.dropdown(client)
        tab_links = menu.links(menu.tab(client))
    except WebDriverError as error:
        raise GotoError("TabList", error) from error
    event_tab = tab_for(event.id)
    if event_tab is None:
        raise GotoError("TabTranslate")
    event_toolbar = toolbar_for(event.id)
    if event_toolbar is None:
        raise GotoError("ToolbarTranslate")
    found_tab = _pick(tab_links, parse_tab, event_tab)
    if found_tab is None:
        raise GotoError("TabFind")
    tab_name, tab_button = found_tab
    try:
        tab_button.click()
    except WebDriverError as error:
        raise GotoError("TabClick", error) from error
    try:
        toolbar_links = menu.links(menu.toolbar(client))
    except WebDriverError as error:
        raise GotoError("ToolbarList", error) from error
    found_toolbar = _pick(toolbar_links, parse_toolbar, event_toolbar)
    if found_toolbar is None:
        raise GotoError("ToolbarFind")
    toolbar_name, toolbar_button = found_toolbar
    try:
        toolbar_button.click()
    except WebDriverError as error:
        raise GotoError("ToolbarClick", error, event_toolbar) from error
    try:
        divs = menu.odds_divs(menu.odds_content(client), menu.ODDS_DELAY)
    except WebDriverError as error:
        raise GotoError("Divs", error) from error
    print(f"{event!r} {tab_name!r} {toolbar_name!r}")
    odds = [
        (variant_text, odd)
        for variant_text, odd in event.odds
        if _valued_odd(event, variant_text, odd, divs)
    ]
    return Event(event.id, odds)