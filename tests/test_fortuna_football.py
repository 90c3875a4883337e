from datetime import datetime

import pytest

from oddscout.event import Event, Match, ParseError
from oddscout.football import Football, Kind, Part, Player
from oddscout.fortuna_football import parse_football, translate_event, translate_match

PLAYERS = ("Legia", "Lech")
YELLOW = "żółtych kartek (bez żółtych kartek dla trenera i sztabu)"


def f(kind, *args):
    return Football(kind, args)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Liczba goli", f(Kind.GOALS, Part.FULL_TIME)),
        ("1.połowa liczba goli", f(Kind.GOALS, Part.FIRST_HALF)),
        (
            "1.połowa liczba goli/2.połowa liczba goli",
            f(Kind.GOALS2, Part.FIRST_HALF, Part.SECOND_HALF),
        ),
        ("Legia liczba goli", f(Kind.GOALS_PLAYER, Player.P1, Part.FULL_TIME)),
        (
            "2.drużyna 1.połowa liczba rzutów rożnych",
            f(Kind.CORNERS_PLAYER, Player.P2, Part.FIRST_HALF),
        ),
        ("Lech wygra do zera", f(Kind.WIN_TO_NIL, Player.P2)),
        ("Obie drużyny strzelą gola", f(Kind.BOTH_TO_SCORE, Part.FULL_TIME)),
        (
            "Obie drużyny strzelą gola w 2.połowie",
            f(Kind.BOTH_TO_SCORE, Part.FIRST_HALF),
        ),
        ("Obie drużyny strzelą po 3 lub więcej goli", f(Kind.BOTH_TO_SCORE_AT_LEAST, 3)),
        ("Spotkanie", f(Kind.WINNER, Part.FULL_TIME)),
        ("Spotkanie bez remisu", f(Kind.DRAW_NO_BET, Part.FULL_TIME)),
        ("Mecz/liczba goli", f(Kind.MATCH_GOALS, Part.FULL_TIME)),
        ("Mecz: liczba rzutów rożnych handicap", f(Kind.MATCH_CORNERS_HANDICAP, Part.FULL_TIME)),
        ("Liczba " + YELLOW, f(Kind.YELLOW_CARDS, Part.FULL_TIME)),
        ("1.połowa", f(Kind.WINNER, Part.FIRST_HALF)),
        ("2.połowa/mecz", f(Kind.MATCH, Part.SECOND_HALF)),
        ("1.połowa/2.połowa", f(Kind.WINNER2, Part.FIRST_HALF, Part.SECOND_HALF)),
        ("1.połowa: handicap", f(Kind.HANDICAP, Part.FIRST_HALF)),
        ("1.gol-minuta", f(Kind.FIRST_GOAL_MINUTE)),
        ("1.gol", f(Kind.FIRST_GOAL, Part.FULL_TIME)),
        ("Zawodnicy - strzały celne", f(Kind.PLAYER_SHOT_ON_TARGET)),
        ("Więcej fauli", f(Kind.MORE_FOULS)),
        ("Dokładna liczba goli", f(Kind.EXACT_GOALS, Part.FULL_TIME)),
    ],
)
def test_recognised_markets_consume_all(text, expected):
    assert parse_football(text, PLAYERS) == (expected, "")


def test_rest_is_returned():
    football, rest = parse_football("Handicap 0:1", PLAYERS)
    assert football == f(Kind.HANDICAP, Part.FULL_TIME)
    assert rest == " 0:1"


def test_superoffer():
    text = "SUPEROFFERTA+: mecz\n" + " " * 36 + ": Legia- Lech"
    assert parse_football(text, PLAYERS) == (f(Kind.SUPEROFFER), "")


@pytest.mark.parametrize(
    "text",
    ["Coś zupełnie innego", "Obie drużyny nie", "Więcej", "Legia", ""],
)
def test_unknown_raises(text):
    with pytest.raises(ParseError):
        parse_football(text, PLAYERS)


def test_translate_event_keeps_odds():
    odds = [("Tak", 1.5), ("Nie", 2.5)]
    event = translate_event(Event("Liczba goli", odds), PLAYERS, "u")
    assert event == Event(f(Kind.GOALS, Part.FULL_TIME), odds)


def test_translate_event_rejects_leftover_and_unknown():
    assert translate_event(Event("Handicap 0:1", []), PLAYERS, "u") is None
    assert translate_event(Event("Nieznane", []), PLAYERS, "u") is None


def _match(*ids):
    events = [Event(event_id, [("x", 2.0)]) for event_id in ids]
    return Match("u", datetime(2024, 5, 1, 18, 0), PLAYERS, events)


def test_translate_match_filters():
    match = _match("Liczba goli", "Nieznane", "Spotkanie")
    only_goals = lambda e: e if e.id.kind is Kind.GOALS else None  # noqa: E731
    result = translate_match(match, only_goals)
    assert [e.id for e in result.events] == [f(Kind.GOALS, Part.FULL_TIME)]
    assert result.url == match.url and result.date == match.date


def test_translate_match_without_filter_keeps_known():
    result = translate_match(_match("Liczba goli", "Spotkanie"))
    assert len(result.events) == 2


def test_translate_match_empty_is_none():
    assert translate_match(_match("Nieznane")) is None
    assert translate_match(_match("Spotkanie"), lambda e: None) is None