from datetime import datetime

import pytest

from oddscout.bmbets_cli import filter_event, main, parse_choice
from oddscout.event import Event
from oddscout.football import Football, Kind, Part


def _event(kind, *args):
    return Event(Football(kind, args), [("wiecej 2.5", 1.9)])


def test_filter_event_keeps_goals():
    event = _event(Kind.GOALS, Part.FULL_TIME)
    assert filter_event(event) is event


def test_filter_event_drops_other_markets():
    assert filter_event(_event(Kind.WINNER, Part.FULL_TIME)) is None
    assert filter_event(_event(Kind.PENALTY)) is None


@pytest.mark.parametrize("text, expected", [("3", 3), (" 0 \n", 0), ("+2", 2)])
def test_parse_choice_numbers(text, expected):
    assert parse_choice(text) == expected


def test_parse_choice_dash_means_none():
    assert parse_choice(" -\n") is None


@pytest.mark.parametrize("text", ["abc", "-1", "", "1.5"])
def test_parse_choice_rejects(text):
    with pytest.raises(ValueError):
        parse_choice(text)


def test_main_with_empty_directory(tmp_path, capsys):
    assert main(["--source", str(tmp_path), "--target", str(tmp_path)]) == 0
    assert "no matches" in capsys.readouterr().out


def test_main_with_missing_directory(tmp_path):
    with pytest.raises(OSError):
        main(["--source", str(tmp_path / "absent")])


def test_main_filters_out_non_goal_markets(tmp_path, capsys):
    when = datetime(2030, 5, 1, 18, 0)
    content = (
        "https://www.efortuna.pl/zaklady-bukmacherskie/pilka-nozna/x\n\n"
        f"{when:%Y-%m-%d %H:%M}\n\n"
        "Alfa\nBeta\n\n"
        'Rzut karny\n("tak", 2.5)'
    )
    (tmp_path / "match.txt").write_text(content, encoding="utf-8")
    (tmp_path / "broken.txt").write_text("garbage", encoding="utf-8")
    assert main(["--source", str(tmp_path)]) == 0
    assert capsys.readouterr().out.strip().endswith("no matches")