"""Recognition of football market names as shown on the Fortuna pages."""

from __future__ import annotations

from collections.abc import Callable

from .event import Event, Match, ParseError
from .football import Football, Kind, Part, Player

_YELLOW_SUFFIX = " kartek (bez żółtych kartek dla trenera i sztabu)"
_RED_SUFFIX = " kartka (bez czerwonych kartek dla trenera i sztabu)"
_SUPEROFFER_GAP = "\n" + " " * 36 + ": "

Parsed = tuple[Football, str]


def _f(kind: Kind, *args: object) -> Football:
    return Football(kind, args)


def _drop(text: str, prefix: str) -> str | None:
    return text[len(prefix):] if text.startswith(prefix) else None


def _need(text: str, prefix: str) -> str:
    rest = _drop(text, prefix)
    if rest is None:
        raise ParseError(f"expected {prefix!r} at {text!r}")
    return rest


def _first(text: str, table: list[tuple[str, Football]]) -> Parsed | None:
    for prefix, value in table:
        rest = _drop(text, prefix)
        if rest is not None:
            return value, rest
    return None


def _any_prefix(text: str, *prefixes: str) -> str | None:
    for prefix in prefixes:
        rest = _drop(text, prefix)
        if rest is not None:
            return rest
    return None


def _eat_half_with_more(text: str) -> str | None:
    return _any_prefix(text, "Połowa z wiekszą liczbą ", "Połowa z większą liczbą ")


def _eat_more(text: str) -> str | None:
    return _any_prefix(text, "Wiecej", "Więcej", "wiecej", "więcej")


def _eat_both(text: str) -> str | None:
    return _any_prefix(text, "Obie drużyny", "obie drużyny")


def _eat_yellow(text: str) -> str | None:
    rest = _any_prefix(text, "zółtych", "żółtych")
    return None if rest is None else _drop(rest, _YELLOW_SUFFIX)


def _eat_red(text: str) -> str | None:
    rest = _any_prefix(text, "Czerwona", "czerwona")
    return None if rest is None else _drop(rest, _RED_SUFFIX)


def _eat_part(text: str) -> tuple[str, Part] | None:
    for prefix, part in (("1.połowa", Part.FIRST_HALF), ("2.połowa", Part.SECOND_HALF)):
        rest = _drop(text, prefix)
        if rest is not None:
            return rest, part
    return None


def _eat_player(text: str, players: tuple[str, str]) -> tuple[str, Player] | None:
    first, second = players
    for name, player in ((first, Player.P1), (second, Player.P2)):
        rest = _drop(text, name)
        if rest is not None:
            return rest, player
    for digit, player in (("1", Player.P1), ("2", Player.P2)):
        rest = _drop(text, digit)
        if rest is not None:
            break
    else:
        return None
    rest = _drop(rest, ".")
    if rest is None:
        return None
    rest = _any_prefix(rest, "druzyna", "drużyna")
    return None if rest is None else (rest, player)


def _eat_event_player(text: str, p: Player) -> Parsed:
    i = _need(text, " ")
    found = _first(
        i,
        [
            ("przedział rzutów rożnych", _f(Kind.CORNER_RANGE_PLAYER, p, Part.FULL_TIME)),
            ("1.gol-minuta", _f(Kind.FIRST_GOAL_MINUTE_PLAYER, p)),
        ],
    )
    if found:
        return found
    rest = _drop(i, "wygra ")
    if rest is not None:
        found = _first(
            rest,
            [
                ("do zera", _f(Kind.WIN_TO_NIL, p)),
                ("obie połowy", _f(Kind.WIN_BOTH_HALVES, p)),
                ("przynajmniej jedna połowę", _f(Kind.WIN_AT_LEAST_ONE_HALF, p)),
            ],
        )
        if found:
            return found
    found = _first(
        i,
        [
            ("Multigole", _f(Kind.MULTI_GOALS_PLAYER, p)),
            ("strzeli gola w obu połowach", _f(Kind.SCORE_BOTH_HALVES, p)),
            ("dokładna liczba goli", _f(Kind.EXACT_GOALS_PLAYER, p)),
        ],
    )
    if found:
        return found
    rest = _drop(i, "liczba ")
    if rest is not None:
        found = _first(
            rest,
            [
                ("goli", _f(Kind.GOALS_PLAYER, p, Part.FULL_TIME)),
                ("rzutów rożnych", _f(Kind.CORNERS_PLAYER, p, Part.FULL_TIME)),
                ("strzałów w światło bramki", _f(Kind.SHOTS_ON_TARGET_PLAYER, p)),
                ("spalonych", _f(Kind.OFFSIDES_PLAYER, p)),
                ("fauli", _f(Kind.FOULS_PLAYER, p)),
            ],
        )
        if found:
            return found
        yellow = _eat_yellow(rest)
        if yellow is not None:
            return _f(Kind.YELLOW_CARDS_PLAYER, p, Part.FULL_TIME), yellow
    parted = _eat_part(i)
    if parted is not None:
        rest, part = parted
        rest = _drop(rest, " ")
        rest = None if rest is None else _drop(rest, "liczba ")
        if rest is not None:
            found = _first(
                rest,
                [
                    ("goli", _f(Kind.GOALS_PLAYER, p, part)),
                    ("rzutów rożnych", _f(Kind.CORNERS_PLAYER, p, part)),
                ],
            )
            if found:
                return found
            yellow = _eat_yellow(rest)
            if yellow is not None:
                return _f(Kind.YELLOW_CARDS_PLAYER, p, part), yellow
    red = _eat_red(i)
    if red is not None:
        return _f(Kind.RED_CARD_PLAYER, p), red
    raise ParseError(f"unknown player market: {text!r}")


def _part_space(i: str, part: Part) -> Parsed | None:
    rest = _drop(i, "liczba ")
    if rest is not None:
        goals = _drop(rest, "goli")
        if goals is not None:
            slash = _drop(goals, "/")
            parted = None if slash is None else _eat_part(slash)
            if parted is not None:
                after, part2 = parted
                tail = _drop(after, " liczba goli")
                if tail is not None:
                    return _f(Kind.GOALS2, part, part2), tail
            return _f(Kind.GOALS, part), goals
        corners = _drop(rest, "rzutów rożnych")
        if corners is not None:
            tail = _drop(corners, " handicap")
            if tail is not None:
                return _f(Kind.CORNERS_HANDICAP, part), tail
            return _f(Kind.CORNERS, part), corners
        yellow = _eat_yellow(rest)
        if yellow is not None:
            return _f(Kind.YELLOW_CARDS, part), yellow
    return _first(
        i,
        [
            ("bez remisu", _f(Kind.DRAW_NO_BET, part)),
            ("- dwójtyp", _f(Kind.DOUBLE_CHANCE, part)),
        ],
    )


def _part_colon(i: str, part: Part, players: tuple[str, str]) -> Parsed | None:
    more = _eat_more(i)
    if more is not None:
        more = _drop(more, " ")
        tail = None if more is None else _drop(more, "rzutów rożnych")
        if tail is not None:
            return _f(Kind.MORE_CORNERS, part), tail
    rest = _drop(i, "liczba ")
    corners = None if rest is None else _drop(rest, "rzutów rożnych")
    if corners is not None:
        tail = _drop(corners, " handicap")
        if tail is not None:
            return _f(Kind.CORNERS_HANDICAP, part), tail
        return _f(Kind.CORNERS, part), corners
    found = _first(
        i,
        [
            ("przedział rzutów rożnych", _f(Kind.CORNER_RANGE, part)),
            ("Multigole", _f(Kind.MULTI_GOALS, part)),
            ("dokładny wynik", _f(Kind.EXACT_SCORE, part)),
            ("dokładna liczba goli", _f(Kind.EXACT_GOALS, part)),
            ("1.gol", _f(Kind.FIRST_GOAL, part)),
            ("1.rzut rożny", _f(Kind.FIRST_CORNER, part)),
            ("handicap", _f(Kind.HANDICAP, part)),
        ],
    )
    if found:
        return found
    player = _eat_player(i, players)
    if player is not None:
        rest, p = player
        tail = _drop(rest, " przedział rzutów rożnych")
        if tail is not None:
            return _f(Kind.CORNER_RANGE_PLAYER, p, part), tail
    red = _eat_red(i)
    if red is not None:
        return _f(Kind.RED_CARD, part), red
    return None


def _part_slash(i: str, part: Part) -> Parsed | None:
    rest = _drop(i, "spotkanie")
    if rest is not None:
        return _f(Kind.MEETING, part), rest
    rest = _drop(i, "mecz")
    if rest is not None:
        tail = _drop(rest, " i liczba goli")
        if tail is not None:
            return _f(Kind.WINNER_MATCH_AND_GOALS, part), tail
        return _f(Kind.MATCH, part), rest
    both = _eat_both(i)
    if both is not None:
        rest = _need(both, " strzelą ")
        rest = _drop(rest, "gola")
        rest = None if rest is None else _drop(rest, " ")
        if rest is not None:
            found = _first(
                rest,
                [
                    ("w 1.połowie", _f(Kind.WINNER_BOTH_TO_SCORE, part, Part.FIRST_HALF)),
                    ("w 2.połowie", _f(Kind.WINNER_BOTH_TO_SCORE, part, Part.SECOND_HALF)),
                ],
            )
            if found:
                return found
    parted = _eat_part(i)
    if parted is not None:
        after, part2 = parted
        spaced = _drop(after, " ")
        both = None if spaced is None else _eat_both(spaced)
        if both is not None:
            rest = _need(both, " strzelą ")
            tail = _drop(rest, "gola")
            if tail is not None:
                return _f(Kind.WINNER2_BOTH_TO_SCORE, part, part2), tail
        return _f(Kind.WINNER2, part, part2), after
    return None


def _eat_event_part(i: str, part: Part, players: tuple[str, str]) -> Parsed:
    rest = _drop(i, " ")
    if rest is not None:
        found = _part_space(rest, part)
        if found:
            return found
    rest = _drop(i, ": ")
    if rest is not None:
        found = _part_colon(rest, part, players)
        if found:
            return found
    rest = _drop(i, "/")
    if rest is not None:
        found = _part_slash(rest, part)
        if found:
            return found
    rest = _drop(i, "-zmiana")
    if rest is not None:
        return _f(Kind.SHIFT, part), rest
    return _f(Kind.WINNER, part), i


def _both_to_score(i: str) -> Parsed | None:
    both = _eat_both(i)
    if both is None:
        return None
    rest = _need(both, " strzelą ")
    goal = _drop(rest, "gola")
    if goal is not None:
        spaced = _drop(goal, " ")
        if spaced is not None:
            found = _first(
                spaced,
                [
                    ("w 1.połowie", _f(Kind.BOTH_TO_SCORE, Part.FIRST_HALF)),
                    ("w 2.połowie", _f(Kind.BOTH_TO_SCORE, Part.FIRST_HALF)),
                    ("w tej samej połowie", _f(Kind.BOTH_TO_SCORE_SAME_HALF)),
                    ("lub liczba goli wyższa niż", _f(Kind.BOTH_TO_SCORE_OR_GOALS_OVER)),
                ],
            )
            if found:
                return found
        tail = _drop(goal, "/liczba goli")
        if tail is not None:
            return _f(Kind.BOTH_TO_SCORE_GOALS), tail
        return _f(Kind.BOTH_TO_SCORE, Part.FULL_TIME), goal
    return _first(
        rest,
        [
            ("po 2 lub więcej goli", _f(Kind.BOTH_TO_SCORE_AT_LEAST, 2)),
            ("po 3 lub więcej goli", _f(Kind.BOTH_TO_SCORE_AT_LEAST, 3)),
        ],
    )


def _count_of(i: str) -> Parsed | None:
    rest = _drop(i, "Liczba ")
    if rest is None:
        return None
    found = _first(
        rest,
        [
            ("goli", _f(Kind.GOALS, Part.FULL_TIME)),
            ("rzutów rożnych", _f(Kind.CORNERS, Part.FULL_TIME)),
            ("spalonych", _f(Kind.OFFSIDES)),
            ("strzałów w światło bramki", _f(Kind.SHOTS_ON_TARGET)),
            ("fauli", _f(Kind.FOULS)),
        ],
    )
    if found:
        return found
    yellow = _eat_yellow(rest)
    if yellow is not None:
        return _f(Kind.YELLOW_CARDS, Part.FULL_TIME), yellow
    return None


def _half_with_more(i: str) -> Parsed | None:
    rest = _eat_half_with_more(i)
    if rest is None:
        return None
    tail = _drop(rest, "goli")
    if tail is not None:
        return _f(Kind.HALF_WITH_MORE_GOALS), tail
    yellow = _eat_yellow(rest)
    if yellow is not None:
        return _f(Kind.HALF_WITH_MORE_YELLOW_CARDS), yellow
    return None


def _more_of(i: str) -> Parsed | None:
    rest = _eat_more(i)
    if rest is None:
        return None
    rest = _need(rest, " ")
    found = _first(
        rest,
        [
            ("rzutów rożnych", _f(Kind.MORE_CORNERS, Part.FULL_TIME)),
            ("strzałów w światło bramki", _f(Kind.MORE_SHOTS_ON_TARGET)),
            ("fauli", _f(Kind.MORE_FOULS)),
        ],
    )
    if found:
        return found
    yellow = _eat_yellow(rest)
    if yellow is not None:
        return _f(Kind.MORE_YELLOW_CARDS), yellow
    return None


def _meeting(i: str, players: tuple[str, str]) -> Parsed | None:
    rest = _drop(i, "Spotkanie")
    if rest is None:
        return None
    tail = _drop(rest, " bez remisu")
    if tail is not None:
        return _f(Kind.DRAW_NO_BET, Part.FULL_TIME), tail
    slash = _drop(rest, "/")
    if slash is not None:
        player = _eat_player(slash, players)
        if player is not None:
            after, p = player
            tail = _drop(after, " liczba goli")
            if tail is not None:
                return _f(Kind.MATCH_GOALS_PLAYER, p), tail
        parted = _eat_part(slash)
        if parted is not None:
            after, part = parted
            tail = _drop(after, " liczba goli")
            if tail is not None:
                return _f(Kind.MATCH_GOALS, part), tail
    return _f(Kind.WINNER, Part.FULL_TIME), rest


def _match(i: str) -> Parsed | None:
    rest = _drop(i, "Mecz")
    if rest is None:
        return None
    found = _first(
        rest,
        [
            (" + strzelcy goli", _f(Kind.MATCH_SCORE_PLAYERS)),
            (" + strzały na bramkę", _f(Kind.MATCH_SHOTS_ON_TARGET)),
        ],
    )
    if found:
        return found
    colon = _drop(rest, ": ")
    if colon is not None:
        corners = _drop(colon, "liczba rzutów rożnych")
        if corners is not None:
            tail = _drop(corners, " handicap")
            if tail is not None:
                return _f(Kind.MATCH_CORNERS_HANDICAP, Part.FULL_TIME), tail
            return _f(Kind.MATCH_CORNERS, Part.FULL_TIME), corners
        found = _first(
            colon,
            [
                ("która drużyna strzeli gola", _f(Kind.PLAYER_TO_SCORE)),
                ("więcej rzutów rożnych", _f(Kind.MATCH_MORE_CORNERS)),
                ("Przedział rzutów rożnych", _f(Kind.MATCH_CORNER_RANGE)),
                ("Multiwynik", _f(Kind.MATCH_MULTI_SCORE)),
                ("suma goli", _f(Kind.MATCH_GOAL_SUM)),
            ],
        )
        if found:
            return found
    found = _first(
        rest,
        [
            ("/liczba goli", _f(Kind.MATCH_GOALS, Part.FULL_TIME)),
            ("/obie drużyny strzelą gola", _f(Kind.MATCH_BOTH_TO_SCORE)),
        ],
    )
    if found:
        return found
    return _f(Kind.WINNER, Part.FULL_TIME), rest


def _superoffer(i: str, players: tuple[str, str]) -> Parsed | None:
    rest = _drop(i, "SUPEROFFERTA+: mecz")
    if rest is None:
        return None
    rest = _need(rest, _SUPEROFFER_GAP)
    rest = _need(rest, players[0])
    separated = _any_prefix(rest, "- ", " -")
    if separated is None:
        raise ParseError(f"expected separator at {rest!r}")
    rest = _need(separated, players[1])
    return _f(Kind.SUPEROFFER), rest


def _prefixed(i: str, table: list[tuple[str, Football]]) -> Callable[[], Parsed | None]:
    return lambda: _first(i, table)


def parse_football(text: str, players: tuple[str, str]) -> tuple[Football, str]:
    """Recognise the market name at the start of ``text``.

    Returns the market and the unconsumed rest of the text. Raises
    ParseError when the text names no known market.
    """
    players = (players[0], players[1])
    player = _eat_player(text, players)
    if player is not None:
        rest, p = player
        return _eat_event_player(rest, p)
    parted = _eat_part(text)
    if parted is not None:
        rest, part = parted
        return _eat_event_part(rest, part, players)
    i = text
    steps: list[Callable[[], Parsed | None]] = [
        _prefixed(i, [("Dokładna liczba goli", _f(Kind.EXACT_GOALS, Part.FULL_TIME))]),
        lambda: _both_to_score(i),
        _prefixed(
            i,
            [
                ("Handicap", _f(Kind.HANDICAP, Part.FULL_TIME)),
                ("Multigole", _f(Kind.MULTI_GOALS, Part.FULL_TIME)),
            ],
        ),
        lambda: _count_of(i),
        _prefixed(
            i,
            [
                ("Rzut karny", _f(Kind.PENALTY)),
                ("Będą serie rzutów karnych", _f(Kind.PENALTY_SERIES)),
                ("Wynik meczu - dwójtyp", _f(Kind.DOUBLE_CHANCE, Part.FULL_TIME)),
                ("Podwójna szansa (1.poł. lub mecz)", _f(Kind.DOUBLE_CHANCE_H1_OR_MATCH)),
            ],
        ),
        lambda: _half_with_more(i),
        _prefixed(
            i,
            [
                ("Otrzyma kartkę", _f(Kind.WILL_GET_CARD)),
                ("Dwójtyp/liczba goli", _f(Kind.DOUBLE_CHANCE_GOAL_RANGE)),
                ("Dwójtyp/obie drużyny strzelą gola", _f(Kind.DOUBLE_CHANCE_BOTH_TO_SCORE)),
                ("1.gol/spotkanie", _f(Kind.FIRST_GOAL_MATCH)),
                ("1.gol-minuta", _f(Kind.FIRST_GOAL_MINUTE)),
                ("1.gol", _f(Kind.FIRST_GOAL, Part.FULL_TIME)),
                ("Pozostałe zakłady łączone", _f(Kind.REST_PRODUCT)),
                ("Padnie gol-minuta", _f(Kind.GOAL_BEFORE_MINUTE)),
                ("Nie padnie gol-minuta", _f(Kind.NO_GOAL_BEFORE_MINUTE)),
                ("Różnica zwycięstwa", _f(Kind.WIN_DIFF)),
                ("1.rzut rożny w spotkaniu", _f(Kind.FIRST_CORNER, Part.FULL_TIME)),
                ("Zawodnicy - strzały celne", _f(Kind.PLAYER_SHOT_ON_TARGET)),
                ("Zawodnicy - strzały", _f(Kind.PLAYER_SHOT)),
            ],
        ),
        lambda: _more_of(i),
        _prefixed(
            i,
            [
                ("1-15 minuta spotkania", _f(Kind.MINUTE15)),
                ("1-30 minuta spotkania", _f(Kind.MINUTE30)),
                ("1-60 minuta spotkania", _f(Kind.MINUTE60)),
                ("1-75 minuta spotkania", _f(Kind.MINUTE75)),
                ("Będzie wynik w trakcie spotkania", _f(Kind.RESULT_DURING_MATCH)),
                ("Nie będzie wyniku w trakcie spotkania", _f(Kind.NOT_RESULT_DURING_MATCH)),
            ],
        ),
        lambda: _meeting(i, players),
        _prefixed(
            i,
            [
                ("Przedział goli", _f(Kind.GOAL_RANGE)),
                (
                    "Zawodnik rezerwowy strzeli gola "
                    "(nie wystąpi od początku spotkania)",
                    _f(Kind.SUBSTITUTE_WILL_SCORE),
                ),
                ("Będzie przegrywać, ale..", _f(Kind.WILL_BE_LOSING_BUT)),
            ],
        ),
        lambda: _match(i),
        _prefixed(
            i,
            [
                ("Awans", _f(Kind.TO_ADVANCE)),
                ("awans", _f(Kind.TO_ADVANCE)),
                ("Sposób awansu", _f(Kind.ADVANCE_BY)),
                ("Dokładny wynik", _f(Kind.EXACT_SCORE, Part.FULL_TIME)),
                ("Zwycięzca finału", _f(Kind.FINALE_WINNER)),
                ("Gol w obu połowach", _f(Kind.GOAL_BOTH_HALVES)),
                (
                    "1i2 drużyna strzeli gola w obu połowach",
                    _f(Kind.BOTH_GOAL_BOTH_HALVES),
                ),
            ],
        ),
        lambda: None if (red := _eat_red(i)) is None else (_f(Kind.RED_CARD, Part.FULL_TIME), red),
        _prefixed(i, [("padnie gol samobójczy", _f(Kind.SUICIDE_GOAL))]),
        lambda: _superoffer(i, players),
    ]
    for step in steps:
        found = step()
        if found is not None:
            return found
    raise ParseError(f"unknown market: {text!r}")


def translate_event(
    event: Event, players: tuple[str, str], url: str
) -> Event | None:
    """Turn an event with a textual id into one with a Football id.

    Returns None, after reporting it, when the id is not fully recognised.
    """
    text = event.id
    try:
        football, rest = parse_football(text, players)
    except ParseError as error:
        print(f"{text} {error}")
        print(url)
        return None
    if rest:
        print(f"{football} {rest!r}")
        print(text)
        print()
        return None
    return Event(football, list(event.odds))


def translate_match(
    match: Match,
    event_filter: Callable[[Event], Event | None] | None = None,
) -> Match | None:
    """Translate every event of a match and pass it through ``event_filter``.

    Returns None when no event is left.
    """
    events = []
    for event in match.events:
        translated = translate_event(event, match.players, match.url)
        if translated is None:
            continue
        if event_filter is not None:
            translated = event_filter(translated)
            if translated is None:
                continue
        events.append(translated)
    if not events:
        return None
    return Match(match.url, match.date, tuple(match.players), events)