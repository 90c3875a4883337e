"""Football market identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Part(Enum):
    """Which part of the match a market refers to."""

    FULL_TIME = "FullTime"
    FIRST_HALF = "FirstHalf"
    SECOND_HALF = "SecondHalf"

    def __str__(self) -> str:
        return self.value


class Player(Enum):
    """Home (P1) or away (P2) side."""

    P1 = "P1"
    P2 = "P2"

    def __str__(self) -> str:
        return self.value


_NONE: tuple[type, ...] = ()
_PART = (Part,)
_PARTS = (Part, Part)
_PLAYER = (Player,)
_PLAYER_PART = (Player, Part)
_COUNT = (int,)


class Kind(Enum):
    """Kind of football market, with the argument types it carries."""

    WINNER = ("Winner", _PART)
    WINNER2 = ("Winner2", _PARTS)
    WINNER2_BOTH_TO_SCORE = ("Winner2BothToScore", _PARTS)
    WINNER_MATCH_AND_GOALS = ("WinnerMatchAndGoals", _PART)
    GOALS = ("Goals", _PART)
    GOALS2 = ("Goals2", _PARTS)
    GOALS_PLAYER = ("GoalsPlayer", _PLAYER_PART)
    EXACT_GOALS = ("ExactGoals", _PART)
    EXACT_GOALS_PLAYER = ("ExactGoalsPlayer", _PLAYER)
    GOAL_BOTH_HALVES = ("GoalBothHalves", _NONE)
    BOTH_GOAL_BOTH_HALVES = ("BothGoalBothHalves", _NONE)
    BOTH_TO_SCORE = ("BothToScore", _PART)
    BOTH_TO_SCORE_GOALS = ("BothToScoreGoals", _NONE)
    BOTH_TO_SCORE_SAME_HALF = ("BothToScoreSameHalf", _NONE)
    BOTH_TO_SCORE_OR_GOALS_OVER = ("BothToScoreOrGoalsOver", _NONE)
    BOTH_TO_SCORE_AT_LEAST = ("BothToScoreAtLeast", _COUNT)
    WINNER_BOTH_TO_SCORE = ("WinnerBothToScore", _PARTS)
    HANDICAP = ("Handicap", _PART)
    CORNERS = ("Corners", _PART)
    CORNERS_HANDICAP = ("CornersHandicap", _PART)
    CORNERS_PLAYER = ("CornersPlayer", _PLAYER_PART)
    MULTI_GOALS = ("MultiGoals", _PART)
    MULTI_GOALS_PLAYER = ("MultiGoalsPlayer", _PLAYER)
    DRAW_NO_BET = ("DrawNoBet", _PART)
    MATCH_BOTH_TO_SCORE = ("MatchBothToScore", _NONE)
    OFFSIDES = ("Offsides", _NONE)
    OFFSIDES_PLAYER = ("OffsidesPlayer", _PLAYER)
    MATCH_MULTI_SCORE = ("MatchMultiScore", _NONE)
    PENALTY = ("Penalty", _NONE)
    PENALTY_SERIES = ("PenaltySeries", _NONE)
    DOUBLE_CHANCE = ("DoubleChance", _PART)
    DOUBLE_CHANCE_H1_OR_MATCH = ("DoubleChanceH1OrMatch", _NONE)
    MATCH_CORNER_RANGE = ("MatchCornerRange", _NONE)
    HALF_WITH_MORE_GOALS = ("HalfWithMoreGoals", _NONE)
    HALF_WITH_MORE_YELLOW_CARDS = ("HalfWithMoreYellowCards", _NONE)
    WILL_GET_CARD = ("WillGetCard", _NONE)
    DOUBLE_CHANCE_GOAL_RANGE = ("DoubleChanceGoalRange", _NONE)
    FIRST_GOAL = ("FirstGoal", _PART)
    FIRST_GOAL_MATCH = ("FirstGoalMatch", _NONE)
    FIRST_GOAL_MINUTE = ("FirstGoalMinute", _NONE)
    FIRST_GOAL_MINUTE_PLAYER = ("FirstGoalMinutePlayer", _PLAYER)
    CORNER_RANGE = ("CornerRange", _PART)
    CORNER_RANGE_PLAYER = ("CornerRangePlayer", _PLAYER_PART)
    MATCH_SCORE_PLAYERS = ("MatchScorePlayers", _NONE)
    MATCH_CORNERS = ("MatchCorners", _PART)
    MATCH_CORNERS_HANDICAP = ("MatchCornersHandicap", _PART)
    REST_PRODUCT = ("RestProduct", _NONE)
    WIN_TO_NIL = ("WinToNil", _PLAYER)
    WIN_BOTH_HALVES = ("WinBothHalves", _PLAYER)
    WIN_AT_LEAST_ONE_HALF = ("WinAtLeastOneHalf", _PLAYER)
    EXACT_SCORE = ("ExactScore", _PART)
    SCORE_BOTH_HALVES = ("ScoreBothHalves", _PLAYER)
    GOAL_BEFORE_MINUTE = ("GoalBeforeMinute", _NONE)
    NO_GOAL_BEFORE_MINUTE = ("NoGoalBeforeMinute", _NONE)
    DOUBLE_CHANCE_BOTH_TO_SCORE = ("DoubleChanceBothToScore", _NONE)
    WIN_DIFF = ("WinDiff", _NONE)
    FIRST_CORNER = ("FirstCorner", _PART)
    MATCH_SHOTS_ON_TARGET = ("MatchShotsOnTarget", _NONE)
    SHOTS_ON_TARGET = ("ShotsOnTarget", _NONE)
    SHOTS_ON_TARGET_PLAYER = ("ShotsOnTargetPlayer", _PLAYER)
    PLAYER_SHOT = ("PlayerShot", _NONE)
    PLAYER_SHOT_ON_TARGET = ("PlayerShotOnTarget", _NONE)
    MORE_CORNERS = ("MoreCorners", _PART)
    MORE_SHOTS_ON_TARGET = ("MoreShotsOnTarget", _NONE)
    MORE_YELLOW_CARDS = ("MoreYellowCards", _NONE)
    MORE_FOULS = ("MoreFouls", _NONE)
    MATCH_MORE_CORNERS = ("MatchMoreCorners", _NONE)
    MINUTE15 = ("Minute15", _NONE)
    MINUTE30 = ("Minute30", _NONE)
    MINUTE60 = ("Minute60", _NONE)
    MINUTE75 = ("Minute75", _NONE)
    PLAYER_TO_SCORE = ("PlayerToScore", _NONE)
    YELLOW_CARDS = ("YellowCards", _PART)
    YELLOW_CARDS_PLAYER = ("YellowCardsPlayer", _PLAYER_PART)
    RED_CARD = ("RedCard", _PART)
    RED_CARD_PLAYER = ("RedCardPlayer", _PLAYER)
    RESULT_DURING_MATCH = ("ResultDuringMatch", _NONE)
    NOT_RESULT_DURING_MATCH = ("NotResultDuringMatch", _NONE)
    MATCH_GOALS = ("MatchGoals", _PART)
    MATCH_GOALS_PLAYER = ("MatchGoalsPlayer", _PLAYER)
    GOAL_RANGE = ("GoalRange", _NONE)
    SUBSTITUTE_WILL_SCORE = ("SubstituteWillScore", _NONE)
    WILL_BE_LOSING_BUT = ("WillBeLosingBut", _NONE)
    MEETING = ("Meeting", _PART)
    MATCH = ("Match", _PART)
    TO_ADVANCE = ("ToAdvance", _NONE)
    ADVANCE_BY = ("AdvanceBy", _NONE)
    FINALE_WINNER = ("FinaleWinner", _NONE)
    SHIFT = ("Shift", _PART)
    FOULS = ("Fouls", _NONE)
    FOULS_PLAYER = ("FoulsPlayer", _PLAYER)
    SUICIDE_GOAL = ("SuicideGoal", _NONE)
    SUPEROFFER = ("Superoffer", _NONE)
    MATCH_GOAL_SUM = ("MatchGoalSum", _NONE)

    def __init__(self, label: str, signature: tuple[type, ...]) -> None:
        self.label = label
        self.signature = signature


_DB_WINNER = {
    Part.FULL_TIME: "winner",
    Part.FIRST_HALF: "winner_h1",
    Part.SECOND_HALF: "winner_h2",
}


def _matches(value: Any, expected: type) -> bool:
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


@dataclass(frozen=True)
class Football:
    """A football market: its kind and the arguments the kind requires."""

    kind: Kind
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        args = tuple(self.args)
        object.__setattr__(self, "args", args)
        signature = self.kind.signature
        if len(args) != len(signature) or not all(
            _matches(value, expected) for value, expected in zip(args, signature)
        ):
            names = ", ".join(t.__name__ for t in signature)
            raise TypeError(f"{self.kind.label} takes ({names}), got {args!r}")

    def __str__(self) -> str:
        if not self.args:
            return self.kind.label
        inner = ", ".join(str(arg) for arg in self.args)
        return f"{self.kind.label}({inner})"

    def to_db_record(self) -> str | None:
        """Return the database record id for this market, if it has one."""
        if self.kind is not Kind.WINNER:
            return None
        return f"football_event:{_DB_WINNER[self.args[0]]}"