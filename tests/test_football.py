import pytest

from oddscout.football import Football, Kind, Part, Player


def test_str_without_arguments():
    assert str(Football(Kind.OFFSIDES)) == "Offsides"


def test_str_with_arguments():
    assert str(Football(Kind.WINNER, (Part.FULL_TIME,))) == "Winner(FullTime)"
    market = Football(Kind.GOALS_PLAYER, (Player.P2, Part.FIRST_HALF))
    assert str(market) == "GoalsPlayer(P2, FirstHalf)"
    assert str(Football(Kind.BOTH_TO_SCORE_AT_LEAST, (3,))) == "BothToScoreAtLeast(3)"


def test_db_record_for_winner():
    assert (
        Football(Kind.WINNER, (Part.FULL_TIME,)).to_db_record()
        == "football_event:winner"
    )
    assert (
        Football(Kind.WINNER, (Part.FIRST_HALF,)).to_db_record()
        == "football_event:winner_h1"
    )
    assert (
        Football(Kind.WINNER, (Part.SECOND_HALF,)).to_db_record()
        == "football_event:winner_h2"
    )


def test_db_record_missing_for_other_kinds():
    assert Football(Kind.GOALS, (Part.FULL_TIME,)).to_db_record() is None
    assert Football(Kind.PENALTY).to_db_record() is None


def test_wrong_arity_rejected():
    with pytest.raises(TypeError):
        Football(Kind.WINNER)
    with pytest.raises(TypeError):
        Football(Kind.PENALTY, (Part.FULL_TIME,))


def test_wrong_argument_type_rejected():
    with pytest.raises(TypeError):
        Football(Kind.GOALS_PLAYER, (Part.FULL_TIME, Player.P1))
    with pytest.raises(TypeError):
        Football(Kind.BOTH_TO_SCORE_AT_LEAST, (True,))


def test_equality_and_hash():
    a = Football(Kind.CORNERS, [Part.SECOND_HALF])
    b = Football(Kind.CORNERS, (Part.SECOND_HALF,))
    assert a == b
    assert len({a, b}) == 1
    assert a != Football(Kind.CORNERS, (Part.FIRST_HALF,))


def test_str_of_other_markets():
    assert str(Football(Kind.CORNERS, (Part.SECOND_HALF,))) == "Corners(SecondHalf)"
    assert str(Football(Kind.GOALS, (Part.FIRST_HALF,))) == "Goals(FirstHalf)"
    assert str(Football(Kind.PENALTY)) == "Penalty"