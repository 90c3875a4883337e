from datetime import datetime

from oddscout.dates import eat, eat2, in_hours

NOW = datetime(2024, 6, 1, 12, 0)


def test_eat_future_date_uses_current_year():
    assert eat("15.07. 18:30", NOW) == datetime(2024, 7, 15, 18, 30)


def test_eat_past_date_rolls_to_next_year():
    assert eat("15.03. 18:30", NOW) == datetime(2025, 3, 15, 18, 30)


def test_eat_result_is_never_before_now():
    for text in ["01.01. 00:00", "01.06. 11:59", "01.06. 12:00", "31.12. 23:59"]:
        result = eat(text, NOW)
        assert result >= NOW


def test_eat_exact_now_is_kept():
    assert eat("01.06. 12:00", NOW) == NOW


def test_eat_rejects_garbage():
    assert eat("not a date", NOW) is None
    assert eat("32.01. 10:00", NOW) is None


def test_eat2_parses_full_format():
    assert eat2("2024-05-01 20:45") == datetime(2024, 5, 1, 20, 45)


def test_eat2_rejects_other_format():
    assert eat2("01.05. 20:45") is None


def test_eat2_round_trip_with_strftime():
    date = datetime(2023, 11, 9, 7, 5)
    assert eat2(date.strftime("%Y-%m-%d %H:%M")) == date


def test_in_hours_boundaries():
    assert in_hours(datetime(2024, 6, 1, 14, 0), 2, NOW) is True
    assert in_hours(datetime(2024, 6, 1, 14, 1), 2, NOW) is False
    assert in_hours(datetime(2024, 5, 1, 0, 0), 0, NOW) is True