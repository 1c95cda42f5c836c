from datetime import date, datetime

import pytest

from showlist import dates


def test_parse_date_fills_year_from_reference():
    assert dates.parse_date("Fri Mar 15", date(2024, 3, 10)) == date(2024, 3, 15)


def test_at_time_combines_with_day(la):
    assert dates.at_time("8:00 pm", date(2024, 3, 15), la) == datetime(2024, 3, 15, 20, 0, tzinfo=la)
    assert dates.at_time("7:00PM", date(2024, 3, 15), la) == datetime(2024, 3, 15, 19, 0, tzinfo=la)
    assert dates.at_time("8pm", date(2024, 3, 15), la) == datetime(2024, 3, 15, 20, 0, tzinfo=la)


def test_roll_by_month_adds_365_days():
    today = date(2024, 3, 10)
    assert dates.roll_by_month(date(2024, 3, 1), today) == date(2024, 3, 1)
    assert dates.roll_by_month(date(2024, 12, 31), today) == date(2024, 12, 31)
    assert dates.roll_by_month(date(2024, 1, 11), today) == date(2025, 1, 10)


def test_roll_past_moves_to_next_calendar_year():
    assert dates.roll_past(date(2024, 1, 2), date(2024, 12, 28)) == date(2025, 1, 2)
    assert dates.roll_past(date(2024, 12, 29), date(2024, 12, 28)) == date(2024, 12, 29)


def test_first_of_returns_first_success():
    def fail():
        raise ValueError("nope")

    result = dates.first_of(("first", fail), ("second", lambda: date(2024, 1, 1)))
    assert result == date(2024, 1, 1)


def test_first_of_keeps_every_failure_reason():
    def fail(message):
        def attempt():
            raise ValueError(message)
        return attempt

    with pytest.raises(dates.DateParseError) as info:
        dates.first_of(("link", fail("no digits")), ("title", fail("bad title")))

    assert [label for label, _ in info.value.failures] == ["link", "title"]
    assert "no digits" in str(info.value)
    assert "bad title" in str(info.value)
