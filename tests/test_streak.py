"""Tests for streak transitions and the CalendarDay value type."""

from datetime import date, datetime, timedelta, timezone

import pytest

from kforum.models.wordle_model import WordleStreakModel
from kforum.utils.datetime_utils import CalendarDay
from kforum.utils.streak import advance_streak

TODAY = CalendarDay.parse("2024-03-01")


def _streak(current, best, last_played=None, wins=0):
    return WordleStreakModel(
        current=current,
        max=best,
        total_wins=wins,
        last_played_date=CalendarDay.parse(last_played).to_datetime() if last_played else None,
    )


def test_first_ever_win():
    s = advance_streak(None, TODAY, won=True)
    assert (s.current, s.max, s.total_wins) == (1, 1, 1)
    assert s.last_played_date == datetime(2024, 3, 1)


def test_win_after_yesterday_extends():
    s = advance_streak(_streak(3, 5, "2024-02-29", wins=10), TODAY, won=True)
    assert (s.current, s.max, s.total_wins) == (4, 5, 11)


def test_win_extends_past_max():
    s = advance_streak(_streak(5, 5, "2024-02-29"), TODAY, won=True)
    assert (s.current, s.max) == (6, 6)


def test_win_after_gap_restarts():
    s = advance_streak(_streak(4, 4, "2024-02-27", wins=4), TODAY, won=True)
    assert (s.current, s.max, s.total_wins) == (1, 4, 5)


def test_loss_resets_current_only():
    s = advance_streak(_streak(7, 9, "2024-02-29", wins=20), TODAY, won=False)
    assert (s.current, s.max, s.total_wins) == (0, 9, 20)
    assert s.last_played_date == TODAY.to_datetime()


def test_loss_on_first_play():
    s = advance_streak(None, TODAY, won=False)
    assert (s.current, s.max, s.total_wins) == (0, 0, 0)
    assert s.last_played_date == TODAY.to_datetime()


def test_prior_is_not_mutated():
    prior = _streak(2, 2, "2024-02-29")
    advance_streak(prior, TODAY, won=True)
    assert prior.current == 2


def test_calendar_day_parse_forms():
    assert CalendarDay.parse("2024-03-01") == TODAY
    assert CalendarDay.parse(date(2024, 3, 1)) == TODAY
    assert CalendarDay.parse(datetime(2024, 3, 1, 17, 45)) == TODAY
    assert CalendarDay.parse("2024-03-01T09:00:00Z") == TODAY
    assert CalendarDay.parse(TODAY) is TODAY
    with pytest.raises(ValueError):
        CalendarDay.parse("not-a-date")


def test_calendar_day_uses_utc_for_aware_datetimes():
    late_evening_east = datetime(2024, 3, 1, 22, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert CalendarDay.from_datetime(late_evening_east) == CalendarDay.parse("2024-03-02")


def test_calendar_day_neighbours():
    assert TODAY.previous() == CalendarDay.parse("2024-02-29")
    assert TODAY.next() == CalendarDay.parse("2024-03-02")
    assert TODAY.is_consecutive_after(TODAY.previous())
    assert not TODAY.is_consecutive_after(TODAY)
    assert not TODAY.is_consecutive_after(TODAY.next())
    assert not TODAY.is_consecutive_after(CalendarDay.parse("2024-02-28"))
    assert not TODAY.is_consecutive_after(None)


def test_calendar_day_value_semantics():
    assert TODAY.to_datetime() == datetime(2024, 3, 1)
    assert str(TODAY) == "2024-03-01"
    assert len({TODAY, CalendarDay.parse("2024-03-01")}) == 1
    assert sorted([TODAY.next(), TODAY, TODAY.previous()]) == [TODAY.previous(), TODAY, TODAY.next()]
    assert TODAY.previous() < TODAY
