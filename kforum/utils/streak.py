# kforum/utils/streak.py
from typing import Optional

from ..models.wordle_model import WordleStreakModel
from .datetime_utils import CalendarDay


def advance_streak(prior: Optional[WordleStreakModel], today: CalendarDay, won: bool) -> WordleStreakModel:
    """
    Streak transition for one completed attempt (runs at most once per user per day).

    win:  yesterday or never played -> current + 1
          any other day except today -> current = 1
          total_wins + 1, max follows current
    loss: current = 0
    last_played_date = today either way.
    """
    state = (prior or WordleStreakModel()).model_copy()
    last = CalendarDay.from_datetime(state.last_played_date) if state.last_played_date else None

    if won:
        if last is None or today.is_consecutive_after(last):
            state.current += 1
        elif last != today:
            state.current = 1
        state.total_wins += 1
        state.max = max(state.max, state.current)
    else:
        state.current = 0

    state.last_played_date = today.to_datetime()
    return state
