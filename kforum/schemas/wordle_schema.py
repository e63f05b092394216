# kforum/schemas/wordle_schema.py
from datetime import date as date_type, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.wordle_model import MAX_ATTEMPTS, WORD_LENGTH, GuessEntry, LetterStatus


class GuessRequest(BaseModel):
    guess: str


class StreakOut(BaseModel):
    current: int = 0
    max: int = 0
    total_wins: int = 0
    last_played_date: Optional[datetime] = None


class AttemptOut(BaseModel):
    guesses: List[GuessEntry] = []
    completed: bool = False
    won: bool = False
    attempts: int = 0


class TodayResponse(BaseModel):
    available: bool = True
    date: date_type
    hint: Optional[str] = None
    word_length: int = WORD_LENGTH
    max_attempts: int = MAX_ATTEMPTS
    attempt: Optional[AttemptOut] = None
    streak: StreakOut = StreakOut()


class GuessResponse(BaseModel):
    result: List[LetterStatus]
    guess: str
    attempts: int
    completed: bool
    won: bool
    correct_word: Optional[str] = None      # only revealed once completed
    streak: Optional[StreakOut] = None      # only set on the completing guess


class StatsResponse(BaseModel):
    streak: StreakOut
    total_games: int
    wins: int
    win_rate: int


class LeaderboardEntry(BaseModel):
    id: str
    name: Optional[str] = None
    student_id: Optional[str] = None
    avatar: Optional[str] = None
    streak: StreakOut


# ---- admin ----
class SetWordRequest(BaseModel):
    word: str = Field(min_length=5, max_length=5)
    date: Optional[date_type] = None
    hint: Optional[str] = None
    force: bool = False      # replace even if people already played that day


class DailyWordOut(BaseModel):
    id: str
    date: date_type
    word: str
    hint: Optional[str] = None
    created_by: Optional[str] = None
