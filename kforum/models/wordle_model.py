# kforum/models/wordle_model.py
from datetime import datetime
from enum import Enum
from typing import List, Optional

from bson import ObjectId
from pydantic import BaseModel, Field, field_validator
from pydantic.functional_validators import BeforeValidator
from typing_extensions import Annotated

PyObjectId = Annotated[str, BeforeValidator(lambda x: str(x))]

WORD_LENGTH = 5
MAX_ATTEMPTS = 6


class LetterStatus(str, Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class AttemptState(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


def _five_upper(v: str) -> str:
    v = (v or "").strip().upper()
    if len(v) != WORD_LENGTH or not v.isascii() or not v.isalpha():
        raise ValueError("word must be exactly 5 letters A-Z")
    return v


class DailyWordModel(BaseModel):
    id: Optional[PyObjectId] = Field(alias="_id", default=None)
    date: datetime                      # naive UTC midnight
    word: str
    hint: Optional[str] = None
    created_by: Optional[PyObjectId] = None   # None = auto-generated
    created_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
        "json_encoders": {ObjectId: str},
    }

    @field_validator("word")
    @classmethod
    def _word(cls, v: str) -> str:
        return _five_upper(v)

    @field_validator("hint")
    @classmethod
    def _hint(cls, v: Optional[str], info) -> Optional[str]:
        v = (v or "").strip() or None
        word = info.data.get("word")
        if v and word and word in v.upper():
            raise ValueError("hint must not contain the word")
        return v


class GuessEntry(BaseModel):
    guess: str
    result: List[LetterStatus]


class WordleAttemptModel(BaseModel):
    id: Optional[PyObjectId] = Field(alias="_id", default=None)
    user_id: PyObjectId
    date: datetime                      # naive UTC midnight
    word: str                           # snapshot of the day's secret at creation
    guesses: List[GuessEntry] = Field(default_factory=list)
    completed: bool = False
    won: bool = False
    attempts_count: int = 0
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
        "json_encoders": {ObjectId: str},
        "extra": "ignore",
    }

    @property
    def state(self) -> AttemptState:
        if self.completed:
            return AttemptState.WON if self.won else AttemptState.LOST
        return AttemptState.IN_PROGRESS if self.guesses else AttemptState.NOT_STARTED


class WordleStreakModel(BaseModel):
    """Embedded on the user document as `wordle_streak`."""
    current: int = Field(default=0, ge=0)
    max: int = Field(default=0, ge=0)
    last_played_date: Optional[datetime] = None
    total_wins: int = Field(default=0, ge=0)
