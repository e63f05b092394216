# kforum/utils/wordle.py
"""
Daily word game rules: guess evaluation and the per-(user, day) attempt lifecycle.

Everything here is pure. Persistence and per-key serialization live in
controllers/wordle_controller.py.
"""
from __future__ import annotations

import re
from collections import Counter
from typing import Callable, List, Optional

from pydantic import BaseModel

from ..models.wordle_model import (
    MAX_ATTEMPTS,
    WORD_LENGTH,
    GuessEntry,
    LetterStatus,
    WordleAttemptModel,
)
from .datetime_utils import CalendarDay
from .wordle_dictionary import is_valid_word as default_is_valid_word

_LETTERS = re.compile(r"^[A-Za-z]+$")


# ---------------------------
# Errors
# ---------------------------
class WordleError(Exception):
    message = "Wordle error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class GuessValidationError(WordleError):
    """Bad input. The attempt is untouched and no try is used up."""


class InvalidGuess(GuessValidationError):
    message = "Guess must be exactly 5 letters"


class InvalidWord(GuessValidationError):
    message = "Not a valid English word!"


class AttemptStateError(WordleError):
    """The attempt can't take another guess."""


class AlreadyCompleted(AttemptStateError):
    message = "You have already completed today's Wordle"


class AttemptLimitExceeded(AttemptStateError):
    message = "No more attempts left for today"


# ---------------------------
# Guess evaluation
# ---------------------------
def evaluate_guess(guess: str, secret: str) -> List[LetterStatus]:
    """
    Two passes over a letter multiset of the secret: exact hits first, then
    left-to-right "present" marks while copies of the letter remain. A letter is
    never marked more often than it occurs in the secret.
    """
    guess, secret = guess.upper(), secret.upper()
    if len(guess) != WORD_LENGTH or len(secret) != WORD_LENGTH:
        raise InvalidGuess()

    remaining = Counter(secret)
    result: List[Optional[LetterStatus]] = [None] * WORD_LENGTH

    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            result[i] = LetterStatus.CORRECT
            remaining[g] -= 1

    for i, g in enumerate(guess):
        if result[i] is not None:
            continue
        if remaining[g] > 0:
            result[i] = LetterStatus.PRESENT
            remaining[g] -= 1
        else:
            result[i] = LetterStatus.ABSENT

    return result  # type: ignore[return-value]


def normalize_guess(raw: str, is_valid_word: Callable[[str], bool] = default_is_valid_word) -> str:
    guess = (raw or "").strip()
    if len(guess) != WORD_LENGTH:
        raise InvalidGuess("Guess must be exactly 5 letters")
    if not guess.isascii() or not _LETTERS.match(guess):
        raise InvalidGuess("Guess must contain only letters")
    guess = guess.upper()
    if not is_valid_word(guess):
        raise InvalidWord()
    return guess


# ---------------------------
# Attempt lifecycle
# ---------------------------
class GuessOutcome(BaseModel):
    guess: str
    result: List[LetterStatus]
    attempts_count: int
    completed: bool
    won: bool
    attempt: WordleAttemptModel


def start_attempt(user_id: str, day: CalendarDay, secret: str) -> WordleAttemptModel:
    """NOT_STARTED -> IN_PROGRESS happens on the first guess; the secret is snapshotted here."""
    return WordleAttemptModel(user_id=user_id, date=day.to_datetime(), word=secret.upper())


def submit_guess(
    attempt: WordleAttemptModel,
    raw_guess: str,
    is_valid_word: Callable[[str], bool] = default_is_valid_word,
) -> GuessOutcome:
    """
    Apply one guess. Validation errors come first so a typo never costs a try;
    then a won game reports AlreadyCompleted, a full board AttemptLimitExceeded,
    and any other finished game AlreadyCompleted.
    The input attempt is not modified.
    """
    guess = normalize_guess(raw_guess, is_valid_word)

    if attempt.completed and attempt.won:
        raise AlreadyCompleted()
    if attempt.attempts_count >= MAX_ATTEMPTS:
        raise AttemptLimitExceeded()
    if attempt.completed:
        raise AlreadyCompleted()

    secret = attempt.word.upper()
    result = evaluate_guess(guess, secret)

    updated = attempt.model_copy(deep=True)
    updated.guesses.append(GuessEntry(guess=guess, result=result))
    updated.attempts_count = len(updated.guesses)

    if guess == secret:
        updated.completed, updated.won = True, True
    elif updated.attempts_count >= MAX_ATTEMPTS:
        updated.completed, updated.won = True, False

    return GuessOutcome(
        guess=guess,
        result=result,
        attempts_count=updated.attempts_count,
        completed=updated.completed,
        won=updated.won,
        attempt=updated,
    )
