# kforum/controllers/wordle_controller.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from bson import ObjectId
from fastapi import HTTPException
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from ..db.mongo import (
    daily_words_collection,
    users_collection,
    wordle_attempts_collection,
)
from ..models.wordle_model import DailyWordModel, WordleAttemptModel, WordleStreakModel
from ..schemas.wordle_schema import (
    AttemptOut,
    DailyWordOut,
    GuessResponse,
    LeaderboardEntry,
    SetWordRequest,
    StatsResponse,
    StreakOut,
    TodayResponse,
)
from ..services.wordle_generator import generate_daily_word, generate_hint_for_word
from ..utils.datetime_utils import CalendarDay
from ..utils.locks import KeyedLocks
from ..utils.streak import advance_streak
from ..utils.wordle import (
    AttemptStateError,
    GuessValidationError,
    normalize_guess,
    start_attempt,
    submit_guess,
)

_attempt_locks = KeyedLocks()   # key: (user_id, day)
_streak_locks = KeyedLocks()    # key: user_id


# ---------------------------
# Helpers
# ---------------------------
def _oid(s: str) -> ObjectId:
    if not ObjectId.is_valid(s):
        raise HTTPException(status_code=400, detail="Invalid ObjectId")
    return ObjectId(s)


def _streak_out(doc: Optional[dict]) -> StreakOut:
    s = WordleStreakModel(**((doc or {}).get("wordle_streak") or {}))
    return StreakOut(**s.model_dump())


async def _new_daily_word(day: CalendarDay, created_by: Optional[str]) -> DailyWordModel:
    word = await generate_daily_word()
    hint = await generate_hint_for_word(word)
    return DailyWordModel(date=day.to_datetime(), word=word, hint=hint, created_by=created_by)


async def ensure_word_for_day(day: CalendarDay) -> DailyWordModel:
    """
    Lazily create the day's word. The insert is an upsert-if-absent on the unique
    `date` key, so two first requests of the day agree on a single word.
    """
    existing = await daily_words_collection.find_one({"date": day.to_datetime()})
    if existing:
        return DailyWordModel(**existing)

    logging.info("No word for %s, auto-generating...", day)
    candidate = await _new_daily_word(day, created_by=None)
    payload = candidate.model_dump(exclude={"id"})
    try:
        doc = await daily_words_collection.find_one_and_update(
            {"date": day.to_datetime()},
            {"$setOnInsert": payload},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
    except DuplicateKeyError:
        doc = await daily_words_collection.find_one({"date": day.to_datetime()})
    if not doc:
        raise HTTPException(status_code=503, detail="Unable to generate Wordle for today. Try again later!")
    return DailyWordModel(**doc)


async def _get_or_create_attempt(user_id: str, day: CalendarDay, secret: str) -> WordleAttemptModel:
    fresh = start_attempt(user_id, day, secret)
    try:
        doc = await wordle_attempts_collection.find_one_and_update(
            {"user_id": user_id, "date": day.to_datetime()},
            {"$setOnInsert": fresh.model_dump(exclude={"id"})},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
    except DuplicateKeyError:
        doc = await wordle_attempts_collection.find_one({"user_id": user_id, "date": day.to_datetime()})
    return WordleAttemptModel(**doc)


async def _record_streak(user_id: str, day: CalendarDay, won: bool) -> StreakOut:
    async with _streak_locks.hold(user_id):
        user = await users_collection.find_one({"_id": _oid(user_id)}, {"wordle_streak": 1})
        prior = WordleStreakModel(**((user or {}).get("wordle_streak") or {}))
        updated = advance_streak(prior, day, won)

        result = await users_collection.update_one(
            {"_id": _oid(user_id), "wordle_streak.last_played_date": prior.last_played_date},
            {"$set": {"wordle_streak": updated.model_dump(), "updated_at": datetime.utcnow()}},
        )
        if result.matched_count == 0:
            logging.warning("Streak for user %s changed concurrently; update skipped", user_id)
            user = await users_collection.find_one({"_id": _oid(user_id)}, {"wordle_streak": 1})
            return _streak_out(user)
    return StreakOut(**updated.model_dump())


# ---------------------------
# Player flows
# ---------------------------
async def get_today(current_user: dict) -> TodayResponse:
    day = CalendarDay.today()
    daily = await ensure_word_for_day(day)
    user_id = str(current_user["_id"])

    doc = await wordle_attempts_collection.find_one({"user_id": user_id, "date": day.to_datetime()})
    attempt = None
    if doc:
        a = WordleAttemptModel(**doc)
        attempt = AttemptOut(guesses=a.guesses, completed=a.completed, won=a.won, attempts=a.attempts_count)

    return TodayResponse(
        date=day.date,
        hint=daily.hint,
        attempt=attempt,
        streak=_streak_out(current_user),
    )


async def make_guess(raw_guess: str, current_user: dict) -> GuessResponse:
    user_id = str(current_user["_id"])
    day = CalendarDay.today()

    try:
        normalize_guess(raw_guess)
    except GuessValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    daily = await ensure_word_for_day(day)

    async with _attempt_locks.hold((user_id, day)):
        attempt = await _get_or_create_attempt(user_id, day, daily.word)
        try:
            outcome = submit_guess(attempt, raw_guess)
        except GuessValidationError as e:
            raise HTTPException(status_code=400, detail=e.message)
        except AttemptStateError as e:
            raise HTTPException(status_code=409, detail=e.message)

        new_entry = outcome.attempt.guesses[-1].model_dump()
        result = await wordle_attempts_collection.update_one(
            {
                "_id": _oid(attempt.id),
                "attempts_count": attempt.attempts_count,
                "completed": False,
            },
            {
                "$push": {"guesses": new_entry},
                "$set": {
                    "attempts_count": outcome.attempts_count,
                    "completed": outcome.completed,
                    "won": outcome.won,
                    "updated_at": datetime.utcnow(),
                },
            },
        )
        if result.modified_count == 0:
            raise HTTPException(status_code=409, detail="Another guess was submitted at the same time. Try again.")

    streak = None
    if outcome.completed:
        streak = await _record_streak(user_id, day, outcome.won)

    return GuessResponse(
        result=outcome.result,
        guess=outcome.guess,
        attempts=outcome.attempts_count,
        completed=outcome.completed,
        won=outcome.won,
        correct_word=attempt.word if outcome.completed else None,
        streak=streak,
    )


async def get_stats(current_user: dict) -> StatsResponse:
    user_id = str(current_user["_id"])
    total = await wordle_attempts_collection.count_documents({"user_id": user_id, "completed": True})
    wins = await wordle_attempts_collection.count_documents({"user_id": user_id, "won": True})
    return StatsResponse(
        streak=_streak_out(current_user),
        total_games=total,
        wins=wins,
        win_rate=round(wins / total * 100) if total else 0,
    )


async def get_leaderboard(limit: int = 10) -> List[LeaderboardEntry]:
    cursor = (
        users_collection.find(
            {"wordle_streak.current": {"$gt": 0}},
            {"name": 1, "student_id": 1, "avatar": 1, "wordle_streak": 1},
        )
        .sort("wordle_streak.current", -1)
        .limit(max(1, min(limit, 50)))
    )
    return [
        LeaderboardEntry(
            id=str(u["_id"]),
            name=u.get("name"),
            student_id=u.get("student_id"),
            avatar=u.get("avatar"),
            streak=_streak_out(u),
        )
        async for u in cursor
    ]


# ---------------------------
# Admin
# ---------------------------
def _word_out(doc: dict) -> DailyWordOut:
    w = DailyWordModel(**doc)
    return DailyWordOut(
        id=str(w.id),
        date=CalendarDay.from_datetime(w.date).date,
        word=w.word,
        hint=w.hint,
        created_by=w.created_by,
    )


async def set_word(data: SetWordRequest, admin: dict) -> dict:
    day = CalendarDay.parse(data.date) if data.date else CalendarDay.today()
    try:
        word = DailyWordModel(
            date=day.to_datetime(), word=data.word, hint=data.hint, created_by=str(admin["_id"])
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    # Best-effort guard: an attempt started between this count and the write keeps the
    # word it snapshotted, same as with force=true.
    played = await wordle_attempts_collection.count_documents({"date": day.to_datetime()})
    if played and not data.force:
        raise HTTPException(
            status_code=409,
            detail=f"{played} attempt(s) already exist for {day}; pass force=true to replace the word",
        )

    await daily_words_collection.update_one(
        {"date": day.to_datetime()},
        {"$set": word.model_dump(exclude={"id"})},
        upsert=True,
    )
    logging.info("Admin %s set word for %s", admin["_id"], day)
    return {"message": "Daily word set successfully", "date": str(day), "word": word.word}


async def list_words(limit: int = 30) -> List[DailyWordOut]:
    cursor = daily_words_collection.find().sort("date", -1).limit(limit)
    return [_word_out(d) async for d in cursor]


async def delete_word(word_id: str) -> dict:
    result = await daily_words_collection.delete_one({"_id": _oid(word_id)})
    if result.deleted_count == 0:
        raise HTTPException(status_code=404, detail="Word not found")
    return {"message": "Word deleted successfully"}


async def regenerate_today(admin: dict) -> dict:
    """
    Explicit override: replace today's word with a freshly generated one.
    The old word stays in place until the single upsert below.
    Existing attempts keep their snapshot.
    """
    day = CalendarDay.today()
    word = await _new_daily_word(day, created_by=str(admin["_id"]))
    await daily_words_collection.update_one(
        {"date": day.to_datetime()},
        {"$set": word.model_dump(exclude={"id"})},
        upsert=True,
    )
    logging.info("Admin %s regenerated word for %s", admin["_id"], day)
    return {"message": "New word generated successfully", "word": word.word, "hint": word.hint}
