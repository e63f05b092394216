# kforum/routes/wordle.py
from fastapi import APIRouter, Depends, Query
from typing import List

from kforum.schemas.wordle_schema import (
    DailyWordOut,
    GuessRequest,
    GuessResponse,
    LeaderboardEntry,
    SetWordRequest,
    StatsResponse,
    TodayResponse,
)
from kforum.controllers.wordle_controller import (
    delete_word,
    get_leaderboard,
    get_stats,
    get_today,
    list_words,
    make_guess,
    regenerate_today,
    set_word,
)
from kforum.utils.auth_utils import get_current_admin_user, get_current_user

router = APIRouter(prefix="/wordle", tags=["Wordle"])


# Today's puzzle (never reveals the word) + the caller's attempt so far
@router.get("/today", response_model=TodayResponse, summary="Get today's Wordle state")
async def today(current_user: dict = Depends(get_current_user)):
    return await get_today(current_user)


@router.post("/guess", response_model=GuessResponse, summary="Submit a guess for today's Wordle")
async def guess(body: GuessRequest, current_user: dict = Depends(get_current_user)):
    return await make_guess(body.guess, current_user)


@router.get("/stats", response_model=StatsResponse, summary="Get the caller's Wordle stats")
async def stats(current_user: dict = Depends(get_current_user)):
    return await get_stats(current_user)


@router.get("/leaderboard", response_model=List[LeaderboardEntry], summary="Top current streaks")
async def leaderboard(limit: int = Query(10, ge=1, le=50)):
    return await get_leaderboard(limit)


# ---------------------------
# Admin
# ---------------------------
@router.post("/admin/set-word", summary="Set the word for a day")
async def admin_set_word(data: SetWordRequest, admin: dict = Depends(get_current_admin_user)):
    return await set_word(data, admin)


@router.get("/admin/words", response_model=List[DailyWordOut], summary="Last 30 daily words")
async def admin_list_words(admin: dict = Depends(get_current_admin_user)):
    return await list_words(30)


@router.delete("/admin/words/{word_id}", summary="Delete a daily word")
async def admin_delete_word(word_id: str, admin: dict = Depends(get_current_admin_user)):
    return await delete_word(word_id)


@router.post("/admin/regenerate", summary="Replace today's word with a freshly generated one")
async def admin_regenerate(admin: dict = Depends(get_current_admin_user)):
    return await regenerate_today(admin)
