# kforum/routes/admin.py
from __future__ import annotations
from fastapi import APIRouter, Depends, Query
from typing import List

from kforum.schemas.post_schema import AdminDecisionRequest, PendingPost
from kforum.controllers.admin_controller import (
    approve_post,
    decide_comment,
    list_pending_comments,
    list_pending_posts,
    reject_post,
)
from kforum.utils.auth_utils import get_current_admin_user

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/posts/pending", response_model=List[PendingPost])
async def pending_posts(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=100),
    admin=Depends(get_current_admin_user),
):
    return await list_pending_posts(skip, limit)


@router.post("/posts/{post_id}/approve")
async def approve(post_id: str, body: AdminDecisionRequest | None = None, admin=Depends(get_current_admin_user)):
    return await approve_post(post_id, admin, body.reason if body else None)


@router.post("/posts/{post_id}/reject")
async def reject(post_id: str, body: AdminDecisionRequest | None = None, admin=Depends(get_current_admin_user)):
    return await reject_post(post_id, admin, body.reason if body else None)


@router.get("/comments/pending")
async def pending_comments(limit: int = Query(50, ge=1, le=100), admin=Depends(get_current_admin_user)):
    return await list_pending_comments(limit)


@router.post("/comments/{comment_id}/approve")
async def approve_comment(comment_id: str, admin=Depends(get_current_admin_user)):
    return await decide_comment(comment_id, approve=True)


@router.post("/comments/{comment_id}/reject")
async def reject_comment(comment_id: str, admin=Depends(get_current_admin_user)):
    return await decide_comment(comment_id, approve=False)
