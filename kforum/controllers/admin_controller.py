# kforum/controllers/admin_controller.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import HTTPException

from ..db.mongo import comments_collection, posts_collection
from ..models.post_model import AdminDecisionModel, PostStatus
from ..schemas.moderation_schema import ModerationInfo
from ..schemas.post_schema import PendingPost
from ..utils.moderation import censor_text
from .post_controller import _author_preview, _ensure_oid

PREVIEW_LEN = 280


def moderation_info(stored: Optional[dict]) -> ModerationInfo:
    m = stored or {}
    confidence = float(m.get("confidence") or 0.0)
    source = m.get("source") or "none"
    return ModerationInfo(
        confidence=confidence,
        confidence_percent=round(confidence * 100),
        categories=m.get("categories", []),
        flagged_words=m.get("flagged_words", []),
        language=m.get("language") or "unknown",
        is_unsafe=bool(m.get("is_unsafe")),
        source=getattr(source, "value", source),
    )


def censored_preview(text: str, limit: int = PREVIEW_LEN) -> str:
    text = censor_text(text or "")
    return text if len(text) <= limit else text[: limit - 3] + "..."


async def list_pending_posts(skip: int = 0, limit: int = 50) -> List[PendingPost]:
    cursor = (
        posts_collection.find({"status": PostStatus.PENDING_REVIEW.value})
        .sort("created_at", -1)
        .skip(max(0, skip))
        .limit(max(1, min(limit, 100)))
    )
    out: List[PendingPost] = []
    async for doc in cursor:
        out.append(
            PendingPost(
                id=str(doc["_id"]),
                title=censored_preview(doc.get("title", ""), 200),
                preview=censored_preview(doc.get("content", "")),
                category=doc["category"],
                author=await _author_preview(doc.get("author_id")),
                moderation=moderation_info(doc.get("moderation")),
                created_at=doc.get("created_at"),
            )
        )
    return out


async def _decide(post_id: str, admin: dict, status: PostStatus, decision: str, reason: Optional[str]) -> dict:
    oid = _ensure_oid(post_id)
    record = AdminDecisionModel(decision=decision, admin_id=str(admin["_id"]), reason=reason)
    result = await posts_collection.update_one(
        {"_id": oid},
        {"$set": {
            "status": status.value,
            "admin_decision": record.model_dump(),
            "updated_at": datetime.utcnow(),
        }},
    )
    if result.matched_count == 0:
        raise HTTPException(status_code=404, detail="Post not found")
    logging.info("Admin %s %s post %s", admin["_id"], decision.lower(), post_id)
    return {"message": f"Post {decision.lower()}", "id": post_id, "status": status.value}


async def approve_post(post_id: str, admin: dict, reason: Optional[str] = None) -> dict:
    return await _decide(post_id, admin, PostStatus.PUBLISHED, "APPROVED", reason)


async def reject_post(post_id: str, admin: dict, reason: Optional[str] = None) -> dict:
    return await _decide(post_id, admin, PostStatus.REJECTED, "REJECTED", reason or "Violates community guidelines")


async def list_pending_comments(limit: int = 50) -> List[dict]:
    cursor = (
        comments_collection.find({"status": PostStatus.PENDING_REVIEW.value})
        .sort("created_at", -1)
        .limit(max(1, min(limit, 100)))
    )
    return [
        {
            "id": str(c["_id"]),
            "post_id": str(c.get("post_id")),
            "preview": censored_preview(c.get("content", "")),
            "moderation": moderation_info(c.get("moderation")).model_dump(),
            "created_at": c.get("created_at"),
        }
        async for c in cursor
    ]


async def decide_comment(comment_id: str, approve: bool) -> dict:
    oid = _ensure_oid(comment_id)
    status = PostStatus.PUBLISHED if approve else PostStatus.REJECTED
    c = await comments_collection.find_one_and_update(
        {"_id": oid, "status": PostStatus.PENDING_REVIEW.value},
        {"$set": {"status": status.value}},
    )
    if not c:
        raise HTTPException(status_code=404, detail="Pending comment not found")
    if approve:
        await posts_collection.update_one({"_id": _ensure_oid(str(c["post_id"]))}, {"$inc": {"comment_count": 1}})
    return {"message": "Comment approved" if approve else "Comment rejected", "id": comment_id}
