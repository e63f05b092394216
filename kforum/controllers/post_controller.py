# kforum/controllers/post_controller.py
from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from bson import ObjectId
from fastapi import HTTPException

from ..db.mongo import comments_collection, posts_collection, users_collection
from ..models.post_model import (
    CommentModel,
    PostCategory,
    PostModel,
    PostStatus,
    ReactionType,
)
from ..schemas.post_schema import (
    AuthorPreview,
    CommentCreateRequest,
    CommentResponse,
    CreatePostResponse,
    PostCreateRequest,
    PostResponse,
    ReactionResponse,
)
from ..services.moderation_service import moderate_text

HASHTAG_RE = re.compile(r"#(\w+)")


# ---------------------------
# Helpers
# ---------------------------
def _ensure_oid(id_str: str) -> ObjectId:
    if not ObjectId.is_valid(id_str):
        raise HTTPException(status_code=400, detail="Invalid ObjectId")
    return ObjectId(id_str)


def extract_hashtags(text: str) -> List[str]:
    return [m.lower() for m in HASHTAG_RE.findall(text or "")]


def merge_tags(manual: Iterable[str], extracted: Iterable[str]) -> List[str]:
    """Manual tags first, then hashtags; lowercased, blank-free, first occurrence wins."""
    cleaned = (t.strip().lstrip("#").lower() for t in [*manual, *extracted])
    return list(dict.fromkeys(t for t in cleaned if t))


def reaction_summary(reactions: List[dict], user_id: Optional[str] = None) -> Dict:
    counts = {r.value: 0 for r in ReactionType}
    mine = None
    for r in reactions:
        counts[r["type"]] = counts.get(r["type"], 0) + 1
        if user_id and str(r.get("user_id")) == user_id:
            mine = r["type"]
    return {"reaction_counts": counts, "total_reactions": len(reactions), "user_reaction": mine}


async def _author_preview(user_id) -> Optional[AuthorPreview]:
    if not user_id or not ObjectId.is_valid(str(user_id)):
        return None
    doc = await users_collection.find_one(
        {"_id": ObjectId(str(user_id))}, {"name": 1, "student_id": 1, "avatar": 1}
    )
    if not doc:
        return None
    return AuthorPreview(
        id=str(doc["_id"]),
        name=doc.get("name"),
        student_id=doc.get("student_id"),
        avatar=doc.get("avatar"),
    )


async def _post_response(doc: dict, viewer_id: Optional[str] = None) -> PostResponse:
    author = None if doc.get("is_anonymous") else await _author_preview(doc.get("author_id"))
    return PostResponse(
        id=str(doc["_id"]),
        title=doc.get("title", ""),
        content=doc.get("content", ""),
        category=doc.get("category"),
        tags=doc.get("tags", []),
        status=doc.get("status"),
        author=author,
        is_anonymous=bool(doc.get("is_anonymous")),
        event_date=doc.get("event_date"),
        comment_count=int(doc.get("comment_count", 0)),
        created_at=doc.get("created_at"),
        **reaction_summary(doc.get("reactions", []), viewer_id),
    )


async def _comment_response(doc: dict) -> CommentResponse:
    return CommentResponse(
        id=str(doc["_id"]),
        post_id=str(doc["post_id"]),
        content=doc.get("content", ""),
        status=doc.get("status"),
        author=await _author_preview(doc.get("author_id")),
        created_at=doc.get("created_at"),
    )


# ---------------------------
# Posts
# ---------------------------
async def create_post(data: PostCreateRequest, current_user: dict) -> CreatePostResponse:
    title, content = data.title.strip(), data.content.strip()
    if not title or not content:
        raise HTTPException(status_code=400, detail="Title and content are required")

    verdict = await moderate_text(f"{title}\n{content}")
    status = PostStatus.PENDING_REVIEW if verdict.is_unsafe else PostStatus.PUBLISHED

    post = PostModel(
        title=title,
        content=content,
        author_id=str(current_user["_id"]),
        is_anonymous=data.is_anonymous,
        category=data.category,
        tags=merge_tags(data.tags, extract_hashtags(content)),
        status=status,
        event_date=data.event_date if data.category == PostCategory.EVENTS else None,
        moderation=verdict,
    )
    doc = post.model_dump(by_alias=True, exclude={"id"}, mode="python")
    result = await posts_collection.insert_one(doc)
    doc["_id"] = result.inserted_id

    logging.info(
        "Post %s by %s -> %s (confidence=%.2f source=%s)",
        result.inserted_id, current_user["_id"], status.value, verdict.confidence, verdict.source.value,
    )

    message = (
        "Post published successfully"
        if status == PostStatus.PUBLISHED
        else "Your post is under review and will be visible once approved"
    )
    return CreatePostResponse(message=message, post=await _post_response(doc, str(current_user["_id"])))


async def list_posts(
    current_user: Optional[dict] = None,
    category: Optional[PostCategory] = None,
    skip: int = 0,
    limit: int = 20,
) -> List[PostResponse]:
    query: dict = {"status": PostStatus.PUBLISHED.value}
    if category:
        query["category"] = category.value

    cursor = (
        posts_collection.find(query)
        .sort("created_at", -1)
        .skip(max(0, skip))
        .limit(max(1, min(limit, 100)))
    )
    viewer = str(current_user["_id"]) if current_user else None
    return [await _post_response(doc, viewer) async for doc in cursor]


async def get_post(post_id: str, current_user: dict) -> PostResponse:
    doc = await posts_collection.find_one({"_id": _ensure_oid(post_id)})
    viewer = str(current_user["_id"])
    # held posts stay visible to their author only
    if not doc or (doc.get("status") != PostStatus.PUBLISHED.value and str(doc.get("author_id")) != viewer):
        raise HTTPException(status_code=404, detail="Post not found")
    return await _post_response(doc, viewer)


async def react_to_post(post_id: str, reaction: ReactionType, current_user: dict) -> ReactionResponse:
    """
    Same reaction twice toggles it off; a different one replaces it.
    Each branch is one conditional update; a user never holds two reactions on a post.
    """
    oid = _ensure_oid(post_id)
    user_id = str(current_user["_id"])

    post = await posts_collection.find_one(
        {"_id": oid, "status": PostStatus.PUBLISHED.value}, {"reactions": 1}
    )
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")

    existing = next((r for r in post.get("reactions", []) if str(r.get("user_id")) == user_id), None)
    if existing and existing["type"] == reaction.value:
        await posts_collection.update_one({"_id": oid}, {"$pull": {"reactions": {"user_id": user_id}}})
    elif existing:
        await posts_collection.update_one(
            {"_id": oid, "reactions.user_id": user_id},
            {"$set": {"reactions.$.type": reaction.value, "reactions.$.created_at": datetime.utcnow()}},
        )
    else:
        await posts_collection.update_one(
            {"_id": oid, "reactions.user_id": {"$ne": user_id}},
            {"$push": {"reactions": {"user_id": user_id, "type": reaction.value, "created_at": datetime.utcnow()}}},
        )

    updated = await posts_collection.find_one({"_id": oid}, {"reactions": 1}) or {}
    return ReactionResponse(**reaction_summary(updated.get("reactions", []), user_id))


# ---------------------------
# Comments
# ---------------------------
async def add_comment(post_id: str, data: CommentCreateRequest, current_user: dict) -> CommentResponse:
    oid = _ensure_oid(post_id)
    post = await posts_collection.find_one({"_id": oid, "status": PostStatus.PUBLISHED.value}, {"_id": 1})
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")

    content = data.content.strip()
    if not content:
        raise HTTPException(status_code=400, detail="Comment cannot be empty")

    verdict = await moderate_text(content)
    comment = CommentModel(
        post_id=str(oid),
        author_id=str(current_user["_id"]),
        content=content,
        status=PostStatus.PENDING_REVIEW if verdict.is_unsafe else PostStatus.PUBLISHED,
        moderation=verdict,
    )
    doc = comment.model_dump(by_alias=True, exclude={"id"}, mode="python")
    result = await comments_collection.insert_one(doc)
    doc["_id"] = result.inserted_id

    if comment.status == PostStatus.PUBLISHED:
        await posts_collection.update_one({"_id": oid}, {"$inc": {"comment_count": 1}})
    else:
        logging.info("Comment %s on post %s held for review", result.inserted_id, post_id)

    return await _comment_response(doc)


async def list_comments(post_id: str, skip: int = 0, limit: int = 50) -> List[CommentResponse]:
    cursor = (
        comments_collection.find({"post_id": str(_ensure_oid(post_id)), "status": PostStatus.PUBLISHED.value})
        .sort("created_at", 1)
        .skip(max(0, skip))
        .limit(max(1, min(limit, 100)))
    )
    return [await _comment_response(doc) async for doc in cursor]
