# kforum/schemas/post_schema.py
from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from datetime import datetime

from ..models.post_model import PostCategory, PostStatus, ReactionType
from .moderation_schema import ModerationInfo


class AuthorPreview(BaseModel):
    id: str
    name: Optional[str] = None
    student_id: Optional[str] = None
    avatar: Optional[str] = None


class PostCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=5000)
    category: PostCategory
    tags: List[str] = []
    is_anonymous: bool = False
    event_date: Optional[datetime] = None   # only kept for "events"


class CommentCreateRequest(BaseModel):
    content: str = Field(min_length=1, max_length=2000)


class ReactionRequest(BaseModel):
    type: ReactionType


class PostResponse(BaseModel):
    id: str
    title: str
    content: str
    category: PostCategory
    tags: List[str] = []
    status: PostStatus
    author: Optional[AuthorPreview] = None   # None when anonymous
    is_anonymous: bool = False
    event_date: Optional[datetime] = None
    reaction_counts: Dict[str, int] = {}
    total_reactions: int = 0
    user_reaction: Optional[ReactionType] = None
    comment_count: int = 0
    created_at: Optional[datetime] = None


class CreatePostResponse(BaseModel):
    message: str
    post: PostResponse


class CommentResponse(BaseModel):
    id: str
    post_id: str
    content: str
    status: PostStatus
    author: Optional[AuthorPreview] = None
    created_at: Optional[datetime] = None


class ReactionResponse(BaseModel):
    reaction_counts: Dict[str, int]
    total_reactions: int
    user_reaction: Optional[ReactionType] = None


# ---- admin review ----
class PendingPost(BaseModel):
    id: str
    title: str
    preview: str             # censored
    category: PostCategory
    author: Optional[AuthorPreview] = None
    moderation: ModerationInfo
    created_at: Optional[datetime] = None


class AdminDecisionRequest(BaseModel):
    reason: Optional[str] = None
