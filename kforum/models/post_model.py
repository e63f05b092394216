# kforum/models/post_model.py
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from enum import Enum
from bson import ObjectId
from typing_extensions import Annotated
from pydantic.functional_validators import BeforeValidator

from ..schemas.moderation_schema import ModerationVerdict

PyObjectId = Annotated[str, BeforeValidator(lambda x: str(x))]


class PostCategory(str, Enum):
    ACADEMICS = "academics"
    EVENTS = "events"
    RANTS = "rants"
    INTERNSHIPS = "internships"
    LOST_FOUND = "lost-found"
    CLUBS = "clubs"
    GENERAL = "general"
    BOOKIES = "bookies"


class ReactionType(str, Enum):
    LIKE = "like"
    LOVE = "love"
    HAHA = "haha"
    WOW = "wow"
    SAD = "sad"
    ANGRY = "angry"


class PostStatus(str, Enum):
    PUBLISHED = "PUBLISHED"
    PENDING_REVIEW = "PENDING_REVIEW"
    REJECTED = "REJECTED"


class AdminDecisionModel(BaseModel):
    decision: str  # "APPROVED" or "REJECTED"
    admin_id: PyObjectId
    reviewed_at: datetime = Field(default_factory=datetime.utcnow)
    reason: Optional[str] = None


class ReactionModel(BaseModel):
    user_id: PyObjectId
    type: ReactionType
    created_at: datetime = Field(default_factory=datetime.utcnow)


class PostModel(BaseModel):
    id: Optional[PyObjectId] = Field(alias="_id", default=None)
    title: str
    content: str
    author_id: PyObjectId
    is_anonymous: bool = False
    category: PostCategory
    tags: List[str] = Field(default_factory=list)
    reactions: List[ReactionModel] = Field(default_factory=list)
    comment_count: int = 0
    status: PostStatus = PostStatus.PENDING_REVIEW
    event_date: Optional[datetime] = None
    moderation: Optional[ModerationVerdict] = None
    admin_decision: Optional[AdminDecisionModel] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
        "json_encoders": {ObjectId: str},
        "extra": "ignore",
    }


class CommentModel(BaseModel):
    id: Optional[PyObjectId] = Field(alias="_id", default=None)
    post_id: PyObjectId
    author_id: PyObjectId
    content: str
    status: PostStatus = PostStatus.PUBLISHED
    moderation: Optional[ModerationVerdict] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
        "json_encoders": {ObjectId: str},
        "extra": "ignore",
    }
