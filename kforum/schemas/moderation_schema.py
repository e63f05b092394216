# kforum/schemas/moderation_schema.py
from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator


class VerdictSource(str, Enum):
    LOCAL = "local"
    PERSPECTIVE = "perspective"
    OPENAI = "openai"
    GEMINI = "gemini"
    NONE = "none"


class ModerationVerdict(BaseModel):
    """
    Outcome of one moderation pass. Embedded into posts/comments under `moderation`;
    callers only route on `is_unsafe`, the rest is for admin review.
    """
    is_unsafe: bool
    confidence: float = Field(ge=0.0, le=1.0)
    categories: List[str] = Field(default_factory=list)
    flagged_words: List[str] = Field(default_factory=list)
    language: str = "unknown"
    source: VerdictSource = VerdictSource.NONE

    # categories/flagged_words behave as sets: unique, stable order
    @field_validator("categories", "flagged_words")
    @classmethod
    def _dedupe(cls, v: List[str]) -> List[str]:
        return sorted({str(x) for x in v if x})

    @field_validator("confidence", mode="before")
    @classmethod
    def _clamp(cls, v) -> float:
        return min(1.0, max(0.0, float(v or 0.0)))

    def with_language(self, language: str) -> "ModerationVerdict":
        return self.model_copy(update={"language": language or "unknown"})


class ModerationInfo(BaseModel):
    """Admin-facing view of a stored verdict."""
    confidence: float = 0.0
    confidence_percent: int = 0
    categories: List[str] = []
    flagged_words: List[str] = []
    language: str = "unknown"
    is_unsafe: bool = False
    source: str = VerdictSource.NONE.value
