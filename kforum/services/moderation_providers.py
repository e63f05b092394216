# kforum/services/moderation_providers.py
"""
External verdict providers for the moderation cascade.

Every provider honours one contract:

    name: str
    async check(text) -> ModerationVerdict | None

`None` means "no opinion" (not configured). Network errors, non-2xx responses and
malformed bodies are raised; the cascade turns them into "no verdict" and moves on.
"""
from __future__ import annotations

import json
import os
import re
from typing import Awaitable, Callable, Dict, Iterable, Optional, Protocol

import httpx
from dotenv import load_dotenv
from langdetect import DetectorFactory, LangDetectException, detect
from openai import AsyncOpenAI

from ..schemas.moderation_schema import ModerationVerdict, VerdictSource
from . import gemini_service

load_dotenv()

# ---------------------------
# Config
# ---------------------------
UNSAFE_THRESHOLD = float(os.getenv("MODERATION_UNSAFE_THRESHOLD", "0.45"))
CATEGORY_SCORE_THRESHOLD = 0.5      # a sub-score this high names its category
PROVIDER_TIMEOUT = float(os.getenv("MODERATION_PROVIDER_TIMEOUT", "10"))

PERSPECTIVE_API_KEY = os.getenv("PERSPECTIVE_API_KEY")
PERSPECTIVE_URL = "https://commentanalyzer.googleapis.com/v1alpha1/comments:analyze"
PERSPECTIVE_ATTRIBUTES = (
    "TOXICITY", "SEVERE_TOXICITY", "IDENTITY_ATTACK", "INSULT", "PROFANITY", "THREAT",
)

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODERATION_MODEL = os.getenv("OPENAI_MODERATION_MODEL", "omni-moderation-latest")

# langdetect is probabilistic; pin the seed so the same text gets the same tag
DetectorFactory.seed = 0


class VerdictProvider(Protocol):
    name: str

    async def check(self, text: str) -> Optional[ModerationVerdict]:
        ...


def detect_language(text: str) -> str:
    try:
        return detect(text) if text and text.strip() else "unknown"
    except LangDetectException:
        return "unknown"


# ============================================
# Google Perspective (best multi-language coverage)
# ============================================
class PerspectiveProvider:
    name = "perspective"

    def __init__(
        self,
        api_key: Optional[str] = None,
        threshold: float = UNSAFE_THRESHOLD,
        timeout: float = PROVIDER_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key if api_key is not None else PERSPECTIVE_API_KEY
        self.threshold = threshold
        self.timeout = timeout
        self._client = client

    async def _post(self, body: Dict) -> httpx.Response:
        params = {"key": self.api_key}
        if self._client is not None:
            return await self._client.post(PERSPECTIVE_URL, params=params, json=body)
        async with httpx.AsyncClient(timeout=self.timeout) as c:
            return await c.post(PERSPECTIVE_URL, params=params, json=body)

    async def check(self, text: str) -> Optional[ModerationVerdict]:
        if not self.api_key:
            return None

        body = {
            "comment": {"text": text[:20480]},
            "languages": ["en", "hi"],
            "requestedAttributes": {attr: {} for attr in PERSPECTIVE_ATTRIBUTES},
            "doNotStore": True,
        }
        r = await self._post(body)
        r.raise_for_status()

        attribute_scores = r.json()["attributeScores"]
        scores = {
            attr: float(((attribute_scores.get(attr) or {}).get("summaryScore") or {}).get("value") or 0.0)
            for attr in PERSPECTIVE_ATTRIBUTES
        }
        max_score = max(scores.values())
        return ModerationVerdict(
            is_unsafe=max_score >= self.threshold,
            confidence=max_score,
            categories=[a.lower() for a, s in scores.items() if s >= CATEGORY_SCORE_THRESHOLD],
            source=VerdictSource.PERSPECTIVE,
        )


# ============================================
# OpenAI moderation endpoint
# ============================================
class OpenAIModerationProvider:
    name = "openai"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = OPENAI_MODERATION_MODEL,
        threshold: float = UNSAFE_THRESHOLD,
        timeout: float = PROVIDER_TIMEOUT,
        client=None,
    ):
        self.api_key = api_key if api_key is not None else OPENAI_API_KEY
        self.model = model
        self.threshold = threshold
        self.timeout = timeout
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)
        return self._client

    async def check(self, text: str) -> Optional[ModerationVerdict]:
        if not self.api_key and self._client is None:
            return None

        resp = await self.client.moderations.create(model=self.model, input=text)
        result = resp.results[0]
        category_scores = _as_dict(result.category_scores)
        flags = _as_dict(result.categories)

        scores = [float(v) for v in category_scores.values() if isinstance(v, (int, float))]
        max_score = max(scores) if scores else 0.0
        return ModerationVerdict(
            is_unsafe=max_score >= self.threshold,
            confidence=max_score,
            categories=[k for k, v in flags.items() if v],
            source=VerdictSource.OPENAI,
        )


def _as_dict(obj) -> Dict:
    if obj is None:
        return {}
    if isinstance(obj, dict):
        return obj
    if hasattr(obj, "model_dump"):
        return obj.model_dump(by_alias=True)
    return dict(vars(obj))


# ============================================
# Gemini (LLM judge, last resort)
# ============================================
GEMINI_MODERATION_PROMPT = """Analyze this text for toxicity. Return ONLY valid JSON:
{{
  "isUnsafe": boolean,
  "confidence": number between 0.0 and 1.0,
  "categories": ["harassment", "hate", "sexual", "violence", etc if applicable]
}}

Text: {text}"""

_FENCE = re.compile(r"```(?:json)?\s*|\s*```", re.IGNORECASE)

TextGenerator = Callable[[str], Awaitable[str]]


class GeminiModerationProvider:
    name = "gemini"

    def __init__(
        self,
        generate: Optional[TextGenerator] = None,
        configured: Optional[bool] = None,
        threshold: float = UNSAFE_THRESHOLD,
    ):
        self._generate = generate or gemini_service.generate_text
        self._configured = configured
        self.threshold = threshold

    @property
    def configured(self) -> bool:
        if self._configured is not None:
            return self._configured
        return gemini_service.gemini_configured()

    async def check(self, text: str) -> Optional[ModerationVerdict]:
        if not self.configured:
            return None

        raw = await self._generate(GEMINI_MODERATION_PROMPT.format(text=json.dumps(text)))
        parsed = json.loads(_FENCE.sub("", raw).strip())
        if not isinstance(parsed, dict):
            raise ValueError(f"Gemini verdict is not an object: {raw[:120]}")

        confidence = float(parsed.get("confidence") or 0.0)
        categories = parsed.get("categories") or []
        return ModerationVerdict(
            is_unsafe=bool(parsed.get("isUnsafe")) or confidence >= self.threshold,
            confidence=confidence,
            categories=[str(c) for c in categories] if isinstance(categories, list) else [],
            source=VerdictSource.GEMINI,
        )


def default_providers(threshold: float = UNSAFE_THRESHOLD) -> Iterable[VerdictProvider]:
    """Priority order: Perspective, OpenAI, Gemini."""
    return (
        PerspectiveProvider(threshold=threshold),
        OpenAIModerationProvider(threshold=threshold),
        GeminiModerationProvider(threshold=threshold),
    )
