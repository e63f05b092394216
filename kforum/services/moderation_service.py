# kforum/services/moderation_service.py
"""
Moderation cascade: local filter -> Perspective -> OpenAI -> Gemini -> default-safe.

The local filter is authoritative on "unsafe" only. External providers, when they
answer, are used as-is; a provider that is unconfigured, times out, or errors is
skipped. Running out of stages is not an error: the text is treated as safe with
low confidence so a provider outage never blocks posting.
"""
from __future__ import annotations

import asyncio
import logging
import os
from typing import Callable, Iterable, Optional

from dotenv import load_dotenv

from ..schemas.moderation_schema import ModerationVerdict, VerdictSource
from ..utils.moderation import LexicalFilter, default_filter
from .moderation_providers import (
    PROVIDER_TIMEOUT,
    UNSAFE_THRESHOLD,
    VerdictProvider,
    default_providers,
    detect_language,
)

load_dotenv()

TRUST_PROVIDER_SAFE = os.getenv("MODERATION_TRUST_PROVIDER_SAFE", "true").strip().lower() in ("1", "true", "yes", "on")
DEFAULT_SAFE_CONFIDENCE = 0.1


class ModerationCascade:
    def __init__(
        self,
        local_filter: Optional[LexicalFilter] = None,
        providers: Optional[Iterable[VerdictProvider]] = None,
        detect_language: Callable[[str], str] = detect_language,
        unsafe_threshold: float = UNSAFE_THRESHOLD,
        provider_timeout: float = PROVIDER_TIMEOUT,
        trust_provider_safe: bool = TRUST_PROVIDER_SAFE,
    ):
        self.local_filter = local_filter or default_filter
        self.providers = tuple(providers if providers is not None else default_providers(unsafe_threshold))
        self.detect_language = detect_language
        self.unsafe_threshold = unsafe_threshold
        self.provider_timeout = provider_timeout
        self.trust_provider_safe = trust_provider_safe

    def _language(self, text: str) -> str:
        try:
            return self.detect_language(text) or "unknown"
        except Exception:
            logging.warning("Language detection failed", exc_info=True)
            return "unknown"

    def _apply_policy(self, verdict: ModerationVerdict) -> ModerationVerdict:
        if verdict.confidence >= self.unsafe_threshold and not verdict.is_unsafe:
            return verdict.model_copy(update={"is_unsafe": True})
        return verdict

    async def _run_provider(self, provider: VerdictProvider, text: str) -> Optional[ModerationVerdict]:
        name = getattr(provider, "name", type(provider).__name__)
        try:
            verdict = await asyncio.wait_for(provider.check(text), timeout=self.provider_timeout)
        except asyncio.TimeoutError:
            logging.warning("Moderation provider %s timed out after %ss", name, self.provider_timeout)
            return None
        except Exception as e:
            logging.warning("Moderation provider %s failed: %s", name, e)
            return None
        if verdict is not None:
            logging.info(
                "Moderation provider %s: unsafe=%s confidence=%.2f categories=%s",
                name, verdict.is_unsafe, verdict.confidence, verdict.categories,
            )
        return verdict

    def default_safe(self) -> ModerationVerdict:
        return ModerationVerdict(
            is_unsafe=False,
            confidence=DEFAULT_SAFE_CONFIDENCE,
            categories=[],
            flagged_words=[],
            source=VerdictSource.NONE,
        )

    async def moderate(self, text: str) -> ModerationVerdict:
        text = text or ""
        language = self._language(text)

        # 1) local filter: fastest, catches Hinglish slang the providers miss
        local = self.local_filter.check(text)
        if local is not None and local.is_unsafe:
            return self._apply_policy(local).with_language(language)

        # 2..n) external providers in priority order
        first_safe: Optional[ModerationVerdict] = None
        for provider in self.providers:
            verdict = await self._run_provider(provider, text)
            if verdict is None:
                continue
            verdict = self._apply_policy(verdict)
            if verdict.is_unsafe or self.trust_provider_safe:
                return verdict.with_language(language)
            if first_safe is None:
                first_safe = verdict

        if first_safe is not None:
            return first_safe.with_language(language)

        return self.default_safe().with_language(language)


_default_cascade: Optional[ModerationCascade] = None


def get_cascade() -> ModerationCascade:
    global _default_cascade
    if _default_cascade is None:
        _default_cascade = ModerationCascade()
    return _default_cascade


async def moderate_text(text: str) -> ModerationVerdict:
    """Entry point for post/comment submission."""
    return await get_cascade().moderate(text)
