# kforum/utils/moderation.py
from __future__ import annotations

import logging
import re
import unicodedata
from typing import Iterable, List, Optional

from better_profanity import profanity
from unidecode import unidecode

from .bad_words import BAD_WORDS, HARASSMENT_PATTERNS, SAFE_WORDS
from ..schemas.moderation_schema import ModerationVerdict, VerdictSource

# leetspeak folds + separators people sprinkle inside words ("fu.ck", "f*ck")
LEET = str.maketrans(
    {"0": "o", "1": "i", "@": "a", "$": "s", "3": "e", "4": "a", "5": "s", "8": "b"}
    | {c: None for c in "._-!*#"}
)

profanity.load_censor_words(sorted(BAD_WORDS))


def normalize_text(text: Optional[str]) -> str:
    """Canonical form used for matching. Idempotent: normalize_text(normalize_text(x)) == normalize_text(x)."""
    t = unidecode(unicodedata.normalize("NFKD", text or "")).lower()
    t = t.translate(LEET)
    return re.sub(r"(.)\1{2,}", r"\1\1", t)        # fuuuuck -> fuuck


def squeeze(text: str) -> str:
    """Collapse every run of a repeated character to one (fuuck -> fuck)."""
    return re.sub(r"(.)\1+", r"\1", text)


def censor_text(text: Optional[str]) -> str:
    """Mask denylisted words with '*' (admin previews of held content)."""
    return profanity.censor(text or "", censor_char="*")


class LexicalFilter:
    """
    Deterministic denylist + harassment-pattern matcher.

    `check` answers only "unsafe" or "no verdict" (None). Silence from this filter
    is not evidence that the text is safe; the cascade moves on to the next stage.
    """

    def __init__(
        self,
        bad_words: Iterable[str] = BAD_WORDS,
        harassment_patterns: Iterable[re.Pattern] = HARASSMENT_PATTERNS,
        safe_words: Iterable[str] = SAFE_WORDS,
    ):
        self.bad_words = frozenset(w.strip().lower() for w in bad_words if w and w.strip())
        self.harassment_patterns = tuple(
            p if isinstance(p, re.Pattern) else re.compile(p, re.IGNORECASE)
            for p in harassment_patterns
        )
        self.safe_words = frozenset(w.strip().lower() for w in safe_words if w)

        # (term, term without spaces, term has no doubled letters)
        self._terms = []
        for term in sorted(self.bad_words):
            compact = re.sub(r"[^a-z]", "", term)
            if compact:
                self._terms.append((term, compact, compact == squeeze(compact)))

    # ---------------------------
    # Matchers
    # ---------------------------
    def match_words(self, text: Optional[str]) -> List[str]:
        normalized = normalize_text(text)
        tokens = [t for t in re.split(r"[^a-z]+", normalized) if t]
        token_set = set(tokens)
        squeezed_tokens = {squeeze(t) for t in tokens}

        compound = "".join(t for t in tokens if t not in self.safe_words)
        squeezed_compound = squeeze(compound)

        found = []
        for term, compact, plain in self._terms:
            if compact in token_set or (plain and compact in squeezed_tokens):
                found.append(term)
            elif len(compact) > 3 and (
                compact in compound or (plain and compact in squeezed_compound)
            ):
                found.append(term)
        return sorted(set(found))

    def match_patterns(self, text: Optional[str]) -> List[str]:
        raw = text or ""
        spaced = normalize_text(raw)
        return [
            p.pattern for p in self.harassment_patterns
            if p.search(raw) or p.search(spaced)
        ]

    # ---------------------------
    # Verdict
    # ---------------------------
    def check(self, text: Optional[str]) -> Optional[ModerationVerdict]:
        words = self.match_words(text)
        patterns = self.match_patterns(text)
        if not words and not patterns:
            return None

        confidence = min(1.0, 0.5 + 0.15 * len(words) + 0.2 * len(patterns))
        logging.info(
            "Local filter flagged content: words=%s harassment_patterns=%d", words, len(patterns)
        )
        return ModerationVerdict(
            is_unsafe=True,
            confidence=confidence,
            categories=["harassment"] if patterns else ["profanity"],
            flagged_words=words,
            source=VerdictSource.LOCAL,
        )


default_filter = LexicalFilter()
