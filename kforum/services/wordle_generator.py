# kforum/services/wordle_generator.py
import logging
import random
import re
from typing import Awaitable, Callable, Optional

from . import gemini_service
from ..utils.wordle_dictionary import FALLBACK_WORDS, is_valid_word

_FALLBACK = tuple(dict.fromkeys(w for w in FALLBACK_WORDS if is_valid_word(w)))
if not _FALLBACK:
    raise RuntimeError("FALLBACK_WORDS must contain at least one valid five-letter word")

HINT_MAX_LEN = 50

WORD_GENERATION_PROMPT = """Generate exactly ONE 5-letter English word related to college student life, university campus, academics, technology, engineering, hostels, or student activities.

Requirements:
- EXACTLY 5 letters (no more, no less)
- Common English word (not obscure)
- Related to student/college life themes like: studying, exams, coding, hostel life, friends, food, campus, fests, clubs, sports, technology, programming
- Easy to medium difficulty for a Wordle game

Examples of good words: STUDY, EXAMS, CODES, PIZZA, SLEEP, GAMES, BOOKS, NOTES, CLASS, PARTY

Return ONLY the single 5-letter word in uppercase, nothing else."""

HINT_PROMPT = (
    'Give a very short, cryptic hint (max 5 words) for the word "{word}" without revealing '
    "the word itself. The hint should be related to college/student life context. "
    "Return ONLY the hint, nothing else."
)

TextGenerator = Callable[[str], Awaitable[str]]


def random_fallback_word(rng: Optional[random.Random] = None) -> str:
    word = (rng or random).choice(_FALLBACK)
    logging.info("Using fallback word: %s", word)
    return word


async def generate_daily_word(
    generate: Optional[TextGenerator] = None,
    configured: Optional[bool] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Model-picked word when Gemini is set up and answers sensibly; curated list otherwise."""
    if configured is None:
        configured = gemini_service.gemini_configured()
    if not configured:
        logging.info("No GEMINI_API_KEY, using fallback word list")
        return random_fallback_word(rng)

    try:
        raw = await (generate or gemini_service.generate_text)(WORD_GENERATION_PROMPT)
    except Exception as e:
        logging.warning("AI word generation error: %s", e)
        return random_fallback_word(rng)

    word = re.sub(r"[^A-Za-z]", "", raw or "").upper()
    if len(word) == 5 and is_valid_word(word):
        logging.info("AI generated word: %s", word)
        return word

    logging.info("AI returned unusable word %r, using fallback", raw)
    return random_fallback_word(rng)


async def generate_hint_for_word(
    word: str,
    generate: Optional[TextGenerator] = None,
    configured: Optional[bool] = None,
) -> Optional[str]:
    if configured is None:
        configured = gemini_service.gemini_configured()
    if not configured:
        return None

    try:
        hint = (await (generate or gemini_service.generate_text)(HINT_PROMPT.format(word=word))).strip()
    except Exception as e:
        logging.warning("Hint generation error: %s", e)
        return None

    if not hint or word.upper() in hint.upper():
        return None
    return hint[:HINT_MAX_LEN]
