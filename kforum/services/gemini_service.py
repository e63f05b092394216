# kforum/services/gemini_service.py
import os
from typing import Optional

import httpx
from dotenv import load_dotenv

load_dotenv()

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
GEMINI_TIMEOUT = float(os.getenv("GEMINI_TIMEOUT", "10"))
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class GeminiError(RuntimeError):
    pass


def gemini_configured() -> bool:
    return bool(GEMINI_API_KEY)


async def generate_text(
    prompt: str,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """
    Single-turn generateContent call. Returns the first candidate's text (stripped).
    Raises GeminiError when not configured or when the response has no text.
    """
    key = api_key or GEMINI_API_KEY
    if not key:
        raise GeminiError("GEMINI_API_KEY is not set")

    url = f"{GEMINI_BASE_URL}/models/{model or GEMINI_MODEL}:generateContent"
    body = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

    if client is None:
        async with httpx.AsyncClient(timeout=GEMINI_TIMEOUT) as c:
            r = await c.post(url, params={"key": key}, json=body)
    else:
        r = await client.post(url, params={"key": key}, json=body)
    r.raise_for_status()

    data = r.json()
    try:
        parts = data["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        raise GeminiError(f"Unexpected Gemini response: {str(data)[:200]}")
    text = "".join(p.get("text", "") for p in parts if isinstance(p, dict)).strip()
    if not text:
        raise GeminiError("Gemini returned an empty response")
    return text
