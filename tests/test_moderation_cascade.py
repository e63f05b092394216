"""Tests for the moderation cascade ordering and fallbacks."""

import asyncio

import pytest

from kforum.schemas.moderation_schema import ModerationVerdict, VerdictSource
from kforum.services.moderation_service import DEFAULT_SAFE_CONFIDENCE, ModerationCascade


class FakeProvider:
    def __init__(self, name, verdict=None, error=None, delay=0.0):
        self.name = name
        self.verdict = verdict
        self.error = error
        self.delay = delay
        self.calls = 0

    async def check(self, text):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return self.verdict


def _verdict(unsafe, confidence, source=VerdictSource.PERSPECTIVE, categories=()):
    return ModerationVerdict(is_unsafe=unsafe, confidence=confidence, categories=list(categories), source=source)


def _cascade(providers, **kwargs):
    kwargs.setdefault("detect_language", lambda text: "en")
    kwargs.setdefault("unsafe_threshold", 0.45)
    kwargs.setdefault("provider_timeout", 1.0)
    return ModerationCascade(providers=providers, **kwargs)


def test_local_unsafe_short_circuits_providers():
    p = FakeProvider("perspective", _verdict(False, 0.0))
    verdict = asyncio.run(_cascade([p]).moderate("what the fuck"))
    assert verdict.is_unsafe is True
    assert verdict.source == VerdictSource.LOCAL
    assert verdict.language == "en"
    assert p.calls == 0


def test_local_silence_falls_through_to_provider():
    p = FakeProvider("perspective", _verdict(True, 0.9, categories=["toxicity"]))
    verdict = asyncio.run(_cascade([p]).moderate("a perfectly polite sentence"))
    assert p.calls == 1
    assert verdict.is_unsafe is True
    assert verdict.source == VerdictSource.PERSPECTIVE
    assert verdict.categories == ["toxicity"]


def test_failing_provider_is_skipped():
    broken = FakeProvider("perspective", error=RuntimeError("HTTP 500"))
    backup = FakeProvider("openai", _verdict(True, 0.7, source=VerdictSource.OPENAI))
    verdict = asyncio.run(_cascade([broken, backup]).moderate("hello there"))
    assert broken.calls == 1
    assert verdict.source == VerdictSource.OPENAI


def test_slow_provider_times_out_and_is_skipped():
    slow = FakeProvider("perspective", _verdict(True, 0.99), delay=0.5)
    backup = FakeProvider("gemini", _verdict(False, 0.05, source=VerdictSource.GEMINI))
    cascade = _cascade([slow, backup], provider_timeout=0.01)
    verdict = asyncio.run(cascade.moderate("hello there"))
    assert verdict.source == VerdictSource.GEMINI
    assert verdict.is_unsafe is False


def test_unconfigured_providers_yield_default_safe():
    verdict = asyncio.run(_cascade([FakeProvider("a"), FakeProvider("b")]).moderate("hello there"))
    assert verdict.is_unsafe is False
    assert verdict.confidence == pytest.approx(DEFAULT_SAFE_CONFIDENCE)
    assert verdict.source == VerdictSource.NONE
    assert verdict.categories == []
    assert verdict.flagged_words == []


def test_no_providers_at_all():
    verdict = asyncio.run(_cascade([]).moderate("hello there"))
    assert verdict.is_unsafe is False
    assert verdict.confidence == pytest.approx(0.1)


def test_trusted_safe_verdict_stops_the_cascade():
    first = FakeProvider("perspective", _verdict(False, 0.2))
    second = FakeProvider("openai", _verdict(True, 0.9, source=VerdictSource.OPENAI))
    verdict = asyncio.run(_cascade([first, second], trust_provider_safe=True).moderate("hello there"))
    assert verdict.is_unsafe is False
    assert verdict.source == VerdictSource.PERSPECTIVE
    assert second.calls == 0


def test_untrusted_safe_verdict_keeps_looking_for_unsafe():
    first = FakeProvider("perspective", _verdict(False, 0.2))
    second = FakeProvider("openai", _verdict(True, 0.9, source=VerdictSource.OPENAI))
    verdict = asyncio.run(_cascade([first, second], trust_provider_safe=False).moderate("hello there"))
    assert verdict.is_unsafe is True
    assert verdict.source == VerdictSource.OPENAI


def test_untrusted_all_safe_returns_first_safe():
    first = FakeProvider("perspective", _verdict(False, 0.2))
    second = FakeProvider("openai", _verdict(False, 0.3, source=VerdictSource.OPENAI))
    verdict = asyncio.run(_cascade([first, second], trust_provider_safe=False).moderate("hello there"))
    assert verdict.source == VerdictSource.PERSPECTIVE
    assert verdict.confidence == pytest.approx(0.2)


def test_confidence_at_threshold_is_unsafe():
    p = FakeProvider("gemini", _verdict(False, 0.45, source=VerdictSource.GEMINI))
    verdict = asyncio.run(_cascade([p]).moderate("hello there"))
    assert verdict.is_unsafe is True


def test_confidence_below_threshold_stays_safe():
    p = FakeProvider("gemini", _verdict(False, 0.44, source=VerdictSource.GEMINI))
    verdict = asyncio.run(_cascade([p]).moderate("hello there"))
    assert verdict.is_unsafe is False


def test_language_is_attached_to_every_outcome():
    hi = lambda text: "hi"
    local = asyncio.run(_cascade([], detect_language=hi).moderate("bhenchod"))
    provider = asyncio.run(_cascade([FakeProvider("p", _verdict(True, 0.8))], detect_language=hi).moderate("hello"))
    default = asyncio.run(_cascade([], detect_language=hi).moderate("hello"))
    assert local.language == provider.language == default.language == "hi"


def test_language_detector_failure_is_unknown():
    def boom(text):
        raise RuntimeError("detector down")

    verdict = asyncio.run(_cascade([], detect_language=boom).moderate("hello"))
    assert verdict.language == "unknown"


def test_verdict_clamps_confidence_and_dedupes():
    v = ModerationVerdict(is_unsafe=True, confidence=1.7, categories=["b", "a", "b"], flagged_words=["x", "x"])
    assert v.confidence == 1.0
    assert v.categories == ["a", "b"]
    assert v.flagged_words == ["x"]
    assert ModerationVerdict(is_unsafe=False, confidence=-3).confidence == 0.0
