"""Verdicts produced without the external classifier."""

from __future__ import annotations

from .models import DetectionVerdict
from .patterns import scan

INDICATOR_WEIGHT = 25
FALLBACK_REASONING = "Pattern-based detection (AI analysis unavailable)"

DISABLED_CONFIDENCE = 30
DISABLED_INDICATOR = "API not available - pattern analysis only"


def _verdict(confidence: int, indicators: tuple[str, ...], reasoning: str) -> DetectionVerdict:
    confidence = min(100, confidence)
    return DetectionVerdict(
        is_ai_generated=confidence > 50,
        confidence=confidence,
        indicators=indicators,
        human_score=max(0, 100 - confidence),
        reasoning=reasoning,
    )


def classify(text: str) -> DetectionVerdict:
    """Score *text* from heuristic indicators alone, 25 points per indicator."""
    indicators = scan(text).indicators
    return _verdict(len(indicators) * INDICATOR_WEIGHT, indicators, FALLBACK_REASONING)


def disabled_verdict(reason: str) -> DetectionVerdict:
    """Fixed low-confidence verdict used when no classifier is configured."""
    return _verdict(
        DISABLED_CONFIDENCE,
        (DISABLED_INDICATOR,),
        f"Basic pattern analysis used (AI detection service disabled: {reason})",
    )
