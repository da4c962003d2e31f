from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from .models import DetectionVerdict, ResponseEvaluation

HEAVY_PENALTY = 0.3
MODERATE_PENALTY = 0.7


def original_score(original_analysis: Any) -> float | None:
    """Overall quality score carried by the caller's analysis, if any."""
    if isinstance(original_analysis, bool):
        return None
    if isinstance(original_analysis, (int, float)):
        return float(original_analysis)
    if isinstance(original_analysis, Mapping):
        for key in ("overallScore", "responseQuality"):
            value = original_analysis.get(key)
            if isinstance(value, (int, float)) and not isinstance(value, bool) and value:
                return float(value)
    return None


def round_half_up(value: float) -> int:
    # half-up, so 4.5 -> 5 rather than banker's rounding
    return int(math.floor(value + 0.5))


def adjust(original_analysis: Any, verdict: DetectionVerdict) -> ResponseEvaluation:
    score = original_score(original_analysis) or 0.0

    # TODO: the moderate tier ignores is_ai_generated; confirm with product whether
    # a confident "human" verdict should still be penalised.
    if verdict.is_ai_generated and verdict.confidence > 60:
        final_score = max(0, round_half_up(score * HEAVY_PENALTY))
        partial = True
    elif verdict.confidence > 40:
        final_score = max(0, round_half_up(score * MODERATE_PENALTY))
        partial = True
    else:
        final_score = round_half_up(score)
        partial = False

    return ResponseEvaluation(
        original_analysis=original_analysis,
        detection=verdict,
        final_score=final_score,
        partial_results_only=partial,
    )
