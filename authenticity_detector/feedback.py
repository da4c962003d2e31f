"""Recruiter and candidate facing renderings of a response evaluation."""

from __future__ import annotations

from .models import ResponseEvaluation
from .scoring import original_score

HUMAN_FEEDBACK = "Response appears to be human-generated."

CANDIDATE_NOTICE = (
    "Note: This assessment includes an AI authenticity check. Partial results shown. "
    "For complete evaluation, ensure responses reflect your personal knowledge and experience."
)


def _likelihood(confidence: int) -> str:
    if confidence > 80:
        return "High likelihood of AI assistance"
    if confidence > 60:
        return "Moderate likelihood of AI assistance"
    return "Some indicators of possible AI assistance"


def format_for_recruiter(evaluation: ResponseEvaluation) -> str:
    detection = evaluation.detection
    if not detection.is_ai_generated:
        return HUMAN_FEEDBACK

    score = original_score(evaluation.original_analysis)
    shown = "N/A" if score is None else f"{score:.15g}"
    return "\n".join(
        [
            f"AI Usage Detected ({detection.confidence}% confidence)",
            _likelihood(detection.confidence),
            f"Indicators: {', '.join(detection.indicators)}",
            f"Human-like score: {detection.human_score}/100",
            f"Original score: {shown} → Adjusted: {evaluation.final_score}",
        ]
    )


def format_for_candidate(evaluation: ResponseEvaluation) -> str:
    # Confidence and indicators are withheld so the detector cannot be gamed.
    if not evaluation.partial_results_only:
        return ""
    return CANDIDATE_NOTICE
