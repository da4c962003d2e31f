from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ScanResult(_Model):
    is_obvious: bool = Field(..., description="Two or more heuristic indicators fired")
    indicators: tuple[str, ...] = ()


class DetectionVerdict(_Model):
    is_ai_generated: bool = Field(..., alias="isAIGenerated")
    confidence: int = Field(..., ge=0, le=100, description="Confidence in the verdict, 0-100")
    indicators: tuple[str, ...] = Field((), description="Reasons in detection order")
    human_score: int = Field(..., ge=0, le=100, description="Higher means more human-like")
    reasoning: str = Field(...)


class ResponseEvaluation(_Model):
    original_analysis: Any = Field(None, description="Caller-owned quality metrics")
    detection: DetectionVerdict
    final_score: int
    partial_results_only: bool


class ModelVerdict(BaseModel):
    """Shape of the JSON object the external model is asked to return."""

    ai_generated: bool = Field(..., alias="aiGenerated")
    confidence: int
    human_score: int = Field(..., alias="humanScore")
    indicators: tuple[str, ...] = ()
    reasoning: str = "Standard AI detection analysis"

    @field_validator("confidence", "human_score", mode="before")
    @classmethod
    def _clamp_percentage(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise ValueError("expected a number")
        number = float(value)
        if not math.isfinite(number):
            raise ValueError("expected a finite number")
        return max(0, min(100, round(number)))

    @field_validator("indicators", mode="before")
    @classmethod
    def _coerce_indicators(cls, value: Any) -> tuple[str, ...]:
        if not isinstance(value, list):
            return ()
        return tuple(str(item) for item in value)

    @field_validator("reasoning", mode="before")
    @classmethod
    def _default_reasoning(cls, value: Any) -> str:
        if not value:
            return "Standard AI detection analysis"
        return str(value)

    def to_verdict(self) -> DetectionVerdict:
        return DetectionVerdict(
            is_ai_generated=self.ai_generated,
            confidence=self.confidence,
            indicators=self.indicators,
            human_score=self.human_score,
            reasoning=self.reasoning,
        )


class UsageSummary(_Model):
    total_responses: int
    ai_usage_detected: int
    ai_usage_percentage: int
    average_confidence: int
    summary: str
    verdicts: list[DetectionVerdict] = Field(default_factory=list)


class EvaluateRequest(_Model):
    response_text: str = Field(..., description="Candidate's free-text answer")
    question_context: str | None = None


class AssessRequest(EvaluateRequest):
    original_analysis: dict[str, Any] = Field(default_factory=dict)


class AssessResponse(_Model):
    evaluation: ResponseEvaluation
    recruiter_feedback: str
    candidate_feedback: str


class UsageSummaryRequest(_Model):
    responses: list[str] = Field(default_factory=list)
    question_context: str | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
    classifier: str = "available"
