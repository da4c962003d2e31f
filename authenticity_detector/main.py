from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends, FastAPI

from .config import Settings
from .feedback import format_for_candidate, format_for_recruiter
from .models import (
    AssessRequest,
    AssessResponse,
    DetectionVerdict,
    EvaluateRequest,
    HealthResponse,
    UsageSummary,
    UsageSummaryRequest,
)
from .service import LLMClassifier, assess, create_classifier, summarize_usage

logger = logging.getLogger(__name__)


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache()
def get_classifier() -> LLMClassifier:
    return create_classifier(get_settings())


app = FastAPI(title="Response Authenticity Detector", version="0.1.0")


@app.on_event("shutdown")
async def shutdown_classifier() -> None:
    await get_classifier().aclose()


@app.get("/health", response_model=HealthResponse)
async def health(classifier: LLMClassifier = Depends(get_classifier)) -> HealthResponse:
    return HealthResponse(classifier="available" if classifier.available else "disabled")


@app.post("/evaluate", response_model=DetectionVerdict)
async def evaluate(
    request: EvaluateRequest,
    classifier: LLMClassifier = Depends(get_classifier),
) -> DetectionVerdict:
    return await classifier.evaluate(request.response_text, request.question_context)


@app.post("/assess", response_model=AssessResponse)
async def assess_response(
    request: AssessRequest,
    classifier: LLMClassifier = Depends(get_classifier),
) -> AssessResponse:
    evaluation = await assess(
        classifier, request.response_text, request.original_analysis, request.question_context
    )
    logger.info(
        "assessed response",
        extra={"final_score": evaluation.final_score, "partial": evaluation.partial_results_only},
    )
    return AssessResponse(
        evaluation=evaluation,
        recruiter_feedback=format_for_recruiter(evaluation),
        candidate_feedback=format_for_candidate(evaluation),
    )


@app.post("/usage-summary", response_model=UsageSummary)
async def usage_summary(
    request: UsageSummaryRequest,
    classifier: LLMClassifier = Depends(get_classifier),
) -> UsageSummary:
    return await summarize_usage(classifier, request.responses, request.question_context)
