"""Detection of AI-assisted assessment answers and the matching score penalty."""

from .config import Available, ClassifierConfig, Disabled, Settings
from .feedback import format_for_candidate, format_for_recruiter
from .models import DetectionVerdict, ResponseEvaluation, ScanResult, UsageSummary
from .patterns import scan
from .scoring import adjust
from .service import (
    DetectorError,
    LLMClassifier,
    MalformedResponseError,
    assess,
    create_classifier,
    summarize_usage,
)

__all__ = [
    "Available",
    "ClassifierConfig",
    "DetectionVerdict",
    "DetectorError",
    "Disabled",
    "LLMClassifier",
    "MalformedResponseError",
    "ResponseEvaluation",
    "ScanResult",
    "Settings",
    "UsageSummary",
    "adjust",
    "assess",
    "create_classifier",
    "format_for_candidate",
    "format_for_recruiter",
    "scan",
    "summarize_usage",
]
