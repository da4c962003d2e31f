from authenticity_detector.feedback import (
    CANDIDATE_NOTICE,
    HUMAN_FEEDBACK,
    format_for_candidate,
    format_for_recruiter,
)
from authenticity_detector.models import DetectionVerdict
from authenticity_detector.scoring import adjust


def make_evaluation(confidence: int, is_ai_generated: bool, analysis=None):
    verdict = DetectionVerdict(
        is_ai_generated=is_ai_generated,
        confidence=confidence,
        indicators=["Overly structured numbered/bullet format", "Generic phrasing"],
        human_score=100 - confidence,
        reasoning="secret reasoning",
    )
    return adjust({"overallScore": 100} if analysis is None else analysis, verdict)


def test_human_response_gets_neutral_sentence():
    assert format_for_recruiter(make_evaluation(45, False)) == HUMAN_FEEDBACK


def test_recruiter_report_for_flagged_response():
    report = format_for_recruiter(make_evaluation(70, True))

    assert report.splitlines() == [
        "AI Usage Detected (70% confidence)",
        "Moderate likelihood of AI assistance",
        "Indicators: Overly structured numbered/bullet format, Generic phrasing",
        "Human-like score: 30/100",
        "Original score: 100 → Adjusted: 30",
    ]


def test_recruiter_likelihood_labels():
    assert "High likelihood" in format_for_recruiter(make_evaluation(81, True))
    assert "Moderate likelihood" in format_for_recruiter(make_evaluation(80, True))
    assert "Some indicators" in format_for_recruiter(make_evaluation(60, True))


def test_recruiter_report_without_original_score():
    report = format_for_recruiter(make_evaluation(95, True, analysis={}))

    assert report.endswith("Original score: N/A → Adjusted: 0")


def test_candidate_sees_nothing_without_penalty():
    assert format_for_candidate(make_evaluation(20, False)) == ""


def test_candidate_notice_hides_detection_details():
    notice = format_for_candidate(make_evaluation(90, True))

    assert notice == CANDIDATE_NOTICE
    assert "90" not in notice
    assert "structured" not in notice
    assert "secret" not in notice


def test_recruiter_report_prints_large_scores_in_full():
    report = format_for_recruiter(make_evaluation(70, True, analysis={"overallScore": 1234567}))

    assert report.endswith("Original score: 1234567 → Adjusted: 370370")
