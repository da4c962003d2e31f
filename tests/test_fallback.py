import pytest

from authenticity_detector import fallback


def test_clean_text_is_fully_human(plain_text: str):
    verdict = fallback.classify(plain_text)

    assert verdict.is_ai_generated is False
    assert verdict.confidence == 0
    assert verdict.human_score == 100
    assert verdict.indicators == ()
    assert verdict.reasoning == fallback.FALLBACK_REASONING


def test_each_indicator_adds_twenty_five(obvious_text: str):
    verdict = fallback.classify(obvious_text)

    assert verdict.confidence == 75
    assert verdict.human_score == 25
    assert verdict.is_ai_generated is True
    assert len(verdict.indicators) == 3


def test_two_indicators_stay_below_the_flag():
    verdict = fallback.classify("I cannot recall; based on my knowledge it was fine.")

    assert verdict.confidence == 50
    assert verdict.is_ai_generated is False


def test_confidence_is_capped_at_one_hundred():
    text = "As an AI, I am an AI. I cannot. I apologize, but while I understand, from my training data..."

    verdict = fallback.classify(text)

    assert len(verdict.indicators) > 4
    assert verdict.confidence == 100
    assert verdict.human_score == 0


def test_disabled_verdict_is_fixed_low_confidence():
    verdict = fallback.disabled_verdict("GROQ_API_KEY not set")

    assert verdict.is_ai_generated is False
    assert verdict.confidence == 30
    assert verdict.human_score == 70
    assert verdict.indicators == (fallback.DISABLED_INDICATOR,)
    assert "disabled" in verdict.reasoning


def test_verdict_indicators_cannot_be_changed_in_place(obvious_text: str):
    verdict = fallback.classify(obvious_text)

    with pytest.raises(AttributeError):
        verdict.indicators.append("tampered")
    assert len(verdict.indicators) == 3
