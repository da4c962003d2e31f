import pytest

from authenticity_detector.config import Available, Disabled

BASE_URL = "https://llm.test/v1"


@pytest.fixture
def available_config() -> Available:
    return Available(
        api_key="test",
        base_url=BASE_URL,
        model="llama-3.1-8b-instant",
        timeout=5.0,
        temperature=0.1,
        max_tokens=200,
        max_prompt_chars=4000,
    )


@pytest.fixture
def disabled_config() -> Disabled:
    return Disabled(reason="GROQ_API_KEY not set")


@pytest.fixture
def obvious_text() -> str:
    return "As an AI, I cannot share personal experiences, but it's worth noting that teamwork matters."


@pytest.fixture
def plain_text() -> str:
    return "I fixed the flaky deploy by pinning the base image and adding a retry on the health check."
