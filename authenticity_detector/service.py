from __future__ import annotations

import asyncio
import json
import logging
import re
from collections.abc import Iterable
from typing import Any

import httpx
from pydantic import ValidationError

from . import fallback
from .config import Available, ClassifierConfig, Disabled, Settings
from .models import DetectionVerdict, ModelVerdict, ResponseEvaluation, UsageSummary
from .patterns import scan
from .scoring import adjust, round_half_up

logger = logging.getLogger(__name__)

OBVIOUS_CONFIDENCE = 95
OBVIOUS_REASONING = "Contains obvious AI-generated patterns"

_FENCE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)


class DetectorError(RuntimeError):
    """Raised when the external classifier cannot produce a verdict."""


class MalformedResponseError(DetectorError):
    """The model answered, but not with a usable verdict."""


def build_prompt(text: str, question_context: str | None = None, *, max_chars: int = 4000) -> str:
    text = text[:max_chars]
    question = f'Question: "{question_context[:max_chars]}"\n' if question_context else ""
    return (
        "Analyze if this response was AI-generated. Be concise.\n\n"
        f'Response: "{text}"\n'
        f"{question}\n"
        "Check for:\n"
        "- Unnatural phrasing/structure\n"
        "- Generic AI-style responses\n"
        "- Overly perfect grammar\n"
        "- Typical AI patterns\n\n"
        'Return JSON: {"aiGenerated": boolean, "confidence": 0-100, "humanScore": 0-100, '
        '"indicators": ["reason1", "reason2"], "reasoning": "brief explanation"}'
    )


def strip_code_fences(content: str) -> str:
    return _FENCE.sub("", content).strip()


def parse_verdict(content: str) -> DetectionVerdict:
    """Validate the model's raw text into a verdict.

    Raises
    ------
    MalformedResponseError
        If the text is not a JSON object or lacks ``aiGenerated``,
        ``confidence`` or ``humanScore``.
    """
    try:
        payload = json.loads(strip_code_fences(content))
    except json.JSONDecodeError as err:
        raise MalformedResponseError(f"model output is not JSON: {err}") from err
    if not isinstance(payload, dict):
        raise MalformedResponseError("model output is not a JSON object")
    try:
        return ModelVerdict.model_validate(payload).to_verdict()
    except ValidationError as err:
        raise MalformedResponseError(f"model output failed validation: {err}") from err


def obvious_verdict(indicators: tuple[str, ...]) -> DetectionVerdict:
    return DetectionVerdict(
        is_ai_generated=True,
        confidence=OBVIOUS_CONFIDENCE,
        indicators=indicators,
        human_score=100 - OBVIOUS_CONFIDENCE,
        reasoning=OBVIOUS_REASONING,
    )


class LLMClassifier:
    def __init__(self, config: ClassifierConfig, *, client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._client: httpx.AsyncClient | None = None
        self._owns_client = False
        if isinstance(config, Disabled):
            logger.warning(
                "AI detection disabled, using pattern analysis only", extra={"reason": config.reason}
            )
            return
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=config.base_url,
            headers={"Authorization": f"Bearer {config.api_key}"},
            timeout=config.timeout,
        )

    @property
    def available(self) -> bool:
        return isinstance(self._config, Available)

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()

    async def evaluate(self, text: str, question_context: str | None = None) -> DetectionVerdict:
        """Return a verdict for *text*; never raises except on cancellation."""
        quick = scan(text)
        if quick.is_obvious:
            return obvious_verdict(quick.indicators)

        config = self._config
        if isinstance(config, Disabled):
            return fallback.disabled_verdict(config.reason)

        try:
            prompt = build_prompt(text, question_context, max_chars=config.max_prompt_chars)
            async with asyncio.timeout(config.timeout):
                content = await self._dispatch(config, prompt)
            return parse_verdict(content)
        except (httpx.HTTPError, TimeoutError, DetectorError) as err:
            logger.warning("AI detection failed, using pattern fallback", exc_info=err)
        except Exception:
            logger.exception("unexpected AI detection error, using pattern fallback")
        return fallback.classify(text)

    async def _dispatch(self, config: Available, prompt: str) -> str:
        body = {
            "model": config.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": config.temperature,
            "max_tokens": config.max_tokens,
        }
        logger.debug("posting to classifier", extra={"model": config.model})
        res = await self._client.post("/chat/completions", json=body)
        res.raise_for_status()
        try:
            payload = res.json()
        except ValueError as err:
            raise MalformedResponseError("completion body is not JSON") from err
        return self._extract_content(payload)

    def _extract_content(self, payload: Any) -> str:
        try:
            content = payload["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as err:
            raise MalformedResponseError("completion has no message content") from err
        if not content or not isinstance(content, str):
            raise MalformedResponseError("completion has no message content")
        return content


async def assess(
    classifier: LLMClassifier,
    text: str,
    original_analysis: Any,
    question_context: str | None = None,
) -> ResponseEvaluation:
    verdict = await classifier.evaluate(text, question_context)
    return adjust(original_analysis, verdict)


async def summarize_usage(
    classifier: LLMClassifier,
    responses: Iterable[str],
    question_context: str | None = None,
) -> UsageSummary:
    """Evaluate a batch of responses concurrently and aggregate the verdicts."""
    verdicts = list(
        await asyncio.gather(*(classifier.evaluate(text, question_context) for text in responses))
    )
    total = len(verdicts)
    flagged = sum(1 for verdict in verdicts if verdict.is_ai_generated)
    if total:
        percentage = round_half_up(flagged / total * 100)
        average = round_half_up(sum(verdict.confidence for verdict in verdicts) / total)
    else:
        percentage = average = 0
    summary = (
        f"AI usage detected in {flagged} out of {total} responses"
        if flagged
        else "No significant AI usage detected"
    )
    return UsageSummary(
        total_responses=total,
        ai_usage_detected=flagged,
        ai_usage_percentage=percentage,
        average_confidence=average,
        summary=summary,
        verdicts=verdicts,
    )


def create_classifier(settings: Settings | None = None) -> LLMClassifier:
    return LLMClassifier((settings or Settings.from_env()).classifier_config())
