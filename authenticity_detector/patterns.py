"""Heuristic first-pass scan for text that was obviously machine-written."""

from __future__ import annotations

import re

from .models import ScanResult

AI_PHRASES: tuple[str, ...] = (
    "as an ai",
    "i am an ai",
    "i cannot",
    "i apologize, but",
    "however, it's important to note",
    "it's worth noting that",
    "while i understand",
    "from my training data",
    "based on my knowledge",
    "in my opinion as an ai",
)

# Enumerated-prose anchors: the opener must start the text, the rest must start a line.
STRUCTURE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(first|firstly|1\.)", re.IGNORECASE),
    re.compile(r"\n(second|secondly|2\.)", re.IGNORECASE),
    re.compile(r"\n(third|thirdly|3\.)", re.IGNORECASE),
    re.compile(r"\n(finally|in conclusion)", re.IGNORECASE),
)

STRUCTURE_THRESHOLD = 3
VERBOSE_LENGTH = 800
VERBOSE_LINE_BREAKS = 5
OBVIOUS_THRESHOLD = 2

STRUCTURED_INDICATOR = "Overly structured numbered/bullet format"
VERBOSE_INDICATOR = "Unusually detailed and structured response"


def scan(text: str) -> ScanResult:
    indicators: list[str] = []
    lowered = text.lower()

    for phrase in AI_PHRASES:
        if phrase in lowered:
            indicators.append(f'Contains AI phrase: "{phrase}"')

    anchors = sum(1 for pattern in STRUCTURE_PATTERNS if pattern.search(text))
    if anchors >= STRUCTURE_THRESHOLD:
        indicators.append(STRUCTURED_INDICATOR)

    if len(text) > VERBOSE_LENGTH and text.count("\n") > VERBOSE_LINE_BREAKS:
        indicators.append(VERBOSE_INDICATOR)

    return ScanResult(is_obvious=len(indicators) >= OBVIOUS_THRESHOLD, indicators=indicators)
