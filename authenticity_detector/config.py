from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union


@dataclass(slots=True, frozen=True)
class Available:
    api_key: str
    base_url: str
    model: str
    timeout: float
    temperature: float
    max_tokens: int
    max_prompt_chars: int


@dataclass(slots=True, frozen=True)
class Disabled:
    reason: str


ClassifierConfig = Union[Available, Disabled]


@dataclass(slots=True)
class Settings:
    api_key: str | None
    base_url: str
    model: str
    timeout: float
    temperature: float
    max_tokens: int
    max_prompt_chars: int

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_key=os.getenv("GROQ_API_KEY") or None,
            base_url=os.getenv("AUTHENTICITY_BASE_URL", "https://api.groq.com/openai/v1"),
            model=os.getenv("AUTHENTICITY_MODEL", "llama-3.1-8b-instant"),
            timeout=float(os.getenv("AUTHENTICITY_TIMEOUT", "5")),
            temperature=float(os.getenv("AUTHENTICITY_TEMPERATURE", "0.1")),
            max_tokens=int(os.getenv("AUTHENTICITY_MAX_TOKENS", "200")),
            max_prompt_chars=int(os.getenv("AUTHENTICITY_MAX_PROMPT_CHARS", "4000")),
        )

    def classifier_config(self) -> ClassifierConfig:
        if not self.api_key:
            return Disabled(reason="GROQ_API_KEY not set")
        return Available(
            api_key=self.api_key,
            base_url=self.base_url,
            model=self.model,
            timeout=self.timeout,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            max_prompt_chars=self.max_prompt_chars,
        )
