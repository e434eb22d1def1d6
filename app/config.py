# Copyright (c) 2026 Tyler Martin
# Licensed under FSL-1.1-ALv2 (see LICENSE)

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from app.ai.models import CompletionParams

load_dotenv()

GROQ_BASE = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_MODEL = "llama-3.1-8b-instant"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class AIConfig:
    api_key: Optional[str] = None
    base_url: str = GROQ_BASE
    model: str = DEFAULT_MODEL
    max_tokens: int = 300
    temperature: float = 0.7
    max_temperature: float = 1.0
    temperature_step: float = 0.1
    timeout: float = 60.0
    reply_language: str = "French"

    @classmethod
    def from_env(cls) -> "AIConfig":
        return cls(
            api_key=os.getenv("GROQ_API_KEY") or None,
            base_url=os.getenv("GROQ_BASE_URL", GROQ_BASE),
            model=os.getenv("AI_MODEL", DEFAULT_MODEL),
            max_tokens=int(os.getenv("AI_MAX_TOKENS", "300")),
            temperature=float(os.getenv("AI_TEMPERATURE", "0.7")),
            max_temperature=float(os.getenv("AI_MAX_TEMPERATURE", "1.0")),
            temperature_step=float(os.getenv("AI_TEMPERATURE_STEP", "0.1")),
            timeout=float(os.getenv("AI_TIMEOUT", "60")),
            reply_language=os.getenv("AI_REPLY_LANGUAGE", "French"),
        )

    def completion_params(self) -> CompletionParams:
        return CompletionParams(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        root.addHandler(handler)
    root.setLevel((level or os.getenv("LOG_LEVEL", "INFO")).upper())
    return root
