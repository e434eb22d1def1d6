# Copyright (c) 2026 Tyler Martin
# Licensed under FSL-1.1-ALv2 (see LICENSE)

import logging
import re
import time
from typing import Optional, Sequence

from app.ai.assembler import build_prompts
from app.ai.classifier import classify
from app.ai.llm import CompletionProvider, GroqProvider, ProviderError, ProviderUnavailable
from app.ai.models import (
    CompletionParams,
    ConversationContext,
    GenerationMetadata,
    GenerationResult,
    Message,
    SuggestionParams,
)
from app.config import AIConfig

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTION_COUNT = 3

_WRAPPING_QUOTES = re.compile(r"^[\"'“«]\s*|\s*[\"'”»]$")

LEAD_IN_PATTERNS = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"^here is my suggestion\s*:\s*",
        r"^suggestion\s*:\s*",
        r"^reply\s*:\s*",
        r"^message\s*:\s*",
        r"^improved version\s*:\s*",
        r"^voici ma suggestion\s*:\s*",
        r"^r[ée]ponse\s*:\s*",
        r"^version am[ée]lior[ée]e\s*:\s*",
    )
)


def clean_suggestion(text: Optional[str]) -> str:
    """Strip wrapping quotes and lead-in labels the model sometimes adds."""
    if not text:
        return ""

    cleaned = _WRAPPING_QUOTES.sub("", text.strip())
    for pattern in LEAD_IN_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    # the label may sit outside the quotes
    return _WRAPPING_QUOTES.sub("", cleaned.strip()).strip()


class SuggestionService:
    def __init__(
        self,
        provider: Optional[CompletionProvider] = None,
        config: Optional[AIConfig] = None,
    ):
        self._config = config or AIConfig.from_env()
        self._provider = provider or GroqProvider(self._config)
        if not self._provider.is_available():
            logger.warning("SuggestionService: completion provider not configured, suggestions disabled")

    @property
    def config(self) -> AIConfig:
        return self._config

    def is_available(self) -> bool:
        return self._provider.is_available()

    def status(self) -> dict:
        available = self.is_available()
        return {
            "available": available,
            "model": self._config.model if available else None,
            "reply_language": self._config.reply_language,
        }

    def analyze_conversation(
        self,
        messages: Sequence[Message],
        current_user_id: str,
        current_user_name: str,
    ) -> ConversationContext:
        return classify(messages, current_user_id, current_user_name)

    async def generate_suggestion(
        self,
        params: SuggestionParams,
        completion: Optional[CompletionParams] = None,
    ) -> GenerationResult:
        if not self.is_available():
            raise ProviderUnavailable("AI service unavailable - check the provider configuration")

        start = time.monotonic()
        mode = params.mode
        completion = completion or self._config.completion_params()

        logger.info(
            "SuggestionService: generating mode=%s messages=%d user=%s",
            mode.value, len(params.messages), params.current_user_name,
        )

        context = classify(params.messages, params.current_user_id, params.current_user_name)
        prompts = build_prompts(
            mode,
            params.current_user_name,
            context,
            params.messages,
            params.current_user_id,
            draft_text=params.draft_text,
            language=self._config.reply_language,
        )

        try:
            resp = await self._provider.complete(
                prompts.system_prompt, prompts.user_prompt, completion,
            )
        except ProviderError as e:
            logger.error(
                "SuggestionService: generation failed mode=%s (%s): %s",
                mode.value, e.error_type, e.message,
            )
            raise

        elapsed_ms = int((time.monotonic() - start) * 1000)
        suggestion = clean_suggestion(resp.content)

        logger.info(
            "SuggestionService: generated mode=%s in %dms tokens=%s",
            mode.value, elapsed_ms, resp.tokens_used,
        )
        return GenerationResult(
            suggestion=suggestion,
            mode=mode,
            context=context,
            metadata=GenerationMetadata(
                model=completion.model,
                processing_time_ms=elapsed_ms,
                tokens_used=resp.tokens_used,
                temperature=completion.temperature,
            ),
        )

    async def generate_multiple_suggestions(
        self,
        params: SuggestionParams,
        count: int = DEFAULT_SUGGESTION_COUNT,
    ) -> list[str]:
        """Generate up to `count` distinct suggestions.

        Each attempt runs with its own, slightly higher temperature. Failed
        attempts are logged and skipped, so the result may be shorter than
        `count` or empty.
        """
        base = self._config.completion_params()
        suggestions: list[str] = []

        for attempt in range(count):
            temperature = round(
                min(self._config.max_temperature, base.temperature + attempt * self._config.temperature_step),
                2,
            )
            try:
                result = await self.generate_suggestion(
                    params, completion=base.with_temperature(temperature),
                )
            except Exception as e:
                logger.warning(
                    "SuggestionService: suggestion %d/%d failed: %s", attempt + 1, count, e,
                )
                continue

            if result.suggestion and result.suggestion not in suggestions:
                suggestions.append(result.suggestion)

        return suggestions
