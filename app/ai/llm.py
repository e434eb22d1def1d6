# Copyright (c) 2026 Tyler Martin
# Licensed under FSL-1.1-ALv2 (see LICENSE)

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import httpx

from app.ai.models import CompletionParams
from app.config import AIConfig

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    def __init__(self, error_type: str, message: str):
        self.error_type = error_type
        self.message = message
        super().__init__(message)


class ProviderUnavailable(ProviderError):
    def __init__(self, message: str):
        super().__init__("provider_unavailable", message)


class ProviderRequestFailed(ProviderError):
    def __init__(self, message: str):
        super().__init__("request_failed", message)


@dataclass
class LLMResponse:
    content: str
    model: str
    usage: dict

    @property
    def tokens_used(self) -> Optional[int]:
        return self.usage.get("total_tokens")


class CompletionProvider(Protocol):
    def is_available(self) -> bool: ...

    async def complete(
        self, system_prompt: str, user_prompt: str, params: CompletionParams,
    ) -> LLMResponse: ...


class GroqProvider:
    """OpenAI-compatible chat completion client (Groq by default)."""

    def __init__(self, config: Optional[AIConfig] = None):
        self._config = config or AIConfig.from_env()

    def is_available(self) -> bool:
        return bool(self._config.api_key)

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        params: CompletionParams,
    ) -> LLMResponse:
        if not self._config.api_key:
            raise ProviderUnavailable("GROQ_API_KEY environment variable is required")

        try:
            async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                resp = await client.post(
                    self._config.base_url,
                    headers={
                        "Authorization": f"Bearer {self._config.api_key}",
                        "Content-Type": "application/json",
                    },
                    json={
                        "model": params.model,
                        "messages": [
                            {"role": "system", "content": system_prompt},
                            {"role": "user", "content": user_prompt},
                        ],
                        "max_tokens": params.max_tokens,
                        "temperature": params.temperature,
                    },
                )
                resp.raise_for_status()
                data = resp.json()
        except ValueError as e:
            raise ProviderRequestFailed("malformed completion response") from e
        except httpx.HTTPStatusError as e:
            raise ProviderRequestFailed(
                f"completion request rejected with HTTP {e.response.status_code}"
            ) from e
        except httpx.ConnectError as e:
            raise ProviderUnavailable(f"completion endpoint unreachable: {e}") from e
        except httpx.HTTPError as e:
            raise ProviderRequestFailed(f"completion request failed: {e}") from e

        try:
            choice = data["choices"][0]
            content = choice["message"]["content"] or ""
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderRequestFailed("malformed completion response") from e

        logger.debug("completion ok model=%s usage=%s", data.get("model"), data.get("usage"))
        return LLMResponse(
            content=content,
            model=data.get("model", params.model),
            usage=data.get("usage") or {},
        )
