"""Text-generation client for the hosted Anthropic model."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional

from ..config.settings import Settings, get_settings
from .anthropic import extract_text, extract_usage, translate_error
from .env import get_anthropic_client, get_anthropic_model
from .retry import retry_with_backoff

logger = logging.getLogger("prodsignal.llm")


class AnthropicTextClient:
    """Single-prompt text generation with backoff on overloaded/rate-limited errors.

    The SDK client can be injected; otherwise it is built from settings on the
    first call so a missing API key surfaces as a per-request ConfigurationError.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        sdk_client: Any = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.settings = settings or get_settings()
        self._sdk_client = sdk_client
        self._sleep = sleep

    def _client(self) -> Any:
        if self._sdk_client is None:
            self._sdk_client = get_anthropic_client(self.settings)
        return self._sdk_client

    def _create_message(self, prompt: str, model: str) -> Any:
        try:
            return self._client().messages.create(
                model=model,
                max_tokens=self.settings.max_output_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as exc:
            translated = translate_error(exc)
            if translated is exc:
                raise
            raise translated from exc

    def generate(self, prompt: str) -> str:
        model = get_anthropic_model(self.settings)
        logger.debug("Calling Anthropic model=%s prompt_chars=%d", model, len(prompt))
        start = time.perf_counter()
        message = retry_with_backoff(
            lambda: self._create_message(prompt, model),
            max_attempts=self.settings.retry_max_attempts,
            base_delay_ms=self.settings.retry_base_delay_ms,
            sleep=self._sleep,
        )
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Anthropic call completed ms=%.1f model=%s usage=%s",
            elapsed_ms,
            model,
            extract_usage(message),
        )
        return extract_text(message)
