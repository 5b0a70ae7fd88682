"""Environment and client helpers for the LLM."""

from __future__ import annotations

import logging
from typing import Optional

from anthropic import Anthropic

from ..config.settings import Settings, get_settings
from ..core.exceptions import ConfigurationError

logger = logging.getLogger("prodsignal.llm")

MISSING_KEY_MESSAGE = (
    "API key not configured. Please add ANTHROPIC_API_KEY to your environment variables."
)
MISSING_MODEL_MESSAGE = (
    "Model not configured. Please set ANTHROPIC_MODEL to a valid model name."
)


def get_anthropic_client(settings: Optional[Settings] = None) -> Anthropic:
    settings = settings or get_settings()
    api_key = (settings.anthropic_api_key or "").strip()
    if not api_key:
        raise ConfigurationError(MISSING_KEY_MESSAGE)
    if settings.anthropic_base_url:
        base_url = settings.anthropic_base_url.strip().rstrip("/")
        logger.debug("Using Anthropic base_url=%s", base_url)
        return Anthropic(api_key=api_key, base_url=base_url)
    return Anthropic(api_key=api_key)


def get_anthropic_model(settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    model = (settings.anthropic_model or "").strip()
    if not model:
        raise ConfigurationError(MISSING_MODEL_MESSAGE)
    return model
