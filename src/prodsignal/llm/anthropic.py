"""Anthropic response and error conversion helpers."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import anthropic

from ..core.exceptions import (
    ConfigurationError,
    ProdSignalError,
    RateLimitedError,
    UnclassifiedError,
    UpstreamOverloadedError,
)
from .retry import is_overloaded_error, is_rate_limit_error

logger = logging.getLogger("prodsignal.llm")


def extract_text(message: Any) -> str:
    """Return the text of the first content block, or "" when it is not text."""
    content = getattr(message, "content", None)
    if content is None and isinstance(message, dict):
        content = message.get("content")
    if not content:
        return ""
    first = content[0]
    if isinstance(first, dict):
        if first.get("type") != "text":
            return ""
        return first.get("text") or ""
    if getattr(first, "type", None) != "text":
        return ""
    return getattr(first, "text", None) or ""


def extract_usage(message: Any) -> Dict[str, int]:
    usage = getattr(message, "usage", None)
    if usage is None and isinstance(message, dict):
        usage = message.get("usage")
    if usage is None:
        return {}

    def _get(field: str) -> Optional[int]:
        if isinstance(usage, dict):
            value = usage.get(field)
        else:
            value = getattr(usage, field, None)
        return int(value) if isinstance(value, int) else None

    payload: Dict[str, int] = {}
    input_tokens = _get("input_tokens")
    output_tokens = _get("output_tokens")
    if input_tokens is not None:
        payload["input_tokens"] = input_tokens
    if output_tokens is not None:
        payload["output_tokens"] = output_tokens
    if input_tokens is not None or output_tokens is not None:
        payload["total_tokens"] = (input_tokens or 0) + (output_tokens or 0)
    return payload


def translate_error(exc: Exception) -> Exception:
    """Map an SDK exception onto the ProdSignal error taxonomy.

    Errors that are already ProdSignal errors, and non-SDK errors, are returned
    unchanged.
    """
    if isinstance(exc, ProdSignalError):
        return exc
    status_code = getattr(exc, "status_code", None)
    if not isinstance(status_code, int):
        status_code = None
    context = {"error_type": type(exc).__name__}
    if is_overloaded_error(exc):
        return UpstreamOverloadedError(str(exc), context, status_code)
    if is_rate_limit_error(exc):
        return RateLimitedError(str(exc), context, status_code)
    if isinstance(exc, anthropic.AuthenticationError):
        return ConfigurationError(f"API key rejected: {exc}", context)
    if isinstance(exc, anthropic.AnthropicError):
        return UnclassifiedError(str(exc), context, status_code)
    return exc
