"""Retry with exponential backoff for transient model failures."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional, TypeVar

from ..core.exceptions import MaxRetriesExceededError, RateLimitedError, UpstreamOverloadedError

logger = logging.getLogger("prodsignal.llm")

T = TypeVar("T")

OVERLOADED_STATUS = 529
RATE_LIMIT_STATUS = 429


def _status_of(exc: BaseException) -> Optional[int]:
    for attr in ("status_code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return value
    return None


def _error_type_of(exc: BaseException) -> Optional[str]:
    # Anthropic error bodies look like {"type": "error", "error": {"type": "overloaded_error"}}.
    for attr in ("body", "error"):
        payload: Any = getattr(exc, attr, None)
        if isinstance(payload, dict):
            inner = payload.get("error")
            if isinstance(inner, dict) and isinstance(inner.get("type"), str):
                return inner["type"]
            if isinstance(payload.get("type"), str) and payload["type"] != "error":
                return payload["type"]
    return None


def is_overloaded_error(exc: BaseException) -> bool:
    if isinstance(exc, UpstreamOverloadedError):
        return True
    if _status_of(exc) == OVERLOADED_STATUS:
        return True
    if _error_type_of(exc) == "overloaded_error":
        return True
    message = getattr(exc, "message", None)
    if not isinstance(message, str):
        message = str(exc)
    return "overloaded" in message


def is_rate_limit_error(exc: BaseException) -> bool:
    if isinstance(exc, RateLimitedError):
        return True
    if _status_of(exc) == RATE_LIMIT_STATUS:
        return True
    return _error_type_of(exc) == "rate_limit_error"


def is_retryable_error(exc: BaseException) -> bool:
    return is_overloaded_error(exc) or is_rate_limit_error(exc)


def retry_with_backoff(
    fn: Callable[[], T],
    *,
    max_attempts: int = 3,
    base_delay_ms: int = 1000,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Call ``fn`` until it succeeds, backing off on overloaded/rate-limited errors.

    The wait before retry ``k`` (0-based attempt index) is
    ``base_delay_ms * 2 ** k`` milliseconds. Non-retryable errors and the error
    from the final attempt are re-raised unchanged.
    """
    for attempt in range(max_attempts):
        try:
            return fn()
        except Exception as exc:
            if is_retryable_error(exc) and attempt < max_attempts - 1:
                delay_ms = base_delay_ms * (2 ** attempt)
                logger.warning(
                    "Model API overloaded or rate limited. Retrying in %dms... (attempt %d/%d)",
                    delay_ms,
                    attempt + 1,
                    max_attempts,
                )
                sleep(delay_ms / 1000)
                continue
            raise
    raise MaxRetriesExceededError("Max retries exceeded", {"max_attempts": max_attempts})
