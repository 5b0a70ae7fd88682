"""Map analysis failures onto user-facing messages and HTTP status codes."""

from __future__ import annotations

from typing import Tuple

from ..core.exceptions import (
    ConfigurationError,
    InvalidInputError,
    RateLimitedError,
    UpstreamOverloadedError,
)
from ..llm.env import MISSING_KEY_MESSAGE, MISSING_MODEL_MESSAGE
from ..llm.retry import is_overloaded_error, is_rate_limit_error

OVERLOADED_MESSAGE = (
    "The Anthropic API is currently overloaded. Please wait a moment and try again."
)
RATE_LIMITED_MESSAGE = (
    "The Anthropic API is rate limiting requests. Please wait a moment and try again."
)
GENERIC_FAILURE_MESSAGE = "Failed to analyze interviews. Please try again."

STATUS_BAD_INPUT = 400
STATUS_FAILURE = 500
STATUS_UNAVAILABLE = 503


def classify_failure(exc: BaseException) -> Tuple[str, int]:
    """Return ``(message, status)`` for an exception raised by an analysis."""
    if isinstance(exc, InvalidInputError):
        return exc.message, STATUS_BAD_INPUT
    if isinstance(exc, ConfigurationError):
        if exc.message == MISSING_MODEL_MESSAGE:
            return MISSING_MODEL_MESSAGE, STATUS_FAILURE
        return MISSING_KEY_MESSAGE, STATUS_FAILURE
    if isinstance(exc, UpstreamOverloadedError) or is_overloaded_error(exc):
        return OVERLOADED_MESSAGE, STATUS_UNAVAILABLE
    if isinstance(exc, RateLimitedError) or is_rate_limit_error(exc):
        return RATE_LIMITED_MESSAGE, STATUS_UNAVAILABLE
    return GENERIC_FAILURE_MESSAGE, STATUS_FAILURE
