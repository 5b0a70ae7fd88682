"""LLM client entrypoints."""

from .client import AnthropicTextClient
from .retry import is_overloaded_error, is_rate_limit_error, is_retryable_error, retry_with_backoff

__all__ = [
    "AnthropicTextClient",
    "is_overloaded_error",
    "is_rate_limit_error",
    "is_retryable_error",
    "retry_with_backoff",
]
