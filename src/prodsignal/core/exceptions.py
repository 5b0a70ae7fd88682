"""Custom exception hierarchy for ProdSignal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ProdSignalError(Exception):
    """Base exception type for all ProdSignal errors."""

    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        if not self.context:
            return self.message
        return f"{self.message} | context={self.context}"


class InvalidInputError(ProdSignalError):
    """Raised when the transcript list is missing, not a list, or empty."""


class NoValidContentError(InvalidInputError):
    """Raised when every submitted transcript is empty after trimming."""


class ConfigurationError(ProdSignalError):
    """Raised when configuration (e.g. the API key) is missing or invalid."""


# -----------------------------------------------------------------------------
# Upstream model failures
# -----------------------------------------------------------------------------


@dataclass
class UpstreamServiceError(ProdSignalError):
    """Raised when the hosted model call fails."""

    status_code: Optional[int] = None


class UpstreamOverloadedError(UpstreamServiceError):
    """Raised when the model service reports it is overloaded (HTTP 529)."""


class RateLimitedError(UpstreamServiceError):
    """Raised when the model service rejects the call with HTTP 429."""


class UnclassifiedError(UpstreamServiceError):
    """Raised for any other model call failure. Never retried."""


class MaxRetriesExceededError(ProdSignalError):
    """Raised when the retry loop ends without a result or an error."""
