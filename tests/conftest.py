"""Shared fixtures for the analysis, client and API tests.

No test touches the network: the model is replaced with a fake text client
or a mocked SDK client, and backoff sleeps are recorded instead of slept.
"""

import os
import tempfile
from pathlib import Path
from typing import Any, Callable, List

import pytest

# Keep test logs out of the repo; read once by setup_logging().
os.environ.setdefault(
    "PRODSIGNAL_LOG_FILE",
    str(Path(tempfile.mkdtemp(prefix="prodsignal-logs-")) / "prodsignal.log"),
)

from src.prodsignal.analysis.service import AnalysisService  # noqa: E402
from src.prodsignal.config.settings import Settings  # noqa: E402


WELL_FORMED_ANALYSIS = """Here is the analysis of the interviews.

---

PROBLEMS IDENTIFIED

Problem: Manual data transfer between tools
Mentioned in: 1/3 interviews
Impact: High
Evidence:
- "I spend about 4 hours a week just copy-pasting data"
- "There's no integration"

Problem: Confusing onboarding
Mentioned in: 2/3 interviews
Impact: High
Evidence:
- "onboarding is confusing"

RECOMMENDED FEATURES

Feature: CRM to analytics sync
Why: Removes the weekly copy-paste work
Effort: Medium
Priority: P1

Feature: Guided onboarding checklist
Why: Tells new users where to start
Effort: Small
Priority: P0

TOP PRIORITY

What to build first: Guided onboarding checklist
Why: It drives early churn and support load
Expected impact: High
Customer evidence: "They don't know where to start"

---
"""


class FakeTextClient:
    """Records prompts and returns canned text, or raises a canned error."""

    def __init__(self, response: str = WELL_FORMED_ANALYSIS, error: Exception = None):
        self.response = response
        self.error = error
        self.prompts: List[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def well_formed_analysis() -> str:
    return WELL_FORMED_ANALYSIS


@pytest.fixture
def fake_client() -> FakeTextClient:
    return FakeTextClient()


@pytest.fixture
def test_settings() -> Settings:
    """Settings that ignore the environment and any local .env file."""
    return Settings(
        _env_file=None,
        anthropic_api_key="test-key",
        anthropic_base_url=None,
        anthropic_model="claude-test",
        max_output_tokens=4000,
        retry_max_attempts=3,
        retry_base_delay_ms=1500,
    )


@pytest.fixture
def sleep_recorder() -> Callable[[float], None]:
    """A sleep replacement that records the requested delays in seconds."""
    calls: List[float] = []

    def _sleep(seconds: float) -> None:
        calls.append(seconds)

    _sleep.calls = calls  # type: ignore[attr-defined]
    return _sleep


@pytest.fixture
def make_service() -> Callable[..., Any]:
    def _make(response: str = WELL_FORMED_ANALYSIS, error: Exception = None):
        client = FakeTextClient(response=response, error=error)
        return AnalysisService(client), client

    return _make
