"""Interview analysis: validate transcripts, call the model, parse the report."""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Protocol, Sequence

from ..core.exceptions import InvalidInputError, NoValidContentError
from .models import AnalysisOutcome
from .parser import parse_analysis
from .prompts import build_prompt, valid_transcripts

logger = logging.getLogger("prodsignal.analysis")

EMPTY_INPUT_MESSAGE = "Please provide at least one interview transcript"
NO_VALID_CONTENT_MESSAGE = "No valid interview transcripts provided"
PREVIEW_CHARS = 300


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str: ...


def validate_transcripts(payload: Any) -> List[str]:
    """Return the non-empty transcripts, or raise before any model call is made."""
    if not payload or not isinstance(payload, list):
        raise InvalidInputError(EMPTY_INPUT_MESSAGE)
    transcripts = valid_transcripts(payload)
    if not transcripts:
        raise NoValidContentError(NO_VALID_CONTENT_MESSAGE, {"submitted": len(payload)})
    return transcripts


class AnalysisService:
    def __init__(
        self,
        client: TextGenerator,
        *,
        prompt_builder: Callable[[Sequence[str]], str] = build_prompt,
    ) -> None:
        self.client = client
        self.prompt_builder = prompt_builder

    def analyze(self, transcripts: Any) -> AnalysisOutcome:
        interviews = validate_transcripts(transcripts)
        prompt = self.prompt_builder(interviews)
        logger.info(
            "Analyzing interviews count=%d prompt_chars=%d", len(interviews), len(prompt)
        )
        analysis = self.client.generate(prompt)
        logger.info("Analysis length: %d", len(analysis))
        logger.debug("Analysis preview: %s", analysis[:PREVIEW_CHARS])
        report = parse_analysis(analysis)
        if report.is_empty:
            logger.warning("Analysis text did not match the expected sections")
        return AnalysisOutcome(
            analysis=analysis,
            interview_count=len(interviews),
            report=report,
        )
