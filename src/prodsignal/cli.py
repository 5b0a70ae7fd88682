"""CLI entrypoint: analyze interview transcripts from files or the samples."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from dotenv import load_dotenv

from .analysis.models import AnalysisOutcome, AnalysisReport
from .analysis.samples import sample_interviews
from .analysis.service import AnalysisService
from .api.app import build_service
from .api.response_utils import classify_failure
from .utils.logging import setup_logging

logger = logging.getLogger("prodsignal.cli")


class ViewState(Enum):
    LANDING = "landing"
    ANALYZING = "analyzing"
    RESULTS = "results"


class TranscriptReadError(RuntimeError):
    """Raised when a transcript file is missing, unreadable, or not UTF-8."""


def read_transcripts(paths: Sequence[Path]) -> List[str]:
    transcripts: List[str] = []
    for path in paths:
        try:
            transcripts.append(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise TranscriptReadError(f"Could not read {path}: {exc}") from exc
    return transcripts


def format_report(report: AnalysisReport, interview_count: int) -> str:
    lines = [f"Analyzed {interview_count} interview(s)", ""]
    if report.top_priority is not None:
        top = report.top_priority
        lines.extend(
            [
                "TOP PRIORITY",
                f"  What to build: {top.what}",
                f"  Why: {top.why}",
                f"  Expected impact: {top.impact}",
                f"  Customer evidence: {top.evidence}",
                "",
            ]
        )
    lines.append("PROBLEMS IDENTIFIED")
    for index, problem in enumerate(report.problems, start=1):
        lines.append(f"  {index}. {problem.title}")
        lines.append(f"     Mentioned in: {problem.mentioned_in}  Impact: {problem.impact}")
        for quote in problem.evidence:
            lines.append(f"     - {quote}")
    lines.append("")
    lines.append("RECOMMENDED FEATURES")
    for index, feature in enumerate(report.features, start=1):
        lines.append(f"  {index}. {feature.feature} [{feature.priority}, effort {feature.effort}]")
        lines.append(f"     Why: {feature.why}")
    return "\n".join(lines)


def render(
    state: ViewState,
    out: TextIO,
    *,
    outcome: Optional[AnalysisOutcome] = None,
    as_json: bool = False,
    error: Optional[str] = None,
) -> None:
    if state is ViewState.LANDING:
        if error:
            print(f"Error: {error}", file=sys.stderr)
    elif state is ViewState.ANALYZING:
        print("Analyzing interviews...", file=sys.stderr)
    elif state is ViewState.RESULTS:
        if outcome is None:
            raise ValueError("RESULTS view requires an analysis outcome.")
        if as_json:
            out.write(json.dumps(outcome.to_dict(), indent=2) + "\n")
        else:
            out.write(format_report(outcome.report, outcome.interview_count) + "\n")
    else:
        raise ValueError(f"Unhandled view state: {state}")


def run(
    service: AnalysisService,
    transcripts: List[str],
    *,
    as_json: bool = False,
    out: TextIO = sys.stdout,
) -> int:
    render(ViewState.ANALYZING, out)
    try:
        outcome = service.analyze(transcripts)
    except Exception as exc:
        message, status = classify_failure(exc)
        logger.warning("CLI analysis failed status=%d: %s", status, exc)
        render(ViewState.LANDING, out, error=message)
        return 1
    render(ViewState.RESULTS, out, outcome=outcome, as_json=as_json)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Analyze customer interview transcripts")
    parser.add_argument("files", nargs="*", type=Path, help="Transcript text files")
    parser.add_argument("--sample", action="store_true", help="Include the built-in sample interviews")
    parser.add_argument("--json", action="store_true", help="Print the JSON payload instead of a report")
    args = parser.parse_args(argv)

    load_dotenv()
    setup_logging()

    try:
        transcripts = read_transcripts(args.files)
    except TranscriptReadError as exc:
        logger.warning("CLI could not read transcript: %s", exc)
        render(ViewState.LANDING, sys.stdout, error=str(exc))
        return 1
    if args.sample:
        transcripts.extend(sample_interviews())

    return run(build_service(), transcripts, as_json=args.json)


if __name__ == "__main__":
    sys.exit(main())
