"""Parse the model's free-text analysis into problems, features and a top priority.

The scan is line based and keyed on the section headers and field labels that
``ANALYSIS_PROMPT`` asks the model to emit. It never raises: text that does
not match simply yields empty collections and no top priority.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

from .models import AnalysisReport, Feature, Problem, TopPriority

logger = logging.getLogger("prodsignal.analysis")

PROBLEMS_HEADER = "PROBLEMS IDENTIFIED"
FEATURES_HEADER = "RECOMMENDED FEATURES"
TOP_PRIORITY_HEADER = "TOP PRIORITY"

SECTION_PROBLEMS = "problems"
SECTION_FEATURES = "features"
SECTION_TOP_PRIORITY = "top_priority"

_LEADING_DASH = re.compile(r"^-\s*")


def _after(line: str, prefix: str) -> str:
    return line[len(prefix):].strip()


def _build_problem(draft: Dict[str, str], evidence: List[str]) -> Problem:
    return Problem(
        title=draft["title"],
        mentioned_in=draft.get("mentioned_in", ""),
        impact=draft.get("impact", ""),
        evidence=tuple(evidence),
    )


def _build_feature(draft: Dict[str, str]) -> Feature:
    return Feature(
        feature=draft["feature"],
        why=draft.get("why", ""),
        effort=draft.get("effort", ""),
        priority=draft.get("priority", ""),
    )


def parse_analysis(text: str) -> AnalysisReport:
    problems: List[Problem] = []
    features: List[Feature] = []
    top_priority: Optional[Dict[str, str]] = None

    section: Optional[str] = None
    problem: Optional[Dict[str, str]] = None
    feature: Optional[Dict[str, str]] = None
    evidence: List[str] = []

    for raw_line in (text or "").split("\n"):
        line = raw_line.strip()

        if PROBLEMS_HEADER in line:
            section = SECTION_PROBLEMS
            continue
        if FEATURES_HEADER in line:
            if problem and problem.get("title"):
                problems.append(_build_problem(problem, evidence))
            problem = None
            evidence = []
            section = SECTION_FEATURES
            continue
        if TOP_PRIORITY_HEADER in line:
            if feature and feature.get("feature"):
                features.append(_build_feature(feature))
            feature = None
            section = SECTION_TOP_PRIORITY
            continue

        if section == SECTION_PROBLEMS:
            if line.startswith("Problem:"):
                if problem and problem.get("title"):
                    problems.append(_build_problem(problem, evidence))
                problem = {"title": _after(line, "Problem:")}
                evidence = []
            elif line.startswith("Mentioned in:"):
                if problem is not None:
                    problem["mentioned_in"] = _after(line, "Mentioned in:")
            elif line.startswith("Impact:"):
                if problem is not None:
                    problem["impact"] = _after(line, "Impact:")
            elif line.startswith("Evidence:"):
                quote = _after(line, "Evidence:")
                if quote:
                    evidence.append(quote)
            elif line.startswith("-"):
                evidence.append(_LEADING_DASH.sub("", line, count=1))
            elif line.startswith('"'):
                evidence.append(line)

        elif section == SECTION_FEATURES:
            if line.startswith("Feature:"):
                if feature and feature.get("feature"):
                    features.append(_build_feature(feature))
                feature = {"feature": _after(line, "Feature:")}
            elif line.startswith("Why:"):
                if feature is not None:
                    feature["why"] = _after(line, "Why:")
            elif line.startswith("Effort:"):
                if feature is not None:
                    feature["effort"] = _after(line, "Effort:")
            elif line.startswith("Priority:"):
                if feature is not None:
                    feature["priority"] = _after(line, "Priority:")

        elif section == SECTION_TOP_PRIORITY:
            if line.startswith("What to build first:"):
                top_priority = {
                    "what": _after(line, "What to build first:"),
                    "why": "",
                    "impact": "",
                    "evidence": "",
                }
            elif top_priority is not None and line.startswith("Why:"):
                top_priority["why"] = _after(line, "Why:")
            elif top_priority is not None and line.startswith("Expected impact:"):
                top_priority["impact"] = _after(line, "Expected impact:")
            elif top_priority is not None and line.startswith("Customer evidence:"):
                top_priority["evidence"] = _after(line, "Customer evidence:")

    if problem and problem.get("title"):
        problems.append(_build_problem(problem, evidence))
    if feature and feature.get("feature"):
        features.append(_build_feature(feature))

    report = AnalysisReport(
        problems=tuple(problems),
        features=tuple(features),
        top_priority=TopPriority(**top_priority) if top_priority is not None else None,
    )
    logger.debug(
        "Parsed analysis problems=%d features=%d top_priority=%s",
        len(report.problems),
        len(report.features),
        report.top_priority is not None,
    )
    return report
