"""Prompt template and interview formatting for the discovery analysis."""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence

INTERVIEWS_PLACEHOLDER = "{interviews}"

ANALYSIS_PROMPT = """You are an expert product researcher analyzing customer interviews.
Analyze these customer interviews and identify clear patterns.

INTERVIEWS:
{interviews}

IMPORTANT: You MUST provide analysis in the EXACT format below. Do not omit any sections.

---

PROBLEMS IDENTIFIED

Problem: [Clear, concise statement of the problem]
Mentioned in: [e.g., 2/3 interviews]
Impact: High/Medium/Low
Evidence:
- "[Direct quote from interview]"
- "[Another direct quote]"

Problem: [Second problem if applicable]
Mentioned in: [e.g., 1/3 interviews]
Impact: High/Medium/Low
Evidence:
- "[Direct quote from interview]"

RECOMMENDED FEATURES

Feature: [What to build to solve this problem]
Why: [How this feature solves the problem]
Effort: Small/Medium/Large
Priority: P0/P1/P2

Feature: [Second feature]
Why: [How this feature solves the problem]
Effort: Small/Medium/Large
Priority: P0/P1/P2

TOP PRIORITY

What to build first: [Single most important feature]
Why: [Reasoning based on customer evidence]
Expected impact: High/Medium/Low
Customer evidence: "[Key quote supporting this decision]"

---

Remember: Include at least 2-3 problems and 2-3 recommended features. Use real quotes from the interviews as evidence."""


def valid_transcripts(items: Iterable[Any]) -> List[str]:
    """Keep transcripts that are strings with non-whitespace content, in order."""
    return [item for item in items if isinstance(item, str) and item.strip()]


def format_interviews(transcripts: Sequence[str]) -> str:
    return "\n\n".join(
        f"--- Interview {index} ---\n{text}"
        for index, text in enumerate(transcripts, start=1)
    )


def build_prompt(transcripts: Sequence[str], template: str = ANALYSIS_PROMPT) -> str:
    # First placeholder only.
    return template.replace(INTERVIEWS_PLACEHOLDER, format_interviews(transcripts), 1)
