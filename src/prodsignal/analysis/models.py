"""Typed records for a parsed discovery analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Problem:
    title: str
    mentioned_in: str = ""
    impact: str = ""
    evidence: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "mentioned_in": self.mentioned_in,
            "impact": self.impact,
            "evidence": list(self.evidence),
        }


@dataclass(frozen=True)
class Feature:
    feature: str
    why: str = ""
    effort: str = ""
    priority: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "feature": self.feature,
            "why": self.why,
            "effort": self.effort,
            "priority": self.priority,
        }


@dataclass(frozen=True)
class TopPriority:
    what: str = ""
    why: str = ""
    impact: str = ""
    evidence: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "what": self.what,
            "why": self.why,
            "impact": self.impact,
            "evidence": self.evidence,
        }


@dataclass(frozen=True)
class AnalysisReport:
    """Problems, features and the top priority extracted from one model response."""

    problems: Tuple[Problem, ...] = ()
    features: Tuple[Feature, ...] = ()
    top_priority: Optional[TopPriority] = None

    @property
    def is_empty(self) -> bool:
        return not self.problems and not self.features and self.top_priority is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "problems": [problem.to_dict() for problem in self.problems],
            "features": [feature.to_dict() for feature in self.features],
            "top_priority": self.top_priority.to_dict() if self.top_priority else None,
        }


@dataclass(frozen=True)
class AnalysisOutcome:
    """Raw model text plus the parsed report for one analysis request."""

    analysis: str
    interview_count: int
    report: AnalysisReport = field(default_factory=AnalysisReport)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "analysis": self.analysis,
            "interview_count": self.interview_count,
            "report": self.report.to_dict(),
        }
