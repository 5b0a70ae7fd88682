"""Interview analysis: prompt assembly, report parsing and orchestration."""

from .models import AnalysisOutcome, AnalysisReport, Feature, Problem, TopPriority
from .parser import parse_analysis
from .prompts import ANALYSIS_PROMPT, build_prompt, format_interviews
from .service import AnalysisService, validate_transcripts

__all__ = [
    "ANALYSIS_PROMPT",
    "AnalysisOutcome",
    "AnalysisReport",
    "AnalysisService",
    "Feature",
    "Problem",
    "TopPriority",
    "build_prompt",
    "format_interviews",
    "parse_analysis",
    "validate_transcripts",
]
