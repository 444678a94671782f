"""
SlopSense — AI-Generated Text Detection Engine

Deterministic, rule-based estimate of how likely a passage of English
prose was produced by a language model.

Public API:
  - analyze:          Synchronous analysis, returns an AnalysisResult
  - analyze_async:    Same result, detectors fanned out to worker threads
  - build_highlights: Non-overlapping match spans for inline rendering
  - get_rule_catalog: Describe the active pattern rules
  - calculate_composite_score: Composite score with a full breakdown

Usage:
    from slopsense import analyze, build_highlights
    result = analyze(text)
    print(result.score, result.verdict)
"""

__version__ = "1.0.0"

from slopsense.detector import (
    analyze,
    analyze_async,
    validate_text,
    AnalysisResult,
    ENGINE_VERSION,
    MAX_INPUT_CHARS,
)
from slopsense.errors import SlopSenseError, InputTooLarge, InvalidInput
from slopsense.factors import Factors, compute_factors
from slopsense.highlights import Highlight, build_highlights
from slopsense.matcher import Category, PatternMatch, PatternRule
from slopsense.patterns import DETECTORS, get_rule_catalog
from slopsense.scorer import calculate_composite_score, verdict_for

__all__ = [
    "analyze",
    "analyze_async",
    "validate_text",
    "AnalysisResult",
    "ENGINE_VERSION",
    "MAX_INPUT_CHARS",
    "SlopSenseError",
    "InputTooLarge",
    "InvalidInput",
    "Factors",
    "compute_factors",
    "Highlight",
    "build_highlights",
    "Category",
    "PatternMatch",
    "PatternRule",
    "DETECTORS",
    "get_rule_catalog",
    "calculate_composite_score",
    "verdict_for",
]
