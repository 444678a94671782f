"""
Detector — Analysis Orchestrator

The engine's single entry point. analyze() validates the text, fans out
to every pattern detector and the factor scorer, and folds the results
into one immutable AnalysisResult.

  - analyze:        synchronous, detectors run in order
  - analyze_async:  detectors run concurrently in worker threads

Both concatenate matches in the fixed DETECTORS order, so the output is
identical whichever detector finishes first.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, Union

from slopsense.errors import InputTooLarge, InvalidInput
from slopsense.factors import Factors, compute_factors
from slopsense.matcher import PatternMatch
from slopsense.patterns import DETECTORS
from slopsense.scorer import calculate_composite_score, verdict_for

logger = logging.getLogger(__name__)

# --- Engine Version (stamped on every result) ---
ENGINE_VERSION = "1.0.0"

# Longest text the engine will analyze, in characters
MAX_INPUT_CHARS = 100_000


@dataclass(frozen=True)
class AnalysisResult:
    """Result of one analysis. Created once per call and never mutated."""
    score: float
    factors: Factors
    patterns: tuple[PatternMatch, ...] = ()
    verdict: str = field(default_factory=lambda: verdict_for(0.0))
    engine_version: str = ENGINE_VERSION

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "verdict": self.verdict,
            "factors": self.factors.to_dict(),
            "patterns": [p.to_dict() for p in self.patterns],
            "engine_version": self.engine_version,
        }


# ============================================================
# INPUT VALIDATION
# ============================================================

def validate_text(text: Union[str, bytes]) -> str:
    """
    Return text as a well-formed str, or raise.

    Raises:
        InvalidInput: text is neither str nor bytes, bytes are not UTF-8,
            or the string holds unpaired surrogates.
        InputTooLarge: text is longer than MAX_INPUT_CHARS.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidInput(f"Text is not valid UTF-8: {e.reason}") from e
    elif not isinstance(text, str):
        raise InvalidInput(f"Expected text, got {type(text).__name__}")

    if len(text) > MAX_INPUT_CHARS:
        raise InputTooLarge(len(text), MAX_INPUT_CHARS)

    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidInput("Text contains unpaired surrogate characters") from e
    return text


# ============================================================
# ANALYSIS
# ============================================================

def neutral_result() -> AnalysisResult:
    """What analysis of nothing looks like: score 0, no patterns, zero factors."""
    return AnalysisResult(score=0.0, factors=Factors(), patterns=())


def analyze(text: Union[str, bytes]) -> AnalysisResult:
    """
    Analyze text for signs of machine generation.

    Args:
        text: The text to analyze. Bytes are decoded as strict UTF-8.

    Returns:
        AnalysisResult with the composite score, factor breakdown and
        pattern matches.

    Raises:
        InvalidInput, InputTooLarge: see validate_text().
    """
    text = validate_text(text)
    if not text.strip():
        return neutral_result()

    start = time.perf_counter()
    factors = compute_factors(text)
    match_lists = [detect(text) for _, detect in DETECTORS]
    return _assemble(factors, match_lists, start)


async def analyze_async(text: Union[str, bytes]) -> AnalysisResult:
    """analyze(), with the factor scorer and each detector in its own worker thread."""
    text = validate_text(text)
    if not text.strip():
        return neutral_result()

    start = time.perf_counter()
    factors, *match_lists = await asyncio.gather(
        asyncio.to_thread(compute_factors, text),
        *[asyncio.to_thread(detect, text) for _, detect in DETECTORS],
    )
    return _assemble(factors, match_lists, start)


def _assemble(
    factors: Factors,
    match_lists: Iterable[tuple[PatternMatch, ...]],
    start: float,
) -> AnalysisResult:
    """Concatenate match lists in detector order and compute the composite score."""
    patterns = tuple(m for matches in match_lists for m in matches)
    score, _ = calculate_composite_score(factors, patterns)

    logger.debug(
        "Analysis complete: score=%s patterns=%d", score, len(patterns),
        extra={
            "score": score,
            "patterns_count": len(patterns),
            "duration_ms": int((time.perf_counter() - start) * 1000),
        },
    )

    return AnalysisResult(
        score=score,
        factors=factors,
        patterns=patterns,
        verdict=verdict_for(score),
    )
