"""
Composite Score Calculator

Folds the five linguistic factors and the pattern matches into one 0-100
probability-of-AI score. Separated from detector.py for single-responsibility.

Score = 0.6 x mean(factors) + 0.4 x pattern intensity

  Pattern intensity: sum of per-category match scores, each category
  capped at 35, total capped at 100. No single category can carry the
  composite past 14 points on its own.

Both terms only grow as factors, counts or rule weights grow, so the
score is monotonic in every input and saturates at 100.
"""

from __future__ import annotations

from typing import Iterable

from slopsense.factors import Factors
from slopsense.matcher import PatternMatch

FACTOR_WEIGHT = 0.6
PATTERN_WEIGHT = 0.4
CATEGORY_CAP = 35.0

# (upper bound exclusive, label), first match wins
VERDICT_BANDS = (
    (30.0, "Likely Human-Written"),
    (60.0, "Possibly AI-Generated"),
)
TOP_VERDICT = "Likely AI-Generated"
LIKELY_AI_THRESHOLD = VERDICT_BANDS[-1][0]


def pattern_intensity(patterns: Iterable[PatternMatch]) -> tuple[float, dict[str, float]]:
    """
    Sum match scores per category (capped), then across categories (capped).

    Returns:
        (intensity, per_category) where per_category holds each capped sum.
    """
    per_category: dict[str, float] = {}
    for match in patterns:
        per_category[match.category] = per_category.get(match.category, 0.0) + match.score
    capped = {cat: min(CATEGORY_CAP, total) for cat, total in per_category.items()}
    return min(100.0, sum(capped.values())), capped


def calculate_composite_score(
    factors: Factors,
    patterns: Iterable[PatternMatch],
) -> tuple[float, dict]:
    """
    Calculate the composite score.

    Returns:
        (score, breakdown) where breakdown shows every term applied.
    """
    values = factors.values()
    factor_mean = sum(values) / len(values)
    intensity, per_category = pattern_intensity(patterns)

    raw = FACTOR_WEIGHT * factor_mean + PATTERN_WEIGHT * intensity
    final = round(max(0.0, min(100.0, raw)), 1)

    breakdown = {
        "factor_mean": round(factor_mean, 2),
        "factor_contribution": round(FACTOR_WEIGHT * factor_mean, 2),
        "pattern_intensity": round(intensity, 2),
        "pattern_contribution": round(PATTERN_WEIGHT * intensity, 2),
        "category_intensity": {k: round(v, 2) for k, v in per_category.items()},
        "final_score": final,
    }
    return final, breakdown


def verdict_for(score: float) -> str:
    """Human-readable band for a composite score."""
    for upper, label in VERDICT_BANDS:
        if score < upper:
            return label
    return TOP_VERDICT
