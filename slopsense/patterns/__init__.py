"""
Pattern detectors and their static rule catalogs.

DETECTORS is the fixed order in which match lists are concatenated.
"""

from __future__ import annotations

from typing import Callable, Optional

from slopsense.matcher import PatternMatch, PatternRule, describe_rules
from slopsense.patterns import (
    stylistic_markers,
    superficial_analysis,
    undue_emphasis,
    vague_attribution,
)
from slopsense.patterns.stylistic_markers import detect_stylistic_markers
from slopsense.patterns.superficial_analysis import detect_superficial_analysis
from slopsense.patterns.undue_emphasis import detect_undue_emphasis
from slopsense.patterns.vague_attribution import detect_vague_attributions

Detector = Callable[[str], tuple[PatternMatch, ...]]

DETECTORS: tuple[tuple[str, Detector], ...] = (
    (vague_attribution.DETECTOR_NAME, detect_vague_attributions),
    (undue_emphasis.DETECTOR_NAME, detect_undue_emphasis),
    (superficial_analysis.DETECTOR_NAME, detect_superficial_analysis),
    (stylistic_markers.DETECTOR_NAME, detect_stylistic_markers),
)

CATALOGS: dict[str, tuple[PatternRule, ...]] = {
    vague_attribution.DETECTOR_NAME: vague_attribution.RULES,
    undue_emphasis.DETECTOR_NAME: undue_emphasis.RULES,
    superficial_analysis.DETECTOR_NAME: superficial_analysis.RULES,
    stylistic_markers.DETECTOR_NAME: stylistic_markers.RULES,
}


def get_rule_catalog(detector: Optional[str] = None) -> list[dict]:
    """
    Describe the active rule catalogs, optionally for one detector.

    Raises:
        KeyError: if `detector` is not a known detector name.
    """
    if detector is not None:
        return describe_rules(CATALOGS[detector], detector)
    rules: list[dict] = []
    for name, catalog in CATALOGS.items():
        rules.extend(describe_rules(catalog, name))
    return rules


__all__ = [
    "CATALOGS",
    "DETECTORS",
    "Detector",
    "detect_stylistic_markers",
    "detect_superficial_analysis",
    "detect_undue_emphasis",
    "detect_vague_attributions",
    "get_rule_catalog",
]
