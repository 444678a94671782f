"""
Highlight spans for rendering matched phrases inline.

Match spans from different detectors can overlap (vague attributions are
reported by two detectors, and regex templates can cover a literal
phrase). Highlights are flattened, sorted by start offset, and resolved
so no two highlights overlap: the earlier one wins, and on a shared start
the longer one wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from slopsense.matcher import PatternMatch


@dataclass(frozen=True)
class Highlight:
    start: int
    end: int
    category: str
    phrase: str
    detector: str = ""

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "category": self.category,
            "phrase": self.phrase,
            "detector": self.detector,
        }


def build_highlights(result) -> list[Highlight]:
    """
    Non-overlapping highlights for every span of every match, in text order.

    Accepts an AnalysisResult or any iterable of PatternMatch.
    """
    patterns: Iterable[PatternMatch] = getattr(result, "patterns", result)
    candidates = [
        Highlight(start, end, m.category, m.phrase, m.detector)
        for m in patterns
        for start, end in m.spans
    ]
    candidates.sort(key=lambda h: (h.start, -(h.end - h.start)))

    resolved: list[Highlight] = []
    for h in candidates:
        if resolved and h.start < resolved[-1].end:
            continue
        resolved.append(h)
    return resolved
