"""
Phrase Pattern Matcher — Shared Detection Primitive

Every detector is a static catalog of PatternRule objects handed to
match_catalog(). A rule is tagged-variant data: a Category plus exactly
one matcher:

  - phrases:   literal phrase variants (word-boundary, case-insensitive)
  - regex:     a template, e.g. "(scholars|experts) (believe|argue)"
  - predicate: a structural function that yields (start, end, phrase) hits

Rules are compiled once at import and never mutated. The matcher holds
no state, so catalogs can be shared across concurrent analyses.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Optional

# Points contributed by one occurrence of a weight-1.0 rule
MATCH_POINTS = 10.0

# (start, end, canonical phrase)
Hit = tuple[int, int, str]


class Category(str, Enum):
    """Pattern categories. Values are the tags surfaced to callers."""

    # Vague attribution detector
    VAGUE_ATTRIBUTION = "vague-attribution"
    OVERGENERALIZATION = "overgeneralization"
    # Undue emphasis detector
    SYMBOLISM = "symbolism"
    MEDIA_COVERAGE = "media-coverage"
    # Superficial analysis detector
    PARTICIPLE_PHRASE = "participle-phrase"
    WATCH_WORD = "watch-word"
    NAMED_ATTRIBUTION = "named-attribution"
    # Stylistic marker detector
    AI_VOCABULARY = "ai-vocabulary"
    PROMOTIONAL_LANGUAGE = "promotional-language"
    DIDACTIC_DISCLAIMER = "didactic-disclaimer"
    SECTION_SUMMARY = "section-summary"
    CHALLENGE_PATTERN = "challenge-pattern"
    NEGATIVE_PARALLELISM = "negative-parallelism"
    RULE_OF_THREE = "rule-of-three"


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class PatternRule:
    """
    One entry in a detector's static rule catalog.

    The canonical phrase of a hit is `canonical` when set, otherwise the
    matched text lower-cased with whitespace collapsed. Hits that share
    a canonical phrase are counted together.
    """
    id: str
    category: Category
    description: str
    phrases: tuple[str, ...] = ()
    regex: Optional[str] = None
    predicate: Optional[Callable[[str], Iterable[Hit]]] = None
    canonical: Optional[str] = None
    weight: float = 1.0
    _compiled: Optional[re.Pattern] = field(
        default=None, init=False, repr=False, compare=False,
    )

    def __post_init__(self):
        variants = sum((bool(self.phrases), self.regex is not None,
                        self.predicate is not None))
        if variants != 1:
            raise ValueError(
                f"Rule {self.id} must define exactly one of phrases, regex, predicate"
            )
        if self.weight <= 0:
            raise ValueError(f"Rule {self.id} weight must be positive")
        if self.predicate is None:
            object.__setattr__(self, "_compiled", compile_rule_pattern(
                self.phrases, self.regex,
            ))

    @property
    def kind(self) -> str:
        if self.phrases:
            return "phrases"
        if self.regex is not None:
            return "regex"
        return "predicate"

    def find(self, text: str) -> Iterable[Hit]:
        """Yield every hit of this rule in text."""
        if self.predicate is not None:
            yield from self.predicate(text)
            return
        for m in self._compiled.finditer(text):
            yield m.start(), m.end(), self.canonical or normalize_phrase(m.group(0))


@dataclass(frozen=True)
class PatternMatch:
    """A distinct matched phrase within one category, with its occurrences."""
    category: str
    phrase: str
    count: int
    score: float
    description: str = ""
    detector: str = ""
    spans: tuple[tuple[int, int], ...] = ()

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "phrase": self.phrase,
            "count": self.count,
            "score": self.score,
            "description": self.description,
            "detector": self.detector,
            "spans": [list(s) for s in self.spans],
        }


# ============================================================
# COMPILATION HELPERS
# ============================================================

def normalize_phrase(raw: str) -> str:
    """Lower-case and collapse internal whitespace."""
    return " ".join(raw.lower().split())


def phrase_to_regex(phrase: str) -> str:
    """Escape a literal phrase, letting any whitespace run match its spaces."""
    return r"\s+".join(re.escape(part) for part in phrase.split())


def compile_rule_pattern(
    phrases: tuple[str, ...], regex: Optional[str],
) -> re.Pattern:
    """
    Compile a literal phrase set or a template into one case-insensitive
    pattern bounded by word boundaries on both sides.

    Longer literals are tried first so "it is often said" wins over a
    shorter variant starting at the same offset.
    """
    if phrases:
        ordered = sorted(phrases, key=len, reverse=True)
        body = "|".join(phrase_to_regex(p) for p in ordered)
    else:
        body = regex
    return re.compile(rf"\b(?:{body})\b", re.IGNORECASE)


# ============================================================
# THE MATCHER
# ============================================================

def score_for(count: int, weight: float) -> float:
    """Contribution of one PatternMatch: grows with count and weight, capped at 100."""
    return round(min(100.0, count * weight * MATCH_POINTS), 1)


def match_catalog(
    text: str,
    rules: Iterable[PatternRule],
    detector: str = "",
) -> tuple[PatternMatch, ...]:
    """
    Match a rule catalog against text.

    Returns one PatternMatch per distinct (category, canonical phrase), in
    catalog order then first-occurrence order. Two hits for the same
    canonical phrase at the same offset count once, so overlapping rule
    alternatives never inflate a count.
    """
    if not text or not text.strip():
        return ()

    # (category, phrase) -> accumulated state, insertion-ordered
    found: dict[tuple[str, str], dict] = {}

    for rule in rules:
        rule_hits: dict[str, list[tuple[int, int]]] = {}
        for start, end, phrase in rule.find(text):
            rule_hits.setdefault(phrase, []).append((start, end))

        for phrase in sorted(rule_hits, key=lambda p: min(s for s, _ in rule_hits[p])):
            key = (rule.category.value, phrase)
            entry = found.get(key)
            if entry is None:
                entry = found[key] = {
                    "starts": set(),
                    "spans": [],
                    "weight": rule.weight,
                    "description": rule.description,
                }
            for start, end in rule_hits[phrase]:
                if start in entry["starts"]:
                    continue
                entry["starts"].add(start)
                entry["spans"].append((start, end))
            entry["weight"] = max(entry["weight"], rule.weight)

    matches = []
    for (category, phrase), entry in found.items():
        count = len(entry["spans"])
        matches.append(PatternMatch(
            category=category,
            phrase=phrase,
            count=count,
            score=score_for(count, entry["weight"]),
            description=entry["description"],
            detector=detector,
            spans=tuple(sorted(entry["spans"])),
        ))
    return tuple(matches)


def describe_rules(rules: Iterable[PatternRule], detector: str) -> list[dict]:
    """Catalog listing for the GET /patterns endpoint."""
    return [
        {
            "id": r.id,
            "detector": detector,
            "category": r.category.value,
            "description": r.description,
            "kind": r.kind,
            "weight": r.weight,
        }
        for r in rules
    ]
