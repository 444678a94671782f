"""
Superficial Analysis Detector

Shallow-insight constructs that assert significance without evidence.
Four independent sub-categories; one sentence can trigger several:

  - participle-phrase:  trailing "-ing" clause asserting broad consequence
                        ("..., ensuring cleaner air for communities.")
  - watch-word:         hedge verbs and adjectives (ensuring, reflecting,
                        conducive to, fundamentally, ...)
  - vague-attribution:  hedge-verb attribution (many believe, sources say)
  - named-attribution:  a named person credited with a vague significance
                        claim ("Roger Ebert highlighted the lasting
                        influence of ...")

The vague-attribution rules here are this detector's own catalog. They
overlap in category name with the vague attribution detector and are
reported independently.
"""

from __future__ import annotations

import re
from typing import Iterator

from slopsense.matcher import (
    Category,
    Hit,
    PatternMatch,
    PatternRule,
    match_catalog,
)

DETECTOR_NAME = "superficial-analysis"


# ============================================================
# PARTICIPLE HEURISTIC
# ============================================================

# Participles that habitually open a trailing significance clause
PARTICIPLE_VERBS = frozenset({
    "advancing", "benefiting", "benefitting", "bolstering", "building",
    "contributing", "creating", "cultivating", "demonstrating", "driving",
    "empowering", "emphasizing", "emphasising", "enabling", "ensuring",
    "fostering", "highlighting", "laying", "marking", "paving", "promoting",
    "reflecting", "reinforcing", "revolutionizing", "setting", "shaping",
    "showcasing", "signaling", "signalling", "solidifying", "strengthening",
    "symbolizing", "transforming", "underscoring",
})

# "-ing" words that are never the head of a participial clause
NON_PARTICIPLES = frozenset({
    "according", "anything", "during", "everything", "evening", "including",
    "king", "morning", "nothing", "notwithstanding", "pending", "ring",
    "something", "spring", "string", "thing", "wedding", "wing",
})

# Object terms that carry a broad-significance claim on their own
SIGNIFICANCE_TERMS = re.compile(
    r"\b(?:future|legacy|progress|growth|society|societ(?:y|ies)|humanity|"
    r"generations?|world|nations?|communit(?:y|ies)|impact|influence|"
    r"significance|importance|trajectory|landscape|era|change|values|"
    r"understanding|prosperity|innovation|outcomes)\b",
    re.IGNORECASE,
)

_TRAILING_CLAUSE = re.compile(
    r",\s*(?P<verb>[A-Za-z]+ing)\b(?=(?P<object>[^;:.!?\n]*)[.!?])",
    re.IGNORECASE,
)


def is_trailing_participle_clause(verb: str, obj: str) -> bool:
    """
    Decide whether ", <verb> <obj>." reads as a significance-asserting
    participial clause rather than an ordinary gerund or noun.

    The clause must carry an object of at least one word. A verb from
    PARTICIPLE_VERBS qualifies on its own; any other "-ing" word needs a
    significance term in its object.
    """
    verb = verb.lower()
    if verb in NON_PARTICIPLES:
        return False
    obj = obj.strip()
    if len(obj) <= 2 or not re.search(r"[A-Za-z]{2,}", obj):
        return False
    if verb in PARTICIPLE_VERBS:
        return True
    return bool(SIGNIFICANCE_TERMS.search(obj))


def trailing_participle_clauses(text: str) -> Iterator[Hit]:
    """Yield one hit per clause-final participial phrase, keyed by its participle."""
    for m in _TRAILING_CLAUSE.finditer(text):
        if is_trailing_participle_clause(m.group("verb"), m.group("object")):
            yield m.start("verb"), m.end("object"), m.group("verb").lower()


# ============================================================
# NAMED ATTRIBUTION HEURISTIC
# ============================================================

# Well-known surnames that are credible as a single-token attribution
KNOWN_NAMES = (
    "Aristotle", "Beethoven", "Churchill", "Confucius", "Curie", "Darwin",
    "Edison", "Einstein", "Freud", "Galileo", "Gandhi", "Hawking", "Jung",
    "Kant", "Lincoln", "Marx", "Mozart", "Newton", "Nietzsche", "Picasso",
    "Plato", "Shakespeare", "Socrates", "Tesla",
)

# Capitalized tokens that open sentences but never name a person
_NOT_NAMES = frozenset({
    "a", "an", "analysts", "critics", "experts", "her", "his", "in", "it",
    "many", "most", "observers", "our", "reports", "research", "scholars",
    "several", "some", "sources", "studies", "that", "the", "their", "these",
    "this", "those", "we",
})

# Sentence openers dropped from the front of a capitalized span
_OPENERS = frozenset({
    "after", "also", "as", "before", "later", "meanwhile", "then", "today",
    "when", "while", "yesterday",
})

_REPORTING_VERBS = (
    r"highlighted|noted|emphasi[sz]ed|suggested|showed|argued|observed|"
    r"stressed|explained|claimed|asserted|revealed|demonstrated|pointed\s+out|"
    r"remarked|underscored"
)

_NAME_TOKEN = r"[A-Z][a-z]+(?:[-'][A-Z][a-z]+)?"

_NAMED_SOURCE = re.compile(
    rf"\b(?P<name>{_NAME_TOKEN}(?:\s+[A-Z]\.)?(?:\s+{_NAME_TOKEN})+|"
    rf"(?:{'|'.join(KNOWN_NAMES)}))"
    rf"\s+(?P<verb>{_REPORTING_VERBS})\b(?=(?P<claim>[^.!?]*))",
)

SIGNIFICANCE_CLAIM = re.compile(
    r"\b(?:profound|lasting|enduring|fundamental(?:ly)?|interconnected|"
    r"timeless|transformative|influence|impact|significance|importance|"
    r"legacy|truths?|essence|broader|pivotal|crucial|shape[sd]?|shaping|"
    r"universal|deeper)\b",
    re.IGNORECASE,
)


def named_attributions(text: str) -> Iterator[Hit]:
    """
    Yield a hit for each named person followed by a reporting verb and a
    vague significance claim in the same sentence.

    The name is a span of two or more capitalized tokens, or a single
    well-known surname. Matching is case-sensitive for the name so
    "many believe" never reads as a person.
    """
    for m in _NAMED_SOURCE.finditer(text):
        tokens = m.group("name").split()
        # "Then Roger Ebert" -> "Roger Ebert"
        while tokens and tokens[0].lower() in _NOT_NAMES | _OPENERS:
            tokens.pop(0)
        if not tokens or any(t.lower() in _NOT_NAMES for t in tokens):
            continue
        if len(tokens) < 2 and tokens[0] not in KNOWN_NAMES:
            continue
        if not SIGNIFICANCE_CLAIM.search(m.group("claim")):
            continue
        name = " ".join(tokens)
        start = m.start("name") + m.group("name").find(tokens[0])
        verb = " ".join(m.group("verb").lower().split())
        yield start, m.end("verb"), f"{name.lower()} {verb}"


# ============================================================
# RULE CATALOG
# ============================================================

WATCH_WORD_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        id="SA_ENSURING",
        category=Category.WATCH_WORD,
        description="Artificial certainty about consequences",
        regex=r"ensur(?:e|es|ed|ing)",
        canonical="ensuring",
    ),
    PatternRule(
        id="SA_REFLECTING",
        category=Category.WATCH_WORD,
        description="Vague significance attribution",
        regex=r"reflect(?:s|ed|ing)?",
        canonical="reflecting",
    ),
    PatternRule(
        id="SA_CONDUCIVE",
        category=Category.WATCH_WORD,
        description="Unsupported consequence claim",
        phrases=("conducive to",),
    ),
    PatternRule(
        id="SA_TANTAMOUNT",
        category=Category.WATCH_WORD,
        description="Exaggerated equivalence claim",
        phrases=("tantamount to",),
    ),
    PatternRule(
        id="SA_CONTRIBUTING",
        category=Category.WATCH_WORD,
        description="Unsupported causal claim",
        regex=r"contribut(?:e|es|ed|ing)\s+to",
        canonical="contributing to",
    ),
    PatternRule(
        id="SA_CULTIVATING",
        category=Category.WATCH_WORD,
        description="Figurative transformation without basis",
        regex=r"cultivat(?:e|es|ed|ing)",
        canonical="cultivating",
    ),
    PatternRule(
        id="SA_ENCOMPASSING",
        category=Category.WATCH_WORD,
        description="Vague scope claim",
        regex=r"encompass(?:es|ed|ing)?",
        canonical="encompassing",
    ),
    PatternRule(
        id="SA_ESSENTIALLY",
        category=Category.WATCH_WORD,
        description="Superficial essence claim",
        phrases=("essentially",),
    ),
    PatternRule(
        id="SA_FUNDAMENTALLY",
        category=Category.WATCH_WORD,
        description="Unsubstantiated fundamental claim",
        phrases=("fundamentally",),
    ),
    PatternRule(
        id="SA_VALUABLE_INSIGHTS",
        category=Category.WATCH_WORD,
        description="Vague positive attribution to research",
        regex=r"valuable\s+insights?",
        canonical="valuable insights",
    ),
)

ATTRIBUTION_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        id="SA_HEDGED_ATTRIBUTION",
        category=Category.VAGUE_ATTRIBUTION,
        description="Claim attributed to an undefined group",
        phrases=(
            "many believe", "some argue", "observers note", "observers say",
            "experts suggest", "it is often said", "sources say",
            "critics argue", "analysts believe", "commentators point out",
            "many observe", "some say", "many argue",
        ),
    ),
    PatternRule(
        id="SA_ACCORDING_TO_GROUP",
        category=Category.VAGUE_ATTRIBUTION,
        description="Source given as an unnamed group",
        regex=(
            r"according\s+to\s+(?:some\s+|many\s+|most\s+)?"
            r"(?:historians|experts|scholars|analysts|critics|observers|"
            r"sources|researchers|studies|commentators)"
        ),
    ),
)

STRUCTURAL_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        id="SA_TRAILING_PARTICIPLE",
        category=Category.PARTICIPLE_PHRASE,
        description="Trailing participial clause asserting unearned significance",
        predicate=trailing_participle_clauses,
        weight=1.2,
    ),
    PatternRule(
        id="SA_NAMED_ATTRIBUTION",
        category=Category.NAMED_ATTRIBUTION,
        description="Named person credited with a vague significance claim",
        predicate=named_attributions,
        weight=1.5,
    ),
)

RULES: tuple[PatternRule, ...] = (
    STRUCTURAL_RULES[:1] + WATCH_WORD_RULES + ATTRIBUTION_RULES + STRUCTURAL_RULES[1:]
)


def detect_superficial_analysis(text: str) -> tuple[PatternMatch, ...]:
    """Participle, watch-word, vague and named attribution matches for text."""
    return match_catalog(text, RULES, detector=DETECTOR_NAME)
