"""
Stylistic Marker Detector

Stock phrasing that shows up far more often in generated prose than in
human writing: signature vocabulary, travel-brochure promotion, didactic
asides, section-closing summaries, "despite challenges" framing,
negative parallelisms and stacked "X, Y, and Z" triads. Weighted lower
than the attribution and emphasis detectors since each marker is common
in ordinary prose too.
"""

from __future__ import annotations

from slopsense.matcher import Category, PatternMatch, PatternRule, match_catalog

DETECTOR_NAME = "stylistic-markers"

# Stock adjectives and base verbs that models like to stack in threes
TRIAD_ADJECTIVES = (
    "innovative", "strategic", "comprehensive", "transformative", "bold",
    "ambitious", "cutting-edge", "integrated", "groundbreaking", "revolutionary",
    "dynamic", "agile", "scalable", "robust", "sophisticated", "elegant",
    "efficient", "effective", "powerful", "remarkable", "significant",
    "substantial", "compelling", "impressive", "exceptional", "unique",
    "advanced", "modern", "reliable", "meaningful", "pivotal", "critical",
    "essential", "fundamental", "vital", "crucial", "impactful", "sustainable",
)
TRIAD_VERBS = (
    "analyze", "interpret", "synthesize", "innovate", "implement", "develop",
    "create", "design", "build", "enhance", "improve", "optimize", "achieve",
    "deliver", "empower", "ensure", "explore", "examine", "assess", "evaluate",
    "understand", "address", "solve", "streamline", "accelerate", "strengthen",
    "integrate", "connect", "align", "evolve", "adapt", "inspire", "engage",
)


def _triad(words: str, last_joiner: str) -> str:
    return rf"(?:{words})\s*,\s*(?:{words}){last_joiner}(?:{words})"


_ADJ = "|".join(TRIAD_ADJECTIVES)
_VERB = "|".join(TRIAD_VERBS)
_GERUND = r"[a-z]+ing"

RULES: tuple[PatternRule, ...] = (
    PatternRule(
        id="SM_AI_VOCABULARY",
        category=Category.AI_VOCABULARY,
        description="Vocabulary heavily over-represented in model output",
        phrases=(
            "delve", "delves", "delving", "tapestry", "intricate",
            "intricacies", "embodies", "paramount", "harness", "paradigm",
            "seamless", "seamlessly", "holistic", "synergy", "elucidate",
            "multifaceted", "showcasing", "crucial juncture", "navigate the complexities",
            "ever-evolving", "realm",
        ),
        weight=0.6,
    ),
    PatternRule(
        id="SM_PROMOTIONAL",
        category=Category.PROMOTIONAL_LANGUAGE,
        description="Promotional, brochure-style description",
        phrases=(
            "nestled in", "nestled within", "boasts", "stunning", "breathtaking",
            "enchanting", "picturesque", "awe-inspiring", "captivating",
            "mesmerizing", "vibrant", "rich cultural heritage",
        ),
        weight=0.6,
    ),
    PatternRule(
        id="SM_DIDACTIC",
        category=Category.DIDACTIC_DISCLAIMER,
        description="Didactic aside telling the reader what matters",
        phrases=(
            "it is important to note", "it's important to note",
            "it should be noted", "it is worth noting", "it's worth noting",
            "as mentioned earlier", "as discussed", "as we have seen",
            "as shown above",
        ),
        weight=0.6,
    ),
    PatternRule(
        id="SM_SECTION_SUMMARY",
        category=Category.SECTION_SUMMARY,
        description="Formulaic summary or conclusion opener",
        phrases=(
            "in conclusion", "in summary", "to summarize", "in essence",
            "to conclude", "in closing", "all in all",
        ),
        weight=0.6,
    ),
    PatternRule(
        id="SM_CHALLENGES",
        category=Category.CHALLENGE_PATTERN,
        description='Formulaic "despite challenges" framing',
        regex=(
            r"(?:despite|in\s+spite\s+of)\s+(?:these\s+|the\s+|its\s+|their\s+|many\s+)?"
            r"(?:challenges|obstacles|difficulties|setbacks)|"
            r"overcoming\s+(?:these\s+)?(?:challenges|obstacles)"
        ),
        weight=0.6,
    ),
    PatternRule(
        id="SM_NEGATIVE_PARALLELISM",
        category=Category.NEGATIVE_PARALLELISM,
        description='"Not just X, but Y" construction',
        regex=(
            r"not\s+(?:just|only|merely)\b[^.!?]{0,80}?\bbut(?:\s+also)?|"
            r"it'?s\s+not\s+about\b[^.!?]{0,80}?\bit'?s\s+about"
        ),
        canonical="not just ... but",
        weight=0.6,
    ),
    PatternRule(
        id="SM_RULE_OF_THREE",
        category=Category.RULE_OF_THREE,
        description="Stacked triad of stock adjectives, verbs or gerunds (X, Y, and Z)",
        regex=(
            _triad(_ADJ, r"(?:\s*,)?\s+and\s+") + "|"
            + _triad(_VERB, r"\s*,\s*and\s+") + "|"
            + _triad(_GERUND, r"\s*,\s*and\s+")
        ),
        canonical="x, y, and z",
        weight=0.4,
    ),
)


def detect_stylistic_markers(text: str) -> tuple[PatternMatch, ...]:
    """Stock-phrasing matches for text."""
    return match_catalog(text, RULES, detector=DETECTOR_NAME)
