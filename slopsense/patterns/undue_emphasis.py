"""
Undue Emphasis Detector

Two families surfaced under one detector:
  - symbolism:      grandiose legacy and importance framing
                    ("stands as a testament to", "plays a vital role")
  - media-coverage: inflated notability
                    ("national media outlets", "written by a leading expert")

Category tags contain "symbolism" or "media" so callers can split the
families apart.
"""

from __future__ import annotations

from slopsense.matcher import Category, PatternMatch, PatternRule, match_catalog

DETECTOR_NAME = "undue-emphasis"

_DEMONYMS = (
    "american", "australian", "brazilian", "british", "canadian", "chinese",
    "dutch", "egyptian", "english", "french", "german", "indian", "irish",
    "israeli", "italian", "japanese", "kenyan", "korean", "mexican",
    "nigerian", "polish", "russian", "scottish", "south african", "spanish",
    "swedish", "turkish", "ukrainian",
)

SYMBOLISM_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        id="UE_STANDS_AS",
        category=Category.SYMBOLISM,
        description="Artificial symbolism attribution",
        phrases=("stands as",),
    ),
    PatternRule(
        id="UE_SERVES_AS",
        category=Category.SYMBOLISM,
        description="Superficial symbolic meaning",
        phrases=("serves as",),
    ),
    PatternRule(
        id="UE_TESTAMENT",
        category=Category.SYMBOLISM,
        description="Overemphasis on legacy",
        regex=r"(?:is\s+)?a\s+testament\s+to",
        canonical="is a testament to",
    ),
    PatternRule(
        id="UE_REMINDER",
        category=Category.SYMBOLISM,
        description="Artificial elevation of importance",
        regex=r"(?:is\s+)?a\s+reminder\s+of",
        canonical="is a reminder of",
    ),
    PatternRule(
        id="UE_PLAYS_A_ROLE",
        category=Category.SYMBOLISM,
        description="Inflated importance claim",
        regex=(
            r"play(?:s|ed|ing)?\s+an?\s+"
            r"(?:vital|significant|crucial|pivotal|key|central|critical)\s+role"
        ),
    ),
    PatternRule(
        id="UE_UNDERSCORES_IMPORTANCE",
        category=Category.SYMBOLISM,
        description="Superficial emphasis of importance",
        regex=r"underscor(?:es|ed|ing)\s+(?:its|the|their|his|her)\s+(?:importance|significance)",
    ),
    PatternRule(
        id="UE_HIGHLIGHTS_SIGNIFICANCE",
        category=Category.SYMBOLISM,
        description="Artificial highlighting of significance",
        regex=r"highlight(?:s|ed|ing)\s+(?:its|the|their|his|her)\s+(?:significance|importance)",
    ),
    PatternRule(
        id="UE_IMPACTFUL",
        category=Category.SYMBOLISM,
        description="Vague impact assertion",
        phrases=("impactful",),
    ),
    PatternRule(
        id="UE_SOCIAL_COHESION",
        category=Category.SYMBOLISM,
        description="Overreaching social significance",
        phrases=("important to social cohesion", "vital to social cohesion"),
    ),
    PatternRule(
        id="UE_REFLECTS_BROADER",
        category=Category.SYMBOLISM,
        description="Unsupported generalization",
        regex=r"reflect(?:s|ed|ing)?\s+(?:a\s+)?broader",
    ),
    PatternRule(
        id="UE_SYMBOLIZES_IMPACT",
        category=Category.SYMBOLISM,
        description="Artificial symbolism of lasting impact",
        regex=r"symboli[sz](?:es|ed|ing|e)\s+(?:its|their|the)\s+(?:ongoing|enduring|lasting)\s+impact",
        canonical="symbolizes its enduring impact",
    ),
    PatternRule(
        id="UE_TURNING_POINT",
        category=Category.SYMBOLISM,
        description="Inflated historical importance",
        phrases=("key turning point", "pivotal turning point", "pivotal moment"),
    ),
    PatternRule(
        id="UE_PROMOTES_COLLABORATION",
        category=Category.SYMBOLISM,
        description="Unsupported positive attribution",
        regex=r"promot(?:es|ed|ing)\s+collaboration",
    ),
    PatternRule(
        id="UE_INDELIBLE_MARK",
        category=Category.SYMBOLISM,
        description="Exaggerated lasting impact",
        phrases=("indelible mark",),
    ),
    PatternRule(
        id="UE_DEEPLY_ROOTED",
        category=Category.SYMBOLISM,
        description="Unsupported depth claim",
        phrases=("deeply rooted", "deeply ingrained"),
    ),
    PatternRule(
        id="UE_PROFOUND",
        category=Category.SYMBOLISM,
        description="Unsubstantiated profundity",
        phrases=("profound",),
    ),
    PatternRule(
        id="UE_REVOLUTIONARY",
        category=Category.SYMBOLISM,
        description="Inflated scope of change",
        phrases=("revolutionary",),
    ),
    PatternRule(
        id="UE_REINFORCES",
        category=Category.SYMBOLISM,
        description="Overstated causal relationship",
        phrases=("reinforces",),
    ),
    PatternRule(
        id="UE_HEALTHY_RELATIONSHIP",
        category=Category.SYMBOLISM,
        description="Vague positive attribution",
        regex=r"healthy\s+relationships?",
        canonical="healthy relationship",
    ),
    PatternRule(
        id="UE_STEADFAST_DEDICATION",
        category=Category.SYMBOLISM,
        description="Flowery personal attribution",
        phrases=("steadfast dedication", "steadfast commitment"),
    ),
)

MEDIA_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        id="UE_INDEPENDENT_COVERAGE",
        category=Category.MEDIA_COVERAGE,
        description="Overemphasis on media attention",
        phrases=("independent coverage",),
    ),
    PatternRule(
        id="UE_SCOPED_MEDIA",
        category=Category.MEDIA_COVERAGE,
        description="Emphasis on the reach of media coverage",
        regex=(
            r"(?:local|regional|national|international)\s+media(?:\s+outlets)?|"
            r"(?:" + "|".join(d.replace(" ", r"\s+") for d in _DEMONYMS) + r")"
            r"\s+media\s+outlets|"
            # a capitalized country or proper adjective ("Ghanaian", "Kenya")
            r"(?!(?:The|These|Those|Some|Many|All|Most|Several)\s)(?-i:[A-Z][a-z]+)"
            r"\s+media\s+outlets|"
            r"media\s+outlets"
        ),
    ),
    PatternRule(
        id="UE_INDUSTRY_OUTLETS",
        category=Category.MEDIA_COVERAGE,
        description="Emphasis on industry coverage",
        regex=r"(?:music|business|tech|technology|fashion|sports|trade|industry)\s+outlets",
    ),
    PatternRule(
        id="UE_LEADING_EXPERT",
        category=Category.MEDIA_COVERAGE,
        description="Attribution to an undefined authority",
        regex=r"(?:written\s+by\s+)?an?\s+leading\s+experts?",
        canonical="leading expert",
    ),
    PatternRule(
        id="UE_SOCIAL_MEDIA_PRESENCE",
        category=Category.MEDIA_COVERAGE,
        description="Emphasis on social media activity",
        phrases=("active social media presence", "strong social media presence"),
    ),
)

RULES: tuple[PatternRule, ...] = SYMBOLISM_RULES + MEDIA_RULES


def detect_undue_emphasis(text: str) -> tuple[PatternMatch, ...]:
    """Symbolism and media-coverage matches for text."""
    return match_catalog(text, RULES, detector=DETECTOR_NAME)
