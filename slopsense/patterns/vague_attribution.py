"""
Vague Attribution Detector (weasel wording)

Flags claims that borrow authority without naming it: "experts suggest",
"studies show", "it is believed". Consensus and agreement phrasing is
reported separately as overgeneralization.

A specifically named source ("according to John Smith in his 2023 book")
and plain passive voice ("the bridge was built in 1923") are not flagged.
"has been shown" is, since it names nobody.
"""

from __future__ import annotations

from slopsense.matcher import Category, PatternMatch, PatternRule, match_catalog

DETECTOR_NAME = "vague-attribution"

_ROLES = (
    r"(?:scholars|experts|analysts|critics|observers|researchers|"
    r"commentators|historians|scientists|economists|officials)"
)
_REPORT_VERBS = (
    r"(?:believe|argue|suggest|say|claim|contend|maintain|note|agree|assert)"
)

VAGUE_ATTRIBUTION_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        id="VA_UNNAMED_REPORTS",
        category=Category.VAGUE_ATTRIBUTION,
        description="Unnamed reports cited as a source",
        regex=(
            r"(?:industry\s+)?reports\s+(?:suggest|claim|indicate|show)s?|"
            r"industry\s+reports"
        ),
    ),
    PatternRule(
        id="VA_QUANTIFIER_BELIEF",
        category=Category.VAGUE_ATTRIBUTION,
        description='Vague "many" or "some" standing in for a source',
        regex=r"(?:many|some|most)\s+(?:people\s+)?(?:believe|argue|suggest|think|feel)",
    ),
    PatternRule(
        id="VA_IMPERSONAL_PASSIVE",
        category=Category.VAGUE_ATTRIBUTION,
        description="Passive belief or saying with no one doing the believing",
        regex=(
            r"(?:it\s+)?(?:is|are)\s+(?:often\s+|widely\s+|generally\s+|"
            r"commonly\s+|sometimes\s+)?(?:said|believed|considered|thought)"
        ),
    ),
    PatternRule(
        id="VA_ROLE_REPORT",
        category=Category.VAGUE_ATTRIBUTION,
        description="Unnamed group of experts or critics cited as authority",
        regex=(
            rf"{_ROLES}\s+{_REPORT_VERBS}|"
            rf"{_ROLES}\s+have\s+(?:cited|noted|said|argued|suggested|claimed)"
        ),
    ),
    PatternRule(
        id="VA_UNSPECIFIED_RESEARCH",
        category=Category.VAGUE_ATTRIBUTION,
        description="Research or studies cited without saying which",
        regex=(
            r"(?:research|studies|evidence)\s+"
            r"(?:indicates?|shows?|suggests?|demonstrates?|proves?)"
        ),
    ),
    PatternRule(
        id="VA_UNATTRIBUTED_DEMONSTRATION",
        category=Category.VAGUE_ATTRIBUTION,
        description="Demonstrated or cited, but by no one in particular",
        regex=r"(?:has|have)\s+been\s+(?:shown|cited|demonstrated|suggested)",
    ),
    PatternRule(
        id="VA_DESCRIBED_AS",
        category=Category.VAGUE_ATTRIBUTION,
        description="Passive description that hides who is describing",
        regex=(
            r"(?:is|are|was|were|has\s+been|have\s+been)\s+described\s+(?:as|in)"
        ),
    ),
    PatternRule(
        id="VA_ANONYMOUS_SOURCES",
        category=Category.VAGUE_ATTRIBUTION,
        description='Anonymous "sources" as attribution',
        regex=r"(?:some\s+)?sources\s+(?:say|said|claim|suggest)",
    ),
)

OVERGENERALIZATION_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        id="OG_CLAIMED_CONSENSUS",
        category=Category.OVERGENERALIZATION,
        description="Consensus claimed without evidence",
        regex=r"(?:the\s+)?(?:academic|general|scientific|scholarly|broad)\s+consensus",
    ),
    PatternRule(
        id="OG_WIDESPREAD_AGREEMENT",
        category=Category.OVERGENERALIZATION,
        description="Overgeneralized agreement claim",
        phrases=("widespread agreement", "general agreement"),
    ),
    PatternRule(
        id="OG_SWEEPING_MAJORITY",
        category=Category.OVERGENERALIZATION,
        description="Sweeping generalization about a profession",
        regex=r"most\s+(?:scholars|experts|historians|researchers|scientists|analysts)",
    ),
    PatternRule(
        id="OG_GENERAL_VIEW",
        category=Category.OVERGENERALIZATION,
        description="General agreement asserted without citation",
        phrases=("the general view", "the prevailing view"),
    ),
    PatternRule(
        id="OG_CLAIMED_COMMONALITY",
        category=Category.OVERGENERALIZATION,
        description="Claimed commonality or wide acceptance",
        regex=(
            r"commonly\s+(?:argued|accepted|held)|"
            r"widely\s+(?:accepted|held|regarded)|"
            r"universally\s+(?:acknowledged|accepted)"
        ),
    ),
)

RULES: tuple[PatternRule, ...] = VAGUE_ATTRIBUTION_RULES + OVERGENERALIZATION_RULES


def detect_vague_attributions(text: str) -> tuple[PatternMatch, ...]:
    """Vague-authority and overgeneralization matches for text."""
    return match_catalog(text, RULES, detector=DETECTOR_NAME)
