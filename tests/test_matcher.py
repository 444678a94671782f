"""
Tests for the phrase pattern matcher — the primitive every detector
is built on. If counting or word boundaries are wrong here, every
detector is wrong with them.
"""

import pytest

from slopsense.matcher import (
    Category,
    PatternMatch,
    PatternRule,
    describe_rules,
    match_catalog,
    normalize_phrase,
    score_for,
)


def _rule(id="T", category=Category.WATCH_WORD, **kw):
    return PatternRule(id=id, category=category, description="test rule", **kw)


class TestRuleConstruction:
    def test_exactly_one_variant_required(self):
        with pytest.raises(ValueError):
            _rule()
        with pytest.raises(ValueError):
            _rule(phrases=("a",), regex="b")

    def test_weight_must_be_positive(self):
        with pytest.raises(ValueError):
            _rule(phrases=("a",), weight=0)

    def test_kind(self):
        assert _rule(phrases=("a",)).kind == "phrases"
        assert _rule(regex="a").kind == "regex"
        assert _rule(predicate=lambda text: iter(())).kind == "predicate"

    def test_rules_are_frozen(self):
        rule = _rule(phrases=("a",))
        with pytest.raises(AttributeError):
            rule.weight = 2.0


class TestWordBoundaries:
    """Matches are whole tokens, never substrings."""

    def test_ensuring_does_not_match_ensuing(self):
        rules = (_rule(phrases=("ensuring",)),)
        assert match_catalog("The ensuing chaos.", rules) == ()

    def test_no_match_inside_longer_word(self):
        rules = (_rule(phrases=("profound",)),)
        assert match_catalog("Profoundly moving.", rules) == ()

    def test_case_insensitive(self):
        rules = (_rule(phrases=("stands as",)),)
        (match,) = match_catalog("It STANDS AS a monument.", rules)
        assert match.phrase == "stands as"

    def test_flexible_whitespace(self):
        rules = (_rule(phrases=("stands as",)),)
        (match,) = match_catalog("It stands\n   as a monument.", rules)
        assert match.phrase == "stands as"


class TestCounting:
    def test_counts_every_occurrence(self):
        rules = (_rule(phrases=("serves as",)),)
        (match,) = match_catalog("It serves as a hub. It serves as a park.", rules)
        assert match.count == 2
        assert match.score == 20.0
        assert len(match.spans) == 2

    def test_no_occurrences_no_match(self):
        rules = (_rule(phrases=("serves as",)),)
        assert match_catalog("Nothing to see here.", rules) == ()

    def test_empty_and_blank_input(self):
        rules = (_rule(phrases=("serves as",)),)
        assert match_catalog("", rules) == ()
        assert match_catalog("   \n\t", rules) == ()

    def test_canonical_groups_family(self):
        rules = (_rule(regex=r"ensur(?:e|es|ed|ing)", canonical="ensuring"),)
        (match,) = match_catalog("Ensure it. She ensured it. Ensuring it.", rules)
        assert match.phrase == "ensuring"
        assert match.count == 3

    def test_same_offset_counted_once_across_rules(self):
        rules = (
            _rule(id="A", regex=r"many\s+believe", canonical="many believe"),
            _rule(id="B", phrases=("many believe",)),
        )
        (match,) = match_catalog("Many believe it.", rules)
        assert match.count == 1

    def test_categories_never_merged(self):
        rules = (
            _rule(id="A", category=Category.WATCH_WORD, phrases=("profound",)),
            _rule(id="B", category=Category.SYMBOLISM, phrases=("profound",)),
        )
        matches = match_catalog("A profound change.", rules)
        assert [m.category for m in matches] == ["watch-word", "symbolism"]

    def test_catalog_order_then_first_occurrence(self):
        rules = (
            _rule(id="A", phrases=("alpha",)),
            _rule(id="B", phrases=("beta", "gamma")),
        )
        matches = match_catalog("gamma beta alpha", rules)
        assert [m.phrase for m in matches] == ["alpha", "gamma", "beta"]

    def test_detector_tag_and_description(self):
        rules = (_rule(phrases=("alpha",)),)
        (match,) = match_catalog("alpha", rules, detector="unit")
        assert match.detector == "unit"
        assert match.description == "test rule"

    def test_predicate_rule(self):
        def every_x(text):
            for i, ch in enumerate(text):
                if ch == "x":
                    yield i, i + 1, "x"

        rules = (_rule(predicate=every_x),)
        (match,) = match_catalog("xax", rules)
        assert match.count == 2
        assert match.spans == ((0, 1), (2, 3))


class TestScoring:
    def test_score_grows_with_count_and_weight(self):
        assert score_for(1, 1.0) == 10.0
        assert score_for(2, 1.0) == 20.0
        assert score_for(1, 1.5) == 15.0

    def test_score_capped_at_100(self):
        assert score_for(50, 1.0) == 100.0

    def test_match_to_dict(self):
        m = PatternMatch(category="watch-word", phrase="ensuring", count=1,
                         score=10.0, spans=((3, 11),))
        d = m.to_dict()
        assert d["phrase"] == "ensuring"
        assert d["spans"] == [[3, 11]]


class TestHelpers:
    def test_normalize_phrase(self):
        assert normalize_phrase("  Stands \n As ") == "stands as"

    def test_describe_rules(self):
        rules = (_rule(id="R1", phrases=("a",), weight=0.5),)
        (entry,) = describe_rules(rules, "unit")
        assert entry == {
            "id": "R1",
            "detector": "unit",
            "category": "watch-word",
            "description": "test rule",
            "kind": "phrases",
            "weight": 0.5,
        }
