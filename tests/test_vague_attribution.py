"""
Tests for the vague attribution detector (weasel wording and
overgeneralization).
"""

from slopsense.patterns.vague_attribution import detect_vague_attributions


def _phrases(text, category=None):
    return [
        m.phrase for m in detect_vague_attributions(text)
        if category is None or m.category == category
    ]


class TestVagueAttribution:
    def test_unnamed_reports(self):
        phrases = _phrases("Industry reports suggest the market is growing.")
        assert any("reports" in p for p in phrases)

    def test_quantifier_belief(self):
        assert "many believe" in _phrases("Many believe the plan will work.")

    def test_impersonal_passive(self):
        assert "it is widely believed" in _phrases(
            "It is widely believed that the war was inevitable."
        )

    def test_role_report(self):
        assert "scholars argue" in _phrases("Scholars argue the text is a forgery.")

    def test_observers_have_cited(self):
        assert "observers have cited" in _phrases(
            "Observers have cited the festival as a cultural landmark."
        )

    def test_unspecified_research(self):
        (match,) = [
            m for m in detect_vague_attributions(
                "Studies show it helps. Studies show it lasts."
            )
            if m.phrase == "studies show"
        ]
        assert match.count == 2

    def test_has_been_shown(self):
        assert "has been shown" in _phrases("It has been shown to reduce stress.")

    def test_described_as(self):
        assert "is described as" in _phrases("The region is described as idyllic.")

    def test_anonymous_sources(self):
        assert "sources say" in _phrases("Sources say the deal is off.")

    def test_category_and_detector_tag(self):
        matches = detect_vague_attributions("Experts suggest caution.")
        assert matches
        for m in matches:
            assert m.category == "vague-attribution"
            assert m.detector == "vague-attribution"


class TestOvergeneralization:
    def test_consensus(self):
        assert "the scientific consensus" in _phrases(
            "The scientific consensus is clear.", "overgeneralization"
        )

    def test_widespread_agreement(self):
        assert "widespread agreement" in _phrases(
            "There is widespread agreement on this.", "overgeneralization"
        )

    def test_sweeping_majority(self):
        assert "most historians" in _phrases(
            "Most historians agree the treaty failed.", "overgeneralization"
        )

    def test_universally_acknowledged(self):
        assert "universally acknowledged" in _phrases(
            "It is a truth universally acknowledged.", "overgeneralization"
        )

    def test_widely_regarded(self):
        assert "widely regarded" in _phrases(
            "The album is widely regarded as a classic.", "overgeneralization"
        )


class TestNegatives:
    def test_named_source_not_flagged(self):
        assert detect_vague_attributions(
            "According to John Smith in his 2023 book, the merger failed."
        ) == ()

    def test_plain_passive_not_flagged(self):
        assert detect_vague_attributions("The bridge was built in 1923.") == ()

    def test_clean_text(self):
        assert detect_vague_attributions("The cat sat on the mat.") == ()
        assert detect_vague_attributions("The weather is sunny today.") == ()

    def test_empty(self):
        assert detect_vague_attributions("") == ()
