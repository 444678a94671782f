"""
Tests for the linguistic factor scorer.
"""

import pytest

from slopsense.factors import (
    Factors,
    compute_factors,
    score_formal_tone,
    score_repetition,
    score_sentence_variety,
    score_structure,
    score_vocabulary,
    sentences,
)


class TestTokenization:
    def test_sentences_split_on_terminators(self):
        assert sentences("One here. Two there! Three?") == ["One here.", "Two there!", "Three?"]

    def test_punctuation_only_fragments_dropped(self):
        assert sentences("... !!") == []

    def test_abbreviations_do_not_split(self):
        text = ("Dr. Smith arrived at noon today. Mr. Jones left the office early. "
                "Ms. Brown stayed until late.")
        assert len(sentences(text)) == 3

    def test_blank_line_ends_sentence(self):
        assert sentences("A heading without a stop\n\nBody text follows here.") == [
            "A heading without a stop", "Body text follows here.",
        ]


class TestRepetition:
    def test_no_repetition(self):
        assert score_repetition("alpha beta gamma delta") == 0.0

    def test_heavy_repetition_clamped(self):
        assert score_repetition("word word word word word") == 100.0

    def test_repeated_trigram(self):
        # one trigram seen twice: 5 points over 8 long words
        text = "quick brown foxes jump; quick brown foxes sleep"
        assert score_repetition(text) == pytest.approx(62.5)

    def test_no_long_words(self):
        assert score_repetition("a an the of") == 0.0


class TestFormalTone:
    def test_connectives_and_passive(self):
        text = "However, the results were analyzed. Furthermore, we proceed."
        assert score_formal_tone(text) == 30.0

    def test_casual_text(self):
        assert score_formal_tone("We went out. It was fun.") == 0.0


class TestSentenceVariety:
    def test_uniform_sentences_score_high(self):
        assert score_sentence_variety("The cat sat down. The dog ran off. The bird flew up.") == 100.0

    def test_varied_sentences_score_low(self):
        text = ("Stop. This sentence, by contrast, rambles on for a great many "
                "words before it finally reaches its distant end.")
        assert score_sentence_variety(text) == 0.0

    def test_honorifics_keep_uniform_sentences_uniform(self):
        # word counts 6, 6, 5
        text = ("Dr. Smith arrived at noon today. Mr. Jones left the office early. "
                "Ms. Brown stayed until late.")
        assert score_sentence_variety(text) > 85.0

    def test_single_sentence(self):
        assert score_sentence_variety("Just one sentence here.") == 0.0


class TestVocabulary:
    def test_diverse(self):
        assert score_vocabulary("one two three four five") == 20.0

    def test_repetitive(self):
        assert score_vocabulary("the the the the") == 85.0

    def test_empty(self):
        assert score_vocabulary("") == 0.0


class TestStructure:
    def test_repeated_openers(self):
        assert score_structure("The cat sat. The dog ran. The bird flew.") == 20.0

    def test_list_heavy(self):
        text = "\n".join(f"- item {i}" for i in range(6))
        assert score_structure(text) == 20.0

    def test_uniform_paragraphs(self):
        text = "\n\n".join(["Alpha beta gamma delta."] * 4)
        # uniform paragraphs (60) plus every sentence opening with "alpha" (20)
        assert score_structure(text) == 80.0

    def test_short_text(self):
        assert score_structure("Hello there.") == 0.0


class TestComputeFactors:
    def test_empty_is_all_zero(self):
        assert compute_factors("") == Factors()
        assert compute_factors("  \n ") == Factors()

    def test_bounds(self):
        text = ("Furthermore, it is important to note that the framework is utilized. "
                "Moreover, the framework is optimized. Therefore, the framework is implemented.\n\n"
                "- one\n- two\n- three\n- four\n- five\n- six\n")
        for value in compute_factors(text).values():
            assert 0.0 <= value <= 100.0

    def test_to_dict(self):
        d = Factors(repetition=1.0).to_dict()
        assert set(d) == {"repetition", "formal_tone", "sentence_variety",
                          "vocabulary", "structure"}
        assert d["repetition"] == 1.0
