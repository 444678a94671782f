"""
Linguistic Factor Scorer

Five holistic 0-100 measures computed from raw text, independent of the
phrase catalogs:

  repetition        repeated words and word trigrams per word
  formal_tone       formal connectives and register markers per sentence
  sentence_variety  inverted coefficient of variation of sentence lengths
                    (uniform lengths score HIGH; displayed as "Low = AI")
  vocabulary        inverted type-token ratio, banded
  structure         paragraph uniformity, list density, repeated openers

Every factor falls back to 0 when there is not enough text to measure.
"""

from __future__ import annotations

import math
import re
from collections import Counter
from dataclasses import dataclass

import nltk

_WORD = re.compile(r"[a-z0-9]+(?:['’][a-z0-9]+)*")
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_LIST_ITEM = re.compile(r"^[ \t]*(?:[-*•]|\d+[.):])[ \t]+", re.MULTILINE)

PUNKT_RESOURCE = "tokenizers/punkt_tab/english/"

# --- repetition ---
REPEAT_FREE_OCCURRENCES = 3
REPEAT_POINTS = 5
MIN_REPEAT_WORD_LEN = 4

# --- formal tone ---
FORMAL_POINTS_PER_SENTENCE = 20
FORMAL_PATTERNS = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"\b(?:furthermore|moreover|therefore|however|consequently|thus|hence|"
    r"additionally|nevertheless|nonetheless)\b",
    r"\b(?:it is noteworthy|it is important to note|it should be noted|"
    r"it is worth noting)\b",
    r"\b(?:in conclusion|in summary|to summarize|as mentioned|"
    r"as previously stated)\b",
    r"\b(?:endeavou?r|utili[sz]e|facilitate|implement|leverage|optimi[sz]e)\b",
    r"\b(?:on the other hand|in contrast|similarly|likewise)\b",
    # passive constructions with a regular participle
    r"\b(?:is|are|was|were|been|being)\s+(?:\w+ly\s+)?\w+ed\b",
))

# --- sentence variety ---
MAX_VARIATION = 0.8

# --- vocabulary: (type-token ratio floor, score), first match wins ---
TTR_BANDS = ((0.6, 20.0), (0.5, 35.0), (0.4, 50.0), (0.3, 70.0))
TTR_FLOOR_SCORE = 85.0

# --- structure ---
MIN_PARAGRAPHS = 4
UNIFORM_PARAGRAPHS = ((0.2, 60.0), (0.4, 30.0))
LIST_ITEM_THRESHOLD = 5
LIST_POINTS = 20.0
OPENER_POINTS = 20.0
MIN_SENTENCES_FOR_OPENERS = 3


@dataclass(frozen=True)
class Factors:
    """The five factor scores, each in [0, 100]."""
    repetition: float = 0.0
    formal_tone: float = 0.0
    sentence_variety: float = 0.0
    vocabulary: float = 0.0
    structure: float = 0.0

    def values(self) -> tuple[float, ...]:
        return (self.repetition, self.formal_tone, self.sentence_variety,
                self.vocabulary, self.structure)

    def to_dict(self) -> dict:
        return {
            "repetition": self.repetition,
            "formal_tone": self.formal_tone,
            "sentence_variety": self.sentence_variety,
            "vocabulary": self.vocabulary,
            "structure": self.structure,
        }


# ============================================================
# TOKENIZATION
# ============================================================

def words(text: str) -> list[str]:
    return _WORD.findall(text.lower())


def ensure_punkt() -> None:
    """
    Download the `punkt_tab` model behind `nltk.sent_tokenize` unless it is
    already installed. Call once at startup; analysis never downloads.
    """
    try:
        nltk.data.find(PUNKT_RESOURCE)
    except LookupError:
        nltk.download("punkt_tab", quiet=True)


def sentences(text: str) -> list[str]:
    """
    Sentences per the NLTK punkt tokenizer, run paragraph by paragraph so a
    blank line always ends a sentence. Abbreviations such as "Dr." or "e.g."
    do not split. Punctuation-only fragments are dropped.
    """
    found = []
    for para in paragraphs(text):
        for sent in nltk.sent_tokenize(para, language="english"):
            if _WORD.search(sent.lower()):
                found.append(sent.strip())
    return found


def paragraphs(text: str) -> list[str]:
    return [p.strip() for p in _PARAGRAPH_BREAK.split(text) if p.strip()]


def _clamp(value: float) -> float:
    if math.isnan(value):
        return 0.0
    return round(max(0.0, min(100.0, value)), 1)


def _std_dev(values: list[float]) -> float:
    mean = sum(values) / len(values)
    return math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))


# ============================================================
# FACTORS
# ============================================================

def score_repetition(text: str) -> float:
    """
    Points for words (4+ characters) used more than three times and for
    word trigrams used more than once, per word of text.
    """
    tokens = words(text)
    long_words = [w for w in tokens if len(w) >= MIN_REPEAT_WORD_LEN]
    if not long_words:
        return 0.0

    points = 0
    for count in Counter(long_words).values():
        if count > REPEAT_FREE_OCCURRENCES:
            points += (count - REPEAT_FREE_OCCURRENCES) * REPEAT_POINTS

    trigrams = Counter(zip(tokens, tokens[1:], tokens[2:]))
    for gram, count in trigrams.items():
        # a single word repeated is already counted above
        if count > 1 and len(set(gram)) > 1:
            points += (count - 1) * REPEAT_POINTS

    return _clamp(points / len(long_words) * 100)


def score_formal_tone(text: str) -> float:
    """Formal register markers per sentence, 20 points per marker-per-sentence."""
    sentence_count = len(sentences(text))
    if sentence_count == 0:
        return 0.0
    formal_count = sum(len(p.findall(text)) for p in FORMAL_PATTERNS)
    return _clamp(formal_count / sentence_count * FORMAL_POINTS_PER_SENTENCE)


def score_sentence_variety(text: str) -> float:
    """
    Inverted coefficient of variation of sentence word counts. Uniform
    sentences score 100; a coefficient at or above MAX_VARIATION scores 0.
    Fewer than two sentences score 0.
    """
    lengths = [len(words(s)) for s in sentences(text)]
    if len(lengths) < 2:
        return 0.0
    mean = sum(lengths) / len(lengths)
    if mean == 0:
        return 0.0
    variation = _std_dev(lengths) / mean
    return _clamp(100 * (1 - variation / MAX_VARIATION))


def score_vocabulary(text: str) -> float:
    """Banded inverse of the type-token ratio; low diversity scores high."""
    tokens = words(text)
    if not tokens:
        return 0.0
    ratio = len(set(tokens)) / len(tokens)
    for floor, score in TTR_BANDS:
        if ratio > floor:
            return score
    return TTR_FLOOR_SCORE


def score_structure(text: str) -> float:
    """
    Regularity of layout: uniform paragraph lengths (four or more
    paragraphs), heavy list use, and sentences that keep opening with the
    same word.
    """
    score = 0.0

    paras = paragraphs(text)
    if len(paras) >= MIN_PARAGRAPHS:
        lengths = [len(p) for p in paras]
        mean = sum(lengths) / len(lengths)
        spread = _std_dev(lengths)
        for ratio, points in UNIFORM_PARAGRAPHS:
            if spread < mean * ratio:
                score += points
                break

    if len(_LIST_ITEM.findall(text)) > LIST_ITEM_THRESHOLD:
        score += LIST_POINTS

    openers = [words(s)[0] for s in sentences(text) if words(s)]
    if len(openers) >= MIN_SENTENCES_FOR_OPENERS:
        repeated = len(openers) - len(set(openers))
        score += OPENER_POINTS * repeated / (len(openers) - 1)

    return _clamp(score)


def compute_factors(text: str) -> Factors:
    """All five factors for text. Blank text yields all zeros."""
    if not text or not text.strip():
        return Factors()
    return Factors(
        repetition=score_repetition(text),
        formal_tone=score_formal_tone(text),
        sentence_variety=score_sentence_variety(text),
        vocabulary=score_vocabulary(text),
        structure=score_structure(text),
    )
