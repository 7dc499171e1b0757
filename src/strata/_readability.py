"""Flesch, Flesch-Kincaid, Gunning Fog, and ARI readability indices."""

from __future__ import annotations

from ._stats import count_sentences
from ._syllables import count_syllables
from ._types import ReadabilityScores

_COMPLEX_SYLLABLES = 3


def calculate_readability(text: str) -> ReadabilityScores:
    """Score text with four standard readability formulas.

    Word and sentence counts follow the statistics rules (whitespace tokens,
    terminator count floored at 1). Every per-word ratio divides by
    ``max(words, 1)`` so empty input still yields finite, clamped scores.
    """
    words = text.split()
    word_count = float(len(words))
    sentence_count = float(count_sentences(text))
    per_word = max(word_count, 1.0)

    syllables = [count_syllables(w) for w in words]
    syllable_count = float(sum(syllables))
    complex_words = float(sum(1 for s in syllables if s >= _COMPLEX_SYLLABLES))
    char_count = float(len(text.encode("utf-8")))

    words_per_sentence = word_count / sentence_count
    syllables_per_word = syllable_count / per_word

    flesch_reading_ease = (
        206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word
    )
    flesch_kincaid_grade = (
        0.39 * words_per_sentence + 11.8 * syllables_per_word - 15.59
    )
    gunning_fog = 0.4 * (words_per_sentence + 100.0 * (complex_words / per_word))
    automated_readability_index = (
        4.71 * (char_count / per_word) + 0.5 * words_per_sentence - 21.43
    )

    return ReadabilityScores(
        flesch_kincaid_grade=max(flesch_kincaid_grade, 0.0),
        flesch_reading_ease=min(max(flesch_reading_ease, 0.0), 100.0),
        gunning_fog=max(gunning_fog, 0.0),
        automated_readability_index=max(automated_readability_index, 0.0),
    )
