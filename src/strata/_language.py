"""Closed-class word overlap language guess."""

from __future__ import annotations

DEFAULT_LANGUAGE = "en"

# Declaration order is the tie-break order.
LANGUAGE_WORDS: dict[str, frozenset[str]] = {
    "en": frozenset({
        "the", "is", "are", "was", "have", "has",
        "will", "would", "could", "should",
    }),
    "es": frozenset({
        "el", "la", "los", "las", "es", "son", "fue", "tiene", "está",
    }),
    "fr": frozenset({
        "le", "la", "les", "est", "sont", "était", "avoir", "être",
    }),
    "de": frozenset({
        "der", "die", "das", "ist", "sind", "war", "haben", "werden",
    }),
    "pt": frozenset({
        "o", "a", "os", "as", "é", "são", "foi", "tem", "está",
    }),
}


def detect_language(text: str) -> str:
    """Return the code whose word list matches the most tokens.

    Ties go to the earlier language in LANGUAGE_WORDS; no matches at all
    returns English.
    """
    tallies = dict.fromkeys(LANGUAGE_WORDS, 0)
    for token in text.lower().split():
        for code, words in LANGUAGE_WORDS.items():
            if token in words:
                tallies[code] += 1

    best, best_score = DEFAULT_LANGUAGE, 0
    for code, score in tallies.items():
        if score > best_score:
            best, best_score = code, score
    return best
