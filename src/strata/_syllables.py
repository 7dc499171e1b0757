"""Vowel-group syllable heuristic."""

from __future__ import annotations

_VOWELS = frozenset("aeiouy")


def count_syllables(word: str) -> int:
    """Count vowel groups in a word, less one for a silent trailing 'e'.

    Punctuation attached to the word is kept, so "make." keeps its 'e'.
    Always returns at least 1.
    """
    word = word.lower()
    count = 0
    prev_vowel = False
    for ch in word:
        is_vowel = ch in _VOWELS
        if is_vowel and not prev_vowel:
            count += 1
        prev_vowel = is_vowel

    if word.endswith("e") and count > 1:
        count -= 1

    return max(count, 1)
