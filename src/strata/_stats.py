"""Word, sentence, paragraph, and byte counts."""

from __future__ import annotations

import re

from ._types import TextStats

_PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")
_TERMINATORS = frozenset(".!?")


def split_paragraphs(text: str) -> list[str]:
    """Split text into non-blank blocks separated by blank lines."""
    return [p for p in _PARAGRAPH_BREAK_RE.split(text) if p.strip()]


def count_sentences(text: str) -> int:
    """Count sentence terminators, floored at 1."""
    return max(sum(1 for ch in text if ch in _TERMINATORS), 1)


def calculate_stats(text: str) -> TextStats:
    words = text.split()
    word_count = len(words)
    sentence_count = count_sentences(text)
    paragraph_count = max(len(split_paragraphs(text)), 1)

    avg_word_length = 0.0
    if word_count:
        avg_word_length = sum(len(w.encode("utf-8")) for w in words) / word_count

    return TextStats(
        word_count=word_count,
        sentence_count=sentence_count,
        paragraph_count=paragraph_count,
        char_count=len(text.encode("utf-8")),
        avg_sentence_length=word_count / sentence_count,
        avg_word_length=avg_word_length,
    )
