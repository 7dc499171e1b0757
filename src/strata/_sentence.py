"""Lightweight regex-based sentence splitter."""

from __future__ import annotations

import re

# Sentence-ending punctuation followed by whitespace or end of text.
# Negative lookbehinds for common abbreviations.
_SENTENCE_END_RE = re.compile(
    r"(?<!\bMr)(?<!\bMrs)(?<!\bDr)(?<!\bMs)(?<!\bSt)(?<!\bJr)(?<!\bSr)"
    r"(?<!\bProf)(?<!\bInc)(?<!\bLtd)(?<!\bCorp)(?<!\bvs)(?<!\betc)"
    r"[.!?]+"
    r"(?=\s|$)"
)


def sentence_spans(text: str, start: int = 0, end: int | None = None) -> list[tuple[int, int]]:
    """Return (start, end) offsets of sentences in ``text[start:end]``.

    Spans exclude surrounding whitespace and keep the terminator. Trailing
    text without a terminator forms a final span.
    """
    if end is None:
        end = len(text)

    spans: list[tuple[int, int]] = []
    cursor = start
    for m in _SENTENCE_END_RE.finditer(text, start, end):
        _append_trimmed(text, cursor, m.end(), spans)
        cursor = m.end()
    _append_trimmed(text, cursor, end, spans)
    return spans


def _append_trimmed(
    text: str, lo: int, hi: int, spans: list[tuple[int, int]]
) -> None:
    while lo < hi and text[lo].isspace():
        lo += 1
    while hi > lo and text[hi - 1].isspace():
        hi -= 1
    if lo < hi:
        spans.append((lo, hi))


def split_sentences(text: str) -> list[str]:
    """Split text into sentences using regex heuristics."""
    return [text[s:e] for s, e in sentence_spans(text)]
