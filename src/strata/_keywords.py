"""Frequency-weighted keyword ranking."""

from __future__ import annotations

import math
import re

from ._stop_words import STOP_WORDS
from ._types import KeywordScore

# Leading/trailing runs of anything that is not a letter or digit.
_EDGE_RE = re.compile(r"^[\W_]+|[\W_]+$")
_MIN_KEYWORD_LEN = 3


def _clean_token(token: str) -> str:
    return _EDGE_RE.sub("", token.lower())


def extract_keywords(text: str, limit: int = 20) -> list[KeywordScore]:
    """Rank content words by ``tf * (1 + ln(freq))``.

    ``tf`` is the word's share of all surviving (non-stop, length >= 3)
    tokens. Equal scores keep first-seen order.
    """
    counts: dict[str, int] = {}
    for token in text.split():
        cleaned = _clean_token(token)
        if len(cleaned) < _MIN_KEYWORD_LEN or cleaned in STOP_WORDS:
            continue
        counts[cleaned] = counts.get(cleaned, 0) + 1

    total = max(sum(counts.values()), 1)
    keywords = [
        KeywordScore(
            keyword=word,
            score=(freq / total) * (1.0 + math.log(freq)),
            frequency=freq,
        )
        for word, freq in counts.items()
    ]
    keywords.sort(key=lambda k: k.score, reverse=True)
    return keywords[:max(limit, 0)]
