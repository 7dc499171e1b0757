"""Analyze: compose the structural components into one TextAnalysis."""

from __future__ import annotations

from ._amt import build_amt
from ._entities import extract_entities as _extract_entities
from ._keywords import extract_keywords
from ._language import detect_language
from ._readability import calculate_readability
from ._stats import calculate_stats
from ._topics import detect_topics
from ._types import TextAnalysis

DEFAULT_KEYWORD_LIMIT = 20
ANALYZE_AMT_DEPTH = 2


def analyze(
    text: str,
    *,
    extract_entities: bool = False,
    extract_topics: bool = False,
    keyword_limit: int = DEFAULT_KEYWORD_LIMIT,
    amt_depth: int | None = ANALYZE_AMT_DEPTH,
) -> TextAnalysis:
    """Run the full structural analysis of ``text``.

    Args:
        text: Raw input text. Any string is valid, including "".
        extract_entities: Include pattern-based entity spans.
        extract_topics: Include closed-vocabulary topic labels.
        keyword_limit: Maximum number of ranked keywords.
        amt_depth: Depth of the meaning tree, or None to skip building it.
    """
    stats = calculate_stats(text)
    return TextAnalysis(
        word_count=stats.word_count,
        sentence_count=stats.sentence_count,
        paragraph_count=stats.paragraph_count,
        char_count=stats.char_count,
        avg_sentence_length=stats.avg_sentence_length,
        avg_word_length=stats.avg_word_length,
        keywords=extract_keywords(text, keyword_limit),
        topics=detect_topics(text) if extract_topics else [],
        entities=_extract_entities(text) if extract_entities else [],
        language=detect_language(text),
        readability=calculate_readability(text),
        amt=build_amt(text, amt_depth) if amt_depth is not None else None,
    )
