"""Strata: deterministic structural text analysis.

Turns raw text into statistics, keyword scores, readability indices,
pattern-based entities, heuristic language/topic labels, and an Abstract
Meaning Tree of its paragraph/sentence structure.
"""

from __future__ import annotations

from ._amt import build_amt
from ._engine import analyze
from ._entities import extract_entities
from ._errors import (
    StrataChecksumError,
    StrataError,
    StrataRequestError,
    StrataStoreError,
)
from ._keywords import extract_keywords
from ._language import detect_language
from ._normalize import chunk_text, estimate_tokens, normalize_text
from ._pipeline import execute
from ._protocol import (
    decode_request,
    encode_response,
    parse_request,
    response_to_dict,
    to_dict,
)
from ._readability import calculate_readability
from ._sentence import split_sentences
from ._stats import calculate_stats, split_paragraphs
from ._stop_words import STOP_WORDS
from ._store import ContainerStore
from ._syllables import count_syllables
from ._topics import TOPIC_KEYWORDS, detect_topics
from ._types import (
    AMTNode,
    AMTRelation,
    AnalysisResponse,
    Entity,
    EntityType,
    KeywordScore,
    NodeType,
    ReadabilityScores,
    RelationType,
    SimilarDocument,
    TextAnalysis,
    TextChunk,
    TextStats,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AMTNode",
    "AMTRelation",
    "AnalysisResponse",
    "ContainerStore",
    "Entity",
    "EntityType",
    "KeywordScore",
    "NodeType",
    "ReadabilityScores",
    "RelationType",
    "SimilarDocument",
    "STOP_WORDS",
    "StrataChecksumError",
    "StrataError",
    "StrataRequestError",
    "StrataStoreError",
    "TextAnalysis",
    "TextChunk",
    "TextStats",
    "TOPIC_KEYWORDS",
    "analyze",
    "build_amt",
    "calculate_readability",
    "calculate_stats",
    "chunk_text",
    "count_syllables",
    "decode_request",
    "detect_language",
    "detect_topics",
    "encode_response",
    "estimate_tokens",
    "execute",
    "extract_entities",
    "extract_keywords",
    "normalize_text",
    "parse_request",
    "response_to_dict",
    "split_paragraphs",
    "split_sentences",
    "to_dict",
]
