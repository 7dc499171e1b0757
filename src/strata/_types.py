"""Data structures for strata."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EntityType(str, Enum):
    EMAIL = "EMAIL"
    URL = "URL"
    DATE = "DATE"
    PHONE = "PHONE"
    PROPER_NOUN = "PROPER_NOUN"


class NodeType(str, Enum):
    ROOT = "root"
    PARAGRAPH = "paragraph"
    SENTENCE = "sentence"


class RelationType(str, Enum):
    HIERARCHY = "hierarchy"
    SEQUENCE = "sequence"
    PARALLEL = "parallel"
    LINKAGE = "linkage"


@dataclass(slots=True, frozen=True)
class KeywordScore:
    keyword: str
    score: float
    frequency: int


@dataclass(slots=True, frozen=True)
class Entity:
    text: str
    entity_type: EntityType
    start_pos: int   # byte offset, inclusive
    end_pos: int     # byte offset, exclusive


@dataclass(slots=True, frozen=True)
class ReadabilityScores:
    flesch_kincaid_grade: float = 0.0
    flesch_reading_ease: float = 0.0
    gunning_fog: float = 0.0
    automated_readability_index: float = 0.0


@dataclass(slots=True, frozen=True)
class TextStats:
    word_count: int
    sentence_count: int
    paragraph_count: int
    char_count: int        # UTF-8 bytes
    avg_sentence_length: float
    avg_word_length: float


@dataclass(slots=True, frozen=True)
class AMTRelation:
    target_id: int   # non-owning reference to another node in the same tree
    relation_type: RelationType


@dataclass(slots=True, frozen=True)
class AMTNode:
    id: int
    node_type: NodeType
    content: str
    children: list[AMTNode] = field(default_factory=list)
    relationships: list[AMTRelation] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)

    def iter_nodes(self):
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass(slots=True, frozen=True)
class TextAnalysis:
    word_count: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    char_count: int = 0
    avg_sentence_length: float = 0.0
    avg_word_length: float = 0.0
    keywords: list[KeywordScore] = field(default_factory=list)
    topics: list[str] = field(default_factory=list)   # fixed category order
    entities: list[Entity] = field(default_factory=list)
    language: str = "unknown"
    readability: ReadabilityScores = field(default_factory=ReadabilityScores)
    # Filled by an external semantic-analysis layer, never by strata.
    semantic_summary: str | None = None
    sentiment: dict | None = None
    amt: AMTNode | None = None


@dataclass(slots=True, frozen=True)
class TextChunk:
    index: int
    text: str
    token_count: int
    start_char: int
    end_char: int   # exclusive
    is_complete_paragraph: bool


@dataclass(slots=True, frozen=True)
class SimilarDocument:
    container_id: int
    similarity_score: float
    preview: str


@dataclass(slots=True, frozen=True)
class AnalysisResponse:
    success: bool
    analysis: TextAnalysis | None = None
    amt: AMTNode | None = None
    error: str | None = None
    similar: list[SimilarDocument] | None = None
    container_id: int | None = None
    normalized_text: str | None = None
    token_count: int | None = None
    chunks: list[TextChunk] | None = None
