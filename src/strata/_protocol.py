"""Tagged request decoding and response encoding.

Requests are mappings with an ``action`` tag, e.g.
``{"action": "ExtractKeywords", "text": "...", "limit": 5}``. Responses
and records encode to plain dicts of JSON/msgpack-safe values.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Mapping

from ._errors import StrataRequestError
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
    TextAnalysis,
)


@dataclass(slots=True, frozen=True)
class AnalyzeRequest:
    text: str
    extract_entities: bool = False
    extract_topics: bool = False


@dataclass(slots=True, frozen=True)
class ExtractKeywordsRequest:
    text: str
    limit: int | None = None


@dataclass(slots=True, frozen=True)
class CalculateStatsRequest:
    text: str


@dataclass(slots=True, frozen=True)
class DetectLanguageRequest:
    text: str


@dataclass(slots=True, frozen=True)
class CalculateReadabilityRequest:
    text: str


@dataclass(slots=True, frozen=True)
class BuildAMTRequest:
    text: str
    depth: int | None = None


@dataclass(slots=True, frozen=True)
class ExtractBasicEntitiesRequest:
    text: str


@dataclass(slots=True, frozen=True)
class NormalizeRequest:
    text: str
    context_limit: int | None = None
    analyze_tokens: bool | None = None


@dataclass(slots=True, frozen=True)
class ChunkTextRequest:
    text: str
    max_chunk_tokens: int | None = None
    overlap_tokens: int | None = None
    preserve_paragraphs: bool | None = None


@dataclass(slots=True, frozen=True)
class FindSimilarRequest:
    text: str
    limit: int | None = None


@dataclass(slots=True, frozen=True)
class AnalyzeDocumentRequest:
    document_ref_id: int


@dataclass(slots=True, frozen=True)
class StoreAnalysisRequest:
    analysis: TextAnalysis
    project_id: int | None = None


Request = (
    AnalyzeRequest | ExtractKeywordsRequest | CalculateStatsRequest
    | DetectLanguageRequest | CalculateReadabilityRequest | BuildAMTRequest
    | ExtractBasicEntitiesRequest | NormalizeRequest | ChunkTextRequest
    | FindSimilarRequest | AnalyzeDocumentRequest | StoreAnalysisRequest
)

# action tag -> (request class, {field: (type, required)})
_SCHEMAS: dict[str, tuple[type, dict[str, tuple[type, bool]]]] = {
    "Analyze": (AnalyzeRequest, {
        "text": (str, True),
        "extract_entities": (bool, False),
        "extract_topics": (bool, False),
    }),
    "ExtractKeywords": (ExtractKeywordsRequest, {
        "text": (str, True), "limit": (int, False),
    }),
    "CalculateStats": (CalculateStatsRequest, {"text": (str, True)}),
    "DetectLanguage": (DetectLanguageRequest, {"text": (str, True)}),
    "CalculateReadability": (CalculateReadabilityRequest, {"text": (str, True)}),
    "BuildAMT": (BuildAMTRequest, {"text": (str, True), "depth": (int, False)}),
    "ExtractBasicEntities": (ExtractBasicEntitiesRequest, {"text": (str, True)}),
    "Normalize": (NormalizeRequest, {
        "text": (str, True),
        "context_limit": (int, False),
        "analyze_tokens": (bool, False),
    }),
    "ChunkText": (ChunkTextRequest, {
        "text": (str, True),
        "max_chunk_tokens": (int, False),
        "overlap_tokens": (int, False),
        "preserve_paragraphs": (bool, False),
    }),
    "FindSimilar": (FindSimilarRequest, {
        "text": (str, True), "limit": (int, False),
    }),
    "AnalyzeDocument": (AnalyzeDocumentRequest, {
        "document_ref_id": (int, True),
    }),
    "StoreAnalysis": (StoreAnalysisRequest, {
        "analysis": (dict, True), "project_id": (int, False),
    }),
}

ACTIONS: tuple[str, ...] = tuple(_SCHEMAS)


def _check_field(action: str, name: str, value: Any, expected: type) -> None:
    # bool is an int subclass; keep the two apart.
    if expected is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
        if ok and value < 0:
            raise StrataRequestError(f"{action}.{name} must be non-negative, got {value}")
    else:
        ok = isinstance(value, expected)
    if not ok:
        raise StrataRequestError(
            f"{action}.{name} must be {expected.__name__}, "
            f"got {type(value).__name__}"
        )


def parse_request(data: Mapping[str, Any]) -> Request:
    """Validate a tagged mapping and build the matching request object."""
    if not isinstance(data, Mapping):
        raise StrataRequestError(
            f"Request must be an object, got {type(data).__name__}"
        )
    action = data.get("action")
    if action is None:
        raise StrataRequestError("Request is missing the 'action' tag")
    if not isinstance(action, str) or action not in _SCHEMAS:
        raise StrataRequestError(f"Unknown action: {action!r}")

    cls, schema = _SCHEMAS[action]
    kwargs: dict[str, Any] = {}
    for name, (expected, required) in schema.items():
        value = data.get(name)
        if value is None:
            if required:
                raise StrataRequestError(f"{action} requires field {name!r}")
            continue
        _check_field(action, name, value, expected)
        kwargs[name] = value

    if action == "StoreAnalysis":
        kwargs["analysis"] = analysis_from_dict(kwargs["analysis"])
    return cls(**kwargs)


def decode_request(raw: str | bytes) -> Request:
    """Parse a JSON-encoded request."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise StrataRequestError(f"Parse error: {e}") from e
    return parse_request(data)


# -- Encoding --


def _plain(items: list[tuple[str, Any]]) -> dict[str, Any]:
    return {k: v.value if isinstance(v, Enum) else v for k, v in items}


def to_dict(record: Any) -> dict[str, Any]:
    """Convert any strata record to a dict of plain values."""
    return asdict(record, dict_factory=_plain)


def response_to_dict(response: AnalysisResponse) -> dict[str, Any]:
    """Encode a response; the four envelope keys are always present."""
    out = to_dict(response)
    for key in ("similar", "container_id", "normalized_text", "token_count", "chunks"):
        if out[key] is None:
            del out[key]
    return out


def encode_response(response: AnalysisResponse, indent: int | None = None) -> str:
    return json.dumps(response_to_dict(response), ensure_ascii=False, indent=indent)


# -- Decoding of records --


def amt_from_dict(data: Mapping[str, Any]) -> AMTNode:
    try:
        return AMTNode(
            id=int(data["id"]),
            node_type=NodeType(data["node_type"]),
            content=str(data.get("content", "")),
            children=[amt_from_dict(c) for c in data.get("children") or []],
            relationships=[
                AMTRelation(
                    target_id=int(r["target_id"]),
                    relation_type=RelationType(r["relation_type"]),
                )
                for r in data.get("relationships") or []
            ],
            metadata={str(k): str(v) for k, v in (data.get("metadata") or {}).items()},
        )
    except (KeyError, TypeError, ValueError) as e:
        raise StrataRequestError(f"Invalid AMT node: {e}") from e


def analysis_from_dict(data: Mapping[str, Any]) -> TextAnalysis:
    """Rebuild a TextAnalysis from its encoded form. Missing fields take defaults."""
    try:
        readability = data.get("readability") or {}
        amt = data.get("amt")
        return TextAnalysis(
            word_count=int(data.get("word_count", 0)),
            sentence_count=int(data.get("sentence_count", 0)),
            paragraph_count=int(data.get("paragraph_count", 0)),
            char_count=int(data.get("char_count", 0)),
            avg_sentence_length=float(data.get("avg_sentence_length", 0.0)),
            avg_word_length=float(data.get("avg_word_length", 0.0)),
            keywords=[
                KeywordScore(
                    keyword=str(k["keyword"]),
                    score=float(k["score"]),
                    frequency=int(k["frequency"]),
                )
                for k in data.get("keywords") or []
            ],
            topics=[str(t) for t in data.get("topics") or []],
            entities=[
                Entity(
                    text=str(e["text"]),
                    entity_type=EntityType(e["entity_type"]),
                    start_pos=int(e["start_pos"]),
                    end_pos=int(e["end_pos"]),
                )
                for e in data.get("entities") or []
            ],
            language=str(data.get("language", "unknown")),
            readability=ReadabilityScores(**{
                name: float(readability.get(name, 0.0))
                for name in (
                    "flesch_kincaid_grade", "flesch_reading_ease",
                    "gunning_fog", "automated_readability_index",
                )
            }),
            semantic_summary=data.get("semantic_summary"),
            sentiment=data.get("sentiment"),
            amt=amt_from_dict(amt) if amt is not None else None,
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise StrataRequestError(f"Invalid analysis record: {e}") from e
