"""Request dispatcher: one tagged request in, one AnalysisResponse out."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from ._amt import build_amt
from ._engine import DEFAULT_KEYWORD_LIMIT, analyze
from ._entities import extract_entities
from ._errors import StrataChecksumError, StrataRequestError, StrataStoreError
from ._keywords import extract_keywords
from ._language import detect_language
from ._normalize import chunk_text, estimate_tokens, normalize_text
from ._protocol import (
    AnalyzeDocumentRequest,
    AnalyzeRequest,
    BuildAMTRequest,
    CalculateReadabilityRequest,
    CalculateStatsRequest,
    ChunkTextRequest,
    DetectLanguageRequest,
    ExtractBasicEntitiesRequest,
    ExtractKeywordsRequest,
    FindSimilarRequest,
    NormalizeRequest,
    Request,
    StoreAnalysisRequest,
    parse_request,
    to_dict,
)
from ._readability import calculate_readability
from ._stats import calculate_stats
from ._store import ContainerStore
from ._topics import detect_topics
from ._types import AnalysisResponse, TextAnalysis

logger = logging.getLogger(__name__)

BUILD_AMT_DEPTH = 3
SIMILAR_LIMIT = 10
SIMILAR_QUERY_KEYWORDS = 10
NORMALIZE_CONTEXT_LIMIT = 100_000
NORMALIZE_KEYWORD_LIMIT = 30
NORMALIZE_CHUNK_OVERLAP = 100
CHUNK_MAX_TOKENS = 4000
CHUNK_OVERLAP_TOKENS = 200


def _ok(**fields: Any) -> AnalysisResponse:
    return AnalysisResponse(success=True, **fields)


def _require_store(store: ContainerStore | None) -> ContainerStore:
    if store is None:
        raise StrataStoreError("No result store configured")
    return store


def _analyze(req: AnalyzeRequest, store: ContainerStore | None) -> AnalysisResponse:
    return _ok(analysis=analyze(
        req.text,
        extract_entities=req.extract_entities,
        extract_topics=req.extract_topics,
    ))


def _extract_keywords(req: ExtractKeywordsRequest, store: ContainerStore | None) -> AnalysisResponse:
    limit = DEFAULT_KEYWORD_LIMIT if req.limit is None else req.limit
    return _ok(analysis=TextAnalysis(keywords=extract_keywords(req.text, limit)))


def _calculate_stats(req: CalculateStatsRequest, store: ContainerStore | None) -> AnalysisResponse:
    stats = calculate_stats(req.text)
    return _ok(analysis=TextAnalysis(
        word_count=stats.word_count,
        sentence_count=stats.sentence_count,
        paragraph_count=stats.paragraph_count,
        char_count=stats.char_count,
        avg_sentence_length=stats.avg_sentence_length,
        avg_word_length=stats.avg_word_length,
    ))


def _detect_language(req: DetectLanguageRequest, store: ContainerStore | None) -> AnalysisResponse:
    return _ok(analysis=TextAnalysis(language=detect_language(req.text)))


def _calculate_readability(
    req: CalculateReadabilityRequest, store: ContainerStore | None
) -> AnalysisResponse:
    return _ok(analysis=TextAnalysis(readability=calculate_readability(req.text)))


def _build_amt(req: BuildAMTRequest, store: ContainerStore | None) -> AnalysisResponse:
    depth = BUILD_AMT_DEPTH if req.depth is None else req.depth
    return _ok(amt=build_amt(req.text, depth))


def _extract_basic_entities(
    req: ExtractBasicEntitiesRequest, store: ContainerStore | None
) -> AnalysisResponse:
    return _ok(analysis=TextAnalysis(entities=extract_entities(req.text)))


def _normalize(req: NormalizeRequest, store: ContainerStore | None) -> AnalysisResponse:
    context_limit = (
        NORMALIZE_CONTEXT_LIMIT if req.context_limit is None else req.context_limit
    )
    normalized = normalize_text(req.text)
    token_count = estimate_tokens(normalized)

    chunks = None
    if token_count > context_limit:
        chunks = chunk_text(
            normalized,
            max_tokens=max(context_limit // 4, 1),
            overlap_tokens=NORMALIZE_CHUNK_OVERLAP,
        )

    analysis = None
    if req.analyze_tokens is not False:
        stats = calculate_stats(normalized)
        analysis = TextAnalysis(
            word_count=stats.word_count,
            sentence_count=stats.sentence_count,
            paragraph_count=stats.paragraph_count,
            char_count=stats.char_count,
            keywords=extract_keywords(normalized, NORMALIZE_KEYWORD_LIMIT),
            topics=detect_topics(normalized),
            language=detect_language(normalized),
        )

    return _ok(
        analysis=analysis,
        normalized_text=normalized,
        token_count=token_count,
        chunks=chunks,
    )


def _chunk_text(req: ChunkTextRequest, store: ContainerStore | None) -> AnalysisResponse:
    chunks = chunk_text(
        req.text,
        max_tokens=CHUNK_MAX_TOKENS if req.max_chunk_tokens is None else req.max_chunk_tokens,
        overlap_tokens=CHUNK_OVERLAP_TOKENS if req.overlap_tokens is None else req.overlap_tokens,
        preserve_paragraphs=req.preserve_paragraphs is not False,
    )
    return _ok(token_count=estimate_tokens(req.text), chunks=chunks)


def _find_similar(req: FindSimilarRequest, store: ContainerStore | None) -> AnalysisResponse:
    store = _require_store(store)
    limit = SIMILAR_LIMIT if req.limit is None else req.limit
    query = [k.keyword for k in extract_keywords(req.text, SIMILAR_QUERY_KEYWORDS)]
    return _ok(similar=store.search(query, limit))


def _analyze_document(req: AnalyzeDocumentRequest, store: ContainerStore | None) -> AnalysisResponse:
    store = _require_store(store)
    try:
        container = store.get(req.document_ref_id)
    except StrataChecksumError as e:
        logger.warning("Document %d is corrupt: %s", req.document_ref_id, e)
        return AnalysisResponse(success=False, error="Document not found")
    except StrataStoreError as e:
        logger.debug("Document %d unavailable: %s", req.document_ref_id, e)
        return AnalysisResponse(success=False, error="Document not found")

    content = container.get("content")
    text = content.get("text") if isinstance(content, dict) else None
    if not isinstance(text, str):
        return AnalysisResponse(success=False, error="Document not found")
    return _analyze(
        AnalyzeRequest(text=text, extract_entities=True, extract_topics=True), store,
    )


def _store_analysis(req: StoreAnalysisRequest, store: ContainerStore | None) -> AnalysisResponse:
    store = _require_store(store)
    content = to_dict(req.analysis)
    if req.project_id is not None:
        content["project_id"] = req.project_id
    container_id = store.write(content, "TextAnalysis")
    return _ok(analysis=req.analysis, container_id=container_id)


_HANDLERS: dict[type, Callable[[Any, ContainerStore | None], AnalysisResponse]] = {
    AnalyzeRequest: _analyze,
    ExtractKeywordsRequest: _extract_keywords,
    CalculateStatsRequest: _calculate_stats,
    DetectLanguageRequest: _detect_language,
    CalculateReadabilityRequest: _calculate_readability,
    BuildAMTRequest: _build_amt,
    ExtractBasicEntitiesRequest: _extract_basic_entities,
    NormalizeRequest: _normalize,
    ChunkTextRequest: _chunk_text,
    FindSimilarRequest: _find_similar,
    AnalyzeDocumentRequest: _analyze_document,
    StoreAnalysisRequest: _store_analysis,
}


def execute(
    request: Request | Mapping[str, Any],
    store: ContainerStore | None = None,
) -> AnalysisResponse:
    """Run one request.

    Malformed requests and store failures come back as
    ``success=False`` responses; the analysis itself never fails.
    """
    try:
        if isinstance(request, Mapping):
            request = parse_request(request)
        handler = _HANDLERS.get(type(request))
        if handler is None:
            raise StrataRequestError(f"Unsupported request: {type(request).__name__}")
        logger.debug("Dispatching %s", type(request).__name__)
        return handler(request, store)
    except StrataRequestError as e:
        logger.warning("Rejected request: %s", e)
        return AnalysisResponse(success=False, error=str(e))
    except StrataStoreError as e:
        logger.warning("Store failure: %s", e)
        return AnalysisResponse(success=False, error=str(e))
