"""Whitespace normalization and token-budget chunking."""

from __future__ import annotations

import re

from ._sentence import sentence_spans
from ._types import TextChunk

CHARS_PER_TOKEN = 4

_SPACE_LIKE = str.maketrans({
    "\u00a0": " ",
    "\u2002": " ",
    "\u2003": " ",
    "\u200b": None,
})
_SPACE_RUN_RE = re.compile(r" {2,}")
_NEWLINE_RUN_RE = re.compile(r"\n{3,}")
_PARAGRAPH_RE = re.compile(r"[^\n]+(?:\n(?!\s*\n)[^\n]*)*")


def normalize_text(text: str) -> str:
    """Canonicalize whitespace while keeping paragraph breaks."""
    text = text.translate(_SPACE_LIKE)
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _SPACE_RUN_RE.sub(" ", text)
    text = "\n".join(line.strip() for line in text.split("\n"))
    text = _NEWLINE_RUN_RE.sub("\n\n", text)
    return text.strip()


def estimate_tokens(text: str) -> int:
    """Rough token count: four UTF-8 bytes per token."""
    return len(text.encode("utf-8")) // CHARS_PER_TOKEN


def _paragraph_spans(text: str) -> list[tuple[int, int]]:
    spans = []
    for m in _PARAGRAPH_RE.finditer(text):
        start, end = m.span()
        block = m.group()
        if not block.strip():
            continue
        start += len(block) - len(block.lstrip())
        end -= len(block) - len(block.rstrip())
        spans.append((start, end))
    return spans


def chunk_text(
    text: str,
    max_tokens: int = 4000,
    overlap_tokens: int = 200,
    preserve_paragraphs: bool = True,
) -> list[TextChunk]:
    """Split text into chunks that fit a token budget.

    Every chunk is the exact slice ``text[start_char:end_char]``.
    """
    if not text:
        return []
    max_chars = max(max_tokens, 1) * CHARS_PER_TOKEN
    overlap_chars = min(max(overlap_tokens, 0) * CHARS_PER_TOKEN, max_chars // 2)
    if not preserve_paragraphs:
        return _chunk_fixed(text, max_chars, overlap_chars)
    return _chunk_semantic(text, max_chars, overlap_chars)


def _make_chunk(text: str, index: int, start: int, end: int, whole: bool) -> TextChunk:
    body = text[start:end]
    return TextChunk(
        index=index,
        text=body,
        token_count=len(body) // CHARS_PER_TOKEN,
        start_char=start,
        end_char=end,
        is_complete_paragraph=whole,
    )


def _chunk_fixed(text: str, max_chars: int, overlap_chars: int) -> list[TextChunk]:
    step = max(max_chars - overlap_chars, 1)
    chunks: list[TextChunk] = []
    start = 0
    while start < len(text):
        end = min(start + max_chars, len(text))
        chunks.append(_make_chunk(text, len(chunks), start, end, False))
        if end == len(text):
            break
        start += step
    return chunks


def _chunk_semantic(text: str, max_chars: int, overlap_chars: int) -> list[TextChunk]:
    # Units are whole paragraphs, or sentences of paragraphs over budget.
    units: list[tuple[int, int, bool]] = []
    for p_start, p_end in _paragraph_spans(text):
        if p_end - p_start > max_chars:
            units.extend(
                (s, e, False) for s, e in sentence_spans(text, p_start, p_end)
            )
        else:
            units.append((p_start, p_end, True))

    chunks: list[TextChunk] = []
    cur_start: int | None = None
    cur_end = 0
    cur_whole = True
    for u_start, u_end, whole in units:
        if cur_start is not None and u_end - cur_start > max_chars:
            chunks.append(_make_chunk(text, len(chunks), cur_start, cur_end, cur_whole))
            if overlap_chars:
                cur_start = max(cur_end - overlap_chars, cur_start)
                cur_whole = False
            else:
                cur_start = u_start
                cur_whole = True
        elif cur_start is None:
            cur_start = u_start
        cur_end = u_end
        cur_whole = cur_whole and whole

    if cur_start is not None:
        chunks.append(_make_chunk(text, len(chunks), cur_start, cur_end, cur_whole))
    return chunks
