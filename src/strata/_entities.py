"""Pattern-based entity spans (email, URL, date, phone, proper noun)."""

from __future__ import annotations

import re

from ._types import Entity, EntityType

# Evaluation order is the output order.
_PATTERNS: tuple[tuple[EntityType, re.Pattern[str]], ...] = (
    (EntityType.EMAIL, re.compile(
        r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"
    )),
    (EntityType.URL, re.compile(r"https?://[^\s]+")),
    (EntityType.DATE, re.compile(
        r"\b\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4}\b"
        r"|\b\d{4}[/\-]\d{1,2}[/\-]\d{1,2}\b"
    )),
    (EntityType.PHONE, re.compile(
        r"\b\d{3}[-.\s]?\d{3}[-.\s]?\d{4}\b"
        r"|\+\d{1,3}[-.\s]?\d{1,4}[-.\s]?\d{1,4}[-.\s]?\d{1,4}"
    )),
    (EntityType.PROPER_NOUN, re.compile(
        r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)+\b"
    )),
)

_DEMONSTRATIVES: tuple[str, ...] = ("The", "This", "That", "These", "Those")


class _ByteOffsets:
    """Map ascending character offsets of ``text`` to UTF-8 byte offsets."""

    __slots__ = ("_text", "_char", "_byte")

    def __init__(self, text: str) -> None:
        self._text = text
        self._char = 0
        self._byte = 0

    def __call__(self, char_pos: int) -> int:
        if char_pos < self._char:
            self._char = 0
            self._byte = 0
        self._byte += len(self._text[self._char:char_pos].encode("utf-8"))
        self._char = char_pos
        return self._byte


def extract_entities(text: str) -> list[Entity]:
    """Return every pattern match, grouped by category then position.

    Matching is Unicode-aware; ``start_pos``/``end_pos`` are UTF-8 byte
    offsets. Spans from different categories may overlap; nothing is merged.
    """
    entities: list[Entity] = []
    for entity_type, pattern in _PATTERNS:
        to_byte = _ByteOffsets(text)
        for m in pattern.finditer(text):
            span = m.group()
            if (
                entity_type is EntityType.PROPER_NOUN
                and span.startswith(_DEMONSTRATIVES)
            ):
                continue
            entities.append(Entity(
                text=span,
                entity_type=entity_type,
                start_pos=to_byte(m.start()),
                end_pos=to_byte(m.end()),
            ))
    return entities
