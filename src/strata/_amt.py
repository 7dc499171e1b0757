"""Abstract Meaning Tree: root -> paragraph -> sentence with sequence links."""

from __future__ import annotations

import itertools
import re

from ._stats import split_paragraphs
from ._types import AMTNode, AMTRelation, NodeType, RelationType

ROOT_PREVIEW_CHARS = 100
PARAGRAPH_PREVIEW_CHARS = 200

_FRAGMENT_RE = re.compile(r"[.!?]")


def _sequence_link(prev_id: int | None) -> list[AMTRelation]:
    if prev_id is None:
        return []
    return [AMTRelation(target_id=prev_id, relation_type=RelationType.SEQUENCE)]


def _sentence_nodes(paragraph: str, ids: itertools.count) -> list[AMTNode]:
    nodes: list[AMTNode] = []
    prev_id: int | None = None
    for fragment in _FRAGMENT_RE.split(paragraph):
        content = fragment.strip()
        if not content:
            continue
        node_id = next(ids)
        nodes.append(AMTNode(
            id=node_id,
            node_type=NodeType.SENTENCE,
            content=content,
            relationships=_sequence_link(prev_id),
        ))
        prev_id = node_id
    return nodes


def build_amt(text: str, depth: int = 3) -> AMTNode:
    """Decompose text into a paragraph/sentence tree.

    ``depth >= 1`` adds paragraph children, ``depth > 1`` adds sentence
    grandchildren. Ids come from a single counter in pre-order, so they are
    unique within the tree. Each non-first sibling links to its predecessor
    with a ``sequence`` relation.
    """
    ids = itertools.count(1)
    root_id = next(ids)

    paragraphs: list[AMTNode] = []
    if depth >= 1:
        prev_id: int | None = None
        for block in split_paragraphs(text):
            para_id = next(ids)
            children = _sentence_nodes(block, ids) if depth > 1 else []
            paragraphs.append(AMTNode(
                id=para_id,
                node_type=NodeType.PARAGRAPH,
                content=block[:PARAGRAPH_PREVIEW_CHARS],
                children=children,
                relationships=_sequence_link(prev_id),
            ))
            prev_id = para_id

    return AMTNode(
        id=root_id,
        node_type=NodeType.ROOT,
        content=text[:ROOT_PREVIEW_CHARS],
        children=paragraphs,
    )
