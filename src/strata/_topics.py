"""Closed-vocabulary topic labels via an Aho-Corasick keyword scan."""

from __future__ import annotations

import ahocorasick

# Declaration order is the output order.
TOPIC_KEYWORDS: dict[str, tuple[str, ...]] = {
    "technology": (
        "software", "computer", "app", "digital", "tech", "ai",
        "machine learning",
    ),
    "business": (
        "company", "market", "revenue", "profit", "investment", "startup",
    ),
    "health": (
        "health", "medical", "doctor", "patient", "disease", "treatment",
    ),
    "science": (
        "research", "study", "experiment", "scientist", "discovery", "data",
    ),
    "education": (
        "school", "university", "student", "teacher", "learning", "course",
    ),
    "finance": (
        "money", "bank", "stock", "trading", "investment", "financial",
    ),
    "politics": (
        "government", "election", "vote", "policy", "political", "president",
    ),
    "sports": (
        "game", "team", "player", "score", "championship", "match",
    ),
    "entertainment": (
        "movie", "music", "show", "celebrity", "concert", "entertainment",
    ),
    "travel": (
        "travel", "trip", "vacation", "hotel", "flight", "destination",
    ),
}

_TOPICS: tuple[str, ...] = tuple(TOPIC_KEYWORDS)


def _build_automaton() -> ahocorasick.Automaton:
    # A keyword shared by several topics maps to all of their indices.
    owners: dict[str, list[int]] = {}
    for idx, keywords in enumerate(TOPIC_KEYWORDS.values()):
        for kw in keywords:
            owners.setdefault(kw, []).append(idx)

    ac = ahocorasick.Automaton()
    for kw, topic_ids in owners.items():
        ac.add_word(kw, tuple(topic_ids))
    ac.make_automaton()
    return ac


_AUTOMATON = _build_automaton()


def detect_topics(text: str) -> list[str]:
    """Return every topic with at least one keyword occurring as a substring."""
    hit: set[int] = set()
    for _end, topic_ids in _AUTOMATON.iter(text.lower()):
        hit.update(topic_ids)
        if len(hit) == len(_TOPICS):
            break
    return [topic for idx, topic in enumerate(_TOPICS) if idx in hit]
