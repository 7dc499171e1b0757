"""Closed-class English words excluded from keyword scoring."""

STOP_WORDS: frozenset[str] = frozenset({
    # Articles and conjunctions
    "the", "a", "an", "and", "or", "but",
    # Prepositions
    "in", "on", "at", "to", "for", "of", "with", "by", "from", "as",
    # Be/have/do forms
    "is", "was", "are", "were", "been", "be",
    "have", "has", "had", "do", "does", "did",
    # Modals
    "will", "would", "could", "should", "may", "might", "must",
    "shall", "can", "need",
    # Demonstratives
    "this", "that", "these", "those",
    # Pronouns and possessives
    "i", "you", "he", "she", "it", "we", "they",
    "what", "which", "who", "whom",
    "its", "his", "her", "their", "my", "your", "our",
})
