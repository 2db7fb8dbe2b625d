"""
responder/similarity.py — Heuristic relevance scoring for profile items.

No embeddings and no corpus statistics: profile items are few and short,
so lexical overlap with a little positional weighting ranks them well enough.

    score = phrase bonus + positional word bonus + prefix-match bonus
            ------------------------------------------------------
                      number of query words (len > 2)
"""
import re

PHRASE_WEIGHT = 3.0
POSITION_STEP = 0.1
PREFIX_WEIGHT = 0.5
MIN_WORD_LEN = 3


def advanced_similarity(query: str, text: str, boost: float = 1.0) -> float:
    """
    Score how well a candidate text matches a query. Always >= 0.

    Args:
        query: normalized visitor question
        text: candidate content (project, role, ...)
        boost: per-category multiplier; negative values are treated as 0
    """
    boost = max(boost, 0.0)
    query_lower = query.lower().strip()
    text_lower = text.lower()
    words = [w for w in query_lower.split() if len(w) >= MIN_WORD_LEN]

    score = 0.0
    if query_lower and query_lower in text_lower:
        score += PHRASE_WEIGHT * boost

    # Earlier words in the question carry more weight
    for idx, word in enumerate(words):
        if word in text_lower:
            score += (1 + (len(words) - idx) * POSITION_STEP) * boost

    # Prefix matches catch variations ("automat" -> "automation", "automated")
    for word in words:
        matches = re.findall(rf"\b{re.escape(word)}\w*", text_lower)
        score += len(matches) * PREFIX_WEIGHT * boost

    return score / max(len(words), 1)
