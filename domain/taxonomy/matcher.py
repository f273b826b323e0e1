"""Approximate product-type lookup using normalized Levenshtein similarity."""

import math
from collections.abc import Iterable

from rapidfuzz.distance import Levenshtein

from domain.schemas import MatchResult, TaxonomyEntry

DEFAULT_THRESHOLD = 0.3
DEFAULT_LIMIT = 10


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance with unit-cost insertion, deletion and substitution."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """
    Normalized similarity in [0, 1]: ``1 - distance / max(len(a), len(b))``.

    Examples:
        >>> similarity("", "")
        1.0
        >>> similarity("", "x")
        0.0
        >>> similarity("shoe", "shoe")
        1.0
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    if not a or not b:
        return 0.0
    return 1.0 - levenshtein_distance(a, b) / longest


def to_score(sim: float) -> int:
    """Percentage score, rounding halves up (0.875 -> 88, 0.625 -> 63)."""
    return int(math.floor(sim * 100 + 0.5))


def find_similar_products(
    entries: Iterable[TaxonomyEntry],
    query: str,
    *,
    threshold: float = DEFAULT_THRESHOLD,
    limit: int = DEFAULT_LIMIT,
) -> list[MatchResult]:
    """
    Rank entries by similarity between ``query`` and their product type.

    Every call scans all entries; entries without a product type are ignored.
    Only results strictly above ``threshold`` are kept. Ties keep catalog order.

    Args:
        entries: Flat list of taxonomy entries
        query: Free-text product name
        threshold: Minimum (exclusive) similarity to keep a candidate
        limit: Maximum number of results

    Returns:
        Up to ``limit`` MatchResult objects, best first
    """
    query_lower = query.lower()
    matches: list[MatchResult] = []

    for entry in entries:
        if not entry.producttype:
            continue
        sim = similarity(query_lower, entry.producttype.lower())
        if sim > threshold:
            matches.append(MatchResult(item=entry, similarity=sim, score=to_score(sim)))

    matches.sort(key=lambda m: m.similarity, reverse=True)
    return matches[:limit]
