"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for taxonomy entries and match results
- taxonomy: Catalog parsing, tree index, selection cursor, fuzzy matching
"""

from domain.schemas import MatchResult, ParsedTaxonomy, TaxonomyEntry

__all__ = [
    "TaxonomyEntry",
    "MatchResult",
    "ParsedTaxonomy",
]
