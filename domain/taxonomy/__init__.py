"""
Taxonomy core: parsing, tree index, selection cursor and fuzzy matching.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.matcher import find_similar_products, levenshtein_distance, similarity, to_score
from domain.taxonomy.parser import (
    PATH_SEPARATOR,
    extract_taxonomy_version,
    parse_taxonomy_line,
    parse_taxonomy_text,
)
from domain.taxonomy.selection import (
    LEVELS,
    AvailableLevels,
    Level,
    Selection,
    child_levels_available,
    is_selection_complete,
    missing_levels,
)
from domain.taxonomy.tree import TaxonomyTree, build_taxonomy_tree

__all__ = [
    # Parsing
    "PATH_SEPARATOR",
    "parse_taxonomy_line",
    "parse_taxonomy_text",
    "extract_taxonomy_version",
    # Tree
    "TaxonomyTree",
    "build_taxonomy_tree",
    # Selection
    "Level",
    "LEVELS",
    "Selection",
    "AvailableLevels",
    "child_levels_available",
    "is_selection_complete",
    "missing_levels",
    # Matching
    "levenshtein_distance",
    "similarity",
    "to_score",
    "find_similar_products",
]
