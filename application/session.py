"""Explicit session state: taxonomy data, tree index and the selection cursor."""

import logging

from domain.schemas import MatchResult, ParsedTaxonomy, TaxonomyEntry
from domain.taxonomy import (
    LEVELS,
    PATH_SEPARATOR,
    AvailableLevels,
    Level,
    Selection,
    TaxonomyTree,
    build_taxonomy_tree,
    child_levels_available,
    find_similar_products,
    is_selection_complete,
    missing_levels,
)
from infrastructure.config import MatchConfig

logger = logging.getLogger(__name__)


class TaxonomySession:
    """
    Owns everything one wizard session works on.

    Entries and tree are built once and never mutated; only ``selection``
    changes, through ``choose`` / ``select_match``.
    """

    def __init__(
        self,
        *,
        entries: list[TaxonomyEntry],
        tree: TaxonomyTree,
        version: str | None,
        match_cfg: MatchConfig | None = None,
    ) -> None:
        self.entries = entries
        self.tree = tree
        self.version = version
        self.match_cfg = match_cfg or MatchConfig()
        self.selection = Selection()

    @classmethod
    def from_parsed(cls, parsed: ParsedTaxonomy, match_cfg: MatchConfig | None = None) -> "TaxonomySession":
        return cls(
            entries=parsed.entries,
            tree=build_taxonomy_tree(parsed.entries),
            version=parsed.version,
            match_cfg=match_cfg,
        )

    # ---- Browsing ----

    def options(self, level: Level) -> list[tuple[str, int]]:
        """
        Child names (with entry counts) offered at ``level`` for the current ancestors.

        Product types carry no per-item count, so they report 0.
        """
        s = self.selection
        if level is Level.DEPARTMENT:
            return [(name, self.tree.departments[name].count) for name in self.tree.department_names()]
        if level is Level.CATEGORY:
            dept = self.tree.department(s.department)
            if dept is None:
                return []
            return [(name, dept.categories[name].count) for name in self.tree.category_names(s.department)]
        if level is Level.SUBCATEGORY:
            cat = self.tree.category(s.department, s.category)
            if cat is None:
                return []
            return [
                (name, cat.subcategories[name].count)
                for name in self.tree.subcategory_names(s.department, s.category)
            ]
        return [(name, 0) for name in self.tree.product_type_names(s.department, s.category, s.subcategory)]

    def choose(self, level: Level, value: str) -> None:
        """
        Select ``value`` at ``level`` and cascade-clear deeper levels.

        An empty value unsets the level. Non-empty values must be one of
        ``options(level)``.

        Raises:
            ValueError: If value is not offered under the current ancestors
        """
        if value:
            valid = [name for name, _ in self.options(level)]
            if value not in valid:
                raise ValueError(f"Unknown {level.label} {value!r}. Available: {valid}")
        self.selection.set_level(level, value)
        logger.debug("Selection changed: %s=%r -> %s", level.value, value, self.breadcrumb)

    def choose_path(self, path: str) -> None:
        """Apply a ' > '-separated path level by level, starting from an empty cursor."""
        self.selection.clear()
        parts = [p for p in path.strip().split(PATH_SEPARATOR) if p]
        if len(parts) > len(LEVELS):
            raise ValueError(f"Path has {len(parts)} levels; at most {len(LEVELS)} are supported: {path!r}")
        for level, value in zip(LEVELS, parts):
            self.choose(level, value)

    # ---- Matching ----

    def find_matches(self, query: str) -> list[MatchResult]:
        query = query.strip()
        if not query:
            return []
        matches = find_similar_products(
            self.entries,
            query,
            threshold=self.match_cfg.threshold,
            limit=self.match_cfg.limit,
        )
        logger.info("Query %r matched %d product types", query, len(matches))
        return matches

    def select_match(self, full_path: str) -> TaxonomyEntry:
        """
        Jump the cursor to the first entry whose full path equals ``full_path``.

        Raises:
            KeyError: If no entry has that path
        """
        for entry in self.entries:
            if entry.full_path == full_path:
                self.selection.set_from_entry(entry)
                return entry
        raise KeyError(f"No taxonomy entry with path {full_path!r}")

    # ---- Completeness ----

    @property
    def available_levels(self) -> AvailableLevels:
        return child_levels_available(self.tree, self.selection)

    @property
    def is_complete(self) -> bool:
        return is_selection_complete(self.tree, self.selection)

    @property
    def missing_levels(self) -> list[str]:
        return missing_levels(self.tree, self.selection)

    @property
    def breadcrumb(self) -> str:
        return self.selection.path or "No selection made"
