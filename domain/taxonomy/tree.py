"""Hierarchical department > category > subcategory > product type index."""

import logging
from collections.abc import Iterable

from pydantic import BaseModel, Field

from domain.schemas import TaxonomyEntry

logger = logging.getLogger(__name__)


class SubcategoryNode(BaseModel):
    producttypes: set[str] = Field(default_factory=set)
    count: int = 0


class CategoryNode(BaseModel):
    subcategories: dict[str, SubcategoryNode] = Field(default_factory=dict)
    count: int = 0


class DepartmentNode(BaseModel):
    categories: dict[str, CategoryNode] = Field(default_factory=dict)
    count: int = 0


class TaxonomyTree(BaseModel):
    """
    Read-only index over all taxonomy entries.

    ``count`` on every node is the number of entries whose path passes through
    it, so duplicate catalog lines inflate counts but not the product-type sets.
    """

    departments: dict[str, DepartmentNode] = Field(default_factory=dict)

    def department(self, department: str) -> DepartmentNode | None:
        return self.departments.get(department)

    def category(self, department: str, category: str) -> CategoryNode | None:
        dept = self.department(department)
        return dept.categories.get(category) if dept is not None else None

    def subcategory(self, department: str, category: str, subcategory: str) -> SubcategoryNode | None:
        cat = self.category(department, category)
        return cat.subcategories.get(subcategory) if cat is not None else None

    def department_names(self) -> list[str]:
        return sorted(self.departments)

    def category_names(self, department: str) -> list[str]:
        dept = self.department(department)
        return sorted(dept.categories) if dept is not None else []

    def subcategory_names(self, department: str, category: str) -> list[str]:
        cat = self.category(department, category)
        return sorted(cat.subcategories) if cat is not None else []

    def product_type_names(self, department: str, category: str, subcategory: str) -> list[str]:
        sub = self.subcategory(department, category, subcategory)
        return sorted(sub.producttypes) if sub is not None else []


def build_taxonomy_tree(entries: Iterable[TaxonomyEntry]) -> TaxonomyTree:
    """
    Fold the flat entry list into a TaxonomyTree in a single forward pass.

    Entries without a department are skipped here; they stay in the flat list
    so the matcher still sees them.
    """
    tree = TaxonomyTree()
    skipped = 0

    for entry in entries:
        if not entry.department:
            skipped += 1
            logger.debug("Skipping entry without department: %r", entry.full_path)
            continue

        dept = tree.departments.setdefault(entry.department, DepartmentNode())
        dept.count += 1
        if not entry.category:
            continue

        cat = dept.categories.setdefault(entry.category, CategoryNode())
        cat.count += 1
        if not entry.subcategory:
            continue

        sub = cat.subcategories.setdefault(entry.subcategory, SubcategoryNode())
        sub.count += 1
        if entry.producttype:
            sub.producttypes.add(entry.producttype)

    logger.info("Taxonomy tree built: %d departments (%d entries skipped)", len(tree.departments), skipped)
    return tree
