"""Four-level selection cursor with cascade-clear semantics."""

from enum import Enum

from pydantic import BaseModel

from domain.schemas import TaxonomyEntry
from domain.taxonomy.parser import PATH_SEPARATOR
from domain.taxonomy.tree import TaxonomyTree

DEFAULT_DEEPEST_VALUE = "Product"


class Level(str, Enum):
    """Taxonomy levels, shallowest first."""

    DEPARTMENT = "department"
    CATEGORY = "category"
    SUBCATEGORY = "subcategory"
    PRODUCTTYPE = "producttype"

    @property
    def label(self) -> str:
        return LEVEL_LABELS[self]

    @property
    def depth(self) -> int:
        return LEVELS.index(self)


LEVELS: tuple[Level, ...] = (Level.DEPARTMENT, Level.CATEGORY, Level.SUBCATEGORY, Level.PRODUCTTYPE)

LEVEL_LABELS: dict[Level, str] = {
    Level.DEPARTMENT: "Department",
    Level.CATEGORY: "Category",
    Level.SUBCATEGORY: "Sub-category",
    Level.PRODUCTTYPE: "Product Type",
}


class Selection(BaseModel):
    """The user's current position in the hierarchy. Empty string means unset."""

    department: str = ""
    category: str = ""
    subcategory: str = ""
    producttype: str = ""

    def get(self, level: Level) -> str:
        return getattr(self, level.value)

    def set_level(self, level: Level, value: str) -> None:
        """
        Set one level and clear every deeper level.

        Clearing happens even when ``value`` is empty, so unsetting the
        department resets the whole cursor. Setting the product type clears
        nothing.
        """
        setattr(self, level.value, value)
        for deeper in LEVELS[level.depth + 1 :]:
            setattr(self, deeper.value, "")

    def set_from_entry(self, entry: TaxonomyEntry) -> None:
        """Jump straight to the path of a catalog entry."""
        self.department = entry.department
        self.category = entry.category
        self.subcategory = entry.subcategory
        self.producttype = entry.producttype

    def clear(self) -> None:
        self.set_level(Level.DEPARTMENT, "")

    def path_parts(self) -> list[str]:
        return [value for value in (self.get(level) for level in LEVELS) if value]

    @property
    def path(self) -> str:
        return PATH_SEPARATOR.join(self.path_parts())

    @property
    def is_empty(self) -> bool:
        return not self.path_parts()

    def deepest_value(self, default: str = DEFAULT_DEEPEST_VALUE) -> str:
        parts = self.path_parts()
        return parts[-1] if parts else default


class AvailableLevels(BaseModel):
    """Which levels below the department have children under the current ancestors."""

    category: bool = False
    subcategory: bool = False
    producttype: bool = False

    def is_available(self, level: Level) -> bool:
        if level is Level.DEPARTMENT:
            return True
        return bool(getattr(self, level.value))


def child_levels_available(tree: TaxonomyTree, selection: Selection) -> AvailableLevels:
    """
    Compute which deeper levels exist for the current selection.

    A level is available only if the node for the selected ancestors exists
    and has at least one child at that level.
    """
    levels = AvailableLevels()
    if not selection.department:
        return levels
    dept = tree.department(selection.department)
    if dept is None:
        return levels
    levels.category = bool(dept.categories)

    if not selection.category:
        return levels
    cat = dept.categories.get(selection.category)
    if cat is None:
        return levels
    levels.subcategory = bool(cat.subcategories)

    if not selection.subcategory:
        return levels
    sub = cat.subcategories.get(selection.subcategory)
    if sub is None:
        return levels
    levels.producttype = bool(sub.producttypes)
    return levels


def missing_levels(tree: TaxonomyTree, selection: Selection) -> list[str]:
    """Labels of required-but-unset levels, in hierarchy order."""
    available = child_levels_available(tree, selection)
    return [level.label for level in LEVELS if available.is_available(level) and not selection.get(level)]


def is_selection_complete(tree: TaxonomyTree, selection: Selection) -> bool:
    """Department is always required; deeper levels only when the tree offers them."""
    return not missing_levels(tree, selection)
