from domain.schemas import TaxonomyEntry
from domain.taxonomy import (
    Level,
    Selection,
    build_taxonomy_tree,
    child_levels_available,
    is_selection_complete,
    missing_levels,
    parse_taxonomy_line,
    parse_taxonomy_text,
)

CATALOG = """\
Electronics
Electronics > Phones
Electronics > Phones > Smartphones
Electronics > Phones > Smartphones > Android Phones
Electronics > Phones > Smartphones > iPhones
Electronics > Phones > Landlines
Toys
"""


def _tree():
    return build_taxonomy_tree(parse_taxonomy_text(CATALOG).entries)


def _full() -> Selection:
    return Selection(department="A", category="B", subcategory="C", producttype="D")


def test_setting_department_clears_deeper_levels() -> None:
    s = _full()
    s.set_level(Level.DEPARTMENT, "X")
    assert (s.department, s.category, s.subcategory, s.producttype) == ("X", "", "", "")


def test_setting_category_clears_subcategory_and_product_type() -> None:
    s = _full()
    s.set_level(Level.CATEGORY, "Y")
    assert (s.department, s.category, s.subcategory, s.producttype) == ("A", "Y", "", "")


def test_setting_subcategory_clears_product_type() -> None:
    s = _full()
    s.set_level(Level.SUBCATEGORY, "Z")
    assert (s.department, s.category, s.subcategory, s.producttype) == ("A", "B", "Z", "")


def test_setting_product_type_clears_nothing() -> None:
    s = _full()
    s.set_level(Level.PRODUCTTYPE, "W")
    assert (s.department, s.category, s.subcategory, s.producttype) == ("A", "B", "C", "W")


def test_clearing_department_resets_everything_and_is_incomplete() -> None:
    tree = _tree()
    s = Selection()
    s.set_level(Level.DEPARTMENT, "Electronics")
    s.set_level(Level.CATEGORY, "Phones")
    s.set_level(Level.DEPARTMENT, "")

    assert (s.category, s.subcategory, s.producttype) == ("", "", "")
    assert not is_selection_complete(tree, s)
    assert missing_levels(tree, s) == ["Department"]


def test_available_levels_follow_the_tree() -> None:
    tree = _tree()
    s = Selection(department="Electronics")
    assert child_levels_available(tree, s).model_dump() == {
        "category": True,
        "subcategory": False,
        "producttype": False,
    }

    s.set_level(Level.CATEGORY, "Phones")
    s.set_level(Level.SUBCATEGORY, "Smartphones")
    assert child_levels_available(tree, s).model_dump() == {
        "category": True,
        "subcategory": True,
        "producttype": True,
    }


def test_missing_levels_in_hierarchy_order() -> None:
    tree = _tree()
    s = Selection(department="Electronics")
    assert missing_levels(tree, s) == ["Category"]

    s.set_level(Level.CATEGORY, "Phones")
    assert missing_levels(tree, s) == ["Sub-category"]

    s.set_level(Level.SUBCATEGORY, "Smartphones")
    assert missing_levels(tree, s) == ["Product Type"]

    s.set_level(Level.PRODUCTTYPE, "iPhones")
    assert missing_levels(tree, s) == []
    assert is_selection_complete(tree, s)


def test_leaf_at_shallow_level_is_complete() -> None:
    tree = _tree()
    assert is_selection_complete(tree, Selection(department="Toys"))
    assert is_selection_complete(tree, Selection(department="Electronics", category="Phones", subcategory="Landlines"))


def test_product_type_without_ancestors_is_incomplete() -> None:
    s = Selection(producttype="iPhones")
    assert not is_selection_complete(_tree(), s)
    assert missing_levels(_tree(), s) == ["Department"]


def test_path_helpers() -> None:
    s = Selection(department="Electronics", category="Phones")
    assert s.path == "Electronics > Phones"
    assert s.deepest_value() == "Phones"
    assert Selection().deepest_value() == "Product"
    assert Selection().is_empty


def test_set_from_entry() -> None:
    s = Selection(department="Toys")
    entry: TaxonomyEntry = parse_taxonomy_line("Electronics > Phones > Landlines")
    s.set_from_entry(entry)
    assert (s.department, s.category, s.subcategory, s.producttype) == ("Electronics", "Phones", "Landlines", "")
