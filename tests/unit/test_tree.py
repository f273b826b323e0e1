from collections import Counter

from domain.taxonomy import build_taxonomy_tree, parse_taxonomy_text
from domain.schemas import TaxonomyEntry

SCENARIO_TEXT = (
    "Apparel & Accessories > Clothing > Shirts\n"
    "Apparel & Accessories > Clothing > Pants\n"
    "# Google_Product_Taxonomy_Version: 2021-09-21"
)


def test_scenario_counts() -> None:
    tree = build_taxonomy_tree(parse_taxonomy_text(SCENARIO_TEXT).entries)

    assert list(tree.departments) == ["Apparel & Accessories"]
    dept = tree.departments["Apparel & Accessories"]
    assert dept.count == 2
    assert list(dept.categories) == ["Clothing"]
    cat = dept.categories["Clothing"]
    assert cat.count == 2
    assert {name: node.count for name, node in cat.subcategories.items()} == {"Shirts": 1, "Pants": 1}


def test_department_count_equals_entries_sharing_department() -> None:
    entries = parse_taxonomy_text(
        "Toys\nElectronics\nElectronics > Audio\nElectronics > Audio > Speakers\nToys > Puzzles\nElectronics\n"
    ).entries
    tree = build_taxonomy_tree(entries)

    expected = Counter(e.department for e in entries)
    assert {name: node.count for name, node in tree.departments.items()} == dict(expected)


def test_duplicate_product_types_inflate_counts_not_sets() -> None:
    entries = parse_taxonomy_text("A > B > C > D\nA > B > C > D\nA > B > C > E\n").entries
    tree = build_taxonomy_tree(entries)

    sub = tree.subcategory("A", "B", "C")
    assert sub is not None
    assert sub.count == 3
    assert sub.producttypes == {"D", "E"}
    assert tree.departments["A"].count == 3


def test_build_is_deterministic() -> None:
    entries = parse_taxonomy_text("A > B > C > D\nX\nA > B\n").entries
    assert build_taxonomy_tree(entries) == build_taxonomy_tree(entries)


def test_entry_without_department_is_skipped() -> None:
    broken = TaxonomyEntry(full_path="", parts=[""], level=1)
    tree = build_taxonomy_tree([broken, *parse_taxonomy_text("Toys").entries])
    assert list(tree.departments) == ["Toys"]


def test_sorted_child_names_and_unknown_ancestors() -> None:
    tree = build_taxonomy_tree(parse_taxonomy_text("Z\nA > Y\nA > B > C > Q\nA > B > C > P\n").entries)

    assert tree.department_names() == ["A", "Z"]
    assert tree.category_names("A") == ["B", "Y"]
    assert tree.product_type_names("A", "B", "C") == ["P", "Q"]
    assert tree.category_names("missing") == []
    assert tree.subcategory_names("A", "missing") == []
    assert tree.subcategory("A", "B", "missing") is None
