"""Parse taxonomy catalog text into entries."""

import re

from domain.schemas import ParsedTaxonomy, TaxonomyEntry

PATH_SEPARATOR = " > "
COMMENT_PREFIX = "#"
VERSION_PATTERN = re.compile(r"# Google_Product_Taxonomy_Version: (\d{4}-\d{2}-\d{2})")


def parse_taxonomy_line(line: str) -> TaxonomyEntry:
    """
    Parse a single catalog line into a TaxonomyEntry.

    Examples:
        >>> entry = parse_taxonomy_line("Toys")
        >>> entry.level, entry.department, entry.category
        (1, 'Toys', '')

    Paths deeper than four levels keep every part in ``parts`` but only the
    first four populate the named fields.
    """
    full_path = line.strip()
    parts = full_path.split(PATH_SEPARATOR)
    named = parts[:4] + [""] * (4 - len(parts[:4]))
    return TaxonomyEntry(
        full_path=full_path,
        parts=parts,
        level=len(parts),
        department=named[0],
        category=named[1],
        subcategory=named[2],
        producttype=named[3],
    )


def is_data_line(line: str) -> bool:
    """Return False for blank lines and comment lines."""
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith(COMMENT_PREFIX)


def extract_taxonomy_version(text: str) -> str | None:
    """Return the YYYY-MM-DD version date from the catalog comments, or None."""
    match = VERSION_PATTERN.search(text)
    return match.group(1) if match else None


def parse_taxonomy_text(text: str) -> ParsedTaxonomy:
    """
    Parse raw catalog text into a ParsedTaxonomy.

    This is a pure function - it does NOT perform file I/O.
    Reading the file happens in infrastructure.io.taxonomy_source.

    Args:
        text: Newline-delimited catalog, one ' > '-separated path per line

    Returns:
        ParsedTaxonomy with entries in source order (duplicates kept)
    """
    entries = [parse_taxonomy_line(line) for line in text.split("\n") if is_data_line(line)]
    return ParsedTaxonomy(entries=entries, version=extract_taxonomy_version(text))
