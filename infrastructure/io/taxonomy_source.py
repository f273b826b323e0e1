"""Read the taxonomy catalog from disk."""

import logging
from pathlib import Path

from domain.schemas import ParsedTaxonomy
from domain.taxonomy.parser import parse_taxonomy_text

logger = logging.getLogger(__name__)


class SourceUnavailable(RuntimeError):
    """The taxonomy catalog could not be read. No partial taxonomy is produced."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to load taxonomy file {path}: {reason}")
        self.path = path
        self.reason = reason


def read_taxonomy_source(path: Path) -> str:
    """
    Read the raw catalog text.

    Raises:
        SourceUnavailable: If the file is missing, unreadable or not UTF-8
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(path, str(e)) from e


def load_taxonomy(path: Path) -> ParsedTaxonomy:
    """
    Load and parse the taxonomy catalog.

    This function handles file I/O, then delegates parsing to domain layer.
    """
    parsed = parse_taxonomy_text(read_taxonomy_source(path))
    logger.info(
        "Loaded %d taxonomy entries from %s (version=%s)",
        len(parsed.entries),
        path,
        parsed.version or "unknown",
    )
    return parsed
