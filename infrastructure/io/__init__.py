"""I/O utilities: filesystem operations, taxonomy source and dataset loading."""

from infrastructure.io.datasets import read_table, write_table
from infrastructure.io.fs import ensure_exists, write_text
from infrastructure.io.taxonomy_source import SourceUnavailable, load_taxonomy, read_taxonomy_source

__all__ = [
    "ensure_exists",
    "write_text",
    "read_table",
    "write_table",
    "SourceUnavailable",
    "read_taxonomy_source",
    "load_taxonomy",
]
