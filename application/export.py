"""Structured data, JSON and CSV export of the current selection."""

import csv
import json
import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pandas as pd

from application.constants import (
    CSV_FIELD_COL,
    CSV_VALUE_COL,
    EXPORT_FILENAME_PREFIX,
    EXPORT_FORMATS,
    PRODUCT_NAME_PLACEHOLDER,
    SCHEMA_CONTEXT,
    SCHEMA_TYPE,
    TAXONOMY_VERSION_PREFIX,
)
from application.style_guide import path_keywords
from domain.taxonomy import Selection
from infrastructure.io import write_text

logger = logging.getLogger(__name__)


def _iso_utc(dt: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a trailing Z."""
    utc = dt.astimezone(timezone.utc)
    return f"{utc:%Y-%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z"


def structured_data(selection: Selection, *, version: str, generated: datetime | None = None) -> dict[str, Any]:
    """
    Build the schema.org-style document exported for a selection.

    The title format falls back from product type to subcategory to category
    (never to the department).
    """
    path = selection.path
    title_target = selection.producttype or selection.subcategory or selection.category
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": SCHEMA_TYPE,
        "category": path,
        "taxonomyVersion": f"{TAXONOMY_VERSION_PREFIX} {version}",
        "classification": {
            "department": selection.department,
            "category": selection.category,
            "subcategory": selection.subcategory,
            "productType": selection.producttype,
        },
        "seoRecommendations": {
            "primaryKeywords": path_keywords(path),
            "titleFormat": f"{PRODUCT_NAME_PLACEHOLDER} - {title_target}",
            "breadcrumbPath": path,
        },
        "generatedDate": _iso_utc(generated or datetime.now(timezone.utc)),
    }


def to_json(data: dict[str, Any]) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def to_csv(data: dict[str, Any]) -> str:
    """Render the fixed Field,Value table; every cell is quoted, no trailing newline."""
    classification = data["classification"]
    seo = data["seoRecommendations"]
    rows = [
        ("Department", classification.get("department") or ""),
        ("Category", classification.get("category") or ""),
        ("Subcategory", classification.get("subcategory") or ""),
        ("Product Type", classification.get("productType") or ""),
        ("Full Path", data["category"]),
        ("Primary Keywords", seo["primaryKeywords"]),
        ("Title Format", seo["titleFormat"]),
        ("Generated Date", data["generatedDate"]),
    ]
    df = pd.DataFrame(rows, columns=[CSV_FIELD_COL, CSV_VALUE_COL])
    return df.to_csv(index=False, quoting=csv.QUOTE_ALL, lineterminator="\n").rstrip("\n")


def write_export(
    data: dict[str, Any],
    fmt: str,
    output_dir: Path,
    *,
    timestamp_ms: int | None = None,
) -> Path:
    """
    Write ``data`` as style-guide-<epoch ms>.<fmt> under output_dir.

    Raises:
        ValueError: If fmt is not one of EXPORT_FORMATS
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt!r}. Supported formats: {', '.join(EXPORT_FORMATS)}")

    stamp = timestamp_ms if timestamp_ms is not None else int(time.time() * 1000)
    path = output_dir / f"{EXPORT_FILENAME_PREFIX}-{stamp}.{fmt}"
    content = to_json(data) if fmt == "json" else to_csv(data)
    write_text(path, content)

    logger.info("Saved %s export: %s", fmt.upper(), path)
    return path
