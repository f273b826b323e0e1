"""Style guide derivation for a complete taxonomy selection."""

import logging
import re
from datetime import datetime

from pydantic import BaseModel, Field

from application.constants import (
    BREADCRUMB_ROOT,
    META_DESCRIPTION_TEMPLATE,
    PRODUCT_NAME_PLACEHOLDER,
)
from application.session import TaxonomySession
from domain.taxonomy import LEVELS, PATH_SEPARATOR, Selection

logger = logging.getLogger(__name__)


class StyleGuide(BaseModel):
    """Everything the style guide shows for one selection."""

    generated: datetime
    taxonomy_version: str
    total_entries: int
    classification: dict[str, str] = Field(
        default_factory=dict,
        description="Level label -> selected value, only for levels that are set.",
    )
    full_path: str
    title_format: str
    primary_keywords: str
    meta_description: str
    breadcrumb_navigation: str


def path_keywords(path: str) -> str:
    """
    Turn a taxonomy path into a comma-separated keyword string.

    Examples:
        >>> path_keywords("Apparel & Accessories > Clothing")
        'Apparel, Accessories, Clothing'
    """
    return ", ".join(part.strip() for part in re.sub(r"[>&]", ",", path).split(","))


def title_format(selection: Selection) -> str:
    return f"{PRODUCT_NAME_PLACEHOLDER} - {selection.deepest_value()}"


def meta_description(selection: Selection) -> str:
    collection = (selection.category or selection.department).lower()
    return META_DESCRIPTION_TEMPLATE.format(
        product=PRODUCT_NAME_PLACEHOLDER,
        deepest=selection.deepest_value(),
        collection=collection,
    )


def breadcrumb_navigation(selection: Selection) -> str:
    return PATH_SEPARATOR.join([BREADCRUMB_ROOT, *selection.path_parts()])


def build_style_guide(
    session: TaxonomySession,
    *,
    fallback_version: str,
    generated: datetime | None = None,
) -> StyleGuide:
    """
    Build the style guide for the session's current selection.

    Raises:
        ValueError: If the selection is missing a required level
    """
    if not session.is_complete:
        raise ValueError(f"Please select: {', '.join(session.missing_levels)}")

    selection = session.selection
    guide = StyleGuide(
        generated=generated or datetime.now(),
        taxonomy_version=session.version or fallback_version,
        total_entries=len(session.entries),
        classification={level.label: selection.get(level) for level in LEVELS if selection.get(level)},
        full_path=selection.path,
        title_format=title_format(selection),
        primary_keywords=path_keywords(selection.path),
        meta_description=meta_description(selection),
        breadcrumb_navigation=breadcrumb_navigation(selection),
    )
    logger.info("Style guide built for %s", guide.full_path)
    return guide


def render_style_guide(guide: StyleGuide) -> str:
    """Plain-text rendering for the terminal."""
    lines = [
        "Style Guide Overview",
        f"  Generated:          {guide.generated:%Y-%m-%d}",
        f"  Taxonomy Version:   {guide.taxonomy_version}",
        f"  Total Categories:   {guide.total_entries:,}",
        "",
        "Product Classification",
        f"  Full Taxonomy Path: {guide.full_path}",
    ]
    lines.extend(f"  {label + ':':<19} {value}" for label, value in guide.classification.items())
    lines.extend(
        [
            "",
            "SEO Recommendations",
            f"  Title Format:       {guide.title_format}",
            f"  Primary Keywords:   {guide.primary_keywords}",
            f"  Meta Description:   {guide.meta_description}",
            f"  Breadcrumb:         {guide.breadcrumb_navigation}",
        ]
    )
    return "\n".join(lines)
