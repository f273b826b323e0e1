"""Pydantic models for taxonomy entries and match results."""

from pydantic import BaseModel, ConfigDict, Field


class TaxonomyEntry(BaseModel):
    """One line of the taxonomy catalog."""

    model_config = ConfigDict(frozen=True)

    full_path: str = Field(..., description="The original catalog line, trimmed.")
    parts: list[str] = Field(..., description="Path split on ' > '; usually 1-4 items.")
    level: int = Field(..., description="Number of parts.")
    department: str = ""
    category: str = ""
    subcategory: str = ""
    producttype: str = ""


class MatchResult(BaseModel):
    """A product-type candidate returned by the fuzzy matcher."""

    model_config = ConfigDict(frozen=True)

    item: TaxonomyEntry
    similarity: float = Field(..., ge=0.0, le=1.0)
    score: int = Field(..., ge=0, le=100, description="round(similarity * 100)")


class ParsedTaxonomy(BaseModel):
    """Entries of a catalog plus the version date found in its comments (if any)."""

    entries: list[TaxonomyEntry] = Field(default_factory=list)
    version: str | None = None
