"""Product listing validation against the selected taxonomy path."""

import logging
import re
from typing import Any, Literal
from urllib.parse import urlparse

from pydantic import BaseModel, field_validator

from domain.taxonomy import LEVELS, Selection
from infrastructure.config import ValidationConfig

logger = logging.getLogger(__name__)

PRICE_PATTERN = re.compile(r"^\$?\d+\.?\d*$")
IMAGE_EXTENSION_PATTERN = re.compile(r"\.(jpg|jpeg|png|gif|webp)$", re.IGNORECASE)

# Department keyword -> extra required listing fields
REQUIRED_FIELDS_BY_DEPARTMENT: list[tuple[tuple[str, ...], list[str]]] = [
    (("Apparel", "Clothing"), ["material", "color", "size"]),
    (("Electronics",), ["brand"]),
    (("Home", "Furniture"), ["material", "color"]),
]

# Department keyword -> attribute -> standard values
STANDARD_ATTRIBUTES_BY_DEPARTMENT: list[tuple[tuple[str, ...], dict[str, list[str]]]] = [
    (
        ("Apparel", "Clothing"),
        {
            "material": ["Cotton", "Polyester", "Wool", "Silk", "Linen", "Denim", "Leather"],
            "color": ["Black", "White", "Blue", "Red", "Green", "Gray", "Brown", "Navy"],
            "size": ["XS", "S", "M", "L", "XL", "XXL"],
        },
    ),
    (
        ("Electronics",),
        {
            "brand": ["Apple", "Samsung", "Sony", "LG", "HP", "Dell", "Canon", "Nikon"],
            "color": ["Black", "White", "Silver", "Gray", "Blue"],
        },
    ),
]

MAX_SUGGESTIONS = 3

ResultType = Literal["success", "warning", "error"]


class ProductData(BaseModel):
    """Listing fields entered by the user. All values are trimmed."""

    title: str = ""
    description: str = ""
    price: str = ""
    brand: str = ""
    material: str = ""
    color: str = ""
    size: str = ""
    image: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _strip(cls, v: object) -> str:
        return "" if v is None else str(v).strip()


class ValidationResult(BaseModel):
    type: ResultType
    message: str


def has_valid_selection(selection: Selection) -> bool:
    """A department plus at least one deeper level."""
    return bool(selection.department) and bool(
        selection.category or selection.subcategory or selection.producttype
    )


def _match_department(department: str, table: list[tuple[tuple[str, ...], Any]]) -> Any:
    for keywords, value in table:
        if any(k in department for k in keywords):
            return value
    return None


def required_fields(selection: Selection) -> list[str]:
    extra = _match_department(selection.department, REQUIRED_FIELDS_BY_DEPARTMENT) or []
    return ["title", "description", *extra]


def is_valid_image_url(url: str) -> bool:
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        return False
    return bool(IMAGE_EXTENSION_PATTERN.search(url))


def seo_score(selection: Selection, product: ProductData, cfg: ValidationConfig) -> int:
    """
    Score 0-100.

    40 points for selection levels mentioned in title+description,
    30 for content quality, 30 for additional attributes.
    """
    text = f"{product.title} {product.description}".lower()
    score = 0

    for level in LEVELS:
        value = selection.get(level)
        if value and value.lower() in text:
            score += 10

    if cfg.min_title_length <= len(product.title) <= cfg.max_title_length:
        score += 10
    if len(product.description) >= cfg.min_description_length:
        score += 10
    if product.brand:
        score += 10

    for attr in (product.price, product.material, product.color):
        if attr:
            score += 10

    return min(score, 100)


def _seo_result(score: int) -> ValidationResult:
    if score >= 80:
        return ValidationResult(type="success", message=f"SEO Score: {score}% - Excellent optimization")
    if score >= 60:
        return ValidationResult(type="warning", message=f"SEO Score: {score}% - Good but improvable")
    return ValidationResult(type="error", message=f"SEO Score: {score}% - Needs significant improvement")


def _standards_results(product: ProductData, cfg: ValidationConfig) -> list[ValidationResult]:
    results: list[ValidationResult] = []

    if len(product.title) < cfg.min_title_length:
        results.append(
            ValidationResult(
                type="error",
                message=f"Product title too short (minimum {cfg.min_title_length} characters recommended)",
            )
        )
    elif len(product.title) > cfg.max_title_length:
        results.append(
            ValidationResult(
                type="warning",
                message=f"Product title may be too long ({cfg.max_title_length} characters recommended max)",
            )
        )

    if len(product.description) < cfg.min_description_length:
        results.append(
            ValidationResult(
                type="warning",
                message=f"Product description should be more detailed ({cfg.min_description_length}+ characters)",
            )
        )

    if product.price and not PRICE_PATTERN.match(product.price):
        results.append(
            ValidationResult(type="warning", message="Price format should include currency symbol (e.g., $29.99)")
        )

    if product.image and not is_valid_image_url(product.image):
        results.append(ValidationResult(type="warning", message="Product image URL may not be valid"))

    return results


def validate_product(
    selection: Selection,
    product: ProductData,
    cfg: ValidationConfig | None = None,
) -> list[ValidationResult]:
    """
    Check a product listing against its taxonomy selection.

    Returns:
        Results in display order; a single error when no category is selected
    """
    cfg = cfg or ValidationConfig()
    if not has_valid_selection(selection):
        return [ValidationResult(type="error", message="Please select a product category first")]

    results = [ValidationResult(type="success", message=f"Product correctly categorized under: {selection.path}")]
    results.append(_seo_result(seo_score(selection, product, cfg)))
    results.extend(_standards_results(product, cfg))

    missing = [name for name in required_fields(selection) if not getattr(product, name)]
    if missing:
        results.append(ValidationResult(type="warning", message=f"Missing recommended fields: {', '.join(missing)}"))

    logger.debug(
        "Validated listing for %s: %d results (%d errors)",
        selection.path,
        len(results),
        sum(r.type == "error" for r in results),
    )
    return results


def suggest_attributes(selection: Selection, product: ProductData) -> dict[str, list[str]]:
    """Up to three standard values for each attribute the listing leaves empty."""
    if not has_valid_selection(selection):
        return {}
    standards = _match_department(selection.department, STANDARD_ATTRIBUTES_BY_DEPARTMENT) or {}
    return {
        name: values[:MAX_SUGGESTIONS]
        for name, values in standards.items()
        if not getattr(product, name)
    }
