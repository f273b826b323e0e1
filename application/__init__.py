"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between the taxonomy core and infrastructure,
implementing the wizard session, style guide, exports and listing checks.
"""

from application.batching import match_table
from application.export import structured_data, to_csv, to_json, write_export
from application.session import TaxonomySession
from application.style_guide import StyleGuide, build_style_guide, path_keywords, render_style_guide
from application.validation import ProductData, ValidationResult, suggest_attributes, validate_product

__all__ = [
    # Session
    "TaxonomySession",
    # Style guide
    "StyleGuide",
    "build_style_guide",
    "render_style_guide",
    "path_keywords",
    # Export
    "structured_data",
    "to_json",
    "to_csv",
    "write_export",
    # Listing validation
    "ProductData",
    "ValidationResult",
    "validate_product",
    "suggest_attributes",
    # Batch
    "match_table",
]
