"""Application-level constants."""

# Export formats
EXPORT_FORMATS = ("json", "csv")
EXPORT_FILENAME_PREFIX = "style-guide"

# Structured data (schema.org)
SCHEMA_CONTEXT = "https://schema.org/"
SCHEMA_TYPE = "Product"
TAXONOMY_VERSION_PREFIX = "Google Product Taxonomy"

# CSV export header
CSV_FIELD_COL = "Field"
CSV_VALUE_COL = "Value"

# SEO templates
PRODUCT_NAME_PLACEHOLDER = "[Product Name]"
BREADCRUMB_ROOT = "Home"
META_DESCRIPTION_TEMPLATE = (
    "Shop {product} - {deepest}. [Brief description highlighting key features]. "
    "Free shipping available. Browse our {collection} collection."
)

# Batch matching output columns
MATCH_PATH_COL = "matched_path"
MATCH_SCORE_COL = "match_score"
BATCH_OUTPUT_FILENAME = "batch_matches.csv"
