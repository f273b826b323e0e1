"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Taxonomy catalog and tabular dataset files
- Configuration loading (YAML, environment)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import AppConfig, MatchConfig, load_app_config
from infrastructure.io import SourceUnavailable, load_taxonomy

__all__ = [
    # Taxonomy source
    "load_taxonomy",
    "SourceUnavailable",
    # Configuration
    "load_app_config",
    "AppConfig",
    "MatchConfig",
]
