"""
Configuration management: models, loading, and validation.

Handles:
- AppConfig: Main application configuration
- Matcher and listing-validation tuning
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_app_config
from infrastructure.config.models import AppConfig, MatchConfig, ValidationConfig

__all__ = [
    # Main config (most commonly used)
    "AppConfig",
    "load_app_config",
    # Sub-configs
    "MatchConfig",
    "ValidationConfig",
]
