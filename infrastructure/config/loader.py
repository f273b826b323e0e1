"""Configuration loading from YAML files."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import AppConfig
from infrastructure.constants import ENV_OUTPUT_DIR, ENV_TAXONOMY_FILE

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Environment variables (typically from .env) win over settings.yaml."""
    out = dict(data)
    taxonomy_file = os.environ.get(ENV_TAXONOMY_FILE)
    if taxonomy_file:
        out["taxonomy_file"] = taxonomy_file
    output_dir = os.environ.get(ENV_OUTPUT_DIR)
    if output_dir:
        out["output_dir"] = output_dir
    return out


def load_app_config(settings_path: Path | None = None) -> AppConfig:
    """
    Load settings.yaml (if given) and construct a fully-resolved AppConfig.

    Args:
        settings_path: Optional path to settings YAML; defaults are used when None

    Returns:
        AppConfig

    Raises:
        FileNotFoundError: If settings_path is given but missing
        ValueError: If the YAML is not a mapping or fails validation
    """
    data: dict[str, Any] = _load_yaml(settings_path) if settings_path is not None else {}
    data = _apply_env_overrides(data)

    cfg = AppConfig(**data)
    logger.debug(
        "Config resolved (taxonomy_file=%s, output_dir=%s, threshold=%.2f, limit=%d)",
        cfg.taxonomy_file,
        cfg.output_dir,
        cfg.match.threshold,
        cfg.match.limit,
    )
    return cfg
