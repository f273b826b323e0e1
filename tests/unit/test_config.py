from pathlib import Path

import pytest
from pydantic import ValidationError

from infrastructure.config import AppConfig, MatchConfig, load_app_config
from infrastructure.constants import ENV_OUTPUT_DIR, ENV_TAXONOMY_FILE


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENV_TAXONOMY_FILE, raising=False)
    monkeypatch.delenv(ENV_OUTPUT_DIR, raising=False)


def test_defaults_without_settings_file() -> None:
    cfg = load_app_config(None)
    assert cfg == AppConfig()
    assert cfg.match.threshold == 0.3
    assert cfg.match.limit == 10
    assert cfg.taxonomy_file == Path("data/taxonomy.txt")


def test_settings_file_is_loaded(tmp_path: Path) -> None:
    settings = tmp_path / "settings.yaml"
    settings.write_text("taxonomy_file: catalog.txt\nmatch:\n  limit: 5\n", encoding="utf-8")

    cfg = load_app_config(settings)
    assert cfg.taxonomy_file == Path("catalog.txt")
    assert cfg.match.limit == 5
    assert cfg.match.threshold == 0.3


def test_empty_settings_file_uses_defaults(tmp_path: Path) -> None:
    settings = tmp_path / "settings.yaml"
    settings.write_text("", encoding="utf-8")
    assert load_app_config(settings) == AppConfig()


def test_env_overrides_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    settings = tmp_path / "settings.yaml"
    settings.write_text("taxonomy_file: catalog.txt\n", encoding="utf-8")
    monkeypatch.setenv(ENV_TAXONOMY_FILE, "other.txt")
    monkeypatch.setenv(ENV_OUTPUT_DIR, "exports")

    cfg = load_app_config(settings)
    assert cfg.taxonomy_file == Path("other.txt")
    assert cfg.output_dir == Path("exports")


def test_missing_settings_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_app_config(tmp_path / "nope.yaml")


def test_non_mapping_yaml(tmp_path: Path) -> None:
    settings = tmp_path / "settings.yaml"
    settings.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Expected YAML dict"):
        load_app_config(settings)


@pytest.mark.parametrize("kwargs", [{"threshold": 1.0}, {"threshold": -0.1}, {"limit": 0}])
def test_match_config_validation(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        MatchConfig(**kwargs)


def test_malformed_yaml_is_a_value_error(tmp_path: Path) -> None:
    settings = tmp_path / "settings.yaml"
    settings.write_text("match: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_app_config(settings)
