from pathlib import Path

import pytest

from infrastructure.io import SourceUnavailable, load_taxonomy


def test_load_taxonomy(tmp_path: Path, catalog_text: str) -> None:
    path = tmp_path / "taxonomy.txt"
    path.write_text(catalog_text, encoding="utf-8")

    parsed = load_taxonomy(path)
    assert len(parsed.entries) == 12
    assert parsed.version == "2021-09-21"
    assert parsed.entries[0].full_path == "Apparel & Accessories"


def test_missing_file_is_source_unavailable(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"
    with pytest.raises(SourceUnavailable) as excinfo:
        load_taxonomy(missing)

    assert excinfo.value.path == missing
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_undecodable_file_is_source_unavailable(tmp_path: Path) -> None:
    path = tmp_path / "taxonomy.txt"
    path.write_bytes(b"\xff\xfe\xfa broken")
    with pytest.raises(SourceUnavailable):
        load_taxonomy(path)
