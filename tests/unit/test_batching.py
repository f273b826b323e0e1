from pathlib import Path

import pandas as pd
import pytest

from application.batching import match_table
from application.constants import MATCH_PATH_COL, MATCH_SCORE_COL
from application.session import TaxonomySession
from infrastructure.io import read_table, write_table


def test_match_table(session: TaxonomySession) -> None:
    df = pd.DataFrame({"name": ["sneaker", "zzzzzzzzzzzz", None], "sku": [1, 2, 3]})
    out = match_table(session, df, "name")

    assert list(out.columns) == ["name", "sku", MATCH_PATH_COL, MATCH_SCORE_COL]
    assert out.loc[0, MATCH_PATH_COL] == "Apparel & Accessories > Shoes > Athletic Shoes > Sneakers"
    assert out.loc[0, MATCH_SCORE_COL] == 88
    assert out.loc[1, MATCH_PATH_COL] == ""
    assert pd.isna(out.loc[1, MATCH_SCORE_COL])
    assert pd.isna(out.loc[2, MATCH_SCORE_COL])
    assert MATCH_PATH_COL not in df.columns


def test_match_table_unknown_column(session: TaxonomySession) -> None:
    with pytest.raises(KeyError, match="not found in input columns"):
        match_table(session, pd.DataFrame({"title": ["x"]}), "name")


def test_table_round_trip_through_csv(tmp_path: Path, session: TaxonomySession) -> None:
    src = write_table(pd.DataFrame({"name": ["smartphone"]}), tmp_path / "in.csv")
    out = match_table(session, read_table(src), "name")
    assert out.loc[0, MATCH_PATH_COL].endswith("Smartphones")


def test_read_table_rejects_unknown_suffix(tmp_path: Path) -> None:
    path = tmp_path / "data.txt"
    path.write_text("x", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported file format"):
        read_table(path)
