"""Batch matching of a table of free-text product names."""

import logging

import pandas as pd

from application.constants import MATCH_PATH_COL, MATCH_SCORE_COL
from application.session import TaxonomySession

logger = logging.getLogger(__name__)


def detect_product_column(df: pd.DataFrame, column: str) -> str:
    """
    Resolve the product-name column.

    Raises:
        KeyError: If the column is not in the DataFrame
    """
    if column not in df.columns:
        raise KeyError(f"Configured product column='{column}' not found in input columns: {list(df.columns)}")
    return column


def match_table(session: TaxonomySession, df: pd.DataFrame, column: str) -> pd.DataFrame:
    """
    Attach the best taxonomy match to every row.

    Rows with a blank/NaN name, or without any match above the threshold,
    get an empty path and a missing score.

    Args:
        session: Loaded taxonomy session (its match config applies)
        df: Input table
        column: Column holding free-text product names

    Returns:
        Copy of df with MATCH_PATH_COL and MATCH_SCORE_COL appended
    """
    column = detect_product_column(df, column)
    df_out = df.copy()

    paths: list[str] = []
    scores: list[int | None] = []
    for raw in df_out[column]:
        query = "" if pd.isna(raw) else str(raw)
        matches = session.find_matches(query)
        if matches:
            paths.append(matches[0].item.full_path)
            scores.append(matches[0].score)
        else:
            paths.append("")
            scores.append(None)

    df_out[MATCH_PATH_COL] = paths
    df_out[MATCH_SCORE_COL] = pd.array(scores, dtype="Int64")

    matched = sum(1 for p in paths if p)
    logger.info("Batch matching: %d/%d rows matched", matched, len(df_out))
    return df_out
