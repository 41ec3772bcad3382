"""Tabular summaries of LEGO set records.

Functions in this module turn the record sequence into a pandas/Dask
DataFrame and build small grouped tables from it, for display or export.

Expectations:
- Input: a Dask DataFrame from `sets_ddf` with columns `name`, `theme`,
  `pieces`, `packaging_type`, `tag_count`
- Outputs: Dask DataFrames with descriptive columns documented on each
  function docstring. Rows whose group key is null are dropped by the
  groupbys; `brickset_pipeline.aggregate.queries` is the null-aware API.
"""
from __future__ import annotations

from typing import Any, Sequence

import pandas as pd
import dask.dataframe as dd

from brickset_pipeline.models import LegoSet

SET_COLUMNS = ["name", "theme", "pieces", "packaging_type", "tag_count"]


# =========================================================
# FRAMES
# =========================================================

def sets_frame(records: Sequence[LegoSet]) -> pd.DataFrame:
    """Return one row per set.

    Args:
        records: LEGO set records.

    Returns:
        pandas DataFrame with columns `name`, `theme`, `pieces`,
        `packaging_type` (enum value or None) and `tag_count`.
    """
    rows = [
        {
            "name": s.name,
            "theme": s.theme,
            "pieces": s.pieces,
            "packaging_type": s.packaging_type.value if s.packaging_type is not None else None,
            "tag_count": len(s.tags) if s.tags is not None else 0,
        }
        for s in records
    ]
    pdf = pd.DataFrame(rows, columns=SET_COLUMNS)
    return pdf.astype({"pieces": "int64", "tag_count": "int64"})


def sets_ddf(records: Sequence[LegoSet], npartitions: int = 1) -> Any:
    """Return the `sets_frame` rows as a Dask DataFrame."""
    return dd.from_pandas(sets_frame(records), npartitions=npartitions)


# =========================================================
# GROUPED TABLES
# =========================================================

def frame_sets_by_theme(ddf: Any) -> Any:
    """Return set counts per theme.

    Args:
        ddf: Dask DataFrame with a `theme` column.

    Returns:
        Dask DataFrame with columns: `theme`, `sets_count`.
    """
    return (
        ddf.groupby("theme")
        .size()
        .reset_index()
        .rename(columns={0: "sets_count"})
    )


def frame_pieces_by_theme(ddf: Any) -> Any:
    """Return piece statistics per theme.

    Args:
        ddf: Dask DataFrame with `theme` and `pieces` columns.

    Returns:
        Dask DataFrame with columns: `theme`, `sets_count`, `avg_pieces`,
        `max_pieces`.
    """
    return (
        ddf.groupby("theme")["pieces"]
        .agg(["count", "mean", "max"])
        .reset_index()
        .rename(columns={"count": "sets_count", "mean": "avg_pieces", "max": "max_pieces"})
    )


def frame_packaging_by_theme(ddf: Any) -> Any:
    """Return set counts per (theme, packaging type).

    Args:
        ddf: Dask DataFrame with `theme` and `packaging_type` columns.

    Returns:
        Dask DataFrame with columns: `theme`, `packaging_type`, `sets_count`.
    """
    df = ddf[ddf["packaging_type"].notnull()]
    return (
        df.groupby(["theme", "packaging_type"])
        .size()
        .reset_index()
        .rename(columns={0: "sets_count"})
    )


def frame_top_sets_by_pieces(ddf: Any, top_n: int = 5) -> Any:
    """Return the N largest sets by piece count.

    Args:
        ddf: Dask DataFrame with `name`, `theme` and `pieces` columns.
        top_n: Number of sets to return (default 5).

    Returns:
        Dask DataFrame with columns: `name`, `theme`, `pieces`.
    """
    return ddf[["name", "theme", "pieces"]].nlargest(top_n, "pieces")
