"""
FARS Monthly Count Calculations (Functional Core)

Pure functions only. No file I/O, no side effects.
Input/output is DataFrames.

Package Location: src/fars/analysis/counts.py

Shape of the summary:
    Long per-year tables ``[MONTH, year]`` are stacked, counted per
    ``(year, MONTH)`` pair, and spread wide so that rows are months 1..12
    and columns are the distinct years.  A (month, year) pair with no
    accidents is left as NaN, never filled with zero.  Duplicate years are
    not de-duplicated; their rows simply add to the same counts.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import pandas as pd

from ..errors import AggregationError

MONTHS: List[int] = list(range(1, 13))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def combine_years(tables: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Stack per-year ``[MONTH, year]`` tables, skipping ``None`` slots.

    Raises:
        AggregationError: If no table is present.
    """
    present = [t for t in tables if t is not None]
    if not present:
        raise AggregationError("no valid years to summarize")
    return pd.concat(present, ignore_index=True)


def monthly_counts(combined: pd.DataFrame) -> pd.DataFrame:
    """
    Count accidents per ``(year, MONTH)``.

    Args:
        combined: DataFrame with at least ``year`` and ``MONTH`` columns.

    Returns:
        Long DataFrame with columns ``[year, MONTH, n]``.
    """
    return (
        combined.groupby(["year", "MONTH"])
        .size()
        .rename("n")
        .reset_index()
    )


def pivot_monthly(counts: pd.DataFrame) -> pd.DataFrame:
    """
    Spread long ``[year, MONTH, n]`` counts into a month-by-year table.

    Returns:
        DataFrame indexed by ``MONTH`` (exactly 1..12) with one column per
        year (ascending).  Missing combinations are NaN.
    """
    wide = counts.pivot(index="MONTH", columns="year", values="n")
    wide = wide.reindex(index=MONTHS, columns=sorted(wide.columns))
    wide.index.name = "MONTH"
    wide.columns.name = "year"
    return wide


def summarize_tables(tables: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """Combine, count and pivot per-year tables in one step."""
    return pivot_monthly(monthly_counts(combine_years(tables)))
